"""Exception hierarchy for construction and evaluation failures."""
from __future__ import annotations

import math


class NumericsError(Exception):
    """Base class of all errors raised by numerics2d."""


class ConstructionError(NumericsError, ValueError):
    """A function could not be built from the given input."""


class DomainError(NumericsError, ValueError):
    """
    An interpolant was evaluated outside the range it is defined on.

    Attributes:
        x: The requested abscissa.
        lower: Smallest x value of the knots.
        upper: Largest x value of the knots.
    """

    def __init__(self, x: float, lower: float, upper: float, message: str | None = None) -> None:
        if message is None:
            message = f"x={x} is outside the interpolation range [{lower}, {upper}]."
        super().__init__(message)
        self.x = x
        self.lower = lower
        self.upper = upper

    @classmethod
    def for_value(cls, x: float, lower: float, upper: float) -> DomainError:
        """Pick the most specific domain error for `x`."""
        if math.isnan(x):
            return DomainError(x, lower, upper, f"x={x} is not a number.")
        if x < lower:
            return BelowRangeError(x, lower, upper)
        if x > upper:
            return AboveRangeError(x, lower, upper)
        return DomainError(x, lower, upper)


class BelowRangeError(DomainError):
    """x lies below the smallest knot."""


class AboveRangeError(DomainError):
    """x lies above the largest knot."""
