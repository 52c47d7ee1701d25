"""
Natural Cubic Spline
====================
Piecewise cubic interpolation through a set of knots with continuous first
and second derivatives at the interior knots and a vanishing second
derivative at both ends.

Each interval [x_i, x_{i+1}] carries its own cubic in the local variable
t = x - x_i:

    S_i(t) = y_i + b_i * t + c_i * t^2 + d_i * t^3

The second-derivative coefficients c_i solve a tridiagonal system, handled
by one forward elimination sweep (mu, z) and one back substitution.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from numerics2d.config import MIN_SPLINE_KNOTS
from numerics2d.errors import ConstructionError, DomainError
from numerics2d.functions.base import Function
from numerics2d.functions.polynomial import PolynomialFunction

if TYPE_CHECKING:
    from numerics2d.model.point_set import PointSet

logger = logging.getLogger(__name__)


class CubicSplineFunction(Function):
    """
    Natural cubic spline through the points of a PointSet.

    The spline keeps a reference to the set it was built from, without
    copying it. Range checks re-read that set on every evaluation, so it
    must not be modified while the spline is in use.
    """
    NAME = "Natural Cubic Spline"

    def __init__(self, points: PointSet) -> None:
        """
        Args:
            points: Knots sorted by ascending x, without duplicate x values.

        Raises:
            ConstructionError: If fewer than three knots are given.
        """
        if len(points) < MIN_SPLINE_KNOTS:
            raise ConstructionError(
                f"A cubic spline needs at least {MIN_SPLINE_KNOTS} points, got {len(points)}."
            )

        self._points = points
        self._polynomials = self._build_polynomials(points)
        logger.debug(f"Built cubic spline with {len(self._polynomials)} intervals.")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(intervals={len(self._polynomials)})"

    @property
    def points(self) -> PointSet:
        """The knots the spline was built from."""
        return self._points

    @property
    def polynomials(self) -> tuple[PolynomialFunction, ...]:
        """Local cubic of each interval, in the variable x - x_i."""
        return self._polynomials

    @staticmethod
    def _build_polynomials(points: PointSet) -> tuple[PolynomialFunction, ...]:
        n = len(points)
        intervals = n - 1

        # Interval widths
        h = np.array([points.x_difference(i + 1, i) for i in range(intervals)])

        # Forward elimination, natural boundary: mu[0] = z[0] = 0
        mu = np.zeros(intervals)
        z = np.zeros(n)
        for i in range(1, intervals):
            span = points.x_difference(i + 1, i - 1)
            g = 2.0 * span - h[i - 1] * mu[i - 1]
            mu[i] = h[i] / g
            z[i] = (3.0 * (points.y_at(i + 1) * h[i - 1]
                           - points.y_at(i) * span
                           + points.y_at(i - 1) * h[i])
                    / (h[i - 1] * h[i]) - h[i - 1] * z[i - 1]) / g

        # Back substitution, natural boundary: c[n-1] = 0
        b = np.zeros(intervals)
        c = np.zeros(n)
        d = np.zeros(intervals)
        for i in range(intervals - 1, -1, -1):
            c[i] = z[i] - mu[i] * c[i + 1]
            b[i] = points.y_difference(i + 1, i) / h[i] - h[i] * (c[i + 1] + 2.0 * c[i]) / 3.0
            d[i] = (c[i + 1] - c[i]) / (3.0 * h[i])

        return tuple(
            PolynomialFunction([points.y_at(i), b[i], c[i], d[i]])
            for i in range(intervals)
        )

    def interval_index(self, x: float) -> int:
        """
        Index of the interval owning `x`.

        The last knot belongs to the last interval.
        """
        index = self._points.search_next_index(x) - 1
        return min(max(index, 0), len(self._polynomials) - 1)

    def eval(self, x: float) -> float:
        """
        Evaluate the spline.

        Raises:
            BelowRangeError: If `x` is smaller than the first knot.
            AboveRangeError: If `x` is larger than the last knot.
            DomainError: If `x` is not a number.
        """
        if not self._points.x_in_range(x):
            lower, upper = self._points.x_range()
            raise DomainError.for_value(x, lower, upper)

        index = self.interval_index(x)
        return self._polynomials[index].eval(x - self._points.x_at(index))
