from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

import numpy as np

from numerics2d.errors import ConstructionError
from numerics2d.functions.base import Function

if TYPE_CHECKING:
    import numpy.typing as npt


class PolynomialFunction(Function):
    """
    Polynomial given by dense coefficients, lowest degree first.

    ``PolynomialFunction([1.0, 2.0, 3.0])`` is ``1 + 2x + 3x^2``.
    """
    NAME = "Polynomial"

    def __init__(self, coefficients: Sequence[float] | npt.NDArray[np.float64]) -> None:
        """
        Args:
            coefficients: Coefficient of x^i at index i. Copied on construction.

        Raises:
            ConstructionError: If no coefficient is given.
        """
        coefficients = np.array(coefficients, dtype=np.float64).ravel()
        if coefficients.size < 1:
            raise ConstructionError("A polynomial needs at least one coefficient.")
        coefficients.setflags(write=False)
        self._coefficients: npt.NDArray[np.float64] = coefficients

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._coefficients.tolist()!r})"

    def __str__(self) -> str:
        terms = []
        for power in range(self.degree, -1, -1):
            coefficient = float(self._coefficients[power])
            if coefficient == 0.0:
                continue

            sign = "-" if coefficient < 0 else "+"
            magnitude = abs(coefficient)
            if power == 0:
                body = f"{magnitude:g}"
            else:
                body = "" if magnitude == 1.0 else f"{magnitude:g}"
                body += "x" if power == 1 else f"x^{power}"

            if not terms:
                terms.append(body if sign == "+" else f"-{body}")
            else:
                terms.append(f"{sign}{body}")

        return "f(x) := " + ("".join(terms) if terms else "0")

    @property
    def coefficients(self) -> npt.NDArray[np.float64]:
        """Read-only view of the coefficients."""
        return self._coefficients

    @property
    def degree(self) -> int:
        return self._coefficients.size - 1

    def eval(self, x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """Evaluate with Horner's method, highest degree first."""
        result = self._coefficients[-1]
        for coefficient in self._coefficients[-2::-1]:
            result = x * result + coefficient
        return result

    def differentiate(self) -> PolynomialFunction:
        """
        Derivative as a new polynomial of one degree less.

        The derivative of a constant is the zero polynomial ``[0.0]``.
        """
        if self.degree == 0:
            return PolynomialFunction([0.0])

        powers = np.arange(1, self._coefficients.size, dtype=np.float64)
        return PolynomialFunction(powers * self._coefficients[1:])
