from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import matplotlib.pyplot as plt

from numerics2d.model.geometry_primitives import Point
from numerics2d.model.point_set import PointSet


# ==========================================
# ABSTRACT CLASS FOR FUNCTIONS
# ==========================================
class Function(ABC):
    """
    Abstract base class for real functions of one variable.

    Subclasses only implement `eval`; point and range sampling are shared.
    """
    NAME: str = "Function"

    @abstractmethod
    def eval(self, x: float) -> float:
        """
        Evaluate the function.

        Args:
            x: Abscissa.

        Returns:
            The function value at `x`.
        """
        pass

    def eval_point(self, x: float) -> Point:
        """Evaluate the function and return the result as a point."""
        return Point(x, self.eval(x))

    def eval_points(self, from_x: float, to_x: float, count: int) -> PointSet:
        """Sample the function over [from_x, to_x), see `eval_points`."""
        return eval_points(self, from_x, to_x, count)

    def plot(self, from_x: float, to_x: float, count: int = 200, title: Optional[str] = None) -> None:
        """
        Plot the function sampled over [from_x, to_x).
        """
        points = self.eval_points(from_x, to_x, count).to_array()

        plt.rcParams["figure.constrained_layout.use"] = True
        plt.figure(figsize=(7, 5))

        plt.plot(points[:, 0], points[:, 1], 'r', lw=2)

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.title(title or self.NAME)
        plt.xlabel("x")
        plt.ylabel("f(x)")

        plt.show()


# ==========================================
# SAMPLING HELPER
# ==========================================
def eval_points(function: Function, from_x: float, to_x: float, count: int) -> PointSet:
    """
    Sample a function at evenly spaced abscissae.

    The step is `(to_x - from_x) / count`. Sampling starts at `from_x` and
    continues while `x < to_x`, so `to_x` itself is never sampled. The step
    is accumulated, which means rounding can make the number of samples
    differ from `count`.

    Args:
        function: Any `Function`.
        from_x: First abscissa.
        to_x: Exclusive upper bound.
        count: Intended number of samples, must be positive.

    Raises:
        ValueError: If `count` is not positive, or the step vanishes next to x.

    Returns:
        A new PointSet holding the samples in ascending x order.
    """
    if count <= 0:
        raise ValueError(f"Sample count must be positive, got {count}.")

    step = (to_x - from_x) / count
    points = PointSet()

    x = from_x
    while x < to_x:
        points.append_point(x, function.eval(x))
        next_x = x + step
        if next_x == x:
            raise ValueError(f"Step {step} is too small to advance from x={x}.")
        x = next_x

    return points
