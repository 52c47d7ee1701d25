from __future__ import annotations

import logging
import math
from typing import Optional, TYPE_CHECKING

from numerics2d.config import DEGENERATE_VARIANCE_THRESHOLD
from numerics2d.functions.base import Function

if TYPE_CHECKING:
    from numerics2d.model.point_set import PointSet

logger = logging.getLogger(__name__)


class LeastSquaresFunction(Function):
    """
    Online simple linear regression y = intercept + slope * x.

    Points are folded into running means and centered sums of squares and
    cross products (one-pass Welford update); the points themselves are not
    stored. The accumulator only grows.

    `slope()` and `eval()` return NaN while the regression is undefined,
    i.e. with fewer than two points or without variation in x.
    """
    NAME = "Least Squares Line"

    def __init__(self, points: Optional[PointSet] = None) -> None:
        self.sum_x = 0.0
        self.sum_y = 0.0
        self.sum_xx = 0.0
        self.sum_yy = 0.0
        self.sum_xy = 0.0
        self.x_bar = 0.0
        self.y_bar = 0.0
        self.count = 0

        if points is not None:
            self.append_points(points)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(count={self.count}, slope={self.slope()}, intercept={self.intercept()})"

    def append_point(self, x: float, y: float) -> None:
        if self.count == 0:
            self.x_bar = x
            self.y_bar = y
        else:
            # Update order matters for the cancellation-free result
            dx = x - self.x_bar
            dy = y - self.y_bar

            self.sum_xx += dx * dx * self.count / (self.count + 1.0)
            self.sum_yy += dy * dy * self.count / (self.count + 1.0)
            self.sum_xy += dx * dy * self.count / (self.count + 1.0)

            self.x_bar += dx / (self.count + 1.0)
            self.y_bar += dy / (self.count + 1.0)

        self.sum_x += x
        self.sum_y += y

        self.count += 1

    def append_points(self, points: PointSet) -> None:
        """Append every point of the set, in set order."""
        points.do(lambda point: self.append_point(point.x, point.y))

    def slope(self) -> float:
        if self.count < 2:
            logger.debug(f"Slope undefined: only {self.count} point(s) appended.")
            return math.nan

        if abs(self.sum_xx) < DEGENERATE_VARIANCE_THRESHOLD:
            logger.debug("Slope undefined: no variation in x.")
            return math.nan

        return self.sum_xy / self.sum_xx

    def intercept(self, slope: Optional[float] = None) -> float:
        """
        Intercept of the line with the given slope through the centroid.

        Args:
            slope: Slope to use, defaults to `slope()`.
        """
        if slope is None:
            slope = self.slope()
        if self.count == 0:
            return math.nan
        return (self.sum_y - slope * self.sum_x) / self.count

    def eval(self, x: float) -> float:
        slope = self.slope()
        return self.intercept(slope) + slope * x
