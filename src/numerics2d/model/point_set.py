"""
Ordered Point Collections
=========================
A mutable, insertion-ordered container of `Point` objects shared by all
function types.

Interpolation and range search expect the points sorted by ascending x
without duplicate x values. The set does not enforce this; call `sort()`
(or drive any sort through `less`/`swap`) before building a spline.
"""
from __future__ import annotations

from bisect import bisect_right
from typing import Callable, Iterable, Iterator, Optional, TYPE_CHECKING

import numpy as np

from numerics2d.model.geometry_primitives import Point

if TYPE_CHECKING:
    import numpy.typing as npt
    from numerics2d.functions.cubic_spline import CubicSplineFunction
    from numerics2d.functions.least_squares import LeastSquaresFunction


class PointSet:
    """
    An ordered, growable sequence of points.
    """

    def __init__(self, points: Optional[Iterable[Point]] = None) -> None:
        self._points: list[Point] = list(points) if points is not None else []

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[tuple[float, float]]) -> PointSet:
        """
        Build a set from (x, y) pairs.

        Args:
            coordinates: Iterable of (x, y) pairs, e.g. a list of tuples or an (N, 2) array.

        Returns:
            A new PointSet in the given order.
        """
        return cls(Point(float(x), float(y)) for x, y in coordinates)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._points!r})"

    def __str__(self) -> str:
        return "{" + "".join(str(point) for point in self._points) + "}"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._points):
            raise IndexError(f"Point index {index} out of range for a set of {len(self._points)} points.")

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------
    def append_point(self, x: float, y: float) -> None:
        self._points.append(Point(x, y))

    def append_points(self, other: PointSet) -> None:
        """Append all points of `other`, keeping their order."""
        self._points.extend(other._points)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def at(self, index: int) -> Point:
        self._check_index(index)
        return self._points[index]

    def x_at(self, index: int) -> float:
        return self.at(index).x

    def y_at(self, index: int) -> float:
        return self.at(index).y

    def x_difference(self, index_a: int, index_b: int) -> float:
        """x[index_a] - x[index_b]"""
        return self.at(index_a).x - self.at(index_b).x

    def y_difference(self, index_a: int, index_b: int) -> float:
        """y[index_a] - y[index_b]"""
        return self.at(index_a).y - self.at(index_b).y

    def x_values(self) -> npt.NDArray[np.float64]:
        return np.array([point.x for point in self._points], dtype=np.float64)

    def to_array(self) -> npt.NDArray[np.float64]:
        """Coordinates as an array of shape (n, 2)."""
        return np.array([(point.x, point.y) for point in self._points], dtype=np.float64).reshape(-1, 2)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def x_range(self) -> tuple[float, float]:
        """
        Smallest and largest x value of the set.

        Raises:
            IndexError: If the set is empty.
        """
        if not self._points:
            raise IndexError("Cannot compute the x range of an empty set.")
        min_x = max_x = self._points[0].x
        for point in self._points[1:]:
            if point.x < min_x:
                min_x = point.x
            if point.x > max_x:
                max_x = point.x
        return min_x, max_x

    def x_in_range(self, x: float) -> bool:
        """
        Test whether `x` lies between the smallest and the largest x value.

        The scan is linear and does not assume the set to be sorted.
        """
        if not self._points:
            return False
        min_x, max_x = self.x_range()
        return min_x <= x <= max_x

    def search_next_index(self, x: float) -> int:
        """
        Leftmost index `i` with `x < x_at(i)`, or `len(self)` if there is none.

        Only meaningful for sets sorted by ascending x.
        """
        return bisect_right(self._points, x, key=lambda point: point.x)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def do(self, func: Callable[[Point], object]) -> None:
        """Call `func` once per point, in order."""
        for point in self._points:
            func(point)

    def map(self, func: Callable[[Point], Optional[object]]) -> PointSet:
        """
        Keep every point for which `func` returns something other than None.

        This is a filter: the returned set holds the original points, the
        values produced by `func` are discarded.
        """
        return PointSet(point for point in self._points if func(point) is not None)

    def subset(self, from_index: int, to_index: int) -> PointSet:
        """Copy of the half-open index range [from_index, to_index)."""
        if not 0 <= from_index <= to_index <= len(self._points):
            raise IndexError(
                f"Subset range [{from_index}, {to_index}) out of range for a set of {len(self._points)} points."
            )
        return PointSet(self._points[from_index:to_index])

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------
    def less(self, i: int, j: int) -> bool:
        """True if point i sorts before point j (by x, then y)."""
        return self.at(i) < self.at(j)

    def swap(self, i: int, j: int) -> None:
        self._check_index(i)
        self._check_index(j)
        self._points[i], self._points[j] = self._points[j], self._points[i]

    def sort(self) -> None:
        """Sort in place by ascending x, ties broken by y."""
        self._points.sort()

    # ------------------------------------------------------------------
    # Functions
    # ------------------------------------------------------------------
    def cubic_spline_function(self) -> CubicSplineFunction:
        from numerics2d.functions.cubic_spline import CubicSplineFunction
        return CubicSplineFunction(self)

    def least_squares_function(self) -> LeastSquaresFunction:
        from numerics2d.functions.least_squares import LeastSquaresFunction
        return LeastSquaresFunction(self)
