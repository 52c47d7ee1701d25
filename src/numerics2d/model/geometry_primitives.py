"""
Geometric Primitives in the 2D Cartesian plane.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A displacement in 2D space representing direction and magnitude.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return add_vectors(self, other)

    def __sub__(self, other: Vector) -> Vector:
        return subtract_vectors(self, other)

    def __mul__(self, scalar: float) -> Vector:
        return scale_vector(self, scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __str__(self) -> str:
        return f"<{self.x:f}, {self.y:f}>"

    @property
    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def is_infinite(self) -> bool:
        return math.isinf(self.x) or math.isinf(self.y)

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(frozen=True, order=True)
class Point:
    """
    A position in 2D space.

    Points compare lexicographically, first by x and then by y.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __str__(self) -> str:
        return f"({self.x:f}, {self.y:f})"

    def is_infinite(self) -> bool:
        """True if either coordinate is infinite."""
        return math.isinf(self.x) or math.isinf(self.y)

    def is_nan(self) -> bool:
        """True if either coordinate is not a number."""
        return math.isnan(self.x) or math.isnan(self.y)

    def distance_to(self, other: Point) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def vector_to(self, other: Point) -> Vector:
        """Displacement leading from this point to `other`."""
        return Vector(other.x - self.x, other.y - self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


def middle_point(a: Point, b: Point) -> Point:
    """Componentwise average of two points."""
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def point_vector(a: Point, b: Point) -> Vector:
    return a.vector_to(b)


def add_vectors(a: Vector, b: Vector) -> Vector:
    return Vector(a.x + b.x, a.y + b.y)


def subtract_vectors(a: Vector, b: Vector) -> Vector:
    return Vector(a.x - b.x, a.y - b.y)


def scale_vector(v: Vector, scalar: float) -> Vector:
    return Vector(v.x * scalar, v.y * scalar)
