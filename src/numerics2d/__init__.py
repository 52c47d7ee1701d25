"""
numerics2d
==========
2D points and vectors, polynomials, natural cubic splines and online
least-squares line fitting.
"""
from numerics2d.errors import (
    AboveRangeError,
    BelowRangeError,
    ConstructionError,
    DomainError,
    NumericsError,
)
from numerics2d.functions.base import Function, eval_points
from numerics2d.functions.cubic_spline import CubicSplineFunction
from numerics2d.functions.least_squares import LeastSquaresFunction
from numerics2d.functions.polynomial import PolynomialFunction
from numerics2d.model.geometry_primitives import (
    Point,
    Vector,
    add_vectors,
    middle_point,
    point_vector,
    scale_vector,
    subtract_vectors,
)
from numerics2d.model.point_set import PointSet

__version__ = "0.1.0"

__all__ = [
    "AboveRangeError",
    "BelowRangeError",
    "ConstructionError",
    "CubicSplineFunction",
    "DomainError",
    "Function",
    "LeastSquaresFunction",
    "NumericsError",
    "Point",
    "PointSet",
    "PolynomialFunction",
    "Vector",
    "add_vectors",
    "eval_points",
    "middle_point",
    "point_vector",
    "scale_vector",
    "subtract_vectors",
]
