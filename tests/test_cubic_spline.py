"""Tests for numerics2d.functions.cubic_spline."""

from __future__ import annotations

import logging
import math

import numpy as np
import pytest
from scipy.interpolate import CubicSpline

from numerics2d.errors import AboveRangeError, BelowRangeError, ConstructionError, DomainError
from numerics2d.functions.cubic_spline import CubicSplineFunction
from numerics2d.model.point_set import PointSet


@pytest.fixture
def spline(zigzag_knots: PointSet) -> CubicSplineFunction:
    return CubicSplineFunction(zigzag_knots)


class TestConstruction:
    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_too_few_points(self, count: int):
        points = PointSet.from_coordinates([(float(i), 0.0) for i in range(count)])
        with pytest.raises(ConstructionError):
            CubicSplineFunction(points)

    def test_three_points_suffice(self):
        points = PointSet.from_coordinates([(0.0, 0.0), (1.0, 2.0), (2.0, 0.0)])
        spline = CubicSplineFunction(points)
        assert len(spline.polynomials) == 2
        assert spline.eval(1.0) == pytest.approx(2.0)

    def test_one_polynomial_per_interval(self, spline: CubicSplineFunction):
        assert len(spline.polynomials) == 3

    def test_coefficients(self, spline: CubicSplineFunction):
        expected = [
            [0.0, 5.0 / 3.0, 0.0, -2.0 / 3.0],
            [1.0, -1.0 / 3.0, -2.0, 4.0 / 3.0],
            [0.0, -1.0 / 3.0, 2.0, -2.0 / 3.0],
        ]
        for polynomial, coefficients in zip(spline.polynomials, expected):
            np.testing.assert_allclose(polynomial.coefficients, coefficients, atol=1e-12)

    def test_keeps_reference_to_points(self, zigzag_knots: PointSet, spline: CubicSplineFunction):
        assert spline.points is zigzag_knots

    def test_logs_construction(self, zigzag_knots: PointSet, caplog):
        with caplog.at_level(logging.DEBUG, logger="numerics2d"):
            CubicSplineFunction(zigzag_knots)
        assert "3 intervals" in caplog.text


class TestInterpolation:
    @pytest.mark.parametrize("x, y", [(0.0, 0.0), (1.0, 1.0), (2.0, 0.0), (3.0, 1.0)])
    def test_passes_through_knots(self, spline: CubicSplineFunction, x: float, y: float):
        assert spline.eval(x) == pytest.approx(y, abs=1e-12)

    def test_interval_index(self, spline: CubicSplineFunction):
        assert spline.interval_index(0.0) == 0
        assert spline.interval_index(0.5) == 0
        assert spline.interval_index(1.0) == 1
        assert spline.interval_index(2.5) == 2
        assert spline.interval_index(3.0) == 2

    @pytest.mark.parametrize("knot", [1.0, 2.0])
    def test_first_derivative_continuous(self, spline: CubicSplineFunction, knot: float):
        h = 1e-7
        left = (spline.eval(knot) - spline.eval(knot - h)) / h
        right = (spline.eval(knot + h) - spline.eval(knot)) / h
        assert left == pytest.approx(right, abs=1e-6)

    def test_local_derivatives_match_at_interior_knots(self, spline: CubicSplineFunction):
        polynomials = spline.polynomials
        for i in range(len(polynomials) - 1):
            width = spline.points.x_difference(i + 1, i)
            first_left = polynomials[i].differentiate()
            first_right = polynomials[i + 1].differentiate()
            assert first_left.eval(width) == pytest.approx(first_right.eval(0.0), abs=1e-12)
            assert first_left.differentiate().eval(width) == pytest.approx(
                first_right.differentiate().eval(0.0), abs=1e-12
            )

    def test_natural_boundary(self, spline: CubicSplineFunction):
        first = spline.polynomials[0].differentiate().differentiate()
        last = spline.polynomials[-1].differentiate().differentiate()
        assert first.eval(0.0) == pytest.approx(0.0, abs=1e-12)
        assert last.eval(spline.points.x_difference(3, 2)) == pytest.approx(0.0, abs=1e-12)

    def test_matches_scipy_natural_spline(self):
        rng = np.random.default_rng(7)
        xs = np.cumsum(rng.uniform(0.2, 2.0, size=12))
        ys = rng.uniform(-5.0, 5.0, size=12)
        spline = CubicSplineFunction(PointSet.from_coordinates(zip(xs, ys)))
        reference = CubicSpline(xs, ys, bc_type="natural")

        for x in np.linspace(xs[0], xs[-1], 97):
            assert spline.eval(x) == pytest.approx(float(reference(x)), rel=1e-9, abs=1e-9)

    def test_straight_line_is_reproduced(self):
        points = PointSet.from_coordinates([(x, 3.0 * x - 1.0) for x in (0.0, 0.5, 2.0, 3.5, 4.0)])
        spline = CubicSplineFunction(points)
        for x in (0.25, 1.0, 3.0, 3.9):
            assert spline.eval(x) == pytest.approx(3.0 * x - 1.0, abs=1e-12)


class TestDomain:
    def test_below_range(self, spline: CubicSplineFunction):
        with pytest.raises(BelowRangeError) as excinfo:
            spline.eval(-0.5)
        assert excinfo.value.x == -0.5
        assert (excinfo.value.lower, excinfo.value.upper) == (0.0, 3.0)

    def test_above_range(self, spline: CubicSplineFunction):
        with pytest.raises(AboveRangeError):
            spline.eval(3.5)

    def test_domain_errors_share_base(self, spline: CubicSplineFunction):
        with pytest.raises(DomainError):
            spline.eval(-0.5)
        with pytest.raises(ValueError):
            spline.eval(3.5)

    def test_nan_is_plain_domain_error(self, spline: CubicSplineFunction):
        with pytest.raises(DomainError) as excinfo:
            spline.eval(math.nan)
        assert not isinstance(excinfo.value, (BelowRangeError, AboveRangeError))

    def test_eval_point_propagates_domain_error(self, spline: CubicSplineFunction):
        with pytest.raises(AboveRangeError):
            spline.eval_point(4.0)


class TestSampling:
    def test_eval_points(self, spline: CubicSplineFunction):
        samples = spline.eval_points(0.0, 3.0, 6)
        assert [p.x for p in samples] == [0.0, 0.5, 1.0, 1.5, 2.0, 2.5]
        assert samples.y_at(2) == pytest.approx(1.0)
