"""Shared test fixtures."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

from numerics2d.model.point_set import PointSet


@pytest.fixture
def zigzag_knots() -> PointSet:
    """Knots (0,0), (1,1), (2,0), (3,1)."""
    return PointSet.from_coordinates([(0.0, 0.0), (1.0, 1.0), (2.0, 0.0), (3.0, 1.0)])


@pytest.fixture
def line_points() -> PointSet:
    """Points exactly on y = 2x + 1."""
    return PointSet.from_coordinates([(0.0, 1.0), (1.0, 3.0), (2.0, 5.0), (3.0, 7.0)])
