"""Shared test fixtures."""

import pytest

from curve_sampler import BezierCurve, CurveConfig


@pytest.fixture
def config():
    return CurveConfig(segment_count=1000, tangent_length=10.0, curvature_length=5.0)


@pytest.fixture
def line(config):
    return BezierCurve([(0, 0), (10, 0)], config=config)


@pytest.fixture
def arch(config):
    # Quadratic arch, turning clockwise along its whole length
    return BezierCurve([(0, 0), (5, 10), (10, 0)], config=config)
