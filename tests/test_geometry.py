import numpy as np
import pytest

from curve_sampler.exceptions import Degenerate
from curve_sampler.geometry import orient_normal, rescale, distance


def test_turning_left_selects_left_normal():
    np.testing.assert_allclose(orient_normal([1, 0], [0, 1]), [0, 1])


def test_turning_right_selects_right_normal():
    np.testing.assert_allclose(orient_normal([1, 0], [0, -1]), [0, -1])


def test_orientation_wraps_negative_angle():
    # Tangent pointing -x, acceleration +y: curve turns right
    np.testing.assert_allclose(orient_normal([-1, 0], [0, 1]), [0, 1])
    np.testing.assert_allclose(orient_normal([-1, 0], [0, -1]), [0, -1])


def test_orientation_keeps_tangent_magnitude():
    normal = orient_normal([3, 4], [-4, 3])
    np.testing.assert_allclose(normal, [-4, 3])
    assert np.linalg.norm(normal) == pytest.approx(5.0)


def test_straight_motion_uses_left_normal():
    # theta == 0 <= pi
    np.testing.assert_allclose(orient_normal([2, 0], [1, 0]), [0, 2])
    # theta == pi is still the left-hand side
    np.testing.assert_allclose(orient_normal([2, 0], [-1, 0]), [0, 2])


def test_rescale():
    np.testing.assert_allclose(rescale([3, 4], 10), [6, 8])


def test_rescale_zero_vector_raises():
    with pytest.raises(Degenerate):
        rescale([0.0, 0.0], 5)
    with pytest.raises(ZeroDivisionError):
        rescale([0.0, 0.0], 5)


def test_distance():
    assert distance((0, 0), (3, 4)) == pytest.approx(5.0)
