"""
Vector helpers for display vectors: normal orientation and rescaling.
"""

import numpy as np

from .exceptions import Degenerate


# Magnitudes below this are treated as zero
EPS = 1e-12


def left_normal(v):
    """Rotate v by +90 degrees."""
    return np.array([-v[1], v[0]], dtype=float)


def right_normal(v):
    """Rotate v by -90 degrees."""
    return np.array([v[1], -v[0]], dtype=float)


def orient_normal(tangent, acceleration):
    """
    Pick the normal of the tangent on the side the curve is turning toward.

    theta is the angle from the tangent to the acceleration, wrapped into
    [0, 2π). theta <= π means the acceleration points to the left of the
    direction of travel.

    Args:
        tangent: First derivative at the point
        acceleration: Second derivative at the point

    Returns:
        np.ndarray: (-T.y, T.x) or (T.y, -T.x), not normalized
    """
    theta = (np.arctan2(acceleration[1], acceleration[0])
             - np.arctan2(tangent[1], tangent[0]))
    if theta < 0:
        theta += 2 * np.pi

    if theta <= np.pi:
        return left_normal(tangent)
    return right_normal(tangent)


def rescale(vector, length):
    """
    Scale a vector to the given length.

    Raises:
        Degenerate: if the vector has (numerically) zero magnitude
    """
    v = np.asarray(vector, dtype=float)
    norm = np.linalg.norm(v)
    if norm < EPS:
        raise Degenerate(f"cannot rescale zero-length vector {v.tolist()}")
    return length * v / norm


def distance(p, q):
    """Euclidean distance between two points."""
    return float(np.linalg.norm(np.asarray(q, dtype=float) - np.asarray(p, dtype=float)))
