"""
Bézier curve sampling engine

This package evaluates a Bézier curve from an editable list of 2D control
points, approximates its length with straight segments, places samples evenly
by arc length and derives tangent and curvature vectors for display.
"""

from .bezier import BezierCurve
from .combinatorics import (
    n_choose_k,
    bernstein_basis,
    bernstein_first_derivative,
    bernstein_second_derivative,
    blend
)
from .config import CurveConfig
from .exceptions import CurveError, OutOfRange, Degenerate
from .geometry import orient_normal, rescale, left_normal, right_normal
from .segments import CurveSegment, Sample
from . import constants

__all__ = [
    # Core classes
    'BezierCurve',
    'CurveSegment',
    'Sample',
    'CurveConfig',

    # Combinatorics
    'n_choose_k',
    'bernstein_basis',
    'bernstein_first_derivative',
    'bernstein_second_derivative',
    'blend',

    # Geometry
    'orient_normal',
    'rescale',
    'left_normal',
    'right_normal',

    # Errors
    'CurveError',
    'OutOfRange',
    'Degenerate',

    # Constants module
    'constants',
]

__version__ = "1.0.0"
