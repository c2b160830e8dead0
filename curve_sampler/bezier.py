"""
Editable Bézier curve with arc-length sampling and display vectors.
"""

import numbers
import warnings

import numpy as np
from scipy.integrate import quad

from .combinatorics import (
    blend,
    bernstein_basis,
    bernstein_first_derivative,
    bernstein_second_derivative,
)
from .config import CurveConfig
from .constants import DEFAULT_SAMPLE_COUNT
from .exceptions import Degenerate, OutOfRange
from .geometry import EPS, orient_normal, rescale
from .segments import CurveSegment, Sample


def _as_point(point):
    p = np.array(point, dtype=float)
    if p.shape != (2,):
        raise ValueError(f"control point must be (x, y), got shape {p.shape}")
    return p


class BezierCurve:
    """
    Bézier curve over an editable, ordered list of 2D control points.

    Every mutation rebuilds the derived state before returning:
    discretize into config.segment_count straight segments, measure the
    total length, then resample the requested number of points spaced
    evenly by arc length.
    """

    def __init__(self, control_points=None, config=None,
                 sample_count=DEFAULT_SAMPLE_COUNT, verbose=False):
        self.config = config if config is not None else CurveConfig()
        self.verbose = verbose

        self._control_points = np.zeros((0, 2))
        self._segments = []
        self._arc_length = 0.0
        self._samples = []
        self._sample_count = self._validate_sample_count(sample_count)

        if control_points is not None:
            self.set_control_points(control_points)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_control_points(self, points):
        """Replace all control points with an (N+1, 2) array-like."""
        P = np.array(points, dtype=float)
        if P.size == 0:
            P = np.zeros((0, 2))
        if P.ndim != 2 or P.shape[1] != 2:
            raise ValueError("control_points must be (N+1, 2)")
        self._control_points = P
        self.recompute()

    def add_control_point(self, point):
        """Append a control point at the end of the curve."""
        self._control_points = np.vstack([self._control_points, _as_point(point)])
        self.recompute()

    def remove_control_point(self, index):
        self._check_index(index)
        self._control_points = np.delete(self._control_points, index, axis=0)
        self.recompute()

    def move_control_point(self, index, position):
        self._check_index(index)
        self._control_points[index] = _as_point(position)
        self.recompute()

    def clear_control_points(self):
        self._control_points = np.zeros((0, 2))
        self.recompute()

    def set_sample_count(self, count):
        """
        Set the requested number of samples and resample the curve.

        Negative counts are clamped to 0.
        """
        self._sample_count = self._validate_sample_count(count)
        self._resample()

    def _check_index(self, index):
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise TypeError(f"control point index must be an int, got {index!r}")
        if not 0 <= index < len(self._control_points):
            raise OutOfRange(
                f"control point index {index} out of range "
                f"(curve has {len(self._control_points)} control points)")

    @staticmethod
    def _validate_sample_count(count):
        if isinstance(count, bool) or not isinstance(count, numbers.Integral):
            raise TypeError(f"sample count must be an int, got {count!r}")
        if count < 0:
            warnings.warn(f"Negative sample count {count} clamped to 0", RuntimeWarning)
            return 0
        return int(count)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    def recompute(self):
        """Rebuild segments, arc length and samples from the control points."""
        self._discretize()
        self._measure()
        self._resample()

        if self.verbose:
            print(f"Recomputed: degree={self.degree}, segments={len(self._segments)}, "
                  f"length={self._arc_length:.3f}, "
                  f"samples={len(self._samples)}/{self._sample_count}")

    def _discretize(self):
        if len(self._control_points) < 2:
            self._segments = []
            return

        n_seg = self.config.segment_count
        us = np.arange(n_seg + 1) / n_seg
        pts = self.evaluate(us)
        self._segments = [
            CurveSegment(pts[i], pts[i + 1], us[i], us[i + 1])
            for i in range(n_seg)
        ]

    def _measure(self):
        # Coincident control points blend to the same point up to rounding
        if self._segments and not np.ptp(self._control_points, axis=0).any():
            self._arc_length = 0.0
            return
        self._arc_length = float(sum(segment.length() for segment in self._segments))

    def _resample(self):
        """
        Greedy uniform sampling along the segments.

        A sample is emitted at the end of the first segment where the distance
        moved since the previous sample reaches the spacing; the overshoot is
        carried into the next interval.
        """
        self._samples = []
        count = self._sample_count
        if count < 1 or self._arc_length < EPS:
            return

        spacing = self._arc_length / (count + 1)
        moved = 0.0
        travelled = 0.0
        for segment in self._segments:
            length = segment.length()
            moved += length
            travelled += length
            if moved >= spacing:
                self._samples.append(self._make_sample(segment, travelled))
                moved -= spacing
                if len(self._samples) == count:
                    break

    def _make_sample(self, segment, travelled):
        index = len(self._samples)
        try:
            tangent = self.tangent_vector_at(segment.u_end)
        except Degenerate as e:
            warnings.warn(f"Sample {index}: tangent unavailable ({e})", RuntimeWarning)
            tangent = None
        try:
            curvature = self.curvature_vector_at(segment.u_end)
        except Degenerate as e:
            warnings.warn(f"Sample {index}: curvature unavailable ({e})", RuntimeWarning)
            curvature = None
        return Sample(segment, index, travelled, tangent, curvature)

    # ------------------------------------------------------------------
    # Curve queries
    # ------------------------------------------------------------------

    def evaluate(self, u):
        """
        Evaluate curve at parameter u using the Bernstein basis.

        u may be a scalar or an array; values outside [0, 1] extrapolate.
        """
        if len(self._control_points) == 0:
            raise ValueError("curve has no control points")
        return blend(self._control_points, bernstein_basis, u)

    def tangent_at(self, u):
        """First derivative (velocity) at u, not normalized."""
        return blend(self._control_points, bernstein_first_derivative, u)

    def second_derivative_at(self, u):
        """Second derivative (acceleration) at u."""
        return blend(self._control_points, bernstein_second_derivative, u)

    def tangent_vector_at(self, u):
        """
        Tangent display vector at a scalar u.

        Raises:
            Degenerate: if the velocity at u is zero
        """
        return rescale(self.tangent_at(u), self.config.tangent_length)

    def curvature_vector_at(self, u):
        """
        Curvature display vector at a scalar u.

        Normal to the tangent, pointing to the side the curve bends toward.

        Raises:
            Degenerate: if the velocity at u is zero
        """
        normal = orient_normal(self.tangent_at(u), self.second_derivative_at(u))
        return rescale(normal, self.config.curvature_length)

    def exact_arc_length(self):
        """Arc length by numerical integration of |B'(u)| over [0, 1]."""
        if len(self._control_points) < 2:
            return 0.0
        value, _ = quad(lambda u: np.linalg.norm(self.tangent_at(u)), 0.0, 1.0, limit=200)
        return value

    # ------------------------------------------------------------------
    # Display flags
    # ------------------------------------------------------------------

    def show_tangents(self):
        for sample in self._samples:
            sample.tangent_active = True

    def hide_tangents(self):
        for sample in self._samples:
            sample.tangent_active = False

    def show_curvatures(self):
        for sample in self._samples:
            sample.curvature_active = True

    def hide_curvatures(self):
        for sample in self._samples:
            sample.curvature_active = False

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def control_points(self):
        return self._control_points.copy()

    @property
    def degree(self):
        return len(self._control_points) - 1

    @property
    def segments(self):
        return list(self._segments)

    @property
    def samples(self):
        return list(self._samples)

    @property
    def arc_length(self):
        return self._arc_length

    @property
    def sample_count(self):
        """Requested number of samples (may exceed len(samples))."""
        return self._sample_count

    def __len__(self):
        return len(self._control_points)

    def __repr__(self):
        return (f"BezierCurve(degree={self.degree}, control_points={len(self)}, "
                f"length={self._arc_length:.3f}, samples={len(self._samples)})")
