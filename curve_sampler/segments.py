"""
Records derived from a curve: straight segments and arc-length samples.
"""

import numpy as np

from .geometry import distance


class CurveSegment:
    """
    Straight-line piece of the discretized curve between parameters u_start < u_end.
    """

    def __init__(self, start, end, u_start, u_end):
        self.start = np.array(start, dtype=float)
        self.end = np.array(end, dtype=float)
        self.u_start = float(u_start)
        self.u_end = float(u_end)

    def length(self):
        return distance(self.start, self.end)

    def __repr__(self):
        return (f"CurveSegment(start={self.start.tolist()}, end={self.end.tolist()}, "
                f"u_end={self.u_end:.4f})")


class Sample:
    """
    Point on the curve chosen by arc-length spacing.

    The sample sits at the end point of the segment where it was emitted and
    carries the display vectors evaluated at that segment's ending parameter.
    A vector is None when it was degenerate at this point.
    """

    def __init__(self, segment, index, travelled, tangent=None, curvature=None):
        self.position = segment.end.copy()
        self.u = segment.u_end
        self.index = index
        self.distance = float(travelled)
        self.tangent = None if tangent is None else np.array(tangent, dtype=float)
        self.curvature = None if curvature is None else np.array(curvature, dtype=float)
        self.tangent_active = False
        self.curvature_active = False

    def tangent_line(self):
        """
        Endpoints of the tangent line, centred on the sample.

        Returns:
            tuple: (tip, tail) or None if the tangent is unavailable
        """
        if self.tangent is None:
            return None
        return self.position + self.tangent, self.position - self.tangent

    def curvature_line(self):
        """
        Endpoints of the curvature line, from the vector tip back to the sample.

        Returns:
            tuple: (tip, sample position) or None if the curvature is unavailable
        """
        if self.curvature is None:
            return None
        return self.position + self.curvature, self.position.copy()

    def toggle_tangent(self):
        self.tangent_active = not self.tangent_active

    def toggle_curvature(self):
        self.curvature_active = not self.curvature_active

    def __repr__(self):
        x, y = self.position
        return f"Sample(index={self.index}, position=({x:.3f}, {y:.3f}), u={self.u:.4f})"
