"""
Static configuration for a curve model.
"""

from dataclasses import dataclass

from .constants import SEGMENT_COUNT, TANGENT_LENGTH, CURVATURE_LENGTH


# Recognized option names -> CurveConfig field
_OPTION_NAMES = {
    'segmentCount': 'segment_count',
    'tangentDisplayLength': 'tangent_length',
    'curvatureDisplayLength': 'curvature_length',
    'segment_count': 'segment_count',
    'tangent_length': 'tangent_length',
    'curvature_length': 'curvature_length',
}


@dataclass(frozen=True)
class CurveConfig:
    """
    Curve discretization and display settings.

    Args:
        segment_count: Number of straight segments approximating the curve
        tangent_length: Length of tangent display vectors
        curvature_length: Length of curvature display vectors
    """

    segment_count: int = SEGMENT_COUNT
    tangent_length: float = TANGENT_LENGTH
    curvature_length: float = CURVATURE_LENGTH

    def __post_init__(self):
        if isinstance(self.segment_count, bool) or not isinstance(self.segment_count, int):
            raise ValueError(f"segment_count must be an int, got {self.segment_count!r}")
        if self.segment_count < 1:
            raise ValueError("segment_count must be >= 1")
        if self.tangent_length <= 0 or self.curvature_length <= 0:
            raise ValueError("display lengths must be positive")

    @classmethod
    def from_dict(cls, options):
        """
        Build a config from an option mapping.

        Accepts segmentCount / tangentDisplayLength / curvatureDisplayLength
        or their snake_case field names. Missing options keep their defaults.
        """
        kwargs = {}
        for key, value in options.items():
            if key not in _OPTION_NAMES:
                raise ValueError(f"Unknown curve option: {key!r}")
            kwargs[_OPTION_NAMES[key]] = value
        return cls(**kwargs)
