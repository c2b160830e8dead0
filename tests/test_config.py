import pytest

from curve_sampler import BezierCurve, CurveConfig
from curve_sampler import constants


def test_defaults():
    config = CurveConfig()
    assert config.segment_count == constants.SEGMENT_COUNT
    assert config.tangent_length == constants.TANGENT_LENGTH
    assert config.curvature_length == constants.CURVATURE_LENGTH


def test_from_dict_with_option_names():
    config = CurveConfig.from_dict({
        'segmentCount': 64,
        'tangentDisplayLength': 12.5,
        'curvatureDisplayLength': 8,
    })
    assert config == CurveConfig(segment_count=64, tangent_length=12.5, curvature_length=8)


def test_from_dict_snake_case_and_partial():
    config = CurveConfig.from_dict({'segment_count': 10})
    assert config.segment_count == 10
    assert config.tangent_length == constants.TANGENT_LENGTH


def test_from_dict_rejects_unknown_option():
    with pytest.raises(ValueError, match="Unknown"):
        CurveConfig.from_dict({'proximityRadius': 4})


@pytest.mark.parametrize("kwargs", [
    {'segment_count': 0},
    {'segment_count': 2.5},
    {'segment_count': True},
    {'tangent_length': 0},
    {'curvature_length': -1.0},
])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        CurveConfig(**kwargs)


def test_curve_uses_config():
    curve = BezierCurve([(0, 0), (1, 1)], config=CurveConfig.from_dict({'segmentCount': 7}))
    assert len(curve.segments) == 7
