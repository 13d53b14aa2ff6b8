from types import SimpleNamespace

import pytest

from fpdriver.odom_converter import OdomConverter, OdomInputParams, VelTopicType
from fpdriver.params import ParamsError


def _params(**overrides):
    values = {"topic_type": VelTopicType.Twist, "input_topic": "/cmd_vel"}
    values.update(overrides)
    return OdomInputParams(**values)


def test_from_mapping_defaults():
    params = OdomInputParams.from_mapping({"input_topic": "/odom", "topic_type": "Odometry"})
    assert params.topic_type is VelTopicType.Odometry
    assert params.input_topic == "/odom"
    assert params.fixposition_speed_topic == "/fixposition/speed"
    assert params.multiplicative_factor == 1000
    assert params.use_angular is False


def test_from_mapping_overrides():
    params = OdomInputParams.from_mapping(
        {
            "input_topic": "/twist",
            "topic_type": "TwistWithCov",
            "fixposition_speed_topic": "/speed",
            "multiplicative_factor": 10,
            "use_angular": True,
        }
    )
    assert params.topic_type is VelTopicType.TwistWithCov
    assert params.fixposition_speed_topic == "/speed"
    assert params.multiplicative_factor == 10
    assert params.use_angular is True


def test_missing_input_topic_raises():
    with pytest.raises(ParamsError, match="input topic name"):
        OdomInputParams.from_mapping({"topic_type": "Twist"})


def test_missing_topic_type_raises():
    with pytest.raises(ParamsError, match="input topic type"):
        OdomInputParams.from_mapping({"input_topic": "/x"})


def test_unsupported_topic_type_raises():
    with pytest.raises(ParamsError, match="not supported"):
        OdomInputParams.from_mapping({"input_topic": "/x", "topic_type": "Pose"})


def test_convert_linear_only_without_angular():
    converter = OdomConverter(_params(multiplicative_factor=1))
    assert converter.convert(3.0, 7.0) == [3]


def test_convert_with_angular():
    converter = OdomConverter(_params(multiplicative_factor=1, use_angular=True))
    assert converter.convert(3.0, 7.0) == [3, 7]


def test_rounding_half_away_from_zero():
    converter = OdomConverter(_params(multiplicative_factor=1, use_angular=True))
    assert converter.convert(2.5, -2.5) == [3, -3]


def test_scaling_is_linear():
    converter = OdomConverter(_params(multiplicative_factor=1000))
    assert converter.convert(-4.0, 0.0)[0] == -converter.convert(4.0, 0.0)[0]
    assert converter.convert(4.0, 0.0)[0] == 4 * converter.convert(1.0, 0.0)[0]


def test_convert_message_twist_mapping():
    converter = OdomConverter(_params(multiplicative_factor=1, use_angular=True))
    msg = {"linear": {"x": 5.0, "y": 9.0}, "angular": {"z": 2.0}}
    assert converter.convert_message(msg) == [5, 2]


def test_convert_message_twist_with_cov():
    converter = OdomConverter(
        _params(topic_type=VelTopicType.TwistWithCov, multiplicative_factor=1, use_angular=True)
    )
    msg = {"twist": {"linear": {"x": 6.0}, "angular": {"z": 1.0}}, "covariance": [0.0] * 36}
    assert converter.convert_message(msg) == [6, 1]


def test_convert_message_odometry_attributes():
    converter = OdomConverter(
        _params(topic_type=VelTopicType.Odometry, multiplicative_factor=1, use_angular=True)
    )
    twist = SimpleNamespace(linear=SimpleNamespace(x=8.0), angular=SimpleNamespace(z=4.0))
    msg = SimpleNamespace(twist=SimpleNamespace(twist=twist))
    assert converter.convert_message(msg) == [8, 4]
    assert converter.convert_twist(8.0, 4.0) == converter.convert_message(msg)