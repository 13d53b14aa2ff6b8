"""Conversion of vehicle velocity messages into integer wheel-speed values."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from fpdriver.params import ParamsError


class VelTopicType(IntEnum):
    Twist = 0
    TwistWithCov = 1
    Odometry = 2


_MISSING = object()


@dataclass
class OdomInputParams:
    topic_type: VelTopicType
    input_topic: str
    fixposition_speed_topic: str = "/fixposition/speed"
    multiplicative_factor: int = 1000
    use_angular: bool = False

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> OdomInputParams:
        """Build the parameters; input topic and topic type are required."""
        speed_topic = str(config.get("fixposition_speed_topic", "/fixposition/speed"))
        factor = int(config.get("multiplicative_factor", 1000))
        use_angular = bool(config.get("use_angular", False))

        input_topic = config.get("input_topic", _MISSING)
        if input_topic is _MISSING or input_topic is None:
            raise ParamsError("Couldn't read the input topic name.")

        type_name = config.get("topic_type", _MISSING)
        if type_name is _MISSING or type_name is None:
            raise ParamsError("Couldn't read the input topic type.")
        try:
            topic_type = VelTopicType[str(type_name)]
        except KeyError:
            raise ParamsError("Topic type is not supported.") from None

        return cls(
            topic_type=topic_type,
            input_topic=str(input_topic),
            fixposition_speed_topic=speed_topic,
            multiplicative_factor=factor,
            use_angular=use_angular,
        )


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj[name]
    return getattr(obj, name)


class OdomConverter:
    """Scales linear (and optionally angular) velocity into integer speeds."""

    def __init__(self, params: OdomInputParams) -> None:
        self.params = params

    def convert(self, speed: float, angular: float) -> list[int]:
        """Speed values: the scaled linear speed, then the angular one if enabled."""
        factor = self.params.multiplicative_factor
        speeds = [_round_half_away(speed * factor)]
        if self.params.use_angular:
            speeds.append(_round_half_away(angular * factor))
        return speeds

    def convert_twist(self, linear_x: float, angular_z: float) -> list[int]:
        """Speed values from the forward linear and yaw angular velocity."""
        return self.convert(linear_x, angular_z)

    def convert_message(self, message: Any) -> list[int]:
        """Speed values from a Twist, TwistWithCovariance or Odometry shaped message."""
        topic_type = self.params.topic_type
        if topic_type is VelTopicType.Odometry:
            twist = _field(_field(message, "twist"), "twist")
        elif topic_type is VelTopicType.TwistWithCov:
            twist = _field(message, "twist")
        else:
            twist = message
        return self.convert_twist(
            float(_field(_field(twist, "linear"), "x")),
            float(_field(_field(twist, "angular"), "z")),
        )