"""Driver configuration and its loading from a parameter mapping."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

logger = logging.getLogger(__name__)

_MISSING = object()


class InputType(IntEnum):
    TCP = 1
    SERIAL = 2


class ParamsError(ValueError):
    """Raised when the configuration is missing a value or holds an invalid one."""


@dataclass
class FpOutputParams:
    rate: int = 100  # loop rate of the main read loop [Hz]
    reconnect_delay: float = 5.0  # wait time before retrying a connection [s]
    type: InputType = InputType.TCP
    formats: list[str] = field(default_factory=list)
    ip: str = "127.0.0.1"
    port: str = "21000"
    baudrate: int = 115200


@dataclass
class CustomerInputParams:
    speed_topic: str = "/fixposition/speed"


@dataclass
class FixpositionDriverParams:
    fp_output: FpOutputParams = field(default_factory=FpOutputParams)
    customer_input: CustomerInputParams = field(default_factory=CustomerInputParams)


def _lookup(config: Mapping[str, Any], ns: str, key: str) -> Any:
    """Find ``key`` below ``ns``, either in a nested mapping or as a dotted key."""
    section = config.get(ns)
    if isinstance(section, Mapping) and key in section:
        return section[key]
    return config.get(f"{ns}.{key}", _MISSING)


def _read(config: Mapping[str, Any], ns: str, key: str, default: Any, convert) -> Any:
    name = f"{ns}.{key}"
    value = _lookup(config, ns, key)
    if value is _MISSING:
        logger.warning("Using Default %s : %s", name, default)
        return default
    try:
        result = convert(value)
    except (TypeError, ValueError) as exc:
        raise ParamsError(f"invalid value for {name}: {value!r}") from exc
    logger.info("%s : %s", name, result)
    return result


def _to_formats(value: Any) -> list[str]:
    if isinstance(value, str):
        raise TypeError("formats must be a list of strings")
    return [str(item) for item in value]


def load_fp_output_params(config: Mapping[str, Any], ns: str = "fp_output") -> FpOutputParams:
    """Read the device output settings found under ``ns``."""
    defaults = FpOutputParams()
    params = FpOutputParams(
        rate=_read(config, ns, "rate", defaults.rate, int),
        reconnect_delay=_read(config, ns, "reconnect_delay", defaults.reconnect_delay, float),
    )

    type_str = _read(config, ns, "type", "tcp", str)
    if type_str == "tcp":
        params.type = InputType.TCP
    elif type_str == "serial":
        params.type = InputType.SERIAL
    else:
        raise ParamsError("Input type has to be tcp or serial!")

    params.formats = _read(config, ns, "formats", [], _to_formats)
    params.port = _read(config, ns, "port", defaults.port, str)

    if params.type is InputType.TCP:
        params.ip = _read(config, ns, "ip", defaults.ip, str)
    else:
        params.baudrate = _read(config, ns, "baudrate", defaults.baudrate, int)
    return params


def load_customer_input_params(
    config: Mapping[str, Any], ns: str = "customer_input"
) -> CustomerInputParams:
    """Read the customer input settings found under ``ns``."""
    speed_topic = _read(config, ns, "speed_topic", CustomerInputParams().speed_topic, str)
    return CustomerInputParams(speed_topic=speed_topic)


def load_driver_params(config: Mapping[str, Any]) -> FixpositionDriverParams:
    """Read the full driver configuration."""
    return FixpositionDriverParams(
        fp_output=load_fp_output_params(config, "fp_output"),
        customer_input=load_customer_input_params(config, "customer_input"),
    )