"""Plain data records produced by the message converters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np

from fpdriver.geometry import Quaternion
from fpdriver.gps_time import GpsTime


def _zeros3() -> np.ndarray:
    return np.zeros(3)


def _zeros33() -> np.ndarray:
    return np.zeros((3, 3))


def _zeros66() -> np.ndarray:
    return np.zeros((6, 6))


@dataclass(eq=False)
class ImuData:
    stamp: GpsTime = field(default_factory=GpsTime)
    frame_id: str = ""
    linear_acceleration: np.ndarray = field(default_factory=_zeros3)
    angular_velocity: np.ndarray = field(default_factory=_zeros3)


@dataclass(eq=False)
class TfData:
    stamp: GpsTime = field(default_factory=GpsTime)
    frame_id: str = ""
    child_frame_id: str = ""
    translation: np.ndarray = field(default_factory=_zeros3)
    rotation: Quaternion = field(default_factory=Quaternion.identity)


@dataclass(eq=False)
class PoseWithCovData:
    position: np.ndarray = field(default_factory=_zeros3)
    orientation: Quaternion = field(default_factory=Quaternion.identity)
    cov: np.ndarray = field(default_factory=_zeros66)


@dataclass(eq=False)
class TwistWithCovData:
    linear: np.ndarray = field(default_factory=_zeros3)
    angular: np.ndarray = field(default_factory=_zeros3)
    cov: np.ndarray = field(default_factory=_zeros66)


@dataclass(eq=False)
class OdometryData:
    stamp: GpsTime = field(default_factory=GpsTime)
    frame_id: str = ""
    child_frame_id: str = ""
    pose: PoseWithCovData = field(default_factory=PoseWithCovData)
    twist: TwistWithCovData = field(default_factory=TwistWithCovData)


@dataclass(eq=False)
class VrtkData:
    stamp: GpsTime = field(default_factory=GpsTime)
    frame_id: str = ""
    pose_frame: str = ""
    kin_frame: str = ""
    pose: PoseWithCovData = field(default_factory=PoseWithCovData)
    velocity: TwistWithCovData = field(default_factory=TwistWithCovData)
    acceleration: np.ndarray = field(default_factory=_zeros3)
    fusion_status: int = -1
    imu_bias_status: int = -1
    gnss1_status: int = -1
    gnss2_status: int = -1
    wheelspeed_status: int = -1
    version: str = ""


class NavSatStatus(IntEnum):
    STATUS_NO_FIX = -1  # unable to fix position
    STATUS_FIX = 0  # unaugmented fix
    STATUS_SBAS_FIX = 1  # with satellite-based augmentation
    STATUS_GBAS_FIX = 2  # with ground-based augmentation


@dataclass
class NavSatStatusData:
    status: int = 0
    service: int = 0


@dataclass(eq=False)
class NavSatFixData:
    stamp: GpsTime = field(default_factory=GpsTime)
    frame_id: str = ""
    status: NavSatStatusData = field(default_factory=NavSatStatusData)
    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0
    cov: np.ndarray = field(default_factory=_zeros33)
    position_covariance_type: int = 0