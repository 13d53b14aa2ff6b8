"""WGS84 geodetic, ECEF, ENU and NED coordinate transformations."""

from __future__ import annotations

import math

import numpy as np

from fpdriver.geometry import rot_to_eul

WGS84_A = 6378137.0  # semi-major axis [m]
WGS84_B = 6356752.314245  # semi-minor axis [m]
WGS84_INV_F = 298.257223563
WGS84_E_2 = 6.69437999014e-3  # first eccentricity squared
WGS84_A_2 = WGS84_A * WGS84_A
WGS84_B_2 = WGS84_B * WGS84_B
WGS84_E_PRIME_2 = WGS84_A_2 / WGS84_B_2 - 1.0  # second eccentricity squared


def _vec3(value) -> np.ndarray:
    arr = np.asarray(value, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {arr.shape}")
    return arr


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** (1.0 / 3.0), value)


def rot_enu_ecef(lat: float, lon: float) -> np.ndarray:
    """Rotation matrix ECEF -> ENU at the given latitude and longitude [rad]."""
    s_lon, c_lon = math.sin(lon), math.cos(lon)
    s_lat, c_lat = math.sin(lat), math.cos(lat)
    return np.array(
        [
            [-s_lon, c_lon, 0.0],
            [-c_lon * s_lat, -s_lon * s_lat, c_lat],
            [c_lon * c_lat, s_lon * c_lat, s_lat],
        ]
    )


def rot_enu_ecef_at(ecef) -> np.ndarray:
    """Rotation matrix ECEF -> ENU at the given ECEF position."""
    llh = tf_wgs84llh_ecef(ecef)
    return rot_enu_ecef(llh[0], llh[1])


def rot_ned_enu() -> np.ndarray:
    """Rotation matrix between ENU and NED."""
    return np.array([[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, -1.0]])


def rot_ned_ecef(lat: float, lon: float) -> np.ndarray:
    """Rotation matrix ECEF -> NED at the given latitude and longitude [rad]."""
    return rot_ned_enu() @ rot_enu_ecef(lat, lon)


def rot_ned_ecef_at(ecef) -> np.ndarray:
    """Rotation matrix ECEF -> NED at the given ECEF position."""
    llh = tf_wgs84llh_ecef(ecef)
    return rot_ned_ecef(llh[0], llh[1])


def tf_enu_ecef(ecef, wgs84llh_ref) -> np.ndarray:
    """ECEF position to ENU relative to a geodetic origin (lat, lon [rad], height [m])."""
    ref = _vec3(wgs84llh_ref)
    ecef_ref = tf_ecef_wgs84llh(ref)
    return rot_enu_ecef(ref[0], ref[1]) @ (_vec3(ecef) - ecef_ref)


def tf_ecef_enu(enu, wgs84llh_ref) -> np.ndarray:
    """ENU position relative to a geodetic origin back to ECEF."""
    ref = _vec3(wgs84llh_ref)
    ecef_ref = tf_ecef_wgs84llh(ref)
    return ecef_ref + rot_enu_ecef(ref[0], ref[1]).T @ _vec3(enu)


def tf_ned_ecef(ecef, wgs84llh_ref) -> np.ndarray:
    """ECEF position to NED relative to a geodetic origin."""
    ref = _vec3(wgs84llh_ref)
    ecef_ref = tf_ecef_wgs84llh(ref)
    return rot_ned_ecef(ref[0], ref[1]) @ (_vec3(ecef) - ecef_ref)


def tf_ecef_ned(ned, wgs84llh_ref) -> np.ndarray:
    """NED position relative to a geodetic origin back to ECEF."""
    ref = _vec3(wgs84llh_ref)
    ecef_ref = tf_ecef_wgs84llh(ref)
    return ecef_ref + rot_ned_ecef(ref[0], ref[1]).T @ _vec3(ned)


def tf_wgs84llh_ecef(ecef) -> np.ndarray:
    """ECEF (x, y, z) to geodetic (lat [rad], lon [rad], height [m]) by Ferrari's solution."""
    x, y, z = (float(v) for v in _vec3(ecef))
    z_2 = z * z
    r_2 = x * x + y * y
    r = math.sqrt(r_2)

    f = 54.0 * WGS84_B_2 * z_2
    g = r_2 + (1.0 - WGS84_E_2) * z_2 - WGS84_E_2 * (WGS84_A_2 - WGS84_B_2)
    c = WGS84_E_2 * WGS84_E_2 * f * r_2 / (g * g * g)
    s = _cbrt(1.0 + c + math.sqrt(c * c + 2.0 * c))
    k = s + 1.0 + 1.0 / s
    p = f / (3.0 * k * k * g * g)
    q = math.sqrt(1.0 + 2.0 * WGS84_E_2 * WGS84_E_2 * p)
    r0 = -p * WGS84_E_2 * r / (1.0 + q) + math.sqrt(
        0.5 * WGS84_A_2 * (1.0 + 1.0 / q) - (p * (1.0 - WGS84_E_2) * z_2 / (q + q * q)) - 0.5 * p * r_2
    )
    t1 = r - WGS84_E_2 * r0
    t1_2 = t1 * t1
    u = math.sqrt(t1_2 + z_2)
    v = math.sqrt(t1_2 + (1.0 - WGS84_E_2) * z_2)
    a_v = WGS84_A * v
    z0 = WGS84_B_2 * z / a_v

    height = u * (1.0 - WGS84_B_2 / a_v)
    lat = math.atan2(z + WGS84_E_PRIME_2 * z0, r)
    lon = math.atan2(y, x)
    return np.array([lat, lon, height])


def tf_ecef_wgs84llh(wgs84llh) -> np.ndarray:
    """Geodetic (lat [rad], lon [rad], height [m]) to ECEF (x, y, z)."""
    lat, lon, height = (float(v) for v in _vec3(wgs84llh))
    s_lat, c_lat = math.sin(lat), math.cos(lat)
    s_lon, c_lon = math.sin(lon), math.cos(lon)
    n = WGS84_A / math.sqrt(1.0 - WGS84_E_2 * s_lat * s_lat)
    n_plus_height = n + height
    return np.array(
        [
            n_plus_height * c_lat * c_lon,
            n_plus_height * c_lat * s_lon,
            (n * (1.0 - WGS84_E_2) + height) * s_lat,
        ]
    )


def ecef_pose_to_enu_eul(ecef_p, ecef_r) -> np.ndarray:
    """Yaw-pitch-roll in the local ENU frame for a pose given in ECEF."""
    rot_enu_body = rot_enu_ecef_at(ecef_p) @ np.asarray(ecef_r, dtype=float)
    return rot_to_eul(rot_enu_body)