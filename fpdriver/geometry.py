"""Quaternion helpers and Euler angle conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Quaternion:
    """Quaternion stored as (w, x, y, z)."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_rotation_matrix(cls, rot) -> Quaternion:
        """Build a quaternion from a 3x3 rotation matrix."""
        m = np.asarray(rot, dtype=float)
        if m.shape != (3, 3):
            raise ValueError(f"expected a 3x3 matrix, got shape {m.shape}")
        trace = m[0, 0] + m[1, 1] + m[2, 2]
        if trace > 0.0:
            t = math.sqrt(trace + 1.0)
            w = 0.5 * t
            t = 0.5 / t
            return cls(
                float(w),
                float((m[2, 1] - m[1, 2]) * t),
                float((m[0, 2] - m[2, 0]) * t),
                float((m[1, 0] - m[0, 1]) * t),
            )
        i = int(np.argmax(np.diag(m)))
        j = (i + 1) % 3
        k = (j + 1) % 3
        t = math.sqrt(m[i, i] - m[j, j] - m[k, k] + 1.0)
        vec = [0.0, 0.0, 0.0]
        vec[i] = 0.5 * t
        t = 0.5 / t
        w = (m[k, j] - m[j, k]) * t
        vec[j] = (m[j, i] + m[i, j]) * t
        vec[k] = (m[k, i] + m[i, k]) * t
        return cls(float(w), float(vec[0]), float(vec[1]), float(vec[2]))

    def to_rotation_matrix(self) -> np.ndarray:
        tx, ty, tz = 2.0 * self.x, 2.0 * self.y, 2.0 * self.z
        twx, twy, twz = tx * self.w, ty * self.w, tz * self.w
        txx, txy, txz = tx * self.x, ty * self.x, tz * self.x
        tyy, tyz, tzz = ty * self.y, tz * self.y, tz * self.z
        return np.array(
            [
                [1.0 - (tyy + tzz), txy - twz, txz + twy],
                [txy + twz, 1.0 - (txx + tzz), tyz - twx],
                [txz - twy, tyz + twx, 1.0 - (txx + tyy)],
            ]
        )

    def squared_norm(self) -> float:
        return self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z

    def inverse(self) -> Quaternion:
        """Conjugate divided by the squared norm; zero for a zero quaternion."""
        n2 = self.squared_norm()
        if n2 > 0.0:
            return Quaternion(self.w / n2, -self.x / n2, -self.y / n2, -self.z / n2)
        return Quaternion(0.0, 0.0, 0.0, 0.0)

    def __mul__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        a, b = self, other
        return Quaternion(
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y + a.y * b.w + a.z * b.x - a.x * b.z,
            a.w * b.z + a.z * b.w + a.x * b.y - a.y * b.x,
        )


def quat_to_eul(q: Quaternion) -> np.ndarray:
    """Intrinsic ZYX Euler angles (yaw, pitch, roll) in radians."""
    qw, qx, qy, qz = q.w, q.x, q.y, q.z
    yaw = math.atan2(2.0 * (qx * qy + qw * qz), qw * qw + qx * qx - qy * qy - qz * qz)
    sin_pitch = max(-1.0, min(1.0, -2.0 * (qx * qz - qw * qy)))
    pitch = math.asin(sin_pitch)
    roll = math.atan2(2.0 * (qy * qz + qw * qx), qw * qw - qx * qx - qy * qy + qz * qz)
    return np.array([yaw, pitch, roll])


def rot_to_eul(rot) -> np.ndarray:
    """Rotation matrix to intrinsic ZYX Euler angles (yaw, pitch, roll) in radians."""
    return quat_to_eul(Quaternion.from_rotation_matrix(rot))