"""GPS week/time-of-week timestamps and conversions to calendar time."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

GPS_LEAP_TIME_S = 18
SEC_PER_WEEK = 604800
SEC_PER_DAY = 86400
UNIX_EPOCH = datetime(1970, 1, 1)
GPS_EPOCH = datetime(1980, 1, 6)

_UINT32_MAX = 2**32 - 1


class GpsTime:
    """GPS week number and time of week, kept normalised to one week."""

    __slots__ = ("wno", "tow")

    WNO_PRECISION = 4
    PRECISION = 9
    LENGTH = 10

    def __init__(self, wno: int = 0, tow: float = 0.0) -> None:
        tow = float(tow)
        delta_week = math.floor(tow / SEC_PER_WEEK)
        self.wno = int(wno) + delta_week
        self.tow = tow - delta_week * SEC_PER_WEEK

    def _total_seconds(self) -> float:
        return self.wno * SEC_PER_WEEK + self.tow

    def _shifted(self, sec: float) -> GpsTime:
        return GpsTime(self.wno, self.tow + sec)

    def __add__(self, other):
        if isinstance(other, GpsTime):
            return self._shifted(other._total_seconds())
        if isinstance(other, (int, float)):
            return self._shifted(float(other))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, GpsTime):
            return self._shifted(-other._total_seconds())
        if isinstance(other, (int, float)):
            return self._shifted(-float(other))
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, GpsTime):
            return NotImplemented
        return abs(self.tow - other.tow) < 1e-3 and self.wno == other.wno

    __hash__ = None  # equality is tolerance based

    def __lt__(self, other):
        if not isinstance(other, GpsTime):
            return NotImplemented
        if self.wno == other.wno:
            return self.tow < other.tow
        return self.wno < other.wno

    def __gt__(self, other):
        if not isinstance(other, GpsTime):
            return NotImplemented
        if self.wno == other.wno:
            return self.tow > other.tow
        return self.wno > other.wno

    def __str__(self) -> str:
        week = str(self.wno)[: self.WNO_PRECISION].ljust(self.WNO_PRECISION)
        sec = f"{self.tow:.{self.PRECISION}g}"
        if "." not in sec:
            sec += "."
        sec = sec[: self.LENGTH].ljust(self.LENGTH, "0")
        return f"{week} {sec}"

    def __repr__(self) -> str:
        return f"GpsTime(wno={self.wno}, tow={self.tow!r})"


def gps_time_to_datetime(gps_time: GpsTime) -> datetime:
    """GPS time to naive UTC datetime (leap seconds fixed at 18)."""
    micro_s = int((gps_time.wno * SEC_PER_WEEK + gps_time.tow - GPS_LEAP_TIME_S) * 1e6)
    return GPS_EPOCH + timedelta(microseconds=micro_s)


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def datetime_to_gps_time(value: datetime) -> GpsTime:
    """Naive UTC datetime to GPS time (leap seconds fixed at 18)."""
    total_us = (value - GPS_EPOCH) // timedelta(microseconds=1)
    total_s = _trunc_div(total_us, 1_000_000)
    weekcount = _trunc_div(total_s, SEC_PER_WEEK)
    sec_in_week = total_us / 1e6 - weekcount * SEC_PER_WEEK + GPS_LEAP_TIME_S
    return GpsTime(weekcount, sec_in_week)


def gps_time_to_stamp(gps_time: GpsTime) -> tuple[int, int]:
    """Seconds and nanoseconds since the Unix epoch, each fitting in 32 bits."""
    total_us = (gps_time_to_datetime(gps_time) - UNIX_EPOCH) // timedelta(microseconds=1)
    if total_us < 0 or total_us // 1_000_000 > _UINT32_MAX:
        raise ValueError("time_duration is out of dual 32-bit range")
    sec, micro = divmod(total_us, 1_000_000)
    return sec, micro * 1000