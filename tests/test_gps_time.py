from datetime import datetime, timedelta

import pytest

from fpdriver.gps_time import (
    GPS_EPOCH,
    GPS_LEAP_TIME_S,
    SEC_PER_WEEK,
    UNIX_EPOCH,
    GpsTime,
    datetime_to_gps_time,
    gps_time_to_datetime,
    gps_time_to_stamp,
)


def test_default_is_zero():
    t = GpsTime()
    assert (t.wno, t.tow) == (0, 0.0)


def test_constructor_normalises_overflow():
    t = GpsTime(10, 2 * SEC_PER_WEEK + 5.5)
    assert t.wno == 12
    assert t.tow == pytest.approx(5.5)


def test_constructor_normalises_negative():
    t = GpsTime(10, -5.0)
    assert t.wno == 9
    assert t.tow == pytest.approx(SEC_PER_WEEK - 5.0)


def test_add_seconds_crosses_week():
    t = GpsTime(2197, SEC_PER_WEEK - 1.0) + 3.0
    assert t == GpsTime(2198, 2.0)


def test_add_and_subtract_are_inverse():
    base = GpsTime(2216, 509791.426)
    assert (base + 1234.5) - 1234.5 == base


def test_add_gps_time():
    assert GpsTime(2, 10.0) + GpsTime(1, 20.0) == GpsTime(3, 30.0)


def test_subtract_gps_time():
    assert GpsTime(3, 30.0) - GpsTime(1, 20.0) == GpsTime(2, 10.0)


def test_equality_tolerance():
    assert GpsTime(5, 100.0) == GpsTime(5, 100.0005)
    assert GpsTime(5, 100.0) != GpsTime(5, 100.01)
    assert GpsTime(5, 100.0) != GpsTime(6, 100.0)


def test_ordering():
    assert GpsTime(5, 100.0) < GpsTime(5, 200.0)
    assert GpsTime(6, 0.0) > GpsTime(5, 500000.0)
    assert not GpsTime(5, 100.0) > GpsTime(5, 100.0)


def test_str_integer_tow():
    assert str(GpsTime(12, 5.0)) == "12   5.00000000"


def test_str_fractional_tow():
    assert str(GpsTime(2197, 126191.777855)) == "2197 126191.778"


def test_datetime_at_gps_epoch():
    assert gps_time_to_datetime(GpsTime(0, GPS_LEAP_TIME_S)) == GPS_EPOCH


@pytest.mark.parametrize("wno,tow", [(2197, 126191.777855), (2216, 509791.426), (1900, 0.5)])
def test_datetime_round_trip(wno, tow):
    original = GpsTime(wno, tow)
    assert datetime_to_gps_time(gps_time_to_datetime(original)) == original


def test_datetime_to_gps_time_week_boundary():
    value = GPS_EPOCH + timedelta(weeks=3, seconds=-GPS_LEAP_TIME_S)
    assert datetime_to_gps_time(value) == GpsTime(3, 0.0)


def test_stamp_at_gps_epoch():
    sec, nanosec = gps_time_to_stamp(GpsTime(0, GPS_LEAP_TIME_S))
    assert sec == int((GPS_EPOCH - UNIX_EPOCH).total_seconds())
    assert nanosec == 0


def test_stamp_fraction_in_nanoseconds():
    sec, nanosec = gps_time_to_stamp(GpsTime(2000, 100.25))
    expected = gps_time_to_datetime(GpsTime(2000, 100.25)) - UNIX_EPOCH
    assert sec == int(expected.total_seconds())
    assert nanosec == expected.microseconds * 1000


def test_stamp_before_unix_epoch_raises():
    with pytest.raises(ValueError):
        gps_time_to_stamp(GpsTime(-600, 0.0))


def test_stamp_matches_datetime():
    value = datetime(2022, 3, 1, 12, 30, 15)
    sec, nanosec = gps_time_to_stamp(datetime_to_gps_time(value))
    assert sec == int((value - UNIX_EPOCH).total_seconds())
    assert nanosec == 0