from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timedelta

# Third Party Imports
import pytest
from numpy import timedelta64

# SUPERNOVAS Imports
from supernovas.physics.time.conversions import (
    datetimeToJulianDate,
    getTargetJulianDate,
    julianDateToDatetime,
    unixTimeToJulianDate,
)
from supernovas.physics.time.stardate import JulianDate

# Local Imports
from ... import HALF_DAY, J2000_DATETIME, J2000_JULIAN_DAY

DATETIMES: list[datetime] = [
    J2000_DATETIME,
    datetime(1970, 1, 1),
    datetime(1969, 7, 20, 20, 17, 40, 123456),
    datetime(2021, 3, 9, 7, 11, 25, 865337),
    datetime(1600, 3, 1),
    datetime(1, 1, 1),
]


def testDatetimeToJulianDate():
    """Test converting J2000 from a ``datetime``."""
    assert datetimeToJulianDate(J2000_DATETIME) == JulianDate(J2000_JULIAN_DAY)
    assert datetimeToJulianDate(datetime(1600, 3, 1)) == JulianDate(2305507, HALF_DAY)


@pytest.mark.parametrize("date_time", DATETIMES)
def testJulianDateToDatetime(date_time: datetime):
    """Test conversion back to ``datetime`` is the inverse of :func:`.datetimeToJulianDate`."""
    assert julianDateToDatetime(datetimeToJulianDate(date_time)) == date_time


def testJulianDateToDatetimeTruncates():
    """Test sub-microsecond time is dropped, rather than rounded."""
    julian_date = JulianDate(J2000_JULIAN_DAY, timedelta64(1999, "ns"))
    assert julianDateToDatetime(julian_date) == J2000_DATETIME + timedelta(microseconds=1)


def testJulianDateToDatetimeOutOfRange():
    """Test Julian dates before year 1 can't be expressed as a ``datetime``."""
    with pytest.raises(OverflowError):
        julianDateToDatetime(JulianDate.fromCalendarDate(0, 6, 1))


def testUnixTimeToJulianDate():
    """Test exact conversion of an integer Unix time."""
    julian_date = unixTimeToJulianDate(1615273885, 865337375)
    assert julian_date == JulianDate(2459282, timedelta64(69085865337375, "ns"))
    assert unixTimeToJulianDate(0) == JulianDate(2440587, HALF_DAY)
    assert unixTimeToJulianDate(-1) == JulianDate(2440587, HALF_DAY - timedelta64(1, "s"))


@pytest.mark.parametrize(("seconds", "nanoseconds"), [(1615273885.8, 0), (1, 0.5), (True, 0)])
def testUnixTimeBadType(seconds, nanoseconds):
    """Test only integer Unix times are accepted."""
    with pytest.raises(TypeError):
        unixTimeToJulianDate(seconds, nanoseconds)


@pytest.mark.parametrize(
    ("start", "jump", "target"),
    [
        (JulianDate(J2000_JULIAN_DAY), timedelta(hours=36), JulianDate(J2000_JULIAN_DAY + 1, HALF_DAY)),
        (JulianDate(J2000_JULIAN_DAY), timedelta64(-1, "ns"), JulianDate(J2000_JULIAN_DAY - 1, 86399999999999)),
        (2451545.5, timedelta64(12, "h"), JulianDate(J2000_JULIAN_DAY + 1)),
        (2451545, timedelta(0), JulianDate(J2000_JULIAN_DAY)),
    ],
)
def testGetTargetJulianDate(start, jump, target: JulianDate):
    """Test advancing a Julian date by a jump."""
    assert getTargetJulianDate(start, jump) == target


@pytest.mark.parametrize("jump", [300, 1.5, "1h"])
def testGetTargetJulianDateBadJump(jump):
    """Test the jump must be a duration object."""
    with pytest.raises(TypeError):
        getTargetJulianDate(JulianDate(J2000_JULIAN_DAY), jump)


def testGetTargetJulianDateBadStart():
    """Test the start must be a Julian date or a real number."""
    with pytest.raises(TypeError):
        getTargetJulianDate("2451545", timedelta(hours=1))
