"""Helper functions that convert between Julian dates and other forms of time."""

from __future__ import annotations

# Standard Library Imports
import datetime
from numbers import Integral

# Local Imports
from ...common.logger import supernovasLogError
from ..constants import NANOSECONDS_PER_DAY, SEC2NS
from .durations import DURATION_TYPES, toNanoseconds
from .stardate import JulianDate

_UNIX_EPOCH = datetime.datetime(1970, 1, 1)


def _nanosecondsSinceUnixEpoch(julian_date):
    """Exact, signed nanoseconds between the Unix epoch and `julian_date`."""
    epoch = JulianDate.fromTimePoint(_UNIX_EPOCH)
    elapsed_days = julian_date.day - epoch.day
    return (
        elapsed_days * NANOSECONDS_PER_DAY
        + toNanoseconds(julian_date.time_of_day)
        - toNanoseconds(epoch.time_of_day)
    )


def datetimeToJulianDate(date_time):
    """Convert a ``datetime`` object to a :class:`.JulianDate`.

    Args:
        date_time (datetime): ``datetime`` object to be converted, naive values are UTC.

    Returns:
        JulianDate: Converted :class:`.JulianDate` object.
    """
    return JulianDate.fromTimePoint(date_time)


def julianDateToDatetime(julian_date):
    """Convert a :class:`.JulianDate` to a naive UTC ``datetime`` object.

    The time of day is truncated to whole microseconds, the resolution of ``datetime``.

    Args:
        julian_date (JulianDate): :class:`.JulianDate` object to be converted.

    Raises:
        OverflowError: if the date falls outside the years supported by ``datetime``

    Returns:
        datetime: Converted ``datetime`` object.
    """
    microseconds = _nanosecondsSinceUnixEpoch(julian_date) // 1000
    return _UNIX_EPOCH + datetime.timedelta(microseconds=microseconds)


def unixTimeToJulianDate(seconds, nanoseconds=0):
    """Convert a Unix timestamp to a :class:`.JulianDate` without going through a float.

    Args:
        seconds (int): whole seconds since 1970-01-01T00:00:00 UTC
        nanoseconds (int, optional): additional nanoseconds. Defaults to 0.

    Returns:
        JulianDate: Julian date of the timestamp
    """
    for value in (seconds, nanoseconds):
        if not isinstance(value, Integral) or isinstance(value, bool):
            supernovasLogError("Error: Unix time must be given as integer seconds & nanoseconds.")
            raise TypeError(type(value))

    epoch = JulianDate.fromTimePoint(_UNIX_EPOCH)
    offset = toNanoseconds(epoch.time_of_day) + seconds * SEC2NS + nanoseconds
    return JulianDate(epoch.day, offset)


def getTargetJulianDate(start_julian_date, jump_delta):
    """Determine the Julian date reached after advancing by some amount of time.

    Args:
        start_julian_date (:class:`.JulianDate`): starting Julian date, real numbers are
            converted with :meth:`.JulianDate.fromJulianDateNumber`
        jump_delta (``timedelta | timedelta64``): amount of time to advance

    Returns:
        :class:`.JulianDate`: Julian date after `jump_delta` has elapsed
    """
    if not isinstance(start_julian_date, JulianDate):
        start_julian_date = JulianDate.fromJulianDateNumber(start_julian_date)

    if not isinstance(jump_delta, DURATION_TYPES):
        supernovasLogError("Error: `jump_delta` must be a `datetime.timedelta` or `numpy.timedelta64` object.")
        raise TypeError(type(jump_delta))

    return start_julian_date + jump_delta
