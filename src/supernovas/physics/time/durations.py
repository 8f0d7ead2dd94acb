"""Duration handling and the carry/borrow normalization of a Julian date's time of day.

Every duration that enters this package is reduced to an exact integer count of
nanoseconds by :func:`.toNanoseconds`. The only place where whole days are carried
into (or borrowed from) the day count is :func:`.normalizeTimeOfDay`.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import date, datetime, timedelta, timezone
from numbers import Integral
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import datetime64, datetime_data, iinfo, int64, isnat, timedelta64

# Local Imports
from ...common.behavioral_config import BehavioralConfig
from ...common.exceptions import JulianDateOverflowError
from ...common.logger import supernovasLogError
from ..constants import DAYS2SEC, NANOSECONDS_PER_DAY

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final, Union

    # Third Party Imports
    from typing_extensions import TypeAlias

    Duration: TypeAlias = Union[timedelta64, timedelta, int]
    TimePoint: TypeAlias = Union[datetime64, datetime, date]


DURATION_TYPES: Final = (timedelta64, timedelta)
"""``tuple``: duration types accepted by the arithmetic operators."""

ONE_DAY: Final = timedelta64(NANOSECONDS_PER_DAY, "ns")
"""``timedelta64``: length of one day."""

_NANOSECONDS_PER_UNIT: Final[dict[str, int]] = {
    "W": 7 * NANOSECONDS_PER_DAY,
    "D": NANOSECONDS_PER_DAY,
    "h": 3600 * 10**9,
    "m": 60 * 10**9,
    "s": 10**9,
    "ms": 10**6,
    "us": 10**3,
    "ns": 1,
}

_SUBNANOSECOND_DIVISORS: Final[dict[str, int]] = {
    "ps": 10**3,
    "fs": 10**6,
    "as": 10**9,
}

_UNIX_EPOCH: Final = datetime(1970, 1, 1)


def _unitCountToNanoseconds(count: int, unit: str, multiplier: int) -> int:
    """Convert `count` ticks of a numpy time unit into nanoseconds.

    Sub-nanosecond units are floored to the nanosecond below.
    """
    if unit in _NANOSECONDS_PER_UNIT:
        return count * multiplier * _NANOSECONDS_PER_UNIT[unit]

    if unit in _SUBNANOSECOND_DIVISORS:
        return (count * multiplier) // _SUBNANOSECOND_DIVISORS[unit]

    msg = f"Cannot convert numpy time unit {unit!r} to a fixed number of nanoseconds"
    supernovasLogError(msg)
    raise ValueError(msg)


def toNanoseconds(duration: Duration) -> int:
    """Convert a duration into an exact, signed integer number of nanoseconds.

    Args:
        duration (``timedelta64 | timedelta | int``): the duration to convert. Plain integers
            are taken to already be nanoseconds.

    Raises:
        ValueError: if `duration` is ``NaT`` or uses a calendar unit (years, months)
        TypeError: if `duration` is not a supported duration type

    Returns:
        ``int``: number of nanoseconds in `duration`
    """
    if isinstance(duration, timedelta64):
        if isnat(duration):
            supernovasLogError("Cannot use NaT as a duration")
            raise ValueError(duration)
        unit, multiplier = datetime_data(duration.dtype)
        return _unitCountToNanoseconds(int(duration.astype(int64)), unit, multiplier)

    if isinstance(duration, timedelta):
        seconds = duration.days * DAYS2SEC + duration.seconds
        return seconds * 10**9 + duration.microseconds * 10**3

    if isinstance(duration, Integral) and not isinstance(duration, bool):
        return int(duration)

    supernovasLogError(f"Unsupported duration type: {type(duration)}")
    raise TypeError(type(duration))


def toTimedelta64(nanoseconds: int) -> timedelta64:
    """Wrap an integer count of nanoseconds as a ``timedelta64[ns]``.

    Raises:
        JulianDateOverflowError: if `nanoseconds` does not fit in a 64-bit nanosecond count
    """
    bounds = iinfo(int64)
    # The minimum int64 value is reserved for NaT
    if not bounds.min < nanoseconds <= bounds.max:
        msg = f"Duration of {nanoseconds} ns is out of range for timedelta64[ns]"
        supernovasLogError(msg)
        raise JulianDateOverflowError(msg)

    return timedelta64(nanoseconds, "ns")


def toEpochNanoseconds(time_point: TimePoint) -> int:
    """Determine the nanoseconds elapsed between the Unix epoch and `time_point`.

    Naive ``datetime`` objects are treated as UTC; aware ones are converted to UTC first.
    A bare ``date`` refers to its midnight.

    Args:
        time_point (``datetime64 | datetime | date``): clock time point to convert

    Raises:
        ValueError: if `time_point` is ``NaT``
        TypeError: if `time_point` is not a supported time point type

    Returns:
        ``int``: signed nanoseconds since 1970-01-01T00:00:00
    """
    if isinstance(time_point, datetime64):
        if isnat(time_point):
            supernovasLogError("Cannot use NaT as a time point")
            raise ValueError(time_point)
        unit, _ = datetime_data(time_point.dtype)
        if unit in ("Y", "M"):
            # Variable-length units, but always whole days
            time_point = time_point.astype("datetime64[D]")
        unit, multiplier = datetime_data(time_point.dtype)
        return _unitCountToNanoseconds(int(time_point.astype(int64)), unit, multiplier)

    if isinstance(time_point, datetime):
        if time_point.tzinfo is not None:
            time_point = time_point.astimezone(timezone.utc).replace(tzinfo=None)
        return toNanoseconds(time_point - _UNIX_EPOCH)

    if isinstance(time_point, date):
        return toNanoseconds(time_point - _UNIX_EPOCH.date())

    supernovasLogError(f"Unsupported time point type: {type(time_point)}")
    raise TypeError(type(time_point))


def checkDayRange(day: int) -> int:
    """Make sure `day` is representable by the configured Julian day type.

    Args:
        day (``int``): whole Julian day count

    Raises:
        JulianDateOverflowError: if `day` is outside the range of ``[julian_date] DayType``

    Returns:
        ``int``: `day`, unchanged
    """
    day_type = BehavioralConfig.getConfig().julian_date.DayType
    bounds = iinfo(day_type)
    if not bounds.min <= day <= bounds.max:
        msg = f"Julian day {day} overflows the {day_type} day count [{bounds.min}, {bounds.max}]"
        supernovasLogError(msg)
        raise JulianDateOverflowError(msg)

    return day


def normalizeTimeOfDay(day: int, raw_duration: Duration) -> tuple[int, int]:
    """Carry whole days out of (or borrow them into) a raw sub-day duration.

    The carry is computed with floor division, so negative durations borrow whole days
    from `day` and leave a non-negative remainder.

    Examples:
        >>> normalizeTimeOfDay(245, timedelta(seconds=-2))
        (244, 86398000000000)

    Args:
        day (``int``): whole Julian day count
        raw_duration (``timedelta64 | timedelta | int``): signed duration of any magnitude

    Raises:
        TypeError: if `day` is not an integer
        JulianDateOverflowError: if the adjusted day leaves the configured day range

    Returns:
        ``tuple``: the adjusted day and the time of day in nanoseconds, which always
            satisfies ``0 <= time_of_day < NANOSECONDS_PER_DAY``
    """
    if not isinstance(day, Integral) or isinstance(day, bool):
        supernovasLogError(f"Julian day must be an integer, not {type(day)}")
        raise TypeError(type(day))

    carry, time_of_day = divmod(toNanoseconds(raw_duration), NANOSECONDS_PER_DAY)

    return checkDayRange(int(day) + carry), time_of_day
