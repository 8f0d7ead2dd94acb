"""Conversion of proleptic Gregorian/Julian calendar dates to Julian day numbers.

References:
    :cite:t:`duffett-smith_2011_practical`, Section 4

Dates up to and including the Gregorian cutover, 1582-10-15, are read in the
Julian calendar, later dates in the Gregorian calendar. Both calendars are
extended backwards proleptically with astronomical year numbering, so the year
before 1 CE is year 0, and the year before that is -1.
"""

from __future__ import annotations

# Standard Library Imports
from fractions import Fraction
from numbers import Integral, Real
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import floor, isfinite

# Local Imports
from ...common.exceptions import InvalidCalendarDateError
from ...common.logger import supernovasLogError
from ..constants import (
    DAYS_PER_MONTH_FACTOR,
    GREGORIAN_CUTOVER,
    JULIAN_DAY_OFFSET,
    NANOSECONDS_PER_DAY,
)
from .durations import toNanoseconds

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .durations import Duration


def validateCalendarDate(year: int, month: int, day: float) -> int:
    """Check the calendar date inputs and return the whole day of the month.

    Args:
        year (``int``): proleptic year, may be zero or negative
        month (``int``): month of the year (1-12)
        day (``float``): day of the month, only its integer part is used

    Raises:
        TypeError: if `year` or `month` is not an integer, or `day` is not a real number
        InvalidCalendarDateError: if `month` is outside (1-12) or `day` is negative/non-finite

    Returns:
        ``int``: integer part of `day`
    """
    for name, value in (("year", year), ("month", month)):
        if not isinstance(value, Integral) or isinstance(value, bool):
            supernovasLogError(f"Calendar {name} must be an integer, not {type(value)}")
            raise TypeError(type(value))

    if month > 12 or month < 1:
        supernovasLogError(f"Invalid calendar month: {month}")
        raise InvalidCalendarDateError("Month must be an integer (1-12).")

    if isinstance(day, Integral) and not isinstance(day, bool):
        day_of_month = int(day)
    elif isinstance(day, Real) and not isinstance(day, bool):
        if not isfinite(day):
            supernovasLogError(f"Invalid calendar day: {day}")
            raise InvalidCalendarDateError("Day must be a finite number.")
        day_of_month = int(floor(day))
    else:
        supernovasLogError(f"Calendar day must be a real number, not {type(day)}")
        raise TypeError(type(day))

    if day < 0:
        supernovasLogError(f"Invalid calendar day: {day}")
        raise InvalidCalendarDateError("Day must not be negative.")

    return day_of_month


def isGregorian(year: int, month: int, day: int) -> bool:
    """Whether the Gregorian correction applies to a calendar date.

    The cutover date itself still counts as a Julian calendar date.
    """
    return (year, month, day) > GREGORIAN_CUTOVER


def julianDateAtMidnight(year: int, month: int, day: float) -> Fraction:
    """Determine the exact Julian date at the start (00:00) of a calendar date.

    January and February are counted as months 13 & 14 of the previous year, which
    puts the leap day at the end of the counting year.

    Args:
        year (``int``): proleptic year, may be zero or negative
        month (``int``): month of the year (1-12)
        day (``float``): day of the month, only its integer part is used

    Returns:
        ``Fraction``: Julian date at midnight, always a whole number plus one half
    """
    day_of_month = validateCalendarDate(year, month, day)
    year, month = int(year), int(month)
    gregorian = isGregorian(year, month, day_of_month)

    if month <= 2:
        year -= 1
        month += 12

    gregorian_correction = 0
    if gregorian:
        century = year // 100
        gregorian_correction = 2 - century + century // 4

    # floor(365.25 * year), in exact integers. For negative years this is the same value as
    # the usual truncate(365.25 * year - 0.75) form.
    year_days = (1461 * year) // 4
    month_days = int(floor(DAYS_PER_MONTH_FACTOR * (month + 1)))

    whole_days = gregorian_correction + year_days + month_days + day_of_month
    return whole_days + Fraction(JULIAN_DAY_OFFSET)


def toJulianDayNumber(year: int, month: int, day: float, time_of_day: Duration = 0) -> int:
    """Convert a calendar date & time of day to an integer Julian day number.

    References:
        :cite:t:`duffett-smith_2011_practical`, Section 4

    Args:
        year (``int``): proleptic year, may be zero or negative
        month (``int``): month of the year (1-12)
        day (``float``): day of the month, only its integer part is used
        time_of_day (``timedelta64 | timedelta | int``, optional): time elapsed since midnight,
            must lie within [0, 1 day). Defaults to 0.

    Raises:
        InvalidCalendarDateError: if any of the inputs is out of range

    Returns:
        ``int``: the Julian date truncated toward zero
    """
    nanoseconds = toNanoseconds(time_of_day)
    if not 0 <= nanoseconds < NANOSECONDS_PER_DAY:
        supernovasLogError(f"Time of day of {nanoseconds} ns is outside of [0, 1 day)")
        raise InvalidCalendarDateError("Time of day must be within [0, 1 day).")

    julian_date = julianDateAtMidnight(year, month, day) + Fraction(nanoseconds, NANOSECONDS_PER_DAY)

    # int() on a Fraction truncates toward zero
    return int(julian_date)


def splitJulianDate(julian_date: Fraction) -> tuple[int, int]:
    """Split an exact Julian date into its whole day and nanoseconds past that day."""
    whole_day = julian_date.numerator // julian_date.denominator
    return whole_day, int((julian_date - whole_day) * NANOSECONDS_PER_DAY)
