"""Contains classes and conversion functions for Julian dates.

The functions and class API are extremely straightforward to retain flexibility.
:class:`.JulianDate` is the canonical, fixed point representation, while
:class:`.BasicJulianDate` is a lower precision, single-scalar convenience type.
"""

from __future__ import annotations

# Local Imports
from .calendar import isGregorian, julianDateAtMidnight, toJulianDayNumber
from .conversions import (
    datetimeToJulianDate,
    getTargetJulianDate,
    julianDateToDatetime,
    unixTimeToJulianDate,
)
from .durations import ONE_DAY, normalizeTimeOfDay, toNanoseconds
from .stardate import BasicJulianDate, JulianDate

__all__ = [
    "ONE_DAY",
    "BasicJulianDate",
    "JulianDate",
    "datetimeToJulianDate",
    "getTargetJulianDate",
    "isGregorian",
    "julianDateAtMidnight",
    "julianDateToDatetime",
    "normalizeTimeOfDay",
    "toJulianDayNumber",
    "toNanoseconds",
    "unixTimeToJulianDate",
]
