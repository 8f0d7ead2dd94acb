"""Defines the :class:`.JulianDate` & :class:`.BasicJulianDate` classes.

:class:`.JulianDate` is the primary representation: a whole Julian day number plus the
time elapsed within that day, counted in integer nanoseconds. Because the fractional
part is never folded into a single floating point number, repeatedly adding small
durations does not lose precision no matter how large the day number is.

:class:`.BasicJulianDate` stores the whole date as one numpy floating point scalar. It
exists for interfaces that want a plain "Julian date number", and is a lower precision
convenience type.

.. code-block:: python

    from numpy import timedelta64

    julian_date = JulianDate.fromCalendarDate(2021, 6, 3)
    later = julian_date + timedelta64(90, "m")

    assert later > julian_date
    assert later.day == julian_date.day
"""

from __future__ import annotations

# Standard Library Imports
from fractions import Fraction
from functools import total_ordering
from numbers import Integral, Real
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import datetime64, dtype, finfo, floating, isfinite, issubdtype, timedelta64

# Local Imports
from ...common.behavioral_config import BehavioralConfig
from ...common.exceptions import NonFiniteJulianDateError
from ...common.logger import supernovasLogError, supernovasLogWarning
from ..constants import HALF_DAY_NS, NANOSECONDS_PER_DAY, UNIX_EPOCH_JULIAN_DAY
from .calendar import julianDateAtMidnight, splitJulianDate
from .durations import (
    DURATION_TYPES,
    normalizeTimeOfDay,
    toEpochNanoseconds,
    toNanoseconds,
    toTimedelta64,
)

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy import floating as FloatingScalar
    from numpy.typing import DTypeLike

    # Local Imports
    from .durations import Duration, TimePoint


def _exactFraction(value: Real) -> Fraction:
    """Convert python or numpy real numbers to an exact :class:`.Fraction`."""
    if isinstance(value, Integral):
        return Fraction(int(value))

    return Fraction(*value.as_integer_ratio())


def _checkFinite(value: Real) -> None:
    """Reject NaN and infinite Julian date values."""
    if not isfinite(value):
        supernovasLogError(f"Julian date must be finite, got {value}")
        raise NonFiniteJulianDateError(value)


@total_ordering
class JulianDate:
    """Julian date stored as a whole day number and a nanosecond time of day.

    The time of day is always normalized into [0, 1 day): construction and arithmetic
    carry whole days into, or borrow them from, :attr:`.day`. Values are immutable;
    ordering is by day first, then by time of day.
    """

    __slots__ = ("_day", "_time_of_day")

    # Let numpy hand mixed arithmetic back to this class instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, day: int = 0, time_of_day: Duration = 0):
        """Construct a Julian date from a day number and a time offset.

        Args:
            day (``int``, optional): whole Julian day number. Defaults to 0.
            time_of_day (``timedelta64 | timedelta | int``, optional): time since the start of
                `day`, integers are nanoseconds. Any sign and magnitude is allowed. Defaults to 0.

        Raises:
            JulianDateOverflowError: if the normalized day leaves the configured day range
        """
        self._day, self._time_of_day = normalizeTimeOfDay(day, time_of_day)

    @classmethod
    def fromCalendarDate(cls, year: int, month: int, day: float, time_of_day: Duration = 0) -> JulianDate:
        """Construct the Julian date of a proleptic Gregorian/Julian calendar date.

        Args:
            year (``int``): proleptic year, may be zero or negative
            month (``int``): month of the year (1-12)
            day (``float``): day of the month, only its integer part is used
            time_of_day (``timedelta64 | timedelta | int``, optional): time since midnight.
                Whole days in excess are carried into the date. Defaults to 0.

        Returns:
            :class:`.JulianDate`: corresponding Julian date
        """
        whole_day, since_noon = splitJulianDate(julianDateAtMidnight(year, month, day))
        return cls(whole_day, since_noon + toNanoseconds(time_of_day))

    @classmethod
    def fromTimePoint(cls, time_point: TimePoint) -> JulianDate:
        """Construct a Julian date from a clock time point.

        Args:
            time_point (``datetime64 | datetime | date``): point in time, naive values are UTC

        Returns:
            :class:`.JulianDate`: corresponding Julian date
        """
        return cls(UNIX_EPOCH_JULIAN_DAY, HALF_DAY_NS + toEpochNanoseconds(time_point))

    @classmethod
    def fromJulianDateNumber(cls, julian_date: Real) -> JulianDate:
        """Construct a Julian date from a single real number.

        Integers give a time of day of zero. The fraction of a floating point value is
        rounded to the nearest nanosecond.

        Raises:
            NonFiniteJulianDateError: if `julian_date` is NaN or infinite
        """
        if isinstance(julian_date, bool) or not isinstance(julian_date, Real):
            supernovasLogError(f"Julian date number must be real, not {type(julian_date)}")
            raise TypeError(type(julian_date))

        if isinstance(julian_date, Integral):
            return cls(int(julian_date))

        _checkFinite(julian_date)
        exact = _exactFraction(julian_date)
        whole_day = exact.numerator // exact.denominator

        return cls(whole_day, round((exact - whole_day) * NANOSECONDS_PER_DAY))

    @property
    def day(self) -> int:
        """``int``: whole Julian day number."""
        return self._day

    @property
    def time_of_day(self) -> timedelta64:
        """``timedelta64``: time elapsed within :attr:`.day`, in nanoseconds."""
        return timedelta64(self._time_of_day, "ns")

    def increment(self) -> JulianDate:
        """Return the date exactly one day later, with the same time of day."""
        return JulianDate(self._day + 1, self._time_of_day)

    def decrement(self) -> JulianDate:
        """Return the date exactly one day earlier, with the same time of day."""
        return JulianDate(self._day - 1, self._time_of_day)

    def postIncrement(self) -> tuple[JulianDate, JulianDate]:
        """Advance by one day, returning both the original and the advanced date."""
        return self, self.increment()

    def postDecrement(self) -> tuple[JulianDate, JulianDate]:
        """Back up by one day, returning both the original and the earlier date."""
        return self, self.decrement()

    def __add__(self, duration: Duration) -> JulianDate:
        """Advance this date by a signed duration."""
        if not isinstance(duration, DURATION_TYPES):
            return NotImplemented
        return JulianDate(self._day, self._time_of_day + toNanoseconds(duration))

    __radd__ = __add__

    def __sub__(self, other):
        """Back up this date by a duration, or find the time elapsed since another date."""
        if isinstance(other, JulianDate):
            elapsed = (self._day - other._day) * NANOSECONDS_PER_DAY
            return toTimedelta64(elapsed + self._time_of_day - other._time_of_day)

        if not isinstance(other, DURATION_TYPES):
            return NotImplemented
        return JulianDate(self._day, self._time_of_day - toNanoseconds(other))

    def _key(self) -> tuple[int, int]:
        return self._day, self._time_of_day

    def __eq__(self, other):
        """Dates are equal when both the day and the time of day match."""
        if not isinstance(other, JulianDate):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        """Order by day, then by time of day."""
        if not isinstance(other, JulianDate):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        """Hash on the normalized (day, time of day) pair."""
        return hash(self._key())

    def __float__(self):
        """Julian date as a single (lossy) python float."""
        return self._day + self._time_of_day / NANOSECONDS_PER_DAY

    def toBasicJulianDate(self, precision: DTypeLike = None) -> BasicJulianDate:
        """Convert to a single-scalar :class:`.BasicJulianDate` of the given precision."""
        precision = BasicJulianDate.getPrecision(precision)
        return BasicJulianDate(
            precision(self._day) + precision(self._time_of_day) / precision(NANOSECONDS_PER_DAY),
            precision,
        )

    def toDatetime64(self) -> datetime64:
        """Convert back to a clock time point, the inverse of :meth:`.fromTimePoint`.

        Raises:
            JulianDateOverflowError: if the date is out of range for ``datetime64[ns]``
        """
        since_epoch = (self._day - UNIX_EPOCH_JULIAN_DAY) * NANOSECONDS_PER_DAY
        offset = toTimedelta64(since_epoch + self._time_of_day - HALF_DAY_NS)
        return datetime64(0, "ns") + offset

    def __repr__(self):
        """Return a string representation of this :class:`.JulianDate`."""
        return f"JulianDate(day={self._day}, time_of_day={self._time_of_day} ns)"


@total_ordering
class BasicJulianDate:
    """Julian date stored as a single numpy floating point scalar.

    Note:
        All of the magnitude sits in one number, so the resolution of the time of day
        shrinks as the day number grows (a ``float32`` cannot tell noon from midnight
        near the current epoch). Callers doing many accumulated operations should use
        :class:`.JulianDate` instead.
    """

    __slots__ = ("_value",)

    __array_ufunc__ = None

    def __init__(self, value: Real = 0.0, precision: DTypeLike = None):
        """Construct a Julian date from a raw real value.

        Args:
            value (``float``, optional): Julian date number. Defaults to 0.0.
            precision (``DTypeLike``, optional): numpy floating dtype to store `value` as.
                Defaults to the ``[julian_date] FloatPrecision`` config value.

        Raises:
            TypeError: if `value` is not a real number
            NonFiniteJulianDateError: if `value` is NaN or infinite at this precision
        """
        if isinstance(value, bool) or not isinstance(value, Real):
            supernovasLogError(f"Julian date value must be real, not {type(value)}")
            raise TypeError(type(value))

        precision = self.getPrecision(precision)
        value = precision(value)
        _checkFinite(value)
        self._value = value

    @staticmethod
    def getPrecision(precision: DTypeLike = None) -> type[FloatingScalar]:
        """Resolve `precision` to a numpy floating scalar type, using the config by default.

        The type must be able to hold the number of nanoseconds in a day, which rules out ``float16``.
        """
        if precision is None:
            precision = BehavioralConfig.getConfig().julian_date.FloatPrecision

        scalar_type = dtype(precision).type
        if not issubdtype(scalar_type, floating):
            supernovasLogError(f"BasicJulianDate precision must be a floating type, not {precision!r}")
            raise TypeError(precision)

        if finfo(scalar_type).max < NANOSECONDS_PER_DAY:
            supernovasLogError(f"BasicJulianDate precision {precision!r} cannot hold a day in nanoseconds")
            raise TypeError(precision)

        return scalar_type

    @classmethod
    def fromTimePoint(cls, time_point: TimePoint, precision: DTypeLike = None) -> BasicJulianDate:
        """Construct a Julian date from a clock time point, relative to the Unix epoch."""
        return JulianDate.fromTimePoint(time_point).toBasicJulianDate(precision)

    @property
    def value(self) -> FloatingScalar:
        """``numpy.floating``: raw Julian date number."""
        return self._value

    @property
    def precision(self) -> type[FloatingScalar]:
        """``type``: numpy floating scalar type used for :attr:`.value`."""
        return type(self._value)

    def _shifted(self, nanoseconds: int) -> BasicJulianDate:
        precision = self.precision
        delta = precision(nanoseconds) / precision(NANOSECONDS_PER_DAY)
        shifted = self._value + delta
        if delta != 0 and shifted == self._value:
            supernovasLogWarning(
                f"Shift of {nanoseconds} ns is below the resolution of {precision.__name__} at {self._value}",
            )

        return BasicJulianDate(shifted, precision)

    def __add__(self, duration: Duration) -> BasicJulianDate:
        """Advance this date by a signed duration, at the working precision."""
        if not isinstance(duration, DURATION_TYPES):
            return NotImplemented
        return self._shifted(toNanoseconds(duration))

    __radd__ = __add__

    def __sub__(self, duration: Duration) -> BasicJulianDate:
        """Back up this date by a signed duration, at the working precision."""
        if not isinstance(duration, DURATION_TYPES):
            return NotImplemented
        return self._shifted(-toNanoseconds(duration))

    def __eq__(self, other):
        """."""
        if not isinstance(other, BasicJulianDate):
            return NotImplemented
        return bool(self._value == other._value)

    def __lt__(self, other):
        """."""
        if not isinstance(other, BasicJulianDate):
            return NotImplemented
        return bool(self._value < other._value)

    def __hash__(self):
        """Override hash to return just the float representation of the class."""
        return hash(self._value)

    def __float__(self):
        """."""
        return float(self._value)

    def toJulianDate(self) -> JulianDate:
        """Convert to the fixed point :class:`.JulianDate`."""
        return JulianDate.fromJulianDateNumber(self._value)

    def __repr__(self):
        """Return a string representation of this :class:`.BasicJulianDate`."""
        return f"BasicJulianDate({self._value!r}, precision={self.precision.__name__})"
