"""Contains all the custom-defined exceptions used in SUPERNOVAS."""

from __future__ import annotations


class JulianDateOverflowError(OverflowError):
    """Exception indicating a Julian day count left the range of the configured day type."""


class InvalidCalendarDateError(ValueError):
    """Exception indicating a calendar date that cannot be converted to a Julian day number."""


class NonFiniteJulianDateError(ValueError):
    """Exception indicating a NaN or infinite value was used as a Julian date."""
