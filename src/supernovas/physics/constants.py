"""Global time & physics constants.

This module holds all constants that are used in various places across the
codebase, allowing for a consistent place to store them. Constants specific
to objects and classes remain in those files.

References:
    :cite:t:`duffett-smith_2011_practical`, Section 4
"""

from __future__ import annotations

# Conversion constants
DAYS2SEC = 24 * 3600
SEC2NS = 1_000_000_000
NANOSECONDS_PER_DAY = DAYS2SEC * SEC2NS
"""``int``: exact number of nanoseconds in one (non leap-second) day."""

HALF_DAY_NS = NANOSECONDS_PER_DAY // 2
"""``int``: Julian days begin at noon, calendar days at midnight."""

# Julian date reference points
UNIX_EPOCH_JULIAN_DATE = 2440587.5
"""``float``: Julian date of 1970-01-01T00:00:00 UTC."""

UNIX_EPOCH_JULIAN_DAY = 2440587
"""``int``: whole Julian day containing the Unix epoch."""

GREGORIAN_CUTOVER: tuple[int, int, int] = (1582, 10, 15)
"""``tuple``: (year, month, day) after which the Gregorian correction applies."""

# Calendar formula terms, :cite:t:`duffett-smith_2011_practical`
JULIAN_DAY_OFFSET = 1720994.5
DAYS_PER_MONTH_FACTOR = 30.6001

# Physics constants
SPEED_OF_LIGHT = 299792458.0
"""``float``: speed of light in vacuum (m/s), exact by definition of the metre."""
