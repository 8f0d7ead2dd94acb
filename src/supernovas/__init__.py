"""Main Module Documentation.

SUPERNOVAS provides a precise representation of astronomical time as a Julian date:
a continuously counted day number plus an exact sub-day offset, along with the
calendar conversions and carry-safe arithmetic needed to build, compare and advance
such dates.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Local Imports
from .physics.time import BasicJulianDate, JulianDate, toJulianDayNumber

__all__ = ["BasicJulianDate", "JulianDate", "toJulianDayNumber"]
