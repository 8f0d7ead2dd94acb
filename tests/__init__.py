"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime
from pathlib import Path

# Third Party Imports
from numpy import timedelta64

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"

# Common dates
J2000_DATETIME = datetime(2000, 1, 1, 12)
J2000_JULIAN_DAY = 2451545

HALF_DAY = timedelta64(12, "h")
