from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# SUPERNOVAS Imports
from supernovas.common.behavioral_config import BehavioralConfig

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _resetBehavioralConfig() -> Iterator[None]:
    """Make sure every test starts from, and leaves behind, the default configuration.

    Note:
        Tests are free to modify the shared config, or load a custom config file, because
        constructing a new :class:`.BehavioralConfig` replaces the shared instance.
    """
    BehavioralConfig()
    yield
    BehavioralConfig()


@pytest.fixture(name="small_day_type")
def setSmallDayType() -> str:
    """Shrink the configured Julian day type so overflow is easy to reach."""
    BehavioralConfig.getConfig().julian_date.DayType = "int8"
    return "int8"
