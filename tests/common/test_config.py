from __future__ import annotations

# Standard Library Imports
import os
from logging import DEBUG, INFO

# Third Party Imports
import pytest

# SUPERNOVAS Imports
from supernovas.common.behavioral_config import BehavioralConfig, SubConfig

# Local Imports
from .. import FIXTURE_DATA_DIR

CONFIG_FILE_VALID: tuple[str, ...] = (
    "[logging]\n",
    "OutputLocation = ./logs/\n",
    "Level = INFO\n",
    "MaxFileSize = 2048\n",
    "MaxFileCount = 10\n",
    "[julian_date]\n",
    "DayType = int64\n",
    "FloatPrecision = float32\n",
)

CONFIG_FILE_BAD_DAY_TYPE: tuple[str, ...] = (
    "[julian_date]\n",
    "DayType = float64\n",
)

CONFIG_FILE_NARROW_PRECISION: tuple[str, ...] = (
    "[julian_date]\n",
    "FloatPrecision = float16\n",
)

CORRECT_DEFAULTS = {
    "logging": {
        "OutputLocation": "stdout",
        "Level": DEBUG,
        "MaxFileSize": 1048576,
        "MaxFileCount": 50,
        "AllowMultipleHandlers": False,
    },
    "julian_date": {
        "DayType": "int32",
        "FloatPrecision": "float64",
    },
}


def writeConfigFile(directory: str, lines: tuple[str, ...]) -> str:
    """Write `lines` to a config file inside `directory`, returning its path."""
    config_path = os.path.join(directory, "test.config")
    with open(config_path, "w", encoding="utf-8") as config_file:
        config_file.writelines(lines)

    return config_path


def testImported():
    """Test that the packaged config file results in the default values."""
    config = BehavioralConfig.getConfig()
    for section, section_conf in CORRECT_DEFAULTS.items():
        for option, value in section_conf.items():
            conf_section = getattr(config, section)
            assert getattr(conf_section, option) == value


def testSinglePattern():
    """Test that :class:`.BehavioralConfig` is a proper Singleton class."""
    config = BehavioralConfig.getConfig()
    assert config is BehavioralConfig.getConfig()


def testOverwrite():
    """Test overwriting the default :class:`.BehavioralConfig` directly with custom settings."""
    custom_config = BehavioralConfig.getConfig()
    custom_config.logging.Level = INFO
    custom_config.julian_date.DayType = "int64"

    second_config = BehavioralConfig.getConfig()
    assert second_config.logging.Level == INFO
    assert second_config.julian_date.DayType == "int64"
    assert custom_config is second_config


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testNonDefaultFile(datafiles):
    """Test overwriting the default :class:`.BehavioralConfig` with a custom config file."""
    file_config = BehavioralConfig(writeConfigFile(str(datafiles), CONFIG_FILE_VALID))

    assert file_config.logging.OutputLocation == "./logs/"
    assert file_config.logging.Level == INFO
    assert file_config.logging.MaxFileSize == 2048
    assert file_config.logging.MaxFileCount == 10
    assert file_config.julian_date.DayType == "int64"
    assert file_config.julian_date.FloatPrecision == "float32"

    # Options missing from the file keep their defaults
    assert file_config.logging.AllowMultipleHandlers is False

    # Constructing a config replaces the shared instance
    assert BehavioralConfig.getConfig() is file_config


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testBadDayType(datafiles):
    """Test that a non-integer day type is rejected."""
    with pytest.raises(ValueError, match="integer dtype"):
        BehavioralConfig(writeConfigFile(str(datafiles), CONFIG_FILE_BAD_DAY_TYPE))


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testNarrowFloatPrecision(datafiles):
    """Test that a float type too narrow to count a day in nanoseconds is rejected."""
    with pytest.raises(ValueError, match="cannot hold a day"):
        BehavioralConfig(writeConfigFile(str(datafiles), CONFIG_FILE_NARROW_PRECISION))


def testMissingFile(tmp_path):
    """Test that a missing config file falls back to the defaults."""
    config = BehavioralConfig(str(tmp_path / "missing.config"))
    assert config.julian_date.DayType == CORRECT_DEFAULTS["julian_date"]["DayType"]
    assert config.logging.Level == CORRECT_DEFAULTS["logging"]["Level"]


def testSubConfigSetOnce():
    """Test options of a config section can only be set once, even to a falsy value."""
    sub = SubConfig("julian_date")
    sub.setonce("Flag", False)

    with pytest.raises(AttributeError):
        sub.setonce("Flag", True)

    with pytest.raises(TypeError):
        SubConfig(3)
