"""Defines a global set of configurations that define how the library operates.

Every option has a default and a parser. The packaged ``default_behavior.config`` (or a
user supplied file) only needs to list the options it changes.

.. code-block:: ini

    [julian_date]
    DayType = int64
    FloatPrecision = longdouble
"""

from __future__ import annotations

# Standard Library Imports
from configparser import ConfigParser
from configparser import Error as ConfigError
from importlib import resources
from logging import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING
from pathlib import Path
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import dtype, finfo, floating, integer, issubdtype

# Local Imports
from ..physics.constants import NANOSECONDS_PER_DAY

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Any, Final


class SubConfig:
    """Class that represents a section in the configuration.

    Enforce improved config convention:
        `BehavioralConfig.section.value` rather than something like `BehavioralConfig["section"]["value"]`.
    """

    def __init__(self, section: str):
        """Instantiate a `SubConfig` object for the section named `section`."""
        if not isinstance(section, str):
            raise TypeError("Config section must be a string")
        self.section = section

    def setonce(self, name: str, value: Any):
        """Set an option of this `SubConfig`, raising an error if it was already set."""
        if name in vars(self):
            raise AttributeError(
                f"SubConfig {self.section!r} already has a value set for {name!r}:{getattr(self, name)!r}",
            )
        setattr(self, name, value)


class CustomConfigParser(ConfigParser):
    """Perform custom parsing operations on our custom config convention."""

    LOGGING_LEVELS: Final[dict[str, int]] = {
        "CRITICAL": CRITICAL,
        "ERROR": ERROR,
        "WARNING": WARNING,
        "INFO": INFO,
        "DEBUG": DEBUG,
        "NOTSET": NOTSET,
    }

    def getlogginglevel(self, section: str, option: str) -> int:
        """Return logging level for this config file."""
        return self.LOGGING_LEVELS.get(self.get(section, option), NOTSET)

    def getintegerdtype(self, section: str, option: str) -> str:
        """Return the name of a numpy integer dtype, e.g. ``int32``."""
        return self._getdtype(section, option, integer, "an integer")

    def getfloatingdtype(self, section: str, option: str) -> str:
        """Return the name of a numpy floating point dtype, e.g. ``float64``.

        The dtype must be wide enough to hold the number of nanoseconds in a day.
        """
        got = self._getdtype(section, option, floating, "a floating")
        if finfo(got).max < NANOSECONDS_PER_DAY:
            raise ValueError(f"Config option '{section}::{option}' cannot hold a day in nanoseconds: {got!r}")

        return got

    def _getdtype(self, section: str, option: str, kind: type, description: str) -> str:
        got = self.get(section, option).strip()
        if not issubdtype(dtype(got), kind):
            raise ValueError(f"Config option '{section}::{option}' must name {description} dtype: {got!r}")

        return got


class BehavioralConfig:
    """Singleton, config settings class.

    Constructing a new instance (e.g. from a different file) replaces the shared one
    returned by :meth:`.getConfig`.
    """

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    # section -> option -> (default, name of the `CustomConfigParser` getter)
    OPTIONS: Final[dict[str, dict[str, tuple[Any, str]]]] = {
        "logging": {
            "OutputLocation": ("stdout", "get"),
            "Level": (DEBUG, "getlogginglevel"),
            "MaxFileSize": (1048576, "getint"),
            "MaxFileCount": (50, "getint"),
            "AllowMultipleHandlers": (False, "getboolean"),
        },
        "julian_date": {
            "DayType": ("int32", "getintegerdtype"),
            "FloatPrecision": ("float64", "getfloatingdtype"),
        },
    }

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | None = None):
        """Initialize the configuration object.

        Args:
            config_file_path (``str``, optional): config file to read. Defaults to the packaged
                ``default_behavior.config``. A path that doesn't exist results in all defaults.

        Raises:
            ValueError: if an option can't be parsed into its type
        """
        self._parser = CustomConfigParser()

        if config_file_path is None:
            res = resources.files("supernovas.common").joinpath(self.DEFAULT_CONFIG_FILE)
            with resources.as_file(res) as res_filepath:
                self._readConfigFile(res_filepath)

        elif Path(config_file_path).exists():
            self._readConfigFile(config_file_path)

        for section, options in self.OPTIONS.items():
            sub = SubConfig(section)
            for option, (default, getter_name) in options.items():
                sub.setonce(option, self._parseOption(section, option, default, getter_name))

            setattr(self, section, sub)

        BehavioralConfig.__shared_inst = self

    def _readConfigFile(self, path: str | Path):
        with open(path, encoding="utf-8") as config_file:
            self._parser.read_file(config_file)

    def _parseOption(self, section: str, option: str, default: Any, getter_name: str) -> Any:
        """Parse a single option, falling back to `default` when it isn't in the file."""
        try:
            return getattr(self._parser, getter_name)(section, option)
        except ConfigError:
            return default

    @classmethod
    def getConfig(cls, config_file_path: str | None = None) -> BehavioralConfig:
        """Return a reference to the singleton shared config."""
        if cls.__shared_inst is None:
            cls.__shared_inst = BehavioralConfig(config_file_path=config_file_path)

        return cls.__shared_inst
