"""Defines the :class:`.Logger` class, and the one-liner helpers used for library log records."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

# Local Imports
from .behavioral_config import BehavioralConfig

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final

    # Local Imports
    from .behavioral_config import SubConfig


LIBRARY_LOGGER_NAME: Final[str] = "supernovas"
"""``str``: name of the logger every library log record is sent to."""

LOG_FORMAT: Final[str] = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"


def logFileName(name: str, created: datetime | None = None) -> str:
    """Name of the log file for logger `name`, stamped with its creation time.

    The stamp is an ISO 8601 time with colons swapped for dashes and the decimal point dropped,
    so it is valid on every file system, e.g. ``supernovas_2021-03-09T07-11-25865337.log``.
    """
    if created is None:
        created = datetime.now()
    stamp = created.isoformat().replace(":", "-").replace(".", "")
    return f"{name}_{stamp}.log"


class Logger:
    """Extended logger wraps the standard Python logging package.

    Output goes to ``stdout`` or to a rotating log file, as chosen by the ``[logging]``
    config section. Wrapping the default name also collects the errors that the Julian
    date types log right before raising.
    """

    def __init__(self, name=LIBRARY_LOGGER_NAME, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``string``, optional): Name of the the logger instance. Defaults to the library logger.
            level (``logging.LOG_LEVEL``): Determines what level of log messages are published
            path (``string``): directory to store the log file in, or ``"stdout"``
            allow_multiple_handlers (``bool``, optional): whether multiple log handlers are permitted
        """
        config = BehavioralConfig.getConfig().logging
        if not allow_multiple_handlers:
            allow_multiple_handlers = config.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = None
        if self.logger.handlers and allow_multiple_handlers is not True:
            return

        handler = self._createHandler(name, path or config.OutputLocation, config)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

        self.logger.setLevel(level or config.Level)
        self.logger.addHandler(handler)

    def _createHandler(self, name: str, path: str, config: SubConfig) -> logging.Handler:
        """Build a ``stdout`` handler, or a size-limited file handler inside `path`."""
        if path == "stdout":
            self.filename = "stdout"
            return logging.StreamHandler(sys.stdout)

        log_directory = Path(path)
        if not log_directory.exists():
            self.logger.info(f"Path did not exist: {path!r}. Creating path...")
            log_directory.mkdir(parents=True)

        self.filename = str(log_directory / logFileName(name))
        return RotatingFileHandler(
            self.filename,
            maxBytes=config.MaxFileSize,
            backupCount=config.MaxFileCount,
        )

    def __getattr__(self, name):
        """Forward everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _supernovasLog(message: str, level: int):
    """Log a message to the top-level log record.

    This provides a simple, easy one-liner that doesn't require pre-initializing a logger object.
    The primary use case is for validation functions that log right before raising.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    logger.log(msg=message, level=level)


def supernovasLogError(message: str):
    """Log a ERROR message to the top-level log record.

    See Also:
        :func:`._supernovasLog`
    """
    _supernovasLog(message, level=logging.ERROR)


def supernovasLogWarning(message: str):
    """Log a WARNING message to the top-level log record."""
    _supernovasLog(message, level=logging.WARNING)

