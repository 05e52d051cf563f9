# topmark:header:start
#
#   project      : CarbonCat
#   file         : logging.py
#   file_relpath : src/carboncat/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal diagnostics for CarbonCat.

Adds a TRACE level below DEBUG (used for per-chunk engine events), a logger
class exposing ``.trace()``, and a yachalk formatter that colors records by
severity.

Records are written to standard error only; standard output is reserved for
the concatenated data. The level comes from the CLI, else from the
``CARBONCAT_LOG_LEVEL`` environment variable, else CRITICAL.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "CARBONCAT_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class CarboncatLogger(logging.Logger):
    """Logger with an extra ``trace()`` method for `TRACE_LEVEL` records."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(CarboncatLogger)


# Highest threshold first; the first one at or below the record level wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record according to its severity.

    Args:
        fmt (str): `logging` format string.
        colorize (bool): If False, records are returned unstyled.
    """

    def __init__(self, fmt: str, *, colorize: bool = True) -> None:
        super().__init__(fmt)
        self.colorize = colorize

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and apply the style of its level."""
        message = super().format(record)
        if not self.colorize:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def parse_log_level(value: str | None) -> int | None:
    """Parse a level name (``"TRACE"``, ``"debug"``) or a numeric string (``"10"``).

    Returns:
        int | None: The numeric level, or ``None`` when ``value`` is empty or unknown.
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``CARBONCAT_LOG_LEVEL``, or None if unset or unknown."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None, *, colorize: bool = True) -> None:
    """Install a single stderr handler on the root logger.

    Args:
        level (int | None): Root level; if None, the environment decides, then CRITICAL.
        colorize (bool): Whether records are styled with yachalk.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    fmt = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt, colorize=colorize))
    root_logger.addHandler(handler)


def get_logger(name: str) -> CarboncatLogger:
    """Return the `CarboncatLogger` called ``name`` (usually ``__name__``)."""
    return cast("CarboncatLogger", logging.getLogger(name))
