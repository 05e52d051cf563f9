# topmark:header:start
#
#   project      : CarbonCat
#   file         : errors.py
#   file_relpath : src/carboncat/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the CarbonCat engine and its collaborators.

These exceptions are framework-agnostic: they carry no Click or console
dependencies. The CLI maps them onto `carboncat.cli.errors` exceptions and
exit codes.

Hierarchy:
    - `CarboncatError`
        - `CatIOError`: the single engine-level failure (read or write side).
        - `SourceError`: open-time failures reported by the source opener.
            - `SourceNotFoundError`
            - `SourcePermissionError`
            - `SourceOpenError`
        - `ConfigError`: unreadable or invalid configuration files.
"""

from __future__ import annotations


class CarboncatError(Exception):
    """Base class for all CarbonCat errors."""


class CatIOError(CarboncatError):
    """An I/O failure while transferring bytes from a source to the sink.

    The engine does not distinguish read-side from write-side failures; the
    original `OSError` is available as ``__cause__`` and as `os_error`.

    Args:
        os_error (OSError): The underlying I/O fault.
    """

    def __init__(self, os_error: OSError) -> None:
        super().__init__(os_error.strerror or str(os_error))
        self.os_error = os_error


class SourceError(CarboncatError):
    """A named source could not be opened.

    Args:
        name (str): The source name as given by the caller (``-`` for stdin).
        reason (str): Human-readable reason.
    """

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


class SourceNotFoundError(SourceError):
    """The named source does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "No such file or directory")


class SourcePermissionError(SourceError):
    """The named source exists but may not be read."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "Permission denied")


class SourceOpenError(SourceError):
    """Any other open-time failure (e.g. the name is a directory)."""


class ConfigError(CarboncatError):
    """A configuration file is unreadable, malformed, or holds invalid values."""
