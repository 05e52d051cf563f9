# topmark:header:start
#
#   project      : CarbonCat
#   file         : console_api.py
#   file_relpath : src/carboncat/cli/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic console interface for diagnostics.

This protocol defines the small surface used by the CLI to emit user-facing
messages, separate from internal logging and from the data written to stdout.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a console used by the CLI."""

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
