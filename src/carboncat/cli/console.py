# topmark:header:start
#
#   project      : CarbonCat
#   file         : console.py
#   file_relpath : src/carboncat/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console for user-facing diagnostics.

Standard output carries the concatenated data, so every console message goes
to standard error. Use this for messages intended for end users, while
reserving `logging` for internal diagnostics.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from carboncat.cli.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Diagnostics console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        err (TextIO | None): Stream for diagnostics. Defaults to `sys.stderr`.
    """

    enable_color: bool
    err: TextIO

    def __init__(self, *, enable_color: bool = True, err: TextIO | None = None) -> None:
        self.enable_color = enable_color
        self.err = err or sys.stderr

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.err, color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged if color is disabled.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments supported by `click.style`
                (``fg``, ``bg``, ``bold``, ...).

        Returns:
            str: The styled text.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
