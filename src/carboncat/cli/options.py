# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/carboncat/cli/options.py
#   project      : CarbonCat
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based CarbonCat command.

This module centralizes the ``cat`` formatting flags and the ambient options
(logging verbosity, diagnostics color, config files) together with their
resolution logic, so the command body can stay thin.

Short flags follow ``cat``: ``-v`` means ``--show-nonprinting``, so logging
verbosity is only available as the long ``--verbose``/``--quiet`` options.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from carboncat.cli.errors import CarboncatUsageError
from carboncat.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings: ``-h`` is left free, as in ``cat``.
CONTEXT_SETTINGS = {
    "help_option_names": ["--help"],
}


class ColorMode(str, Enum):
    """User intent for colorized diagnostics."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_log_level(verbose_count: int, quiet: bool) -> int | None:
    """Resolve the logging level requested on the command line.

    Args:
        verbose_count: Number of times ``--verbose`` is passed.
        quiet: Whether ``--quiet`` is passed.

    Returns:
        The logging level, or ``None`` when neither option is given (the
        environment or the default applies).

    Raises:
        CarboncatUsageError: If both verbose and quiet are used simultaneously.

    Behavior:
        Three or more ``--verbose`` set TRACE, two set DEBUG, one sets INFO.
        ``--quiet`` keeps only CRITICAL records.
    """
    if verbose_count > 0 and quiet:
        raise CarboncatUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet:
        return logging.CRITICAL
    return None


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stderr_isatty: bool | None = None,
) -> bool:
    """Determine whether colored diagnostics should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stderr_isatty: Whether stderr is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stderr is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stderr_isatty is None:
        try:
            stderr_isatty = sys.stderr.isatty()
        except (AttributeError, ValueError):
            stderr_isatty = False
    return bool(stderr_isatty)


def cat_formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the classic ``cat`` formatting flags to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    # Applied bottom-up, so list them in reverse of the help order.
    f = click.option(
        "-v",
        "--show-nonprinting",
        is_flag=True,
        help="Use ^ and M- notation, except for LFD and TAB.",
    )(f)
    f = click.option("-u", "u", is_flag=True, help="(ignored)")(f)
    f = click.option(
        "-T",
        "--show-tabs",
        is_flag=True,
        help="Display TAB characters as ^I.",
    )(f)
    f = click.option("-t", "t", is_flag=True, help="Equivalent to -vT.")(f)
    f = click.option(
        "-s",
        "--squeeze-blank",
        is_flag=True,
        help="Suppress repeated empty output lines.",
    )(f)
    f = click.option("-n", "--number", is_flag=True, help="Number all output lines.")(f)
    f = click.option(
        "-E",
        "--show-ends",
        is_flag=True,
        help="Display $ at end of each line.",
    )(f)
    f = click.option("-e", "e", is_flag=True, help="Equivalent to -vE.")(f)
    f = click.option(
        "-b",
        "--number-nonblank",
        is_flag=True,
        help="Number nonempty output lines, overrides -n.",
    )(f)
    f = click.option("-A", "--show-all", is_flag=True, help="Equivalent to -vET.")(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the repeatable ``--config`` option to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=str),
        help="Read option defaults from a TOML file (repeatable, last wins).",
    )(f)
    return f


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with logging options added.
    """
    f = click.option(
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "--quiet",
        is_flag=True,
        help="Silence internal logging.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color diagnostics: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable colored diagnostics (equivalent to --color=never).",
    )(f)
    return f
