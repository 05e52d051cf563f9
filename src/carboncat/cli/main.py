# topmark:header:start
#
#   project      : CarbonCat
#   file         : main.py
#   file_relpath : src/carboncat/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``carboncat`` command: concatenate sources to standard output.

Key ideas:
- Shared state (console, log level, color) is initialized once and placed into ``ctx.obj``.
- Options are layered: defaults, ``--config`` files, then the ``cat`` flags.
- Sources that cannot be opened are reported on stderr and skipped; the exit
  code reflects the first failure. A transfer I/O failure aborts the run.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, cast

import click

from carboncat.cli.console import ClickConsole
from carboncat.cli.errors import CarboncatConfigError, CarboncatIOError
from carboncat.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    cat_formatting_options,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_log_level,
)
from carboncat.config.io import load_merged
from carboncat.config.logging import get_logger, resolve_env_log_level, setup_logging
from carboncat.config.model import MutableOptions
from carboncat.constants import CARBONCAT_VERSION, PROGRAM_NAME
from carboncat.core.errors import CatIOError, ConfigError
from carboncat.core.exit_codes import ExitCode
from carboncat.engine.outcomes import SourceStatus
from carboncat.engine.runner import cat_files

if TYPE_CHECKING:
    from carboncat.cli.console_api import ConsoleLike
    from carboncat.config.logging import CarboncatLogger
    from carboncat.config.model import Options
    from carboncat.engine.outcomes import RunReport, SourceOutcome

logger: CarboncatLogger = get_logger(__name__)

_EXIT_CODE_BY_STATUS: dict[SourceStatus, ExitCode] = {
    SourceStatus.NOT_FOUND: ExitCode.FILE_NOT_FOUND,
    SourceStatus.PERMISSION_DENIED: ExitCode.PERMISSION_DENIED,
    SourceStatus.UNREADABLE: ExitCode.IO_ERROR,
}


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: bool,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``--verbose`` flags.
        quiet (bool): Whether ``--quiet`` was passed.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    level_cli = resolve_log_level(verbose, quiet)
    log_level = level_cli if level_cli is not None else resolve_env_log_level()
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level, colorize=enable_color)

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def resolve_options(
    *,
    config_files: tuple[str, ...],
    flags: dict[str, bool],
) -> Options:
    """Merge config files and command-line flags into frozen options.

    Raises:
        CarboncatConfigError: If a config file is unreadable or invalid.
    """
    try:
        merged: MutableOptions = load_merged(Path(p) for p in config_files)
    except ConfigError as exc:
        raise CarboncatConfigError(f"{PROGRAM_NAME}: {exc}") from exc
    options: Options = merged.merge_with(MutableOptions.from_cli_args(flags)).freeze()
    logger.debug("Resolved options: %s", options)
    return options


def report_source_failure(console: ConsoleLike, outcome: SourceOutcome) -> None:
    """Print ``carboncat: NAME: REASON`` for a source that could not be opened."""
    if outcome.ok:
        return
    console.error(
        f"{console.styled(PROGRAM_NAME, fg='bright_green')}: "
        f"{console.styled(outcome.name, fg='bright_yellow')}: "
        f"{console.styled(outcome.reason or outcome.status.value, fg='bright_blue')}"
    )


def open_standard_streams() -> tuple[BinaryIO, BinaryIO]:
    """Return the process standard output and standard input as binary streams.

    Both are wrapped by Click so that leaving the command never closes them.
    """
    stdout = cast("BinaryIO", click.open_file("-", "wb"))
    stdin = cast("BinaryIO", click.open_file("-", "rb"))
    return stdout, stdin


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush does not fail again."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        logger.debug("Cannot redirect stdout to %s", os.devnull)


@click.command(
    name=PROGRAM_NAME,
    context_settings=CONTEXT_SETTINGS,
    help=(
        "Concatenate FILE(s) to standard output.\n\n"
        "With no FILE, or when FILE is -, read standard input."
    ),
    epilog=(
        "\b\nExamples:\n"
        f"  {PROGRAM_NAME} f - g  Output f's contents, then standard input, then g's contents.\n"
        f"  {PROGRAM_NAME}        Copy standard input to standard output."
    ),
)
@cat_formatting_options
@common_config_options
@common_verbose_options
@common_color_options
@click.version_option(
    CARBONCAT_VERSION,
    "--version",
    prog_name=PROGRAM_NAME,
    message="%(prog)s v%(version)s",
)
@click.argument("files", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    show_all: bool,
    number_nonblank: bool,
    e: bool,
    show_ends: bool,
    number: bool,
    squeeze_blank: bool,
    t: bool,
    show_tabs: bool,
    u: bool,
    show_nonprinting: bool,
    config_files: tuple[str, ...],
    verbose: int,
    quiet: bool,
    color_mode: str | None,
    no_color: bool,
    files: tuple[str, ...],
) -> None:
    """Entry point for the CarbonCat CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    options: Options = resolve_options(
        config_files=config_files,
        flags={
            "show_all": show_all,
            "number_nonblank": number_nonblank,
            "e": e,
            "show_ends": show_ends,
            "number": number,
            "squeeze_blank": squeeze_blank,
            "t": t,
            "show_tabs": show_tabs,
            "show_nonprinting": show_nonprinting,
        },
    )
    if u:
        logger.debug("-u is accepted for compatibility and ignored")

    stdout, stdin = open_standard_streams()

    try:
        report: RunReport = cat_files(
            files,
            stdout,
            options,
            stdin=stdin,
            on_outcome=lambda outcome: report_source_failure(console, outcome),
        )
    except CatIOError as exc:
        if isinstance(exc.os_error, BrokenPipeError):
            logger.debug("Output closed by the reader: %s", exc)
            _silence_stdout()
            ctx.exit(ExitCode.IO_ERROR)
        raise CarboncatIOError(f"{PROGRAM_NAME}: {exc}") from exc

    logger.info(
        "Processed %d source(s): %d bytes read, %d bytes written",
        len(report.outcomes),
        report.bytes_read,
        report.bytes_written,
    )
    first = report.first_failure
    if first is not None:
        ctx.exit(_EXIT_CODE_BY_STATUS.get(first.status, ExitCode.FAILURE))

