# topmark:header:start
#
#   project      : CarbonCat
#   file         : sources.py
#   file_relpath : src/carboncat/engine/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Open named sources for reading.

This is the file-opening collaborator of the engine: it maps a source name to a
binary stream, with ``-`` standing for standard input, and translates open-time
`OSError`s into `carboncat.core.errors.SourceError` subclasses so that a missing
source is reported distinctly from other failures.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, BinaryIO

from carboncat.config.logging import get_logger
from carboncat.constants import STDIN_NAME
from carboncat.core.errors import SourceNotFoundError, SourceOpenError, SourcePermissionError

if TYPE_CHECKING:
    from carboncat.config.logging import CarboncatLogger

logger: CarboncatLogger = get_logger(__name__)


def is_stdin_name(name: str) -> bool:
    """Return True if ``name`` designates standard input."""
    return name == STDIN_NAME


def open_source(name: str, *, stdin: BinaryIO | None = None) -> BinaryIO:
    """Open the source called ``name`` as a binary stream.

    Args:
        name (str): Path of the source, or ``-`` for standard input.
        stdin (BinaryIO | None): Stream returned for ``-``; defaults to the
            process standard input.

    Returns:
        BinaryIO: A readable binary stream. The caller closes it unless it is
            the standard input stream.

    Raises:
        SourceNotFoundError: If the path does not exist.
        SourcePermissionError: If the path may not be read.
        SourceOpenError: For any other open-time failure (e.g. a directory).
    """
    if is_stdin_name(name):
        return stdin if stdin is not None else sys.stdin.buffer

    try:
        return open(name, "rb")  # noqa: SIM115 - closed by the caller
    except FileNotFoundError as exc:
        logger.debug("Source not found: %s (%s)", name, exc)
        raise SourceNotFoundError(name) from exc
    except PermissionError as exc:
        logger.debug("Source not readable: %s (%s)", name, exc)
        raise SourcePermissionError(name) from exc
    except OSError as exc:
        logger.debug("Cannot open source %s: %s", name, exc)
        raise SourceOpenError(name, exc.strerror or str(exc)) from exc
