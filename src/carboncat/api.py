# topmark:header:start
#
#   project      : CarbonCat
#   file         : api.py
#   file_relpath : src/carboncat/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for CarbonCat.

This module exposes a small, typed surface for programmatic use; the CLI is a
thin layer over the same engine.

Examples:
    ```python
    from carboncat.api import NumberingMode, Options, render

    options = Options().with_numbering(NumberingMode.ALL).with_show_ends()
    assert render(b"a\\nb\\n", options) == b"     1\\ta$\\n     2\\tb$\\n"
    ```
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any

from carboncat.config.io import load_merged
from carboncat.config.model import MutableOptions, Options
from carboncat.config.types import NumberingMode
from carboncat.core.errors import (
    CarboncatError,
    CatIOError,
    ConfigError,
    SourceError,
    SourceNotFoundError,
    SourceOpenError,
    SourcePermissionError,
)
from carboncat.engine.lines import LineEngine
from carboncat.engine.outcomes import RunReport, SourceOutcome, SourceStatus, TransferStats
from carboncat.engine.runner import CatSession, cat, cat_files
from carboncat.engine.state import EngineState

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

__all__ = [
    "CarboncatError",
    "CatIOError",
    "CatSession",
    "ConfigError",
    "EngineState",
    "NumberingMode",
    "Options",
    "RunReport",
    "SourceError",
    "SourceNotFoundError",
    "SourceOpenError",
    "SourceOutcome",
    "SourcePermissionError",
    "SourceStatus",
    "TransferStats",
    "cat",
    "cat_files",
    "render",
    "render_chunks",
    "resolve_options",
]


def render_chunks(chunks: Iterable[bytes], options: Options) -> bytes:
    """Run the engine over pre-split input and return the output.

    The result does not depend on how the input is split; this helper makes that
    property easy to exercise.

    Args:
        chunks (Iterable[bytes]): Consecutive pieces of one logical input.
        options (Options): Frozen formatting options.

    Returns:
        bytes: The rendered output.
    """
    out = io.BytesIO()
    if options.can_write_fast():
        for chunk in chunks:
            out.write(chunk)
        return out.getvalue()
    engine = LineEngine(options, out)
    for chunk in chunks:
        engine.feed(chunk)
    engine.finish()
    return out.getvalue()


def render(data: bytes, options: Options) -> bytes:
    """Render an in-memory input.

    Args:
        data (bytes): Input bytes.
        options (Options): Frozen formatting options.

    Returns:
        bytes: The rendered output.
    """
    out = io.BytesIO()
    cat(io.BytesIO(data), out, options)
    return out.getvalue()


def resolve_options(
    *,
    config_files: Iterable[Path] = (),
    overrides: Mapping[str, Any] | None = None,
) -> Options:
    """Build frozen options from config files and a mapping of field overrides.

    Precedence (lowest first): defaults, config files in order, ``overrides``.

    Args:
        config_files (Iterable[Path]): TOML files to merge.
        overrides (Mapping[str, Any] | None): Values keyed like the TOML table
            (``number``, ``show_ends``, ...).

    Returns:
        Options: The resolved snapshot.

    Raises:
        ConfigError: If a config file or an override is invalid.
    """
    merged: MutableOptions = load_merged(config_files)
    if overrides:
        merged = merged.merge_with(MutableOptions.from_toml_table(overrides, source="<overrides>"))
    return merged.freeze()
