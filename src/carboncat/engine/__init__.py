# topmark:header:start
#
#   project      : CarbonCat
#   file         : __init__.py
#   file_relpath : src/carboncat/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The CarbonCat transformation engine.

Modules:
    - ``render``: per-mode body-byte renderers (verbatim, tab-marking, non-printing).
    - ``state``: `EngineState`, the cursor state carried across chunks and sources.
    - ``lines``: `LineEngine`, the annotated line state machine.
    - ``runner``: fast copy, single-source `cat`, multi-source `CatSession` and `cat_files`.
    - ``sources``: the source opener (``-`` is standard input).
    - ``outcomes``: typed results.
"""

from __future__ import annotations

from carboncat.engine.lines import LineEngine
from carboncat.engine.outcomes import RunReport, SourceOutcome, SourceStatus, TransferStats
from carboncat.engine.runner import CatSession, cat, cat_files
from carboncat.engine.state import EngineState

__all__ = [
    "CatSession",
    "EngineState",
    "LineEngine",
    "RunReport",
    "SourceOutcome",
    "SourceStatus",
    "TransferStats",
    "cat",
    "cat_files",
]
