# topmark:header:start
#
#   project      : CarbonCat
#   file         : __init__.py
#   file_relpath : src/carboncat/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for CarbonCat.

Re-exports the immutable `Options` snapshot, its `MutableOptions` builder and
the `NumberingMode`/`RenderMode` enums. TOML loading lives in
`carboncat.config.io` and logging setup in `carboncat.config.logging`.
"""

from __future__ import annotations

from carboncat.config.model import MutableOptions, Options
from carboncat.config.types import NumberingMode, RenderMode

__all__ = [
    "MutableOptions",
    "NumberingMode",
    "Options",
    "RenderMode",
]
