# topmark:header:start
#
#   project      : CarbonCat
#   file         : __init__.py
#   file_relpath : src/carboncat/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CarbonCat CLI package.

This package holds the Click command definition and its supporting utilities.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        carboncat = "carboncat.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main at module import time
