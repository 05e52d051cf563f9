# topmark:header:start
#
#   project      : CarbonCat
#   file         : __init__.py
#   file_relpath : src/carboncat/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across CarbonCat.

Included modules:

- ``errors``
  The exception hierarchy raised by the engine, the source opener and the
  config loader.

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``
  where practical.

This package is free of UI dependencies and side effects.
"""

from __future__ import annotations
