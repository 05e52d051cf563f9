# topmark:header:start
#
#   project      : CarbonCat
#   file         : types.py
#   file_relpath : src/carboncat/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `ArgsLike`: structural mapping type for CLI/API argument dicts.
    - `NumberingMode`: when a line-number prefix is emitted.
    - `RenderMode`: which body-byte renderer the line engine uses.
"""

from __future__ import annotations

# For runtime type checks, prefer collections.abc
from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class NumberingMode(str, Enum):
    """Line numbering modes.

    Attributes:
        NONE: Do not number lines.
        NON_EMPTY: Number non-empty lines only (``cat -b``).
        ALL: Number all lines, blank ones included (``cat -n``).
    """

    NONE = "none"
    NON_EMPTY = "nonblank"
    ALL = "all"

    @classmethod
    def from_name(cls, key_name: str | None) -> NumberingMode | None:
        """Parse a numbering mode name, case-insensitively.

        Accepts the enum values plus the spellings ``non-empty`` and ``nonempty``.

        Args:
            key_name (str | None): The name to parse.

        Returns:
            NumberingMode | None: The matching mode, or ``None`` if unknown.
        """
        if key_name is None:
            return None
        key = key_name.strip().lower().replace("_", "-")
        if key in ("non-empty", "nonempty", "non-blank"):
            return cls.NON_EMPTY
        for mode in cls:
            if mode.value == key:
                return mode
        return None


class RenderMode(Enum):
    """Body-byte rendering modes, in order of precedence."""

    NONPRINTING = "nonprinting"
    TABS = "tabs"
    VERBATIM = "verbatim"
