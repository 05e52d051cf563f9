# topmark:header:start
#
#   project      : CarbonCat
#   file         : state.py
#   file_relpath : src/carboncat/engine/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutable per-run state of the line engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EngineState:
    """Cursor state carried across read chunks and across sources of one run.

    An instance is owned by exactly one run and must never be shared between
    concurrent runs.

    Attributes:
        line_number (int): Number of line-number prefixes emitted so far.
        at_line_start (bool): Whether the next byte written begins a new output line.
        pending_carriage_return (bool): A ``\\r`` was read but not written yet; its
            rendering depends on the byte that follows it.
        blank_line_already_emitted (bool): The most recent output line was blank,
            so squeeze-blank suppresses further blank lines.
    """

    line_number: int = 0
    at_line_start: bool = True
    pending_carriage_return: bool = False
    blank_line_already_emitted: bool = False
