# topmark:header:start
#
#   project      : CarbonCat
#   file         : outcomes.py
#   file_relpath : src/carboncat/engine/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed results returned by the engine and the multi-source runner.

Design goals:
- Presentation-free: no ANSI, no console logic.
- Reusable across frontends: CLI and the public API.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SourceStatus(Enum):
    """What happened to one named source of a run."""

    OK = "ok"
    NOT_FOUND = "not found"
    PERMISSION_DENIED = "permission denied"
    UNREADABLE = "unreadable"


@dataclass(frozen=True, slots=True)
class TransferStats:
    """Byte counts of one engine run over one source.

    Attributes:
        bytes_read (int): Bytes read from the source.
        bytes_written (int): Bytes written to the sink.
        fast_path (bool): Whether the verbatim fast copy was used.
    """

    bytes_read: int
    bytes_written: int
    fast_path: bool


@dataclass(frozen=True, slots=True)
class SourceOutcome:
    """Outcome for one named source.

    Attributes:
        name (str): Source name as given (``-`` for standard input).
        status (SourceStatus): Whether the source was copied.
        bytes_read (int): Bytes read from the source (0 if it could not be opened).
        bytes_written (int): Bytes written to the sink for this source.
        reason (str | None): Human-readable failure reason, if any.
    """

    name: str
    status: SourceStatus
    bytes_read: int = 0
    bytes_written: int = 0
    reason: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the source was copied."""
        return self.status is SourceStatus.OK


@dataclass(frozen=True, slots=True)
class RunReport:
    """Outcome of a multi-source run.

    Attributes:
        outcomes (tuple[SourceOutcome, ...]): One entry per source, in input order.
        lines_numbered (int): Final value of the running line counter.
    """

    outcomes: tuple[SourceOutcome, ...]
    lines_numbered: int = 0

    @property
    def ok(self) -> bool:
        """Whether every source was copied."""
        return all(o.ok for o in self.outcomes)

    @property
    def bytes_read(self) -> int:
        """Total bytes read."""
        return sum(o.bytes_read for o in self.outcomes)

    @property
    def bytes_written(self) -> int:
        """Total bytes written."""
        return sum(o.bytes_written for o in self.outcomes)

    @property
    def failures(self) -> tuple[SourceOutcome, ...]:
        """Outcomes of the sources that could not be copied."""
        return tuple(o for o in self.outcomes if not o.ok)

    @property
    def first_failure(self) -> SourceOutcome | None:
        """The first source that could not be copied, if any."""
        failures = self.failures
        return failures[0] if failures else None
