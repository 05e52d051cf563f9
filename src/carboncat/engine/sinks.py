# topmark:header:start
#
#   project      : CarbonCat
#   file         : sinks.py
#   file_relpath : src/carboncat/engine/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sink wrapper counting the bytes the engine writes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from carboncat.engine.protocols import ByteSink


class CountingSink:
    """Forward writes to ``sink`` and count them.

    Args:
        sink (ByteSink): The wrapped stream.

    Attributes:
        bytes_written (int): Bytes passed to ``write`` so far.
    """

    def __init__(self, sink: ByteSink) -> None:
        self.sink = sink
        self.bytes_written = 0

    def write(self, data: bytes, /) -> int:
        """Write ``data`` to the wrapped sink."""
        self.sink.write(data)
        self.bytes_written += len(data)
        return len(data)

    def flush(self) -> None:
        """Flush the wrapped sink."""
        self.sink.flush()
