# topmark:header:start
#
#   project      : CarbonCat
#   file         : protocols.py
#   file_relpath : src/carboncat/engine/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural types for the byte streams the engine reads and writes.

The engine never opens files or touches the process standard streams; callers
pass objects matching these protocols (binary files, ``io.BytesIO``,
``click.open_file("-", "wb")``).
"""

from __future__ import annotations

from typing import Protocol


class ByteSource(Protocol):
    """A readable binary stream."""

    def read(self, size: int = -1, /) -> bytes:
        """Read up to ``size`` bytes; return ``b""`` at end of input."""
        ...


class ByteSink(Protocol):
    """A writable binary stream."""

    def write(self, data: bytes, /) -> int | None:
        """Write ``data``."""
        ...

    def flush(self) -> None:
        """Flush buffered output."""
        ...
