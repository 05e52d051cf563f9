# topmark:header:start
#
#   project      : CarbonCat
#   file         : render.py
#   file_relpath : src/carboncat/engine/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Body-byte renderers used by the line engine.

Each ``write_*_to_end`` routine writes the bytes of ``buf`` starting at ``start``
until it reaches a byte it must hand back to the engine, or the end of the
buffer, and returns the number of input bytes it consumed. The engine then
inspects ``buf[start + consumed]`` (if any) to decide what happens next.

Stop bytes:
    - verbatim and tab-marking stop at ``\\n`` and ``\\r``: a carriage return is
      rendered differently depending on the byte that follows it, so the
      engine defers it.
    - non-printing stops at ``\\n`` only: it escapes ``\\r`` as ``^M`` itself.

Non-printing notation:

    ======== =====================
    byte     rendering
    ======== =====================
    0-8      ``^`` + (byte + 64)
    9 (TAB)  the tab marker
    10-31    ``^`` + (byte + 64)
    32-126   unchanged
    127      ``^?``
    128-159  ``M-^`` + (byte - 64)
    160-254  ``M-`` + (byte - 128)
    255      ``M-^?``
    ======== =====================
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from carboncat.config.types import RenderMode

if TYPE_CHECKING:
    from carboncat.config.model import Options
    from carboncat.engine.protocols import ByteSink

TAB: Final[int] = 0x09
LF: Final[int] = 0x0A
CR: Final[int] = 0x0D

TAB_MARKER: Final[bytes] = b"^I"

_VERBATIM_STOP: Final[re.Pattern[bytes]] = re.compile(rb"[\n\r]")
_TABS_STOP: Final[re.Pattern[bytes]] = re.compile(rb"[\n\r\t]")


def nonprint_notation(byte: int) -> bytes:
    """Return the caret/meta notation of a single byte.

    TAB is returned as ``^I``; callers that honor a literal tab handle it first.

    Args:
        byte (int): Byte value in ``range(256)``.

    Returns:
        bytes: The rendered notation.
    """
    if byte < 32:
        return bytes((ord("^"), byte + 64))
    if byte < 127:
        return bytes((byte,))
    if byte == 127:
        return b"^?"
    if byte < 160:
        return b"M-^" + bytes((byte - 64,))
    if byte < 255:
        return b"M-" + bytes((byte - 128,))
    return b"M-^?"


#: Precomputed notation for every byte value.
NONPRINT_TABLE: Final[tuple[bytes, ...]] = tuple(nonprint_notation(b) for b in range(256))


def write_to_end(buf: bytes, output: ByteSink, start: int = 0) -> int:
    """Copy bytes unchanged up to the next ``\\n``/``\\r`` or the end of ``buf``.

    Returns:
        int: Number of input bytes consumed.
    """
    match = _VERBATIM_STOP.search(buf, start)
    end = match.start() if match is not None else len(buf)
    if end > start:
        output.write(buf[start:end])
    return end - start


def write_tab_to_end(buf: bytes, output: ByteSink, start: int = 0) -> int:
    """Like `write_to_end`, but render every TAB as ``^I``.

    Returns:
        int: Number of input bytes consumed.
    """
    pos = start
    while True:
        match = _TABS_STOP.search(buf, pos)
        if match is None:
            if pos < len(buf):
                output.write(buf[pos:])
            return len(buf) - start
        stop = match.start()
        if stop > pos:
            output.write(buf[pos:stop])
        if buf[stop] != TAB:
            return stop - start
        output.write(TAB_MARKER)
        pos = stop + 1


def write_nonprint_to_end(buf: bytes, output: ByteSink, tab: bytes, start: int = 0) -> int:
    """Render bytes in caret/meta notation up to the next ``\\n`` or the end of ``buf``.

    Args:
        buf (bytes): Input chunk.
        output (ByteSink): Destination.
        tab (bytes): Rendering for TAB (``^I`` or a literal tab).
        start (int): Offset of the first byte to render.

    Returns:
        int: Number of input bytes consumed.
    """
    end = buf.find(b"\n", start)
    if end < 0:
        end = len(buf)
    if end > start:
        output.write(
            b"".join(tab if byte == TAB else NONPRINT_TABLE[byte] for byte in buf[start:end])
        )
    return end - start


def write_end(buf: bytes, output: ByteSink, options: Options, start: int = 0) -> int:
    """Dispatch to the renderer selected by ``options.render_mode``.

    Returns:
        int: Number of input bytes consumed.
    """
    mode: RenderMode = options.render_mode
    if mode is RenderMode.NONPRINTING:
        return write_nonprint_to_end(buf, output, options.tab_marker, start)
    if mode is RenderMode.TABS:
        return write_tab_to_end(buf, output, start)
    return write_to_end(buf, output, start)
