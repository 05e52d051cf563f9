# topmark:header:start
#
#   project      : CarbonCat
#   file         : lines.py
#   file_relpath : src/carboncat/engine/lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The annotated line engine.

`LineEngine` consumes input chunk by chunk and writes the annotated output
(line numbers, ``$`` end markers, ``^I``/``^``/``M-`` escapes, squeezed blank
lines) to a sink. All cross-byte decisions go through `EngineState`, so the
output does not depend on where the input was split into chunks.

States (conceptually): line start, in line, pending carriage return.

- line start -> in line: first non-newline byte (emits the number prefix).
- in line -> line start: newline.
- any -> pending CR: ``\\r`` in verbatim or tab-marking mode; resolved by the
  next byte, even when it arrives in a later chunk or a later source.

Usage:

    engine = LineEngine(options, sink)
    for chunk in chunks:
        engine.feed(chunk)
    engine.finish()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from carboncat.config.logging import get_logger
from carboncat.config.types import NumberingMode
from carboncat.constants import LINE_NUMBER_WIDTH
from carboncat.engine.render import CR, LF, write_end
from carboncat.engine.state import EngineState

if TYPE_CHECKING:
    from carboncat.config.logging import CarboncatLogger
    from carboncat.config.model import Options
    from carboncat.engine.protocols import ByteSink

logger: CarboncatLogger = get_logger(__name__)

CARET_CR: bytes = b"^M"


class LineEngine:
    """Stateful annotated copy of a byte stream.

    Args:
        options (Options): Frozen formatting options; read-only for the whole run.
        sink (ByteSink): Destination stream, flushed after every line terminator.
        state (EngineState | None): State to continue from; a fresh one if ``None``.
    """

    def __init__(
        self,
        options: Options,
        sink: ByteSink,
        state: EngineState | None = None,
    ) -> None:
        self.options = options
        self.sink = sink
        self.state = state if state is not None else EngineState()
        self._end_of_line = options.end_of_line
        self._number_all = options.numbering is NumberingMode.ALL
        self._number_any = options.numbering is not NumberingMode.NONE

    def feed(self, chunk: bytes) -> None:
        """Process one chunk of input.

        Args:
            chunk (bytes): The next bytes of the logical input stream.
        """
        state = self.state
        sink = self.sink
        size = len(chunk)
        pos = 0
        while pos < size:
            if chunk[pos] == LF:
                self._write_newline()
                pos += 1
                continue

            # Any other byte continues the line a deferred \r belongs to.
            if state.pending_carriage_return:
                sink.write(b"\r")
                state.pending_carriage_return = False

            state.blank_line_already_emitted = False
            if state.at_line_start:
                if self._number_any:
                    self._write_line_number()
                state.at_line_start = False

            pos += write_end(chunk, sink, self.options, pos)
            if pos == size:
                break

            if chunk[pos] == CR:
                state.pending_carriage_return = True
                pos += 1
            # A newline is handled at the top of the loop.

    def finish(self) -> None:
        """Flush a trailing deferred carriage return and the sink.

        Call once after the last chunk of the last source of the run.
        """
        if self.state.pending_carriage_return:
            logger.trace("Flushing trailing carriage return at end of input")
            self.sink.write(b"\r")
            self.state.pending_carriage_return = False
        self.sink.flush()

    def _write_line_number(self) -> None:
        self.state.line_number += 1
        self.sink.write(b"%*d\t" % (LINE_NUMBER_WIDTH, self.state.line_number))

    def _write_newline(self) -> None:
        """Terminate the current line, applying blank-line squeezing and numbering."""
        state = self.state
        if state.pending_carriage_return:
            self.sink.write(CARET_CR if self.options.show_ends else b"\r")
            state.pending_carriage_return = False

        if state.at_line_start:
            if self.options.squeeze_blank and state.blank_line_already_emitted:
                return
            state.blank_line_already_emitted = True
            if self._number_all:
                self._write_line_number()

        self.sink.write(self._end_of_line)
        self.sink.flush()
        state.at_line_start = True
