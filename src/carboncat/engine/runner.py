# topmark:header:start
#
#   project      : CarbonCat
#   file         : runner.py
#   file_relpath : src/carboncat/engine/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Execution helpers for copying one or more sources to a sink (engine layer).

This module provides small, CLI-free functions to run the engine. It exists so
both the public API and the CLI share the same engine logic.

Design goals:
  - No CLI dependencies: do not import Click or anything under
    ``carboncat.cli.*`` from here.
  - Explicit streams: sources and the sink are always passed in; nothing here
    reads or writes the process standard streams.
  - Single error kind: any `OSError` raised while reading or writing is
    re-raised as `CatIOError`. Output already written is not rolled back.

Typical usage:

    with CatSession(sink, options) as session:
        for source in sources:
            session.feed_source(source)

    report = cat_files(["a.txt", "-", "b.txt"], sink, options, stdin=stdin)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

from carboncat.config.logging import get_logger
from carboncat.constants import FAST_CHUNK_SIZE, LINE_CHUNK_SIZE, STDIN_NAME
from carboncat.core.errors import (
    CatIOError,
    SourceError,
    SourceNotFoundError,
    SourcePermissionError,
)
from carboncat.engine.lines import LineEngine
from carboncat.engine.outcomes import RunReport, SourceOutcome, SourceStatus, TransferStats
from carboncat.engine.sinks import CountingSink
from carboncat.engine.sources import open_source

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from types import TracebackType

    from carboncat.config.logging import CarboncatLogger
    from carboncat.config.model import Options
    from carboncat.engine.protocols import ByteSink, ByteSource
    from carboncat.engine.state import EngineState

logger: CarboncatLogger = get_logger(__name__)


def iter_chunks(source: ByteSource, size: int) -> Iterator[bytes]:
    """Yield chunks of at most ``size`` bytes until end of input.

    Buffered streams are read with ``read1`` so interactive input is forwarded
    as soon as it arrives instead of after ``size`` bytes.
    """
    read: Callable[[int], bytes] = getattr(source, "read1", None) or source.read
    while True:
        chunk = read(size)
        if not chunk:
            return
        yield chunk


def cat_fast(source: ByteSource, sink: ByteSink, *, chunk_size: int = FAST_CHUNK_SIZE) -> int:
    """Copy ``source`` to ``sink`` unmodified.

    Returns:
        int: Number of bytes copied.

    Raises:
        CatIOError: On any read or write failure.
    """
    total = 0
    try:
        for chunk in iter_chunks(source, chunk_size):
            sink.write(chunk)
            total += len(chunk)
        sink.flush()
    except OSError as exc:
        raise CatIOError(exc) from exc
    return total


def cat_lines(
    source: ByteSource,
    engine: LineEngine,
    *,
    chunk_size: int = LINE_CHUNK_SIZE,
) -> int:
    """Feed ``source`` through ``engine`` without finishing the run.

    Returns:
        int: Number of bytes read.

    Raises:
        CatIOError: On any read or write failure.
    """
    total = 0
    try:
        for chunk in iter_chunks(source, chunk_size):
            engine.feed(chunk)
            total += len(chunk)
    except OSError as exc:
        raise CatIOError(exc) from exc
    return total


def cat(
    source: ByteSource,
    sink: ByteSink,
    options: Options,
    *,
    state: EngineState | None = None,
) -> TransferStats:
    """Transform one source into ``sink`` according to ``options``.

    Args:
        source (ByteSource): Input stream.
        sink (ByteSink): Output stream.
        options (Options): Frozen formatting options.
        state (EngineState | None): Line-engine state to continue from; ignored on
            the fast path.

    Returns:
        TransferStats: Byte counts of the run.

    Raises:
        CatIOError: On the first read or write failure.
    """
    counting = CountingSink(sink)
    if options.can_write_fast():
        read = cat_fast(source, counting)
        return TransferStats(bytes_read=read, bytes_written=counting.bytes_written, fast_path=True)

    engine = LineEngine(options, counting, state)
    read = cat_lines(source, engine)
    try:
        engine.finish()
    except OSError as exc:
        raise CatIOError(exc) from exc
    return TransferStats(bytes_read=read, bytes_written=counting.bytes_written, fast_path=False)


class CatSession:
    """One logical run over several sources sharing one sink and one engine state.

    Line numbers, blank-line squeezing and a deferred carriage return carry
    over from one source to the next. Sources must be fed strictly in order.

    Args:
        sink (ByteSink): Output stream shared by all sources.
        options (Options): Frozen formatting options.
    """

    def __init__(self, sink: ByteSink, options: Options) -> None:
        self.options = options
        self._sink = CountingSink(sink)
        self._engine: LineEngine | None = (
            None if options.can_write_fast() else LineEngine(options, self._sink)
        )
        self._closed = False

    @property
    def state(self) -> EngineState | None:
        """The shared line-engine state (``None`` on the fast path)."""
        return self._engine.state if self._engine is not None else None

    @property
    def lines_numbered(self) -> int:
        """Current value of the running line counter."""
        return self._engine.state.line_number if self._engine is not None else 0

    @property
    def bytes_written(self) -> int:
        """Total bytes written so far."""
        return self._sink.bytes_written

    def feed_source(self, source: ByteSource) -> TransferStats:
        """Append one source to the run.

        Returns:
            TransferStats: Byte counts for this source.

        Raises:
            CatIOError: On the first read or write failure.
            RuntimeError: If the session was already closed.
        """
        if self._closed:
            raise RuntimeError("CatSession is closed")
        before = self._sink.bytes_written
        if self._engine is None:
            read = cat_fast(source, self._sink)
        else:
            read = cat_lines(source, self._engine)
        return TransferStats(
            bytes_read=read,
            bytes_written=self._sink.bytes_written - before,
            fast_path=self._engine is None,
        )

    def close(self) -> None:
        """End the run: flush a trailing carriage return and the sink.

        Raises:
            CatIOError: If the final write or flush fails.
        """
        if self._closed:
            return
        self._closed = True
        try:
            if self._engine is not None:
                self._engine.finish()
            else:
                self._sink.flush()
        except OSError as exc:
            raise CatIOError(exc) from exc

    def __enter__(self) -> CatSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        # After a failure the output is left as is.
        if exc_type is None:
            self.close()


def _failed_outcome(name: str, exc: SourceError) -> SourceOutcome:
    if isinstance(exc, SourceNotFoundError):
        status = SourceStatus.NOT_FOUND
    elif isinstance(exc, SourcePermissionError):
        status = SourceStatus.PERMISSION_DENIED
    else:
        status = SourceStatus.UNREADABLE
    return SourceOutcome(name=name, status=status, reason=exc.reason)


def cat_files(
    names: Iterable[str],
    sink: ByteSink,
    options: Options,
    *,
    stdin: BinaryIO | None = None,
    on_outcome: Callable[[SourceOutcome], None] | None = None,
) -> RunReport:
    """Concatenate named sources into ``sink`` as one logical run.

    Sources that cannot be opened are recorded and skipped; the remaining
    sources are still processed (a conventional behavior for ``cat``).

    Args:
        names (Iterable[str]): Source names in order; ``-`` is standard input.
            An empty list reads standard input.
        sink (ByteSink): Output stream.
        options (Options): Frozen formatting options.
        stdin (BinaryIO | None): Stream used for ``-``.
        on_outcome (Callable[[SourceOutcome], None] | None): Called after each
            source, e.g. to report a failure while later output is still pending.

    Returns:
        RunReport: One outcome per source plus the final line counter.

    Raises:
        CatIOError: On a read or write failure during a transfer; the run is aborted.
    """
    source_names: list[str] = list(names) or [STDIN_NAME]
    outcomes: list[SourceOutcome] = []

    with CatSession(sink, options) as session:
        for name in source_names:
            outcome: SourceOutcome
            try:
                source: BinaryIO = open_source(name, stdin=stdin)
            except SourceError as exc:
                logger.info("Skipping %s: %s", name, exc.reason)
                outcome = _failed_outcome(name, exc)
            else:
                try:
                    stats: TransferStats = session.feed_source(source)
                finally:
                    if name != STDIN_NAME:
                        source.close()
                logger.debug("Copied %s: %d bytes read", name, stats.bytes_read)
                outcome = SourceOutcome(
                    name=name,
                    status=SourceStatus.OK,
                    bytes_read=stats.bytes_read,
                    bytes_written=stats.bytes_written,
                )
            outcomes.append(outcome)
            if on_outcome is not None:
                on_outcome(outcome)

    return RunReport(outcomes=tuple(outcomes), lines_numbered=session.lines_numbered)
