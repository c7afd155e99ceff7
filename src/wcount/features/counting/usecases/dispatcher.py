"""Fan out one counting pipeline per input source.

Where: src/wcount/features/counting/usecases/dispatcher.py
What: Count files on a bounded thread pool and stdin on the calling thread.
Why: Each pipeline owns its result slot, so one join barrier replaces any locking.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, wait
from contextlib import AbstractContextManager, ExitStack
from enum import StrEnum
from pathlib import Path

from wcount.config.settings import CHUNK_SIZE, max_workers_for
from wcount.features.counting.domain.errors import SourceReadError, describe_os_error
from wcount.features.counting.domain.models import CountResult, InputSource, ReportConfiguration
from wcount.platform.filesystem import open_for_counting
from wcount.platform.logging import logger

from .engine import CountingEngine
from .reader import ReadableStream, iter_chunks

Opener = Callable[[Path], AbstractContextManager[ReadableStream]]


class CountingEvent(StrEnum):
    """Structured event identifiers for counting logs."""

    DISPATCH_START = "counting.dispatch.start"
    DISPATCH_COMPLETE = "counting.dispatch.complete"
    SOURCE_START = "counting.source.start"
    SOURCE_COMPLETE = "counting.source.complete"
    SOURCE_ERROR = "counting.source.error"
    CHARS_ERROR = "counting.chars.error"


class Dispatcher:
    """Run one counting pipeline per source and collect results in input order."""

    def __init__(
        self,
        config: ReportConfiguration,
        *,
        chunk_size: int = CHUNK_SIZE,
        max_workers: int | None = None,
        opener: Opener | None = None,
        stdin: ReadableStream | None = None,
        executor_factory: Callable[[int], ThreadPoolExecutor] | None = None,
    ) -> None:
        """Create a dispatcher.

        Args:
            config: Metrics requested for this invocation.
            chunk_size: Bytes requested per read.
            max_workers: Upper bound on concurrent file pipelines. Defaults to a
                multiple of the CPU count, capped at the number of files.
            opener: Context manager factory opening a file for reading.
            stdin: Stream used for stdin sources. Defaults to ``sys.stdin.buffer``.
            executor_factory: Builds the pool for a given worker count.
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.config: ReportConfiguration = config
        self.chunk_size: int = chunk_size
        self.max_workers: int | None = max_workers
        self._opener: Opener = opener or open_for_counting
        self._stdin: ReadableStream | None = stdin
        self._executor_factory: Callable[[int], ThreadPoolExecutor] = executor_factory or (
            lambda workers: ThreadPoolExecutor(max_workers=workers, thread_name_prefix="wcount")
        )
        self._engine: CountingEngine = CountingEngine(count_chars=config.count_chars)

    def dispatch(self, sources: Sequence[InputSource]) -> list[CountResult]:
        """Count every source and return results aligned with ``sources``.

        Files are counted concurrently; stdin sources are counted on the
        calling thread once the file tasks are queued. The call returns only
        after every pipeline has finished.
        """
        for position, source in enumerate(sources):
            if source.index != position:
                raise ValueError(f"source {source.name!r} has index {source.index}, expected {position}")

        total = len(sources)
        slots: list[CountResult | None] = [None] * total
        files = [source for source in sources if not source.is_stdin]
        stdin_sources = [source for source in sources if source.is_stdin]
        workers = self._workers_for(len(files))

        logger.debug(
            "Dispatching %d source(s) on %d worker(s)",
            total,
            workers,
            extra={
                "counting_event": CountingEvent.DISPATCH_START.value,
                "total_sources": total,
                "max_workers": workers,
            },
        )
        start = time.perf_counter()

        if files:
            with self._executor_factory(workers) as executor:
                futures: list[Future[None]] = [
                    executor.submit(self._run_pipeline, source, slots, total) for source in files
                ]
                for source in stdin_sources:
                    self._run_pipeline(source, slots, total)
                _ = wait(futures)
            for future in futures:
                future.result()
        else:
            for source in stdin_sources:
                self._run_pipeline(source, slots, total)

        results: list[CountResult] = []
        for source, slot in zip(sources, slots, strict=True):
            if slot is None:
                raise RuntimeError(f"no result recorded for {source.name!r}")
            results.append(slot)

        logger.debug(
            "Dispatch complete",
            extra={
                "counting_event": CountingEvent.DISPATCH_COMPLETE.value,
                "failed": sum(1 for result in results if result.failed),
                "duration_seconds": time.perf_counter() - start,
            },
        )
        return results

    def count_source(self, source: InputSource, total: int = 1) -> CountResult:
        """Run the full pipeline for one source and return its result."""

        log_extra = {
            "source_name": source.name,
            "sequence": source.index + 1,
            "total_sources": total,
        }
        logger.debug(
            "Counting %s",
            source.name or "<stdin>",
            extra={"counting_event": CountingEvent.SOURCE_START.value, **log_extra},
        )
        start = time.perf_counter()

        try:
            if source.path is None:
                result = self._count(self._stdin_stream(), source)
            else:
                result = self._count_file(source.path, source)
        except SourceReadError as e:
            result = CountResult.failure(describe_os_error(e.cause))
        except OSError as e:
            result = CountResult.failure(describe_os_error(e))

        if result.error is not None:
            logger.debug(
                "Failed to count %s: %s",
                source.name,
                result.error,
                extra={
                    "counting_event": CountingEvent.SOURCE_ERROR.value,
                    "error_message": result.error,
                    **log_extra,
                },
            )
            return result

        if result.char_error is not None:
            logger.warning(
                "Character count unavailable for %s: %s",
                source.name or "<stdin>",
                result.char_error,
                extra={
                    "counting_event": CountingEvent.CHARS_ERROR.value,
                    "error_message": result.char_error,
                    **log_extra,
                },
            )

        logger.debug(
            "Counted %s",
            source.name or "<stdin>",
            extra={
                "counting_event": CountingEvent.SOURCE_COMPLETE.value,
                "lines": result.lines,
                "words": result.words,
                "bytes": result.bytes,
                "duration_ms": (time.perf_counter() - start) * 1000,
                **log_extra,
            },
        )
        return result

    def _run_pipeline(
        self,
        source: InputSource,
        slots: list[CountResult | None],
        total: int,
    ) -> None:
        # Each index is written by exactly one pipeline.
        slots[source.index] = self.count_source(source, total)

    def _count(self, stream: ReadableStream, source: InputSource) -> CountResult:
        chunks = iter_chunks(stream, self.chunk_size, name=source.name)
        return self._engine.count_stream(chunks)

    def _count_file(self, path: Path, source: InputSource) -> CountResult:
        with ExitStack() as stack:
            try:
                stream = stack.enter_context(self._opener(path))
            except ValueError as e:
                # open() rejects names such as ones with an embedded NUL byte.
                return CountResult.failure(str(e))
            return self._count(stream, source)

    def _stdin_stream(self) -> ReadableStream:
        if self._stdin is not None:
            return self._stdin
        return sys.stdin.buffer

    def _workers_for(self, file_count: int) -> int:
        if file_count == 0:
            return 0
        if self.max_workers is not None:
            return max(1, min(self.max_workers, file_count))
        return max_workers_for(file_count)


__all__ = ["CountingEvent", "Dispatcher", "Opener"]
