"""Summary: Exercise per-source dispatch, ordering, and failure isolation.
Why: Results must follow input order whatever order the workers finish in.
"""

from __future__ import annotations

import errno
import io
import threading
import time
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from wcount.features.counting import (
    CountResult,
    Dispatcher,
    InputSource,
    ReportConfiguration,
)


class _SlowStream(io.BytesIO):
    """In-memory stream that sleeps before each read and records the reading thread."""

    def __init__(self, data: bytes, delay: float) -> None:
        super().__init__(data)
        self.delay = delay
        self.threads: set[str] = set()

    def read(self, size: int | None = -1, /) -> bytes:
        self.threads.add(threading.current_thread().name)
        time.sleep(self.delay)
        return super().read(size)


class _BrokenStream:
    """Stream whose second read fails."""

    def __init__(self) -> None:
        self.calls = 0

    def read(self, size: int = -1, /) -> bytes:
        self.calls += 1
        if self.calls == 1:
            return b"partial words\n"
        raise OSError(errno.EIO, "Input/output error")


def _memory_opener(streams: dict[str, object]):
    """Build an opener serving streams keyed by path name."""

    @contextmanager
    def _open(path: Path) -> Iterator[object]:
        stream = streams.get(path.name)
        if stream is None:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(path))
        yield stream

    return _open


def test_results_follow_input_order_under_staggered_latency() -> None:
    names = [f"f{i}" for i in range(6)]
    # Earlier files are slower so they finish last.
    streams = {
        name: _SlowStream(b"w " * (i + 1), delay=0.05 * (len(names) - i))
        for i, name in enumerate(names)
    }
    dispatcher = Dispatcher(
        ReportConfiguration(words=True),
        chunk_size=4,
        max_workers=len(names),
        opener=_memory_opener(streams),
    )

    results = dispatcher.dispatch(InputSource.from_arguments(names))

    assert [result.words for result in results] == [1, 2, 3, 4, 5, 6]


def test_missing_file_is_isolated_from_other_sources() -> None:
    streams = {"a.txt": io.BytesIO(b"one two\n"), "c.txt": io.BytesIO(b"three\n")}
    dispatcher = Dispatcher(ReportConfiguration(), opener=_memory_opener(streams))

    results = dispatcher.dispatch(InputSource.from_arguments(["a.txt", "missing.txt", "c.txt"]))

    assert results[0] == CountResult(bytes=8, lines=1, words=2)
    assert results[1].failed
    assert results[1].error == "No such file or directory"
    assert results[2] == CountResult(bytes=6, lines=1, words=1)


def test_mid_stream_read_failure_marks_source_failed() -> None:
    streams = {"flaky": _BrokenStream(), "ok": io.BytesIO(b"fine\n")}
    dispatcher = Dispatcher(ReportConfiguration(), opener=_memory_opener(streams))

    results = dispatcher.dispatch(InputSource.from_arguments(["flaky", "ok"]))

    assert results[0] == CountResult.failure("Input/output error")
    assert results[1].words == 1


def test_stdin_is_counted_on_the_calling_thread() -> None:
    stdin = _SlowStream(b"from stdin\n", delay=0)
    file_stream = _SlowStream(b"from a file\n", delay=0)
    dispatcher = Dispatcher(
        ReportConfiguration(),
        opener=_memory_opener({"f.txt": file_stream}),
        stdin=stdin,
    )

    results = dispatcher.dispatch(InputSource.from_arguments(["f.txt", "-"]))

    assert stdin.threads == {threading.current_thread().name}
    assert all(name.startswith("wcount") for name in file_stream.threads)
    assert [result.words for result in results] == [3, 2]


def test_implicit_stdin_uses_no_worker_pool(mocker: MockerFixture) -> None:
    factory = mocker.MagicMock()
    dispatcher = Dispatcher(
        ReportConfiguration(),
        stdin=io.BytesIO(b"abc def\nghij\n"),
        executor_factory=factory,
    )

    results = dispatcher.dispatch(InputSource.from_arguments([]))

    factory.assert_not_called()
    assert results == [CountResult(bytes=13, lines=2, words=3)]


def test_worker_pool_is_bounded(mocker: MockerFixture) -> None:
    requested: list[int] = []

    def _factory(workers: int) -> ThreadPoolExecutor:
        requested.append(workers)
        return ThreadPoolExecutor(max_workers=workers)

    streams = {f"f{i}": io.BytesIO(b"x\n") for i in range(5)}
    dispatcher = Dispatcher(
        ReportConfiguration(),
        max_workers=2,
        opener=_memory_opener(streams),
        executor_factory=_factory,
    )

    results = dispatcher.dispatch(InputSource.from_arguments(list(streams)))

    assert requested == [2]
    assert len(results) == 5


def test_default_pool_size_is_capped_by_file_count(mocker: MockerFixture) -> None:
    _ = mocker.patch("wcount.config.settings.os.cpu_count", return_value=64)
    requested: list[int] = []

    def _factory(workers: int) -> ThreadPoolExecutor:
        requested.append(workers)
        return ThreadPoolExecutor(max_workers=workers)

    streams = {"a": io.BytesIO(b""), "b": io.BytesIO(b"")}
    dispatcher = Dispatcher(
        ReportConfiguration(),
        opener=_memory_opener(streams),
        executor_factory=_factory,
    )

    _ = dispatcher.dispatch(InputSource.from_arguments(["a", "b"]))

    assert requested == [2]


def test_counts_real_files_with_default_opener(tmp_path: Path) -> None:
    empty = tmp_path / "empty.txt"
    _ = empty.write_bytes(b"")
    text = tmp_path / "text.txt"
    _ = text.write_bytes("a b c\nünïcode\n".encode("utf-8"))
    directory = tmp_path / "subdir"
    directory.mkdir()

    dispatcher = Dispatcher(ReportConfiguration(chars=True, words=True), chunk_size=3)
    results = dispatcher.dispatch(
        InputSource.from_arguments([str(empty), str(text), str(directory)])
    )

    assert results[0] == CountResult()
    assert results[1].words == 4
    assert results[1].chars == 14
    assert results[2].error == "Is a directory"


def test_invalid_utf8_is_reported_as_char_error(mocker: MockerFixture) -> None:
    warning = mocker.patch("wcount.features.counting.usecases.dispatcher.logger.warning")
    dispatcher = Dispatcher(
        ReportConfiguration(chars=True),
        opener=_memory_opener({"bad.bin": io.BytesIO(b"ab\xffcd efg\n")}),
    )

    (result,) = dispatcher.dispatch(InputSource.from_arguments(["bad.bin"]))

    assert not result.failed
    assert result.char_error is not None
    assert result.chars == 0
    assert (result.lines, result.words, result.bytes) == (1, 2, 10)
    warning.assert_called_once()


def test_dispatch_rejects_misaligned_sources() -> None:
    dispatcher = Dispatcher(ReportConfiguration(), stdin=io.BytesIO(b""))

    with pytest.raises(ValueError):
        _ = dispatcher.dispatch([InputSource(index=3, name="x", path=Path("x"))])


def test_unexpected_pipeline_errors_propagate_after_the_barrier() -> None:
    @contextmanager
    def _exploding(path: Path) -> Iterator[io.BytesIO]:
        raise RuntimeError(f"boom: {path}")
        yield io.BytesIO()  # pragma: no cover

    dispatcher = Dispatcher(ReportConfiguration(), opener=_exploding)

    with pytest.raises(RuntimeError, match="boom"):
        _ = dispatcher.dispatch(InputSource.from_arguments(["a", "b"]))


def test_name_rejected_by_open_fails_only_that_source(tmp_path: Path) -> None:
    good = tmp_path / "good.txt"
    _ = good.write_bytes(b"a b\n")

    dispatcher = Dispatcher(ReportConfiguration(words=True))
    results = dispatcher.dispatch(InputSource.from_arguments(["bad\x00name", str(good)]))

    assert results[0].failed
    assert results[0].error == "embedded null byte"
    assert results[1] == CountResult(bytes=4, lines=1, words=2)
