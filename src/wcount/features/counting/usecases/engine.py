"""Streaming byte, line, word, and character counters.

Where: src/wcount/features/counting/usecases/engine.py
What: Fold chunks into counts while carrying word and UTF-8 state across chunk boundaries.
Why: Counts must not depend on how a stream happens to be split into reads.
"""

from __future__ import annotations

import codecs
from collections.abc import Iterable
from typing import Final

from wcount.features.counting.domain.errors import CharacterDecodeError
from wcount.features.counting.domain.models import CarryState, CountResult, PartialCounts

NEWLINE: Final[bytes] = b"\n"
ENCODING: Final[str] = "utf-8"


def count_lines(buffer: bytes) -> int:
    """Return the number of newline bytes in ``buffer``."""

    return buffer.count(NEWLINE)


def count_words(buffer: bytes, in_word: bool) -> tuple[int, bool]:
    """Count words closed inside ``buffer``.

    A word is a maximal run of bytes outside ``b" \\t\\n\\r\\f\\v"``. It is
    counted when whitespace closes it, so a word still open at the end of the
    buffer is left to the next chunk (or to :meth:`CountingEngine.finalize`).

    Args:
        buffer: Chunk to scan.
        in_word: Whether the previous chunk ended inside a word.

    Returns:
        The number of words closed in this chunk and the updated flag.
    """
    if not buffer:
        return 0, in_word

    # bytes.split() and bytes.isspace() share the ASCII whitespace set.
    started = len(buffer.split())
    if in_word and not buffer[:1].isspace():
        started -= 1
    ends_in_word = not buffer[-1:].isspace()
    closed = started + int(in_word) - int(ends_in_word)
    return closed, ends_in_word


def _decoder_for(pending: bytes) -> codecs.BufferedIncrementalDecoder:
    decoder = codecs.getincrementaldecoder(ENCODING)(errors="strict")
    decoder.setstate((pending, 0))
    return decoder


def count_chars(buffer: bytes, pending: bytes, *, final: bool = False) -> tuple[int, bytes]:
    """Count UTF-8 characters in ``pending + buffer``.

    Bytes of a sequence cut off at the end of the buffer are returned instead
    of being counted, to be prepended to the next chunk.

    Raises:
        CharacterDecodeError: On an invalid sequence, or an incomplete one when
            ``final`` is set.
    """
    decoder = _decoder_for(pending)
    try:
        text = decoder.decode(buffer, final)
    except UnicodeDecodeError as e:
        raise CharacterDecodeError(e.reason) from e
    remainder, _ = decoder.getstate()
    return len(text), remainder


class CountingEngine:
    """Per-source counting pipeline stage.

    The engine holds no per-source state; everything that must survive a
    chunk boundary lives in the :class:`CarryState` threaded through
    :meth:`process`.
    """

    def __init__(self, count_chars: bool = False) -> None:
        self.count_chars: bool = count_chars

    def process(self, buffer: bytes, carry: CarryState) -> tuple[PartialCounts, CarryState]:
        """Count one chunk.

        Args:
            buffer: Bytes read from the source.
            carry: State left by the previous chunk.

        Returns:
            The increments for this chunk and the state for the next one.
        """
        words, in_word = count_words(buffer, carry.in_word)

        chars = 0
        pending = carry.pending
        char_error = carry.char_error
        if self.count_chars and char_error is None:
            try:
                chars, pending = count_chars(buffer, pending)
            except CharacterDecodeError as e:
                char_error = str(e)
                pending = b""

        partial = PartialCounts(
            bytes=len(buffer),
            lines=count_lines(buffer),
            words=words,
            chars=chars,
        )
        return partial, CarryState(in_word=in_word, pending=pending, char_error=char_error)

    def finalize(self, carry: CarryState) -> tuple[PartialCounts, CarryState]:
        """Flush counts still pending at end-of-stream.

        End-of-stream closes an open word. Leftover UTF-8 bytes are an
        incomplete sequence and void the character count.
        """
        char_error = carry.char_error
        if self.count_chars and char_error is None and carry.pending:
            try:
                _ = count_chars(b"", carry.pending, final=True)
            except CharacterDecodeError as e:
                char_error = str(e)

        partial = PartialCounts(words=int(carry.in_word))
        return partial, CarryState(char_error=char_error)

    def count_stream(self, chunks: Iterable[bytes]) -> CountResult:
        """Fold ``chunks`` into a complete :class:`CountResult`."""

        totals = {"bytes": 0, "lines": 0, "words": 0, "chars": 0}
        carry = CarryState()

        def _accumulate(partial: PartialCounts) -> None:
            totals["bytes"] += partial.bytes
            totals["lines"] += partial.lines
            totals["words"] += partial.words
            totals["chars"] += partial.chars

        for chunk in chunks:
            partial, carry = self.process(chunk, carry)
            _accumulate(partial)

        partial, carry = self.finalize(carry)
        _accumulate(partial)

        if carry.char_error is not None:
            totals["chars"] = 0
        return CountResult(char_error=carry.char_error, **totals)


__all__ = ["CountingEngine", "count_chars", "count_lines", "count_words"]
