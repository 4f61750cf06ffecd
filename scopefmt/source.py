"""Ranged access to the text being formatted."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from .types import Span, SpanError


@runtime_checkable
class TextSource(Protocol):
    """Anything that can return the text in ``[start, end)``."""

    @property
    def length(self) -> int: ...

    def read(self, start: int, end: int) -> str: ...


def _check(start: int, end: int, length: int) -> None:
    if start < 0 or end > length or start > end:
        raise SpanError(Span(start, end), length)


class StringSource:
    """A source backed by an in-memory string."""

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    @property
    def length(self) -> int:
        return len(self.text)

    def read(self, start: int, end: int) -> str:
        _check(start, end, len(self.text))
        return self.text[start:end]

    def __repr__(self) -> str:
        return f"StringSource(length={len(self.text)})"


class ChunkedSource:
    """A source assembled from consecutive chunks, e.g. lines read from a stream."""

    __slots__ = ("_chunks", "_offsets", "_length")

    def __init__(self, chunks: Iterable[str]) -> None:
        self._chunks: list[str] = []
        self._offsets: list[int] = []
        pos = 0
        for chunk in chunks:
            if not chunk:
                continue
            self._chunks.append(chunk)
            self._offsets.append(pos)
            pos += len(chunk)
        self._length = pos

    @property
    def length(self) -> int:
        return self._length

    def read(self, start: int, end: int) -> str:
        _check(start, end, self._length)
        if start == end:
            return ""
        parts: list[str] = []
        i = bisect_right(self._offsets, start) - 1
        while i < len(self._chunks) and self._offsets[i] < end:
            offset = self._offsets[i]
            chunk = self._chunks[i]
            parts.append(chunk[max(start - offset, 0) : end - offset])
            i += 1
        return "".join(parts)

    def __repr__(self) -> str:
        return f"ChunkedSource(chunks={len(self._chunks)}, length={self._length})"


def as_source(value: str | TextSource) -> TextSource:
    """Wrap a string in a StringSource; pass sources through."""
    if isinstance(value, str):
        return StringSource(value)
    if isinstance(value, TextSource):
        return value
    raise TypeError(f"expected str or TextSource, got {type(value).__name__}")
