"""Type definitions shared by the selector engine and the printer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Span:
    """A half-open offset range in some text."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


class Space(Enum):
    """Spacing directive attached to a token by a rule."""

    NONE = ""
    BEFORE = "^"
    AFTER = "$"
    AROUND = "^$"

    @property
    def pads_before(self) -> bool:
        return "^" in self.value

    @property
    def pads_after(self) -> bool:
        return "$" in self.value


class ScopefmtError(Exception):
    """Base class for all errors raised by scopefmt."""


class SelectorSyntaxError(ScopefmtError):
    """A selector string that cannot be parsed, with the offending token's location."""

    def __init__(self, message: str, span: Span, selector: str = "") -> None:
        self.message = message
        self.span = span
        self.selector = selector
        super().__init__(f"selector error at {span.start}-{span.end}: {message}")


class ConfigError(ScopefmtError, ValueError):
    """Invalid printer options."""


class SpanError(ScopefmtError, IndexError):
    """A span that is reversed or reaches outside the input."""

    def __init__(self, span: Span, length: int) -> None:
        self.span = span
        self.length = length
        super().__init__(f"invalid span {span.start}-{span.end} for input of length {length}")
