"""Tree-walking printer that re-serializes tokens with rule-driven spacing."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Mapping
from typing import Protocol, runtime_checkable

from .rules import RuleSet
from .source import StringSource, TextSource, as_source
from .tree import Node
from .types import Space, Span, SpanError

logger = logging.getLogger(__name__)


@runtime_checkable
class Printer(Protocol):
    """The callbacks and state a printer exposes to :func:`scopefmt.format`.

    ``done`` and ``dispose`` are optional. When ``ready`` is not None,
    ``format`` awaits it before reading ``output``.
    """

    input: str | TextSource
    ready: Awaitable[object] | None

    @property
    def output(self) -> str: ...

    def enter(self, node: Node) -> None: ...

    def leave(self, node: Node) -> None: ...


class SpacePrinter:
    """Copies each leaf's text, spacing it according to a rule set.

    Container nodes only contribute their names to the scope path seen by
    rules; text between leaves is dropped except for newlines (collapsed) and
    the indentation at the start of a line (kept).
    """

    ready: Awaitable[object] | None = None

    def __init__(self, rules: RuleSet) -> None:
        self.rules = rules
        self._source: TextSource = StringSource("")
        self._input: str | TextSource = ""
        self._output: list[str] = []
        self._scopes: list[str] = []
        self._last = Span(0, 0)
        self._entered = False

    @property
    def input(self) -> str | TextSource:
        return self._input

    @input.setter
    def input(self, value: str | TextSource) -> None:
        self._source = as_source(value)
        self._input = value

    @property
    def output(self) -> str:
        return "".join(self._output)

    @property
    def scopes(self) -> tuple[str, ...]:
        return tuple(self._scopes)

    def enter(self, node: Node) -> None:
        self._entered = True
        self._scopes.append(node.name)

    def leave(self, node: Node) -> None:
        try:
            if self._entered and node.end != node.start:
                self._emit(node)
        finally:
            self._scopes.pop()
            self._entered = False

    def done(self) -> None:
        source = self._source
        if "\n" in source.read(self._last.end, source.length):
            self._output.append("\n")

    def dispose(self) -> None:
        self._source = StringSource("")
        self._input = ""
        self._output = []
        self._scopes = []
        self._last = Span(0, 0)
        self._entered = False

    def _emit(self, node: Node) -> None:
        options = self.rules.options
        source = self._source
        if node.start < self._last.end:
            raise SpanError(Span(node.start, node.end), source.length)

        text = source.read(node.start, node.end)
        logger.debug("%s %r", "/".join(self._scopes), text)

        if options.collapse_newline:
            gap = source.read(self._last.end, node.start)
            newlines = gap.count("\n")
            if newlines:
                if options.trim_trailing_space:
                    self._trim_trailing()
                    self._output.append("\n" * min(newlines, options.collapse_newline))
                else:
                    self._output.append(_through_nth_newline(gap, options.collapse_newline))

        self._output.append(self._indent_at(node.start))

        space = self.rules.resolve(self._scopes)
        if options.collapse_space and space in (Space.BEFORE, Space.AROUND):
            if not self._ends_with(" ", "\n"):
                self._output.append(" ")

        self._output.append(text)

        if space in (Space.AFTER, Space.AROUND):
            self._output.append(" ")

        self._last = Span(node.start, node.end)

    def _indent_at(self, at: int) -> str:
        """The run of spaces before ``at`` if only spaces separate it from the line start."""
        i = at - 1
        while i >= 0:
            ch = self._source.read(i, i + 1)
            if ch == "\n":
                break
            if ch != " ":
                return ""
            i -= 1
        return " " * (at - i - 1)

    def _ends_with(self, *chars: str) -> bool:
        for chunk in reversed(self._output):
            if chunk:
                return chunk[-1] in chars
        return False

    def _trim_trailing(self) -> None:
        output = self._output
        while output and not output[-1].rstrip():
            output.pop()
        if output:
            output[-1] = output[-1].rstrip()


def _through_nth_newline(gap: str, n: int) -> str:
    """The prefix of ``gap`` ending with its ``n``-th newline, or at its last one."""
    end = -1
    for _ in range(n):
        k = gap.find("\n", end + 1)
        if k < 0:
            break
        end = k
    return gap[: end + 1]


def define_printer(
    spec: Mapping[str, Space] | None = None,
    default_spec: Space | None = None,
    *,
    collapse_space: int = 1,
    collapse_newline: int = 2,
    trim_trailing_space: bool = True,
    strict: bool = False,
) -> SpacePrinter:
    """Build a printer from a ``{selector: space}`` mapping.

    Rules lower in the mapping take precedence over earlier ones. Example::

        define_printer(
            spec={
                "^(, ^)": space.none,
                "Number, VariableName": space.none,
                "ArithOp, CompareOp, Equals, Arrow": space.around,
            },
            default_spec=space.after,
        )
    """
    rules = RuleSet.from_spec(
        spec,
        default_spec,
        collapse_space=collapse_space,
        collapse_newline=collapse_newline,
        trim_trailing_space=trim_trailing_space,
        strict=strict,
    )
    return SpacePrinter(rules)
