"""A minimal syntax tree that satisfies the traversal contract the printer expects.

Any parser can be plugged into :func:`scopefmt.format` as long as its trees
offer ``iterate(enter, leave)`` over nodes exposing ``name``, ``start`` and
``end``. Parsers that have no tree type of their own can build these.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Literal, Protocol, TypeAlias


class Node(Protocol):
    """What the printer reads from a node."""

    @property
    def name(self) -> str: ...

    @property
    def start(self) -> int: ...

    @property
    def end(self) -> int: ...


Visitor: TypeAlias = Callable[[Node], object]


class Tree(Protocol):
    def iterate(self, enter: Visitor, leave: Visitor) -> None: ...


@dataclass(slots=True)
class SyntaxNode:
    """A named node covering ``[start, end)`` of the input."""

    name: str
    start: int
    end: int
    children: list[SyntaxNode] = field(default_factory=list)

    @classmethod
    def leaf(cls, name: str, start: int, end: int) -> SyntaxNode:
        return cls(name, start, end)

    @classmethod
    def of(cls, name: str, *children: SyntaxNode) -> SyntaxNode:
        """A container spanning its children."""
        if not children:
            raise ValueError(f"container {name!r} needs at least one child")
        return cls(name, children[0].start, children[-1].end, list(children))

    def is_leaf(self) -> bool:
        return not self.children


@dataclass(slots=True)
class SyntaxTree:
    """A tree rooted at a single node."""

    root: SyntaxNode

    def walk(self) -> Iterator[tuple[Literal["enter", "leave"], SyntaxNode]]:
        """Yield enter/leave events depth-first, children in order."""
        stack: list[tuple[SyntaxNode, bool]] = [(self.root, False)]
        while stack:
            node, visited = stack.pop()
            if visited:
                yield "leave", node
                continue
            yield "enter", node
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.children))

    def iterate(self, enter: Visitor, leave: Visitor) -> None:
        for event, node in self.walk():
            if event == "enter":
                enter(node)
            else:
                leave(node)
