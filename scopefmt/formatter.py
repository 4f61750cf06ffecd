"""Entry point tying an external parser to a printer."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Coroutine
from dataclasses import dataclass
from typing import Any, Protocol

from .printer import Printer
from .source import TextSource
from .tree import Tree

logger = logging.getLogger(__name__)


class Parser(Protocol):
    def parse(self, input: str | TextSource) -> Tree: ...


@dataclass(slots=True)
class FormatOptions:
    parser: Parser
    spec: Printer


def format(
    input: str | TextSource, options: FormatOptions
) -> str | Coroutine[Any, Any, str]:
    """Parse ``input`` and print it through ``options.spec``.

    Returns the printed text, or a coroutine resolving to it when the printer
    has a pending ``ready`` awaitable. Parser exceptions propagate unchanged.
    """
    parser, printer = options.parser, options.spec

    dispose = getattr(printer, "dispose", None)
    if dispose is not None:
        dispose()

    printer.input = input
    tree = parser.parse(input)
    logger.debug("printing tree from %s", type(parser).__name__)
    tree.iterate(printer.enter, printer.leave)

    done = getattr(printer, "done", None)
    if done is not None:
        done()

    ready = getattr(printer, "ready", None)
    if ready is not None:
        return _when_ready(printer, ready)
    return printer.output


async def _when_ready(printer: Printer, ready: Awaitable[object]) -> str:
    await ready
    return printer.output
