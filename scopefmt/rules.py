"""Spacing rules and rule sets."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .ast import Expression
from .parser import parse_selector
from .selector import evaluate, render
from .types import ConfigError, Space

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Rule:
    """A selector paired with the spacing it applies."""

    selector: str
    expression: Expression
    space: Space

    @classmethod
    def define(cls, selector: str, space: Space, strict: bool = False) -> Rule:
        """Compile ``selector``; raises SelectorSyntaxError if it is malformed."""
        if not isinstance(space, Space):
            raise ConfigError(f"rule {selector!r}: expected a Space, got {space!r}")
        expression = parse_selector(selector, strict)
        logger.debug("compiled rule %r as %s -> %s", selector, render(expression), space.name)
        return cls(selector, expression, space)

    def test(self, scopes: Sequence[str]) -> bool:
        return evaluate(self.expression, scopes)

    __call__ = test


@dataclass(frozen=True, slots=True)
class PrinterOptions:
    """Whitespace handling shared by every token."""

    # Collapse spaces between tokens; only 0 or 1
    collapse_space: int = 1
    # Cap on consecutive newlines between tokens, 0 disables collapsing
    collapse_newline: int = 2
    # Strip spaces at the end of a line before a newline
    trim_trailing_space: bool = True
    # Spacing used when no rule matches
    default: Space = Space.NONE

    def __post_init__(self) -> None:
        if self.collapse_space not in (0, 1):
            raise ConfigError(f"collapse_space must be 0 or 1, got {self.collapse_space!r}")
        if (
            isinstance(self.collapse_newline, bool)
            or not isinstance(self.collapse_newline, int)
            or self.collapse_newline < 0
        ):
            raise ConfigError(
                f"collapse_newline must be a non-negative integer, got {self.collapse_newline!r}"
            )
        if not isinstance(self.default, Space):
            raise ConfigError(f"default must be a Space, got {self.default!r}")


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Ordered rules; rules declared later take precedence."""

    rules: tuple[Rule, ...] = ()
    options: PrinterOptions = field(default_factory=PrinterOptions)

    @classmethod
    def from_spec(
        cls,
        spec: Mapping[str, Space] | None = None,
        default: Space | None = None,
        *,
        collapse_space: int = 1,
        collapse_newline: int = 2,
        trim_trailing_space: bool = True,
        strict: bool = False,
    ) -> RuleSet:
        """Build a rule set from a ``{selector: space}`` mapping, in iteration order."""
        options = PrinterOptions(
            collapse_space=collapse_space,
            collapse_newline=collapse_newline,
            trim_trailing_space=trim_trailing_space,
            default=Space.NONE if default is None else default,
        )
        rules = tuple(
            Rule.define(selector, space, strict) for selector, space in (spec or {}).items()
        )
        return cls(rules, options)

    @property
    def default(self) -> Space:
        return self.options.default

    def resolve(self, scopes: Sequence[str]) -> Space:
        """Return the space of the last declared rule matching ``scopes``."""
        for rule in reversed(self.rules):
            if rule.test(scopes):
                return rule.space
        return self.options.default
