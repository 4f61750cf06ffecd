"""Lexer for the selector language."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .types import SelectorSyntaxError, Span


class TokenKind(Enum):
    """Token kinds."""

    LITERAL = "literal"
    LPAREN = "lparen"
    RPAREN = "rparen"
    NOT = "not"
    AND = "and"
    OR = "or"
    END = "end"

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self]


PRECEDENCE: Final[dict[TokenKind, int]] = {
    TokenKind.LITERAL: 100,
    TokenKind.LPAREN: 1,
    TokenKind.RPAREN: 1,
    TokenKind.NOT: 40,
    TokenKind.AND: 30,
    TokenKind.OR: 20,
    TokenKind.END: 0,
}

OPERATORS: Final[dict[str, TokenKind]] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "-": TokenKind.NOT,
    "&": TokenKind.AND,
    "|": TokenKind.OR,
    ",": TokenKind.OR,
}

TOKEN_RE: Final[re.Pattern[str]] = re.compile(r"\^.|[-&|,()]|[\w/]+", re.DOTALL)


@dataclass(slots=True)
class Token:
    """A selector token."""

    kind: TokenKind
    span: Span
    text: str = ""

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self.kind]

    def describe(self) -> str:
        """Kind name followed by the quoted payload, if any."""
        if self.text:
            return f'{self.kind.value} "{self.text}"'
        return self.kind.value


class Lexer:
    """Tokenizer for selector strings.

    In the default permissive mode characters that belong to no token are
    dropped. With ``strict=True`` anything other than whitespace is an error.
    """

    __slots__ = ("pos", "selector", "strict")

    def __init__(self, selector: str, strict: bool = False) -> None:
        self.selector = selector
        self.strict = strict
        self.pos = 0

    def _skipped(self, start: int, end: int) -> None:
        """Check the characters between two matches."""
        if not self.strict:
            return
        for i in range(start, end):
            if not self.selector[i].isspace():
                raise SelectorSyntaxError(
                    f"unexpected character {self.selector[i]!r}",
                    Span(i, i + 1),
                    self.selector,
                )

    def tokenize(self) -> list[Token]:
        """Return all tokens, terminated by an END token."""
        tokens: list[Token] = []

        for m in TOKEN_RE.finditer(self.selector, self.pos):
            self._skipped(self.pos, m.start())
            self.pos = m.end()
            text = m.group()
            span = Span(m.start(), m.end())

            last = tokens[-1] if tokens else None
            if last is not None and last.kind is not TokenKind.LITERAL:
                last = None

            match text[0]:
                case "^":
                    # Escapes extend the literal they follow
                    if last is not None:
                        last.text += text[1]
                        last.span = Span(last.span.start, span.end)
                    else:
                        tokens.append(Token(TokenKind.LITERAL, span, text[1]))
                case ch if ch in OPERATORS:
                    tokens.append(Token(OPERATORS[ch], span))
                case _:
                    # A word run touching an escaped character continues its literal
                    if last is not None and last.span.end == span.start:
                        last.text += text
                        last.span = Span(last.span.start, span.end)
                    else:
                        tokens.append(Token(TokenKind.LITERAL, span, text))

        self._skipped(self.pos, len(self.selector))
        self.pos = len(self.selector)
        tokens.append(Token(TokenKind.END, Span(self.pos, self.pos)))
        return tokens


def lex(selector: str, strict: bool = False) -> list[Token]:
    """Tokenize a selector string."""
    return Lexer(selector, strict).tokenize()
