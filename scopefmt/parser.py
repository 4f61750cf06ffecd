"""Parser for the selector language."""

from __future__ import annotations

import json

from .ast import And, Expression, Literal, Not, Or
from .lexer import Token, TokenKind, lex
from .types import SelectorSyntaxError

OPERAND_START = frozenset({TokenKind.LITERAL, TokenKind.LPAREN, TokenKind.NOT})


class SelectorParser:
    """Precedence-climbing parser over a token list."""

    __slots__ = ("pos", "selector", "tokens")

    def __init__(self, tokens: list[Token], selector: str = "") -> None:
        self.tokens = tokens
        self.selector = selector
        self.pos = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        """Consume and return the current token."""
        token = self.tokens[self.pos]
        if token.kind is not TokenKind.END:
            self.pos += 1
        return token

    def _match(self, kind: TokenKind) -> Token | None:
        """Consume the current token if it has the given kind."""
        if self.current.kind is kind:
            return self._advance()
        return None

    def _error(self, expected: str) -> SelectorSyntaxError:
        token = self.current
        found = token.kind.value
        if token.text:
            found += " " + json.dumps(token.text)
        return SelectorSyntaxError(f"expected {expected}, got {found}", token.span, self.selector)

    def _expect(self, kind: TokenKind) -> Token:
        """Expect a specific token kind."""
        token = self._match(kind)
        if token is None:
            raise self._error(kind.value)
        return token

    def parse(self) -> Expression:
        """Parse a complete selector."""
        expression = self.expression(TokenKind.END.precedence)
        self._expect(TokenKind.END)
        return expression

    def _binding(self) -> int:
        """Precedence of the current token as an infix operator."""
        if self.current.kind in OPERAND_START:
            # Adjacent operands are an implicit AND
            return TokenKind.AND.precedence
        return self.current.precedence

    def expression(self, min_precedence: int) -> Expression:
        """Parse an expression whose operators bind tighter than ``min_precedence``."""
        left = self._prefix()

        while min_precedence < self._binding():
            if self._match(TokenKind.OR):
                left = _join(Or, left, self.expression(TokenKind.OR.precedence))
            else:
                # Explicit `&` or plain adjacency
                self._match(TokenKind.AND)
                left = _join(And, left, self.expression(TokenKind.AND.precedence))

        return left

    def _prefix(self) -> Expression:
        if self._match(TokenKind.LPAREN):
            inner = self.expression(TokenKind.LPAREN.precedence)
            self._expect(TokenKind.RPAREN)
            return inner

        token = self._match(TokenKind.LITERAL)
        if token is not None:
            if token.text == "/":
                return Literal(("/",))
            return Literal(tuple(token.text.split("/")))

        if self._match(TokenKind.NOT):
            return Not(self.expression(TokenKind.NOT.precedence))

        raise self._error("'(', literal or '-'")


def _join(
    cls: type[And] | type[Or], left: Expression, right: Expression
) -> Expression:
    """Combine two operands, flattening operands of the same kind."""
    operands: list[Expression] = []
    for side in (left, right):
        if isinstance(side, cls):
            operands.extend(side.operands)
        else:
            operands.append(side)
    return cls(tuple(operands))


def parse_selector(selector: str, strict: bool = False) -> Expression:
    """Parse a selector string into an expression."""
    return SelectorParser(lex(selector, strict), selector).parse()
