"""Tests for the selector lexer."""

from __future__ import annotations

import pytest

from scopefmt.lexer import PRECEDENCE, Lexer, TokenKind, lex
from scopefmt.types import SelectorSyntaxError, Span


def kinds(selector: str) -> list[TokenKind]:
    return [token.kind for token in lex(selector)]


def literals(selector: str) -> list[str]:
    return [token.text for token in lex(selector) if token.kind is TokenKind.LITERAL]


def test_operators():
    assert kinds("a & -b | c, (d)") == [
        TokenKind.LITERAL,
        TokenKind.AND,
        TokenKind.NOT,
        TokenKind.LITERAL,
        TokenKind.OR,
        TokenKind.LITERAL,
        TokenKind.OR,
        TokenKind.LPAREN,
        TokenKind.LITERAL,
        TokenKind.RPAREN,
        TokenKind.END,
    ]


def test_path_is_one_literal():
    assert literals("Number/BigNumber") == ["Number/BigNumber"]
    assert literals("/") == ["/"]


def test_escape_starts_literal():
    """An escape with no literal before it becomes a literal of its own."""
    assert literals("^(, ^)") == ["(", ")"]
    assert kinds("^(, ^)") == [TokenKind.LITERAL, TokenKind.OR, TokenKind.LITERAL, TokenKind.END]


def test_escape_merges_into_literal():
    assert literals("foo^,bar") == ["foo,bar"]
    assert literals("^(^)") == ["()"]
    assert literals("^(foo") == ["(foo"]


def test_escape_after_gap_still_merges():
    assert literals("foo ^,") == ["foo,"]


def test_word_after_gap_is_new_literal():
    assert literals("foo bar") == ["foo", "bar"]


def test_literal_span_covers_escapes():
    token = lex("x foo^,bar")[1]
    assert token.span == Span(2, 10)


def test_end_token():
    tokens = lex("ab")
    assert tokens[-1].kind is TokenKind.END
    assert tokens[-1].span == Span(2, 2)
    assert kinds("") == [TokenKind.END]


def test_unknown_characters_skipped():
    assert literals("a $ b") == ["a", "b"]
    assert kinds("a $ b") == [TokenKind.LITERAL, TokenKind.LITERAL, TokenKind.END]


def test_strict_rejects_unknown_characters():
    with pytest.raises(SelectorSyntaxError) as excinfo:
        Lexer("a $ b", strict=True).tokenize()
    assert excinfo.value.span == Span(2, 3)
    assert "'$'" in excinfo.value.message


def test_strict_rejects_dangling_escape():
    with pytest.raises(SelectorSyntaxError):
        lex("a^", strict=True)


def test_strict_allows_whitespace():
    assert literals("  a\tb\n") == ["a", "b"]
    assert lex("  a\tb\n", strict=True)[-1].kind is TokenKind.END


def test_precedence_table():
    assert PRECEDENCE == {
        TokenKind.LITERAL: 100,
        TokenKind.LPAREN: 1,
        TokenKind.RPAREN: 1,
        TokenKind.NOT: 40,
        TokenKind.AND: 30,
        TokenKind.OR: 20,
        TokenKind.END: 0,
    }
    assert lex("a")[0].precedence == 100


def test_describe():
    a, end = lex("a")
    assert a.describe() == 'literal "a"'
    assert end.describe() == "end"
