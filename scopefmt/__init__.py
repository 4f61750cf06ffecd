"""Rule-driven whitespace printer for syntax trees."""

from types import SimpleNamespace

from .ast import And, Expression, Literal, Not, Or
from .formatter import FormatOptions, Parser, format
from .lexer import Lexer, Token, TokenKind, lex
from .parser import SelectorParser, parse_selector
from .printer import Printer, SpacePrinter, define_printer
from .rules import PrinterOptions, Rule, RuleSet
from .selector import compile_selector, evaluate, match_scopes, render
from .source import ChunkedSource, StringSource, TextSource, as_source
from .tree import Node, SyntaxNode, SyntaxTree, Tree
from .types import ConfigError, ScopefmtError, SelectorSyntaxError, Space, Span, SpanError

space = SimpleNamespace(
    none=Space.NONE,
    before=Space.BEFORE,
    after=Space.AFTER,
    around=Space.AROUND,
)

__all__ = [
    "And",
    "ChunkedSource",
    "ConfigError",
    "Expression",
    "FormatOptions",
    "Lexer",
    "Literal",
    "Node",
    "Not",
    "Or",
    "Parser",
    "Printer",
    "PrinterOptions",
    "Rule",
    "RuleSet",
    "ScopefmtError",
    "SelectorParser",
    "SelectorSyntaxError",
    "Space",
    "SpacePrinter",
    "Span",
    "SpanError",
    "StringSource",
    "SyntaxNode",
    "SyntaxTree",
    "TextSource",
    "Token",
    "TokenKind",
    "Tree",
    "as_source",
    "compile_selector",
    "define_printer",
    "evaluate",
    "format",
    "lex",
    "match_scopes",
    "parse_selector",
    "render",
    "space",
]
