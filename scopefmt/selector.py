"""Evaluation of selector expressions against scope paths.

A scope path lists the names of a node's ancestors, outermost first, ending
with the node's own name. Selector syntax, by operator precedence (high to
low)::

    ^x        escape the next character into a literal
    a/b       `b` nested anywhere below `a`
    ( )       grouping
    -         logical NOT
    & or ' '  logical AND
    | or ,    logical OR

Example: ``^{, ^( - ForSpec, foo & (-bar | buzz), Number/BigNumber``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeAlias

from .ast import And, Expression, Literal, Not, Or
from .parser import parse_selector

Predicate: TypeAlias = Callable[[Sequence[str]], bool]


def match_scopes(path: Sequence[str], scopes: Sequence[str]) -> bool:
    """Check whether ``path`` occurs in order, not necessarily contiguously, in ``scopes``."""
    if len(path) == 1:
        return path[0] in scopes
    remaining = iter(scopes)
    return all(segment in remaining for segment in path)


def evaluate(expression: Expression, scopes: Sequence[str]) -> bool:
    """Evaluate an expression against a scope path."""
    match expression:
        case Literal(path):
            return match_scopes(path, scopes)
        case Not(operand):
            return not evaluate(operand, scopes)
        case And(operands):
            return all(evaluate(operand, scopes) for operand in operands)
        case Or(operands):
            return any(evaluate(operand, scopes) for operand in operands)
    raise TypeError(f"not a selector expression: {expression!r}")


def compile_selector(selector: str | Expression, strict: bool = False) -> Predicate:
    """Turn a selector into a predicate over scope paths."""
    if isinstance(selector, str):
        selector = parse_selector(selector, strict)
    expression = selector

    def test(scopes: Sequence[str]) -> bool:
        return evaluate(expression, scopes)

    return test


def _escape(segment: str) -> str:
    return "".join(ch if ch.isalnum() or ch == "_" else "^" + ch for ch in segment)


def render(expression: Expression) -> str:
    """Render an expression back to selector syntax, fully parenthesized."""
    match expression:
        case Literal(path):
            if path == ("/",):
                return "/"
            return "/".join(_escape(segment) for segment in path)
        case Not(operand):
            return "-" + render(operand)
        case And(operands):
            return "(" + " & ".join(render(operand) for operand in operands) + ")"
        case Or(operands):
            return "(" + ", ".join(render(operand) for operand in operands) + ")"
    raise TypeError(f"not a selector expression: {expression!r}")
