"""Tests for selector evaluation."""

from __future__ import annotations

from itertools import product

import pytest

from scopefmt.ast import And, Literal, Not, Or
from scopefmt.parser import parse_selector
from scopefmt.selector import compile_selector, evaluate, match_scopes, render

NAMES = ["foo", "bar", "a", "b"]
# Every scope path of length 0 to 3 over NAMES
PATHS = [list(p) for n in range(4) for p in product(NAMES, repeat=n)]


def test_single_segment_is_membership():
    assert match_scopes(("foo",), ["x", "foo", "y"])
    assert not match_scopes(("foo",), ["x", "y"])
    assert not match_scopes(("foo",), [])


def test_path_is_ordered_subsequence():
    assert match_scopes(("a", "b"), ["a", "b"])
    assert match_scopes(("a", "b"), ["x", "a", "y", "z", "b"])
    assert not match_scopes(("a", "b"), ["b", "a"])
    assert not match_scopes(("a", "b"), ["a"])


def test_path_repeated_segment_needs_two_occurrences():
    assert not match_scopes(("a", "a"), ["a", "b"])
    assert match_scopes(("a", "a"), ["a", "b", "a"])


def test_not():
    test = compile_selector("-foo")
    for path in PATHS:
        assert test(path) == ("foo" not in path)


def test_or():
    test = compile_selector("foo,bar")
    for path in PATHS:
        assert test(path) == ("foo" in path or "bar" in path)


def test_implicit_and():
    test = compile_selector("foo bar")
    for path in PATHS:
        assert test(path) == ("foo" in path and "bar" in path)
    assert test(["bar", "foo"])


def test_slash_orders_segments():
    test = compile_selector("a/b")
    assert test(["x", "a", "y", "b", "z"])
    assert not test(["x", "b", "y", "a", "z"])


def test_deterministic():
    first = compile_selector("foo & (-bar | a/b), b")
    second = compile_selector("foo & (-bar | a/b), b")
    assert [first(path) for path in PATHS] == [second(path) for path in PATHS]


def test_compile_expression():
    test = compile_selector(Or((Not(Literal(("a",))), Literal(("b",)))))
    assert test(["b", "a"])
    assert test([])
    assert not test(["a"])


def test_evaluate_short_circuits():
    class Exploding:
        pass

    expression = Or((Literal(("a",)), Exploding()))  # type: ignore[arg-type]
    assert evaluate(expression, ["a"])
    with pytest.raises(TypeError):
        evaluate(expression, ["b"])
    assert not evaluate(And((Literal(("a",)), Exploding())), ["b"])  # type: ignore[arg-type]


def test_render():
    assert render(parse_selector("a, b -c")) == "(a, (b & -c))"
    assert render(Literal(("/",))) == "/"
    assert render(Literal(("(",))) == "^("


@pytest.mark.parametrize(
    "selector",
    [
        "a",
        "Number/BigNumber",
        "^(, ^)",
        "foo^,bar",
        "-a b, c",
        "^{, ^( - ForSpec, foo & (-bar | buzz), Number/BigNumber",
    ],
)
def test_render_reparses(selector: str):
    expression = parse_selector(selector)
    assert parse_selector(render(expression)) == expression
