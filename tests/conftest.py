"""Shared fixtures."""

from __future__ import annotations

import pytest
from toy import JS_SPEC, ToyParser

from scopefmt import SpacePrinter, define_printer, space


@pytest.fixture
def toy_parser() -> ToyParser:
    return ToyParser()


@pytest.fixture
def js_printer() -> SpacePrinter:
    return define_printer(spec=JS_SPEC, default_spec=space.after)
