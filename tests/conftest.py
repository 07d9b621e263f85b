"""
Shared pytest fixtures for the converter test suite.

This module provides:
- Fresh tokenizer, classifier and converter instances
- A helper asserting the rendered trace and postfix of an expression
- Isolation of the cached settings from the environment
"""

import os

import pytest

from shunting.core.config import get_settings
from shunting.parser import Classifier, ShuntingYard, Tokenizer, convert


@pytest.fixture
def tokenizer() -> Tokenizer:
    return Tokenizer()


@pytest.fixture
def classifier() -> Classifier:
    return Classifier()


@pytest.fixture
def yard() -> ShuntingYard:
    return ShuntingYard()


@pytest.fixture
def assert_converts():
    """Helper to assert the trace and postfix text of an expression."""
    def _assert_converts(expression: str, postfix: str, tokens: str | None = None) -> None:
        """
        Convert an expression and compare the rendered output.

        Args:
            expression: Raw infix expression
            postfix: Expected postfix, lexemes separated by single spaces
            tokens: Expected trace, lexemes separated by ", " (optional)
        """
        result = convert(expression)
        assert result.postfix_text == postfix, f"{expression!r}: {result.postfix_text!r} != {postfix!r}"
        if tokens is not None:
            assert result.tokens_text == tokens, f"{expression!r}: {result.tokens_text!r} != {tokens!r}"

    return _assert_converts


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep SHUNTING_* variables from the host environment out of the tests."""
    for name in list(os.environ):
        if name.startswith("SHUNTING_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
