"""Lexeme classification."""

from __future__ import annotations

from ..core.errors import FatalInternalError
from .registry import OPERATORS, OperatorRegistry, is_digit_run
from .tokens import Token


class Classifier:
    """Maps a finalized lexeme to a Number or Operator token."""

    def __init__(self, operators: OperatorRegistry = OPERATORS):
        self.operators = operators

    def classify(self, lexeme: str) -> Token:
        """
        Classify a lexeme produced by the tokenizer.

        Raises:
            FatalInternalError: If the lexeme is neither a digit run nor a
                registered operator. The tokenizer never emits such a lexeme
                when both stages share the same registry.
        """
        if is_digit_run(lexeme):
            return Token.number(lexeme)

        config = self.operators.lookup(lexeme)
        if config is None:
            raise FatalInternalError("unexpected error", lexeme=lexeme)
        return Token.operator(config)


def classify(lexeme: str) -> Token:
    """Classify a lexeme with the default operator registry."""
    return Classifier().classify(lexeme)
