"""
Lexeme and operator registries.

Both tables are built once, at import time, and are read-only afterwards.
The lexeme registry is derived from the operator registry so the tokenizer
and the classifier always agree on what a lexeme is.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator

DIGITS = frozenset("0123456789")


class Priority(IntEnum):
    """Operator priority; brackets use negative sentinels."""

    OPEN_BRACKET = -2
    CLOSE_BRACKET = -1
    NUMBER = 0
    UNARY_FUNCTION = 1
    ADD_SUB = 2
    MUL_DIV = 3
    POWER = 4


@dataclass(frozen=True)
class OperatorConfig:
    """Registry entry for an operator, function or bracket."""

    symbol: str
    priority: Priority
    left_associative: bool


def is_digit_run(candidate: str) -> bool:
    """True for a non-empty string made only of the characters 0-9."""
    return bool(candidate) and all(ch in DIGITS for ch in candidate)


class OperatorRegistry:
    """
    Ordered, immutable table of operator entries.

    Lookup is by exact symbol; the first registered entry wins.
    """

    def __init__(self, entries: Iterable[OperatorConfig]):
        self._entries: tuple[OperatorConfig, ...] = tuple(entries)

    @classmethod
    def default(cls) -> "OperatorRegistry":
        """Build the standard arithmetic table."""
        return cls(
            [
                OperatorConfig("+", Priority.ADD_SUB, True),
                OperatorConfig("-", Priority.ADD_SUB, True),
                OperatorConfig("*", Priority.MUL_DIV, True),
                OperatorConfig("/", Priority.MUL_DIV, True),
                OperatorConfig("^", Priority.POWER, False),
                OperatorConfig("sin", Priority.UNARY_FUNCTION, False),
                OperatorConfig("cos", Priority.UNARY_FUNCTION, False),
                OperatorConfig("(", Priority.OPEN_BRACKET, True),
                OperatorConfig(")", Priority.CLOSE_BRACKET, True),
            ]
        )

    def lookup(self, symbol: str) -> OperatorConfig | None:
        for entry in self._entries:
            if entry.symbol == symbol:
                return entry
        return None

    @property
    def symbols(self) -> tuple[str, ...]:
        return tuple(entry.symbol for entry in self._entries)

    def __iter__(self) -> Iterator[OperatorConfig]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and self.lookup(symbol) is not None


class LexemeRegistry:
    """
    The set of fixed lexemes plus the rule that a digit run is a lexeme.

    Besides exact matching it answers whether a candidate could still grow
    into a lexeme, which is what the tokenizer's longest-match scan needs.
    """

    def __init__(self, lexemes: Iterable[str]):
        self._lexemes: tuple[str, ...] = tuple(lexemes)
        self._exact = frozenset(self._lexemes)
        self._prefixes = frozenset(
            lexeme[:end]
            for lexeme in self._lexemes
            for end in range(1, len(lexeme) + 1)
        )

    @classmethod
    def from_operators(cls, operators: OperatorRegistry) -> "LexemeRegistry":
        return cls(operators.symbols)

    @property
    def lexemes(self) -> tuple[str, ...]:
        return self._lexemes

    def matches(self, candidate: str) -> bool:
        """True if the candidate is exactly a lexeme or a digit run."""
        return candidate in self._exact or is_digit_run(candidate)

    def can_extend(self, candidate: str) -> bool:
        """True while a longer candidate could still match something."""
        return candidate in self._prefixes or is_digit_run(candidate)


OPERATORS = OperatorRegistry.default()
LEXEMES = LexemeRegistry.from_operators(OPERATORS)
