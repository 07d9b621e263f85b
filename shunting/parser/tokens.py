"""
Classified tokens.

A token is a tagged variant: either a number or an operator (which covers
functions and brackets too). Associativity only exists for operators;
asking a number for it is a programming error and fails loudly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from ..core.errors import FatalInternalError
from .registry import OperatorConfig, Priority


class TokenKind(Enum):
    """Token variants."""

    NUMBER = auto()
    OPERATOR = auto()


@dataclass(frozen=True)
class Token:
    """
    Represents a single classified lexeme.

    Attributes:
        kind: Which variant this token is
        lexeme: The source text of the token
        priority: Priority used by the shunting-yard conversion
        associativity: Left-associativity flag for operators; not applicable
            to numbers, which always carry None here
    """

    kind: TokenKind
    lexeme: str
    priority: Priority
    associativity: bool | None = field(default=None, repr=False)

    @classmethod
    def number(cls, digits: str) -> "Token":
        return cls(TokenKind.NUMBER, digits, Priority.NUMBER)

    @classmethod
    def operator(cls, config: OperatorConfig) -> "Token":
        return cls(
            TokenKind.OPERATOR,
            config.symbol,
            config.priority,
            config.left_associative,
        )

    @property
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    @property
    def is_open_bracket(self) -> bool:
        return self.kind is TokenKind.OPERATOR and self.priority == Priority.OPEN_BRACKET

    @property
    def is_close_bracket(self) -> bool:
        return self.kind is TokenKind.OPERATOR and self.priority == Priority.CLOSE_BRACKET

    @property
    def left_associative(self) -> bool:
        """
        Whether equal-priority predecessors are popped before this operator.

        Raises:
            FatalInternalError: If called on a number token
        """
        if self.kind is not TokenKind.OPERATOR or self.associativity is None:
            raise FatalInternalError(
                "associativity requested for a number", lexeme=self.lexeme
            )
        return self.associativity

    def __str__(self) -> str:
        return self.lexeme

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, '{self.lexeme}', priority={self.priority.name})"
