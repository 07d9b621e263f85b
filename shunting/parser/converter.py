"""
Shunting-yard conversion from infix to Reverse Polish Notation.

Tokens are fed one at a time as the tokenizer cuts them. Numbers go straight
to the output; operators wait on a stack until an incoming operator of lower
priority (or of equal priority, when the incoming one is left-associative),
a closing bracket, or the end of input releases them.
"""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import BracketMismatchError, ShuntingError
from ..core.logging import get_context_logger
from .classifier import Classifier
from .normalizer import normalize
from .tokenizer import Tokenizer
from .tokens import Token

logger = get_context_logger(__name__, component="converter")


class OperatorStack:
    """LIFO of operator tokens; numbers are never pushed."""

    def __init__(self):
        self._items: list[Token] = []

    def push(self, token: Token) -> None:
        if token.is_number:
            raise ValueError(f"cannot push number {token.lexeme!r} onto the operator stack")
        self._items.append(token)

    def pop(self) -> Token:
        return self._items.pop()

    def top(self) -> Token:
        return self._items[-1]

    def empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Token]:
        return reversed(self._items)


class ConversionResult(BaseModel):
    """Outcome of a successful conversion."""

    model_config = ConfigDict(frozen=True)

    tokens: list[str] = Field(default_factory=list, description="Lexemes in arrival order")
    postfix: list[str] = Field(default_factory=list, description="Lexemes in postfix order")

    @property
    def tokens_text(self) -> str:
        return ", ".join(self.tokens)

    @property
    def postfix_text(self) -> str:
        return " ".join(self.postfix)

    def render(self) -> str:
        return f"Tokens: {self.tokens_text}\nResult: {self.postfix_text}"


class ShuntingYard:
    """
    Incremental shunting-yard converter.

    Attributes:
        output: Lexemes in postfix order
        trace: Every lexeme fed, in arrival order
        stack: Pending operators
    """

    def __init__(self):
        self.output: list[str] = []
        self.trace: list[str] = []
        self.stack = OperatorStack()

    def feed(self, token: Token) -> None:
        """Consume one classified token."""
        self.trace.append(token.lexeme)

        if token.is_number:
            self.output.append(token.lexeme)
        elif token.is_open_bracket:
            self.stack.push(token)
        elif token.is_close_bracket:
            self._close_bracket()
        else:
            self._push_operator(token)

    def _close_bracket(self) -> None:
        while True:
            if self.stack.empty():
                raise BracketMismatchError("closing bracket without opening bracket")
            top = self.stack.pop()
            if top.is_open_bracket:
                return
            self.output.append(top.lexeme)

    def _push_operator(self, op: Token) -> None:
        while not self.stack.empty() and self._should_pop(self.stack.top(), op):
            self.output.append(self.stack.pop().lexeme)
        self.stack.push(op)

    @staticmethod
    def _should_pop(top: Token, op: Token) -> bool:
        return top.priority > op.priority or (
            top.priority == op.priority and op.left_associative
        )

    def finish(self) -> ConversionResult:
        """
        Drain the stack and return the result.

        Raises:
            BracketMismatchError: If an opening bracket was never closed
        """
        while not self.stack.empty():
            top = self.stack.pop()
            if top.is_open_bracket:
                self.stack.clear()
                raise BracketMismatchError("opening bracket was never closed")
            self.output.append(top.lexeme)

        return ConversionResult(tokens=list(self.trace), postfix=list(self.output))

    def abort(self) -> None:
        self.stack.clear()


def convert_normalized(
    text: str,
    tokenizer: Tokenizer | None = None,
    classifier: Classifier | None = None,
) -> ConversionResult:
    """
    Convert already-normalized text to postfix.

    Each lexeme is classified and fed to the converter before the next one is
    cut, so an error stops the scan at the offending position.

    Raises:
        ShuntingError: On any tokenization, bracket or internal error; no
            partial result is returned
    """
    tokenizer = tokenizer or Tokenizer()
    classifier = classifier or Classifier()
    yard = ShuntingYard()

    try:
        for lexeme in tokenizer.iter_lexemes(text):
            yard.feed(classifier.classify(lexeme))
        result = yard.finish()
    except ShuntingError as exc:
        yard.abort()
        logger.info(
            f"Conversion failed: {exc.message}",
            extra_data={"expression": text, "error_type": exc.__class__.__name__, **exc.details},
        )
        raise

    logger.debug(
        "Converted expression",
        extra_data={"expression": text, "tokens": result.tokens, "postfix": result.postfix},
    )
    return result


def convert(expression: str) -> ConversionResult:
    """Normalize a raw expression and convert it to postfix."""
    return convert_normalized(normalize(expression))
