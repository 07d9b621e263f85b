"""
Greedy longest-match tokenizer.

The tokenizer cuts a normalized expression into lexemes. At each position it
grows a candidate one character at a time for as long as the candidate could
still become a registered lexeme or is a run of digits, and keeps the longest
length that was an exact match. This keeps multi-character names such as
``sin`` whole and consumes digit runs completely.
"""

from __future__ import annotations

from typing import Iterator

from ..core.errors import TokenizationError, UnsupportedOperationError
from .registry import LEXEMES, LexemeRegistry


class Tokenizer:
    """
    Splits normalized text into lexemes.

    Attributes:
        lexemes: Registry deciding what counts as a lexeme
    """

    def __init__(self, lexemes: LexemeRegistry = LEXEMES):
        self.lexemes = lexemes

    def match_at(self, text: str, start: int) -> int:
        """
        Find the length of the longest lexeme starting at ``start``.

        Args:
            text: Normalized expression
            start: Scan position

        Returns:
            Length of the matched lexeme (always positive)

        Raises:
            TokenizationError: If no lexeme or digit run starts here
            UnsupportedOperationError: If the match would be empty
        """
        if start >= len(text):
            raise UnsupportedOperationError(start)

        last_match = None
        length = 0
        while start + length < len(text):
            length += 1
            candidate = text[start:start + length]
            if self.lexemes.matches(candidate):
                last_match = length
            if not self.lexemes.can_extend(candidate):
                break

        if last_match is None:
            raise TokenizationError(start, text[start])
        return last_match

    def iter_lexemes(self, text: str) -> Iterator[str]:
        """Yield lexemes lazily, left to right."""
        pos = 0
        while pos < len(text):
            length = self.match_at(text, pos)
            yield text[pos:pos + length]
            pos += length

    def tokenize(self, text: str) -> list[str]:
        return list(self.iter_lexemes(text))


def tokenize(text: str) -> list[str]:
    """Tokenize normalized text with the default registry."""
    return Tokenizer().tokenize(text)
