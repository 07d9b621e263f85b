"""
Parser package

Normalization, greedy tokenization, lexeme classification and the
shunting-yard conversion to postfix.
"""

from .registry import (
    LEXEMES,
    OPERATORS,
    LexemeRegistry,
    OperatorConfig,
    OperatorRegistry,
    Priority,
    is_digit_run,
)
from .tokens import Token, TokenKind
from .normalizer import normalize
from .tokenizer import Tokenizer, tokenize
from .classifier import Classifier, classify
from .converter import (
    ConversionResult,
    OperatorStack,
    ShuntingYard,
    convert,
    convert_normalized,
)

__all__ = [
    "LEXEMES",
    "OPERATORS",
    "LexemeRegistry",
    "OperatorConfig",
    "OperatorRegistry",
    "Priority",
    "is_digit_run",
    "Token",
    "TokenKind",
    "normalize",
    "Tokenizer",
    "tokenize",
    "Classifier",
    "classify",
    "ConversionResult",
    "OperatorStack",
    "ShuntingYard",
    "convert",
    "convert_normalized",
]
