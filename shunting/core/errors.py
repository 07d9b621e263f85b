"""
Conversion exceptions.

Every failure of a conversion is raised as a ShuntingError subclass and
aborts the whole conversion; nothing is recovered inside the parser.
"""

from typing import Any, Dict, Optional


class ShuntingError(Exception):
    """Base exception for conversion errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured output"""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class TokenizationError(ShuntingError):
    """Raised when no lexeme or digit run matches at the scan position"""

    def __init__(self, position: int, character: str):
        super().__init__(
            message="undefined operation",
            details={"position": position, "character": character},
        )
        self.position = position
        self.character = character


class UnsupportedOperationError(ShuntingError):
    """Raised when the matcher finalizes a zero-length lexeme"""

    def __init__(self, position: int):
        super().__init__(
            message="unsupported operation",
            details={"position": position},
        )
        self.position = position


class BracketMismatchError(ShuntingError):
    """Raised for a ')' without a matching '(' or a '(' left open at the end"""

    def __init__(self, reason: str):
        super().__init__(message="brackets problem", details={"reason": reason})
        self.reason = reason


class FatalInternalError(ShuntingError):
    """
    Raised when an internal invariant is violated.

    This never signals bad input: it means the tokenizer produced a lexeme the
    classifier cannot resolve, or associativity was requested on a number.
    """

    def __init__(self, message: str = "unexpected error", **details: Any):
        super().__init__(message=message, details=details)


def format_error(error: Exception) -> str:
    """Render an error the way the console reports it"""
    message = error.message if isinstance(error, ShuntingError) else str(error)
    return f"Error: {message}"
