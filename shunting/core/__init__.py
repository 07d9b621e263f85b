"""Core utilities package"""

from .config import Settings, settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    ShuntingError,
    TokenizationError,
    UnsupportedOperationError,
    BracketMismatchError,
    FatalInternalError,
    format_error,
)

__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "ShuntingError",
    "TokenizationError",
    "UnsupportedOperationError",
    "BracketMismatchError",
    "FatalInternalError",
    "format_error",
]
