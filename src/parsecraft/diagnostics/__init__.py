"""Failure diagnostics for parsecraft.

Provides the exception hierarchy and the centralized message templates.

Python 3.13+. Zero external dependencies.
"""

from .errors import ParseFailure, ParsecraftError
from .templates import ErrorTemplate

__all__ = [
    "ErrorTemplate",
    "ParseFailure",
    "ParsecraftError",
]
