"""Syntax layer: cursor and parsers.

Exports:
    Cursor: Immutable view over the unconsumed input
    ParseResult: Parsed value plus remaining cursor
    Parser: Composable parser value

Python 3.13+.
"""

from .cursor import Cursor, ParseResult
from .parser import Parser

__all__ = ["Cursor", "ParseResult", "Parser"]
