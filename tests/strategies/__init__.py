"""Hypothesis strategies for parsecraft property-based testing.

Usage:
    from tests.strategies import parser_inputs, literal_alphabet, simple_parsers
"""

from .parsers import (
    LITERAL_ALPHABET,
    parser_inputs,
    simple_parsers,
    symbol_sets,
)

__all__ = [
    "LITERAL_ALPHABET",
    "parser_inputs",
    "simple_parsers",
    "symbol_sets",
]
