"""Shared constants for parsecraft.

This module provides centralized configuration constants used across the
syntax and parsing packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Diagnostics: Bounds on failure message rendering
- Symbol sets: Fixed alphabets used by the semantic parsers
- Locale: Defaults for Babel-backed parsers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Diagnostics
    "SNIPPET_LENGTH",
    "SNIPPET_ELLIPSIS",
    # Symbol sets
    "WHITESPACE_CHARS",
    "DOUBLE_CHARS",
    "ASCII_DIGITS",
    # Locale
    "DEFAULT_LOCALE",
]

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Maximum number of upcoming symbols rendered into a failure message.
# Failure messages are built eagerly on every mismatch, so the snippet
# must stay small: choice() and fallback() discard most of them.
SNIPPET_LENGTH: int = 20

# Appended to a snippet when the remaining input is longer than SNIPPET_LENGTH.
SNIPPET_ELLIPSIS: str = "..."

# ============================================================================
# SYMBOL SETS
# ============================================================================

# Blank symbols recognized by the whitespace parser.
WHITESPACE_CHARS: str = " \t\n\r"

# Symbols collected by the double parser before numeric interpretation.
# Includes the separator so that malformed runs like "..00" are collected
# and then rejected as a whole.
DOUBLE_CHARS: str = "0123456789."

# ASCII digits only. str.isdigit() accepts Unicode digits like ² which
# neither float() nor Babel interpret.
ASCII_DIGITS: str = "0123456789"

# Space variants locales use as group separators (fr_FR, lv_LV, ...).
# Typed input often has a plain space where CLDR specifies U+00A0 or U+202F.
GROUP_SPACE_CHARS: str = " \u00a0\u202f"

# ============================================================================
# LOCALE
# ============================================================================

# Locale used by decimal_number() when none is given.
DEFAULT_LOCALE: str = "en_US"
