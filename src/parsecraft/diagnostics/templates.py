"""Failure message templates.

Centralized message templates for testable, consistent failure messages.
Every ParseFailure raised by parsecraft gets its text from here.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from typing import Any

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized failure message templates.

    All failure messages are created here. NO f-strings in raise statements!
    This keeps:
        - Testable failure messages
        - Consistent formatting
        - Documentation of all failure cases

    Snippets passed in are already bounded (see Cursor.snippet).
    """

    @staticmethod
    def expected_prefix(literal: Sequence[Any], snippet: str) -> str:
        """Literal sequence was not a prefix of the remaining input.

        Args:
            literal: The literal the parser was matching
            snippet: Bounded rendering of the upcoming input

        Returns:
            Failure message
        """
        return f"Expected prefix {_render(literal)!r} but found {snippet!r}"

    @staticmethod
    def predicate_failed(snippet: str) -> str:
        """Single-symbol predicate rejected the next symbol (or input was empty).

        Args:
            snippet: Bounded rendering of the upcoming input

        Returns:
            Failure message
        """
        return f"Predicate failed, found {snippet!r}"

    @staticmethod
    def repetition_short(
        requested: int, achieved: int, partial: Sequence[Any], remainder: str
    ) -> str:
        """Bounded repetition stopped before the requested count.

        The partial results and residual input are rendered for diagnostics
        only; they are never handed back to the caller as a result.

        Args:
            requested: Number of repetitions asked for
            achieved: Number of repetitions that succeeded
            partial: Values collected before the failure
            remainder: Bounded rendering of the input at the point of failure

        Returns:
            Failure message
        """
        return (
            f"Did not consume {requested} items, consumed {achieved}: "
            f"{list(partial)!r}, {remainder}"
        )

    @staticmethod
    def invalid_number(text: str) -> str:
        """Collected numeric text could not be interpreted as a float.

        Args:
            text: The collected text

        Returns:
            Failure message
        """
        return f"Could not interpret {text!r} as a number"

    @staticmethod
    def invalid_decimal(text: str, locale_code: str, reason: str) -> str:
        """Collected numeric text could not be interpreted for a locale.

        Args:
            text: The collected text
            locale_code: Locale the text was interpreted with
            reason: Underlying Babel error text

        Returns:
            Failure message
        """
        return (
            f"Could not interpret {text!r} as a decimal for locale "
            f"{locale_code!r}: {reason}"
        )

    @staticmethod
    def expected_end_of_input(snippet: str) -> str:
        """Input remained where the end of input was required.

        Args:
            snippet: Bounded rendering of the upcoming input

        Returns:
            Failure message
        """
        return f"Expected end of input but found {snippet!r}"

    @staticmethod
    def unknown_locale(locale_code: str) -> str:
        """Locale code could not be resolved by Babel.

        Args:
            locale_code: The unresolved locale code

        Returns:
            Error message (raised as ValueError at parser construction)
        """
        return f"Unknown locale {locale_code!r}"

    @staticmethod
    def negative_repetition(times: int) -> str:
        """Repetition count must be non-negative.

        Args:
            times: The rejected count

        Returns:
            Error message (raised as ValueError at parser construction)
        """
        return f"Repetition count must be >= 0, got {times}"

    @staticmethod
    def empty_choice() -> str:
        """choice() was called without alternatives.

        Returns:
            Error message (raised as ValueError at parser construction)
        """
        return "choice() requires at least one parser"


def _render(literal: Sequence[Any]) -> Any:
    """Render a literal for display: text stays text, other sequences become lists."""
    if isinstance(literal, str):
        return literal
    if isinstance(literal, bytes | bytearray):
        return bytes(literal)
    return list(literal)
