"""SQL literal escaping and identifier quoting.

Every function here is a pure transform of its input string. Literal quoting
(:func:`quote`) escapes embedded single quotes; identifier quoting
(:func:`double_quote`, :func:`back_quote`, :func:`bracket_quote`) wraps the
text as given and leaves escaping to the caller.
"""

from enum import Enum
from typing import Callable, Final

__all__ = (
    "QuoteStyle",
    "back_quote",
    "bracket_quote",
    "double_quote",
    "escape",
    "quote",
    "quote_with",
    "unescape",
    "unquote",
)

SINGLE_QUOTE: Final = "'"
ESCAPED_SINGLE_QUOTE: Final = "''"


class QuoteStyle(str, Enum):
    """Quoting delimiter choice."""

    SINGLE = "single"
    DOUBLE = "double"
    BACK = "back"
    BRACKET = "bracket"

    def __str__(self) -> str:
        return self.value


def escape(value: str) -> str:
    """Escape a string for use inside a single-quoted SQL literal.

    Args:
        value: Raw text.

    Returns:
        The text with every ``'`` doubled.
    """
    return value.replace(SINGLE_QUOTE, ESCAPED_SINGLE_QUOTE)


def unescape(value: str) -> str:
    """Inverse of :func:`escape`."""
    return value.replace(ESCAPED_SINGLE_QUOTE, SINGLE_QUOTE)


def quote(value: str) -> str:
    """Render a string as a single-quoted SQL literal.

    Args:
        value: Raw text.

    Returns:
        The escaped text wrapped in single quotes.
    """
    return f"'{escape(value)}'"


def unquote(value: str) -> str:
    """Inverse of :func:`quote`.

    Raises:
        ValueError: If ``value`` is not wrapped in single quotes.

    Returns:
        The unescaped literal body.
    """
    if len(value) < 2 or not value.startswith(SINGLE_QUOTE) or not value.endswith(SINGLE_QUOTE):
        msg = f"Not a quoted SQL literal: {value!r}"
        raise ValueError(msg)
    return unescape(value[1:-1])


def double_quote(value: str) -> str:
    return f'"{value}"'


def back_quote(value: str) -> str:
    return f"`{value}`"


def bracket_quote(value: str) -> str:
    return f"[{value}]"


_QUOTERS: "dict[QuoteStyle, Callable[[str], str]]" = {
    QuoteStyle.SINGLE: quote,
    QuoteStyle.DOUBLE: double_quote,
    QuoteStyle.BACK: back_quote,
    QuoteStyle.BRACKET: bracket_quote,
}


def quote_with(value: str, style: "QuoteStyle | str" = QuoteStyle.DOUBLE) -> str:
    """Quote ``value`` with the delimiters of ``style``.

    Args:
        value: Text to quote.
        style: A :class:`QuoteStyle` member or its string value.

    Returns:
        The quoted text.
    """
    return _QUOTERS[QuoteStyle(style)](value)
