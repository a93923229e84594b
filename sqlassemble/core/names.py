"""Qualified SQL names with an optional alias."""

import re
from typing import Callable, Final, Optional

from mypy_extensions import mypyc_attr
from typing_extensions import Self

from sqlassemble.core.quoting import QuoteStyle, back_quote, quote_with

__all__ = ("SqlName", "name")

_SAFE_NAME_RE: Final = re.compile(r"[a-z0-9_]+")


@mypyc_attr(allow_interpreted_subclasses=True)
class SqlName:
    """A dotted SQL name such as ``schema.table`` with an optional alias.

    Example:
        >>> SqlName("public", "books").alias("b").safe()
        'public.books AS b'
        >>> SqlName("my table").safe()
        '`my table`'
    """

    __slots__ = ("_alias", "_parts")

    def __init__(self, name: str, *parts: str) -> None:
        self._parts: list[str] = [str(name), *(str(p) for p in parts)]
        self._alias: Optional[str] = None

    def add(self, part: str) -> Self:
        """Append a qualifier part."""
        self._parts.append(str(part))
        return self

    def alias(self, alias: str) -> Self:
        """Set the alias rendered as ``AS alias``."""
        self._alias = str(alias)
        return self

    @property
    def parts(self) -> tuple[str, ...]:
        return tuple(self._parts)

    @staticmethod
    def is_safe(part: str) -> bool:
        """Whether ``part`` can be emitted without quoting."""
        return _SAFE_NAME_RE.fullmatch(part) is not None

    def safe(self) -> str:
        """Render the name, back-quoting every part if any part is not safe."""
        if all(self.is_safe(p) for p in self._parts):
            return self._with_alias(".".join(self._parts))
        return self._join(back_quote)

    def quoted(self, style: "QuoteStyle | str" = QuoteStyle.DOUBLE) -> str:
        """Render every part quoted with ``style``; the alias is rendered safe."""
        return self._join(lambda p: quote_with(p, style))

    def single_quoted(self) -> str:
        return self.quoted(QuoteStyle.SINGLE)

    def double_quoted(self) -> str:
        return self.quoted(QuoteStyle.DOUBLE)

    def back_quoted(self) -> str:
        return self.quoted(QuoteStyle.BACK)

    def bracket_quoted(self) -> str:
        return self.quoted(QuoteStyle.BRACKET)

    def _join(self, quoter: Callable[[str], str]) -> str:
        return self._with_alias(".".join(quoter(p) for p in self._parts))

    def _with_alias(self, rendered: str) -> str:
        if self._alias is None:
            return rendered
        alias = self._alias if self.is_safe(self._alias) else back_quote(self._alias)
        return f"{rendered} AS {alias}"

    def __str__(self) -> str:
        return self.safe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(parts={self._parts!r}, alias={self._alias!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SqlName):
            return NotImplemented
        return self._parts == other._parts and self._alias == other._alias

    def __hash__(self) -> int:
        return hash((tuple(self._parts), self._alias))


def name(*parts: str, alias: Optional[str] = None) -> str:
    """Render a safe dotted name.

    Args:
        *parts: Name parts, outermost qualifier first.
        alias: Optional alias.

    Raises:
        ValueError: If no parts are given.

    Returns:
        The rendered name.
    """
    if not parts:
        msg = "name() requires at least one part"
        raise ValueError(msg)
    sql_name = SqlName(*parts)
    if alias is not None:
        sql_name.alias(alias)
    return sql_name.safe()
