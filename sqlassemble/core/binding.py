"""Placeholder substitution over rendered SQL text.

Binding inlines literal values into already rendered SQL. It is a text
transform, not driver-side parameter binding: the result is finished SQL.

Three placeholder forms are recognised:

- ``?``: positional, each token consumes the next value exactly once.
- ``$N``: numbered, 1-based index into the value sequence, reusable.
- ``:name:``: named, looked up in a mapping.

Each bind function only replaces its own form and leaves the others as they
are. Single-quoted literals and double-quoted identifiers are skipped while
scanning, so values inlined by an earlier bind are never re-substituted.
"""

import re
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Callable, Final, NamedTuple

from sqlassemble.core.parameters import render_literal
from sqlassemble.exceptions import BindError, ExtraParameterError, MissingParameterError, UnsupportedValueError
from sqlassemble.utils.logging import get_logger

__all__ = (
    "PlaceholderInfo",
    "PlaceholderStyle",
    "bind",
    "bind_named",
    "bind_numbered",
    "bind_positional",
    "extract_placeholders",
)

logger = get_logger("core.binding")

_PLACEHOLDER_REGEX: Final = re.compile(
    r"""
    # Quoted text is matched first so placeholders inside it are skipped
    (?P<squote>'(?:[^']|'')*') |          # single-quoted literal, '' escapes
    (?P<dquote>"(?:[^"]|"")*") |          # double-quoted identifier
    (?P<numbered>\$(?P<number>\d+)) |     # $1, $2
    (?P<named>:(?P<name>\w+):) |          # :name:
    (?P<qmark>\?)                         # ?
    """,
    re.VERBOSE,
)


class PlaceholderStyle(str, Enum):
    """Placeholder token forms."""

    QMARK = "qmark"
    NUMBERED = "numbered"
    NAMED = "named"

    def __str__(self) -> str:
        return self.value


class PlaceholderInfo(NamedTuple):
    """A placeholder token found in SQL text."""

    style: PlaceholderStyle
    position: int
    placeholder_text: str
    name: "str | None" = None
    index: "int | None" = None


def extract_placeholders(sql: str) -> "list[PlaceholderInfo]":
    """List the placeholder tokens in ``sql`` in order of occurrence.

    Args:
        sql: Rendered SQL text.

    Returns:
        One entry per token outside quoted text.
    """
    found: list[PlaceholderInfo] = []
    for match in _PLACEHOLDER_REGEX.finditer(sql):
        if match.group("qmark"):
            found.append(PlaceholderInfo(PlaceholderStyle.QMARK, match.start(), match.group(0)))
        elif match.group("numbered"):
            found.append(
                PlaceholderInfo(
                    PlaceholderStyle.NUMBERED, match.start(), match.group(0), index=int(match.group("number"))
                )
            )
        elif match.group("named"):
            found.append(
                PlaceholderInfo(PlaceholderStyle.NAMED, match.start(), match.group(0), name=match.group("name"))
            )
    return found


def _render_value(value: Any, placeholder: str, sql: str) -> str:
    try:
        return render_literal(value)
    except (TypeError, ValueError) as exc:
        msg = f"Cannot bind value {value!r} to placeholder {placeholder}: {exc}"
        raise UnsupportedValueError(msg, sql) from exc


def _substitute(sql: str, group: str, replace: "Callable[[re.Match[str]], str]") -> str:
    def _replace(match: "re.Match[str]") -> str:
        if match.group(group) is None:
            return match.group(0)
        return replace(match)

    return _PLACEHOLDER_REGEX.sub(_replace, sql)


def _as_sequence(values: Any, sql: str) -> "Sequence[Any]":
    if isinstance(values, (str, bytes, Mapping)) or not isinstance(values, Sequence):
        msg = f"Expected a sequence of values, got {type(values).__name__}"
        raise BindError(msg, sql)
    return values


def bind_positional(sql: str, values: "Sequence[Any]") -> str:
    """Replace each ``?`` with the next value.

    Args:
        sql: Rendered SQL text.
        values: One value per ``?`` token, in order.

    Raises:
        MissingParameterError: If there are more ``?`` tokens than values.
        ExtraParameterError: If there are more values than ``?`` tokens.
        UnsupportedValueError: If a value has no literal form.

    Returns:
        The SQL text with values inlined.
    """
    values = _as_sequence(values, sql)
    expected = sum(1 for p in extract_placeholders(sql) if p.style is PlaceholderStyle.QMARK)
    if expected > len(values):
        msg = f"Positional placeholder count mismatch: {expected} placeholders, {len(values)} values"
        raise MissingParameterError(msg, sql)
    if expected < len(values):
        msg = f"Positional placeholder count mismatch: {expected} placeholders, {len(values)} values"
        raise ExtraParameterError(msg, sql)

    remaining = iter(values)
    bound = _substitute(sql, "qmark", lambda m: _render_value(next(remaining), "?", sql))
    logger.debug("Bound %d positional placeholders", expected)
    return bound


def bind_numbered(sql: str, values: "Sequence[Any]") -> str:
    """Replace each ``$N`` with ``values[N - 1]``.

    The same index may appear any number of times. Values that no token
    references are ignored.

    Raises:
        MissingParameterError: If ``N`` is zero or larger than ``len(values)``.
        UnsupportedValueError: If a value has no literal form.

    Returns:
        The SQL text with values inlined.
    """
    values = _as_sequence(values, sql)

    def _replace(match: "re.Match[str]") -> str:
        number = int(match.group("number"))
        if number < 1 or number > len(values):
            msg = f"Numbered placeholder {match.group(0)} out of range for {len(values)} values"
            raise MissingParameterError(msg, sql)
        return _render_value(values[number - 1], match.group(0), sql)

    bound = _substitute(sql, "numbered", _replace)
    logger.debug("Bound numbered placeholders against %d values", len(values))
    return bound


def bind_named(sql: str, values: "Mapping[str, Any]") -> str:
    """Replace each ``:name:`` with ``values[name]``.

    Raises:
        BindError: If ``values`` is not a mapping.
        MissingParameterError: If a name has no entry in ``values``.
        UnsupportedValueError: If a value has no literal form.

    Returns:
        The SQL text with values inlined.
    """
    if not isinstance(values, Mapping):
        msg = f"Expected a mapping of values, got {type(values).__name__}"
        raise BindError(msg, sql)

    def _replace(match: "re.Match[str]") -> str:
        key = match.group("name")
        if key not in values:
            msg = f"No value for named placeholder {match.group(0)}"
            raise MissingParameterError(msg, sql)
        return _render_value(values[key], match.group(0), sql)

    bound = _substitute(sql, "named", _replace)
    logger.debug("Bound named placeholders against %d values", len(values))
    return bound


def bind(sql: str, *values: Any, **named: Any) -> str:
    """Bind whichever placeholder forms ``sql`` contains.

    Keyword arguments bind ``:name:`` tokens; without keyword arguments the
    text is not scanned for them, so ``a::int::text`` casts pass through.
    Positional arguments bind ``?`` tokens when the text has any, otherwise
    ``$N`` tokens.

    Example:
        >>> bind("salary BETWEEN ? AND ?", 10000, 25000)
        'salary BETWEEN 10000 AND 25000'
        >>> bind("salary >= :min:", min=1000)
        'salary >= 1000'

    Returns:
        The SQL text with values inlined.
    """
    if named:
        sql = bind_named(sql, named)
    styles = {p.style for p in extract_placeholders(sql)}
    if PlaceholderStyle.QMARK in styles:
        return bind_positional(sql, values)
    if values or PlaceholderStyle.NUMBERED in styles:
        return bind_numbered(sql, values)
    return sql
