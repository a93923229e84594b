"""Tests for SQL literal rendering."""

from decimal import Decimal
from typing import Any

import pytest

from sqlassemble.core.names import SqlName
from sqlassemble.core.parameters import Raw, raw, render_expression, render_literal


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "NULL"),
        (True, "TRUE"),
        (False, "FALSE"),
        (42, "42"),
        (-7, "-7"),
        (0, "0"),
        (2.5, "2.5"),
        (1e16, "10000000000000000"),
        (1.5e-7, "0.00000015"),
        (-2e20, "-200000000000000000000"),
        (Decimal("10.50"), "10.50"),
        (Decimal("1E+3"), "1000"),
        ("O'Brien", "'O''Brien'"),
        ("", "''"),
        (Raw("NOW()"), "NOW()"),
    ],
)
def test_render_literal(value: Any, expected: str) -> None:
    assert render_literal(value) == expected


@pytest.mark.parametrize("value", [float("nan"), float("inf"), Decimal("Infinity"), Decimal("NaN")])
def test_render_literal_rejects_non_finite(value: Any) -> None:
    with pytest.raises(ValueError):
        render_literal(value)


@pytest.mark.parametrize("value", [object(), [1], {"a": 1}, b"bytes"])
def test_render_literal_rejects_unsupported_types(value: Any) -> None:
    with pytest.raises(TypeError, match="Unsupported value type"):
        render_literal(value)


def test_render_expression_passes_strings_through() -> None:
    assert render_expression("price + 10") == "price + 10"
    assert render_expression(10) == "10"
    assert render_expression(None) == "NULL"
    assert render_expression(SqlName("b", "price")) == "b.price"


def test_raw_value_semantics() -> None:
    assert raw("NOW()") == Raw("NOW()")
    assert str(Raw("NOW()")) == "NOW()"
    assert repr(Raw("x")) == "Raw('x')"
    assert hash(Raw("x")) == hash(Raw("x"))
