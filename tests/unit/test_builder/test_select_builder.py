"""Tests for SELECT statement building."""

import pytest

from sqlassemble import Statement, select_from, subquery
from sqlassemble.core.statement import Combinator, JoinKind, StatementKind
from sqlassemble.exceptions import ModelError, RenderError


def test_select_fields_and_where() -> None:
    stmt = select_from("company").field("id").field("name").and_where("salary > 25000")
    assert stmt.sql() == "SELECT id, name FROM company WHERE salary > 25000;"
    assert stmt.query() == "SELECT id, name FROM company WHERE salary > 25000"


def test_select_distinct() -> None:
    assert select_from("books").distinct().field("price").sql() == "SELECT DISTINCT price FROM books;"


def test_select_fields_list(books_select: Statement) -> None:
    assert books_select.sql() == "SELECT title, price FROM books;"
    assert select_from("books").fields(["title", "price"]).sql() == "SELECT title, price FROM books;"


def test_set_fields_replaces_list(books_select: Statement) -> None:
    assert books_select.set_fields(["id"]).sql() == "SELECT id FROM books;"
    assert books_select.set_field("COUNT(id)").sql() == "SELECT COUNT(id) FROM books;"


def test_single_where_is_not_wrapped() -> None:
    stmt = select_from("company").field("name").and_where_gt("salary", 25000)
    assert stmt.sql() == "SELECT name FROM company WHERE salary > 25000;"


def test_multiple_wheres_are_wrapped() -> None:
    stmt = (
        select_from("company")
        .field("name")
        .and_where_between("salary", 10000, 25000)
        .and_where_between("staff", 100, 200)
    )
    assert stmt.sql() == "SELECT name FROM company WHERE (salary BETWEEN 10000 AND 25000) AND (staff BETWEEN 100 AND 200);"


def test_where_literals_are_escaped() -> None:
    stmt = select_from("books").field("price").and_where_eq("title", "Harry Potter and the Philosopher's Stone")
    assert stmt.sql() == "SELECT price FROM books WHERE title = 'Harry Potter and the Philosopher''s Stone';"


def test_where_comparisons() -> None:
    stmt = (
        select_from("t")
        .field("a")
        .and_where_ne("a", 1)
        .and_where_ge("b", 2)
        .and_where_lt("c", 3)
        .and_where_le("d", 4.5)
        .and_where_is_null("e")
        .and_where_is_not_null("f")
    )
    assert stmt.sql() == (
        "SELECT a FROM t WHERE (a <> 1) AND (b >= 2) AND (c < 3) AND (d <= 4.5) AND (e IS NULL) AND (f IS NOT NULL);"
    )


def test_or_where() -> None:
    stmt = select_from("t").field("a").and_where_eq("a", 1).or_where_eq("b", 2).or_where("c = 3")
    assert stmt.sql() == "SELECT a FROM t WHERE (a = 1) OR (b = 2) OR (c = 3);"


def test_first_where_has_no_combinator() -> None:
    stmt = select_from("t").field("a").or_where("x = 1").and_where("y = 2")
    assert stmt.state.wheres[0].combinator is None
    assert stmt.state.wheres[1].combinator is Combinator.AND
    assert stmt.sql() == "SELECT a FROM t WHERE (x = 1) AND (y = 2);"


def test_like_variants() -> None:
    stmt = select_from("books").field("title").and_where_like_left("title", "Harry Potter")
    assert stmt.sql() == "SELECT title FROM books WHERE title LIKE 'Harry Potter%';"
    assert select_from("b").field("t").and_where_like_right("t", "Stone").query() == "SELECT t FROM b WHERE t LIKE '%Stone'"
    assert select_from("b").field("t").and_where_like_any("t", "it's").query() == "SELECT t FROM b WHERE t LIKE '%it''s%'"
    assert select_from("b").field("t").and_where_not_like("t", "A_%").query() == "SELECT t FROM b WHERE t NOT LIKE 'A_%'"
    assert (
        select_from("b").field("t").or_where_like("t", "x%").or_where_like_any("t", "y").query()
        == "SELECT t FROM b WHERE (t LIKE 'x%') OR (t LIKE '%y%')"
    )


def test_like_mask_must_be_string() -> None:
    with pytest.raises(ModelError, match="LIKE mask"):
        select_from("b").field("t").and_where_like("t", 5)  # type: ignore[arg-type]


def test_where_in_lists() -> None:
    assert select_from("t").field("a").and_where_in("id", [1, 2, 3]).query() == "SELECT a FROM t WHERE id IN (1, 2, 3)"
    assert (
        select_from("t").field("a").and_where_in("name", ["a", "b'c"]).query()
        == "SELECT a FROM t WHERE name IN ('a', 'b''c')"
    )
    assert select_from("t").field("a").and_where_not_in("id", (4,)).query() == "SELECT a FROM t WHERE id NOT IN (4)"


def test_where_in_rejects_empty_and_string() -> None:
    with pytest.raises(ModelError, match="must not be empty"):
        select_from("t").field("a").and_where_in("id", [])
    with pytest.raises(ModelError, match="not a string"):
        select_from("t").field("a").and_where_in("id", "abc")


def test_where_in_query() -> None:
    orders = select_from("orders").field("book_id")
    stmt = select_from("books").field("title").and_where_in_query("id", orders)
    assert stmt.sql() == "SELECT title FROM books WHERE id IN (SELECT book_id FROM orders);"
    stmt = select_from("books").field("title").and_where_not_in_query("id", "SELECT book_id FROM stock;")
    assert stmt.sql() == "SELECT title FROM books WHERE id NOT IN (SELECT book_id FROM stock);"


def test_where_not_between() -> None:
    stmt = select_from("t").field("a").and_where_not_between("price", 10, 20)
    assert stmt.sql() == "SELECT a FROM t WHERE price NOT BETWEEN 10 AND 20;"


def test_where_rejects_unsupported_value() -> None:
    with pytest.raises(ModelError, match="Cannot use"):
        select_from("t").field("a").and_where_eq("a", object())


def test_empty_predicate_rejected() -> None:
    with pytest.raises(ModelError):
        select_from("t").field("a").and_where("  ")


def test_order_by() -> None:
    stmt = (
        select_from("books")
        .field("title")
        .field("price")
        .and_where_like_left("title", "Harry Potter")
        .order_desc("price")
        .order_asc("title")
    )
    assert stmt.sql() == "SELECT title, price FROM books WHERE title LIKE 'Harry Potter%' ORDER BY price DESC, title;"


def test_limit_offset(books_select: Statement) -> None:
    stmt = books_select.order_by("title").limit(3).offset(2)
    assert stmt.sql() == "SELECT title, price FROM books ORDER BY title LIMIT 3 OFFSET 2;"


def test_limit_replaces_previous(books_select: Statement) -> None:
    assert books_select.limit(3).limit(5).sql() == "SELECT title, price FROM books LIMIT 5;"


@pytest.mark.parametrize("value", [-1, True, "3", 1.5])
def test_limit_offset_validation(books_select: Statement, value: object) -> None:
    with pytest.raises(ModelError):
        books_select.limit(value)  # type: ignore[arg-type]
    with pytest.raises(ModelError):
        books_select.offset(value)  # type: ignore[arg-type]


def test_group_by_having() -> None:
    stmt = (
        select_from("books")
        .field("price")
        .field("COUNT(price) AS cnt")
        .group_by("price")
        .having("price > 100")
        .order_desc("cnt")
    )
    assert stmt.sql() == "SELECT price, COUNT(price) AS cnt FROM books GROUP BY price HAVING price > 100 ORDER BY cnt DESC;"


def test_where_precedes_group_by() -> None:
    stmt = select_from("books").field("price").field("COUNT(*)").and_where("price > 10").group_by("price")
    assert stmt.sql() == "SELECT price, COUNT(*) FROM books WHERE price > 10 GROUP BY price;"


def test_multiple_having() -> None:
    stmt = (
        select_from("t")
        .field("a")
        .field("COUNT(*)")
        .group_by("a")
        .group_by("b")
        .having("COUNT(*) > 1")
        .or_having("a = 0")
    )
    assert stmt.sql() == "SELECT a, COUNT(*) FROM t GROUP BY a, b HAVING (COUNT(*) > 1) OR (a = 0);"


def test_joins() -> None:
    stmt = (
        select_from("books", "b")
        .field("b.title")
        .field("s.total")
        .left_join("shops AS s", "b.id = s.book")
        .and_where("s.total > 0")
    )
    assert stmt.sql() == "SELECT b.title, s.total FROM books AS b LEFT JOIN shops AS s ON b.id = s.book WHERE s.total > 0;"


def test_join_kinds() -> None:
    stmt = (
        select_from("a")
        .field("*")
        .inner_join("b", "a.id = b.a_id")
        .right_join("c", "c.id = b.c_id")
        .join("left", "d", "d.id = a.d_id")
        .cross_join("colors")
    )
    assert stmt.query() == (
        "SELECT * FROM a INNER JOIN b ON a.id = b.a_id RIGHT JOIN c ON c.id = b.c_id "
        "LEFT JOIN d ON d.id = a.d_id CROSS JOIN colors"
    )
    assert [j.kind for j in stmt.state.joins] == [JoinKind.INNER, JoinKind.RIGHT, JoinKind.LEFT, JoinKind.CROSS]


def test_unknown_join_kind() -> None:
    with pytest.raises(ModelError, match="Unsupported join type"):
        select_from("a").field("*").join("full", "b", "a.id = b.id")


def test_empty_join_table_fails_at_render() -> None:
    stmt = select_from("a").field("*").inner_join("", "a.id = b.id")
    with pytest.raises(RenderError, match="Empty join table"):
        stmt.sql()


def test_subquery_as_table() -> None:
    category = select_from("books").field("CASE WHEN price < 100 THEN 'cheap' ELSE 'expensive' END AS category")
    stmt = (
        select_from(category.subquery())
        .field("category")
        .field("COUNT(category) AS cnt")
        .group_by("category")
        .order_desc("cnt")
        .order_asc("category")
    )
    assert stmt.sql() == (
        "SELECT category, COUNT(category) AS cnt FROM "
        "(SELECT CASE WHEN price < 100 THEN 'cheap' ELSE 'expensive' END AS category FROM books) "
        "GROUP BY category ORDER BY cnt DESC, category;"
    )


def test_subquery_as_field() -> None:
    total = select_from("orders").field("COUNT(*)").and_where("orders.book_id = books.id")
    stmt = select_from("books").field("title").field(total.subquery_as("orders_count"))
    assert stmt.sql() == (
        "SELECT title, (SELECT COUNT(*) FROM orders WHERE orders.book_id = books.id) AS orders_count FROM books;"
    )


def test_subquery_helper() -> None:
    assert subquery("SELECT id FROM t;", "x") == "(SELECT id FROM t) AS x"
    assert subquery(select_from("t").field("id")) == "(SELECT id FROM t)"


def test_union() -> None:
    stmt = (
        select_from("a")
        .field("x")
        .union(select_from("b").field("x"))
        .union_all(select_from("c").field("x"))
        .union("SELECT x FROM d;")
    )
    assert stmt.sql() == "SELECT x FROM a UNION SELECT x FROM b UNION ALL SELECT x FROM c UNION SELECT x FROM d;"


def test_union_reflects_later_changes() -> None:
    other = select_from("b").field("x")
    stmt = select_from("a").field("x").union(other)
    other.and_where("x > 1")
    assert stmt.sql() == "SELECT x FROM a UNION SELECT x FROM b WHERE x > 1;"


def test_union_rejects_non_select_and_self() -> None:
    stmt = select_from("a").field("x")
    with pytest.raises(ModelError):
        stmt.union(Statement.update_table("b"))
    with pytest.raises(ModelError, match="itself"):
        stmt.union(stmt)


def test_union_rejects_cycles() -> None:
    a = select_from("a").field("x")
    b = select_from("b").field("x")
    c = select_from("c").field("x")
    a.union(b)
    with pytest.raises(ModelError, match="already includes"):
        b.union(a)
    b.union_all(c)
    with pytest.raises(ModelError, match="already includes"):
        c.union(a)
    assert a.sql() == "SELECT x FROM a UNION SELECT x FROM b UNION ALL SELECT x FROM c;"
    assert c.state.unions == []


def test_missing_fields_and_table() -> None:
    with pytest.raises(RenderError, match="No fields"):
        select_from("books").sql()
    with pytest.raises(RenderError, match="No table name"):
        select_from("").field("a").sql()


def test_render_is_idempotent(books_select: Statement) -> None:
    books_select.and_where_gt("price", 10)
    first = books_select.sql()
    assert books_select.sql() == first
    assert first.count(";") == 1


def test_copy_is_independent(books_select: Statement) -> None:
    count = books_select.copy().set_field("COUNT(*)")
    books_select.limit(10)
    assert count.sql() == "SELECT COUNT(*) FROM books;"
    assert books_select.sql() == "SELECT title, price FROM books LIMIT 10;"


def test_kind_is_fixed(books_select: Statement) -> None:
    assert books_select.kind is StatementKind.SELECT
    with pytest.raises(AttributeError):
        books_select.kind = StatementKind.DELETE  # type: ignore[misc]


def test_select_rejects_insert_and_update_clauses(books_select: Statement) -> None:
    with pytest.raises(ModelError, match="Cannot add VALUES to a SELECT statement"):
        books_select.values(["1", "2"])
    with pytest.raises(ModelError, match="SET clause"):
        books_select.set("price", 1)


def test_repr(books_select: Statement) -> None:
    assert repr(books_select) == "Statement(kind='SELECT', table='books')"
