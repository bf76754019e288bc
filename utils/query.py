"""Shared SQL query builder utilities for the catalog API routes.

Provides the WHERE clause and ORDER BY construction used by the record
fetchers in api/fetchers.py.  Values are always returned as bound
parameters; only whitelisted table and column names reach the SQL text.
"""

from collections.abc import Iterable, Mapping
from typing import Any


TABLES = frozenset({"restaurants", "dishes"})

# Filter flags accepted by each /filter endpoint, in the order their
# predicates are rendered.
RESTAURANT_FILTERS = ("isVeg", "hasOutdoorSeating", "isLuxury")
DISH_FILTERS = ("isVeg",)

RESTAURANT_SORTS = {"id", "rating"}
DISH_SORTS = {"id", "price"}


def validate_table(table: str) -> str:
    """Return ``table`` unchanged if it is a known catalog table.

    Raises:
        ValueError: If the table name is not in TABLES.
    """
    if table not in TABLES:
        raise ValueError(
            f"Invalid table: '{table}'. "
            f"Must be one of: {', '.join(sorted(TABLES))}"
        )
    return table


def coerce_flag(value: str | None) -> int | None:
    """Normalize a raw query-string flag to a 0/1 predicate value.

    Absent flags stay ``None`` (no constraint).  Only the literal string
    ``"true"`` is true; every other value, including ``"1"``, is false.
    """
    if value is None:
        return None
    return 1 if value == "true" else 0


def build_where_clause(
    predicates: Iterable[tuple[str, Any]] = (),
) -> tuple[str, list[Any]]:
    """Build a SQL WHERE clause from (column, value) equality predicates.

    The clause always starts from ``WHERE 1=1`` so every predicate is
    appended the same way.  Callers must only pass whitelisted column names.

    Returns:
        Tuple of (where_clause_string, params_list) where the params are in
        the same order as the ``?`` placeholders.
    """
    conditions = ["1=1"]
    params: list[Any] = []
    for column, value in predicates:
        conditions.append(f"{column} = ?")
        params.append(value)
    return "WHERE " + " AND ".join(conditions), params


def build_filter_query(
    table: str,
    filters: Mapping[str, Any],
    declared: Iterable[str],
) -> tuple[str, list[Any]]:
    """Build a ``SELECT *`` over ``table`` constrained by the present filters.

    Args:
        table: Catalog table name (must be in TABLES).
        filters: Filter name -> value.  ``None`` means not specified.
        declared: Filter names the caller accepts, in rendering order.
            Keys of ``filters`` outside this list are ignored.

    Returns:
        Tuple of (sql, params).  With no filters present the statement is
        ``SELECT * FROM <table> WHERE 1=1``.
    """
    validate_table(table)
    predicates = [
        (name, filters[name])
        for name in declared
        if filters.get(name) is not None
    ]
    where, params = build_where_clause(predicates)
    return f"SELECT * FROM {table} {where}", params


def build_order_clause(
    sort_by: str,
    sort_dir: str,
    allowed_sorts: set[str],
    default_sort: str = "id",
) -> str:
    """Build a safe SQL ORDER BY clause.

    Args:
        sort_by: Column name to sort by.
        sort_dir: Direction: 'asc' or 'desc' (case-insensitive).
        allowed_sorts: Set of valid sort column names.
        default_sort: Column to use if sort_by is not in allowed_sorts.

    Returns:
        ORDER BY clause string, e.g. "ORDER BY rating DESC".
    """
    col = sort_by if sort_by in allowed_sorts else default_sort
    direction = "DESC" if sort_dir.lower() == "desc" else "ASC"
    return f"ORDER BY {col} {direction}"
