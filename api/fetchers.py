"""
Record fetchers for the restaurant and dish tables.

Each fetcher maps one query shape to a single Storage call.  Storage errors
are not handled here; they propagate to the route, which turns them into a
Fault result (see api/results.py).
"""

from collections.abc import Mapping
from typing import Any

from api.database import Storage
from utils.query import (
    DISH_FILTERS,
    DISH_SORTS,
    RESTAURANT_FILTERS,
    RESTAURANT_SORTS,
    build_filter_query,
    build_order_clause,
    build_where_clause,
    validate_table,
)

Record = dict[str, Any]


# ── Generic query shapes ──────────────────────────────────────────────────────

def fetch_all(storage: Storage, table: str) -> list[Record]:
    """Every row of ``table`` in natural storage order."""
    return storage.all(f"SELECT * FROM {validate_table(table)}")


def fetch_by_id(storage: Storage, table: str, record_id: Any) -> Record | None:
    return storage.get(
        f"SELECT * FROM {validate_table(table)} WHERE id = ?", (record_id,)
    )


def fetch_by_field(
    storage: Storage, table: str, column: str, value: Any
) -> list[Record]:
    """Rows of ``table`` whose ``column`` equals ``value``.

    ``column`` is interpolated into the SQL text and must be a fixed name
    chosen by the caller, never request input.
    """
    where, params = build_where_clause([(column, value)])
    return storage.all(f"SELECT * FROM {validate_table(table)} {where}", params)


def fetch_by_filters(
    storage: Storage,
    table: str,
    filters: Mapping[str, Any],
    declared: tuple[str, ...],
) -> list[Record]:
    sql, params = build_filter_query(table, filters, declared)
    return storage.all(sql, params)


def fetch_sorted(
    storage: Storage,
    table: str,
    sort_by: str,
    sort_dir: str,
    allowed_sorts: set[str],
) -> list[Record]:
    order = build_order_clause(sort_by, sort_dir, allowed_sorts)
    return storage.all(f"SELECT * FROM {validate_table(table)} {order}")


# ── Restaurants ───────────────────────────────────────────────────────────────

def fetch_restaurants(storage: Storage) -> list[Record]:
    return fetch_all(storage, "restaurants")


def fetch_restaurant_by_id(storage: Storage, restaurant_id: Any) -> Record | None:
    return fetch_by_id(storage, "restaurants", restaurant_id)


def fetch_restaurants_by_cuisine(storage: Storage, cuisine: str) -> list[Record]:
    return fetch_by_field(storage, "restaurants", "cuisine", cuisine)


def fetch_restaurants_by_filters(
    storage: Storage, filters: Mapping[str, Any]
) -> list[Record]:
    """Restaurants matching every present flag in ``filters``.

    Recognised keys are isVeg, hasOutdoorSeating and isLuxury; a value of
    None leaves that flag unconstrained.
    """
    return fetch_by_filters(storage, "restaurants", filters, RESTAURANT_FILTERS)


def fetch_restaurants_sorted_by_rating(storage: Storage) -> list[Record]:
    return fetch_sorted(storage, "restaurants", "rating", "desc", RESTAURANT_SORTS)


# ── Dishes ────────────────────────────────────────────────────────────────────

def fetch_dishes(storage: Storage) -> list[Record]:
    return fetch_all(storage, "dishes")


def fetch_dish_by_id(storage: Storage, dish_id: Any) -> Record | None:
    return fetch_by_id(storage, "dishes", dish_id)


def fetch_dishes_by_filter(storage: Storage, is_veg: int | None) -> list[Record]:
    return fetch_by_filters(storage, "dishes", {"isVeg": is_veg}, DISH_FILTERS)


def fetch_dishes_sorted_by_price(storage: Storage) -> list[Record]:
    return fetch_sorted(storage, "dishes", "price", "asc", DISH_SORTS)
