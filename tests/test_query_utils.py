"""Tests for utils/query.py — shared SQL query builder."""
import pytest

from utils.query import (
    DISH_FILTERS,
    RESTAURANT_FILTERS,
    RESTAURANT_SORTS,
    build_filter_query,
    build_order_clause,
    build_where_clause,
    coerce_flag,
    validate_table,
)


class TestBuildWhereClause:
    def test_no_predicates(self):
        where, params = build_where_clause()
        assert where == "WHERE 1=1"
        assert params == []

    def test_single_predicate(self):
        where, params = build_where_clause([("cuisine", "Indian")])
        assert where == "WHERE 1=1 AND cuisine = ?"
        assert params == ["Indian"]

    def test_params_follow_placeholder_order(self):
        where, params = build_where_clause([("isLuxury", 1), ("isVeg", 0)])
        assert where == "WHERE 1=1 AND isLuxury = ? AND isVeg = ?"
        assert params == [1, 0]

    def test_value_never_in_sql_text(self):
        hostile = "x' OR '1'='1"
        where, params = build_where_clause([("cuisine", hostile)])
        assert hostile not in where
        assert params == [hostile]


class TestBuildFilterQuery:
    def test_no_filters_selects_everything(self):
        sql, params = build_filter_query("restaurants", {}, RESTAURANT_FILTERS)
        assert sql == "SELECT * FROM restaurants WHERE 1=1"
        assert params == []

    def test_none_values_ignored(self):
        sql, params = build_filter_query(
            "restaurants",
            {"isVeg": None, "hasOutdoorSeating": None, "isLuxury": None},
            RESTAURANT_FILTERS,
        )
        assert sql == "SELECT * FROM restaurants WHERE 1=1"
        assert params == []

    def test_zero_is_a_present_value(self):
        sql, params = build_filter_query("restaurants", {"isVeg": 0}, RESTAURANT_FILTERS)
        assert sql.endswith("AND isVeg = ?")
        assert params == [0]

    def test_declared_order_wins_over_mapping_order(self):
        filters = {"isLuxury": 1, "hasOutdoorSeating": 0, "isVeg": 1}
        sql, params = build_filter_query("restaurants", filters, RESTAURANT_FILTERS)
        assert sql == (
            "SELECT * FROM restaurants WHERE 1=1 "
            "AND isVeg = ? AND hasOutdoorSeating = ? AND isLuxury = ?"
        )
        assert params == [1, 0, 1]

    def test_subset_of_filters(self):
        sql, params = build_filter_query(
            "restaurants", {"hasOutdoorSeating": 1}, RESTAURANT_FILTERS
        )
        assert sql == "SELECT * FROM restaurants WHERE 1=1 AND hasOutdoorSeating = ?"
        assert params == [1]

    def test_unknown_keys_ignored(self):
        sql, params = build_filter_query(
            "dishes", {"isVeg": 1, "isLuxury": 1, "price; DROP TABLE dishes": 1},
            DISH_FILTERS,
        )
        assert sql == "SELECT * FROM dishes WHERE 1=1 AND isVeg = ?"
        assert params == [1]

    def test_unknown_table_rejected(self):
        with pytest.raises(ValueError, match="Invalid table"):
            build_filter_query("users", {}, RESTAURANT_FILTERS)


class TestValidateTable:
    def test_known_tables(self):
        assert validate_table("restaurants") == "restaurants"
        assert validate_table("dishes") == "dishes"

    def test_unknown_table(self):
        with pytest.raises(ValueError):
            validate_table("restaurants; DROP TABLE dishes")


class TestCoerceFlag:
    def test_absent_is_unconstrained(self):
        assert coerce_flag(None) is None

    def test_literal_true(self):
        assert coerce_flag("true") == 1

    @pytest.mark.parametrize("raw", ["false", "1", "0", "TRUE", "True", "yes", ""])
    def test_anything_else_is_false(self, raw):
        assert coerce_flag(raw) == 0


class TestBuildOrderClause:
    def test_desc(self):
        assert build_order_clause("rating", "desc", RESTAURANT_SORTS) == "ORDER BY rating DESC"

    def test_asc(self):
        assert build_order_clause("rating", "asc", RESTAURANT_SORTS) == "ORDER BY rating ASC"

    def test_direction_case_insensitive(self):
        assert build_order_clause("rating", "DESC", RESTAURANT_SORTS) == "ORDER BY rating DESC"

    def test_unknown_direction_defaults_to_asc(self):
        assert build_order_clause("rating", "sideways", RESTAURANT_SORTS) == "ORDER BY rating ASC"

    def test_unknown_column_falls_back(self):
        clause = build_order_clause("price; DROP TABLE x", "desc", RESTAURANT_SORTS)
        assert clause == "ORDER BY id DESC"

    def test_custom_default_sort(self):
        clause = build_order_clause("nope", "asc", {"price"}, default_sort="price")
        assert clause == "ORDER BY price ASC"
