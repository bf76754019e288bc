"""Shared utilities for the restaurant catalog API."""

# Query building
from utils.query import (
    DISH_FILTERS,
    DISH_SORTS,
    RESTAURANT_FILTERS,
    RESTAURANT_SORTS,
    TABLES,
    build_filter_query,
    build_order_clause,
    build_where_clause,
    coerce_flag,
    validate_table,
)

# Configuration
from utils.config import AppConfig, Config

__all__ = [
    # Query building
    "DISH_FILTERS",
    "DISH_SORTS",
    "RESTAURANT_FILTERS",
    "RESTAURANT_SORTS",
    "TABLES",
    "build_filter_query",
    "build_order_clause",
    "build_where_clause",
    "coerce_flag",
    "validate_table",
    # Configuration
    "AppConfig",
    "Config",
]
