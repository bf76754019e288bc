"""
Pytest fixtures for the restaurant catalog API tests.

Provides temporary SQLite databases with the catalog schema (seeded and
empty) and an in-memory Storage for fetcher-level tests.

Seeded data at a glance:

    restaurants  id  cuisine   isVeg  outdoor  luxury  rating
                  1  Indian        1        1       0     4.5
                  2  Italian       0        0       1     4.2
                  3  Indian        1        0       0     3.9
                  4  Japanese      0        1       1     4.8
                  5  Chinese       1        1       0     4.0

    dishes       id  isVeg  price
                  1      1    300
                  2      0    500
                  3      1    250
                  4      0    700
"""

import sqlite3
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from api.database import Storage  # noqa: E402

SCHEMA = """
    CREATE TABLE restaurants (
        id INTEGER PRIMARY KEY,
        name TEXT, cuisine TEXT, isVeg INTEGER, rating REAL,
        priceForTwo INTEGER, location TEXT,
        hasOutdoorSeating INTEGER, isLuxury INTEGER
    );
    CREATE TABLE dishes (
        id INTEGER PRIMARY KEY,
        name TEXT, price REAL, rating REAL, isVeg INTEGER
    );
"""

RESTAURANTS = [
    (1, "Spice Kitchen", "Indian", 1, 4.5, 1500, "MG Road", 1, 0),
    (2, "Olive Bistro", "Italian", 0, 4.2, 2000, "Jubilee Hills", 0, 1),
    (3, "Green Leaf", "Indian", 1, 3.9, 800, "Banjara Hills", 0, 0),
    (4, "Sakura Sushi", "Japanese", 0, 4.8, 3000, "Hitech City", 1, 1),
    (5, "Veggie Delight", "Chinese", 1, 4.0, 1000, "Kondapur", 1, 0),
]

DISHES = [
    (1, "Paneer Butter Masala", 300, 4.5, 1),
    (2, "Chicken Alfredo Pasta", 500, 4.0, 0),
    (3, "Veg Hakka Noodles", 250, 3.8, 1),
    (4, "Salmon Nigiri", 700, 4.7, 0),
]


def populate(conn: sqlite3.Connection, seed: bool = True) -> None:
    """Create the catalog schema on ``conn`` and optionally insert the rows above."""
    conn.executescript(SCHEMA)
    if seed:
        conn.executemany(
            "INSERT INTO restaurants VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)", RESTAURANTS
        )
        conn.executemany("INSERT INTO dishes VALUES (?, ?, ?, ?, ?)", DISHES)
    conn.commit()


def _build_db(path: Path, seed: bool) -> Path:
    conn = sqlite3.connect(str(path))
    try:
        populate(conn, seed=seed)
    finally:
        conn.close()
    return path


@pytest.fixture()
def catalog_db(tmp_path):
    """Return a Path to a SQLite file holding the seeded catalog."""
    return _build_db(tmp_path / "catalog.sqlite", seed=True)


@pytest.fixture()
def empty_db(tmp_path):
    """Return a Path to a SQLite file with the catalog schema and no rows."""
    return _build_db(tmp_path / "empty.sqlite", seed=False)


@pytest.fixture()
def memory_storage():
    """Yield a Storage over a seeded in-memory database."""
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    populate(conn)
    storage = Storage(conn)
    yield storage
    storage.close()
