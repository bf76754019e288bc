"""
Storage access for the API.

A single read-only SQLite connection is opened at startup (see the lifespan
in api/app.py), held on ``app.state.storage`` and handed to every route via
the get_storage() dependency.  The database path is resolved from the
APP_DB_PATH environment variable (default: database.sqlite).
"""

import os
import sqlite3
import threading
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from fastapi import Request

_DB_PATH: Path = Path(os.getenv("APP_DB_PATH", "database.sqlite"))


def get_db_path() -> Path:
    """Return the configured database path."""
    return _DB_PATH


class Storage:
    """Owns one SQLite connection and runs parameterized queries on it.

    Rows come back as plain dicts keyed by column name, in column order.
    Calls are serialized with a lock because synchronous routes run in
    FastAPI's worker thread pool while sharing this one connection.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        conn.row_factory = sqlite3.Row
        self._conn = conn
        self._lock = threading.Lock()

    @classmethod
    def open(cls, db_path: Path) -> "Storage":
        """Open ``db_path`` read-only and wrap the connection.

        The path is percent-encoded into a ``mode=ro`` URI, so characters
        such as ``#`` or ``?`` stay part of the filename and a missing file
        raises instead of being created.

        Raises:
            sqlite3.OperationalError: If the file cannot be opened.
        """
        uri = f"{Path(db_path).resolve().as_uri()}?mode=ro"
        conn = sqlite3.connect(uri, uri=True, check_same_thread=False,
                               timeout=10)
        conn.execute("PRAGMA busy_timeout=5000")
        return cls(conn)

    def all(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        """Run ``sql`` and return every row."""
        with self._lock:
            rows = self._conn.execute(sql, tuple(params)).fetchall()
        return [dict(row) for row in rows]

    def get(self, sql: str, params: Sequence[Any] = ()) -> dict[str, Any] | None:
        """Run ``sql`` and return the first row, or None when nothing matches."""
        with self._lock:
            row = self._conn.execute(sql, tuple(params)).fetchone()
        return dict(row) if row is not None else None

    def close(self) -> None:
        with self._lock:
            self._conn.close()


def get_storage(request: Request) -> Storage:
    """FastAPI dependency: return the storage opened for this application.

    Usage in a route::

        from api.database import Storage, get_storage
        from fastapi import Depends

        @router.get("/example")
        def example(storage: Storage = Depends(get_storage)):
            ...
    """
    return request.app.state.storage
