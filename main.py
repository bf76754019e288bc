#!/usr/bin/env python3
"""
Restaurant Catalog API — launch the HTTP server.

Usage:
    python main.py                          # http://localhost:3010
    python main.py --port 9000              # http://localhost:9000
    python main.py --host 127.0.0.1         # bind to localhost only
    python main.py --db /path/to/database.sqlite
    python main.py --reload                 # auto-reload on code changes
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Serve the restaurant and dish catalog over HTTP.",
    )
    parser.add_argument(
        "--host", default=os.getenv("APP_HOST", "0.0.0.0"),
        help="Bind address (default: 0.0.0.0 or APP_HOST env var)",
    )
    parser.add_argument(
        "--port", type=int, default=int(os.getenv("APP_PORT", "3010")),
        help="Port to listen on (default: 3010 or APP_PORT env var)",
    )
    parser.add_argument(
        "--db", type=Path, default=None,
        help="Path to SQLite database (default: database.sqlite or APP_DB_PATH env var)",
    )
    parser.add_argument(
        "--reload", action="store_true",
        help="Enable auto-reload on file changes (development mode)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    # Must be set before api.app is imported by uvicorn
    if args.db is not None:
        os.environ["APP_DB_PATH"] = str(args.db)

    db_path = Path(os.getenv("APP_DB_PATH", "database.sqlite"))
    if not db_path.exists():
        print(f"Error: Database not found at {db_path}")
        print("  pass --db /path/to/your/database.sqlite")
        sys.exit(1)

    import uvicorn

    host = "localhost" if args.host == "0.0.0.0" else args.host
    print(f"Server listening at http://{host}:{args.port}")
    print(f"Database: {db_path}")

    uvicorn.run(
        "api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
