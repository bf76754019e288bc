"""
FastAPI application factory.

Usage:
    python -m api.app                    # Dev server on port 3010
    APP_DB_PATH=/data/catalog.sqlite python -m api.app

OpenAPI docs available at http://localhost:3010/docs after starting.

The SQLite store is opened once in the lifespan hook, before the first
request, and shared by every route through api.database.get_storage().
"""

import json
import logging
import sqlite3
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from api.database import Storage, get_db_path, get_storage
from api.routes import dishes, restaurants
from utils.config import AppConfig

# ── Configuration ─────────────────────────────────────────────────────────────
_cfg = AppConfig.from_env()

# ── Structured JSON logging ───────────────────────────────────────────────────


class _JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Merge extra fields added via logger.info("...", extra={...})
        for key in ("method", "path", "status", "duration_ms", "request_id"):
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


_logger = logging.getLogger("restaurant_catalog_api")
_handler = logging.StreamHandler()
if _cfg.log_format == "json":
    _handler.setFormatter(_JsonFormatter())
else:
    _handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
logging.basicConfig(handlers=[_handler], level=_cfg.log_level, force=True)

_PROJECT_ROOT = Path(__file__).parent.parent


def _resolve_dir(path: Path) -> Path:
    return path if path.is_absolute() else _PROJECT_ROOT / path


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared storage before serving traffic and close it on shutdown.

    A storage handed to create_app() is used as-is and left open.
    """
    if app.state.storage is not None:
        yield
        return
    db_path = get_db_path()
    _logger.info("starting config=%s", _cfg.to_dict())
    try:
        app.state.storage = Storage.open(db_path)
    except sqlite3.Error as exc:
        _logger.error("database_open_failed path=%s error=%s", db_path, exc)
        raise
    _logger.info("database_opened path=%s", db_path)
    try:
        yield
    finally:
        app.state.storage.close()
        app.state.storage = None


def create_app(
    db_path: Path | None = None,
    storage: Storage | None = None,
    static_dir: Path | None = None,
    pages_dir: Path | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: Override the database path (useful for testing).
        storage: Use this storage instead of opening one at startup.
        static_dir: Override the front-end asset directory.
        pages_dir: Override the directory holding index.html.

    Returns:
        Configured FastAPI application instance.
    """
    if db_path is not None:
        import api.database as _db_mod
        _db_mod._DB_PATH = db_path

    app = FastAPI(
        title="Restaurant Catalog API",
        summary="Read-only listing, filtering and sorting of restaurants and dishes.",
        description=(
            "## Restaurant Catalog API\n\n"
            "- Flags (`isVeg`, `hasOutdoorSeating`, `isLuxury`) are stored as 0/1. "
            "A filter value of `true` selects 1; any other value selects 0; "
            "an omitted filter is unconstrained.\n"
            "- An empty result is `404 {\"message\": ...}`, never `200` with an empty list.\n"
            "- A storage failure is `500 {\"error\": ...}` with the underlying message."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {"name": "restaurants", "description": "List, look up, filter and sort restaurants."},
            {"name": "dishes", "description": "List, look up, filter and sort dishes."},
            {"name": "meta", "description": "Health check."},
        ],
    )
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cfg.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    # ── Trailing-slash normalization ──────────────────────────────────────────

    @app.middleware("http")
    async def strip_trailing_slash(request: Request, call_next):
        """Route ``/restaurants/`` as ``/restaurants`` before any route or mount matches."""
        path = request.scope["path"]
        if len(path) > 1 and path.endswith("/"):
            request.scope["path"] = path.rstrip("/") or "/"
        return await call_next(request)

    # ── Request logging middleware ────────────────────────────────────────────

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log each request and tag the response with a request ID."""
        request_id = str(uuid.uuid4())[:8]
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000
        response.headers["X-Request-ID"] = request_id

        if _cfg.log_format == "json":
            _logger.info(
                "request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status": response.status_code,
                    "duration_ms": round(duration_ms, 1),
                    "request_id": request_id,
                },
            )
        else:
            _logger.info(
                "method=%s path=%s status=%d duration_ms=%.1f rid=%s",
                request.method, request.url.path, response.status_code,
                duration_ms, request_id,
            )
        return response

    # ── Error handling ────────────────────────────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Catch unhandled exceptions and return JSON instead of HTML traceback."""
        _logger.exception("unhandled_error path=%s", request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    # ── Health check ──────────────────────────────────────────────────────────

    @app.get("/health", tags=["meta"], summary="Health check")
    def health(storage: Storage = Depends(get_storage)):
        """Return 200 OK with table counts if the store can be queried."""
        try:
            counts = {
                table: storage.get(f"SELECT COUNT(*) AS n FROM {table}")["n"]
                for table in ("restaurants", "dishes")
            }
        except Exception as e:
            return JSONResponse(
                status_code=503,
                content={"status": "degraded", "error": str(e)},
            )
        return {"status": "ok", **counts}

    # ── Register routers ──────────────────────────────────────────────────────

    app.include_router(restaurants.router)
    app.include_router(dishes.router)

    # ── Front-end page + static assets ────────────────────────────────────────

    index_page = _resolve_dir(pages_dir or _cfg.pages_dir) / "index.html"

    @app.get("/", include_in_schema=False)
    def index():
        if not index_page.is_file():
            return JSONResponse(status_code=404, content={"message": "Page not found."})
        return FileResponse(index_page)

    # Mounted last so the API routes above take precedence.
    assets = _resolve_dir(static_dir or _cfg.static_dir)
    if assets.is_dir():
        app.mount("/", StaticFiles(directory=str(assets)), name="static")

    return app


# Singleton instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.app:app",
        host=_cfg.api_host,
        port=_cfg.api_port,
        reload=True,
        log_level="info",
    )
