"""
Uniform result type shared by every read route.

A route runs its fetcher through resolve() and returns to_response(result).
The three outcomes map to HTTP as follows:

    Found     -> 200 {<key>: data}
    NotFound  -> 404 {"message": ...}
    Fault     -> 500 {"error": ...}
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union

from fastapi.responses import JSONResponse

_logger = logging.getLogger("restaurant_catalog_api")


@dataclass(frozen=True)
class Found:
    """Data was found; ``key`` names the wrapper field in the response body."""
    key: str
    data: Any


@dataclass(frozen=True)
class NotFound:
    message: str


@dataclass(frozen=True)
class Fault:
    """The storage layer (or anything beneath the route) raised."""
    message: str


Result = Union[Found, NotFound, Fault]


def resolve(
    key: str,
    not_found_message: str,
    fetch: Callable[..., Any],
    *args: Any,
) -> Result:
    """Call ``fetch(*args)`` and classify the outcome.

    A ``None`` record or an empty list is NotFound.  Any exception is logged
    and becomes a Fault carrying the exception's message.
    """
    try:
        data = fetch(*args)
    except Exception as exc:
        _logger.exception("fetch_failed fetcher=%s", getattr(fetch, "__name__", fetch))
        return Fault(str(exc))
    if data is None or (isinstance(data, list) and not data):
        return NotFound(not_found_message)
    return Found(key, data)


def to_response(result: Result) -> JSONResponse:
    """Select the status code and body shape for ``result``."""
    if isinstance(result, Found):
        return JSONResponse(status_code=200, content={result.key: result.data})
    if isinstance(result, NotFound):
        return JSONResponse(status_code=404, content={"message": result.message})
    return JSONResponse(status_code=500, content={"error": result.message})
