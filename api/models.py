"""
Pydantic response models for the API.

Routes return JSONResponse bodies built from raw rows (see api/results.py);
these models describe those bodies in the OpenAPI docs.  Only the columns
the API filters or sorts on are declared.  Other descriptive columns pass
through unchanged (``extra="allow"``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ── Entity models ─────────────────────────────────────────────────────────────

class RestaurantOut(BaseModel):
    """A restaurant row. Flags are stored as 0/1 integers."""
    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Unique restaurant ID", examples=[1])
    cuisine: str | None = Field(None, description="Cuisine category", examples=["Indian"])
    isVeg: int | None = Field(None, description="1 if vegetarian only", examples=[1])
    hasOutdoorSeating: int | None = Field(None, description="1 if outdoor seating is available", examples=[0])
    isLuxury: int | None = Field(None, description="1 if luxury dining", examples=[0])
    rating: float | None = Field(None, description="Average rating", examples=[4.5])


class DishOut(BaseModel):
    """A dish row."""
    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Unique dish ID", examples=[1])
    isVeg: int | None = Field(None, description="1 if vegetarian", examples=[1])
    price: float | None = Field(None, description="Price", examples=[250])


# ── Response wrappers ─────────────────────────────────────────────────────────

class RestaurantListOut(BaseModel):
    restaurants: list[RestaurantOut]


class RestaurantDetailOut(BaseModel):
    restaurant: RestaurantOut


class DishListOut(BaseModel):
    dishes: list[DishOut]


class DishDetailOut(BaseModel):
    dish: DishOut


# ── Error models ──────────────────────────────────────────────────────────────

class MessageOut(BaseModel):
    """404 body: nothing matched the request."""
    message: str = Field(..., examples=["No restaurants found."])


class ErrorOut(BaseModel):
    """500 body: the storage layer failed; ``error`` is its message."""
    error: str = Field(..., examples=["no such table: restaurants"])


ERROR_RESPONSES = {
    404: {"model": MessageOut, "description": "No matching records"},
    500: {"model": ErrorOut, "description": "Storage error"},
}
