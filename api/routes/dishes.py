"""
Dish endpoints.

GET /dishes                 → all dishes
GET /dishes/details/{id}    → one dish
GET /dishes/filter          → dishes by isVeg
GET /dishes/sort-by-price   → all dishes, cheapest first
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from api import fetchers
from api.database import Storage, get_storage
from api.models import ERROR_RESPONSES, DishDetailOut, DishListOut
from api.results import resolve, to_response
from utils.query import coerce_flag

router = APIRouter(prefix="/dishes", tags=["dishes"])


@router.get("", response_model=DishListOut, responses=ERROR_RESPONSES, summary="List dishes")
def list_dishes(storage: Storage = Depends(get_storage)) -> JSONResponse:
    return to_response(resolve(
        "dishes", "No dishes found.",
        fetchers.fetch_dishes, storage,
    ))


@router.get(
    "/details/{dish_id}",
    response_model=DishDetailOut,
    responses=ERROR_RESPONSES,
    summary="Get single dish",
)
def get_dish(dish_id: str, storage: Storage = Depends(get_storage)) -> JSONResponse:
    return to_response(resolve(
        "dish", "Dish not found.",
        fetchers.fetch_dish_by_id, storage, dish_id,
    ))


@router.get(
    "/filter",
    response_model=DishListOut,
    responses=ERROR_RESPONSES,
    summary="Filter dishes by vegetarian flag",
)
def filter_dishes(
    is_veg: str | None = Query(
        None, alias="isVeg",
        description="'true' for vegetarian dishes; any other value for non-vegetarian",
    ),
    storage: Storage = Depends(get_storage),
) -> JSONResponse:
    """Return dishes matching isVeg.  Without isVeg every dish matches."""
    return to_response(resolve(
        "dishes", "No dishes found for this filter.",
        fetchers.fetch_dishes_by_filter, storage, coerce_flag(is_veg),
    ))


@router.get(
    "/sort-by-price",
    response_model=DishListOut,
    responses=ERROR_RESPONSES,
    summary="List dishes by price, lowest first",
)
def list_dishes_by_price(storage: Storage = Depends(get_storage)) -> JSONResponse:
    return to_response(resolve(
        "dishes", "No dishes found.",
        fetchers.fetch_dishes_sorted_by_price, storage,
    ))
