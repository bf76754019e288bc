"""
Restaurant endpoints.

GET /restaurants                      → all restaurants
GET /restaurants/details/{id}         → one restaurant
GET /restaurants/cuisine/{cuisine}    → restaurants serving a cuisine
GET /restaurants/filter               → restaurants matching isVeg / hasOutdoorSeating / isLuxury
GET /restaurants/sort-by-rating       → all restaurants, best rated first
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from api import fetchers
from api.database import Storage, get_storage
from api.models import ERROR_RESPONSES, RestaurantDetailOut, RestaurantListOut
from api.results import resolve, to_response
from utils.query import coerce_flag

router = APIRouter(prefix="/restaurants", tags=["restaurants"])

_FLAG_DESCRIPTION = "'true' to require the flag; any other value excludes it"


@router.get(
    "",
    response_model=RestaurantListOut,
    responses=ERROR_RESPONSES,
    summary="List restaurants",
)
def list_restaurants(storage: Storage = Depends(get_storage)) -> JSONResponse:
    return to_response(resolve(
        "restaurants", "No restaurants found.",
        fetchers.fetch_restaurants, storage,
    ))


@router.get(
    "/details/{restaurant_id}",
    response_model=RestaurantDetailOut,
    responses=ERROR_RESPONSES,
    summary="Get single restaurant",
)
def get_restaurant(
    restaurant_id: str,
    storage: Storage = Depends(get_storage),
) -> JSONResponse:
    """Return one restaurant by ID.

    The ID is bound as given; a non-numeric ID matches nothing.
    """
    return to_response(resolve(
        "restaurant", "Restaurant not found.",
        fetchers.fetch_restaurant_by_id, storage, restaurant_id,
    ))


@router.get(
    "/cuisine/{cuisine}",
    response_model=RestaurantListOut,
    responses=ERROR_RESPONSES,
    summary="List restaurants by cuisine",
)
def list_restaurants_by_cuisine(
    cuisine: str,
    storage: Storage = Depends(get_storage),
) -> JSONResponse:
    return to_response(resolve(
        "restaurants", "No restaurants found for this cuisine.",
        fetchers.fetch_restaurants_by_cuisine, storage, cuisine,
    ))


@router.get(
    "/filter",
    response_model=RestaurantListOut,
    responses=ERROR_RESPONSES,
    summary="Filter restaurants by flags",
)
def filter_restaurants(
    is_veg: str | None = Query(None, alias="isVeg", description=_FLAG_DESCRIPTION),
    has_outdoor_seating: str | None = Query(
        None, alias="hasOutdoorSeating", description=_FLAG_DESCRIPTION
    ),
    is_luxury: str | None = Query(None, alias="isLuxury", description=_FLAG_DESCRIPTION),
    storage: Storage = Depends(get_storage),
) -> JSONResponse:
    """Return restaurants matching every supplied flag.

    Omitted flags are unconstrained; with no flags every restaurant matches.
    """
    filters = {
        "isVeg": coerce_flag(is_veg),
        "hasOutdoorSeating": coerce_flag(has_outdoor_seating),
        "isLuxury": coerce_flag(is_luxury),
    }
    return to_response(resolve(
        "restaurants", "No restaurants found with the specified filters.",
        fetchers.fetch_restaurants_by_filters, storage, filters,
    ))


@router.get(
    "/sort-by-rating",
    response_model=RestaurantListOut,
    responses=ERROR_RESPONSES,
    summary="List restaurants by rating, highest first",
)
def list_restaurants_by_rating(storage: Storage = Depends(get_storage)) -> JSONResponse:
    return to_response(resolve(
        "restaurants", "No restaurants found.",
        fetchers.fetch_restaurants_sorted_by_rating, storage,
    ))
