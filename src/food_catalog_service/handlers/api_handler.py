"""FastAPI application for the food catalog REST API."""

import logging
import re
from typing import Any

from fastapi import APIRouter, Body, FastAPI, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from food_catalog_service.models.catalog_models import Food, Restaurant
from food_catalog_service.services.errors import (
    CatalogError,
    FoodNotFoundError,
    FoodValidationError,
    RestaurantReferenceError,
)
from food_catalog_service.services.food_service import FoodService
from food_catalog_service.services.restaurant_query import RestaurantQuery

logger = logging.getLogger(__name__)

_ERROR_STATUS: dict[type[CatalogError], int] = {
    FoodValidationError: 400,
    RestaurantReferenceError: 400,
    FoodNotFoundError: 404,
}

_ID_PATTERN = re.compile(r"[0-9]+")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class ErrorResponse(BaseModel):
    """Error body returned for every rejected request."""

    error: str


def parse_id(raw: str) -> int | None:
    """Parse a path or query identifier, returning None unless it is plain ASCII digits."""
    if _ID_PATTERN.fullmatch(raw) is None:
        return None
    return int(raw)


def create_app(
    food_service: FoodService,
    restaurant_query: RestaurantQuery,
    api_prefix: str = "/api",
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        food_service: Service for food listing and mutations
        restaurant_query: Read-only restaurant search
        api_prefix: Path prefix for every route

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Food Catalog API",
        description="Browse restaurants and manage their dishes",
        version="1.0.0",
    )

    # Store services in app state for access in route handlers
    app.state.food_service = food_service
    app.state.restaurant_query = restaurant_query

    @app.exception_handler(CatalogError)
    async def handle_catalog_error(_request: Request, exc: CatalogError) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), 400)
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Only the body can fail FastAPI's own parsing; ids and filters arrive as strings
        logger.warning(f"Rejected malformed request: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": '"value" must be of type object'})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error while serving request: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    router = APIRouter(prefix=api_prefix)

    @router.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint.

        Returns:
            Health status indicating the API is running
        """
        return HealthResponse(status="OK", message="Food Management API is running")

    @router.get("/foods", response_model=list[Food], tags=["Foods"])
    async def list_foods(
        search: str | None = None,
        category: str | None = None,
        restaurant_id: str | None = Query(None, alias="restaurantId"),
    ) -> list[Food]:
        """List foods, optionally filtered by search text, category and restaurant.

        A restaurantId that is not an integer matches nothing.
        """
        restaurant_filter = None
        if restaurant_id:
            restaurant_filter = parse_id(restaurant_id)
            if restaurant_filter is None:
                return []

        foods: list[Food] = app.state.food_service.list_foods(
            search=search,
            category=category,
            restaurant_id=restaurant_filter,
        )
        return foods

    @router.post(
        "/foods",
        response_model=Food,
        status_code=201,
        responses={400: {"model": ErrorResponse}},
        tags=["Foods"],
    )
    async def create_food(payload: dict[str, Any] = Body(...)) -> Food:
        """Create a food item.

        Raises:
            FoodValidationError: If a field rule is violated (400)
            RestaurantReferenceError: If restaurantId does not resolve (400)
        """
        food: Food = app.state.food_service.create_food(payload)
        return food

    @router.put(
        "/foods/{food_id}",
        response_model=Food,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        tags=["Foods"],
    )
    async def update_food(food_id: str, payload: Any = Body(None)) -> Food:
        """Replace all fields of a food item.

        The identifier is resolved before the body is looked at, so an unknown
        food is a 404 whatever the payload.

        Raises:
            FoodNotFoundError: If the identifier does not resolve (404)
            FoodValidationError: If a field rule is violated (400)
            RestaurantReferenceError: If restaurantId does not resolve (400)
        """
        parsed_id = parse_id(food_id)
        if parsed_id is None:
            raise FoodNotFoundError(food_id)

        food: Food = app.state.food_service.update_food(parsed_id, payload)
        return food

    @router.delete(
        "/foods/{food_id}",
        status_code=204,
        response_class=Response,
        responses={404: {"model": ErrorResponse}},
        tags=["Foods"],
    )
    async def delete_food(food_id: str) -> Response:
        """Delete a food item.

        Raises:
            FoodNotFoundError: If the identifier does not resolve (404)
        """
        parsed_id = parse_id(food_id)
        if parsed_id is None:
            raise FoodNotFoundError(food_id)

        app.state.food_service.delete_food(parsed_id)
        return Response(status_code=204)

    @router.get("/restaurants", response_model=list[Restaurant], tags=["Restaurants"])
    async def list_restaurants(
        search: str | None = None,
        cuisine: str | None = None,
    ) -> list[Restaurant]:
        """List restaurants, optionally filtered by search text and cuisine."""
        restaurants: list[Restaurant] = app.state.restaurant_query.list_restaurants(
            search=search,
            cuisine=cuisine,
        )
        return restaurants

    app.include_router(router)
    return app
