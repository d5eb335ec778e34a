"""Shared dependency factory for the Lambda handler.

Dependencies are created once and reused across invocations within the same
Lambda container. The catalog lives in memory, so each container holds its
own copy and it is lost when the container is recycled.
"""

import logging
import os

from fastapi import FastAPI

from food_catalog_service.handlers.api_handler import create_app
from food_catalog_service.observability import configure_logging, setup_observability
from food_catalog_service.repositories.catalog_store import CatalogStore
from food_catalog_service.services.food_service import FoodService
from food_catalog_service.services.restaurant_query import RestaurantQuery

logger = logging.getLogger(__name__)

# Module-level caches for Lambda container reuse
_catalog_store: CatalogStore | None = None
_food_service: FoodService | None = None
_restaurant_query: RestaurantQuery | None = None
_fastapi_app: FastAPI | None = None


def get_catalog_store() -> CatalogStore:
    """Create or retrieve the cached catalog store.

    Returns:
        CatalogStore, seeded unless SEED_CATALOG is "false"
    """
    global _catalog_store

    if _catalog_store is not None:
        return _catalog_store

    if os.getenv("SEED_CATALOG", "true").lower() == "true":
        _catalog_store = CatalogStore.with_seed_data()
    else:
        logger.warning("Catalog seeding disabled - starting with empty collections")
        _catalog_store = CatalogStore()

    return _catalog_store


def get_food_service() -> FoodService:
    """Create or retrieve the cached food service."""
    global _food_service

    if _food_service is not None:
        return _food_service

    _food_service = FoodService(store=get_catalog_store())
    logger.info("Food service initialized")
    return _food_service


def get_restaurant_query() -> RestaurantQuery:
    """Create or retrieve the cached restaurant query."""
    global _restaurant_query

    if _restaurant_query is not None:
        return _restaurant_query

    _restaurant_query = RestaurantQuery(store=get_catalog_store())
    logger.info("Restaurant query initialized")
    return _restaurant_query


def get_fastapi_app() -> FastAPI:
    """Create or retrieve the cached FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    global _fastapi_app

    if _fastapi_app is not None:
        return _fastapi_app

    _fastapi_app = create_app(
        food_service=get_food_service(),
        restaurant_query=get_restaurant_query(),
        api_prefix=os.getenv("API_PREFIX", "/api"),
    )

    enable_exporters = os.getenv("ENABLE_OTEL_EXPORTERS", "false").lower() == "true"
    setup_observability(_fastapi_app, enable_exporters=enable_exporters)

    logger.info("FastAPI application initialized")
    return _fastapi_app


def initialize_lambda_environment() -> None:
    """Initialize Lambda environment with structured logging.

    Should be called once during Lambda cold start.
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Lambda environment initialized")
