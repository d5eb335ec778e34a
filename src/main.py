"""Main application entry point for the food catalog service.

This module provides the FastAPI application factory and configuration
for running the service locally or in production.
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


def create_catalog_store() -> CatalogStore:
    """Create the in-memory catalog store.

    Seed data is loaded unless SEED_CATALOG is "false". Without it the store
    has no restaurants, so every food create is rejected.

    Returns:
        CatalogStore for this process
    """
    if os.getenv("SEED_CATALOG", "true").lower() == "true":
        return CatalogStore.with_seed_data()

    logger.warning("Catalog seeding disabled - starting with empty collections")
    return CatalogStore()


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Configures logging
    2. Creates the catalog store
    3. Creates services
    4. Creates the FastAPI app
    5. Sets up observability

    Returns:
        Configured FastAPI application instance
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Initializing food catalog service...")

    store = create_catalog_store()
    food_service = FoodService(store=store)
    restaurant_query = RestaurantQuery(store=store)

    logger.info("Services initialized")

    api_prefix = os.getenv("API_PREFIX", "/api")
    app = create_app(
        food_service=food_service,
        restaurant_query=restaurant_query,
        api_prefix=api_prefix,
    )

    enable_exporters = os.getenv("ENABLE_OTEL_EXPORTERS", "false").lower() == "true"
    setup_observability(app, enable_exporters=enable_exporters)

    logger.info(f"Food catalog service initialized with routes under '{api_prefix}'")

    return app


# Create the FastAPI application instance (only when not in test mode)
# This prevents the app from being created during test collection
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    # Create a placeholder app for test imports
    app = FastAPI()


if __name__ == "__main__":
    """Run the application with uvicorn when executed directly."""
    import uvicorn

    port = int(os.getenv("PORT", "5000"))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Starting development server on {host}:{port}")
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
