"""Unit tests for Lambda dependency factory."""

import os
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI

import lambda_dependencies as deps
from lambda_dependencies import (
    get_catalog_store,
    get_fastapi_app,
    get_food_service,
    get_restaurant_query,
    initialize_lambda_environment,
)


@pytest.fixture(autouse=True)
def clear_caches() -> None:
    """Clear cached dependencies around each test."""
    deps._catalog_store = None
    deps._food_service = None
    deps._restaurant_query = None
    deps._fastapi_app = None
    yield
    deps._catalog_store = None
    deps._food_service = None
    deps._restaurant_query = None
    deps._fastapi_app = None


@pytest.mark.unit
class TestCatalogDependencies:
    """Tests for cached store and service construction."""

    @patch.dict(os.environ, {}, clear=True)
    def test_store_is_seeded_and_cached(self) -> None:
        """Test that the store is created once per container."""
        store = get_catalog_store()

        assert get_catalog_store() is store
        assert len(store.list_foods()) == 12

    @patch.dict(os.environ, {"SEED_CATALOG": "false"}, clear=True)
    def test_store_without_seed(self) -> None:
        """Test that seeding can be disabled."""
        assert get_catalog_store().list_foods() == []

    @patch.dict(os.environ, {}, clear=True)
    def test_services_share_the_store(self) -> None:
        """Test that both services are cached and use the same store."""
        food_service = get_food_service()
        restaurant_query = get_restaurant_query()

        assert get_food_service() is food_service
        assert get_restaurant_query() is restaurant_query
        assert food_service.store is restaurant_query.store is get_catalog_store()


@pytest.mark.unit
class TestGetFastAPIApp:
    """Tests for get_fastapi_app."""

    @patch.dict(os.environ, {"ENVIRONMENT": "test"}, clear=True)
    @patch("lambda_dependencies.setup_observability")
    def test_app_is_created_once(self, mock_setup_observability: Mock) -> None:
        """Test that the app is built and instrumented once."""
        app = get_fastapi_app()

        assert isinstance(app, FastAPI)
        assert get_fastapi_app() is app
        mock_setup_observability.assert_called_once_with(app, enable_exporters=False)


@pytest.mark.unit
class TestInitializeLambdaEnvironment:
    """Tests for initialize_lambda_environment."""

    @patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True)
    @patch("lambda_dependencies.configure_logging")
    def test_configures_logging(self, mock_configure_logging: Mock) -> None:
        """Test that logging is configured from LOG_LEVEL."""
        initialize_lambda_environment()

        mock_configure_logging.assert_called_once_with("DEBUG")
