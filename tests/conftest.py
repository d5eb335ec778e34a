"""Shared pytest fixtures and configuration for all tests."""

import os

# Must be set before main/lambda_handler are imported so they skip app creation
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402

from food_catalog_service.models.catalog_models import Food, Restaurant  # noqa: E402
from food_catalog_service.repositories.catalog_store import CatalogStore  # noqa: E402


@pytest.fixture
def mock_food_payload() -> dict:
    """Fixture providing a valid food payload using wire names."""
    return {
        "name": "Mushroom Risotto",
        "description": "Creamy arborio rice with porcini mushrooms and parmesan",
        "price": 15.5,
        "category": "Italian",
        "restaurantId": 1,
        "imageUrl": "https://example.com/risotto.jpg",
    }


@pytest.fixture
def sample_restaurants() -> list[Restaurant]:
    """Fixture providing two restaurants."""
    return [
        Restaurant(id=1, name="Pizza Palace", cuisine="Italian", address="123 Main St, City", rating=4.5),
        Restaurant(id=2, name="Burger House", cuisine="American", address="456 Oak Ave, City", rating=4.2),
    ]


@pytest.fixture
def sample_foods() -> list[Food]:
    """Fixture providing the two-item food set used by filtering tests."""
    return [
        Food(
            id=1,
            name="Margherita Pizza",
            description="Classic tomato and mozzarella pizza with fresh basil",
            price=12.99,
            category="Italian",
            restaurant_id=1,
        ),
        Food(
            id=2,
            name="Chicken Burger",
            description="Grilled chicken with fresh vegetables and special sauce",
            price=8.99,
            category="American",
            restaurant_id=2,
        ),
    ]


@pytest.fixture
def store(sample_restaurants: list[Restaurant], sample_foods: list[Food]) -> CatalogStore:
    """Fixture providing a fresh two-restaurant, two-food store per test."""
    return CatalogStore(restaurants=sample_restaurants, foods=sample_foods)


@pytest.fixture
def seeded_store() -> CatalogStore:
    """Fixture providing a fresh store holding the startup seed set."""
    return CatalogStore.with_seed_data()
