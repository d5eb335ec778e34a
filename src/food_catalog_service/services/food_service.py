"""Food service: filtering, validation, and mutation of food records."""

import logging
from typing import Any, NoReturn

from food_catalog_service.models.catalog_models import Food, FoodInput
from food_catalog_service.observability import traced
from food_catalog_service.observability.metrics import (
    record_catalog_error,
    record_food_mutation,
    record_query_results,
)
from food_catalog_service.repositories.catalog_store import CatalogStore, Collection
from food_catalog_service.services.errors import (
    CatalogError,
    FoodNotFoundError,
    RestaurantReferenceError,
)
from food_catalog_service.services.food_validation import validate_food_payload

logger = logging.getLogger(__name__)


class FoodService:
    """Service for listing and changing food records.

    Create and update run the same validation and the same restaurant
    reference check, and both finish before the store is touched, so a
    rejected request never leaves a partial write behind.
    """

    def __init__(self, store: CatalogStore) -> None:
        """Initialize the FoodService.

        Args:
            store: Catalog store holding foods and restaurants
        """
        self.store = store

    @traced("food.list")
    def list_foods(
        self,
        search: str | None = None,
        category: str | None = None,
        restaurant_id: int | None = None,
    ) -> list[Food]:
        """List foods matching every filter that is set.

        Args:
            search: Case-insensitive substring of the name or description
            category: Case-insensitive exact category
            restaurant_id: Exact restaurant identifier

        Returns:
            Matching foods in insertion order
        """
        foods = self.store.list_foods()

        if search:
            needle = search.lower()
            foods = [
                f for f in foods if needle in f.name.lower() or needle in f.description.lower()
            ]

        if category:
            wanted = category.lower()
            foods = [f for f in foods if f.category.lower() == wanted]

        if restaurant_id is not None:
            foods = [f for f in foods if f.restaurant_id == restaurant_id]

        record_query_results("foods", len(foods))
        return foods

    def list_categories(self) -> list[str]:
        """List distinct food categories in first-seen order."""
        return list(dict.fromkeys(food.category for food in self.store.list_foods()))

    def get_food(self, food_id: int) -> Food:
        """Get a food by identifier.

        Raises:
            FoodNotFoundError: If no food has that identifier
        """
        food = self.store.find_by_id(Collection.FOODS, food_id)
        if food is None:
            self._reject(FoodNotFoundError(food_id))
        return food

    @traced("food.create")
    def create_food(self, payload: Any) -> Food:
        """Validate a payload and store it as a new food.

        Args:
            payload: Decoded request body

        Returns:
            Food: The stored record with its assigned identifier

        Raises:
            FoodValidationError: If a field rule is violated
            RestaurantReferenceError: If restaurantId does not resolve
        """
        fields = self._validate(payload)
        food = self.store.add_food(fields)

        record_food_mutation("create")
        logger.info(f"Created food {food.id} ({food.name}) for restaurant {food.restaurant_id}")
        return food

    @traced("food.update")
    def update_food(self, food_id: int, payload: Any) -> Food:
        """Replace every validated field of an existing food.

        The identifier is preserved and keys outside the field whitelist are
        ignored. An omitted imageUrl clears the stored one.

        Args:
            food_id: Identifier of the food to update
            payload: Decoded request body holding the full set of fields

        Returns:
            Food: The updated record

        Raises:
            FoodNotFoundError: If no food has that identifier
            FoodValidationError: If a field rule is violated
            RestaurantReferenceError: If restaurantId does not resolve
        """
        self.get_food(food_id)
        fields = self._validate(payload)

        food = self.store.replace_food_fields(food_id, fields)
        if food is None:
            # Removed between lookup and write
            self._reject(FoodNotFoundError(food_id))

        record_food_mutation("update")
        logger.info(f"Updated food {food_id}")
        return food

    @traced("food.delete")
    def delete_food(self, food_id: int) -> None:
        """Remove a food permanently.

        Raises:
            FoodNotFoundError: If no food has that identifier
        """
        if not self.store.remove_food(food_id):
            self._reject(FoodNotFoundError(food_id))

        record_food_mutation("delete")
        logger.info(f"Deleted food {food_id}")

    def _validate(self, payload: Any) -> FoodInput:
        try:
            fields = validate_food_payload(payload)
        except CatalogError as e:
            self._reject(e)

        if self.store.find_by_id(Collection.RESTAURANTS, fields.restaurant_id) is None:
            self._reject(RestaurantReferenceError(fields.restaurant_id))

        return fields

    def _reject(self, error: CatalogError) -> NoReturn:
        record_catalog_error(type(error).__name__)
        logger.warning(f"Rejected food request: {error.message}")
        raise error
