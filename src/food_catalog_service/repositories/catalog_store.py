"""In-memory catalog store for foods and restaurants.

The store is the only holder of the two collections. Callers get lookups,
copies of the sequences, and a small set of food mutations; they never get
the underlying lists. Following the repository pattern used across the
service, lookups return None for a missing record rather than raising.
"""

import logging
import threading
from collections.abc import Iterable
from enum import Enum

from food_catalog_service.data.seed_data import SEED_FOODS, SEED_RESTAURANTS
from food_catalog_service.models.catalog_models import Food, FoodInput, Restaurant

logger = logging.getLogger(__name__)


class Collection(str, Enum):
    """Collections held by the catalog store."""

    FOODS = "foods"
    RESTAURANTS = "restaurants"


class CatalogStore:
    """Process-local store for the food and restaurant collections.

    Insertion order is preserved. A re-entrant lock guards every access so
    that identifier generation and insertion happen as one step.
    """

    def __init__(
        self,
        restaurants: Iterable[Restaurant] = (),
        foods: Iterable[Food] = (),
    ) -> None:
        """Initialize the store.

        Args:
            restaurants: Restaurant records; immutable for the store's lifetime
            foods: Initial food records
        """
        self._lock = threading.RLock()
        self._restaurants: list[Restaurant] = list(restaurants)
        self._foods: list[Food] = list(foods)

    @classmethod
    def with_seed_data(cls) -> "CatalogStore":
        """Create a store holding the startup restaurants and dishes.

        Returns:
            CatalogStore: Store populated with the seed set
        """
        store = cls(
            restaurants=[Restaurant.model_validate(item) for item in SEED_RESTAURANTS],
            foods=[Food.model_validate(item) for item in SEED_FOODS],
        )
        logger.info(
            f"Catalog seeded with {len(SEED_RESTAURANTS)} restaurants and {len(SEED_FOODS)} foods"
        )
        return store

    def _records(self, collection: Collection) -> list[Food] | list[Restaurant]:
        if collection is Collection.FOODS:
            return self._foods
        return self._restaurants

    def next_id(self, collection: Collection) -> int:
        """Compute the next identifier for a collection.

        Recomputed from the current contents on every call.

        Args:
            collection: Collection to inspect

        Returns:
            int: Largest existing identifier plus one, or 1 if the collection is empty
        """
        with self._lock:
            return max((record.id for record in self._records(collection)), default=0) + 1

    def find_by_id(self, collection: Collection, record_id: int) -> Food | Restaurant | None:
        """Retrieve a record by exact identifier.

        Args:
            collection: Collection to search
            record_id: Identifier to match

        Returns:
            The matching record, or None if no record has that identifier
        """
        with self._lock:
            for record in self._records(collection):
                if record.id == record_id:
                    return record
            return None

    def list_foods(self) -> list[Food]:
        """Return a copy of the food sequence in insertion order."""
        with self._lock:
            return list(self._foods)

    def list_restaurants(self) -> list[Restaurant]:
        """Return a copy of the restaurant sequence in insertion order."""
        with self._lock:
            return list(self._restaurants)

    def add_food(self, fields: FoodInput) -> Food:
        """Assign an identifier to validated fields and append the record.

        Args:
            fields: Validated food fields

        Returns:
            Food: The stored record
        """
        with self._lock:
            food = Food(id=self.next_id(Collection.FOODS), **fields.field_values())
            self._foods.append(food)
            return food

    def replace_food_fields(self, food_id: int, fields: FoodInput) -> Food | None:
        """Overwrite every whitelisted field of a stored food in place.

        Args:
            food_id: Identifier of the food to update
            fields: Validated food fields

        Returns:
            Food if found and updated, None otherwise
        """
        with self._lock:
            food = self.find_by_id(Collection.FOODS, food_id)
            if food is None:
                return None

            for name, value in fields.field_values().items():
                setattr(food, name, value)
            return food

    def remove_food(self, food_id: int) -> bool:
        """Delete a food record.

        Args:
            food_id: Identifier of the food to delete

        Returns:
            bool: True if a record was removed, False if none matched
        """
        with self._lock:
            for index, food in enumerate(self._foods):
                if food.id == food_id:
                    del self._foods[index]
                    return True
            return False
