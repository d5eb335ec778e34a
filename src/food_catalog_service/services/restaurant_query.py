"""Read-only restaurant search."""

from food_catalog_service.models.catalog_models import Restaurant
from food_catalog_service.observability import traced
from food_catalog_service.observability.metrics import record_query_results
from food_catalog_service.repositories.catalog_store import CatalogStore


class RestaurantQuery:
    """Lists and searches the seeded restaurants. Exposes no mutations."""

    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    @traced("restaurant.list")
    def list_restaurants(
        self,
        search: str | None = None,
        cuisine: str | None = None,
    ) -> list[Restaurant]:
        """List restaurants matching every filter that is set.

        Args:
            search: Case-insensitive substring of the name or cuisine
            cuisine: Case-insensitive exact cuisine

        Returns:
            Matching restaurants in insertion order
        """
        restaurants = self.store.list_restaurants()

        if search:
            needle = search.lower()
            restaurants = [
                r for r in restaurants if needle in r.name.lower() or needle in r.cuisine.lower()
            ]

        if cuisine:
            wanted = cuisine.lower()
            restaurants = [r for r in restaurants if r.cuisine.lower() == wanted]

        record_query_results("restaurants", len(restaurants))
        return restaurants
