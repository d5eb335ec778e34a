"""Client-side view state for the catalog browser.

The controller keeps what a catalog page shows (loaded foods and
restaurants, filters, which form is open, the current error) and reconciles
it with API responses. Failed requests never raise out of the controller;
they leave the previous data in place and set ``error`` to the server's
message, which the page shows until the user dismisses it.
"""

import asyncio
import logging
from typing import Any

from food_catalog_service.models.catalog_models import Food, Restaurant
from food_catalog_service.services.catalog_client import CatalogClient, CatalogClientError

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to fetch data. Make sure the backend is running."
ADD_FAILED_MESSAGE = "Failed to add food item"
UPDATE_FAILED_MESSAGE = "Failed to update food item"
DELETE_FAILED_MESSAGE = "Failed to delete food item"


def prepare_food_payload(food_data: dict[str, Any]) -> dict[str, Any]:
    """Convert form input into the body sent to the API.

    Price and restaurantId typed as text are converted to numbers, and a
    blank imageUrl is left out so the food is stored without an image.
    Values that do not convert are passed through for the server to reject.

    Args:
        food_data: Field values as entered in the food form

    Returns:
        A new dict ready to send
    """
    payload = dict(food_data)

    price = payload.get("price")
    if isinstance(price, str):
        try:
            payload["price"] = float(price)
        except ValueError:
            pass

    restaurant_id = payload.get("restaurantId")
    if isinstance(restaurant_id, str):
        try:
            payload["restaurantId"] = int(restaurant_id)
        except ValueError:
            pass

    image_url = payload.get("imageUrl")
    if image_url is None or (isinstance(image_url, str) and not image_url.strip()):
        payload.pop("imageUrl", None)

    return payload



class ClientStateController:
    """View state for listing, filtering, and editing foods."""

    def __init__(self, client: CatalogClient) -> None:
        """Initialize the controller with empty state.

        Args:
            client: Catalog API client
        """
        self.client = client
        self.foods: list[Food] = []
        self.restaurants: list[Restaurant] = []
        self.loading = False
        self.error: str | None = None
        self.search_term = ""
        self.selected_category = ""
        self.show_add_form = False
        self.editing_food: Food | None = None

    async def load(self) -> bool:
        """Fetch foods and restaurants together.

        Returns:
            True if both lists were loaded, False otherwise
        """
        self.loading = True
        try:
            foods, restaurants = await asyncio.gather(
                self.client.list_foods(),
                self.client.list_restaurants(),
            )
        except CatalogClientError as e:
            logger.error(f"Failed to load catalog data: {e.message}")
            self.error = LOAD_FAILED_MESSAGE
            return False
        finally:
            self.loading = False

        self.foods = foods
        self.restaurants = restaurants
        self.error = None
        return True

    async def add_food(self, food_data: dict[str, Any]) -> Food | None:
        """Create a food and append it to the loaded list.

        Returns:
            The created Food, or None if the request failed
        """
        try:
            food = await self.client.create_food(prepare_food_payload(food_data))
        except CatalogClientError as e:
            self.error = e.server_message or ADD_FAILED_MESSAGE
            return None

        self.foods = [*self.foods, food]
        self.show_add_form = False
        self.error = None
        return food

    async def update_food(self, food_id: int, food_data: dict[str, Any]) -> Food | None:
        """Replace a food and swap the server's copy into the loaded list.

        Returns:
            The updated Food, or None if the request failed
        """
        try:
            updated = await self.client.update_food(food_id, prepare_food_payload(food_data))
        except CatalogClientError as e:
            self.error = e.server_message or UPDATE_FAILED_MESSAGE
            return None

        self.foods = [updated if food.id == food_id else food for food in self.foods]
        self.editing_food = None
        self.error = None
        return updated

    async def delete_food(self, food_id: int) -> bool:
        """Delete a food and drop it from the loaded list.

        Confirmation is the caller's concern.

        Returns:
            True if the food was deleted, False otherwise
        """
        try:
            await self.client.delete_food(food_id)
        except CatalogClientError as e:
            self.error = e.server_message or DELETE_FAILED_MESSAGE
            return False

        self.foods = [food for food in self.foods if food.id != food_id]
        self.error = None
        return True

    def set_search_term(self, term: str) -> None:
        self.search_term = term

    def set_category(self, category: str) -> None:
        self.selected_category = category

    def open_add_form(self) -> None:
        self.show_add_form = True

    def close_add_form(self) -> None:
        self.show_add_form = False

    def start_editing(self, food: Food) -> None:
        self.editing_food = food

    def cancel_editing(self) -> None:
        self.editing_food = None

    def dismiss_error(self) -> None:
        self.error = None

    @property
    def visible_foods(self) -> list[Food]:
        """Loaded foods narrowed by the search term and selected category."""
        needle = self.search_term.lower()
        return [
            food
            for food in self.foods
            if (needle in food.name.lower() or needle in food.description.lower())
            and (not self.selected_category or food.category == self.selected_category)
        ]

    @property
    def categories(self) -> list[str]:
        """Distinct categories of the loaded foods, in first-seen order."""
        return list(dict.fromkeys(food.category for food in self.foods))
