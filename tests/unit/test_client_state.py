"""Unit tests for ClientStateController."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from food_catalog_service.models.catalog_models import Food, Restaurant
from food_catalog_service.services.catalog_client import CatalogClient, CatalogClientError
from food_catalog_service.services.client_state import (
    ADD_FAILED_MESSAGE,
    DELETE_FAILED_MESSAGE,
    LOAD_FAILED_MESSAGE,
    UPDATE_FAILED_MESSAGE,
    ClientStateController,
    prepare_food_payload,
)


@pytest.fixture
def mock_client() -> CatalogClient:
    """Create a mock CatalogClient."""
    return MagicMock(spec=CatalogClient)


@pytest.fixture
def controller(
    mock_client: CatalogClient, sample_foods: list[Food], sample_restaurants: list[Restaurant]
) -> ClientStateController:
    """Create a controller already holding the sample data."""
    controller = ClientStateController(client=mock_client)
    controller.foods = list(sample_foods)
    controller.restaurants = list(sample_restaurants)
    return controller


@pytest.mark.unit
class TestLoad:
    """Tests for ClientStateController.load."""

    @pytest.mark.asyncio
    async def test_load_success(
        self,
        mock_client: CatalogClient,
        sample_foods: list[Food],
        sample_restaurants: list[Restaurant],
    ) -> None:
        """Test that load stores both lists and clears errors."""
        mock_client.list_foods = AsyncMock(return_value=sample_foods)
        mock_client.list_restaurants = AsyncMock(return_value=sample_restaurants)
        controller = ClientStateController(client=mock_client)
        controller.error = "stale"

        assert await controller.load() is True

        assert controller.foods == sample_foods
        assert controller.restaurants == sample_restaurants
        assert controller.error is None
        assert controller.loading is False

    @pytest.mark.asyncio
    async def test_load_failure(self, mock_client: CatalogClient) -> None:
        """Test that a failed load sets the backend message."""
        mock_client.list_foods = AsyncMock(side_effect=CatalogClientError("down"))
        mock_client.list_restaurants = AsyncMock(return_value=[])
        controller = ClientStateController(client=mock_client)

        assert await controller.load() is False

        assert controller.error == LOAD_FAILED_MESSAGE
        assert controller.foods == []
        assert controller.loading is False


@pytest.mark.unit
class TestPrepareFoodPayload:
    """Tests for converting form input before it is sent."""

    def test_converts_text_numbers(self, mock_food_payload: dict) -> None:
        """Test that typed price and restaurantId become numbers."""
        payload = prepare_food_payload({**mock_food_payload, "price": "12.50", "restaurantId": "3"})

        assert payload["price"] == 12.5
        assert payload["restaurantId"] == 3

    @pytest.mark.parametrize("image_url", ["", "   ", None])
    def test_drops_blank_image_url(self, mock_food_payload: dict, image_url: object) -> None:
        """Test that a blank imageUrl is left out of the body."""
        payload = prepare_food_payload({**mock_food_payload, "imageUrl": image_url})

        assert "imageUrl" not in payload

    def test_unconvertible_values_pass_through(self, mock_food_payload: dict) -> None:
        """Test that bad input is left for the server to report."""
        payload = prepare_food_payload({**mock_food_payload, "price": "cheap", "restaurantId": "x"})

        assert payload["price"] == "cheap"
        assert payload["restaurantId"] == "x"

    def test_input_is_not_modified(self, mock_food_payload: dict) -> None:
        original = {**mock_food_payload, "imageUrl": ""}

        prepare_food_payload(original)

        assert original["imageUrl"] == ""


@pytest.mark.unit
class TestMutations:
    """Tests for add, update, and delete reconciliation."""

    @pytest.mark.asyncio
    async def test_add_food_appends_and_closes_form(
        self, controller: ClientStateController, mock_client: CatalogClient, mock_food_payload: dict
    ) -> None:
        """Test that a created food is appended and the add form closes."""
        created = Food.model_validate({**mock_food_payload, "id": 3})
        mock_client.create_food = AsyncMock(return_value=created)
        controller.open_add_form()

        result = await controller.add_food(mock_food_payload)

        assert result == created
        assert [f.id for f in controller.foods] == [1, 2, 3]
        assert controller.show_add_form is False
        assert controller.error is None

    @pytest.mark.asyncio
    async def test_add_food_sends_prepared_payload(
        self, controller: ClientStateController, mock_client: CatalogClient, mock_food_payload: dict
    ) -> None:
        """Test that form text is converted and a blank image dropped before sending."""
        created = Food.model_validate({**mock_food_payload, "id": 3})
        mock_client.create_food = AsyncMock(return_value=created)
        form = {**mock_food_payload, "price": "15.5", "restaurantId": "1", "imageUrl": ""}

        await controller.add_food(form)

        sent = mock_client.create_food.await_args.args[0]
        assert sent["price"] == 15.5
        assert sent["restaurantId"] == 1
        assert "imageUrl" not in sent

    @pytest.mark.asyncio
    async def test_add_food_failure_shows_server_message(
        self, controller: ClientStateController, mock_client: CatalogClient, mock_food_payload: dict
    ) -> None:
        """Test that the server message is shown verbatim and the form stays open."""
        mock_client.create_food = AsyncMock(
            side_effect=CatalogClientError("rejected", 400, "Restaurant not found")
        )
        controller.open_add_form()

        assert await controller.add_food(mock_food_payload) is None

        assert controller.error == "Restaurant not found"
        assert controller.show_add_form is True
        assert len(controller.foods) == 2

    @pytest.mark.asyncio
    async def test_add_food_failure_without_server_message(
        self, controller: ClientStateController, mock_client: CatalogClient, mock_food_payload: dict
    ) -> None:
        """Test the fallback message when the server sent none."""
        mock_client.create_food = AsyncMock(side_effect=CatalogClientError("down"))

        await controller.add_food(mock_food_payload)

        assert controller.error == ADD_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_update_food_replaces_entry(
        self, controller: ClientStateController, mock_client: CatalogClient, mock_food_payload: dict
    ) -> None:
        """Test that the server's copy replaces the edited food."""
        updated = Food.model_validate({**mock_food_payload, "id": 1})
        mock_client.update_food = AsyncMock(return_value=updated)
        controller.start_editing(controller.foods[0])

        await controller.update_food(1, mock_food_payload)

        assert controller.foods[0].name == "Mushroom Risotto"
        assert controller.foods[1].name == "Chicken Burger"
        assert controller.editing_food is None

    @pytest.mark.asyncio
    async def test_update_food_failure_keeps_editing(
        self, controller: ClientStateController, mock_client: CatalogClient, mock_food_payload: dict
    ) -> None:
        """Test that a failed update keeps the form open and the old data."""
        mock_client.update_food = AsyncMock(side_effect=CatalogClientError("down"))
        editing = controller.foods[0]
        controller.start_editing(editing)

        assert await controller.update_food(1, mock_food_payload) is None

        assert controller.error == UPDATE_FAILED_MESSAGE
        assert controller.editing_food is editing
        assert controller.foods[0].name == "Margherita Pizza"

    @pytest.mark.asyncio
    async def test_delete_food_drops_entry(
        self, controller: ClientStateController, mock_client: CatalogClient
    ) -> None:
        """Test that a deleted food leaves the list."""
        mock_client.delete_food = AsyncMock(return_value=None)

        assert await controller.delete_food(1) is True

        assert [f.id for f in controller.foods] == [2]

    @pytest.mark.asyncio
    async def test_delete_food_failure(
        self, controller: ClientStateController, mock_client: CatalogClient
    ) -> None:
        """Test that a failed delete keeps the food and shows the message."""
        mock_client.delete_food = AsyncMock(
            side_effect=CatalogClientError("missing", 404, "Food not found")
        )

        assert await controller.delete_food(1) is False

        assert controller.error == "Food not found"
        assert len(controller.foods) == 2

    @pytest.mark.asyncio
    async def test_delete_failure_fallback_message(
        self, controller: ClientStateController, mock_client: CatalogClient
    ) -> None:
        """Test the fallback message for deletes."""
        mock_client.delete_food = AsyncMock(side_effect=CatalogClientError("down"))

        await controller.delete_food(1)

        assert controller.error == DELETE_FAILED_MESSAGE


@pytest.mark.unit
class TestViewState:
    """Tests for filters and derived lists."""

    def test_visible_foods_unfiltered(self, controller: ClientStateController) -> None:
        assert len(controller.visible_foods) == 2

    def test_visible_foods_by_search(self, controller: ClientStateController) -> None:
        controller.set_search_term("BASIL")

        assert [f.id for f in controller.visible_foods] == [1]

    def test_visible_foods_by_category(self, controller: ClientStateController) -> None:
        controller.set_category("American")

        assert [f.id for f in controller.visible_foods] == [2]

    def test_visible_foods_by_search_and_category(self, controller: ClientStateController) -> None:
        controller.set_search_term("pizza")
        controller.set_category("American")

        assert controller.visible_foods == []

    def test_categories(self, controller: ClientStateController) -> None:
        assert controller.categories == ["Italian", "American"]

    def test_form_and_error_toggles(self, controller: ClientStateController) -> None:
        """Test the simple state switches."""
        controller.open_add_form()
        controller.start_editing(controller.foods[1])
        controller.error = "oops"

        controller.close_add_form()
        controller.cancel_editing()
        controller.dismiss_error()

        assert controller.show_add_form is False
        assert controller.editing_food is None
        assert controller.error is None
