"""Client for interacting with the Food Catalog API."""

import logging
from typing import Any

import httpx

from food_catalog_service.models.catalog_models import Food, Restaurant

logger = logging.getLogger(__name__)


class CatalogClientError(Exception):
    """A catalog API call failed.

    Attributes:
        message: Description of the failure
        status_code: HTTP status of the response, None for transport failures
        server_message: The ``error`` field of the response body, if any
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        server_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.server_message = server_message


def _server_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None


class CatalogClient:
    """HTTP client for the food and restaurant endpoints.

    A fresh ``httpx.AsyncClient`` is opened per call unless one is injected,
    which lets callers share a connection pool or route requests through a
    custom transport.
    """

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialize the catalog client.

        Args:
            base_url: Base URL of the API including its prefix (e.g., "http://localhost:5000/api")
            http_client: Optional client to send every request through
            timeout: Request timeout in seconds for clients opened per call
        """
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client
        self.timeout = timeout

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.base_url}{path}"

        try:
            if self.http_client is not None:
                response = await self.http_client.request(method, url, **kwargs)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.request(method, url, **kwargs)
            response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            server_message = _server_message(e.response)
            logger.warning(
                f"{method} {url} returned {e.response.status_code}: {server_message or 'no message'}"
            )
            raise CatalogClientError(
                f"{method} {url} failed with status {e.response.status_code}",
                status_code=e.response.status_code,
                server_message=server_message,
            ) from e

        except httpx.RequestError as e:
            logger.error(f"{method} {url} could not be sent: {e}")
            raise CatalogClientError(f"{method} {url} could not be sent: {e}") from e

    async def health(self) -> dict[str, Any]:
        """Fetch the API health payload."""
        response = await self._request("GET", "/health")
        data: dict[str, Any] = response.json()
        return data

    async def list_foods(
        self,
        search: str | None = None,
        category: str | None = None,
        restaurant_id: int | None = None,
    ) -> list[Food]:
        """Fetch foods matching the given filters.

        Args:
            search: Search text matched against name and description
            category: Category filter
            restaurant_id: Restaurant filter

        Returns:
            List of Food objects in server order

        Raises:
            CatalogClientError: If the request fails
        """
        params: dict[str, Any] = {}
        if search:
            params["search"] = search
        if category:
            params["category"] = category
        if restaurant_id is not None:
            params["restaurantId"] = restaurant_id

        response = await self._request("GET", "/foods", params=params)
        return [Food.model_validate(item) for item in response.json()]

    async def list_restaurants(
        self,
        search: str | None = None,
        cuisine: str | None = None,
    ) -> list[Restaurant]:
        """Fetch restaurants matching the given filters.

        Raises:
            CatalogClientError: If the request fails
        """
        params: dict[str, Any] = {}
        if search:
            params["search"] = search
        if cuisine:
            params["cuisine"] = cuisine

        response = await self._request("GET", "/restaurants", params=params)
        return [Restaurant.model_validate(item) for item in response.json()]

    async def create_food(self, food_data: dict[str, Any]) -> Food:
        """Create a food item.

        Args:
            food_data: Food fields using wire names (camelCase)

        Returns:
            The created Food with its assigned identifier

        Raises:
            CatalogClientError: If the request is rejected or fails
        """
        response = await self._request("POST", "/foods", json=food_data)
        return Food.model_validate(response.json())

    async def update_food(self, food_id: int, food_data: dict[str, Any]) -> Food:
        """Replace all fields of a food item.

        Raises:
            CatalogClientError: If the request is rejected or fails
        """
        response = await self._request("PUT", f"/foods/{food_id}", json=food_data)
        return Food.model_validate(response.json())

    async def delete_food(self, food_id: int) -> None:
        """Delete a food item.

        Raises:
            CatalogClientError: If the request is rejected or fails
        """
        await self._request("DELETE", f"/foods/{food_id}")
