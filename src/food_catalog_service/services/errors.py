"""Errors raised by catalog services.

All of them are request-local and carry a single message meant to be shown
to the caller as-is.
"""


class CatalogError(Exception):
    """Base class for rejected catalog requests."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FoodValidationError(CatalogError):
    """A food payload broke a field rule.

    Attributes:
        field: Wire name of the first violated field ("value" for a non-object payload)
        message: Human-readable description of the violated rule
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class RestaurantReferenceError(CatalogError):
    """A food payload referenced a restaurant that does not exist."""

    def __init__(self, restaurant_id: int) -> None:
        super().__init__("Restaurant not found")
        self.restaurant_id = restaurant_id


class FoodNotFoundError(CatalogError):
    """No food matches the requested identifier."""

    def __init__(self, food_id: int | str) -> None:
        super().__init__("Food not found")
        self.food_id = food_id
