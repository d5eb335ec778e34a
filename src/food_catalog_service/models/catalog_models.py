"""Catalog data models.

``FoodInput`` is the whitelist of client-writable food fields and carries the
field rules shared by create and update. ``Food`` is the stored record: the
same fields plus the identifier assigned by the catalog store. ``Restaurant``
is read-only reference data seeded at startup.

Wire names are camelCase (``restaurantId``, ``imageUrl``); attributes are
snake_case. Prices and ratings are held as ``Decimal`` and serialized as
JSON numbers.
"""

from decimal import Decimal
from typing import Any

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

_uri_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

# Largest price that survives serialization as a JSON number unchanged
MAX_PRICE = Decimal("99999999.99")


class FoodInput(BaseModel):
    """Client-supplied food fields.

    Fields are declared in the order they are checked, so the first entry of
    a validation error belongs to the first violated field. Unknown keys are
    dropped.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    name: str = Field(..., min_length=2, max_length=100, description="Dish name")
    description: str = Field(..., min_length=10, max_length=500, description="Dish description")
    price: Decimal = Field(
        ...,
        gt=0,
        le=MAX_PRICE,
        max_digits=10,
        decimal_places=2,
        description="Price, two decimals at most",
    )
    category: str = Field(..., min_length=2, max_length=50, description="Free-text category label")
    restaurant_id: int = Field(..., gt=0, description="Restaurant serving this dish")
    image_url: str | None = Field(None, description="URL to dish image")

    @field_validator("price", "restaurant_id", mode="before")
    @classmethod
    def reject_booleans(cls, v: Any) -> Any:
        """Booleans are ints to Python but never a valid price or identifier."""
        if isinstance(v, bool):
            raise ValueError("must be a number")
        return v

    @field_validator("image_url", mode="before")
    @classmethod
    def reject_null_image_url(cls, v: Any) -> Any:
        """imageUrl may be left out, but an explicit null is not a URI."""
        if v is None:
            raise ValueError("must be a string")
        return v

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str | None) -> str | None:
        """Check that image_url is a well-formed URI, keeping the original text."""
        if v is None:
            return v
        try:
            _uri_adapter.validate_python(v)
        except ValidationError:
            raise ValueError("must be a valid uri") from None
        return v

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)

    def field_values(self) -> dict[str, Any]:
        """Return the whitelisted field values keyed by attribute name."""
        return {name: getattr(self, name) for name in FoodInput.model_fields}


class Food(FoodInput):
    """Stored food record."""

    id: int = Field(..., gt=0, description="Identifier assigned by the catalog store")

    @field_validator("image_url", mode="before")
    @classmethod
    def reject_null_image_url(cls, v: Any) -> Any:
        # Stored records carry None when no image was supplied
        return v


class Restaurant(BaseModel):
    """Read-only restaurant reference record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int = Field(..., gt=0, description="Unique identifier for the restaurant")
    name: str = Field(..., description="Restaurant name")
    cuisine: str = Field(..., description="Cuisine label")
    address: str = Field(..., description="Street address")
    rating: Decimal = Field(..., ge=0, le=5, decimal_places=1, description="Rating from 0.0 to 5.0")

    @field_serializer("rating")
    def serialize_rating(self, rating: Decimal) -> float:
        return float(rating)
