"""Food payload validation.

Runs the ``FoodInput`` field rules and turns the first pydantic error into a
``FoodValidationError`` with a readable message. Only the first violated
field is reported.
"""

from typing import Any

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from food_catalog_service.models.catalog_models import FoodInput
from food_catalog_service.services.errors import FoodValidationError

# pydantic error type -> message template; "{field}" is the quoted wire name
_MESSAGES: dict[str, str] = {
    "missing": "{field} is required",
    "string_type": "{field} must be a string",
    "string_too_short": "{field} length must be at least {min_length} characters long",
    "string_too_long": "{field} length must be less than or equal to {max_length} characters long",
    "greater_than": "{field} must be a positive number",
    "decimal_max_places": "{field} must have no more than {decimal_places} decimal places",
    "decimal_max_digits": "{field} must have no more than {max_digits} digits",
    "decimal_whole_digits": "{field} must have no more than {whole_digits} digits before the decimal point",
    "less_than_equal": "{field} must be less than or equal to {le}",
    "decimal_parsing": "{field} must be a number",
    "decimal_type": "{field} must be a number",
    "finite_number": "{field} must be a number",
    "int_parsing": "{field} must be a number",
    "int_type": "{field} must be a number",
    "int_from_float": "{field} must be an integer",
    "model_type": "{field} must be of type object",
    "model_attributes_type": "{field} must be of type object",
    "dict_type": "{field} must be of type object",
}


def describe_error(error: ErrorDetails) -> tuple[str, str]:
    """Build the field name and message for a single pydantic error.

    Args:
        error: One entry of ``ValidationError.errors()``

    Returns:
        Tuple of (field name, message)
    """
    loc = error.get("loc", ())
    field = str(loc[0]) if loc else "value"
    ctx = error.get("ctx", {})
    quoted = f'"{field}"'

    if error["type"] == "value_error":
        return field, f"{quoted} {ctx.get('error', error['msg'])}"

    template = _MESSAGES.get(error["type"])
    if template is None:
        return field, f"{quoted} {error['msg']}"
    return field, template.format(field=quoted, **ctx)


def validate_food_payload(payload: Any) -> FoodInput:
    """Validate a food payload against the field rules.

    Args:
        payload: Decoded request body

    Returns:
        FoodInput holding only the whitelisted fields

    Raises:
        FoodValidationError: For the first violated field
    """
    try:
        return FoodInput.model_validate(payload)
    except ValidationError as e:
        field, message = describe_error(e.errors()[0])
        raise FoodValidationError(field=field, message=message) from e
