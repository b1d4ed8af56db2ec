"""Field contracts for creating products.

``ProductFields`` declares every field a new product needs: its type,
whether it is required, and its numeric bounds. Request payloads are
validated against it in a single pass, so a product is either fully
valid or rejected before anything is written.
"""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from productlist.domain.exceptions import ProductValidationError

PRICE_QUANTUM = Decimal("0.01")

# NUMERIC(10, 2) upper bound
MAX_PRICE = Decimal("99999999.99")

NonEmptyStr = Annotated[str, Field(min_length=1)]


def normalize_price(value: Decimal | float | int | str) -> Decimal:
    """Round a price to exactly two decimal places, half up.

    Args:
        value: Price in major currency units.

    Returns:
        Price quantized to cents (``49.999`` becomes ``50.00``).
    """
    return Decimal(str(value)).quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


class ProductFields(BaseModel):
    """Validated fields of a product to be created."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    category: NonEmptyStr
    name: NonEmptyStr
    price: Decimal = Field(gt=0, allow_inf_nan=False)
    image: NonEmptyStr = Field(validation_alias=AliasChoices("imageUrl", "image"))

    @field_validator("price")
    @classmethod
    def round_price(cls, value: Decimal) -> Decimal:
        """Normalize price to two decimals and re-check its bounds."""
        # Bound before rounding; quantize fails beyond the decimal context precision
        if value > MAX_PRICE:
            raise ValueError(f"price must not exceed {MAX_PRICE}")
        price = normalize_price(value)
        if price <= 0:
            raise ValueError("price must be at least 0.01 after rounding to two decimals")
        if price > MAX_PRICE:
            raise ValueError(f"price must not exceed {MAX_PRICE}")
        return price


def _field_name(error: Mapping[str, Any]) -> str:
    loc = error.get("loc") or ()
    if not loc:
        return "body"
    # Report the client-facing key for the aliased image field
    return "imageUrl" if loc[0] in ("image", "imageUrl") else str(loc[0])


def validate_product_fields(payload: Any) -> ProductFields:
    """Validate a creation payload against the product field contracts.

    Args:
        payload: Request body, normally a mapping with ``category``,
            ``name``, ``price`` and ``imageUrl``.

    Returns:
        Validated fields with whitespace stripped and price normalized.

    Raises:
        ProductValidationError: If any field is missing or invalid.
    """
    if not isinstance(payload, Mapping):
        raise ProductValidationError(
            [{"field": "body", "message": "Request body must be a JSON object"}]
        )

    try:
        return ProductFields.model_validate(dict(payload))
    except ValidationError as e:
        errors = [
            {"field": _field_name(error), "message": error["msg"]}
            for error in e.errors()
        ]
        raise ProductValidationError(errors) from None
