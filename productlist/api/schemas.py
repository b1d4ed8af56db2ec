"""API schemas for the product list API.

Pydantic models for response serialization.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(BaseModel):
    """Product representation."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Product identifier (24 hex characters)")
    category: str = Field(..., description="Product category")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Price with two decimal places")
    image: str = Field(..., description="Product image URL")


class ProductDeleteResponse(BaseModel):
    """Confirmation of a removed product."""

    id: str = Field(..., description="ID of the removed product")
    name: str = Field(..., description="Name of the removed product")
    message: str = Field(..., description="Human-readable confirmation")
