"""Product API endpoints.

Provides endpoints for the product catalog:
- GET /products - list products (9 per page, category filter, price sort)
- GET /products/{product_id} - product details
- POST /products - create a product
- DELETE /products/{product_id} - remove a product
"""

from collections.abc import AsyncGenerator
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, status

from productlist.api.schemas import ErrorResponse, ProductDeleteResponse, ProductSchema
from productlist.catalog.repository import (
    ProductRepository,
    ProductStore,
    get_memory_repository,
)
from productlist.catalog.service import PRODUCTS_NOT_FOUND, CatalogService
from productlist.domain.exceptions import (
    InvalidIdentifierError,
    InvalidPageError,
    ProductNotFoundError,
    ProductValidationError,
    RepositoryError,
)
from productlist.infrastructure.config import settings
from productlist.infrastructure.database import async_session_factory

router = APIRouter(prefix="/products", tags=["Products"])

# Result error code -> HTTP status
ERROR_STATUS: dict[str, int] = {
    InvalidIdentifierError.error_code: status.HTTP_400_BAD_REQUEST,
    InvalidPageError.error_code: status.HTTP_400_BAD_REQUEST,
    ProductValidationError.error_code: status.HTTP_400_BAD_REQUEST,
    ProductNotFoundError.error_code: status.HTTP_404_NOT_FOUND,
    PRODUCTS_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    RepositoryError.error_code: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


# ============================================================================
# Dependencies
# ============================================================================


async def get_product_store() -> AsyncGenerator[ProductStore, None]:
    """Get the configured product store for one request.

    Yields:
        In-memory repository, or a database repository bound to a
        request-scoped session.
    """
    if settings.repository_backend == "memory":
        yield get_memory_repository()
        return

    async with async_session_factory() as session:
        yield ProductRepository(session)


def get_service(
    request: Request,
    store: Annotated[ProductStore, Depends(get_product_store)],
) -> CatalogService:
    """Get catalog service with request ID."""
    request_id = getattr(request.state, "request_id", None)
    return CatalogService(store, request_id=request_id)


# ============================================================================
# Converters
# ============================================================================


def raise_for_error(result: Any) -> None:
    """Raise an HTTPException for a failed service result."""
    if result.success:
        return

    # Only field-level validation problems are exposed to clients
    details = []
    if result.error_code == ProductValidationError.error_code:
        details = result.details.get("errors", [])

    raise HTTPException(
        status_code=ERROR_STATUS.get(result.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail={
            "error_code": result.error_code,
            "message": result.error,
            "details": details,
        },
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[ProductSchema],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="List products",
    description="List products 9 at a time, optionally filtered by category and sorted by price.",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_service)],
    page: Annotated[str | None, Query(description="Page number (1-based)")] = None,
    category: Annotated[str | None, Query(description="Case-insensitive category substring")] = None,
    price: Annotated[str | None, Query(description="Price sort: highest or lowest")] = None,
) -> list[ProductSchema]:
    """List one page of products.

    An empty page is reported as 404 rather than an empty list.

    Raises:
        HTTPException: 400 for an invalid page, 404 when nothing matches.
    """
    result = await service.list_products(page=page, category=category, price_sort=price)
    raise_for_error(result)
    return [ProductSchema.model_validate(product) for product in result.products]


@router.get(
    "/{product_id}",
    response_model=ProductSchema,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Get product details",
)
async def get_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductSchema:
    """Get a product by ID.

    Raises:
        HTTPException: 400 for a malformed ID, 404 if no product has it.
    """
    result = await service.get_product(product_id)
    raise_for_error(result)
    return ProductSchema.model_validate(result.product)


@router.post(
    "",
    response_model=ProductSchema,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
    },
    summary="Create a product",
    description="Body: category, name, price (> 0, rounded to two decimals) and imageUrl.",
)
async def create_product(
    payload: Annotated[Any, Body()],
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductSchema:
    """Create a product.

    Raises:
        HTTPException: 400 if any field is missing or invalid.
    """
    result = await service.create_product(payload)
    raise_for_error(result)
    return ProductSchema.model_validate(result.product)


@router.delete(
    "/{product_id}",
    response_model=ProductDeleteResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Remove a product",
)
async def delete_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductDeleteResponse:
    """Delete a product by ID.

    Raises:
        HTTPException: 400 for a malformed ID, 404 if no product has it.
    """
    result = await service.delete_product(product_id)
    raise_for_error(result)
    return ProductDeleteResponse(
        id=result.product_id,
        name=result.name,
        message=result.message,
    )
