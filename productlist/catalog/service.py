"""Catalog service for product operations.

Composes identifier validation, pagination, query building and field
contracts with a product store into the four catalog operations.
Every operation returns a result object; expected failures (bad input,
missing products) and store failures are reported through ``error_code``
rather than raised.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog

from productlist.catalog.fields import validate_product_fields
from productlist.catalog.identifiers import validate_product_id
from productlist.catalog.models import Product
from productlist.catalog.pagination import PAGE_SIZE, compute_window
from productlist.catalog.query import build_product_query
from productlist.catalog.repository import ProductStore
from productlist.domain.exceptions import DomainError, ProductNotFoundError, RepositoryError

logger = structlog.get_logger()

PRODUCTS_NOT_FOUND = "PRODUCTS_NOT_FOUND"


# ============================================================================
# Service Result Types
# ============================================================================


@dataclass
class ListProductsResult:
    """Result of listing products.

    ``total`` is informational only and is None when it could not be
    counted.
    """

    products: list[Product] = field(default_factory=list)
    page: int = 1
    skip: int = 0
    limit: int = PAGE_SIZE
    total: int | None = None
    success: bool = True
    error: str | None = None
    error_code: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class GetProductResult:
    """Result of getting a product."""

    product: Product | None = None
    success: bool = True
    error: str | None = None
    error_code: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class CreateProductResult:
    """Result of creating a product."""

    product: Product | None = None
    success: bool = True
    error: str | None = None
    error_code: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class DeleteProductResult:
    """Result of deleting a product."""

    product_id: str | None = None
    name: str | None = None
    success: bool = True
    error: str | None = None
    error_code: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str | None:
        """Confirmation text naming the removed product."""
        if not self.success:
            return None
        return f"{self.product_id}, {self.name} has been successfully removed."


def _failure(result_type: type, error: DomainError) -> Any:
    """Build a failed result of the given type from a domain error."""
    return result_type(
        success=False,
        error=error.message,
        error_code=error.error_code,
        details=error.details,
    )


# ============================================================================
# Catalog Service
# ============================================================================


class CatalogService:
    """Service for catalog operations.

    Example usage:
        service = CatalogService(ProductRepository(session))
        result = await service.list_products(page="2", category="shoe", price_sort="lowest")
        if result.success:
            ...
    """

    def __init__(self, repository: ProductStore, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            repository: Product store to read from and write to.
            request_id: Request ID for correlation.
        """
        self.repository = repository
        self.request_id = request_id

    async def list_products(
        self,
        page: str | int | None = None,
        category: str | None = None,
        price_sort: str | None = None,
    ) -> ListProductsResult:
        """List one page of products.

        Args:
            page: Page number, 1 when absent.
            category: Case-insensitive category substring.
            price_sort: ``"highest"`` or ``"lowest"``; other values leave
                the store's natural order.

        Returns:
            ListProductsResult with the page of products, or an
            ``INVALID_PAGE`` / ``PRODUCTS_NOT_FOUND`` /
            ``REPOSITORY_FAILURE`` error.
        """
        try:
            window = compute_window(page)
        except DomainError as e:
            return _failure(ListProductsResult, e)

        query = build_product_query(category=category, price_sort=price_sort).paginate(window)

        try:
            products = list(await self.repository.find(query))
        except RepositoryError as e:
            self._log_repository_failure(e)
            return _failure(ListProductsResult, e)

        if not products:
            logger.info(
                "No products found",
                page=window.page,
                category=query.category,
                request_id=self.request_id,
            )
            return ListProductsResult(
                page=window.page,
                skip=window.skip,
                limit=window.limit,
                success=False,
                error="No products found",
                error_code=PRODUCTS_NOT_FOUND,
            )

        total = await self._count()

        return ListProductsResult(
            products=products,
            page=window.page,
            skip=window.skip,
            limit=window.limit,
            total=total,
        )

    async def get_product(self, product_id: str) -> GetProductResult:
        """Get a product by ID.

        Args:
            product_id: Product identifier.

        Returns:
            GetProductResult with the product if found.
        """
        try:
            product_id = validate_product_id(product_id)
            product = await self._require(product_id)
        except RepositoryError as e:
            self._log_repository_failure(e)
            return _failure(GetProductResult, e)
        except DomainError as e:
            return _failure(GetProductResult, e)

        return GetProductResult(product=product)

    async def create_product(self, fields: Mapping[str, Any]) -> CreateProductResult:
        """Create a product from request fields.

        Args:
            fields: Payload with ``category``, ``name``, ``price`` and
                ``imageUrl``.

        Returns:
            CreateProductResult with the stored product.
        """
        try:
            validated = validate_product_fields(fields)
        except DomainError as e:
            logger.info(
                "Rejected product fields",
                details=e.details,
                request_id=self.request_id,
            )
            return _failure(CreateProductResult, e)

        product = Product(
            category=validated.category,
            name=validated.name,
            price=validated.price,
            image=validated.image,
        )

        try:
            product = await self.repository.save(product)
            await self.repository.commit()
        except RepositoryError as e:
            self._log_repository_failure(e)
            return _failure(CreateProductResult, e)

        logger.info(
            "Product created",
            product_id=product.id,
            category=product.category,
            price=str(product.price),
            request_id=self.request_id,
        )

        return CreateProductResult(product=product)

    async def delete_product(self, product_id: str) -> DeleteProductResult:
        """Delete a product by ID.

        Args:
            product_id: Product identifier.

        Returns:
            DeleteProductResult naming the removed product.
        """
        try:
            product_id = validate_product_id(product_id)
            product = await self._require(product_id)
            name = product.name
            await self.repository.delete(product)
            await self.repository.commit()
        except RepositoryError as e:
            self._log_repository_failure(e)
            return _failure(DeleteProductResult, e)
        except DomainError as e:
            return _failure(DeleteProductResult, e)

        logger.info(
            "Product deleted",
            product_id=product_id,
            request_id=self.request_id,
        )

        return DeleteProductResult(product_id=product_id, name=name)

    async def _require(self, product_id: str) -> Product:
        """Fetch a product, raising if it does not exist."""
        product = await self.repository.get_by_id(product_id)
        if product is None:
            logger.info(
                "Product not found",
                product_id=product_id,
                request_id=self.request_id,
            )
            raise ProductNotFoundError(product_id)
        return product

    async def _count(self) -> int | None:
        """Count the whole catalog without affecting the listing.

        The total covers every stored product, not just those matching
        the listing's category filter.
        """
        try:
            total = await self.repository.count()
        except RepositoryError as e:
            logger.warning(
                "Product count unavailable",
                error=e.details.get("reason"),
                request_id=self.request_id,
            )
            return None

        logger.debug("Products counted", total=total, request_id=self.request_id)
        return total

    def _log_repository_failure(self, error: RepositoryError) -> None:
        logger.error(
            "Product store failure",
            operation=error.operation,
            error=error.details.get("reason"),
            request_id=self.request_id,
        )
