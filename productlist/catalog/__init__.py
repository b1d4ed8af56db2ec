"""Product Catalog.

Identifier validation, pagination, query building, field contracts,
persistence and the catalog service that composes them.
"""

from productlist.catalog.fields import ProductFields, normalize_price, validate_product_fields
from productlist.catalog.identifiers import is_valid_product_id, new_product_id, validate_product_id
from productlist.catalog.models import Product
from productlist.catalog.pagination import PAGE_SIZE, PaginationWindow, compute_window
from productlist.catalog.query import PriceSort, ProductQuery, build_product_query
from productlist.catalog.repository import (
    InMemoryProductRepository,
    ProductRepository,
    ProductStore,
    get_memory_repository,
    reset_memory_repository,
)
from productlist.catalog.service import (
    CatalogService,
    CreateProductResult,
    DeleteProductResult,
    GetProductResult,
    ListProductsResult,
)

__all__ = [
    # Identifiers
    "is_valid_product_id",
    "new_product_id",
    "validate_product_id",
    # Pagination
    "PAGE_SIZE",
    "PaginationWindow",
    "compute_window",
    # Query
    "PriceSort",
    "ProductQuery",
    "build_product_query",
    # Fields
    "ProductFields",
    "normalize_price",
    "validate_product_fields",
    # Models
    "Product",
    # Repository
    "InMemoryProductRepository",
    "ProductRepository",
    "ProductStore",
    "get_memory_repository",
    "reset_memory_repository",
    # Service
    "CatalogService",
    "CreateProductResult",
    "DeleteProductResult",
    "GetProductResult",
    "ListProductsResult",
]
