"""Domain layer.

Contains the error taxonomy shared by the catalog and API layers.
"""

from productlist.domain.exceptions import (
    DomainError,
    InvalidIdentifierError,
    InvalidPageError,
    ProductNotFoundError,
    ProductValidationError,
    RepositoryError,
)

__all__ = [
    "DomainError",
    "InvalidIdentifierError",
    "InvalidPageError",
    "ProductNotFoundError",
    "ProductValidationError",
    "RepositoryError",
]
