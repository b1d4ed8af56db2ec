"""Domain exceptions.

All domain-level errors raised while validating catalog requests or
talking to the product store. Each error carries a machine-readable
``error_code`` that the service layer copies into its result objects.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Request Validation Errors
# ============================================================================


class InvalidIdentifierError(DomainError):
    """Raised when a product identifier does not have the store's id shape."""

    error_code = "INVALID_IDENTIFIER"

    def __init__(self, product_id: str) -> None:
        """Initialize invalid identifier error.

        Args:
            product_id: The rejected identifier.
        """
        super().__init__(
            f"Not a valid product identifier: {product_id!r}",
            details={"product_id": product_id},
        )


class InvalidPageError(DomainError):
    """Raised when the page parameter is not a positive integer."""

    error_code = "INVALID_PAGE"

    def __init__(self, page: Any) -> None:
        """Initialize invalid page error.

        Args:
            page: The rejected page value.
        """
        super().__init__(
            "Please enter a valid positive integer page number",
            details={"page": str(page)},
        )


class ProductValidationError(DomainError):
    """Raised when product fields are missing or invalid on creation."""

    error_code = "VALIDATION_FAILED"

    def __init__(self, errors: list[dict[str, str]]) -> None:
        """Initialize product validation error.

        Args:
            errors: One ``{"field": ..., "message": ...}`` entry per problem.
        """
        super().__init__(
            "Product must have a valid category, name, price, and imageUrl",
            details={"errors": errors},
        )
        self.errors = errors


# ============================================================================
# Lookup Errors
# ============================================================================


class ProductNotFoundError(DomainError):
    """Raised when no product exists for a well-formed identifier."""

    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str) -> None:
        """Initialize product not found error.

        Args:
            product_id: ID of the missing product.
        """
        super().__init__(
            f"No product with ID {product_id} found",
            details={"product_id": product_id},
        )


# ============================================================================
# Store Errors
# ============================================================================


class RepositoryError(DomainError):
    """Raised when the underlying product store fails.

    Not retried by the caller; the current request fails and the
    process keeps serving.
    """

    error_code = "REPOSITORY_FAILURE"

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize repository error.

        Args:
            operation: Repository operation that failed.
            reason: Underlying error message.
        """
        super().__init__(
            f"Product store failed during {operation}",
            details={"operation": operation, "reason": reason},
        )
        self.operation = operation
