"""Tests for domain exceptions."""

import pytest

from productlist.domain import (
    DomainError,
    InvalidIdentifierError,
    InvalidPageError,
    ProductNotFoundError,
    ProductValidationError,
    RepositoryError,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (InvalidIdentifierError("abc"), "INVALID_IDENTIFIER"),
        (InvalidPageError("-1"), "INVALID_PAGE"),
        (ProductValidationError([{"field": "price", "message": "too low"}]), "VALIDATION_FAILED"),
        (ProductNotFoundError("a" * 24), "PRODUCT_NOT_FOUND"),
        (RepositoryError("find", "connection refused"), "REPOSITORY_FAILURE"),
    ],
)
def test_error_codes(error: DomainError, code: str) -> None:
    """Every domain error carries its machine-readable code."""
    assert isinstance(error, DomainError)
    assert error.error_code == code
    assert str(error) == error.message


def test_not_found_message() -> None:
    """Not-found errors name the missing ID."""
    error = ProductNotFoundError("a" * 24)
    assert error.message == f"No product with ID {'a' * 24} found"
    assert error.details == {"product_id": "a" * 24}


def test_validation_error_keeps_field_errors() -> None:
    """Field problems are available both directly and in details."""
    errors = [{"field": "name", "message": "Field required"}]
    error = ProductValidationError(errors)
    assert error.errors == errors
    assert error.details == {"errors": errors}


def test_repository_error_records_operation() -> None:
    """Store failures record which operation failed."""
    error = RepositoryError("delete", "deadlock detected")
    assert error.operation == "delete"
    assert error.details == {"operation": "delete", "reason": "deadlock detected"}
    assert "deadlock" not in error.message
