"""Product identifier validation.

Product identifiers are 24-character hexadecimal tokens. Handlers that
address a single product check the identifier shape before touching the
store, so a malformed id is reported as a client error instead of
surfacing as a store-level cast failure.
"""

import re
from uuid import uuid4

from productlist.domain.exceptions import InvalidIdentifierError

PRODUCT_ID_LENGTH = 24

_PRODUCT_ID_PATTERN = re.compile(rf"^[0-9a-fA-F]{{{PRODUCT_ID_LENGTH}}}$")


def new_product_id() -> str:
    """Generate a new product identifier.

    Returns:
        24-character lowercase hex string.
    """
    return uuid4().hex[:PRODUCT_ID_LENGTH]


def is_valid_product_id(value: object) -> bool:
    """Check whether a value has the shape of a product identifier."""
    return isinstance(value, str) and _PRODUCT_ID_PATTERN.fullmatch(value) is not None


def validate_product_id(value: str) -> str:
    """Validate a product identifier supplied by a client.

    Args:
        value: Raw identifier, usually a path parameter.

    Returns:
        The identifier, lowercased.

    Raises:
        InvalidIdentifierError: If the value is not 24 hex characters.
    """
    if not is_valid_product_id(value):
        raise InvalidIdentifierError(str(value))
    return value.lower()
