"""Page validation and skip/limit computation for product listings."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from productlist.domain.exceptions import InvalidPageError

# Products returned per page. Fixed; clients only choose the page number.
PAGE_SIZE = 9


@dataclass(frozen=True)
class PaginationWindow:
    """Slice of a result set selected by a page number.

    Attributes:
        page: Page number (1-indexed).
        skip: Number of matching records to skip.
        limit: Maximum number of records to return.
    """

    page: int
    skip: int
    limit: int


def parse_page(page: str | int | None) -> int:
    """Parse a raw page parameter into a page number.

    Absent or empty values mean the first page. Integral spellings such
    as ``"2.0"`` are accepted; fractional, negative, zero and non-numeric
    values are rejected.

    Args:
        page: Raw page value from the query string.

    Returns:
        Page number, at least 1.

    Raises:
        InvalidPageError: If the value is not a positive integer.
    """
    if page is None or (isinstance(page, str) and not page.strip()):
        return 1

    if isinstance(page, bool):
        raise InvalidPageError(page)

    try:
        value = Decimal(str(page).strip())
    except InvalidOperation:
        raise InvalidPageError(page) from None

    if not value.is_finite() or value != value.to_integral_value():
        raise InvalidPageError(page)

    # Offsets must fit a signed 64-bit integer
    if value.adjusted() > 17:
        raise InvalidPageError(page)

    number = int(value)
    if number < 1:
        raise InvalidPageError(page)
    return number


def compute_window(page: str | int | None, page_size: int = PAGE_SIZE) -> PaginationWindow:
    """Validate a page parameter and compute its skip/limit window.

    Args:
        page: Raw page value (defaults to 1 when absent).
        page_size: Records per page.

    Returns:
        Window with ``skip = page_size * (page - 1)`` and ``limit = page_size``.

    Raises:
        InvalidPageError: If the page is not a positive integer.
    """
    number = parse_page(page)
    return PaginationWindow(
        page=number,
        skip=page_size * (number - 1),
        limit=page_size,
    )
