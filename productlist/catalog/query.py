"""Product list query descriptors.

A ``ProductQuery`` describes which products a listing wants (category
constraint, price ordering, pagination window) without performing any
I/O. Repositories receive the finished descriptor and execute it.
"""

from dataclasses import dataclass, replace
from enum import Enum

from productlist.catalog.pagination import PAGE_SIZE, PaginationWindow


class PriceSort(str, Enum):
    """Supported price orderings for product listings."""

    HIGHEST = "highest"
    LOWEST = "lowest"

    @classmethod
    def parse(cls, token: str | None) -> "PriceSort | None":
        """Map a request token to a sort order.

        Unknown or missing tokens mean no explicit ordering.
        """
        if token is None:
            return None
        try:
            return cls(token)
        except ValueError:
            return None

    @property
    def descending(self) -> bool:
        """Whether the ordering is highest price first."""
        return self is PriceSort.HIGHEST


@dataclass(frozen=True)
class ProductQuery:
    """Immutable description of a product listing query.

    Attributes:
        category: Case-insensitive substring the category must contain.
        price_sort: Price ordering, or None for the store's natural order.
        skip: Number of matching products to skip.
        limit: Maximum number of products to return.
    """

    category: str | None = None
    price_sort: PriceSort | None = None
    skip: int = 0
    limit: int = PAGE_SIZE

    def paginate(self, window: PaginationWindow) -> "ProductQuery":
        """Return a copy of this query restricted to a pagination window."""
        return replace(self, skip=window.skip, limit=window.limit)

    def matches_category(self, category: str) -> bool:
        """Check a category value against this query's category constraint."""
        if self.category is None:
            return True
        return self.category.lower() in category.lower()


def build_product_query(
    category: str | None = None,
    price_sort: str | PriceSort | None = None,
) -> ProductQuery:
    """Build a product query from request filter parameters.

    Args:
        category: Category substring filter; empty means no filter.
        price_sort: ``"highest"``, ``"lowest"``, or anything else for no ordering.

    Returns:
        Query descriptor with the default (first page) window.
    """
    if isinstance(price_sort, PriceSort):
        sort = price_sort
    else:
        sort = PriceSort.parse(price_sort)

    return ProductQuery(
        category=category or None,
        price_sort=sort,
    )
