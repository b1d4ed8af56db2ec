"""Tests for product repositories."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from productlist.catalog.identifiers import is_valid_product_id
from productlist.catalog.models import Product
from productlist.catalog.query import ProductQuery, build_product_query
from productlist.catalog.repository import (
    InMemoryProductRepository,
    ProductRepository,
    get_memory_repository,
    reset_memory_repository,
)
from productlist.domain.exceptions import RepositoryError

ROWS = [
    ("Shoes", "Runner", "49.99"),
    ("Running Shoes", "Trail Blazer", "89.50"),
    ("Books", "Python Handbook", "29.00"),
    ("shoe accessories", "Laces", "4.25"),
    ("Electronics", "Headphones", "149.99"),
]


def _product(category: str, name: str, price: str) -> Product:
    return Product(
        category=category,
        name=name,
        price=Decimal(price),
        image=f"https://images.example.com/{name.lower().replace(' ', '-')}.png",
    )


async def _seed(repo, rows=ROWS) -> list[Product]:
    products = [await repo.save(_product(*row)) for row in rows]
    await repo.commit()
    return products


# ============================================================================
# SQL Repository
# ============================================================================


class TestProductRepository:
    """Tests for ProductRepository against SQLite."""

    @pytest.fixture
    def repo(self, session: AsyncSession) -> ProductRepository:
        return ProductRepository(session)

    async def test_save_assigns_id(self, repo: ProductRepository) -> None:
        """Saving a product assigns a 24-hex identifier."""
        product = await repo.save(_product("Shoes", "Runner", "49.99"))
        await repo.commit()

        assert is_valid_product_id(product.id)
        assert product.created_at is not None

    async def test_get_by_id(self, repo: ProductRepository) -> None:
        """Products can be fetched by ID with their price intact."""
        saved = await _seed(repo)

        product = await repo.get_by_id(saved[0].id)

        assert product is not None
        assert product.name == "Runner"
        assert product.price == Decimal("49.99")

    async def test_get_unknown_returns_none(self, repo: ProductRepository) -> None:
        """Unknown IDs return None."""
        await _seed(repo)
        assert await repo.get_by_id("0" * 24) is None

    async def test_find_without_filters(self, repo: ProductRepository) -> None:
        """An unconstrained query returns up to limit products."""
        await _seed(repo)

        products = await repo.find(ProductQuery(limit=3))

        assert len(products) == 3

    async def test_category_filter_is_case_insensitive_substring(
        self, repo: ProductRepository
    ) -> None:
        """Category matches any category containing the term in any case."""
        await _seed(repo)

        products = await repo.find(build_product_query(category="SHOE"))

        assert {p.name for p in products} == {"Runner", "Trail Blazer", "Laces"}

    @pytest.mark.parametrize(
        ("term", "expected"),
        [("%", {"Cotton Tee"}), ("_", {"Blocks"})],
    )
    async def test_category_wildcards_match_literally(
        self, repo: ProductRepository, term: str, expected: set[str]
    ) -> None:
        """LIKE wildcards in the category term are not treated as patterns."""
        await _seed(
            repo,
            [
                ("100% Cotton", "Cotton Tee", "15.00"),
                ("Kids_Toys", "Blocks", "12.00"),
                ("Kids Toys", "Kite", "18.00"),
            ],
        )

        products = await repo.find(build_product_query(category=term))

        assert {p.name for p in products} == expected

    async def test_sort_highest(self, repo: ProductRepository) -> None:
        """highest orders by price descending."""
        await _seed(repo)

        products = await repo.find(build_product_query(price_sort="highest"))

        assert [p.name for p in products] == [
            "Headphones",
            "Trail Blazer",
            "Runner",
            "Python Handbook",
            "Laces",
        ]

    async def test_sort_lowest_with_filter(self, repo: ProductRepository) -> None:
        """Filtering and ordering combine."""
        await _seed(repo)

        products = await repo.find(build_product_query(category="shoe", price_sort="lowest"))

        assert [p.price for p in products] == [
            Decimal("4.25"),
            Decimal("49.99"),
            Decimal("89.50"),
        ]

    async def test_skip_and_limit(self, repo: ProductRepository) -> None:
        """The query window is applied after filtering and sorting."""
        await _seed(repo, [("Gadgets", f"Gadget {i}", f"{i}.00") for i in range(1, 13)])

        query = build_product_query(price_sort="lowest")
        first = await repo.find(query)
        second = await repo.find(ProductQuery(price_sort=query.price_sort, skip=9, limit=9))

        assert [p.name for p in first] == [f"Gadget {i}" for i in range(1, 10)]
        assert [p.name for p in second] == ["Gadget 10", "Gadget 11", "Gadget 12"]

    async def test_window_past_end_is_empty(self, repo: ProductRepository) -> None:
        """A window beyond the matching products returns nothing."""
        await _seed(repo)
        assert list(await repo.find(ProductQuery(skip=9, limit=9))) == []

    async def test_count(self, repo: ProductRepository) -> None:
        """Count honors the category filter and ignores the window."""
        await _seed(repo)

        assert await repo.count() == 5
        assert await repo.count(ProductQuery(category="shoe", skip=9, limit=1)) == 3
        assert await repo.count(build_product_query(category="garden")) == 0

    async def test_delete(self, repo: ProductRepository) -> None:
        """Deleted products are no longer found."""
        saved = await _seed(repo)

        await repo.delete(saved[1])
        await repo.commit()

        assert await repo.get_by_id(saved[1].id) is None
        assert await repo.count() == 4

    async def test_store_errors_are_wrapped(self) -> None:
        """SQLAlchemy failures surface as RepositoryError."""
        session = AsyncMock()
        session.execute.side_effect = SQLAlchemyError("connection refused")
        repo = ProductRepository(session)

        with pytest.raises(RepositoryError) as exc_info:
            await repo.find(build_product_query())

        assert exc_info.value.operation == "find"
        assert "connection refused" in exc_info.value.details["reason"]

    async def test_get_errors_are_wrapped(self) -> None:
        """Lookup failures surface as RepositoryError."""
        session = AsyncMock()
        session.get.side_effect = SQLAlchemyError("timeout")
        repo = ProductRepository(session)

        with pytest.raises(RepositoryError) as exc_info:
            await repo.get_by_id("0" * 24)

        assert exc_info.value.error_code == "REPOSITORY_FAILURE"


# ============================================================================
# In-Memory Repository
# ============================================================================


class TestInMemoryProductRepository:
    """Tests for InMemoryProductRepository."""

    @pytest.fixture
    def repo(self) -> InMemoryProductRepository:
        return InMemoryProductRepository()

    async def test_natural_order_is_insertion_order(self, repo: InMemoryProductRepository) -> None:
        """Without ordering products come back as inserted."""
        await _seed(repo)

        products = await repo.find(build_product_query())

        assert [p.name for p in products] == [row[1] for row in ROWS]

    async def test_save_sets_id_and_timestamps(self, repo: InMemoryProductRepository) -> None:
        """Saving assigns ID and timestamps."""
        product = await repo.save(_product("Shoes", "Runner", "49.99"))

        assert is_valid_product_id(product.id)
        assert product.created_at is not None
        assert product.updated_at is not None
        assert await repo.get_by_id(product.id) is product

    async def test_filter_and_sort(self, repo: InMemoryProductRepository) -> None:
        """Category filtering and price ordering combine."""
        await _seed(repo)

        products = await repo.find(build_product_query(category="Shoe", price_sort="highest"))

        assert [p.name for p in products] == ["Trail Blazer", "Runner", "Laces"]

    async def test_equal_prices_keep_insertion_order(self, repo: InMemoryProductRepository) -> None:
        """Ties in price keep their relative order."""
        await _seed(repo, [("Pens", "Blue", "1.00"), ("Pens", "Red", "1.00"), ("Pens", "Gold", "9.00")])

        products = await repo.find(build_product_query(price_sort="lowest"))

        assert [p.name for p in products] == ["Blue", "Red", "Gold"]

    async def test_skip_and_limit(self, repo: InMemoryProductRepository) -> None:
        """Windows slice the filtered, ordered products."""
        await _seed(repo)

        products = await repo.find(ProductQuery(skip=3, limit=9))

        assert [p.name for p in products] == ["Laces", "Headphones"]

    async def test_count_and_delete(self, repo: InMemoryProductRepository) -> None:
        """Count reflects deletions and category filters."""
        saved = await _seed(repo)

        await repo.delete(saved[0])

        assert await repo.count() == 4
        assert await repo.count(build_product_query(category="shoe")) == 2
        assert await repo.get_by_id(saved[0].id) is None

    async def test_clear(self, repo: InMemoryProductRepository) -> None:
        """clear removes every product."""
        await _seed(repo)
        repo.clear()
        assert await repo.count() == 0


def test_memory_repository_singleton() -> None:
    """The shared repository is reused until reset."""
    reset_memory_repository()
    first = get_memory_repository()

    assert get_memory_repository() is first

    reset_memory_repository()
    assert get_memory_repository() is not first
