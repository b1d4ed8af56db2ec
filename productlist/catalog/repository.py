"""Product repositories.

``ProductRepository`` executes product queries against the database.
``InMemoryProductRepository`` implements the same contract in-process
for local runs without a database.
"""

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Protocol

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from productlist.catalog.identifiers import new_product_id
from productlist.catalog.models import Product
from productlist.catalog.query import ProductQuery
from productlist.domain.exceptions import RepositoryError


class ProductStore(Protocol):
    """Operations the catalog service needs from a product store."""

    async def find(self, query: ProductQuery) -> Sequence[Product]: ...

    async def count(self, query: ProductQuery | None = None) -> int: ...

    async def get_by_id(self, product_id: str) -> Product | None: ...

    async def save(self, product: Product) -> Product: ...

    async def delete(self, product: Product) -> None: ...

    async def commit(self) -> None: ...


class ProductRepository:
    """Repository for Product database operations.

    Handles all database interactions for products including
    filtering, sorting, and pagination. Store errors are raised as
    ``RepositoryError``.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products = await repo.find(
                build_product_query(category="shoe", price_sort="lowest"),
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def find(self, query: ProductQuery) -> Sequence[Product]:
        """Find products matching a query descriptor.

        Args:
            query: Category filter, price ordering and window.

        Returns:
            Sequence of matching products.
        """
        statement = self._apply_filters(select(Product), query)

        # Sorting
        if query.price_sort is not None:
            if query.price_sort.descending:
                statement = statement.order_by(Product.price.desc())
            else:
                statement = statement.order_by(Product.price.asc())

        # Pagination
        statement = statement.offset(query.skip).limit(query.limit)

        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            raise RepositoryError("find", str(e)) from e
        return result.scalars().all()

    async def count(self, query: ProductQuery | None = None) -> int:
        """Count products matching a query's category filter.

        Args:
            query: Optional query; pagination and ordering are ignored.

        Returns:
            Count of matching products.
        """
        statement = select(func.count(Product.id))
        if query is not None:
            statement = self._apply_filters(statement, query)

        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            raise RepositoryError("count", str(e)) from e
        return result.scalar_one()

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        try:
            return await self.session.get(Product, product_id)
        except SQLAlchemyError as e:
            raise RepositoryError("get_by_id", str(e)) from e

    async def save(self, product: Product) -> Product:
        """Save a product to database, assigning its ID.

        Args:
            product: Product to save.

        Returns:
            Saved product.
        """
        if product.id is None:
            product.id = new_product_id()
        self.session.add(product)
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            raise RepositoryError("save", str(e)) from e
        return product

    async def delete(self, product: Product) -> None:
        """Delete a product.

        Args:
            product: Product to delete.
        """
        try:
            await self.session.delete(product)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise RepositoryError("delete", str(e)) from e

    async def commit(self) -> None:
        """Commit pending changes."""
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            raise RepositoryError("commit", str(e)) from e

    def _apply_filters(self, statement: Select, query: ProductQuery) -> Select:
        """Add the query's category constraint to a statement."""
        if query.category is not None:
            statement = statement.where(
                Product.category.icontains(query.category, autoescape=True)
            )
        return statement


class InMemoryProductRepository:
    """In-memory repository for products.

    Keeps products in insertion order, which is the natural order used
    when a query has no price ordering.
    """

    def __init__(self) -> None:
        self._products: dict[str, Product] = {}

    async def find(self, query: ProductQuery) -> Sequence[Product]:
        """Find products matching a query descriptor."""
        products = [p for p in self._products.values() if query.matches_category(p.category)]

        if query.price_sort is not None:
            products.sort(key=lambda p: p.price, reverse=query.price_sort.descending)

        return products[query.skip : query.skip + query.limit]

    async def count(self, query: ProductQuery | None = None) -> int:
        """Count products matching a query's category filter."""
        if query is None:
            return len(self._products)
        return sum(1 for p in self._products.values() if query.matches_category(p.category))

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID."""
        return self._products.get(product_id)

    async def save(self, product: Product) -> Product:
        """Save a product, assigning its ID and timestamps."""
        if product.id is None:
            product.id = new_product_id()
        now = datetime.now(timezone.utc)
        if product.created_at is None:
            product.created_at = now
        product.updated_at = now
        self._products[product.id] = product
        return product

    async def delete(self, product: Product) -> None:
        """Delete a product."""
        self._products.pop(product.id, None)

    async def commit(self) -> None:
        """Nothing to commit; writes are applied immediately."""

    def clear(self) -> None:
        """Remove all products."""
        self._products.clear()


# Global in-memory repository instance
_memory_repo: InMemoryProductRepository | None = None


def get_memory_repository() -> InMemoryProductRepository:
    """Get in-memory product repository singleton."""
    global _memory_repo
    if _memory_repo is None:
        _memory_repo = InMemoryProductRepository()
    return _memory_repo


def reset_memory_repository() -> None:
    """Reset in-memory product repository (for testing)."""
    global _memory_repo
    _memory_repo = InMemoryProductRepository()
