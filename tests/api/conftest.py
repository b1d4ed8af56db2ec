"""Shared fixtures for API tests."""

from collections.abc import Callable, Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from productlist.api.products import get_product_store
from productlist.catalog.repository import InMemoryProductRepository
from productlist.main import app

CATALOG = [
    {"category": "Shoes", "name": "Runner", "price": 49.99},
    {"category": "Running Shoes", "name": "Trail Blazer", "price": "89.50"},
    {"category": "Books", "name": "Python Handbook", "price": 29},
    {"category": "shoe accessories", "name": "Laces", "price": 4.25},
    {"category": "Electronics", "name": "Headphones", "price": 149.99},
]


@pytest.fixture
def repository() -> InMemoryProductRepository:
    """Create an empty in-memory product repository."""
    return InMemoryProductRepository()


@pytest.fixture
def client(repository: InMemoryProductRepository) -> Iterator[TestClient]:
    """Create test client backed by the in-memory repository."""
    app.dependency_overrides[get_product_store] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded(client: TestClient) -> list[dict[str, Any]]:
    """Create a small mixed catalog through the API, in insertion order."""
    products = []
    for row in CATALOG:
        slug = row["name"].lower().replace(" ", "-")
        response = client.post(
            "/products",
            json={**row, "imageUrl": f"https://images.example.com/{slug}.png"},
        )
        assert response.status_code == 200
        products.append(response.json())
    return products


@pytest.fixture
def make_products(client: TestClient) -> Callable[[int], list[dict[str, Any]]]:
    """Return a helper creating products priced 1.00, 2.00, ... in one category."""

    def create(count: int, category: str = "Gadgets") -> list[dict[str, Any]]:
        products = []
        for i in range(1, count + 1):
            response = client.post(
                "/products",
                json={
                    "category": category,
                    "name": f"Gadget {i}",
                    "price": i,
                    "imageUrl": f"https://images.example.com/gadget-{i}.png",
                },
            )
            assert response.status_code == 200
            products.append(response.json())
        return products

    return create
