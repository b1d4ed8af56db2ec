"""Sample product catalog generator with deterministic seeding.

Generates products for local development and demos. Uses seeded
random for reproducibility.
"""

import random
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from productlist.catalog.fields import normalize_price
from productlist.catalog.models import Product


# ============================================================================
# Constants
# ============================================================================

# Synthetic brand names (fictional companies)
BRANDS = [
    "Acme",
    "Contoso",
    "Northwind",
    "Fabrikam",
    "Tailwind",
    "Globex",
    "Initech",
]

ADJECTIVES = [
    "Premium", "Elite", "Pro", "Ultra", "Classic",
    "Essential", "Smart", "Flex", "Prime", "Nova",
]

# Category -> (min price, max price, name templates)
CATEGORIES: dict[str, tuple[Decimal, Decimal, list[str]]] = {
    "Shoes": (Decimal("29.99"), Decimal("249.99"), ["{brand} {adj} Sneakers", "{brand} Running {adj}"]),
    "Electronics": (Decimal("19.99"), Decimal("1999.99"), ["{brand} {adj} Headphones", "{brand} Smart {adj} Speaker"]),
    "Clothing": (Decimal("9.99"), Decimal("149.99"), ["{brand} {adj} T-Shirt", "{brand} Cotton {adj} Hoodie"]),
    "Home": (Decimal("14.99"), Decimal("499.99"), ["{brand} {adj} Desk Lamp", "{brand} {adj} Coffee Maker"]),
    "Toys": (Decimal("4.99"), Decimal("89.99"), ["{brand} {adj} Board Game", "{brand} Kids {adj} Playset"]),
    "Books": (Decimal("7.99"), Decimal("49.99"), ["The {adj} Guide by {brand}", "{brand}'s {adj} Handbook"]),
}

IMAGE_URL_TEMPLATE = "https://images.example.com/products/{slug}.png"


# ============================================================================
# Generator Configuration
# ============================================================================


@dataclass
class GeneratorConfig:
    """Configuration for product generation.

    Attributes:
        seed: Random seed for reproducibility.
        products_per_category: Number of products per category.
    """

    seed: int = 42
    products_per_category: int = 10

    @classmethod
    def small(cls) -> "GeneratorConfig":
        """Create config for a small catalog (~30 products)."""
        return cls(seed=42, products_per_category=5)

    @classmethod
    def full(cls) -> "GeneratorConfig":
        """Create config for a full catalog (~120 products)."""
        return cls(seed=42, products_per_category=20)


# ============================================================================
# Product Generator
# ============================================================================


class ProductGenerator:
    """Generates sample products with deterministic seeding.

    Example usage:
        generator = ProductGenerator(GeneratorConfig.small())
        for product in generator.generate():
            print(product.name, product.price)
    """

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config
        self.rng = random.Random(config.seed)

    def _price(self, low: Decimal, high: Decimal) -> Decimal:
        cents = self.rng.randint(int(low * 100), int(high * 100))
        return normalize_price(Decimal(cents) / 100)

    def _name(self, templates: list[str]) -> str:
        template = self.rng.choice(templates)
        return template.format(
            brand=self.rng.choice(BRANDS),
            adj=self.rng.choice(ADJECTIVES),
        )

    def generate(self) -> Iterator[Product]:
        """Generate products category by category.

        Yields:
            Unsaved products without IDs.
        """
        for category, (low, high, templates) in CATEGORIES.items():
            for _ in range(self.config.products_per_category):
                name = self._name(templates)
                slug = "-".join(name.lower().replace("'", "").split())
                yield Product(
                    category=category,
                    name=name,
                    price=self._price(low, high),
                    image=IMAGE_URL_TEMPLATE.format(slug=slug),
                )

    def generate_list(self) -> list[Product]:
        """Generate all products as a list."""
        return list(self.generate())
