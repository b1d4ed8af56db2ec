#!/usr/bin/env python3
"""Seed product catalog script.

Creates the products table if needed and inserts a deterministic
sample catalog.

Usage:
    python scripts/seed_catalog.py --mode small
    python scripts/seed_catalog.py --mode full --seed 7
"""

import argparse
import asyncio
from collections import Counter

from productlist.catalog.generator import GeneratorConfig, ProductGenerator
from productlist.catalog.repository import ProductRepository
from productlist.infrastructure.database import async_session_factory, create_tables, engine


async def seed(config: GeneratorConfig) -> Counter:
    """Generate and store a sample catalog.

    Args:
        config: Generator configuration.

    Returns:
        Number of products created per category.
    """
    products = ProductGenerator(config).generate_list()

    async with async_session_factory() as session:
        repository = ProductRepository(session)
        for product in products:
            await repository.save(product)
        await repository.commit()

    return Counter(product.category for product in products)


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog with sample products",
    )
    parser.add_argument(
        "--mode",
        choices=["small", "full"],
        default="small",
        help="Catalog size: small (~30 products) or full (~120 products)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: 42)",
    )

    args = parser.parse_args()

    config = GeneratorConfig.full() if args.mode == "full" else GeneratorConfig.small()
    if args.seed is not None:
        config.seed = args.seed

    print("=" * 60)
    print("Product Catalog Seeder")
    print("=" * 60)
    print(f"Mode: {args.mode}")
    print(f"Seed: {config.seed}")
    print()

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    try:
        counts = await seed(config)
    finally:
        await engine.dispose()

    for category, count in sorted(counts.items()):
        print(f"  ✓ {category}: {count} products")
    print()
    print("=" * 60)
    print(f"Seeding complete! {sum(counts.values())} products created.")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
