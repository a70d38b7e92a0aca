#!/usr/bin/env python3
"""Seed catalog script.

Creates the database tables and fills them with sample categories and
products, each product linked to 2 or 3 categories.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --products 50
"""

import argparse
import asyncio
import random
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from productcategories.application.category_service import CategoryService
from productcategories.application.product_service import ProductService
from productcategories.catalog.unit_of_work import SqlAlchemyUnitOfWork
from productcategories.infrastructure.database import async_session_factory, create_tables

CATEGORY_NAMES = [
    "Electronics",
    "Home",
    "Garden",
    "Toys",
    "Books",
    "Sports",
    "Kitchen",
    "Office",
]

PRODUCT_NOUNS = ["Lamp", "Kettle", "Drone", "Notebook", "Racket", "Planter", "Puzzle", "Chair"]
PRODUCT_ADJECTIVES = ["Compact", "Deluxe", "Smart", "Classic", "Portable", "Eco"]


async def seed(product_count: int, seed_value: int) -> dict[str, int]:
    """Seed categories and products.

    Args:
        product_count: Number of products to create.
        seed_value: Random seed for deterministic output.

    Returns:
        Seeding result with counts.
    """
    rng = random.Random(seed_value)

    async with async_session_factory() as session:
        uow = SqlAlchemyUnitOfWork(session)
        categories = CategoryService(uow)
        products = ProductService(uow)

        category_ids = []
        for name in CATEGORY_NAMES:
            result = await categories.create_category(name)
            if not result.success:
                raise RuntimeError(result.error)
            category_ids.append(result.category.id)

        created = 0
        for _ in range(product_count):
            name = f"{rng.choice(PRODUCT_ADJECTIVES)} {rng.choice(PRODUCT_NOUNS)}"
            linked = rng.sample(category_ids, rng.choice([2, 3]))
            result = await products.create_product(name, linked)
            if not result.success:
                raise RuntimeError(result.error)
            created += 1

    return {"categories_created": len(category_ids), "products_created": created}


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed sample categories and products",
    )
    parser.add_argument(
        "--products",
        type=int,
        default=20,
        help="Number of products to create (default: 20)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)",
    )

    args = parser.parse_args()

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")

    result = await seed(args.products, args.seed)

    print(f"  ✓ Categories: {result['categories_created']}")
    print(f"  ✓ Products: {result['products_created']}")


if __name__ == "__main__":
    asyncio.run(main())
