#!/usr/bin/env python3
"""Seed the catalog with sample nursery data.

Creates:
- Plant categories
- Sample products that reference categories by name

Seed script is idempotent (skips categories/products that already exist
by name/title).

Usage:
    python -m scripts.seed
"""

import asyncio
import os
import sys

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pymongo.asynchronous.collection import AsyncCollection

from app.stores.mongo import (
    categories_collection,
    close_mongo,
    init_mongo,
    ping_mongo,
    products_collection,
)

# ============================================================
# Category Definitions
# ============================================================

CATEGORIES = [
    {"name": "Indoor Plants", "image": "https://i.ibb.co/indoor-plants.jpg"},
    {"name": "Succulents", "image": "https://i.ibb.co/succulents.jpg"},
    {"name": "Flowering Plants", "image": "https://i.ibb.co/flowering.jpg"},
    {"name": "Herbs", "image": "https://i.ibb.co/herbs.jpg"},
]

# ============================================================
# Product Definitions
# ============================================================

PRODUCTS = [
    {
        "title": "Monstera Deliciosa",
        "category": "Indoor Plants",
        "price": 34.99,
        "quantity": 25,
        "rating": 4.8,
        "description": "Split-leaf philodendron, thrives in bright indirect light.",
    },
    {
        "title": "Snake Plant",
        "category": "Indoor Plants",
        "price": 19.5,
        "quantity": 40,
        "rating": 4.6,
        "description": "Low-maintenance air purifier, tolerates low light.",
    },
    {
        "title": "Echeveria Elegans",
        "category": "Succulents",
        "price": 8.0,
        "quantity": 60,
        "rating": 4.4,
        "description": "Mexican snowball rosette, water sparingly.",
    },
    {
        "title": "Red Rose",
        "category": "Flowering Plants",
        "price": 12.25,
        "quantity": 30,
        "rating": 4.7,
        "description": "Classic garden rose, full sun.",
    },
    {
        "title": "Sweet Basil",
        "category": "Herbs",
        "price": 4.5,
        "quantity": 80,
        "rating": 4.5,
        "description": "Kitchen herb, pinch flowers to keep leaves coming.",
    },
]


async def seed_database() -> None:
    """Seed database with initial data."""
    await init_mongo()
    try:
        await ping_mongo()
        print("🌱 Seeding database...")

        print("\n🗂️  Creating Categories...")
        await _seed_collection(categories_collection(), CATEGORIES, key="name")

        print("\n🪴 Creating Products...")
        await _seed_collection(products_collection(), PRODUCTS, key="title")

        print("\n✅ Database seeded successfully!")
    finally:
        await close_mongo()


async def _seed_collection(
    collection: AsyncCollection,
    documents: list[dict],
    key: str,
) -> None:
    """Insert documents whose `key` value is not already present."""
    for doc in documents:
        existing = await collection.find_one({key: doc[key]})
        if existing:
            print(f"  ⏭️  {doc[key]} (exists)")
            continue
        result = await collection.insert_one(dict(doc))
        print(f"  ✅ {doc[key]} ({result.inserted_id})")


if __name__ == "__main__":
    asyncio.run(seed_database())
