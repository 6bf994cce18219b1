# catalog/seed.py
"""Populate the product table with the sample catalogue.

Run with ``python -m catalog.seed``. Existing rows are deleted first, so
running it twice leaves the same data behind (with fresh ids).
"""
import argparse
import asyncio
import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select

from .config import settings
from .database import Store
from .models import Product

logger = logging.getLogger(__name__)

_IMG = "https://images.unsplash.com/photo-{}?w=500"

SEED_PRODUCTS: List[Dict[str, Any]] = [
    # Electronics
    {
        "name": "Wireless Bluetooth Headphones",
        "description": "Premium noise-cancelling headphones with 30-hour battery life. Crystal clear sound quality and comfortable over-ear design.",
        "price": Decimal("89.99"),
        "stock": 45,
        "category": "Electronics",
        "image_url": _IMG.format("1505740420928-5e560c06d30e"),
    },
    {
        "name": "Smart Watch Pro",
        "description": "Advanced fitness tracker with heart rate monitor, GPS, and water resistance. Compatible with iOS and Android.",
        "price": Decimal("249.99"),
        "stock": 28,
        "category": "Electronics",
        "image_url": _IMG.format("1523275335684-37898b6baf30"),
    },
    {
        "name": "Portable Bluetooth Speaker",
        "description": "360-degree sound with deep bass. Waterproof design perfect for outdoor adventures. 12-hour battery life.",
        "price": Decimal("59.99"),
        "stock": 67,
        "category": "Electronics",
        "image_url": _IMG.format("1608043152269-423dbba4e7e1"),
    },
    {
        "name": "Wireless Gaming Mouse",
        "description": "High-precision gaming mouse with customizable RGB lighting and programmable buttons. Up to 16,000 DPI.",
        "price": Decimal("79.99"),
        "stock": 52,
        "category": "Electronics",
        "image_url": _IMG.format("1527814050087-3793815479db"),
    },
    # Fashion
    {
        "name": "Classic Denim Jacket",
        "description": "Timeless denim jacket with a modern fit. Made from premium cotton for durability and comfort.",
        "price": Decimal("79.99"),
        "stock": 35,
        "category": "Fashion",
        "image_url": _IMG.format("1576995853123-5a10305d93c0"),
    },
    {
        "name": "Leather Crossbody Bag",
        "description": "Elegant genuine leather bag with adjustable strap. Multiple compartments for organization.",
        "price": Decimal("129.99"),
        "stock": 22,
        "category": "Fashion",
        "image_url": _IMG.format("1548036328-c9fa89d128fa"),
    },
    {
        "name": "Premium Running Shoes",
        "description": "Lightweight athletic shoes with advanced cushioning technology. Perfect for running and everyday wear.",
        "price": Decimal("119.99"),
        "stock": 41,
        "category": "Fashion",
        "image_url": _IMG.format("1542291026-7eec264c27ff"),
    },
    # Home & Living
    {
        "name": "Minimalist Table Lamp",
        "description": "Modern LED desk lamp with adjustable brightness and color temperature. Perfect for reading and working.",
        "price": Decimal("45.99"),
        "stock": 58,
        "category": "Home & Living",
        "image_url": _IMG.format("1507473885765-e6ed057f782c"),
    },
    {
        "name": "Ceramic Coffee Mug Set",
        "description": "Set of 4 handcrafted ceramic mugs. Microwave and dishwasher safe. Each holds 12 oz.",
        "price": Decimal("34.99"),
        "stock": 73,
        "category": "Home & Living",
        "image_url": _IMG.format("1514228742587-6b1558fcca3d"),
    },
    {
        "name": "Aromatherapy Diffuser",
        "description": "Ultrasonic essential oil diffuser with 7-color LED lights. Whisper-quiet operation for better sleep.",
        "price": Decimal("39.99"),
        "stock": 64,
        "category": "Home & Living",
        "image_url": _IMG.format("1608571423902-eed4a5ad8108"),
    },
    # Books
    {
        "name": "The Midnight Library",
        "description": "Bestselling fiction novel about life, regret, and infinite possibilities. Perfect for book club discussions.",
        "price": Decimal("16.99"),
        "stock": 88,
        "category": "Books",
        "image_url": _IMG.format("1544947950-fa07a98d237f"),
    },
    {
        "name": "Atomic Habits",
        "description": "Practical strategies for forming good habits and breaking bad ones. A guide to building better systems.",
        "price": Decimal("18.99"),
        "stock": 92,
        "category": "Books",
        "image_url": _IMG.format("1589829085413-56de8ae18c73"),
    },
    # Sports
    {
        "name": "Yoga Mat with Carrying Strap",
        "description": "Non-slip exercise mat made from eco-friendly materials. Extra thick for comfort during workouts.",
        "price": Decimal("29.99"),
        "stock": 76,
        "category": "Sports",
        "image_url": _IMG.format("1601925260368-ae2f83cf8b7f"),
    },
    {
        "name": "Stainless Steel Water Bottle",
        "description": "Insulated 32oz bottle keeps drinks cold for 24 hours or hot for 12 hours. BPA-free and leak-proof.",
        "price": Decimal("24.99"),
        "stock": 103,
        "category": "Sports",
        "image_url": _IMG.format("1602143407151-7111542de6e8"),
    },
    {
        "name": "Resistance Bands Set",
        "description": "Set of 5 resistance bands with different tension levels. Includes carrying bag and exercise guide.",
        "price": Decimal("19.99"),
        "stock": 85,
        "category": "Sports",
        "image_url": _IMG.format("1598289431512-b97b0917affc"),
    },
    # Out of stock, still listed
    {
        "name": "Limited Edition Sneakers",
        "description": "Rare collectible sneakers. Check back soon for restocking information.",
        "price": Decimal("199.99"),
        "stock": 0,
        "category": "Fashion",
        "image_url": _IMG.format("1549298916-b41d501d3772"),
    },
    # Inactive, hidden from the default listing
    {
        "name": "Old Model Phone Case",
        "description": "Discontinued product - no longer available.",
        "price": Decimal("9.99"),
        "stock": 15,
        "category": "Electronics",
        "image_url": _IMG.format("1601593346740-925612772716"),
        "is_active": False,
    },
]


async def seed_products(store: Store, products: Optional[List[Dict[str, Any]]] = None) -> int:
    """Replace every row of the product table with ``products``.

    Returns the number of inserted rows.
    """
    rows = SEED_PRODUCTS if products is None else products
    await store.create_all()
    async with store.session() as session:
        async with session.begin():
            result = await session.execute(delete(Product))
            logger.info("Cleared %s existing products", result.rowcount)
            session.add_all([Product(**row) for row in rows])
    logger.info("Created %s products", len(rows))
    return len(rows)


async def active_counts_by_category(store: Store) -> Dict[Optional[str], int]:
    query = (
        select(Product.category, func.count(Product.id))
        .where(Product.is_active == True)  # noqa: E712
        .group_by(Product.category)
        .order_by(Product.category)
    )
    async with store.session() as session:
        result = await session.execute(query)
        return {category: count for category, count in result.all()}


async def _run(database_url: Optional[str]) -> None:
    store = Store(database_url)
    try:
        await seed_products(store)
        for category, count in (await active_counts_by_category(store)).items():
            logger.info("  %s: %s products", category, count)
    finally:
        await store.dispose()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the product catalog")
    parser.add_argument("--database-url", default=None, help="Defaults to $DATABASE_URL")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(message)s")
    asyncio.run(_run(args.database_url))


if __name__ == "__main__":
    main()
