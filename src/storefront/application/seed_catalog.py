"""Application service: Seed Catalog.

Loads the demo catalog into an empty store. Runs as a system task, so it
is not role-gated, and it does nothing once any product exists.
"""

from __future__ import annotations

import logging
import uuid

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)

_IMAGE = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=400"

DEMO_CATALOG: list[dict] = [
    {
        "title": "Premium Wireless Headphones",
        "description": "High-quality audio with noise cancellation",
        "price": "299.99",
        "image_url": _IMAGE.format("photo-1505740420928-5e560c06d30e"),
        "category": "electronics",
        "stock": 45,
    },
    {
        "title": "Classic Denim Jacket",
        "description": "Timeless style for any occasion",
        "price": "89.99",
        "image_url": _IMAGE.format("photo-1551028719-00167b16eac5"),
        "category": "clothing",
        "stock": 23,
    },
    {
        "title": "Smart Coffee Maker",
        "description": "Programmable brewing with app control",
        "price": "199.99",
        "image_url": _IMAGE.format("photo-1559056199-641a0ac8b55e"),
        "category": "home",
        "stock": 15,
    },
    {
        "title": "JavaScript Guide",
        "description": "Complete guide to modern JavaScript",
        "price": "49.99",
        "image_url": _IMAGE.format("photo-1544716278-ca5e3f4abd8c"),
        "category": "books",
        "stock": 30,
    },
    {
        "title": "Premium Yoga Mat Set",
        "description": "Eco-friendly with carrying strap",
        "price": "79.99",
        "image_url": _IMAGE.format("photo-1544367567-0f2fcb009e0b"),
        "category": "sports",
        "stock": 20,
    },
    {
        "title": "Latest Smartphone",
        "description": "5G enabled with amazing camera",
        "price": "899.99",
        "image_url": _IMAGE.format("photo-1511707171634-5f897ff02aa9"),
        "category": "electronics",
        "stock": 12,
    },
    {
        "title": "Designer Table Lamp",
        "description": "Minimalist design with warm light",
        "price": "129.99",
        "image_url": _IMAGE.format("photo-1507003211169-0a1dd7228f2d"),
        "category": "home",
        "stock": 8,
    },
    {
        "title": "Performance Running Shoes",
        "description": "Lightweight with superior cushioning",
        "price": "159.99",
        "image_url": _IMAGE.format("photo-1549298916-b41d501d3772"),
        "category": "clothing",
        "stock": 35,
    },
]


class SeedCatalogHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    def handle(self, catalog: list[dict] | None = None) -> int:
        """Insert the catalog if the store has no products; returns how many."""
        catalog = DEMO_CATALOG if catalog is None else catalog

        with self._uow() as uow:
            if uow.products.list_all():
                logger.info("Catalog already populated, skipping seed")
                return 0

            for item in catalog:
                product = Product.create(
                    id=item.get("id") or str(uuid.uuid4()),
                    title=item["title"],
                    price=Money.of(item["price"]),
                    category=item["category"],
                    description=item.get("description", ""),
                    image_url=item.get("image_url"),
                )
                uow.products.save(product)
                uow.stock.set_stock(product.id, int(item.get("stock", 0)))
            uow.commit()

        logger.info("Seeded catalog with %d products", len(catalog))
        return len(catalog)
