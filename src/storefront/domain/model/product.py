"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog. Stock is
NOT part of the product; it lives in the stock ledger.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

# fits the NUMERIC(10, 2) price column
MAX_PRICE = Decimal("99999999.99")


class Category(Enum):
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    HOME = "home"
    BOOKS = "books"
    SPORTS = "sports"

    @staticmethod
    def parse(value: str | Category) -> Category:
        if isinstance(value, Category):
            return value
        try:
            return Category(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(c.value for c in Category)
            raise ValidationError(
                f"Unknown category '{value}'. Expected one of: {allowed}"
            ) from None


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because administrator edits are a
    legitimate mutation on the aggregate.
    """

    id: str
    title: str
    price: Money
    category: Category
    description: str = ""
    image_url: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        id: str,
        title: str,
        price: Money,
        category: Category | str,
        description: str = "",
        image_url: str | None = None,
    ) -> Product:
        """Create a new catalog entry, enforcing all invariants."""
        product = Product(
            id=id,
            title=_require_title(title),
            price=_require_positive(price),
            category=Category.parse(category),
            description=(description or "").strip(),
            image_url=image_url or None,
        )
        return product

    def update(
        self,
        title: str | None = None,
        description: str | None = None,
        price: Money | None = None,
        category: Category | str | None = None,
        image_url: str | None = None,
    ) -> None:
        """Apply a partial edit.

        A price change does NOT affect any existing orders because orders
        capture a price snapshot at checkout time.
        """
        if title is not None:
            self.title = _require_title(title)
        if description is not None:
            self.description = description.strip()
        if price is not None:
            self.price = _require_positive(price)
        if category is not None:
            self.category = Category.parse(category)
        if image_url is not None:
            self.image_url = image_url or None


def _require_title(title: str) -> str:
    if not title or not title.strip():
        raise ValidationError("Product title is required")
    return title.strip()


def _require_positive(price: Money) -> Money:
    if price.amount <= 0:
        raise ValidationError("Product price must be greater than zero")
    if price.amount > MAX_PRICE:
        raise ValidationError(f"Product price cannot exceed {MAX_PRICE}")
    return price


def require_product_id(product_id: str | None) -> str:
    """Reject blank product references before any store is consulted."""
    if product_id is None or not str(product_id).strip():
        raise ValidationError("Product id is required")
    return str(product_id).strip()
