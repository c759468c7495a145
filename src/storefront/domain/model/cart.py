"""Cart read models.

The cart itself has no aggregate object: it is a set of (customer, product,
quantity) rows owned by the cart repository. These types are what the
repository hands back.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartLine:
    """A single staged (product, quantity) pair for one customer."""

    customer_id: str
    product_id: str
    quantity: int


@dataclass(frozen=True)
class CartEntry:
    """A cart line joined with the product data current at read time.

    ``unit_price`` is the live catalog price; checkout snapshots it into
    the order line.
    """

    product_id: str
    quantity: int
    title: str
    unit_price: Money
    image_url: str | None
    stock: int

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity
