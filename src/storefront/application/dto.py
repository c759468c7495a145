"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the application layer and its callers (the HTTP
API and the CLI) without exposing domain internals to the outside world.
Monetary values are Decimals rounded to cents.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from storefront.domain.model.cart import CartEntry, CartLine
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    id: str
    title: str
    description: str
    price: Decimal
    category: str
    image_url: str | None
    stock: int
    created_at: datetime


@dataclass(frozen=True)
class StockLevelDTO:
    product_id: str
    title: str
    available: int


@dataclass(frozen=True)
class CartLineDTO:
    """Output: the stored state of one cart line after a mutation."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class CartEntryDTO:
    """Output: a cart line joined with current product data."""

    product_id: str
    title: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal
    image_url: str | None
    stock: int


@dataclass(frozen=True)
class CartDTO:
    customer_id: str
    items: list[CartEntryDTO]
    subtotal: Decimal

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    product_title: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class ShippingDTO:
    first_name: str
    last_name: str
    email: str
    address: str
    city: str
    state: str
    zip_code: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as returned to the customer."""

    id: int
    customer_id: str
    shipping: ShippingDTO
    lines: list[OrderLineDTO]
    total: Decimal
    created_at: datetime


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product, stock: int | None) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        title=product.title,
        description=product.description,
        price=product.price.rounded,
        category=product.category.value,
        image_url=product.image_url,
        stock=stock or 0,
        created_at=product.created_at,
    )


def cart_line_to_dto(line: CartLine) -> CartLineDTO:
    return CartLineDTO(product_id=line.product_id, quantity=line.quantity)


def cart_to_dto(customer_id: str, entries: list[CartEntry]) -> CartDTO:
    items = [
        CartEntryDTO(
            product_id=e.product_id,
            title=e.title,
            quantity=e.quantity,
            unit_price=e.unit_price.rounded,
            line_total=e.line_total.rounded,
            image_url=e.image_url,
            stock=e.stock,
        )
        for e in entries
    ]
    subtotal = sum((i.line_total for i in items), Decimal("0.00"))
    return CartDTO(customer_id=customer_id, items=items, subtotal=subtotal)


def order_to_dto(order: Order) -> OrderDTO:
    s = order.shipping
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_id=order.customer_id,
        shipping=ShippingDTO(
            first_name=s.first_name,
            last_name=s.last_name,
            email=s.email,
            address=s.address,
            city=s.city,
            state=s.state,
            zip_code=s.zip_code,
        ),
        lines=[
            OrderLineDTO(
                product_id=line.product_id,
                product_title=line.product_title,
                quantity=line.quantity.value,
                unit_price=line.unit_price.rounded,
                line_total=line.line_total.rounded,
            )
            for line in order.lines
        ],
        total=order.total.rounded,
        created_at=order.created_at,
    )
