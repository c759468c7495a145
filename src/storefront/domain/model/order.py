"""Order aggregate.

An Order is a historical fact: it is created once, together with its
lines, by the checkout transaction and never mutated afterwards.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+$")


@dataclass(frozen=True)
class ShippingDetails:
    """Where the order goes. Every field is required."""

    first_name: str
    last_name: str
    email: str
    address: str
    city: str
    state: str
    zip_code: str

    @staticmethod
    def create(**values: str) -> ShippingDetails:
        cleaned: dict[str, str] = {}
        missing: list[str] = []
        for f in fields(ShippingDetails):
            raw = values.get(f.name)
            if raw is None or not str(raw).strip():
                missing.append(f.name)
                continue
            cleaned[f.name] = str(raw).strip()
        if missing:
            raise ValidationError(
                f"Missing required shipping fields: {', '.join(missing)}"
            )
        if not _EMAIL_RE.match(cleaned["email"]):
            raise ValidationError(f"Invalid email address: {cleaned['email']!r}")
        return ShippingDetails(**cleaned)


@dataclass(frozen=True)
class OrderLine:
    """Captures the price snapshot of a product at checkout time."""

    product_id: str
    product_title: str
    quantity: Quantity
    unit_price: Money  # locked at checkout time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules. The plain constructor lets the repository reconstitute
    persisted orders without re-validating.
    """

    id: int | None
    customer_id: str
    shipping: ShippingDetails
    lines: tuple[OrderLine, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        customer_id: str,
        shipping: ShippingDetails,
        lines: list[OrderLine],
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer id is required")

        if not lines:
            raise ValidationError("Order must contain at least one line")

        seen: set[str] = set()
        for line in lines:
            if line.product_id in seen:
                raise ValidationError(
                    f"Product '{line.product_id}' appears more than once"
                )
            seen.add(line.product_id)

        return Order(
            id=None,
            customer_id=customer_id,
            shipping=shipping,
            lines=tuple(lines),
        )

    def with_id(self, order_id: int) -> Order:
        """Return the same order carrying its store-assigned identity."""
        return replace(self, id=order_id)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)
