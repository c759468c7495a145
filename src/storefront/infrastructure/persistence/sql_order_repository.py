"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.domain.model.order import Order, OrderLine, ShippingDetails
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.tables import OrderItemRow, OrderRow


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> Order:
        row = self._to_row(order)
        self._session.add(row)
        self._session.flush()
        return order.with_id(row.id)

    def list_for_customer(self, customer_id: str) -> list[Order]:
        stmt = (
            select(OrderRow)
            .where(OrderRow.customer_id == customer_id)
            .order_by(OrderRow.created_at.desc(), OrderRow.id.desc())
        )
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_row(order: Order) -> OrderRow:
        s = order.shipping
        return OrderRow(
            customer_id=order.customer_id,
            first_name=s.first_name,
            last_name=s.last_name,
            email=s.email,
            address=s.address,
            city=s.city,
            state=s.state,
            zip_code=s.zip_code,
            total=order.total.rounded,
            created_at=order.created_at,
            items=[
                OrderItemRow(
                    position=i,
                    product_id=line.product_id,
                    product_title=line.product_title,
                    quantity=line.quantity.value,
                    price=line.unit_price.rounded,
                )
                for i, line in enumerate(order.lines)
            ],
        )

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        created_at = row.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Order(
            id=row.id,
            customer_id=row.customer_id,
            shipping=ShippingDetails(
                first_name=row.first_name,
                last_name=row.last_name,
                email=row.email,
                address=row.address,
                city=row.city,
                state=row.state,
                zip_code=row.zip_code,
            ),
            lines=tuple(
                OrderLine(
                    product_id=item.product_id,
                    product_title=item.product_title,
                    quantity=Quantity(item.quantity),
                    unit_price=Money.of(item.price),
                )
                for item in row.items
            ),
            created_at=created_at,
        )
