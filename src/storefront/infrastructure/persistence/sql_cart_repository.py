"""SQLAlchemy-backed implementation of CartRepository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from storefront.domain.model.cart import CartEntry, CartLine
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.tables import (
    CartItemRow,
    ProductRow,
    StockLevelRow,
)


class SqlCartRepository(CartRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- CartRepository interface ---------------------------------------------

    def get_line(self, customer_id: str, product_id: str) -> CartLine | None:
        row = self._find(customer_id, product_id)
        if row is None:
            return None
        return CartLine(customer_id=customer_id, product_id=product_id, quantity=row.quantity)

    def set_quantity(self, customer_id: str, product_id: str, quantity: int) -> CartLine:
        row = self._find(customer_id, product_id)
        if row is None:
            row = CartItemRow(
                customer_id=customer_id,
                product_id=product_id,
                quantity=quantity,
                created_at=datetime.now(timezone.utc),
            )
            self._session.add(row)
        else:
            row.quantity = quantity
        # surface a concurrent duplicate insert inside the unit of work
        self._session.flush()
        return CartLine(customer_id=customer_id, product_id=product_id, quantity=quantity)

    def remove(self, customer_id: str, product_id: str) -> bool:
        result = self._session.execute(
            delete(CartItemRow).where(
                CartItemRow.customer_id == customer_id,
                CartItemRow.product_id == product_id,
            ),
            execution_options={"synchronize_session": "fetch"},
        )
        return result.rowcount > 0

    def clear(self, customer_id: str) -> int:
        result = self._session.execute(
            delete(CartItemRow).where(CartItemRow.customer_id == customer_id),
            execution_options={"synchronize_session": "fetch"},
        )
        return result.rowcount

    def list_entries(self, customer_id: str, lock: bool = False) -> list[CartEntry]:
        stmt = (
            select(
                CartItemRow.product_id,
                CartItemRow.quantity,
                ProductRow.title,
                ProductRow.price,
                ProductRow.image_url,
                func.coalesce(StockLevelRow.available, 0),
            )
            .join(ProductRow, ProductRow.id == CartItemRow.product_id)
            .outerjoin(StockLevelRow, StockLevelRow.product_id == CartItemRow.product_id)
            .where(CartItemRow.customer_id == customer_id)
            .order_by(CartItemRow.product_id)
        )
        if lock:
            stmt = stmt.with_for_update(of=ProductRow)

        return [
            CartEntry(
                product_id=product_id,
                quantity=quantity,
                title=title,
                unit_price=Money.of(price),
                image_url=image_url,
                stock=stock,
            )
            for product_id, quantity, title, price, image_url, stock in self._session.execute(stmt)
        ]

    # --- Helpers --------------------------------------------------------------

    def _find(self, customer_id: str, product_id: str) -> CartItemRow | None:
        stmt = (
            select(CartItemRow)
            .where(
                CartItemRow.customer_id == customer_id,
                CartItemRow.product_id == product_id,
            )
            .with_for_update()
        )
        return self._session.scalars(stmt).first()
