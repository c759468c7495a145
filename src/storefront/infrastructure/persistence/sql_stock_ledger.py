"""SQLAlchemy-backed implementation of StockLedger.

The decrement is a single conditional UPDATE. The database evaluates the
``available >= amount`` predicate and applies the write under the same row
lock, so there is no window between checking and writing for another
transaction to slip into.
"""

from __future__ import annotations

from sqlalchemy import delete, insert, select, update
from sqlalchemy.orm import Session

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.repository.stock_ledger import StockDecrement, StockLedger
from storefront.infrastructure.persistence.tables import StockLevelRow


class SqlStockLedger(StockLedger):

    def __init__(self, session: Session) -> None:
        self._session = session

    def try_decrement(self, product_id: str, amount: int) -> StockDecrement:
        if amount <= 0:
            raise ValidationError("Decrement amount must be positive")

        result = self._session.execute(
            update(StockLevelRow)
            .where(
                StockLevelRow.product_id == product_id,
                StockLevelRow.available >= amount,
            )
            .values(available=StockLevelRow.available - amount),
            execution_options={"synchronize_session": False},
        )
        applied = result.rowcount == 1

        available = self.current_stock(product_id)
        if available is None:
            raise EntityNotFoundError(f"No stock record for product '{product_id}'")
        return StockDecrement(
            product_id=product_id,
            requested=amount,
            available=available,
            applied=applied,
        )

    def current_stock(self, product_id: str) -> int | None:
        return self._session.execute(
            select(StockLevelRow.available).where(StockLevelRow.product_id == product_id)
        ).scalar_one_or_none()

    def levels(self) -> dict[str, int]:
        rows = self._session.execute(select(StockLevelRow.product_id, StockLevelRow.available))
        return {product_id: available for product_id, available in rows}

    def set_stock(self, product_id: str, available: int) -> None:
        if available < 0:
            raise ValidationError("Stock cannot be negative")
        result = self._session.execute(
            update(StockLevelRow)
            .where(StockLevelRow.product_id == product_id)
            .values(available=available),
            execution_options={"synchronize_session": False},
        )
        if result.rowcount == 0:
            self._session.execute(
                insert(StockLevelRow).values(product_id=product_id, available=available)
            )

    def remove(self, product_id: str) -> None:
        self._session.execute(
            delete(StockLevelRow).where(StockLevelRow.product_id == product_id),
            execution_options={"synchronize_session": False},
        )
