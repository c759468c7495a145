"""Domain service: Stock Reservation.

Coordinates the cross-aggregate operation of taking stock for every line
of a cart at checkout. It lives in the domain layer because the ordering
and all-or-nothing rules are core business rules, not just orchestration.

Unlike a validate-then-mutate pass over a snapshot, each line goes through
the ledger's conditional decrement, so the check and the write can never
be separated by another checkout. All-or-nothing is provided by the
enclosing unit of work: the first shortfall raises, and the caller's
transaction rolls back every decrement already applied.
"""

from __future__ import annotations

from typing import Iterable

from storefront.domain.exceptions import InsufficientStockError
from storefront.domain.model.cart import CartEntry
from storefront.domain.repository.stock_ledger import StockDecrement, StockLedger


class StockReservationService:

    def __init__(self, ledger: StockLedger) -> None:
        self._ledger = ledger

    def reserve(self, entries: Iterable[CartEntry]) -> list[StockDecrement]:
        """Decrement stock for every entry, in ascending product id order.

        The fixed order means two transactions touching overlapping products
        always acquire row locks in the same sequence and cannot deadlock.

        Raises InsufficientStockError naming the first product that cannot
        be covered. Must be called inside a unit of work that is rolled
        back on error.
        """
        results: list[StockDecrement] = []
        for entry in sorted(entries, key=lambda e: e.product_id):
            outcome = self._ledger.try_decrement(entry.product_id, entry.quantity)
            if not outcome.applied:
                raise InsufficientStockError(
                    product_id=entry.product_id,
                    requested=entry.quantity,
                    available=outcome.available,
                    product_title=entry.title,
                )
            results.append(outcome)
        return results
