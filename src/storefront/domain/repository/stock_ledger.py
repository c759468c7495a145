"""Abstract stock ledger: the authoritative available quantity per product."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class StockDecrement:
    """Outcome of a conditional decrement.

    ``available`` is the level after the decrement when ``applied`` is
    True, otherwise the unchanged level that was too low.
    """

    product_id: str
    requested: int
    available: int
    applied: bool

    @property
    def shortfall(self) -> int:
        return 0 if self.applied else self.requested - self.available


class StockLedger(ABC):

    @abstractmethod
    def try_decrement(self, product_id: str, amount: int) -> StockDecrement:
        """Decrement ``available`` by ``amount`` only if ``available >= amount``.

        Implementations must evaluate and apply the condition as one
        indivisible step against the store of record. Raises
        EntityNotFoundError when the product has no stock record.
        """

    @abstractmethod
    def current_stock(self, product_id: str) -> int | None:
        """Advisory read of the current level, or None for unknown products."""

    @abstractmethod
    def levels(self) -> dict[str, int]:
        """Advisory snapshot of every stock record."""

    @abstractmethod
    def set_stock(self, product_id: str, available: int) -> None:
        """Overwrite the level for a product (administrative restock)."""

    @abstractmethod
    def remove(self, product_id: str) -> None:
        """Drop the stock record of a deleted product."""
