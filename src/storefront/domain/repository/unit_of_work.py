"""Abstract unit of work: one transaction against the store of record.

Every repository reached through a unit of work shares its transaction.
Leaving the ``with`` block without calling ``commit()`` rolls everything
back, whichever way the block exits.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.stock_ledger import StockLedger


class UnitOfWork(ABC):

    products: ProductRepository
    stock: StockLedger
    carts: CartRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every change in this unit durable at once."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted change in this unit."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
