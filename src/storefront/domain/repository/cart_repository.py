"""Abstract repository for per-customer cart lines."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import CartEntry, CartLine


class CartRepository(ABC):

    @abstractmethod
    def get_line(self, customer_id: str, product_id: str) -> CartLine | None:
        """Return the customer's line for a product, locking it for update."""

    @abstractmethod
    def set_quantity(self, customer_id: str, product_id: str, quantity: int) -> CartLine:
        """Insert or replace the line. ``quantity`` is always positive."""

    @abstractmethod
    def remove(self, customer_id: str, product_id: str) -> bool:
        """Delete the line. Returns False if it was not present."""

    @abstractmethod
    def clear(self, customer_id: str) -> int:
        """Delete every line of the customer's cart; returns how many."""

    @abstractmethod
    def list_entries(self, customer_id: str, lock: bool = False) -> list[CartEntry]:
        """Return the cart joined with product data, ordered by product id.

        With ``lock`` the joined product rows are locked for the rest of the
        transaction so the prices read cannot change underneath checkout.
        """
