"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Persist a new order with its lines; returns it with its ID set."""

    @abstractmethod
    def list_for_customer(self, customer_id: str) -> list[Order]:
        """Return the customer's orders, newest first."""
