"""Application service: Place Order use case (checkout).

This is the only code path that durably takes stock out of the ledger.
One attempt runs entirely inside one unit of work:

1. snapshot the cart joined with live product data (prices pinned),
2. decrement stock for every line via the reservation domain service,
3. persist the order and its lines with the snapshot prices,
4. clear the cart,
5. commit.

Any failure before the commit rolls the whole unit back, so the cart,
stock and order tables are exactly as they were before the attempt.
Transient store failures are retried from step 1 a bounded number of
times; business failures (empty cart, insufficient stock) never are.
"""

from __future__ import annotations

import logging
from typing import Mapping

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import (
    EmptyCartError,
    InsufficientStockError,
    TransientStoreError,
    ValidationError,
)
from storefront.domain.model.identity import Identity
from storefront.domain.model.order import Order, OrderLine, ShippingDetails
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.role_gate import Operation, guarded
from storefront.domain.service.stock_reservation_service import (
    StockReservationService,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3


class PlaceOrderHandler:

    def __init__(self, uow: UnitOfWorkFactory, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._uow = uow
        self._max_attempts = max_attempts

    @guarded(Operation.PLACE_ORDER)
    def handle(
        self,
        identity: Identity,
        shipping: ShippingDetails | Mapping[str, str],
    ) -> OrderDTO:
        """Turn the customer's cart into a committed order."""
        if not isinstance(shipping, ShippingDetails):
            if not isinstance(shipping, Mapping):
                raise ValidationError("Shipping details are required")
            shipping = ShippingDetails.create(**shipping)

        attempt = 1
        while True:
            try:
                order = self._attempt(identity.user_id, shipping)
            except TransientStoreError as exc:
                if attempt >= self._max_attempts:
                    logger.error(
                        "Checkout for %r failed after %d attempts: %s",
                        identity.user_id, attempt, exc,
                    )
                    raise
                logger.warning(
                    "Checkout attempt %d/%d for %r hit a transient store error, retrying: %s",
                    attempt, self._max_attempts, identity.user_id, exc,
                )
                attempt += 1
                continue

            logger.info(
                "Order #%s placed by %r: %d line(s), total %s",
                order.id, order.customer_id, len(order.lines), order.total,
            )
            return order_to_dto(order)

    def _attempt(self, customer_id: str, shipping: ShippingDetails) -> Order:
        with self._uow() as uow:
            entries = uow.carts.list_entries(customer_id, lock=True)
            if not entries:
                raise EmptyCartError()

            try:
                StockReservationService(uow.stock).reserve(entries)
            except InsufficientStockError as exc:
                logger.info("Checkout for %r rejected: %s", customer_id, exc)
                raise

            lines = [
                OrderLine(
                    product_id=entry.product_id,
                    product_title=entry.title,
                    quantity=Quantity(entry.quantity),
                    unit_price=entry.unit_price,  # <-- price snapshot
                )
                for entry in entries
            ]
            order = uow.orders.add(Order.create(customer_id, shipping, lines))
            uow.carts.clear(customer_id)
            uow.commit()

        return order
