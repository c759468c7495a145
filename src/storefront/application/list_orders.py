"""Application service: List Orders use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.model.identity import Identity
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.role_gate import Operation, guarded


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    @guarded(Operation.LIST_ORDERS)
    def handle(self, identity: Identity) -> list[OrderDTO]:
        """Return the acting customer's own orders, newest first."""
        with self._uow() as uow:
            orders = uow.orders.list_for_customer(identity.user_id)
        return [order_to_dto(order) for order in orders]
