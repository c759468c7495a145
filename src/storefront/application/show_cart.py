"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.model.identity import Identity
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.role_gate import Operation, guarded


class ShowCartHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    @guarded(Operation.VIEW_CART)
    def handle(self, identity: Identity) -> CartDTO:
        with self._uow() as uow:
            entries = uow.carts.list_entries(identity.user_id)
        return cart_to_dto(identity.user_id, entries)
