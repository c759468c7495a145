"""Application service: Clear Cart use case."""

from __future__ import annotations

from storefront.domain.model.identity import Identity
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.role_gate import Operation, guarded


class ClearCartHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    @guarded(Operation.CLEAR_CART)
    def handle(self, identity: Identity) -> int:
        with self._uow() as uow:
            removed = uow.carts.clear(identity.user_id)
            uow.commit()
        return removed
