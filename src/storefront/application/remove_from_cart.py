"""Application service: Remove From Cart use case."""

from __future__ import annotations

from storefront.domain.model.identity import Identity
from storefront.domain.model.product import require_product_id
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.role_gate import Operation, guarded


class RemoveFromCartHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    @guarded(Operation.REMOVE_FROM_CART)
    def handle(self, identity: Identity, product_id: str) -> bool:
        """Remove a line. Idempotent: returns whether anything was removed."""
        product_id = require_product_id(product_id)
        with self._uow() as uow:
            removed = uow.carts.remove(identity.user_id, product_id)
            uow.commit()
        return removed
