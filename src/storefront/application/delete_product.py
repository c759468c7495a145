"""Application service: Delete Product use case.

Removes the product, its stock record and every cart line staging it in
one unit. Placed orders keep their own snapshot of the product.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.identity import Identity
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.role_gate import Operation, guarded

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    @guarded(Operation.DELETE_PRODUCT)
    def handle(self, identity: Identity, product_id: str) -> None:
        with self._uow() as uow:
            uow.stock.remove(product_id)
            if not uow.products.delete(product_id):
                raise EntityNotFoundError(f"Product '{product_id}' not found")
            uow.commit()

        logger.info("Product %s deleted by %r", product_id, identity.user_id)
