"""Application service: Set Stock use case (administrative restock)."""

from __future__ import annotations

import logging

from storefront.application.dto import StockLevelDTO
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.identity import Identity
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.role_gate import Operation, guarded

logger = logging.getLogger(__name__)


class SetStockHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    @guarded(Operation.SET_STOCK)
    def handle(self, identity: Identity, product_id: str, quantity: int) -> StockLevelDTO:
        """Set the available quantity for a product to an absolute level."""
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 0:
            raise ValidationError("Stock must be a non-negative integer")

        with self._uow() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product '{product_id}' not found")
            uow.stock.set_stock(product_id, quantity)
            uow.commit()

        logger.info("Stock for %s set to %d by %r", product_id, quantity, identity.user_id)
        return StockLevelDTO(product_id=product_id, title=product.title, available=quantity)
