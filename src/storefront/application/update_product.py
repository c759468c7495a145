"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.identity import Identity
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.role_gate import Operation, guarded

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    @guarded(Operation.UPDATE_PRODUCT)
    def handle(
        self,
        identity: Identity,
        product_id: str,
        title: str | None = None,
        description: str | None = None,
        price: str | None = None,
        category: str | None = None,
        image_url: str | None = None,
    ) -> ProductDTO:
        """Edit catalog fields of a product.

        This does NOT affect any existing orders; they captured a
        price snapshot at checkout time.
        """
        new_price = Money.of(price) if price is not None else None

        with self._uow() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product '{product_id}' not found")

            product.update(
                title=title,
                description=description,
                price=new_price,
                category=category,
                image_url=image_url,
            )
            uow.products.save(product)
            stock = uow.stock.current_stock(product_id)
            uow.commit()

        logger.info("Product %s updated by %r", product_id, identity.user_id)
        return product_to_dto(product, stock)
