"""Application service: Add Product use case."""

from __future__ import annotations

import logging
import uuid

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.identity import Identity
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.role_gate import Operation, guarded

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    @guarded(Operation.CREATE_PRODUCT)
    def handle(
        self,
        identity: Identity,
        title: str,
        price: str,
        category: str,
        description: str = "",
        image_url: str | None = None,
        stock: int = 0,
        product_id: str | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog together with its stock record."""
        if not isinstance(stock, int) or isinstance(stock, bool) or stock < 0:
            raise ValidationError("Stock must be a non-negative integer")

        product = Product.create(
            id=product_id or str(uuid.uuid4()),
            title=title,
            price=Money.of(price),
            category=category,
            description=description,
            image_url=image_url,
        )

        with self._uow() as uow:
            if uow.products.get_by_id(product.id) is not None:
                raise ValidationError(f"Product '{product.id}' already exists")
            uow.products.save(product)
            uow.stock.set_stock(product.id, stock)
            uow.commit()

        logger.info("Product %s '%s' created by %r", product.id, product.title, identity.user_id)
        return product_to_dto(product, stock)
