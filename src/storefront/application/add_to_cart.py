"""Application service: Add To Cart use case.

The stock check here is advisory: it gives the customer a fast, friendly
error, but it reserves nothing. Checkout re-validates every line against
the ledger inside its own transaction.
"""

from __future__ import annotations

from storefront.application.dto import CartLineDTO, cart_line_to_dto
from storefront.domain.exceptions import EntityNotFoundError, InsufficientStockError
from storefront.domain.model.identity import Identity
from storefront.domain.model.product import require_product_id
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.role_gate import Operation, guarded


class AddToCartHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    @guarded(Operation.ADD_TO_CART)
    def handle(self, identity: Identity, product_id: str, quantity: int = 1) -> CartLineDTO:
        """Add ``quantity`` units, summing with any existing line."""
        product_id = require_product_id(product_id)
        requested = Quantity(quantity).value

        with self._uow() as uow:
            product = uow.products.get_by_id(product_id)
            stock = uow.stock.current_stock(product_id)
            if product is None or stock is None:
                raise EntityNotFoundError(f"Product '{product_id}' not found")

            existing = uow.carts.get_line(identity.user_id, product_id)
            new_total = requested + (existing.quantity if existing else 0)
            if stock < new_total:
                raise InsufficientStockError(
                    product_id=product_id,
                    requested=new_total,
                    available=stock,
                    product_title=product.title,
                )

            line = uow.carts.set_quantity(identity.user_id, product_id, new_total)
            uow.commit()

        return cart_line_to_dto(line)
