"""Application service: Update Cart Item use case."""

from __future__ import annotations

from storefront.application.dto import CartLineDTO, cart_line_to_dto
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from storefront.domain.model.identity import Identity
from storefront.domain.model.product import require_product_id
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.role_gate import Operation, guarded


class UpdateCartItemHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    @guarded(Operation.UPDATE_CART)
    def handle(self, identity: Identity, product_id: str, quantity: int) -> CartLineDTO | bool:
        """Replace the quantity of an existing line.

        A quantity of zero or less removes the line instead and, exactly
        like RemoveFromCartHandler, returns whether there was one to remove.
        """
        product_id = require_product_id(product_id)
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(quantity).__name__}"
            )

        with self._uow() as uow:
            if quantity <= 0:
                removed = uow.carts.remove(identity.user_id, product_id)
                uow.commit()
                return removed

            product = uow.products.get_by_id(product_id)
            stock = uow.stock.current_stock(product_id)
            if product is None or stock is None:
                raise EntityNotFoundError(f"Product '{product_id}' not found")

            if uow.carts.get_line(identity.user_id, product_id) is None:
                raise EntityNotFoundError("Item not found in cart")

            # Advisory only; checkout re-checks under its transaction.
            if stock < quantity:
                raise InsufficientStockError(
                    product_id=product_id,
                    requested=quantity,
                    available=stock,
                    product_title=product.title,
                )

            line = uow.carts.set_quantity(identity.user_id, product_id, quantity)
            uow.commit()

        return cart_line_to_dto(line)
