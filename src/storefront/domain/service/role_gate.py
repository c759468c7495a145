"""Domain service: Role Gate.

Customers and administrators are two disjoint partitions, not two levels
of one permission ladder: every gated operation belongs to exactly one of
them. The check runs before a handler body, so a rejected caller never
reads or writes cart, stock or order state.
"""

from __future__ import annotations

import functools
import logging
from enum import Enum
from typing import Callable, TypeVar

from storefront.domain.exceptions import AuthorizationError
from storefront.domain.model.identity import Identity, Role

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


class Operation(Enum):
    # customer-only
    VIEW_CART = "access cart"
    ADD_TO_CART = "add items to cart"
    UPDATE_CART = "update cart"
    REMOVE_FROM_CART = "remove items from cart"
    CLEAR_CART = "clear cart"
    PLACE_ORDER = "place orders"
    LIST_ORDERS = "access orders"
    # administrator-only
    CREATE_PRODUCT = "create products"
    UPDATE_PRODUCT = "update products"
    DELETE_PRODUCT = "delete products"
    SET_STOCK = "set stock levels"


_REQUIRED_ROLE: dict[Operation, Role] = {
    Operation.VIEW_CART: Role.CUSTOMER,
    Operation.ADD_TO_CART: Role.CUSTOMER,
    Operation.UPDATE_CART: Role.CUSTOMER,
    Operation.REMOVE_FROM_CART: Role.CUSTOMER,
    Operation.CLEAR_CART: Role.CUSTOMER,
    Operation.PLACE_ORDER: Role.CUSTOMER,
    Operation.LIST_ORDERS: Role.CUSTOMER,
    Operation.CREATE_PRODUCT: Role.ADMINISTRATOR,
    Operation.UPDATE_PRODUCT: Role.ADMINISTRATOR,
    Operation.DELETE_PRODUCT: Role.ADMINISTRATOR,
    Operation.SET_STOCK: Role.ADMINISTRATOR,
}


class RoleGate:

    @staticmethod
    def required_role(operation: Operation) -> Role:
        return _REQUIRED_ROLE[operation]

    @staticmethod
    def check(identity: Identity, operation: Operation) -> None:
        """Raise AuthorizationError unless ``identity`` may run ``operation``."""
        required = _REQUIRED_ROLE[operation]
        if identity.role is required:
            return

        logger.warning(
            "Rejected %s %r: %s requires role %s",
            identity.role.value,
            identity.user_id,
            operation.name,
            required.value,
        )
        if required is Role.CUSTOMER:
            raise AuthorizationError(
                f"Admin users cannot {operation.value}. "
                "Please use a regular customer account."
            )
        raise AuthorizationError(f"Admin access required to {operation.value}")


def guarded(operation: Operation) -> Callable[[F], F]:
    """Gate a handler method whose first argument is the acting Identity."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self, identity: Identity, *args, **kwargs):
            RoleGate.check(identity, operation)
            return func(self, identity, *args, **kwargs)

        wrapper.operation = operation  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator
