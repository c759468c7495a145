"""Unit tests for the RoleGate domain service."""

import pytest

from storefront.domain.exceptions import AuthorizationError
from storefront.domain.model.identity import Identity, Role
from storefront.domain.service.role_gate import Operation, RoleGate, guarded

CUSTOMER_OPS = [
    Operation.VIEW_CART,
    Operation.ADD_TO_CART,
    Operation.UPDATE_CART,
    Operation.REMOVE_FROM_CART,
    Operation.CLEAR_CART,
    Operation.PLACE_ORDER,
    Operation.LIST_ORDERS,
]
ADMIN_OPS = [
    Operation.CREATE_PRODUCT,
    Operation.UPDATE_PRODUCT,
    Operation.DELETE_PRODUCT,
    Operation.SET_STOCK,
]


class TestPartition:

    def test_every_operation_belongs_to_exactly_one_role(self):
        assert set(CUSTOMER_OPS) | set(ADMIN_OPS) == set(Operation)
        for op in Operation:
            assert RoleGate.required_role(op) in (Role.CUSTOMER, Role.ADMINISTRATOR)

    @pytest.mark.parametrize("op", CUSTOMER_OPS)
    def test_customer_allowed_on_customer_ops(self, op):
        RoleGate.check(Identity.customer("alice"), op)

    @pytest.mark.parametrize("op", CUSTOMER_OPS)
    def test_admin_rejected_on_customer_ops(self, op):
        with pytest.raises(AuthorizationError, match="Admin users cannot"):
            RoleGate.check(Identity.administrator("root"), op)

    @pytest.mark.parametrize("op", ADMIN_OPS)
    def test_admin_allowed_on_admin_ops(self, op):
        RoleGate.check(Identity.administrator("root"), op)

    @pytest.mark.parametrize("op", ADMIN_OPS)
    def test_customer_rejected_on_admin_ops(self, op):
        with pytest.raises(AuthorizationError, match="Admin access required"):
            RoleGate.check(Identity.customer("alice"), op)

    def test_rejection_message_names_the_operation(self):
        with pytest.raises(AuthorizationError) as info:
            RoleGate.check(Identity.administrator("root"), Operation.PLACE_ORDER)
        assert info.value.message == (
            "Admin users cannot place orders. Please use a regular customer account."
        )
        assert info.value.status_code == 403


class TestGuardedDecorator:

    class _Handler:
        def __init__(self):
            self.calls = 0

        @guarded(Operation.PLACE_ORDER)
        def handle(self, identity, value):
            self.calls += 1
            return value * 2

    def test_body_runs_for_allowed_role(self):
        h = self._Handler()
        assert h.handle(Identity.customer("alice"), 21) == 42
        assert h.calls == 1

    def test_body_never_runs_for_rejected_role(self):
        h = self._Handler()
        with pytest.raises(AuthorizationError):
            h.handle(Identity.administrator("root"), 21)
        assert h.calls == 0

    def test_operation_is_exposed(self):
        assert self._Handler.handle.operation is Operation.PLACE_ORDER
