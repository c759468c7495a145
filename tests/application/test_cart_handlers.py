"""Tests for the cart use cases.

Uses the in-memory unit of work; no database.
"""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import (
    AuthorizationError,
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from storefront.domain.model.identity import Identity
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWorkFactory

ALICE = Identity.customer("alice")
BOB = Identity.customer("bob")
ADMIN = Identity.administrator("root")


def _setup(stock: int = 5) -> FakeUnitOfWorkFactory:
    """A store holding one lamp ("p1") and one book ("p2")."""
    uow = FakeUnitOfWorkFactory()
    uow.add_product(
        Product.create(id="p1", title="Lamp", price=Money.of("5.00"), category="home"),
        stock=stock,
    )
    uow.add_product(
        Product.create(id="p2", title="Book", price=Money.of("10.00"), category="books"),
        stock=stock,
    )
    return uow


class TestAddToCart:

    def test_adds_new_line(self):
        uow = _setup()
        line = AddToCartHandler(uow).handle(ALICE, "p1", 2)
        assert (line.product_id, line.quantity) == ("p1", 2)
        assert uow.cart_of("alice") == {"p1": 2}

    def test_default_quantity_is_one(self):
        uow = _setup()
        AddToCartHandler(uow).handle(ALICE, "p1")
        assert uow.cart_of("alice") == {"p1": 1}

    def test_sums_with_existing_line(self):
        uow = _setup()
        handler = AddToCartHandler(uow)
        handler.handle(ALICE, "p1", 2)
        line = handler.handle(ALICE, "p1", 1)
        assert line.quantity == 3
        assert uow.cart_of("alice") == {"p1": 3}

    def test_summed_total_over_stock_rejected_and_line_kept(self):
        uow = _setup(stock=5)
        handler = AddToCartHandler(uow)
        handler.handle(ALICE, "p1", 3)

        with pytest.raises(InsufficientStockError) as info:
            handler.handle(ALICE, "p1", 3)

        assert info.value.available == 5
        assert info.value.requested == 6
        assert uow.cart_of("alice") == {"p1": 3}

    def test_does_not_touch_stock(self):
        uow = _setup(stock=5)
        AddToCartHandler(uow).handle(ALICE, "p1", 5)
        assert uow.store.stock["p1"] == 5

    def test_carts_are_per_customer(self):
        uow = _setup(stock=5)
        handler = AddToCartHandler(uow)
        handler.handle(ALICE, "p1", 4)
        handler.handle(BOB, "p1", 4)
        assert uow.cart_of("alice") == {"p1": 4}
        assert uow.cart_of("bob") == {"p1": 4}

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            AddToCartHandler(_setup()).handle(ALICE, "ghost", 1)

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, True])
    def test_invalid_quantity(self, quantity):
        uow = _setup()
        with pytest.raises(ValidationError):
            AddToCartHandler(uow).handle(ALICE, "p1", quantity)
        assert uow.cart_of("alice") == {}

    def test_blank_product_id(self):
        with pytest.raises(ValidationError, match="Product id is required"):
            AddToCartHandler(_setup()).handle(ALICE, "  ", 1)

    def test_administrator_rejected_without_effect(self):
        uow = _setup()
        with pytest.raises(AuthorizationError, match="Admin users cannot add items to cart"):
            AddToCartHandler(uow).handle(ADMIN, "p1", 1)
        assert uow.cart_of("root") == {}
        assert uow.opened == 0


class TestUpdateCartItem:

    def test_replaces_quantity(self):
        uow = _setup()
        uow.put_in_cart("alice", "p1", 1)
        line = UpdateCartItemHandler(uow).handle(ALICE, "p1", 4)
        assert line.quantity == 4
        assert uow.cart_of("alice") == {"p1": 4}

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_non_positive_quantity_removes_line(self, quantity):
        uow = _setup()
        uow.put_in_cart("alice", "p1", 1)
        assert UpdateCartItemHandler(uow).handle(ALICE, "p1", quantity) is True
        assert uow.cart_of("alice") == {}

    def test_zero_quantity_on_absent_line_reports_nothing_removed(self):
        uow = _setup()
        assert UpdateCartItemHandler(uow).handle(ALICE, "p1", 0) is False
        assert uow.cart_of("alice") == {}

    def test_over_stock_rejected_and_line_kept(self):
        uow = _setup(stock=5)
        uow.put_in_cart("alice", "p1", 3)
        with pytest.raises(InsufficientStockError) as info:
            UpdateCartItemHandler(uow).handle(ALICE, "p1", 6)
        assert (info.value.requested, info.value.available) == (6, 5)
        assert uow.cart_of("alice") == {"p1": 3}

    def test_absent_line(self):
        with pytest.raises(EntityNotFoundError, match="Item not found in cart"):
            UpdateCartItemHandler(_setup()).handle(ALICE, "p1", 2)

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            UpdateCartItemHandler(_setup()).handle(ALICE, "ghost", 2)

    def test_non_integer_quantity(self):
        uow = _setup()
        uow.put_in_cart("alice", "p1", 1)
        with pytest.raises(ValidationError, match="must be an integer"):
            UpdateCartItemHandler(uow).handle(ALICE, "p1", "3")


class TestRemoveAndClear:

    def test_remove_is_idempotent(self):
        uow = _setup()
        uow.put_in_cart("alice", "p1", 2)
        handler = RemoveFromCartHandler(uow)
        assert handler.handle(ALICE, "p1") is True
        assert handler.handle(ALICE, "p1") is False
        assert uow.cart_of("alice") == {}

    def test_add_then_remove_round_trip(self):
        uow = _setup()
        AddToCartHandler(uow).handle(ALICE, "p2", 2)
        RemoveFromCartHandler(uow).handle(ALICE, "p2")
        assert ShowCartHandler(uow).handle(ALICE).is_empty

    def test_clear_only_touches_own_cart(self):
        uow = _setup()
        uow.put_in_cart("alice", "p1", 1)
        uow.put_in_cart("alice", "p2", 1)
        uow.put_in_cart("bob", "p1", 1)
        assert ClearCartHandler(uow).handle(ALICE) == 2
        assert uow.cart_of("alice") == {}
        assert uow.cart_of("bob") == {"p1": 1}

    def test_admin_cannot_clear(self):
        with pytest.raises(AuthorizationError):
            ClearCartHandler(_setup()).handle(ADMIN)


class TestShowCart:

    def test_joins_live_product_data(self):
        uow = _setup(stock=7)
        uow.put_in_cart("alice", "p2", 1)
        uow.put_in_cart("alice", "p1", 2)

        cart = ShowCartHandler(uow).handle(ALICE)

        assert [i.product_id for i in cart.items] == ["p1", "p2"]
        lamp = cart.items[0]
        assert (lamp.title, str(lamp.unit_price), str(lamp.line_total), lamp.stock) == (
            "Lamp", "5.00", "10.00", 7,
        )
        assert str(cart.subtotal) == "20.00"

    def test_reflects_price_changes_until_checkout(self):
        uow = _setup()
        uow.put_in_cart("alice", "p1", 1)
        uow.store.products["p1"].update(price=Money.of("6.00"))
        assert str(ShowCartHandler(uow).handle(ALICE).subtotal) == "6.00"

    def test_admin_cannot_view_cart(self):
        with pytest.raises(AuthorizationError, match="Admin users cannot access cart"):
            ShowCartHandler(_setup()).handle(ADMIN)
