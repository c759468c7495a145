"""Tests for the PlaceOrder (checkout) use case.

Uses the in-memory unit of work, whose rollback restores the snapshot
taken on entry, so all-or-nothing behaviour is observable here.
"""

from decimal import Decimal

import pytest

from storefront.application.place_order import PlaceOrderHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.domain.exceptions import (
    AuthorizationError,
    EmptyCartError,
    InsufficientStockError,
    TransientStoreError,
    ValidationError,
)
from storefront.domain.model.identity import Identity
from storefront.domain.model.order import ShippingDetails
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWorkFactory

ALICE = Identity.customer("alice")
ADMIN = Identity.administrator("root")

SHIPPING = dict(
    first_name="Ada",
    last_name="Lovelace",
    email="ada@example.com",
    address="12 Analytical Row",
    city="London",
    state="LDN",
    zip_code="N1 9GU",
)


def _setup(stock_a: int = 10, stock_b: int = 10) -> FakeUnitOfWorkFactory:
    uow = FakeUnitOfWorkFactory()
    uow.add_product(
        Product.create(id="A", title="Alpha", price=Money.of("5.00"), category="home"),
        stock=stock_a,
    )
    uow.add_product(
        Product.create(id="B", title="Beta", price=Money.of("10.00"), category="books"),
        stock=stock_b,
    )
    return uow


class TestPlaceOrderHappyPath:

    def test_creates_order_with_snapshot_total(self):
        uow = _setup()
        uow.put_in_cart("alice", "A", 2)
        uow.put_in_cart("alice", "B", 1)

        dto = PlaceOrderHandler(uow).handle(ALICE, SHIPPING)

        assert dto.id == 1
        assert dto.customer_id == "alice"
        assert dto.total == Decimal("20.00")
        assert [(l.product_id, l.quantity, l.unit_price) for l in dto.lines] == [
            ("A", 2, Decimal("5.00")),
            ("B", 1, Decimal("10.00")),
        ]
        assert dto.shipping.city == "London"

    def test_decrements_stock_and_clears_cart(self):
        uow = _setup(stock_a=10, stock_b=10)
        uow.put_in_cart("alice", "A", 2)
        uow.put_in_cart("alice", "B", 1)

        PlaceOrderHandler(uow).handle(ALICE, SHIPPING)

        assert uow.store.stock == {"A": 8, "B": 9}
        assert uow.cart_of("alice") == {}
        assert uow.commits == 1

    def test_accepts_shipping_details_object(self):
        uow = _setup()
        uow.put_in_cart("alice", "A", 1)
        dto = PlaceOrderHandler(uow).handle(ALICE, ShippingDetails.create(**SHIPPING))
        assert dto.total == Decimal("5.00")

    def test_exact_stock_is_enough(self):
        uow = _setup(stock_a=3)
        uow.put_in_cart("alice", "A", 3)
        PlaceOrderHandler(uow).handle(ALICE, SHIPPING)
        assert uow.store.stock["A"] == 0

    def test_later_price_change_does_not_touch_order(self):
        uow = _setup()
        uow.put_in_cart("alice", "A", 1)
        PlaceOrderHandler(uow).handle(ALICE, SHIPPING)

        uow.store.products["A"].update(price=Money.of("99.00"))

        [order] = ListOrdersHandler(uow).handle(ALICE)
        assert order.lines[0].unit_price == Decimal("5.00")
        assert order.total == Decimal("5.00")


class TestPlaceOrderAtomicity:

    def test_shortfall_on_one_line_changes_nothing(self):
        uow = _setup(stock_a=10, stock_b=1)
        uow.put_in_cart("alice", "A", 2)
        uow.put_in_cart("alice", "B", 2)

        with pytest.raises(InsufficientStockError) as info:
            PlaceOrderHandler(uow).handle(ALICE, SHIPPING)

        assert (info.value.product_id, info.value.requested, info.value.available) == ("B", 2, 1)
        # "A" was decremented first and must be restored
        assert uow.store.stock == {"A": 10, "B": 1}
        assert uow.cart_of("alice") == {"A": 2, "B": 2}
        assert uow.store.orders == {}
        assert uow.commits == 0

    def test_empty_cart(self):
        uow = _setup()
        with pytest.raises(EmptyCartError, match="Cart is empty"):
            PlaceOrderHandler(uow).handle(ALICE, SHIPPING)
        assert uow.store.orders == {}

    def test_invalid_shipping_rejected_before_any_work(self):
        uow = _setup()
        uow.put_in_cart("alice", "A", 1)
        with pytest.raises(ValidationError, match="Missing required shipping fields: email"):
            PlaceOrderHandler(uow).handle(ALICE, {**SHIPPING, "email": ""})
        assert uow.opened == 0
        assert uow.cart_of("alice") == {"A": 1}

    def test_administrator_rejected_without_effect(self):
        uow = _setup()
        uow.put_in_cart("root", "A", 1)
        with pytest.raises(AuthorizationError, match="Admin users cannot place orders"):
            PlaceOrderHandler(uow).handle(ADMIN, SHIPPING)
        assert uow.opened == 0
        assert uow.store.stock["A"] == 10
        assert uow.store.orders == {}


class TestPlaceOrderRetries:

    def test_transient_failure_is_retried(self):
        uow = _setup()
        uow.put_in_cart("alice", "A", 2)
        uow.failing_commits = 1

        dto = PlaceOrderHandler(uow, max_attempts=3).handle(ALICE, SHIPPING)

        assert dto.total == Decimal("10.00")
        assert uow.opened == 2
        # the failed attempt left nothing behind
        assert uow.store.stock["A"] == 8
        assert len(uow.store.orders) == 1

    def test_gives_up_after_max_attempts(self):
        uow = _setup()
        uow.put_in_cart("alice", "A", 2)
        uow.failing_commits = 5

        with pytest.raises(TransientStoreError):
            PlaceOrderHandler(uow, max_attempts=2).handle(ALICE, SHIPPING)

        assert uow.opened == 2
        assert uow.store.stock["A"] == 10
        assert uow.cart_of("alice") == {"A": 2}

    def test_business_failures_are_not_retried(self):
        uow = _setup(stock_a=1)
        uow.put_in_cart("alice", "A", 2)
        with pytest.raises(InsufficientStockError):
            PlaceOrderHandler(uow, max_attempts=3).handle(ALICE, SHIPPING)
        assert uow.opened == 1

    def test_max_attempts_must_be_positive(self):
        with pytest.raises(ValueError):
            PlaceOrderHandler(_setup(), max_attempts=0)


class TestListOrders:

    def test_newest_first_and_only_own(self):
        uow = _setup()
        handler = PlaceOrderHandler(uow)
        uow.put_in_cart("alice", "A", 1)
        first = handler.handle(ALICE, SHIPPING)
        uow.put_in_cart("alice", "B", 1)
        second = handler.handle(ALICE, SHIPPING)
        uow.put_in_cart("bob", "A", 1)
        handler.handle(Identity.customer("bob"), SHIPPING)

        orders = ListOrdersHandler(uow).handle(ALICE)

        assert [o.id for o in orders] == [second.id, first.id]

    def test_admin_cannot_list_orders(self):
        with pytest.raises(AuthorizationError, match="Admin users cannot access orders"):
            ListOrdersHandler(_setup()).handle(ADMIN)
