"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine

from storefront.application.add_product import AddProductHandler
from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.seed_catalog import SeedCatalogHandler
from storefront.application.set_stock import SetStockHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.show_stock import ShowStockHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.persistence.database import (
    create_engine_from_url,
    init_db,
    make_session_factory,
)
from storefront.infrastructure.persistence.sql_unit_of_work import SqlAlchemyUnitOfWork


class Container:
    """Holds the engine and hands out one handler instance per use case."""

    def __init__(self, settings: Settings | None = None, engine: Engine | None = None) -> None:
        self.settings = settings or get_settings()
        self.engine = engine or create_engine_from_url(
            self.settings.database_url,
            sqlite_busy_timeout=self.settings.sqlite_busy_timeout_seconds,
        )
        self.session_factory = make_session_factory(self.engine)

    def unit_of_work(self) -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(self.session_factory)

    def init_db(self) -> None:
        init_db(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    # --- Catalog --------------------------------------------------------------

    @cached_property
    def browse_catalog(self) -> BrowseCatalogHandler:
        return BrowseCatalogHandler(self.unit_of_work)

    @cached_property
    def add_product(self) -> AddProductHandler:
        return AddProductHandler(self.unit_of_work)

    @cached_property
    def update_product(self) -> UpdateProductHandler:
        return UpdateProductHandler(self.unit_of_work)

    @cached_property
    def delete_product(self) -> DeleteProductHandler:
        return DeleteProductHandler(self.unit_of_work)

    @cached_property
    def set_stock(self) -> SetStockHandler:
        return SetStockHandler(self.unit_of_work)

    @cached_property
    def show_stock(self) -> ShowStockHandler:
        return ShowStockHandler(self.unit_of_work)

    @cached_property
    def seed_catalog(self) -> SeedCatalogHandler:
        return SeedCatalogHandler(self.unit_of_work)

    # --- Cart -----------------------------------------------------------------

    @cached_property
    def show_cart(self) -> ShowCartHandler:
        return ShowCartHandler(self.unit_of_work)

    @cached_property
    def add_to_cart(self) -> AddToCartHandler:
        return AddToCartHandler(self.unit_of_work)

    @cached_property
    def update_cart_item(self) -> UpdateCartItemHandler:
        return UpdateCartItemHandler(self.unit_of_work)

    @cached_property
    def remove_from_cart(self) -> RemoveFromCartHandler:
        return RemoveFromCartHandler(self.unit_of_work)

    @cached_property
    def clear_cart(self) -> ClearCartHandler:
        return ClearCartHandler(self.unit_of_work)

    # --- Orders ---------------------------------------------------------------

    @cached_property
    def place_order(self) -> PlaceOrderHandler:
        return PlaceOrderHandler(
            self.unit_of_work,
            max_attempts=self.settings.checkout_max_attempts,
        )

    @cached_property
    def list_orders(self) -> ListOrdersHandler:
        return ListOrdersHandler(self.unit_of_work)
