"""Application service: catalog browsing queries.

Open to every caller, signed in or not; nothing here is gated.
"""

from __future__ import annotations

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Category
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class BrowseCatalogHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    def list_products(
        self,
        category: str | None = None,
        search: str | None = None,
    ) -> list[ProductDTO]:
        wanted = None
        if category and category.lower() != "all":
            wanted = Category.parse(category)
        with self._uow() as uow:
            products = uow.products.list_all(category=wanted, search=search or None)
            levels = uow.stock.levels()
        return [product_to_dto(p, levels.get(p.id)) for p in products]

    def get_product(self, product_id: str) -> ProductDTO:
        with self._uow() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product '{product_id}' not found")
            stock = uow.stock.current_stock(product_id)
        return product_to_dto(product, stock)
