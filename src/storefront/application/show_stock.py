"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from storefront.application.dto import StockLevelDTO
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class ShowStockHandler:

    def __init__(self, uow: UnitOfWorkFactory) -> None:
        self._uow = uow

    def handle(self) -> list[StockLevelDTO]:
        with self._uow() as uow:
            products = uow.products.list_all()
            levels = uow.stock.levels()
        return [
            StockLevelDTO(
                product_id=p.id,
                title=p.title,
                available=levels.get(p.id, 0),
            )
            for p in sorted(products, key=lambda p: p.title.lower())
        ]
