"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import delete, or_, select
from sqlalchemy.orm import Session

from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.tables import CartItemRow, ProductRow


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        row = self._session.get(ProductRow, product_id)
        return self._to_domain(row) if row is not None else None

    def list_all(
        self,
        category: Category | None = None,
        search: str | None = None,
    ) -> list[Product]:
        stmt = select(ProductRow).order_by(ProductRow.created_at.desc(), ProductRow.id)
        if category is not None:
            stmt = stmt.where(ProductRow.category == category.value)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(ProductRow.title.ilike(pattern), ProductRow.description.ilike(pattern))
            )
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    def save(self, product: Product) -> None:
        row = self._session.get(ProductRow, product.id)
        if row is None:
            row = ProductRow(id=product.id, created_at=product.created_at)
            self._session.add(row)
        row.title = product.title
        row.description = product.description
        row.price = product.price.rounded
        row.category = product.category.value
        row.image_url = product.image_url
        self._session.flush()

    def delete(self, product_id: str) -> bool:
        self._session.execute(
            delete(CartItemRow).where(CartItemRow.product_id == product_id)
        )
        result = self._session.execute(
            delete(ProductRow).where(ProductRow.id == product_id),
            execution_options={"synchronize_session": "fetch"},
        )
        return result.rowcount > 0

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        created_at = row.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Product(
            id=row.id,
            title=row.title,
            description=row.description or "",
            price=Money.of(row.price),
            category=Category(row.category),
            image_url=row.image_url,
            created_at=created_at,
        )
