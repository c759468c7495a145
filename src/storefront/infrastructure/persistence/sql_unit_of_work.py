"""SQLAlchemy-backed UnitOfWork: one Session, one database transaction."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.exceptions import TransientStoreError
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.infrastructure.persistence.sql_cart_repository import SqlCartRepository
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from storefront.infrastructure.persistence.sql_product_repository import SqlProductRepository
from storefront.infrastructure.persistence.sql_stock_ledger import SqlStockLedger

# Lock timeouts, "database is locked", dropped connections, and a lost
# race on a unique insert. None of them leave effects behind after
# rollback, so the caller may retry the whole operation.
_TRANSIENT = (OperationalError, IntegrityError)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        self.products = SqlProductRepository(self._session)
        self.stock = SqlStockLedger(self._session)
        self.carts = SqlCartRepository(self._session)
        self.orders = SqlOrderRepository(self._session)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        session = self._session
        self._session = None
        try:
            session.rollback()
        except SQLAlchemyError as rollback_exc:
            if exc is None:
                raise TransientStoreError(
                    "Store transaction could not be rolled back cleanly"
                ) from rollback_exc
        finally:
            session.close()

        if isinstance(exc, _TRANSIENT):
            raise TransientStoreError(
                "Store transaction could not complete; please retry"
            ) from exc

    def commit(self) -> None:
        try:
            self._session.commit()
        except _TRANSIENT as exc:
            raise TransientStoreError(
                "Store transaction could not complete; please retry"
            ) from exc

    def rollback(self) -> None:
        if self._session is not None:
            self._session.rollback()
