"""Engine and session factory construction.

Nothing here is module-global: the composition root builds one engine per
process (or per test) and hands a session factory to the unit of work.
"""

from __future__ import annotations

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import sessionmaker

from storefront.infrastructure.persistence.tables import Base


def create_engine_from_url(url: str, sqlite_busy_timeout: float = 10.0) -> Engine:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(parsed, pool_pre_ping=True)

    if is_in_memory_sqlite(parsed):
        raise ValueError(
            f"In-memory SQLite is not supported: {parsed.render_as_string(hide_password=True)}. "
            "Every session would share one connection, so concurrent checkouts could not "
            "be isolated. Use a file-backed database, e.g. sqlite+pysqlite:///./storefront.db"
        )

    engine = create_engine(
        parsed,
        connect_args={"timeout": sqlite_busy_timeout, "check_same_thread": False},
    )
    _serialize_sqlite_writers(engine)
    return engine


def is_in_memory_sqlite(url: str | URL) -> bool:
    url = make_url(url)
    if url.get_backend_name() != "sqlite":
        return False
    database = url.database or ""
    return (
        database in ("", ":memory:")
        or database.startswith("file::memory:")
        or url.query.get("mode") == "memory"
    )


def _serialize_sqlite_writers(engine: Engine) -> None:
    """Start every SQLite transaction with ``BEGIN IMMEDIATE``.

    pysqlite otherwise begins lazily and upgrades a read lock to a write
    lock mid-transaction, which lets two checkouts both read and then fail
    with SQLITE_BUSY instead of queueing. With an immediate begin the
    write lock is taken up front and waiters block on the busy timeout.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)
