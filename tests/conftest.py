from __future__ import annotations

from pathlib import Path

import pytest

from storefront.domain.model.identity import Identity
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.config import Settings

SHIPPING = dict(
    first_name="Ada",
    last_name="Lovelace",
    email="ada@example.com",
    address="12 Analytical Row",
    city="London",
    state="LDN",
    zip_code="N1 9GU",
)

ADMIN = Identity.administrator("root")


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        env="test",
        database_url=f"sqlite+pysqlite:///{tmp_path / 'storefront.sqlite'}",
        jwt_secret="test-secret-with-enough-length-for-hs256",
        sqlite_busy_timeout_seconds=30.0,
    )


@pytest.fixture()
def container(settings: Settings):
    c = Container(settings)
    c.init_db()
    yield c
    c.dispose()


@pytest.fixture()
def shipping() -> dict[str, str]:
    return dict(SHIPPING)


@pytest.fixture()
def make_product(container: Container):
    """Create a product through the admin use case; returns its id."""

    def _make(title: str, price: str, stock: int, category: str = "home", product_id: str | None = None) -> str:
        dto = container.add_product.handle(
            ADMIN,
            title=title,
            price=price,
            category=category,
            stock=stock,
            product_id=product_id,
        )
        return dto.id

    return _make
