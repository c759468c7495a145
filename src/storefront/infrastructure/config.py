"""Runtime settings, read from ``STOREFRONT_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.infrastructure.persistence.database import is_in_memory_sqlite

DEFAULT_JWT_SECRET = "storefront-dev-jwt-secret-change-me"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="STOREFRONT_", extra="ignore")

    app_name: str = "Storefront"
    env: str = "dev"
    api_host: str = "0.0.0.0"
    api_port: int = 5000

    database_url: str = "sqlite+pysqlite:///./storefront.db"
    sqlite_busy_timeout_seconds: float = Field(default=10.0, gt=0)

    checkout_max_attempts: int = Field(default=3, ge=1)

    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    token_ttl_seconds: int = Field(default=7 * 24 * 3600, gt=0)

    log_level: str = "INFO"
    seed_catalog_on_startup: bool = False

    @field_validator("database_url")
    @classmethod
    def _file_backed_database(cls, value: str) -> str:
        if is_in_memory_sqlite(value):
            raise ValueError(
                "in-memory SQLite cannot isolate concurrent transactions; "
                "point STOREFRONT_DATABASE_URL at a file or a server database"
            )
        return value

    def model_post_init(self, __context) -> None:
        if self.env.lower() == "dev":
            return
        if self.jwt_secret == DEFAULT_JWT_SECRET:
            raise ValueError(
                "insecure default secrets are not allowed outside dev mode; "
                "set STOREFRONT_JWT_SECRET"
            )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
