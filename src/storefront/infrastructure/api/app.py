"""FastAPI application factory for the storefront HTTP API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from storefront.infrastructure.api.errors import register_error_handlers
from storefront.infrastructure.api.routes.cart import router as cart_router
from storefront.infrastructure.api.routes.orders import router as orders_router
from storefront.infrastructure.api.routes.products import router as products_router
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> FastAPI:
    container = container or Container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(container.settings.log_level)
        container.init_db()
        if container.settings.seed_catalog_on_startup:
            seeded = container.seed_catalog.handle()
            logger.info("Startup seed inserted %d products", seeded)
        logger.info("%s API ready (env=%s)", container.settings.app_name, container.settings.env)
        yield
        logger.info("%s API shutting down", container.settings.app_name)

    app = FastAPI(title=container.settings.app_name, lifespan=lifespan)
    app.state.container = container
    register_error_handlers(app)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "service": container.settings.app_name}

    app.include_router(products_router)
    app.include_router(cart_router)
    app.include_router(orders_router)
    return app
