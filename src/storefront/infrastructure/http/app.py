"""Storefront API: FastAPI application factory.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Database engine created on startup and disposed on shutdown (lifespan)
    - Error handlers map domain/store errors to structured JSON responses
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from storefront.infrastructure.config import get_settings
from storefront.infrastructure.database import close_db, init_db
from storefront.infrastructure.http.error_handlers import register_error_handlers
from storefront.infrastructure.http.routes import health, orders, products
from storefront.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    await manager.create_schema()
    logger.info("Storefront API started")
    yield
    await close_db()
    logger.info("Storefront API shut down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.api_title, version=API_VERSION, lifespan=lifespan,
    )
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(orders.router)
    return app


app = create_app()
