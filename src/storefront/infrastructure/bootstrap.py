"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Handlers are built per
unit of work (one HTTP request or one CLI command) around a single
database session.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.adjust_stock import AdjustProductStockHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.create_product import CreateProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.get_order import GetOrderHandler
from storefront.application.get_product import GetProductHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.product_service import ProductLookup, ProductService
from storefront.application.update_order import UpdateOrderHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.database import DatabaseSessionManager
from storefront.infrastructure.persistence.sql_order_repository import (
    SqlAlchemyOrderRepository,
)
from storefront.infrastructure.persistence.sql_product_repository import (
    SqlAlchemyProductRepository,
)


def product_repository(session: AsyncSession) -> SqlAlchemyProductRepository:
    return SqlAlchemyProductRepository(session)


def order_repository(session: AsyncSession) -> SqlAlchemyOrderRepository:
    return SqlAlchemyOrderRepository(session)


def product_lookup(session: AsyncSession) -> ProductLookup:
    return ProductService(product_repository(session))


# --- Product handlers ---------------------------------------------------------


def create_product_handler(session: AsyncSession) -> CreateProductHandler:
    return CreateProductHandler(product_repository(session))


def update_product_handler(session: AsyncSession) -> UpdateProductHandler:
    return UpdateProductHandler(product_repository(session))


def delete_product_handler(session: AsyncSession) -> DeleteProductHandler:
    return DeleteProductHandler(product_repository(session))


def adjust_stock_handler(session: AsyncSession) -> AdjustProductStockHandler:
    return AdjustProductStockHandler(product_repository(session))


def get_product_handler(session: AsyncSession) -> GetProductHandler:
    return GetProductHandler(product_repository(session))


def list_products_handler(session: AsyncSession) -> ListProductsHandler:
    return ListProductsHandler(product_repository(session))


# --- Order handlers -----------------------------------------------------------


def create_order_handler(session: AsyncSession) -> CreateOrderHandler:
    return CreateOrderHandler(
        order_repo=order_repository(session),
        product_lookup=product_lookup(session),
    )


def update_order_handler(session: AsyncSession) -> UpdateOrderHandler:
    return UpdateOrderHandler(order_repository(session))


def get_order_handler(session: AsyncSession) -> GetOrderHandler:
    return GetOrderHandler(order_repository(session))


def list_orders_handler(session: AsyncSession) -> ListOrdersHandler:
    return ListOrdersHandler(order_repository(session))


# --- Standalone sessions (CLI) ------------------------------------------------


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    """Open the configured database for one unit of work, then close it."""
    settings = get_settings()
    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    try:
        await manager.create_schema()
        async with manager.session() as session:
            yield session
    finally:
        await manager.close()
