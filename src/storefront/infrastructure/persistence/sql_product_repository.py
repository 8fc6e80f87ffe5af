"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import NewProduct, Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.database import store_errors
from storefront.infrastructure.persistence.models import ProductRecord


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    async def create(self, product: NewProduct) -> Product:
        row = ProductRecord(
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
        )
        async with store_errors(self._session, "insert"):
            self._session.add(row)
            await self._session.commit()
            await self._session.refresh(row)
        return self._to_domain(row)

    async def find_by_id(self, product_id: str) -> Product:
        return self._to_domain(await self._get_row(product_id))

    async def find_all(
        self, skip: int | None = None, take: int | None = None
    ) -> list[Product]:
        query = select(ProductRecord).order_by(ProductRecord.created_at.desc())
        if skip is not None:
            query = query.offset(skip)
        if take is not None:
            query = query.limit(take)
        async with store_errors(self._session, "query"):
            result = await self._session.execute(query)
            rows = result.scalars().all()
        return [self._to_domain(row) for row in rows]

    async def update(self, product_id: str, changes: dict[str, Any]) -> Product:
        row = await self._get_row(product_id)
        async with store_errors(self._session, "update"):
            for field, value in changes.items():
                setattr(row, field, value)
            await self._session.commit()
            await self._session.refresh(row)
        return self._to_domain(row)

    async def delete(self, product_id: str) -> Product:
        row = await self._get_row(product_id)
        product = self._to_domain(row)
        async with store_errors(self._session, "delete"):
            await self._session.delete(row)
            await self._session.commit()
        return product

    # --- Helpers --------------------------------------------------------------

    async def _get_row(self, product_id: str) -> ProductRecord:
        async with store_errors(self._session, "query"):
            row = await self._session.get(ProductRecord, product_id)
        if row is None:
            raise EntityNotFoundError("Product", product_id)
        return row

    @staticmethod
    def _to_domain(row: ProductRecord) -> Product:
        return Product.reconstitute({
            "id": row.id,
            "name": row.name,
            "description": row.description,
            "price": row.price,
            "stock": row.stock,
            "created_at": row.created_at,
            "updated_at": row.updated_at,
        })
