"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import NewOrder, Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.database import store_errors
from storefront.infrastructure.persistence.models import OrderRecord


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    async def create(self, order: NewOrder) -> Order:
        row = OrderRecord(
            customer_name=order.customer_name,
            total_amount=order.total_amount,
            status=order.status,
            items=order.items,
        )
        async with store_errors(self._session, "insert"):
            self._session.add(row)
            await self._session.commit()
            await self._session.refresh(row)
        return self._to_domain(row)

    async def find_by_id(self, order_id: str) -> Order:
        return self._to_domain(await self._get_row(order_id))

    async def find_all(
        self, skip: int | None = None, take: int | None = None
    ) -> list[Order]:
        query = select(OrderRecord).order_by(OrderRecord.created_at.desc())
        if skip is not None:
            query = query.offset(skip)
        if take is not None:
            query = query.limit(take)
        async with store_errors(self._session, "query"):
            result = await self._session.execute(query)
            rows = result.scalars().all()
        return [self._to_domain(row) for row in rows]

    async def update(self, order_id: str, changes: dict[str, Any]) -> Order:
        row = await self._get_row(order_id)
        async with store_errors(self._session, "update"):
            for field, value in changes.items():
                setattr(row, field, value)
            await self._session.commit()
            await self._session.refresh(row)
        return self._to_domain(row)

    async def delete(self, order_id: str) -> Order:
        row = await self._get_row(order_id)
        order = self._to_domain(row)
        async with store_errors(self._session, "delete"):
            await self._session.delete(row)
            await self._session.commit()
        return order

    # --- Helpers --------------------------------------------------------------

    async def _get_row(self, order_id: str) -> OrderRecord:
        async with store_errors(self._session, "query"):
            row = await self._session.get(OrderRecord, order_id)
        if row is None:
            raise EntityNotFoundError("Order", order_id)
        return row

    @staticmethod
    def _to_domain(row: OrderRecord) -> Order:
        return Order.reconstitute({
            "id": row.id,
            "customer_name": row.customer_name,
            "total_amount": row.total_amount,
            "status": row.status,
            "items": row.items,
            "created_at": row.created_at,
            "updated_at": row.updated_at,
        })
