"""Application service: List Orders use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.mappers import orders_to_dtos
from storefront.application.queries import ListOrdersQuery
from storefront.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    async def handle(self, query: ListOrdersQuery) -> list[OrderDTO]:
        """Return orders newest first, honouring optional skip/take."""
        orders = await self._order_repo.find_all(skip=query.skip, take=query.take)
        return orders_to_dtos(orders)
