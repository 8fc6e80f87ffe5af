"""Application service: Get Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.mappers import order_to_dto
from storefront.application.queries import GetOrderQuery
from storefront.domain.repository.order_repository import OrderRepository


class GetOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    async def handle(self, query: GetOrderQuery) -> OrderDTO:
        order = await self._order_repo.find_by_id(query.order_id)
        return order_to_dto(order)
