"""Application service: Update Order use case.

Changes an order's status. Any status may follow any other; the Order
aggregate only checks that the new one is a known status.
"""

from __future__ import annotations

import logging

from storefront.application.commands import UpdateOrderCommand
from storefront.application.dto import OrderDTO
from storefront.application.mappers import order_to_dto
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    async def handle(self, command: UpdateOrderCommand) -> OrderDTO:
        existing = await self._order_repo.find_by_id(command.order_id)
        updated = existing.update_status(command.status)

        order = await self._order_repo.update(
            command.order_id, {"status": updated.status}
        )
        logger.info(
            f"Order {order.id} status {existing.status} -> {order.status}",
            extra={"entity": "Order", "entity_id": order.id},
        )
        return order_to_dto(order)
