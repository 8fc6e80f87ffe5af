"""Application service: Create Order use case.

Orchestrates the flow between the product lookup and the order
repository. This is the only place that coordinates two aggregates
(Product lookup + Order creation).
"""

from __future__ import annotations

import logging

from storefront.application.commands import CreateOrderCommand
from storefront.application.dto import OrderDTO
from storefront.application.mappers import order_to_dto
from storefront.application.product_service import ProductLookup
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import (
    Order,
    OrderLineItem,
    OrderStatus,
    serialize_line_items,
)
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_lookup: ProductLookup,
    ) -> None:
        self._order_repo = order_repo
        self._product_lookup = product_lookup

    async def handle(self, command: CreateOrderCommand) -> OrderDTO:
        """Place an order for a single product.

        Steps:
        1. Look up the product (EntityNotFoundError if it does not exist).
        2. Price the order from the product's *current* price.
        3. Snapshot one line item so later product changes never leak in.
        4. Let the Order aggregate validate, then persist and map.

        Stock is left untouched; placing an order reserves nothing.
        """
        product = await self._product_lookup.get_product_by_id(command.product_id)

        try:
            total_amount = product.price * command.quantity
        except OverflowError:
            raise ValidationError("Order total amount must be a valid number")
        line_item = OrderLineItem(
            product_id=product.id,
            product_name=product.name,
            price=product.price,  # <-- price snapshot
            quantity=command.quantity,
        )

        new_order = Order.create(
            customer_name=command.customer_name,
            total_amount=total_amount,
            status=OrderStatus.PENDING.value,
            items=serialize_line_items([line_item]),
        )
        order = await self._order_repo.create(new_order)

        logger.info(
            f"Order {order.id} created for product {product.id} "
            f"(qty={command.quantity}, total={total_amount})",
            extra={"entity": "Order", "entity_id": order.id},
        )
        return order_to_dto(order)
