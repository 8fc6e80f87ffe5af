"""Application service: Adjust Product Stock use case.

Adds (or, with a negative delta, removes) units of stock. The Product
aggregate refuses any adjustment that would leave stock below zero.
"""

from __future__ import annotations

import logging

from storefront.application.commands import AdjustProductStockCommand
from storefront.application.dto import ProductDTO
from storefront.application.mappers import product_to_dto
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AdjustProductStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, command: AdjustProductStockCommand) -> ProductDTO:
        existing = await self._product_repo.find_by_id(command.product_id)
        adjusted = existing.update_stock(command.delta)

        product = await self._product_repo.update(
            command.product_id, {"stock": adjusted.stock}
        )
        logger.info(
            f"Product {product.id} stock {existing.stock} -> {product.stock}",
            extra={"entity": "Product", "entity_id": product.id},
        )
        return product_to_dto(product)
