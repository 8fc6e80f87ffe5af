"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from storefront.application.commands import DeleteProductCommand
from storefront.application.dto import ProductDTO
from storefront.application.mappers import product_to_dto
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, command: DeleteProductCommand) -> ProductDTO:
        product = await self._product_repo.delete(command.product_id)
        logger.info(
            f"Product {product.id} deleted",
            extra={"entity": "Product", "entity_id": product.id},
        )
        return product_to_dto(product)
