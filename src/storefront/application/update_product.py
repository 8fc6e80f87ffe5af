"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from storefront.application.commands import UpdateProductCommand
from storefront.application.dto import ProductDTO
from storefront.application.mappers import product_to_dto
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, command: UpdateProductCommand) -> ProductDTO:
        """Apply a partial update to a product.

        The merged product is validated before anything is written. This
        does NOT affect existing orders: they captured a snapshot at
        creation time.
        """
        existing = await self._product_repo.find_by_id(command.product_id)
        updated = existing.with_changes(**command.changes)

        product = await self._product_repo.update(
            command.product_id,
            {field: getattr(updated, field) for field in command.changes},
        )
        fields = ", ".join(sorted(command.changes)) or "no fields"
        logger.info(
            f"Product {product.id} updated ({fields})",
            extra={"entity": "Product", "entity_id": product.id},
        )
        return product_to_dto(product)
