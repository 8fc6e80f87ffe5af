"""Application service: Create Product use case."""

from __future__ import annotations

import logging

from storefront.application.commands import CreateProductCommand
from storefront.application.dto import ProductDTO
from storefront.application.mappers import product_to_dto
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, command: CreateProductCommand) -> ProductDTO:
        """Validate and add a new product to the catalog."""
        new_product = Product.create(
            name=command.name,
            price=command.price,
            description=command.description,
            stock=command.stock,
        )
        product = await self._product_repo.create(new_product)
        logger.info(
            f"Product {product.id} created",
            extra={"entity": "Product", "entity_id": product.id},
        )
        return product_to_dto(product)
