"""Application service: Get Product use case (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.mappers import product_to_dto
from storefront.application.queries import GetProductQuery
from storefront.domain.repository.product_repository import ProductRepository


class GetProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, query: GetProductQuery) -> ProductDTO:
        product = await self._product_repo.find_by_id(query.product_id)
        return product_to_dto(product)
