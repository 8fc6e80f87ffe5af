"""Application service: List Products use case (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.mappers import products_to_dtos
from storefront.application.queries import ListProductsQuery
from storefront.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, query: ListProductsQuery) -> list[ProductDTO]:
        """Return products newest first, honouring optional skip/take."""
        products = await self._product_repo.find_all(
            skip=query.skip, take=query.take
        )
        return products_to_dtos(products)
