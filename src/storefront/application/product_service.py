"""Product lookup: the only way the Order side reads products.

Orders need exactly one thing from the catalog: a product's current data
at order-creation time. ``ProductLookup`` narrows the dependency to that
single method so order handlers never touch the product repository.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.application.dto import ProductDTO
from storefront.application.get_product import GetProductHandler
from storefront.application.queries import GetProductQuery
from storefront.domain.repository.product_repository import ProductRepository


class ProductLookup(ABC):

    @abstractmethod
    async def get_product_by_id(self, product_id: str) -> ProductDTO:
        """Return the product's current data or raise EntityNotFoundError."""


class ProductService(ProductLookup):
    """Answers product lookups through the Get Product query."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._get_product = GetProductHandler(product_repo)

    async def get_product_by_id(self, product_id: str) -> ProductDTO:
        return await self._get_product.handle(GetProductQuery(product_id))
