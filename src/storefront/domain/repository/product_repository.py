"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live in the
infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from storefront.domain.model.product import NewProduct, Product


class ProductRepository(ABC):

    @abstractmethod
    async def create(self, product: NewProduct) -> Product:
        """Store a new product; the store assigns its ID and timestamps."""

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Product:
        """Return a product by its ID or raise EntityNotFoundError."""

    @abstractmethod
    async def find_all(
        self, skip: int | None = None, take: int | None = None
    ) -> list[Product]:
        """Return products, newest first, optionally paginated."""

    @abstractmethod
    async def update(self, product_id: str, changes: dict[str, Any]) -> Product:
        """Apply a partial update; raise EntityNotFoundError if missing."""

    @abstractmethod
    async def delete(self, product_id: str) -> Product:
        """Remove a product and return it; raise EntityNotFoundError if missing."""
