"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from storefront.domain.model.order import NewOrder, Order


class OrderRepository(ABC):

    @abstractmethod
    async def create(self, order: NewOrder) -> Order:
        """Store a new order; the store assigns its ID and timestamps."""

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Order:
        """Return an order by its ID or raise EntityNotFoundError."""

    @abstractmethod
    async def find_all(
        self, skip: int | None = None, take: int | None = None
    ) -> list[Order]:
        """Return orders, newest first, optionally paginated."""

    @abstractmethod
    async def update(self, order_id: str, changes: dict[str, Any]) -> Order:
        """Apply a partial update; raise EntityNotFoundError if missing."""

    @abstractmethod
    async def delete(self, order_id: str) -> Order:
        """Remove an order and return it; raise EntityNotFoundError if missing."""
