"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data from the application layer to the HTTP and CLI layers
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as returned to callers."""

    id: str
    name: str
    description: str | None
    price: float
    stock: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item snapshot."""

    product_id: str
    product_name: str
    price: float
    quantity: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order with its line items parsed."""

    id: str
    customer_name: str
    total_amount: float
    status: str
    items: list[OrderLineItemDTO]
    created_at: datetime
    updated_at: datetime
