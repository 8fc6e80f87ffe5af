"""Commands: intents to change state, each handled by exactly one handler.

Values are expected to be checked at the boundary (HTTP schemas, CLI
options) before a command is built; the entities re-check invariants.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CreateProductCommand:
    name: str
    price: float
    description: str | None = None
    stock: int = 0


@dataclass(frozen=True)
class UpdateProductCommand:
    """Partial update: ``changes`` holds only the fields the caller sent.

    An explicit ``None`` description clears it; an absent key leaves the
    field untouched.
    """

    product_id: str
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteProductCommand:
    product_id: str


@dataclass(frozen=True)
class AdjustProductStockCommand:
    product_id: str
    delta: int


@dataclass(frozen=True)
class CreateOrderCommand:
    customer_name: str
    product_id: str
    quantity: int


@dataclass(frozen=True)
class UpdateOrderCommand:
    order_id: str
    status: str
