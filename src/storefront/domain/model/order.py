"""Order aggregate.

An order records who bought what, and for how much, at the moment it was
placed. Its line items are a snapshot of the product (identity, name and
price) stored as a JSON blob; later product changes never reach it.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.invariants import check_amount, check_name


class OrderStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


ORDER_STATUSES = tuple(status.value for status in OrderStatus)


def _check_status(status: object) -> None:
    if status not in ORDER_STATUSES:
        raise ValidationError(
            f"Order status must be one of: {', '.join(ORDER_STATUSES)}"
        )


def _validate(customer_name: object, total_amount: object, status: object) -> None:
    check_name(customer_name, "Customer name")
    check_amount(total_amount, "Order total amount")
    _check_status(status)


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the product as it was when the order was placed."""

    product_id: str
    product_name: str
    price: float  # locked at order-creation time
    quantity: int

    def to_record(self) -> dict[str, Any]:
        return {
            "productId": self.product_id,
            "productName": self.product_name,
            "price": self.price,
            "quantity": self.quantity,
        }

    @staticmethod
    def from_record(raw: Mapping[str, Any]) -> OrderLineItem:
        return OrderLineItem(
            product_id=raw["productId"],
            product_name=raw["productName"],
            price=raw["price"],
            quantity=raw["quantity"],
        )


def serialize_line_items(items: Iterable[OrderLineItem]) -> str:
    """Encode line items into the blob stored on the order."""
    return json.dumps([item.to_record() for item in items])


def parse_line_items(blob: str) -> list[OrderLineItem]:
    """Decode the stored blob.

    Malformed JSON raises ``json.JSONDecodeError`` and a malformed item
    raises ``KeyError``; stored data is never silently dropped.
    """
    return [OrderLineItem.from_record(raw) for raw in json.loads(blob)]


@dataclass(frozen=True)
class NewOrder:
    """Validated attributes of an order that has not been stored yet."""

    customer_name: str
    total_amount: float
    status: str
    items: str


@dataclass(frozen=True)
class Order:
    """Aggregate root for purchase orders.

    Use ``Order.create()`` to validate a new order before it is stored and
    ``Order.reconstitute()`` to load one; both enforce the same invariants.
    """

    id: str
    customer_name: str
    total_amount: float
    status: str
    items: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        _validate(self.customer_name, self.total_amount, self.status)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(
        customer_name: str,
        total_amount: float,
        status: str = OrderStatus.PENDING.value,
        items: str = "[]",
    ) -> NewOrder:
        """Validate a new order, defaulting to ``pending`` with no items."""
        _validate(customer_name, total_amount, status)
        return NewOrder(
            customer_name=customer_name,
            total_amount=total_amount,
            status=status,
            items=items,
        )

    @classmethod
    def reconstitute(cls, record: Mapping[str, Any]) -> Order:
        """Rebuild an order from a persisted record, re-checking invariants."""
        return cls(
            id=record["id"],
            customer_name=record["customer_name"],
            total_amount=record["total_amount"],
            status=record["status"],
            items=record["items"],
            created_at=record["created_at"],
            updated_at=record["updated_at"],
        )

    # --- State transitions ----------------------------------------------------

    def update_status(self, status: str) -> Order:
        """Move to any valid status, including the current one."""
        _check_status(status)
        return dataclasses.replace(
            self, status=status, updated_at=datetime.now(timezone.utc)
        )

    # --- Computed properties --------------------------------------------------

    @property
    def line_items(self) -> list[OrderLineItem]:
        return parse_line_items(self.items)
