"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices and stock change, products are added and removed from the catalog.
Orders never see those changes because they snapshot what they need.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.invariants import check_amount, check_count, check_name

MUTABLE_FIELDS = frozenset({"name", "description", "price", "stock"})


def _validate(name: object, price: object, stock: object) -> None:
    check_name(name, "Product name")
    check_amount(price, "Product price")
    check_count(stock, "Product stock")


@dataclass(frozen=True)
class NewProduct:
    """Validated attributes of a product that has not been stored yet."""

    name: str
    description: str | None
    price: float
    stock: int


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Instances are immutable: every change goes through a method that
    returns a new, re-validated Product with a fresh ``updated_at``.
    Construction always validates, so a Product loaded from a corrupted
    row fails loudly instead of leaking bad data.
    """

    id: str
    name: str
    description: str | None
    price: float
    stock: int
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        _validate(self.name, self.price, self.stock)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        price: float,
        description: str | None = None,
        stock: int = 0,
    ) -> NewProduct:
        """Validate a new product and fill in defaults.

        The store assigns ``id`` and the timestamps, so this returns the
        attribute bag to persist rather than a Product.
        """
        _validate(name, price, stock)
        return NewProduct(
            name=name, description=description, price=price, stock=stock
        )

    @classmethod
    def reconstitute(cls, record: Mapping[str, Any]) -> Product:
        """Rebuild a product from a persisted record, re-checking invariants."""
        return cls(
            id=record["id"],
            name=record["name"],
            description=record["description"],
            price=record["price"],
            stock=record["stock"],
            created_at=record["created_at"],
            updated_at=record["updated_at"],
        )

    # --- Changes --------------------------------------------------------------

    def update_stock(self, delta: int) -> Product:
        """Return a copy with ``stock + delta``; fails if stock goes negative."""
        return dataclasses.replace(
            self, stock=self.stock + delta, updated_at=_now()
        )

    def with_changes(self, **changes: Any) -> Product:
        """Return a copy with any of name/description/price/stock replaced."""
        unknown = set(changes) - MUTABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Cannot change product field(s): {', '.join(sorted(unknown))}"
            )
        return dataclasses.replace(self, **changes, updated_at=_now())


def _now() -> datetime:
    return datetime.now(timezone.utc)
