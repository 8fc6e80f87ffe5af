"""Unit tests for the Order aggregate and its line-item snapshot."""

import json
import math
from datetime import datetime, timezone

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import (
    ORDER_STATUSES,
    NewOrder,
    Order,
    OrderLineItem,
    OrderStatus,
    parse_line_items,
    serialize_line_items,
)

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _item(name: str = "Widget", price: float = 100.0, qty: int = 3) -> OrderLineItem:
    """Helper to build a valid line item."""
    return OrderLineItem(
        product_id="p-1", product_name=name, price=price, quantity=qty,
    )


def _order(**overrides) -> Order:
    fields = dict(
        id="o-1", customer_name="John Doe", total_amount=300.0,
        status="pending", items=serialize_line_items([_item()]),
        created_at=T0, updated_at=T0,
    )
    fields.update(overrides)
    return Order(**fields)


class TestOrderCreation:

    def test_defaults_to_pending_with_no_items(self):
        new = Order.create(customer_name="Alice", total_amount=0)
        assert new == NewOrder(
            customer_name="Alice", total_amount=0, status="pending", items="[]",
        )

    def test_statuses(self):
        assert ORDER_STATUSES == ("pending", "completed", "cancelled")
        assert OrderStatus.PENDING == "pending"

    @pytest.mark.parametrize("status", ORDER_STATUSES)
    def test_every_known_status_accepted(self, status):
        assert Order.create("Alice", 10.0, status=status).status == status

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError, match="Order status must be one of"):
            Order.create("Alice", 10.0, status="shipped")

    @pytest.mark.parametrize("name", ["", "  ", "x" * 256])
    def test_bad_customer_name_rejected(self, name):
        with pytest.raises(ValidationError, match="Customer name"):
            Order.create(name, 10.0)

    def test_negative_total_rejected(self):
        with pytest.raises(ValidationError, match="Order total amount cannot be negative"):
            Order.create("Alice", -1.0)

    def test_non_finite_total_rejected(self):
        with pytest.raises(ValidationError, match="Order total amount must be a valid number"):
            Order.create("Alice", math.inf)


class TestOrderStatusUpdate:

    def test_any_status_may_follow_any_other(self):
        order = _order(status="cancelled")
        assert order.update_status("pending").status == "pending"

    def test_same_status_is_allowed(self):
        assert _order().update_status("pending").status == "pending"

    def test_other_fields_unchanged(self):
        order = _order()
        completed = order.update_status("completed")
        assert completed.total_amount == order.total_amount
        assert completed.items == order.items
        assert completed.customer_name == order.customer_name
        assert completed.updated_at > order.updated_at

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            _order().update_status("COMPLETED")

    def test_corrupted_record_fails_loudly(self):
        with pytest.raises(ValidationError):
            Order.reconstitute({
                "id": "o-1", "customer_name": "Alice", "total_amount": 1.0,
                "status": "lost", "items": "[]",
                "created_at": T0, "updated_at": T0,
            })


class TestLineItems:

    def test_blob_uses_camel_case_keys(self):
        blob = serialize_line_items([_item()])
        assert json.loads(blob) == [
            {"productId": "p-1", "productName": "Widget", "price": 100.0, "quantity": 3},
        ]

    def test_line_items_property_parses_blob(self):
        assert _order().line_items == [_item()]

    def test_empty_blob(self):
        assert parse_line_items("[]") == []

    def test_malformed_json_raises(self):
        with pytest.raises(json.JSONDecodeError):
            parse_line_items("{not json")

    def test_missing_key_raises(self):
        with pytest.raises(KeyError):
            parse_line_items('[{"productId": "p-1"}]')
