"""Tests for the entity -> DTO mapping functions."""

import json
from datetime import datetime, timezone

import pytest

from storefront.application.dto import OrderLineItemDTO, ProductDTO
from storefront.application.mappers import (
    order_to_dto,
    orders_to_dtos,
    product_to_dto,
    products_to_dtos,
)
from storefront.domain.model.order import Order, OrderLineItem, serialize_line_items
from storefront.domain.model.product import Product

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _product(pid: str = "p-1") -> Product:
    return Product(
        id=pid, name="Widget", description="Blue", price=15.0, stock=3,
        created_at=T0, updated_at=T0,
    )


def _order(items: str) -> Order:
    return Order.reconstitute({
        "id": "o-1", "customer_name": "Alice", "total_amount": 30.0,
        "status": "pending", "items": items, "created_at": T0, "updated_at": T0,
    })


class TestProductMapping:

    def test_copies_every_field(self):
        assert product_to_dto(_product()) == ProductDTO(
            id="p-1", name="Widget", description="Blue", price=15.0, stock=3,
            created_at=T0, updated_at=T0,
        )

    def test_list_keeps_order(self):
        dtos = products_to_dtos([_product("a"), _product("b")])
        assert [d.id for d in dtos] == ["a", "b"]


class TestOrderMapping:

    def test_line_items_survive_round_trip(self):
        item = OrderLineItem(product_id="p-1", product_name="Widget", price=15.0, quantity=2)
        dto = order_to_dto(_order(serialize_line_items([item])))
        assert dto.items == [
            OrderLineItemDTO(product_id="p-1", product_name="Widget", price=15.0, quantity=2),
        ]
        assert dto.total_amount == 30.0
        assert dto.status == "pending"

    def test_empty_items(self):
        assert order_to_dto(_order("[]")).items == []

    def test_malformed_blob_raises(self):
        with pytest.raises(json.JSONDecodeError):
            order_to_dto(_order("not json"))

    def test_empty_list(self):
        assert orders_to_dtos([]) == []
