"""Tests for the order update and query use cases."""

import dataclasses

import pytest

from storefront.application.commands import UpdateOrderCommand
from storefront.application.get_order import GetOrderHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.queries import GetOrderQuery, ListOrdersQuery
from storefront.application.update_order import UpdateOrderHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import Order, OrderLineItem, serialize_line_items
from tests.fakes import FakeOrderRepository

MISSING_ID = "00000000-0000-4000-8000-000000000000"


async def _place(repo: FakeOrderRepository, customer: str = "Alice") -> Order:
    item = OrderLineItem(product_id="p-1", product_name="Widget", price=50.0, quantity=2)
    return await repo.create(
        Order.create(customer, 100.0, items=serialize_line_items([item]))
    )


class TestUpdateOrder:

    async def test_complete_order_keeps_other_fields(self):
        repo = FakeOrderRepository()
        order = await _place(repo)
        dto = await UpdateOrderHandler(repo).handle(
            UpdateOrderCommand(order.id, "completed")
        )
        assert dto.status == "completed"
        assert dto.customer_name == order.customer_name
        assert dto.total_amount == order.total_amount
        assert len(dto.items) == 1
        assert dto.created_at == order.created_at

    async def test_writes_the_validated_status_only(self):
        repo = FakeOrderRepository()
        order = await _place(repo)
        await UpdateOrderHandler(repo).handle(UpdateOrderCommand(order.id, "completed"))
        assert repo.last_changes == {"status": "completed"}

    async def test_cancelled_may_return_to_pending(self):
        repo = FakeOrderRepository()
        order = await _place(repo)
        handler = UpdateOrderHandler(repo)
        await handler.handle(UpdateOrderCommand(order.id, "cancelled"))
        dto = await handler.handle(UpdateOrderCommand(order.id, "pending"))
        assert dto.status == "pending"

    async def test_invalid_status_is_not_written(self):
        repo = FakeOrderRepository()
        order = await _place(repo)
        with pytest.raises(ValidationError, match="Order status must be one of"):
            await UpdateOrderHandler(repo).handle(UpdateOrderCommand(order.id, "shipped"))
        assert (await repo.find_by_id(order.id)).status == "pending"

    async def test_missing_order(self):
        handler = UpdateOrderHandler(FakeOrderRepository())
        with pytest.raises(EntityNotFoundError, match=f"Order with ID {MISSING_ID} not found"):
            await handler.handle(UpdateOrderCommand(MISSING_ID, "completed"))


class TestOrderQueries:

    async def test_get_order(self):
        repo = FakeOrderRepository()
        order = await _place(repo)
        dto = await GetOrderHandler(repo).handle(GetOrderQuery(order.id))
        assert dto.id == order.id
        assert dto.items[0].product_name == "Widget"

    async def test_get_missing_order(self):
        with pytest.raises(EntityNotFoundError):
            await GetOrderHandler(FakeOrderRepository()).handle(GetOrderQuery(MISSING_ID))

    async def test_list_pages_newest_first(self):
        repo = FakeOrderRepository()
        placed = [await _place(repo, customer=f"Customer {i}") for i in range(10)]
        newest_first = list(reversed(placed))

        dtos = await ListOrdersHandler(repo).handle(ListOrdersQuery(skip=3, take=4))

        assert [d.id for d in dtos] == [o.id for o in newest_first[3:7]]

    async def test_list_without_paging_returns_all(self):
        repo = FakeOrderRepository()
        for i in range(3):
            await _place(repo, customer=f"Customer {i}")
        assert len(await ListOrdersHandler(repo).handle(ListOrdersQuery())) == 3

    async def test_skip_past_end(self):
        repo = FakeOrderRepository()
        await _place(repo)
        assert await ListOrdersHandler(repo).handle(ListOrdersQuery(skip=5)) == []

    async def test_corrupted_items_blob_propagates(self):
        repo = FakeOrderRepository()
        order = await _place(repo)
        repo._store[order.id] = dataclasses.replace(order, items="{broken")
        with pytest.raises(ValueError):
            await GetOrderHandler(repo).handle(GetOrderQuery(order.id))
