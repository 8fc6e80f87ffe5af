"""Entity -> DTO mapping.

Pure functions with no side effects. Orders carry their line items as a
JSON blob; mapping parses it and lets any decoding error propagate.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.application.dto import OrderDTO, OrderLineItemDTO, ProductDTO
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        stock=product.stock,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def products_to_dtos(products: Iterable[Product]) -> list[ProductDTO]:
    return [product_to_dto(product) for product in products]


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_name=order.customer_name,
        total_amount=order.total_amount,
        status=order.status,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                price=item.price,
                quantity=item.quantity,
            )
            for item in order.line_items
        ],
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def orders_to_dtos(orders: Iterable[Order]) -> list[OrderDTO]:
    return [order_to_dto(order) for order in orders]
