"""Order routes: thin adapters from HTTP to order handlers.

Invariants:
    - Orders are created and have their status changed; there is no
      DELETE route
    - Every response body is an OrderResponse with parsed line items
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.commands import CreateOrderCommand, UpdateOrderCommand
from storefront.application.queries import GetOrderQuery, ListOrdersQuery
from storefront.infrastructure import bootstrap
from storefront.infrastructure.database import get_db
from storefront.infrastructure.http.schemas import (
    OrderCreate, OrderResponse, OrderUpdate,
)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "", response_model=OrderResponse, status_code=status.HTTP_201_CREATED,
)
async def create_order(body: OrderCreate, db: AsyncSession = Depends(get_db)):
    """Place an order for one product at its current price."""
    dto = await bootstrap.create_order_handler(db).handle(
        CreateOrderCommand(
            customer_name=body.customer_name,
            product_id=str(body.product_id),
            quantity=body.quantity,
        ),
    )
    return OrderResponse.model_validate(dto)


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    skip: int | None = Query(None, ge=0),
    take: int | None = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """List orders, newest first."""
    dtos = await bootstrap.list_orders_handler(db).handle(
        ListOrdersQuery(skip=skip, take=take),
    )
    return [OrderResponse.model_validate(dto) for dto in dtos]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, db: AsyncSession = Depends(get_db)):
    """Get an order by id."""
    dto = await bootstrap.get_order_handler(db).handle(GetOrderQuery(order_id))
    return OrderResponse.model_validate(dto)


@router.patch("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: str, body: OrderUpdate, db: AsyncSession = Depends(get_db),
):
    """Change an order's status."""
    dto = await bootstrap.update_order_handler(db).handle(
        UpdateOrderCommand(order_id=order_id, status=body.status.value),
    )
    return OrderResponse.model_validate(dto)
