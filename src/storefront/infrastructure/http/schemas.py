"""HTTP schemas: pydantic models for request validation and responses.

Invariants:
    - JSON on the wire is camelCase (alias generator); Python code uses
      snake_case field names (populate_by_name)
    - Request models reject what the boundary can see (blank names,
      negative or non-finite prices, quantity < 1, unknown status);
      the domain entities re-check their own invariants regardless
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.domain.model.invariants import MAX_NAME_LENGTH
from storefront.domain.model.order import OrderStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- Products -----------------------------------------------------------------

class ProductCreate(CamelModel):
    """Product creation: stock defaults to 0, description to null."""
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    description: str | None = None
    price: float = Field(ge=0, allow_inf_nan=False)
    stock: int = Field(0, ge=0)


class ProductUpdate(CamelModel):
    """Partial product update: only the fields sent are changed."""
    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    description: str | None = None
    price: float | None = Field(None, ge=0, allow_inf_nan=False)
    stock: int | None = Field(None, ge=0)


class ProductResponse(CamelModel):
    id: str
    name: str
    description: str | None = None
    price: float
    stock: int
    created_at: datetime
    updated_at: datetime


# --- Orders -------------------------------------------------------------------

class OrderCreate(CamelModel):
    customer_name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    product_id: UUID
    quantity: int = Field(ge=1)


class OrderUpdate(CamelModel):
    status: OrderStatus


class OrderLineItemResponse(CamelModel):
    product_id: str
    product_name: str
    price: float
    quantity: int


class OrderResponse(CamelModel):
    id: str
    customer_name: str
    total_amount: float
    status: str
    items: list[OrderLineItemResponse]
    created_at: datetime
    updated_at: datetime
