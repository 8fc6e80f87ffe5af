"""Product routes: thin adapters from HTTP to product handlers.

Invariants:
    - Routes build a command/query and delegate; no business logic here
    - Every response body is a ProductResponse (camelCase JSON)
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.commands import (
    CreateProductCommand, DeleteProductCommand, UpdateProductCommand,
)
from storefront.application.queries import GetProductQuery, ListProductsQuery
from storefront.infrastructure import bootstrap
from storefront.infrastructure.database import get_db
from storefront.infrastructure.http.schemas import (
    ProductCreate, ProductResponse, ProductUpdate,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.post(
    "", response_model=ProductResponse, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductCreate, db: AsyncSession = Depends(get_db),
):
    """Create a new product."""
    dto = await bootstrap.create_product_handler(db).handle(
        CreateProductCommand(
            name=body.name,
            price=body.price,
            description=body.description,
            stock=body.stock,
        ),
    )
    return ProductResponse.model_validate(dto)


@router.get("", response_model=list[ProductResponse])
async def list_products(
    skip: int | None = Query(None, ge=0),
    take: int | None = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """List products, newest first."""
    dtos = await bootstrap.list_products_handler(db).handle(
        ListProductsQuery(skip=skip, take=take),
    )
    return [ProductResponse.model_validate(dto) for dto in dtos]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, db: AsyncSession = Depends(get_db)):
    """Get a product by id."""
    dto = await bootstrap.get_product_handler(db).handle(
        GetProductQuery(product_id),
    )
    return ProductResponse.model_validate(dto)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str, body: ProductUpdate, db: AsyncSession = Depends(get_db),
):
    """Update the fields present in the body; absent fields are kept."""
    dto = await bootstrap.update_product_handler(db).handle(
        UpdateProductCommand(
            product_id=product_id,
            changes=body.model_dump(exclude_unset=True),
        ),
    )
    return ProductResponse.model_validate(dto)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_product(product_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a product. Orders keep their snapshot of it."""
    await bootstrap.delete_product_handler(db).handle(
        DeleteProductCommand(product_id),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
