"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.commands import (
    AdjustProductStockCommand,
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from storefront.application.dto import ProductDTO
from storefront.application.queries import GetProductQuery, ListProductsQuery
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.runtime import run


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Description: {dto.description or '-'}")
    click.echo(f"Price:       {dto.price:.2f}")
    click.echo(f"Stock:       {dto.stock}")
    click.echo(f"Created:     {dto.created_at}")
    click.echo(f"Updated:     {dto.updated_at}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=float, help="Price (e.g. 15.00).")
@click.option("--description", default=None, help="Optional description.")
@click.option("--stock", default=0, type=click.IntRange(min=0), help="Units in stock.")
def product_add(name: str, price: float, description: str | None, stock: int) -> None:
    """Add a new product to the catalog."""
    command = CreateProductCommand(
        name=name, price=price, description=description, stock=stock
    )
    dto = run(lambda session: bootstrap.create_product_handler(session).handle(command))

    click.echo(f"Product {dto.id} '{dto.name}' added at {dto.price:.2f}")


@click.command("list")
@click.option("--skip", default=None, type=click.IntRange(min=0), help="Rows to skip.")
@click.option("--take", default=None, type=click.IntRange(min=1), help="Rows to return.")
def product_list(skip: int | None, take: int | None) -> None:
    """List products in the catalog, newest first."""
    query = ListProductsQuery(skip=skip, take=take)
    products = run(lambda session: bootstrap.list_products_handler(session).handle(query))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 77)
    for p in products:
        click.echo(f"{p.id:<36}  {p.name:<20} {p.price:>10.2f} {p.stock:>7}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show details of a product."""
    query = GetProductQuery(product_id)
    dto = run(lambda session: bootstrap.get_product_handler(session).handle(query))
    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, type=float, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=click.IntRange(min=0), help="New stock level.")
def product_update(
    product_id: str,
    name: str | None,
    description: str | None,
    price: float | None,
    stock: int | None,
) -> None:
    """Update one or more fields of a product."""
    options = {"name": name, "description": description, "price": price, "stock": stock}
    changes = {field: value for field, value in options.items() if value is not None}
    if not changes:
        raise click.UsageError("Nothing to update: pass at least one field.")

    command = UpdateProductCommand(product_id=product_id, changes=changes)
    dto = run(lambda session: bootstrap.update_product_handler(session).handle(command))

    click.echo(f"Product {dto.id} updated")
    _display_product(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog. Existing orders are kept."""
    command = DeleteProductCommand(product_id)
    dto = run(lambda session: bootstrap.delete_product_handler(session).handle(command))

    click.echo(f"Product {dto.id} '{dto.name}' deleted")


@click.command("restock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--delta", required=True, type=int, help="Units to add (negative to remove).")
def product_restock(product_id: str, delta: int) -> None:
    """Adjust a product's stock level by a relative amount."""
    command = AdjustProductStockCommand(product_id=product_id, delta=delta)
    dto = run(lambda session: bootstrap.adjust_stock_handler(session).handle(command))

    click.echo(f"Product {dto.id} stock is now {dto.stock}")
