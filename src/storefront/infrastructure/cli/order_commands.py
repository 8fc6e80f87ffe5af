"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.commands import CreateOrderCommand, UpdateOrderCommand
from storefront.application.dto import OrderDTO
from storefront.application.queries import GetOrderQuery, ListOrdersQuery
from storefront.domain.model.order import ORDER_STATUSES
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.runtime import run


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} "
            f"{item.price:>10.2f} {item.price * item.quantity:>10.2f}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total_amount:>20.2f}")


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--product-id", required=True, help="ID of the product to order.")
@click.option("--quantity", default=1, type=click.IntRange(min=1), help="Units to order.")
def order_create(customer: str, product_id: str, quantity: int) -> None:
    """Place an order for one product at its current price."""
    command = CreateOrderCommand(
        customer_name=customer, product_id=product_id, quantity=quantity
    )
    dto = run(lambda session: bootstrap.create_order_handler(session).handle(command))

    click.echo(f"Order {dto.id} created  (status={dto.status})")
    _display_order(dto)


@click.command("list")
@click.option("--skip", default=None, type=click.IntRange(min=0), help="Rows to skip.")
@click.option("--take", default=None, type=click.IntRange(min=1), help="Rows to return.")
def order_list(skip: int | None, take: int | None) -> None:
    """List orders, newest first."""
    query = ListOrdersQuery(skip=skip, take=take)
    orders = run(lambda session: bootstrap.list_orders_handler(session).handle(query))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<36}  {'Customer':<20} {'Status':<10} {'Total':>10}")
    click.echo("-" * 80)
    for o in orders:
        click.echo(
            f"{o.id:<36}  {o.customer_name:<20} {o.status:<10} {o.total_amount:>10.2f}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    query = GetOrderQuery(order_id)
    dto = run(lambda session: bootstrap.get_order_handler(session).handle(query))
    _display_order(dto)


@click.command("set-status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--status", required=True, type=click.Choice(ORDER_STATUSES), help="New status.")
def order_set_status(order_id: str, status: str) -> None:
    """Move an order to another status."""
    command = UpdateOrderCommand(order_id=order_id, status=status)
    dto = run(lambda session: bootstrap.update_order_handler(session).handle(command))

    click.echo(f"Order {dto.id} is now {dto.status}")
