import click

from storefront.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_set_status,
    order_show,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_restock,
    product_show,
    product_update,
)
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.observability import setup_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log each operation.")
def cli(verbose: bool) -> None:
    """Storefront — products and orders"""
    settings = get_settings()
    setup_logging("INFO" if verbose else "WARNING", settings.log_format)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("storefront.infrastructure.http.app:app", host=host, port=port)


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_restock)
product.add_command(product_show)
product.add_command(product_update)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_set_status)
order.add_command(order_show)
