"""CLI commands for inventory management."""

from __future__ import annotations

import click

from pos.application.add_stock import AddStockHandler
from pos.application.dto import InventoryLineDTO
from pos.application.show_inventory import ShowInventoryHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import catalog_repository
from pos.infrastructure.config import Settings

_STATUS_LABELS = {"in_stock": "ok", "low": "LOW", "out": "OUT"}


def _display_lines(lines: list[InventoryLineDTO]) -> None:
    click.echo(f"{'ID':<6} {'Code':<12} {'Product':<20} {'Stock':>6} {'Status':>7}")
    click.echo("-" * 55)
    for line in lines:
        click.echo(
            f"{line.product_id:<6} {line.code:<12} {line.name:<20} "
            f"{line.stock:>6} {_STATUS_LABELS[line.status]:>7}"
        )


@click.command("show")
@click.option("--search", default=None, help="Filter by name or code.")
@click.pass_obj
def inventory_show(settings: Settings, search: str | None) -> None:
    """Show current stock levels."""
    handler = ShowInventoryHandler(
        catalog_repo=catalog_repository(settings),
        threshold=settings.low_stock_threshold,
    )
    lines = handler.handle(search)

    if not lines:
        click.echo("No products found.")
        return

    _display_lines(lines)
    count = handler.low_stock_count()
    if count:
        click.echo()
        click.echo(f"{count} product(s) at or below {settings.low_stock_threshold} in stock")


@click.command("low")
@click.pass_obj
def inventory_low(settings: Settings) -> None:
    """List products that need restocking, most urgent first."""
    handler = ShowInventoryHandler(
        catalog_repo=catalog_repository(settings),
        threshold=settings.low_stock_threshold,
    )
    lines = handler.low_stock()

    if not lines:
        click.echo("All products are above the low-stock threshold.")
        return

    _display_lines(lines)


@click.command("add-stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option(
    "--quantity", required=True, type=click.IntRange(min=1), help="Units received."
)
@click.pass_obj
def inventory_add_stock(settings: Settings, product_id: str, quantity: int) -> None:
    """Receive new stock for a product."""
    handler = AddStockHandler(catalog_repo=catalog_repository(settings))

    try:
        product = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {quantity} to {product.code}; stock is now {product.stock}")
