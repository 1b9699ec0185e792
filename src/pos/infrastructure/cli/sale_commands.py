"""CLI commands for the sales history and receipts."""

from __future__ import annotations

import click

from pos.application.dto import SaleDTO
from pos.application.show_sales import ShowSalesHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import sales_repository
from pos.infrastructure.config import Settings


def display_receipt(dto: SaleDTO, settings: Settings) -> None:
    """Shared formatting for printing a sale as a receipt."""
    money = settings.money
    click.echo(f"Receipt #{dto.id}")
    click.echo(f"Date:    {dto.date}")
    click.echo()
    click.echo(f"  {'Item':<20} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*52}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<20} {item.quantity:>5} "
            f"{money(item.unit_price):>12} {money(item.line_total):>12}"
        )
    click.echo(f"  {'-'*52}")
    click.echo(f"  {'Total':<26} {money(dto.total):>25}")


@click.command("history")
@click.pass_obj
def sale_history(settings: Settings) -> None:
    """List all sales, newest first."""
    sales = ShowSalesHandler(sales_repo=sales_repository(settings)).list_all()

    if not sales:
        click.echo("No sales recorded yet.")
        return

    money = settings.money
    click.echo(f"{'Sale':<20} {'Date':<17} {'Items':>5} {'Total':>12} {'Profit':>12}")
    click.echo("-" * 70)
    for dto in sales:
        click.echo(
            f"{dto.id:<20} {dto.date:<17} {len(dto.items):>5} "
            f"{money(dto.total):>12} {money(dto.total_profit):>12}"
        )


@click.command("show")
@click.option("--id", "sale_id", required=True, help="Sale ID to display.")
@click.option("--profit", is_flag=True, help="Also show cost and profit.")
@click.pass_obj
def sale_show(settings: Settings, sale_id: str, profit: bool) -> None:
    """Show a completed sale as a receipt."""
    handler = ShowSalesHandler(sales_repo=sales_repository(settings))

    try:
        dto = handler.get(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_receipt(dto, settings)
    if profit:
        click.echo(f"  {'Cost':<26} {settings.money(dto.total_cost):>25}")
        click.echo(f"  {'Profit':<26} {settings.money(dto.total_profit):>25}")
