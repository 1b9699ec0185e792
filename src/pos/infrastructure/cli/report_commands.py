"""CLI command for period sales reports."""

from __future__ import annotations

import click

from pos.application.show_report import ShowReportHandler
from pos.domain.service.reporting import Period
from pos.infrastructure.bootstrap import catalog_repository, sales_repository
from pos.infrastructure.config import Settings


@click.command("report")
@click.option(
    "--period",
    type=click.Choice([p.value for p in Period]),
    default=Period.DAY.value,
    show_default=True,
    help="Calendar period to report on.",
)
@click.pass_obj
def report(settings: Settings, period: str) -> None:
    """Summarize revenue and profit for today, this week or this month."""
    handler = ShowReportHandler(
        sales_repo=sales_repository(settings),
        catalog_repo=catalog_repository(settings),
    )
    result = handler.handle(Period(period))
    money = settings.money

    click.echo(f"Sales since {result.start:%Y-%m-%d %H:%M}")
    click.echo(f"  Revenue:      {money(result.summary.revenue):>14}")
    click.echo(f"  Profit:       {money(result.summary.profit):>14}")
    click.echo(f"  Transactions: {result.summary.count:>14}")

    if not result.chart:
        click.echo()
        click.echo("No sales in this period.")
        return

    click.echo()
    click.echo(f"  {'Date':<12} {'Revenue':>14} {'Profit':>14}")
    click.echo(f"  {'-'*42}")
    for bucket in result.chart:
        click.echo(
            f"  {bucket.day.isoformat():<12} {money(bucket.revenue):>14} {money(bucket.profit):>14}"
        )

    click.echo()
    click.echo("Top products by profit")
    for rank, entry in enumerate(result.top_products, start=1):
        click.echo(f"  {rank}. {entry.name:<24} {money(entry.profit):>14}")
