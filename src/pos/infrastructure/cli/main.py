from pathlib import Path

import click

from pos.domain.service.low_stock_monitor import LOW_STOCK_THRESHOLD
from pos.infrastructure.cli.inventory_commands import (
    inventory_add_stock,
    inventory_low,
    inventory_show,
)
from pos.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_edit,
    product_list,
)
from pos.infrastructure.cli.report_commands import report
from pos.infrastructure.cli.sale_commands import sale_history, sale_show
from pos.infrastructure.cli.sell_commands import sell
from pos.infrastructure.config import DEFAULT_CURRENCY_SYMBOL, DEFAULT_DATA_DIR, Settings
from pos.infrastructure.logging_config import configure_logging, level_for_verbosity


@click.group()
@click.option(
    "--data-dir",
    envvar="POS_DATA_DIR",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    show_default=True,
    help="Directory holding products.json and sales.json.",
)
@click.option(
    "--low-stock-threshold",
    envvar="POS_LOW_STOCK_THRESHOLD",
    type=click.IntRange(min=0),
    default=LOW_STOCK_THRESHOLD,
    show_default=True,
    help="Stock level at or below which a product needs restocking.",
)
@click.option(
    "--currency-symbol",
    envvar="POS_CURRENCY",
    default=DEFAULT_CURRENCY_SYMBOL,
    show_default=True,
    help="Symbol printed in front of amounts.",
)
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug).")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also append log records to this file.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    data_dir: Path,
    low_stock_threshold: int,
    currency_symbol: str,
    verbose: int,
    log_file: Path | None,
) -> None:
    """POS — single-register point of sale"""
    configure_logging(level_for_verbosity(verbose), log_file)
    ctx.obj = Settings(
        data_dir=data_dir,
        low_stock_threshold=low_stock_threshold,
        currency_symbol=currency_symbol,
    )


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def inventory() -> None:
    """Manage stock levels."""


@cli.group()
def sale() -> None:
    """Browse completed sales."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_edit)
product.add_command(product_list)
inventory.add_command(inventory_add_stock)
inventory.add_command(inventory_low)
inventory.add_command(inventory_show)
sale.add_command(sale_history)
sale.add_command(sale_show)
cli.add_command(report)
cli.add_command(sell)
