"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from pos.application.add_product import AddProductHandler
from pos.application.delete_product import DeleteProductHandler
from pos.application.dto import ProductSpec
from pos.application.edit_product import EditProductHandler
from pos.domain.exceptions import DomainException, DuplicateCodeError
from pos.domain.model.catalog import Catalog
from pos.infrastructure.bootstrap import catalog_repository
from pos.infrastructure.config import Settings


def _raise_for(exc: DomainException) -> None:
    if isinstance(exc, DuplicateCodeError):
        raise click.BadParameter(str(exc), param_hint=f"--{exc.field}")
    raise click.ClickException(str(exc))


@click.command("add")
@click.option("--code", required=True, help="Product / barcode code (e.g. MT-001).")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Selling price (e.g. 130.00).")
@click.option("--cost", "cost_price", required=True, help="Cost price (e.g. 110.00).")
@click.option("--stock", type=int, default=0, show_default=True, help="Opening stock.")
@click.pass_obj
def product_add(
    settings: Settings, code: str, name: str, price: str, cost_price: str, stock: int
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(catalog_repo=catalog_repository(settings))

    try:
        product = handler.handle(
            ProductSpec(code=code, name=name, price=price, cost_price=cost_price, stock=stock)
        )
    except DomainException as exc:
        _raise_for(exc)

    click.echo(
        f"Product #{product.id} {product.code} '{product.name}' added at "
        f"{settings.money(product.price)} ({product.stock} in stock)"
    )


@click.command("list")
@click.option("--search", default=None, help="Filter by name or code.")
@click.pass_obj
def product_list(settings: Settings, search: str | None) -> None:
    """List products in the catalog."""
    catalog = Catalog.of(catalog_repository(settings).load())
    products = catalog.search(search)

    if not products:
        click.echo("No products found." if len(catalog) else "The catalog is empty.")
        return

    click.echo(f"{'ID':<6} {'Code':<12} {'Name':<20} {'Price':>12} {'Cost':>12} {'Stock':>6}")
    click.echo("-" * 73)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.code:<12} {p.name:<20} {settings.money(p.price):>12} "
            f"{settings.money(p.cost_price):>12} {p.stock:>6}"
        )


@click.command("edit")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--code", default=None, help="New code.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New selling price.")
@click.option("--cost", "cost_price", default=None, help="New cost price.")
@click.option("--stock", type=int, default=None, help="Corrected stock level.")
@click.pass_obj
def product_edit(
    settings: Settings,
    product_id: str,
    code: str | None,
    name: str | None,
    price: str | None,
    cost_price: str | None,
    stock: int | None,
) -> None:
    """Edit a product's details."""
    handler = EditProductHandler(catalog_repo=catalog_repository(settings))

    try:
        product = handler.handle(
            product_id,
            code=code,
            name=name,
            price=price,
            cost_price=cost_price,
            stock=stock,
        )
    except DomainException as exc:
        _raise_for(exc)

    click.echo(f"Product #{product.id} {product.code} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Delete this product?")
@click.pass_obj
def product_delete(settings: Settings, product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(catalog_repo=catalog_repository(settings))

    try:
        removed = handler.handle(product_id)
    except DomainException as exc:
        _raise_for(exc)

    click.echo(f"Product #{removed.id} {removed.code} '{removed.name}' deleted")
