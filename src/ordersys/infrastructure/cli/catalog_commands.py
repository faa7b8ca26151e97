"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from ordersys.application.show_catalog import ShowCatalogHandler
from ordersys.domain.exceptions import DomainException
from ordersys.infrastructure.bootstrap import product_catalog


@click.command("list")
@click.pass_obj
def catalog_list(obj: dict) -> None:
    """List all products with price and stock."""
    try:
        products = ShowCatalogHandler(product_catalog(obj["catalog_path"])).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<8} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 48)
    for p in products:
        click.echo(f"{p.id:<8} {p.name:<20} {p.price:>10} {p.stock:>7}")
