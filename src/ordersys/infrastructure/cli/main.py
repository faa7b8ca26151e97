from pathlib import Path

import click

from ordersys.infrastructure.bootstrap import DEFAULT_CATALOG_PATH
from ordersys.infrastructure.cli.catalog_commands import catalog_list
from ordersys.infrastructure.cli.order_commands import order_place, order_quote
from ordersys.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CATALOG_PATH,
    envvar="ORDERSYS_CATALOG",
    show_default=True,
    help="JSON file the product catalog is loaded from.",
)
@click.option("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, ...).")
@click.pass_context
def cli(ctx: click.Context, catalog_path: Path, log_level: str | None) -> None:
    """ordersys — catalog, cart pricing and order placement"""
    configure_logging(log_level)
    ctx.obj = {"catalog_path": catalog_path}


@cli.group()
def catalog() -> None:
    """Inspect the product catalog."""


@cli.group()
def order() -> None:
    """Price and place orders."""


# Register subcommands
catalog.add_command(catalog_list)
order.add_command(order_quote)
order.add_command(order_place)
