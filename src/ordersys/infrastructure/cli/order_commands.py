"""CLI commands for quoting and placing orders."""

from __future__ import annotations

import click

from ordersys.application.dto import OrderItemSpec, PricingDTO
from ordersys.application.place_order import PlaceOrderHandler
from ordersys.application.quote_cart import QuoteCartHandler
from ordersys.domain.exceptions import DomainException
from ordersys.infrastructure.bootstrap import order_service, product_catalog


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'P001:3,P002:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'.",
                param_hint="--items",
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'.",
                param_hint="--items",
            )
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_pricing(pricing: PricingDTO) -> None:
    click.echo(f"  {'Items':<20} {pricing.total_items:>12}")
    click.echo(f"  {'Subtotal':<20} {pricing.subtotal:>12}")
    click.echo(f"  {'Bulk discount':<20} {'-' + pricing.bulk_discount:>12}")
    click.echo(f"  {'Coupon discount':<20} {'-' + pricing.coupon_discount:>12}")
    click.echo(f"  {'Shipping':<20} {pricing.shipping:>12}")
    click.echo(f"  {'-'*33}")
    click.echo(f"  {'Total':<20} {pricing.total:>12}")


@click.command("quote")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--coupon", default=None, help="Coupon code (SAVE10, FREESHIP).")
@click.pass_obj
def order_quote(obj: dict, items: str, coupon: str | None) -> None:
    """Price a cart without reserving stock."""
    specs = _parse_items(items)

    try:
        handler = QuoteCartHandler(product_catalog(obj["catalog_path"]))
        pricing = handler.handle(specs, coupon)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Quote")
    _display_pricing(pricing)


@click.command("place")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--coupon", default=None, help="Coupon code (SAVE10, FREESHIP).")
@click.pass_obj
def order_place(obj: dict, items: str, coupon: str | None) -> None:
    """Validate, price and reserve stock for an order (not persisted)."""
    specs = _parse_items(items)

    try:
        catalog = product_catalog(obj["catalog_path"])
        handler = PlaceOrderHandler(catalog, order_service(catalog))
        dto = handler.handle(specs, coupon)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order placed  (total={dto.total})")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Stock left':>11}")
    click.echo(f"  {'-'*38}")
    for line in dto.lines:
        click.echo(f"  {line.product_name:<20} {line.quantity:>5} {line.remaining_stock:>11}")
    click.echo()
    _display_pricing(dto.pricing)
