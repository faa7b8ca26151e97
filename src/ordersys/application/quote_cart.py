"""Application service: Quote Cart use case.

Prices a set of requested items without reserving any stock.
"""

from __future__ import annotations

from ordersys.application.dto import OrderItemSpec, PricingDTO
from ordersys.domain.model.cart import Cart
from ordersys.domain.model.catalog import ProductCatalog
from ordersys.domain.model.pricing import PricingResult
from ordersys.domain.service.pricing_engine import PricingEngine


def build_cart(catalog: ProductCatalog, item_specs: list[OrderItemSpec]) -> Cart:
    """Add every spec to a fresh cart; the first failing spec aborts."""
    cart = Cart(catalog)
    for spec in item_specs:
        cart.add_item(spec.product_id, spec.quantity)
    return cart


def to_pricing_dto(pricing: PricingResult, total_items: int) -> PricingDTO:
    return PricingDTO(
        subtotal=str(pricing.subtotal),
        bulk_discount=str(pricing.bulk_discount),
        coupon_discount=str(pricing.coupon_discount),
        shipping=str(pricing.shipping),
        total=str(pricing.total),
        total_items=total_items,
    )


class QuoteCartHandler:

    def __init__(
        self,
        catalog: ProductCatalog,
        pricing_engine: PricingEngine | None = None,
    ) -> None:
        self._catalog = catalog
        self._pricing_engine = pricing_engine or PricingEngine()

    def handle(self, item_specs: list[OrderItemSpec], coupon_code: str | None = None) -> PricingDTO:
        cart = build_cart(self._catalog, item_specs)
        pricing = self._pricing_engine.calculate(cart, coupon_code)
        return to_pricing_dto(pricing, cart.total_items)
