"""Domain service: Order creation.

Coordinates the cart, the pricing engine and the catalog's stock
primitives.  ``reserve_stock`` is only atomic per product, so order
creation runs in two passes:

  Pass 1 — validate: every cart line must fit in *current* stock.
           Fails before anything is mutated.
  Pass 2 — commit: price the cart, then reserve every line.

Under single-threaded use pass 2 cannot fail, so stock is either fully
reserved or left untouched.  Running this against a shared catalog from
several threads would need a lock around both passes.
"""

from __future__ import annotations

import structlog

from ordersys.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from ordersys.domain.model.cart import Cart
from ordersys.domain.model.catalog import ProductCatalog
from ordersys.domain.model.order import OrderResult
from ordersys.domain.model.pricing import Coupon
from ordersys.domain.service.pricing_engine import PricingEngine

logger = structlog.get_logger(__name__)


class OrderService:

    def __init__(self, catalog: ProductCatalog, pricing_engine: PricingEngine | None = None) -> None:
        self._catalog = catalog
        self._pricing_engine = pricing_engine or PricingEngine()

    def create_order(self, cart: Cart, coupon: Coupon | str | None = None) -> OrderResult:
        """Validate, price and reserve stock for every item in the cart."""
        if cart.is_empty:
            raise ValidationError("Cannot create an order from an empty cart")

        items = cart.items

        # Pass 1: validate every line against current stock
        for product_id, qty in items.items():
            product = self._catalog.get_product(product_id)
            if qty > product.stock:
                logger.warning(
                    "Order rejected",
                    product_id=product_id,
                    requested=qty,
                    available=product.stock,
                )
                raise InsufficientStockError(product.id, qty, product.stock, product.name)

        pricing = self._pricing_engine.calculate(cart, coupon)

        # Pass 2: commit reservations
        for product_id, qty in items.items():
            self._catalog.reserve_stock(product_id, qty)

        order = OrderResult(total=pricing.total, items=items, pricing=pricing)
        logger.info(
            "Order created",
            total=str(order.total),
            lines=len(order.items),
            total_items=order.total_items,
        )
        return order

    def cancel_order(self, order: OrderResult) -> None:
        """Release every reserved quantity of a previously created order.

        All product ids are checked before any stock is released.
        """
        for product_id in order.items:
            if product_id not in self._catalog:
                raise EntityNotFoundError(f"Product not found: '{product_id}'")

        for product_id, qty in order.items.items():
            self._catalog.release_stock(product_id, qty)

        logger.info("Order cancelled", total=str(order.total), lines=len(order.items))
