"""Domain service: Pricing.

Turns a cart and an optional coupon into a PricingResult.  The engine
holds no state and never touches stock, so one instance can be shared.

Rules:
- bulk discount of 5% of the subtotal once the cart holds 5+ items
- ``SAVE10`` takes 10% off the subtotal
- ``FREESHIP`` waives the standard shipping charge
- both discounts are computed against the original subtotal
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from ordersys.domain.model.cart import Cart
from ordersys.domain.model.pricing import (
    Coupon,
    FreeShipping,
    NoCoupon,
    PercentageOff,
    PricingResult,
    parse_coupon,
)
from ordersys.domain.model.value_objects import Money

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Constants for pricing rules
# ---------------------------------------------------------------------------
BULK_DISCOUNT_THRESHOLD = 5
BULK_DISCOUNT_RATE = Decimal("0.05")
STANDARD_SHIPPING = Money(Decimal("10.00"))
FREE_SHIPPING = Money(Decimal("0.00"))


class PricingEngine:

    def calculate(self, cart: Cart, coupon: Coupon | str | None = None) -> PricingResult:
        if coupon is None or isinstance(coupon, str):
            coupon = parse_coupon(coupon)

        subtotal = cart.subtotal
        total_items = cart.total_items

        if total_items >= BULK_DISCOUNT_THRESHOLD:
            bulk_discount = subtotal * BULK_DISCOUNT_RATE
        else:
            bulk_discount = Money.zero()

        coupon_discount = Money.zero()
        shipping = STANDARD_SHIPPING

        if isinstance(coupon, PercentageOff):
            coupon_discount = subtotal * coupon.rate
        elif isinstance(coupon, FreeShipping):
            shipping = FREE_SHIPPING
        elif not isinstance(coupon, NoCoupon):
            raise TypeError(f"Unsupported coupon type: {type(coupon).__name__}")

        result = PricingResult.create(
            subtotal=subtotal,
            bulk_discount=bulk_discount,
            coupon_discount=coupon_discount,
            shipping=shipping,
        )
        logger.debug(
            "Cart priced",
            total_items=total_items,
            coupon=type(coupon).__name__,
            total=str(result.total),
        )
        return result
