"""Pricing value objects: coupons and the priced breakdown of a cart.

Coupons form a closed set of variants rather than free-form strings.
``parse_coupon`` is the only place a code is interpreted; codes it does
not recognise (including ``None`` and ``""``) mean no coupon at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from ordersys.domain.model.value_objects import Money


@dataclass(frozen=True)
class NoCoupon:
    pass


@dataclass(frozen=True)
class PercentageOff:
    """Discount a fraction of the subtotal, e.g. ``Decimal("0.10")``."""

    rate: Decimal


@dataclass(frozen=True)
class FreeShipping:
    pass


Coupon = Union[NoCoupon, PercentageOff, FreeShipping]

COUPON_CODES: dict[str, Coupon] = {
    "SAVE10": PercentageOff(Decimal("0.10")),
    "FREESHIP": FreeShipping(),
}


def parse_coupon(code: str | None) -> Coupon:
    """Map a coupon code to its variant (exact, case-sensitive match)."""
    if not code:
        return NoCoupon()
    return COUPON_CODES.get(code, NoCoupon())


@dataclass(frozen=True)
class PricingResult:
    """Priced breakdown of a cart.

    ``create`` rounds the subtotal and both discounts to cents, carries
    ``shipping`` as given, and derives ``total`` from those rounded parts,
    so the breakdown always adds up to the total shown.
    """

    subtotal: Money
    bulk_discount: Money
    coupon_discount: Money
    shipping: Money
    total: Money

    @staticmethod
    def create(
        subtotal: Money,
        bulk_discount: Money,
        coupon_discount: Money,
        shipping: Money,
    ) -> PricingResult:
        subtotal = subtotal.rounded()
        bulk_discount = bulk_discount.rounded()
        coupon_discount = coupon_discount.rounded()
        total = subtotal - bulk_discount - coupon_discount + shipping
        return PricingResult(
            subtotal=subtotal,
            bulk_discount=bulk_discount,
            coupon_discount=coupon_discount,
            shipping=shipping,
            total=total.rounded(),
        )

    def __str__(self) -> str:
        return (
            f"subtotal={self.subtotal} bulk_discount={self.bulk_discount} "
            f"coupon_discount={self.coupon_discount} shipping={self.shipping} "
            f"total={self.total}"
        )
