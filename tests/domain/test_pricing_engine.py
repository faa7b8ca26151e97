"""Unit tests for the PricingEngine domain service and coupon parsing."""

from decimal import Decimal

import pytest

from ordersys.domain.model.cart import Cart
from ordersys.domain.model.pricing import (
    FreeShipping,
    NoCoupon,
    PercentageOff,
    PricingResult,
    parse_coupon,
)
from ordersys.domain.model.value_objects import Money
from ordersys.domain.service.pricing_engine import PricingEngine
from tests.fakes import make_catalog


def _cart(*lines: tuple[str, int]) -> Cart:
    catalog = make_catalog(
        ("P001", "Laptop", "1200.00", 10),
        ("P002", "Mouse", "25.00", 50),
        ("P003", "Keyboard", "75.00", 30),
        ("P004", "Monitor", "300.00", 15),
        ("P005", "USB Cable", "10.00", 100),
    )
    cart = Cart(catalog)
    for product_id, qty in lines:
        cart.add_item(product_id, qty)
    return cart


def _assert_breakdown(result: PricingResult, subtotal, bulk, coupon, shipping, total):
    assert result.subtotal == Money.of(subtotal)
    assert result.bulk_discount == Money.of(bulk)
    assert result.coupon_discount == Money.of(coupon)
    assert result.shipping == Money.of(shipping)
    assert result.total == Money.of(total)


engine = PricingEngine()


# ── Coupon parsing ───────────────────────────────────────────────────────────


class TestParseCoupon:

    def test_save10(self):
        assert parse_coupon("SAVE10") == PercentageOff(Decimal("0.10"))

    def test_freeship(self):
        assert parse_coupon("FREESHIP") == FreeShipping()

    @pytest.mark.parametrize("code", [None, "", "save10", "FreeShip", "INVALID", " SAVE10"])
    def test_everything_else_is_no_coupon(self, code):
        assert parse_coupon(code) == NoCoupon()


# ── No discounts ─────────────────────────────────────────────────────────────


class TestNoDiscounts:

    def test_base_case(self):
        result = engine.calculate(_cart(("P002", 2), ("P005", 2)), None)
        _assert_breakdown(result, "70.00", "0.00", "0.00", "10.00", "80.00")

    def test_single_item(self):
        result = engine.calculate(_cart(("P005", 1)))
        _assert_breakdown(result, "10.00", "0.00", "0.00", "10.00", "20.00")

    def test_four_items_is_below_bulk_threshold(self):
        result = engine.calculate(_cart(("P002", 4)), None)
        _assert_breakdown(result, "100.00", "0.00", "0.00", "10.00", "110.00")


# ── Bulk discount ────────────────────────────────────────────────────────────


class TestBulkDiscount:

    def test_exactly_five_items(self):
        result = engine.calculate(_cart(("P005", 5)), None)
        _assert_breakdown(result, "50.00", "2.50", "0.00", "10.00", "57.50")

    def test_six_items_across_products(self):
        result = engine.calculate(_cart(("P001", 1), ("P002", 2), ("P005", 3)), None)
        _assert_breakdown(result, "1280.00", "64.00", "0.00", "10.00", "1226.00")

    def test_high_value(self):
        result = engine.calculate(_cart(("P001", 5), ("P004", 5)), None)
        _assert_breakdown(result, "7500.00", "375.00", "0.00", "10.00", "7135.00")


# ── Coupons ──────────────────────────────────────────────────────────────────


class TestSave10:

    def test_with_bulk(self):
        result = engine.calculate(_cart(("P002", 5)), "SAVE10")
        _assert_breakdown(result, "125.00", "6.25", "12.50", "10.00", "116.25")

    def test_without_bulk(self):
        result = engine.calculate(_cart(("P003", 2)), "SAVE10")
        _assert_breakdown(result, "150.00", "0.00", "15.00", "10.00", "145.00")

    def test_discounts_are_not_compounded(self):
        result = engine.calculate(_cart(("P002", 7)), "SAVE10")
        # both 5% and 10% are taken from 175.00, not from each other's result
        _assert_breakdown(result, "175.00", "8.75", "17.50", "10.00", "158.75")

    def test_accepts_coupon_variant(self):
        result = engine.calculate(_cart(("P003", 2)), PercentageOff(Decimal("0.10")))
        assert result.coupon_discount == Money.of("15.00")


class TestFreeShip:

    def test_with_bulk(self):
        result = engine.calculate(_cart(("P003", 6)), "FREESHIP")
        _assert_breakdown(result, "450.00", "22.50", "0.00", "0.00", "427.50")

    def test_without_bulk(self):
        result = engine.calculate(_cart(("P004", 1)), "FREESHIP")
        _assert_breakdown(result, "300.00", "0.00", "0.00", "0.00", "300.00")


class TestUnrecognisedCoupons:

    @pytest.mark.parametrize("code", [None, "", "INVALID", "save10", "freeship"])
    def test_treated_as_no_coupon(self, code):
        result = engine.calculate(_cart(("P003", 2)), code)
        _assert_breakdown(result, "150.00", "0.00", "0.00", "10.00", "160.00")

    def test_no_coupon_variant(self):
        result = engine.calculate(_cart(("P003", 2)), NoCoupon())
        assert result.total == Money.of("160.00")

    def test_unknown_coupon_type_rejected(self):
        with pytest.raises(TypeError, match="Unsupported coupon"):
            engine.calculate(_cart(("P003", 2)), object())  # type: ignore[arg-type]


# ── Rounding and purity ──────────────────────────────────────────────────────


class TestRounding:

    def test_amounts_rounded_to_cents(self):
        catalog = make_catalog(("X", "Widget", "3.33", 100))
        cart = Cart(catalog)
        cart.add_item("X", 7)  # 23.31
        result = engine.calculate(cart, "SAVE10")
        # bulk 1.1655 -> 1.17, coupon 2.331 -> 2.33, total 23.31 - 1.17 - 2.33 + 10
        _assert_breakdown(result, "23.31", "1.17", "2.33", "10.00", "29.81")

    def test_total_is_sum_of_rounded_components(self):
        catalog = make_catalog(("X", "Widget", "2.02", 100))
        cart = Cart(catalog)
        cart.add_item("X", 5)  # 10.10
        result = engine.calculate(cart, "SAVE10")
        # rounding the unrounded total (18.585) would give 18.59
        _assert_breakdown(result, "10.10", "0.51", "1.01", "10.00", "18.58")
        expected = (
            result.subtotal - result.bulk_discount - result.coupon_discount + result.shipping
        ).rounded()
        assert result.total == expected

    def test_total_matches_components_for_whole_amounts(self):
        result = engine.calculate(_cart(("P001", 1), ("P003", 4)), "SAVE10")
        expected = (
            result.subtotal - result.bulk_discount - result.coupon_discount + result.shipping
        ).rounded()
        assert result.total == expected

    def test_shipping_carried_unrounded(self):
        result = engine.calculate(_cart(("P005", 1)))
        assert result.shipping.amount == Decimal("10.00")


class TestPurity:

    def test_does_not_touch_stock(self):
        cart = _cart(("P002", 5))
        before = cart.catalog.stock_levels()
        engine.calculate(cart, "SAVE10")
        assert cart.catalog.stock_levels() == before

    def test_same_input_same_output(self):
        cart = _cart(("P003", 6))
        assert engine.calculate(cart, "FREESHIP") == engine.calculate(cart, "FREESHIP")
