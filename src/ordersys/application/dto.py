"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str  # formatted, e.g. "$25.00"
    stock: int


@dataclass(frozen=True)
class PricingDTO:
    """Output: a priced cart as displayed to the user."""

    subtotal: str
    bulk_discount: str
    coupon_discount: str
    shipping: str
    total: str
    total_items: int


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    product_name: str
    quantity: int
    remaining_stock: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as displayed to the user."""

    total: str
    lines: list[OrderLineDTO]
    pricing: PricingDTO
