"""OrderResult — the immutable outcome of a successful order."""

from __future__ import annotations

from dataclasses import dataclass, field

from ordersys.domain.model.pricing import PricingResult
from ordersys.domain.model.value_objects import Money


@dataclass(frozen=True)
class OrderResult:
    """Total charged plus the quantities reserved per product.

    ``items`` is copied on construction, so it is independent of the
    cart (or any other mapping) it was built from.
    """

    total: Money
    items: dict[str, int]
    pricing: PricingResult = field(compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", dict(self.items))

    @property
    def total_items(self) -> int:
        return sum(self.items.values())

    def __str__(self) -> str:
        return f"OrderResult(total={self.total}, items={self.items})"
