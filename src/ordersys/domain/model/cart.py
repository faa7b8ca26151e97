"""Cart — accumulates requested quantities per product.

The cart holds a read-only reference to the catalog.  It never owns or
mutates products; it only checks current stock when an item is added
and reads live prices when the subtotal is asked for.
"""

from __future__ import annotations

from ordersys.domain.exceptions import InsufficientStockError
from ordersys.domain.model.catalog import ProductCatalog
from ordersys.domain.model.value_objects import Money, Quantity


class Cart:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog
        self._items: dict[str, int] = {}

    @property
    def catalog(self) -> ProductCatalog:
        return self._catalog

    def add_item(self, product_id: str, quantity: int) -> None:
        """Add ``quantity`` units of a product.

        Each call is checked on its own against the product's *current*
        stock, not against stock minus what the cart already holds.
        On failure the cart is left unchanged.
        """
        qty = Quantity(quantity).value
        product = self._catalog.get_product(product_id)
        if qty > product.stock:
            raise InsufficientStockError(product.id, qty, product.stock, product.name)

        self._items[product_id] = self._items.get(product_id, 0) + qty

    @property
    def items(self) -> dict[str, int]:
        """Copy of the product id -> quantity mapping."""
        return dict(self._items)

    @property
    def total_items(self) -> int:
        return sum(self._items.values())

    @property
    def subtotal(self) -> Money:
        """Sum of price * quantity at current catalog prices (unrounded)."""
        result = Money.zero()
        for product_id, qty in self._items.items():
            result = result + self._catalog.get_product(product_id).price * qty
        return result

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
