"""ProductCatalog — owns every Product and its stock counter.

The catalog is the only component allowed to change stock.  It exposes
two primitives, ``reserve_stock`` and ``release_stock``, each of which
is atomic for a single product only.  Callers that need all-or-nothing
behaviour across several products (see ``OrderService``) must validate
every item before reserving any of them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

import structlog

from ordersys.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from ordersys.domain.model.product import Product
from ordersys.domain.model.value_objects import Quantity
from ordersys.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class ProductCatalog:

    def __init__(self, products: Mapping[str, Product] | Iterable[Product]) -> None:
        self._products: dict[str, Product] = {}

        if isinstance(products, Mapping):
            for key, product in products.items():
                if key != product.id:
                    raise ValidationError(
                        f"Catalog key '{key}' does not match product id '{product.id}'"
                    )
                self._products[key] = product
        else:
            for product in products:
                if product.id in self._products:
                    raise ValidationError(f"Duplicate product id '{product.id}'")
                self._products[product.id] = product

    @classmethod
    def from_repository(cls, repo: ProductRepository) -> ProductCatalog:
        return cls(repo.list_all())

    # --- Lookup ---------------------------------------------------------------

    def get_product(self, product_id: str) -> Product:
        try:
            return self._products[product_id]
        except KeyError:
            raise EntityNotFoundError(f"Product not found: '{product_id}'") from None

    @property
    def products(self) -> Mapping[str, Product]:
        return MappingProxyType(self._products)

    def list_all(self) -> list[Product]:
        return list(self._products.values())

    def stock_levels(self) -> dict[str, int]:
        """Snapshot of current stock per product id."""
        return {pid: p.stock for pid, p in self._products.items()}

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def __len__(self) -> int:
        return len(self._products)

    # --- Stock primitives -----------------------------------------------------

    def reserve_stock(self, product_id: str, quantity: int) -> None:
        """Decrement stock for one product.

        Raises EntityNotFoundError for an unknown id and
        InsufficientStockError if ``quantity`` exceeds current stock.
        """
        product = self.get_product(product_id)
        qty = Quantity(quantity).value
        if qty > product.stock:
            raise InsufficientStockError(product.id, qty, product.stock, product.name)
        product._adjust_stock(-qty)
        logger.debug(
            "Stock reserved",
            product_id=product.id,
            quantity=qty,
            stock=product.stock,
            version=product.version,
        )

    def release_stock(self, product_id: str, quantity: int) -> None:
        """Increment stock for one product.

        There is no upper bound: releasing is how a prior reservation
        is compensated, and may leave stock above its original level.
        """
        product = self.get_product(product_id)
        qty = Quantity(quantity).value
        product._adjust_stock(qty)
        logger.debug(
            "Stock released",
            product_id=product.id,
            quantity=qty,
            stock=product.stock,
            version=product.version,
        )
