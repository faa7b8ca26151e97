"""Product entity.

A product's identity, name and price are fixed once constructed.  Its
stock level is a counter owned by the ProductCatalog: nothing outside
the catalog adjusts it, and every adjustment bumps ``version`` so stock
changes can be audited.
"""

from __future__ import annotations

from decimal import Decimal

from ordersys.domain.exceptions import ValidationError
from ordersys.domain.model.value_objects import Money


class Product:
    """A product in the catalog.

    Invariants:
    - ``price`` is never negative
    - ``stock`` is never negative
    """

    __slots__ = ("_id", "_name", "_price", "_stock", "_version")

    def __init__(
        self,
        id: str,
        name: str,
        price: Money | str | int | float | Decimal,
        stock: int,
    ) -> None:
        if not isinstance(price, Money):
            price = Money.of(price)
        if isinstance(stock, bool) or not isinstance(stock, int):
            raise ValidationError(
                f"Product stock must be an integer, got {type(stock).__name__}"
            )
        if stock < 0:
            raise ValidationError(
                f"Invalid product data for '{id}': stock cannot be negative, got {stock}"
            )
        self._id = id
        self._name = name
        self._price = price
        self._stock = stock
        self._version = 0

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Money:
        return self._price

    @property
    def stock(self) -> int:
        return self._stock

    @property
    def version(self) -> int:
        """Number of stock adjustments applied since construction."""
        return self._version

    def _adjust_stock(self, delta: int) -> None:
        # Only ProductCatalog calls this; it has already checked the bounds.
        new_stock = self._stock + delta
        if new_stock < 0:
            raise ValidationError(
                f"Stock for {self._name} cannot go negative ({self._stock} {delta:+d})"
            )
        self._stock = new_stock
        self._version += 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!r}, name={self._name!r}, "
            f"price={self._price}, stock={self._stock})"
        )
