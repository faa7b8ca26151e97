"""Abstract source of Product records.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in
the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordersys.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, freshly built, in a stable order."""
