"""Application service: Show Catalog use case."""

from __future__ import annotations

from ordersys.application.dto import ProductDTO
from ordersys.domain.model.catalog import ProductCatalog


class ShowCatalogHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO(id=p.id, name=p.name, price=str(p.price), stock=p.stock)
            for p in self._catalog.list_all()
        ]
