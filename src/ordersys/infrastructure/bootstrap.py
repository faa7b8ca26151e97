"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from ordersys.domain.model.catalog import ProductCatalog
from ordersys.domain.service.order_service import OrderService
from ordersys.domain.service.pricing_engine import PricingEngine
from ordersys.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_CATALOG_PATH = _DATA_DIR / "products.json"


def product_repository(path: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository(path or DEFAULT_CATALOG_PATH)


def product_catalog(path: Path | None = None) -> ProductCatalog:
    return ProductCatalog.from_repository(product_repository(path))


def order_service(catalog: ProductCatalog) -> OrderService:
    return OrderService(catalog, PricingEngine())
