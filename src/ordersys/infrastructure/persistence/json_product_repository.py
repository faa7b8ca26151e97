"""JSON-file-backed implementation of ProductRepository.

Read-only: the file seeds a catalog, stock changes are never written back.
"""

from __future__ import annotations

import json
from pathlib import Path

from ordersys.domain.exceptions import EntityNotFoundError, ValidationError
from ordersys.domain.model.product import Product
from ordersys.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return [self._to_product(item) for item in self._load()]

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[dict]:
        if not self._file_path.exists():
            raise EntityNotFoundError(f"Catalog file not found: {self._file_path}")
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Catalog file {self._file_path} is not valid JSON: {exc.msg}"
            ) from exc
        if not isinstance(raw, list):
            raise ValidationError(
                f"Catalog file {self._file_path} must contain a JSON array"
            )
        return raw

    @staticmethod
    def _to_product(item: dict) -> Product:
        try:
            return Product(
                id=str(item["id"]),
                name=item["name"],
                price=item["price"],
                stock=item["stock"],
            )
        except (KeyError, TypeError) as exc:
            raise ValidationError(f"Malformed product entry: {item!r}") from exc
