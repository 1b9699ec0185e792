"""JSON-file-backed implementation of CatalogRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.catalog_repository import CatalogRepository
from pos.infrastructure.persistence.json_file import ensure_file, read_json, write_json


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- CatalogRepository interface ------------------------------------------

    def load(self) -> list[Product]:
        return [self._to_domain(raw) for raw in read_json(self._file_path)]

    def save(self, products: list[Product]) -> None:
        write_json(self._file_path, [self._to_raw(p) for p in products])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "code": product.code,
            "name": product.name,
            "price": str(product.price.amount),
            "cost_price": str(product.cost_price.amount),
            "stock": product.stock,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=str(raw["id"]),
            code=raw["code"],
            name=raw["name"],
            price=Money(Decimal(raw["price"])),
            cost_price=Money(Decimal(raw.get("cost_price", "0"))),
            stock=int(raw.get("stock", 0)),
        )
