"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from pos.application.dto import InventoryLineDTO
from pos.domain.model.catalog import Catalog
from pos.domain.model.product import Product
from pos.domain.repository.catalog_repository import CatalogRepository
from pos.domain.service.low_stock_monitor import (
    LOW_STOCK_THRESHOLD,
    low_stock,
    low_stock_count,
    stock_status,
)


class ShowInventoryHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        threshold: int = LOW_STOCK_THRESHOLD,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._threshold = threshold

    def handle(self, search: str | None = None) -> list[InventoryLineDTO]:
        """Every product matching *search*, in catalog order."""
        catalog = Catalog.of(self._catalog_repo.load())
        return [self._to_dto(p) for p in catalog.search(search)]

    def low_stock(self) -> list[InventoryLineDTO]:
        """Products that need restocking, lowest stock first."""
        catalog = Catalog.of(self._catalog_repo.load())
        return [self._to_dto(p) for p in low_stock(catalog, self._threshold)]

    def low_stock_count(self) -> int:
        return low_stock_count(Catalog.of(self._catalog_repo.load()), self._threshold)

    # --- Mapping --------------------------------------------------------------

    def _to_dto(self, product: Product) -> InventoryLineDTO:
        return InventoryLineDTO(
            product_id=product.id,
            code=product.code,
            name=product.name,
            price=str(product.price),
            cost_price=str(product.cost_price),
            stock=product.stock,
            status=stock_status(product, self._threshold).value,
        )
