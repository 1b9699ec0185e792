"""Application service: Add Stock use case."""

from __future__ import annotations

import logging

from pos.domain.model.catalog import Catalog
from pos.domain.model.product import Product
from pos.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class AddStockHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, product_id: str, quantity: int) -> Product:
        """Receive *quantity* new units of a product."""
        catalog = Catalog.of(self._catalog_repo.load())
        catalog, product = catalog.add_stock(product_id, quantity)
        self._catalog_repo.save(list(catalog))
        logger.info(
            "Received %d x %s, stock now %d", quantity, product.code, product.stock
        )
        return product
