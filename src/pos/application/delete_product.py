"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from pos.domain.model.catalog import Catalog
from pos.domain.model.product import Product
from pos.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, product_id: str) -> Product:
        catalog = Catalog.of(self._catalog_repo.load())
        catalog, removed = catalog.remove(product_id)
        self._catalog_repo.save(list(catalog))
        logger.info("Deleted product #%s %s", removed.id, removed.code)
        return removed
