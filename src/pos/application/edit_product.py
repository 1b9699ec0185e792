"""Application service: Edit Product use case."""

from __future__ import annotations

import logging

from pos.domain.model.catalog import Catalog
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class EditProductHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(
        self,
        product_id: str,
        *,
        code: str | None = None,
        name: str | None = None,
        price: str | None = None,
        cost_price: str | None = None,
        stock: int | None = None,
    ) -> Product:
        """Change a product's details.

        This does NOT affect any existing sales or cart lines — they
        captured a snapshot of the product when it was added.
        """
        catalog = Catalog.of(self._catalog_repo.load())
        catalog, product = catalog.edit(
            product_id,
            code=code,
            name=name,
            price=None if price is None else Money.of(price),
            cost_price=None if cost_price is None else Money.of(cost_price),
            stock=stock,
        )
        self._catalog_repo.save(list(catalog))
        logger.info("Edited product #%s %s", product.id, product.code)
        return product
