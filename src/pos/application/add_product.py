"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from pos.application.dto import ProductSpec
from pos.domain.model.catalog import Catalog
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, spec: ProductSpec) -> Product:
        """Add a new product to the catalog.

        Raises DuplicateCodeError (a ValidationError) if the code is
        already used by another product; the catalog is left as it was.
        """
        catalog = Catalog.of(self._catalog_repo.load())
        catalog, product = catalog.add(
            code=spec.code,
            name=spec.name,
            price=Money.of(spec.price),
            cost_price=Money.of(spec.cost_price),
            stock=spec.stock,
        )
        self._catalog_repo.save(list(catalog))
        logger.info("Added product #%s %s (%s)", product.id, product.code, product.name)
        return product
