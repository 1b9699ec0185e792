"""Application service: Checkout use case.

Loads the current catalog and ledger, lets the SaleProcessor build the
new state, then persists both stores.  The processor has already
produced the complete result before anything is written.  If saving the
ledger fails after the catalog was saved, the previous catalog is
written back so stock and history never disagree.
"""

from __future__ import annotations

import logging

from pos.domain.model.cart import Cart
from pos.domain.model.catalog import Catalog
from pos.domain.model.ledger import SalesLedger
from pos.domain.repository.catalog_repository import CatalogRepository
from pos.domain.repository.sales_repository import SalesRepository
from pos.domain.service.sale_processor import CheckoutResult, SaleProcessor

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        sales_repo: SalesRepository,
        processor: SaleProcessor | None = None,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._sales_repo = sales_repo
        self._processor = processor or SaleProcessor()

    def handle(self, cart: Cart) -> CheckoutResult:
        previous_products = self._catalog_repo.load()
        catalog = Catalog.of(previous_products)
        ledger = SalesLedger.of(self._sales_repo.load())

        result = self._processor.process(cart, catalog, ledger)
        if not result.completed:
            logger.debug("Checkout on empty cart ignored")
            return result

        self._catalog_repo.save(list(result.catalog))
        try:
            self._sales_repo.save(list(result.ledger))
        except Exception:
            logger.error(
                "Could not record sale %s, restoring previous catalog", result.sale.id
            )
            self._catalog_repo.save(previous_products)
            raise

        logger.info(
            "Recorded sale %s: %d line(s), total %s, profit %s",
            result.sale.id,
            result.sale.item_count,
            result.sale.total,
            result.sale.total_profit,
        )
        return result
