"""Application service: Sales Report use case (query)."""

from __future__ import annotations

from datetime import tzinfo

from pos.domain.model.catalog import Catalog
from pos.domain.repository.catalog_repository import CatalogRepository
from pos.domain.repository.sales_repository import SalesRepository
from pos.domain.service.reporting import Period, SalesReport, build_report
from pos.domain.service.sale_processor import Clock, local_now


class ShowReportHandler:

    def __init__(
        self,
        sales_repo: SalesRepository,
        catalog_repo: CatalogRepository,
        clock: Clock = local_now,
        tz: tzinfo | None = None,
    ) -> None:
        self._sales_repo = sales_repo
        self._catalog_repo = catalog_repo
        self._clock = clock
        self._tz = tz  # None reports in system local time

    def handle(self, period: Period) -> SalesReport:
        catalog = Catalog.of(self._catalog_repo.load())
        return build_report(
            self._sales_repo.load(), period, self._clock(), catalog, tz=self._tz
        )
