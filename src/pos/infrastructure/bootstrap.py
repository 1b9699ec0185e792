"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pos.application.checkout import CheckoutHandler
from pos.application.sell_session import SellSession
from pos.domain.service.scheduler import CooperativeScheduler
from pos.infrastructure.config import Settings
from pos.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from pos.infrastructure.persistence.json_sales_repository import (
    JsonSalesRepository,
)


def catalog_repository(settings: Settings) -> JsonCatalogRepository:
    return JsonCatalogRepository(settings.catalog_path)


def sales_repository(settings: Settings) -> JsonSalesRepository:
    return JsonSalesRepository(settings.sales_path)


def sell_session(settings: Settings) -> SellSession:
    catalog_repo = catalog_repository(settings)
    return SellSession(
        catalog_repo=catalog_repo,
        checkout_handler=CheckoutHandler(catalog_repo, sales_repository(settings)),
        scheduler=CooperativeScheduler(),
    )
