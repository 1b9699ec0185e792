"""Domain service: low-stock derivation.

Pure functions over a Catalog.  The threshold is one system-wide value;
there is no per-product reorder point.
"""

from __future__ import annotations

from enum import Enum

from pos.domain.model.catalog import Catalog
from pos.domain.model.product import Product

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
LOW_STOCK_THRESHOLD = 10


class StockStatus(Enum):
    IN_STOCK = "in_stock"
    LOW = "low"
    OUT = "out"


def stock_status(product: Product, threshold: int = LOW_STOCK_THRESHOLD) -> StockStatus:
    if product.stock <= 0:
        return StockStatus.OUT
    if product.stock <= threshold:
        return StockStatus.LOW
    return StockStatus.IN_STOCK


def is_low_stock(product: Product, threshold: int = LOW_STOCK_THRESHOLD) -> bool:
    return product.stock <= threshold


def low_stock(catalog: Catalog, threshold: int = LOW_STOCK_THRESHOLD) -> list[Product]:
    """Products at or below *threshold*, most urgent (lowest stock) first."""
    return sorted(
        (p for p in catalog if is_low_stock(p, threshold)),
        key=lambda p: p.stock,
    )


def low_stock_count(catalog: Catalog, threshold: int = LOW_STOCK_THRESHOLD) -> int:
    return sum(1 for p in catalog if is_low_stock(p, threshold))
