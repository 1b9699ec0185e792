"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

The catalog is loaded and saved as a whole: every catalog-affecting
operation writes the complete product list back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import Product


class CatalogRepository(ABC):

    @abstractmethod
    def load(self) -> list[Product]:
        """Return every product in the catalog, in catalog order."""

    @abstractmethod
    def save(self, products: list[Product]) -> None:
        """Replace the stored catalog with *products*."""
