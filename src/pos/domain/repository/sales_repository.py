"""Abstract repository for the sales ledger."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.sale import Sale


class SalesRepository(ABC):

    @abstractmethod
    def load(self) -> list[Sale]:
        """Return every recorded sale, newest first."""

    @abstractmethod
    def save(self, sales: list[Sale]) -> None:
        """Replace the stored ledger with *sales*."""
