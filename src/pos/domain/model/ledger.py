"""Sales ledger — the append-only history of sales, newest first."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Iterator

from pos.domain.exceptions import ValidationError
from pos.domain.model.sale import Sale

# Sale IDs read as the local wall-clock time of checkout, e.g. 20261019143005.
SALE_ID_FORMAT = "%Y%m%d%H%M%S"


@dataclass(frozen=True)
class SalesLedger:

    sales: tuple[Sale, ...] = ()

    @staticmethod
    def of(sales: Iterable[Sale]) -> SalesLedger:
        return SalesLedger(tuple(sales))

    def __iter__(self) -> Iterator[Sale]:
        return iter(self.sales)

    def __len__(self) -> int:
        return len(self.sales)

    def get(self, sale_id: str) -> Sale | None:
        for sale in self.sales:
            if sale.id == sale_id:
                return sale
        return None

    def next_id(self, at: datetime) -> str:
        """Time-ordered ID for a sale created at *at*.

        Two checkouts within the same second get a numeric suffix so IDs
        stay unique and still sort by creation time.
        """
        base = at.strftime(SALE_ID_FORMAT)
        taken = {sale.id for sale in self.sales}
        if base not in taken:
            return base
        suffix = 2
        while f"{base}-{suffix:03d}" in taken:
            suffix += 1
        return f"{base}-{suffix:03d}"

    def append(self, sale: Sale) -> SalesLedger:
        if self.get(sale.id) is not None:
            raise ValidationError(f"Sale #{sale.id} is already recorded")
        return SalesLedger((sale,) + self.sales)
