"""Sale — an immutable record of one completed checkout."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from pos.domain.exceptions import ValidationError
from pos.domain.model.cart import CartItem
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Sale:
    """A receipt.

    Totals are computed once by ``Sale.create()`` and stored; they are
    never recomputed, so a reconstituted sale reports exactly what the
    customer was charged.
    """

    id: str
    items: tuple[CartItem, ...]
    total: Money
    total_cost: Money
    total_profit: Money
    date: datetime

    @staticmethod
    def create(sale_id: str, items: Iterable[CartItem], date: datetime) -> Sale:
        lines = tuple(items)
        if not lines:
            raise ValidationError("A sale must contain at least one item")
        if any(item.quantity <= 0 for item in lines):
            raise ValidationError("Sale line quantities must be positive")

        total = Money.total(item.line_total for item in lines)
        total_cost = Money.total(item.line_cost for item in lines)
        return Sale(
            id=sale_id,
            items=lines,
            total=total,
            total_cost=total_cost,
            total_profit=total - total_cost,
            date=date,
        )

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def unit_count(self) -> int:
        return sum(item.quantity for item in self.items)
