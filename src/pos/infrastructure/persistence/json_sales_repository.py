"""JSON-file-backed implementation of SalesRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from pos.domain.model.cart import CartItem
from pos.domain.model.sale import Sale
from pos.domain.model.value_objects import Money
from pos.domain.repository.sales_repository import SalesRepository
from pos.infrastructure.persistence.json_file import ensure_file, read_json, write_json


class JsonSalesRepository(SalesRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- SalesRepository interface --------------------------------------------

    def load(self) -> list[Sale]:
        return [self._to_domain(raw) for raw in read_json(self._file_path)]

    def save(self, sales: list[Sale]) -> None:
        write_json(self._file_path, [self._to_raw(s) for s in sales])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(sale: Sale) -> dict:
        return {
            "id": sale.id,
            "date": sale.date.isoformat(),
            "total": str(sale.total.amount),
            "total_cost": str(sale.total_cost.amount),
            "total_profit": str(sale.total_profit.amount),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_code": item.product_code,
                    "name": item.name,
                    "price": str(item.price.amount),
                    "cost_price": str(item.cost_price.amount),
                    "quantity": item.quantity,
                }
                for item in sale.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Sale:
        # Stored totals are the receipt of record; they are not recomputed.
        items = tuple(
            CartItem(
                product_id=i["product_id"],
                product_code=i.get("product_code", ""),
                name=i["name"],
                price=Money(Decimal(i["price"])),
                cost_price=Money(Decimal(i.get("cost_price", "0"))),
                quantity=int(i["quantity"]),
            )
            for i in raw["items"]
        )
        total = Money(Decimal(raw["total"]))
        total_cost = Money(Decimal(raw.get("total_cost", "0")))
        if "total_profit" in raw:
            total_profit = Money(Decimal(raw["total_profit"]))
        else:
            total_profit = total - total_cost
        return Sale(
            id=raw["id"],
            items=items,
            total=total,
            total_cost=total_cost,
            total_profit=total_profit,
            date=datetime.fromisoformat(raw["date"]),
        )
