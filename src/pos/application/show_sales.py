"""Application service: Sales history use cases (queries)."""

from __future__ import annotations

from pos.application.dto import SaleDTO, SaleLineDTO
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.ledger import SalesLedger
from pos.domain.model.sale import Sale
from pos.domain.repository.sales_repository import SalesRepository


class ShowSalesHandler:

    def __init__(self, sales_repo: SalesRepository) -> None:
        self._sales_repo = sales_repo

    def list_all(self) -> list[SaleDTO]:
        """Every sale, newest first."""
        return [to_sale_dto(sale) for sale in self._sales_repo.load()]

    def get(self, sale_id: str) -> SaleDTO:
        sale = SalesLedger.of(self._sales_repo.load()).get(sale_id)
        if sale is None:
            raise EntityNotFoundError(f"Sale #{sale_id} not found")
        return to_sale_dto(sale)


def to_sale_dto(sale: Sale) -> SaleDTO:
    return SaleDTO(
        id=sale.id,
        date=sale.date.strftime("%Y-%m-%d %H:%M"),
        items=[
            SaleLineDTO(
                code=item.product_code,
                name=item.name,
                quantity=item.quantity,
                unit_price=str(item.price),
                line_total=str(item.line_total),
            )
            for item in sale.items
        ],
        total=str(sale.total),
        total_cost=str(sale.total_cost),
        total_profit=str(sale.total_profit),
        profit_is_negative=sale.total_profit.is_negative,
    )
