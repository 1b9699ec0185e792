"""Domain service: sales reporting.

Read-only derivations over the sales ledger for a calendar period:
headline totals, a per-day chart series, and the most profitable
products.

Period boundaries and chart days are calendar dates in the report's
timezone: an explicit ``tz``, or the system's local time when ``tz`` is
None.  Each midnight is resolved with the offset in force on that date,
so a daylight-saving change inside the period does not shift it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from enum import Enum
from typing import Iterable

from pos.domain.model.catalog import Catalog
from pos.domain.model.sale import Sale
from pos.domain.model.value_objects import Money

TOP_PRODUCTS_LIMIT = 5


class Period(Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class SalesSummary:
    revenue: Money
    cost: Money
    profit: Money
    count: int


@dataclass(frozen=True)
class ChartBucket:
    day: date
    revenue: Money
    profit: Money


@dataclass(frozen=True)
class ProductProfit:
    product_id: str
    name: str
    profit: Money


@dataclass(frozen=True)
class SalesReport:
    period: Period
    start: datetime
    sales: tuple[Sale, ...]
    summary: SalesSummary
    chart: list[ChartBucket]
    top_products: list[ProductProfit]


def local_date(moment: datetime, tz: tzinfo | None = None) -> date:
    """Calendar date of *moment* in *tz* (system local time if None)."""
    return moment.astimezone(tz).date()


def midnight(day: date, tz: tzinfo | None = None) -> datetime:
    """First instant of *day* in *tz* (system local time if None)."""
    if tz is None:
        return datetime.combine(day, time()).astimezone()
    return datetime.combine(day, time(), tzinfo=tz)


def period_start(period: Period, now: datetime, tz: tzinfo | None = None) -> datetime:
    """Start of the calendar period containing *now*.

    Weeks start on Sunday.
    """
    today = local_date(now, tz)
    if period is Period.DAY:
        first_day = today
    elif period is Period.WEEK:
        days_since_sunday = (today.weekday() + 1) % 7
        first_day = today - timedelta(days=days_since_sunday)
    elif period is Period.MONTH:
        first_day = today.replace(day=1)
    else:
        raise ValueError(f"Unknown period: {period!r}")
    return midnight(first_day, tz)


def sales_in_period(
    sales: Iterable[Sale],
    period: Period,
    now: datetime,
    tz: tzinfo | None = None,
) -> list[Sale]:
    start = period_start(period, now, tz)
    return [sale for sale in sales if sale.date >= start]


def summarize(sales: Iterable[Sale]) -> SalesSummary:
    sales = list(sales)
    return SalesSummary(
        revenue=Money.total(s.total for s in sales),
        cost=Money.total(s.total_cost for s in sales),
        profit=Money.total(s.total_profit for s in sales),
        count=len(sales),
    )


def chart_series(sales: Iterable[Sale], tz: tzinfo | None = None) -> list[ChartBucket]:
    """Revenue and profit per calendar day, oldest day first."""
    revenue: dict[date, Money] = {}
    profit: dict[date, Money] = {}
    for sale in sales:
        day = local_date(sale.date, tz)
        revenue[day] = revenue.get(day, Money.zero()) + sale.total
        profit[day] = profit.get(day, Money.zero()) + sale.total_profit

    return [
        ChartBucket(day=day, revenue=revenue[day], profit=profit[day])
        for day in sorted(revenue)
    ]


def top_products(
    sales: Iterable[Sale],
    catalog: Catalog | None = None,
    limit: int = TOP_PRODUCTS_LIMIT,
) -> list[ProductProfit]:
    """Rank products by accumulated line profit, highest first.

    Names come from the current catalog when the product still exists,
    otherwise from the sale's own snapshot.  Equal profits keep the order
    in which the products were first seen.
    """
    profits: dict[str, Money] = {}
    names: dict[str, str] = {}
    for sale in sales:
        for item in sale.items:
            line_profit = (item.price - item.cost_price) * item.quantity
            profits[item.product_id] = profits.get(item.product_id, Money.zero()) + line_profit
            names.setdefault(item.product_id, item.name)

    if catalog is not None:
        for product_id in names:
            product = catalog.get(product_id)
            if product is not None:
                names[product_id] = product.name

    ranked = sorted(profits.items(), key=lambda pair: pair[1].amount, reverse=True)
    return [
        ProductProfit(product_id=product_id, name=names[product_id], profit=profit)
        for product_id, profit in ranked[:limit]
    ]


def build_report(
    sales: Iterable[Sale],
    period: Period,
    now: datetime,
    catalog: Catalog | None = None,
    tz: tzinfo | None = None,
) -> SalesReport:
    selected = sales_in_period(sales, period, now, tz)
    return SalesReport(
        period=period,
        start=period_start(period, now, tz),
        sales=tuple(selected),
        summary=summarize(selected),
        chart=chart_series(selected, tz),
        top_products=top_products(selected, catalog),
    )
