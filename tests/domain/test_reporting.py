"""Unit tests for the reporting domain service."""

from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from pos.domain.model.cart import CartItem
from pos.domain.model.catalog import Catalog
from pos.domain.model.sale import Sale
from pos.domain.model.value_objects import Money
from pos.domain.service.reporting import (
    Period,
    build_report,
    chart_series,
    period_start,
    sales_in_period,
    summarize,
    top_products,
)
from tests.fakes import make_product

UTC = timezone.utc
# Wednesday
NOW = datetime(2026, 10, 21, 15, 0, tzinfo=UTC)


def _sale(sale_id: str, when: datetime, *lines: tuple[str, str, str, int]) -> Sale:
    """Build a sale from (product_id, price, cost, qty) tuples."""
    if not lines:
        lines = (("1", "130", "110", 1),)
    items = [
        CartItem.from_product(
            make_product(pid, f"P-{pid}", f"Product {pid}", price=price, cost_price=cost),
            quantity=qty,
        )
        for pid, price, cost, qty in lines
    ]
    return Sale.create(sale_id, items, when)


def _ledger() -> list[Sale]:
    return [
        _sale("today", datetime(2026, 10, 21, 10, 0, tzinfo=UTC)),
        _sale("monday", datetime(2026, 10, 19, 12, 0, tzinfo=UTC)),
        _sale("sunday-midnight", datetime(2026, 10, 18, 0, 0, tzinfo=UTC)),
        _sale("saturday", datetime(2026, 10, 17, 23, 59, tzinfo=UTC)),
        _sale("first", datetime(2026, 10, 1, 0, 0, tzinfo=UTC)),
        _sale("last-month", datetime(2026, 9, 30, 23, 59, tzinfo=UTC)),
    ]


class TestPeriodStart:

    def test_day(self):
        assert period_start(Period.DAY, NOW, UTC) == datetime(2026, 10, 21, tzinfo=UTC)

    def test_week_starts_on_sunday(self):
        assert period_start(Period.WEEK, NOW, UTC) == datetime(2026, 10, 18, tzinfo=UTC)

    def test_week_on_a_sunday_is_that_day(self):
        sunday = datetime(2026, 10, 18, 20, 0, tzinfo=UTC)
        assert period_start(Period.WEEK, sunday, UTC) == datetime(2026, 10, 18, tzinfo=UTC)

    def test_month(self):
        assert period_start(Period.MONTH, NOW, UTC) == datetime(2026, 10, 1, tzinfo=UTC)

    def test_uses_calendar_of_report_timezone(self):
        bangkok = timezone(timedelta(hours=7))
        now = datetime(2026, 10, 20, 20, 0, tzinfo=UTC)
        assert period_start(Period.DAY, now, bangkok) == datetime(2026, 10, 21, tzinfo=bangkok)

    def test_defaults_to_system_local_midnight(self):
        start = period_start(Period.DAY, NOW)
        assert start.astimezone().time() == time(0, 0)
        assert start <= NOW < start + timedelta(days=1, hours=1)


class TestPeriodFilter:

    def test_day(self):
        assert [s.id for s in sales_in_period(_ledger(), Period.DAY, NOW, UTC)] == ["today"]

    def test_week_includes_boundary(self):
        ids = [s.id for s in sales_in_period(_ledger(), Period.WEEK, NOW, UTC)]
        assert ids == ["today", "monday", "sunday-midnight"]

    def test_month(self):
        ids = [s.id for s in sales_in_period(_ledger(), Period.MONTH, NOW, UTC)]
        assert ids == ["today", "monday", "sunday-midnight", "saturday", "first"]

    @pytest.mark.parametrize("now", [NOW, datetime(2026, 10, 4, tzinfo=UTC), datetime(2026, 10, 31, 23, tzinfo=UTC)])
    def test_day_within_week_within_month(self, now):
        day = {s.id for s in sales_in_period(_ledger(), Period.DAY, now, UTC)}
        week = {s.id for s in sales_in_period(_ledger(), Period.WEEK, now, UTC)}
        month = {s.id for s in sales_in_period(_ledger(), Period.MONTH, now, UTC)}
        assert day <= week <= month

    def test_week_spanning_month_start_reaches_previous_month(self):
        thursday = datetime(2026, 10, 1, 8, tzinfo=UTC)
        week = {s.id for s in sales_in_period(_ledger(), Period.WEEK, thursday, UTC)}
        month = {s.id for s in sales_in_period(_ledger(), Period.MONTH, thursday, UTC)}
        assert "last-month" in week
        assert month <= week


class TestSummaries:

    def test_summarize(self):
        sales = [
            _sale("a", NOW, ("1", "130", "110", 3)),
            _sale("b", NOW, ("2", "10", "4", 2)),
        ]
        summary = summarize(sales)
        assert summary.revenue == Money.of("410")
        assert summary.cost == Money.of("338")
        assert summary.profit == Money.of("72")
        assert summary.count == 2

    def test_summarize_empty(self):
        summary = summarize([])
        assert summary.revenue == Money.zero()
        assert summary.count == 0

    def test_chart_buckets_sorted_chronologically(self):
        sales = [
            _sale("c", datetime(2026, 10, 21, 9, tzinfo=UTC)),
            _sale("a", datetime(2026, 10, 2, 9, tzinfo=UTC)),
            _sale("b", datetime(2026, 10, 21, 18, tzinfo=UTC), ("1", "10", "5", 1)),
            _sale("d", datetime(2026, 10, 10, 9, tzinfo=UTC)),
        ]
        buckets = chart_series(sales, UTC)
        assert [b.day for b in buckets] == [date(2026, 10, 2), date(2026, 10, 10), date(2026, 10, 21)]
        assert buckets[-1].revenue == Money.of("140")
        assert buckets[-1].profit == Money.of("25")

    def test_chart_buckets_use_report_timezone(self):
        bangkok = timezone(timedelta(hours=7))
        late_utc = _sale("x", datetime(2026, 10, 20, 20, tzinfo=UTC))
        assert chart_series([late_utc], tz=bangkok)[0].day == date(2026, 10, 21)


class TestTopProducts:

    def test_ranked_by_accumulated_profit(self):
        sales = [
            _sale("a", NOW, ("1", "130", "110", 1), ("2", "15", "9", 10)),
            _sale("b", NOW, ("1", "130", "110", 2)),
            _sale("c", NOW, ("3", "5", "1", 1)),
        ]
        ranked = top_products(sales)
        assert [(p.product_id, p.profit) for p in ranked] == [
            ("1", Money.of("60")),
            ("2", Money.of("60")),
            ("3", Money.of("4")),
        ]

    def test_ties_keep_first_seen_order(self):
        sales = [_sale("a", NOW, ("9", "2", "1", 1), ("8", "2", "1", 1))]
        assert [p.product_id for p in top_products(sales)] == ["9", "8"]

    def test_limited_to_five(self):
        lines = [(str(i), str(10 + i), "1", 1) for i in range(8)]
        ranked = top_products([_sale("a", NOW, *lines)])
        assert len(ranked) == 5
        assert ranked[0].product_id == "7"

    def test_names_prefer_current_catalog(self):
        catalog = Catalog.of([make_product("1", "P-1", "Renamed Water")])
        sales = [_sale("a", NOW, ("1", "130", "110", 1), ("2", "15", "9", 1))]
        names = {p.product_id: p.name for p in top_products(sales, catalog)}
        assert names == {"1": "Renamed Water", "2": "Product 2"}

    def test_loss_makers_rank_last(self):
        sales = [_sale("a", NOW, ("1", "5", "9", 1), ("2", "5", "4", 1))]
        assert [p.product_id for p in top_products(sales)] == ["2", "1"]


class TestBuildReport:

    def test_week_report(self):
        report = build_report(_ledger(), Period.WEEK, NOW, tz=UTC)
        assert report.start == datetime(2026, 10, 18, tzinfo=UTC)
        assert report.summary.count == 3
        assert report.summary.revenue == Money.of("390")
        assert len(report.chart) == 3
        assert report.top_products[0].profit == Money.of("60")


class TestDaylightSavingChange:
    # Berlin leaves summer time (+02:00) for winter time (+01:00) on Sunday 2026-10-25.
    BERLIN = ZoneInfo("Europe/Berlin")
    # What the register clock reads after the change: a fixed +01:00 offset.
    WINTER = timezone(timedelta(hours=1))

    def test_month_start_uses_summer_offset(self):
        now = datetime(2026, 10, 26, 12, 0, tzinfo=self.WINTER)
        start = period_start(Period.MONTH, now, self.BERLIN)
        assert start == datetime(2026, 9, 30, 22, 0, tzinfo=UTC)
        assert start.utcoffset() == timedelta(hours=2)

    def test_month_includes_first_hour_and_excludes_hour_before(self):
        now = datetime(2026, 10, 26, 12, 0, tzinfo=self.WINTER)
        sales = [
            _sale("first-hour", datetime(2026, 10, 1, 0, 30, tzinfo=self.BERLIN)),
            _sale("previous-month", datetime(2026, 9, 30, 23, 30, tzinfo=self.BERLIN)),
        ]
        ids = [s.id for s in sales_in_period(sales, Period.MONTH, now, self.BERLIN)]
        assert ids == ["first-hour"]

    def test_week_starts_at_sunday_midnight_before_change(self):
        tuesday = datetime(2026, 10, 27, 12, 0, tzinfo=self.WINTER)
        sales = [
            _sale("sunday", datetime(2026, 10, 25, 0, 30, tzinfo=self.BERLIN)),
            _sale("saturday", datetime(2026, 10, 24, 23, 30, tzinfo=self.BERLIN)),
        ]
        ids = [s.id for s in sales_in_period(sales, Period.WEEK, tuesday, self.BERLIN)]
        assert ids == ["sunday"]

    def test_chart_days_follow_offset_of_each_sale(self):
        now = datetime(2026, 10, 27, 12, 0, tzinfo=self.WINTER)
        sales = [
            _sale("summer", datetime(2026, 10, 2, 0, 30, tzinfo=self.BERLIN)),
            _sale("winter", datetime(2026, 10, 26, 0, 30, tzinfo=self.BERLIN)),
        ]
        report = build_report(sales, Period.MONTH, now, tz=self.BERLIN)
        assert [b.day for b in report.chart] == [date(2026, 10, 2), date(2026, 10, 26)]
