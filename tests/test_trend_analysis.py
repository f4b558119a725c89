"""Tests for growth rate, month comparison and monthly trend."""

from datetime import date

import pytest

from costwise_mcp.analytics.models import ItemStatus
from costwise_mcp.analytics.trend_analysis import compare_months, cost_trend, growth_rate


class TestGrowthRate:

    def test_increase(self):
        assert growth_rate(150, 100) == pytest.approx(50)

    def test_decrease(self):
        assert growth_rate(25, 100) == pytest.approx(-75)

    def test_from_zero_to_something(self):
        assert growth_rate(50, 0) == 100

    def test_from_zero_to_zero(self):
        assert growth_rate(0, 0) == 0


class TestCompareMonths:

    def test_amortized_totals(self, make_item, today):
        # 10 per day from Feb 20 through Mar 21
        item = make_item(total_cost=310, usage_days=31, purchase_date=date(2024, 2, 20))
        comparison = compare_months([item], today)

        assert comparison.current == pytest.approx(150)   # Mar 1 - 15
        assert comparison.previous == pytest.approx(100)  # Feb 20 - 29
        assert comparison.growth_rate_percent == pytest.approx(50)

    def test_nothing_last_month(self, make_item, today):
        item = make_item(total_cost=300, usage_days=30, purchase_date=date(2024, 3, 1))
        comparison = compare_months([item], today)
        assert comparison.previous == 0
        assert comparison.growth_rate_percent == 100

    def test_empty_collection(self, today):
        comparison = compare_months([], today)
        assert comparison.current == 0
        assert comparison.previous == 0
        assert comparison.growth_rate_percent == 0

    def test_january_compares_with_december(self, make_item):
        item = make_item(total_cost=620, usage_days=62, purchase_date=date(2023, 12, 1))
        comparison = compare_months([item], date(2024, 1, 10))
        assert comparison.previous == pytest.approx(310)
        assert comparison.current == pytest.approx(100)

    def test_items_without_window_are_ignored(self, make_item, today):
        item = make_item(total_cost=1000, usage_days=None, purchase_date=date(2024, 3, 1))
        comparison = compare_months([item], today)
        assert comparison.current == 0


class TestCostTrend:

    def test_six_months_chronological_with_gaps(self, make_item, today):
        items = [
            make_item(total_cost=10, purchase_date=date(2024, 3, 1)),
            make_item(total_cost=5, purchase_date=date(2024, 3, 20)),
            make_item(total_cost=20, purchase_date=date(2023, 12, 25)),
            make_item(total_cost=99, purchase_date=date(2023, 9, 30)),
        ]
        trend = cost_trend(items, today)

        assert [p.month for p in trend] == [
            '2023-10', '2023-11', '2023-12', '2024-01', '2024-02', '2024-03'
        ]
        by_month = {p.month: p for p in trend}
        assert by_month['2024-03'].total_cost == 15
        assert by_month['2024-03'].item_count == 2
        assert by_month['2023-12'].total_cost == 20
        assert by_month['2023-11'].item_count == 0
        assert by_month['2023-11'].total_cost == 0

    def test_custom_month_count(self, today):
        assert len(cost_trend([], today, months=12)) == 12

    def test_counts_every_status(self, make_item, today):
        items = [make_item(purchase_date=date(2024, 3, 2), status=ItemStatus.ARCHIVED)]
        assert cost_trend(items, today)[-1].item_count == 1
