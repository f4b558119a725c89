"""Tests for the dashboard summary and item list views."""

from datetime import date, datetime, timezone

import pytest

from costwise_mcp.analytics.config import AnalyticsConfig
from costwise_mcp.analytics.formatting import format_currency, format_number
from costwise_mcp.analytics.models import CalculationType, ItemStatus
from costwise_mcp.analytics.reporting import (
    dashboard_summary,
    filter_items,
    item_summary,
    sort_items,
)


class TestDashboardSummary:

    def test_figures(self, make_item, today):
        items = [
            make_item(name='Coffee', total_cost=300, usage_days=30,
                      purchase_date=date(2024, 3, 1)),
            make_item(name='Soap', total_cost=70, usage_days=7,
                      purchase_date=date(2024, 3, 10)),     # ends Mar 17
            make_item(name='Drill', total_cost=900, usage_days=None,
                      purchase_date=date(2024, 2, 1)),
            make_item(name='Tea', total_cost=20, usage_days=10,
                      purchase_date=date(2024, 1, 1)),
        ]
        summary = dashboard_summary(items, today)

        assert summary.total_cost == 1290
        assert summary.today_cost == pytest.approx(20)
        # Coffee Mar 1-15 (150) + Soap Mar 10-15 (60)
        assert summary.month_to_date_cost == pytest.approx(210)
        assert [i.name for i in summary.recent_items] == ['Soap', 'Coffee', 'Drill']
        assert [i.name for i in summary.top_price_items] == ['Drill', 'Coffee', 'Soap']
        assert [i.name for i in summary.expiring_items] == ['Soap']

    def test_list_size_from_config(self, make_item, today):
        items = [make_item() for _ in range(5)]
        summary = dashboard_summary(items, today, AnalyticsConfig(dashboard_list_size=2))
        assert len(summary.recent_items) == 2
        assert len(summary.top_price_items) == 2

    def test_empty_collection(self, today):
        summary = dashboard_summary([], today)
        assert summary.total_cost == 0
        assert summary.today_cost == 0
        assert summary.recent_items == []


class TestFilterItems:

    @pytest.fixture
    def items(self, make_item):
        return [
            make_item(name='Green Tea', category='Drinks', purchase_date=date(2024, 3, 1)),
            make_item(name='Hammer', category='Tools', notes='for the shed',
                      purchase_date=date(2024, 2, 10), status=ItemStatus.FINISHED),
            make_item(name='Coffee Beans', category=None, purchase_date=date(2024, 3, 5)),
        ]

    def test_query_matches_name_case_insensitive(self, items):
        assert [i.name for i in filter_items(items, query='tea')] == ['Green Tea']

    def test_query_matches_category_and_notes(self, items):
        assert [i.name for i in filter_items(items, query='drinks')] == ['Green Tea']
        assert [i.name for i in filter_items(items, query='SHED')] == ['Hammer']

    def test_any_query_word_matches(self, items):
        names = [i.name for i in filter_items(items, query='hammer beans')]
        assert names == ['Hammer', 'Coffee Beans']

    def test_status_filter(self, items):
        result = filter_items(items, status=ItemStatus.FINISHED)
        assert [i.name for i in result] == ['Hammer']

    def test_day_filter(self, items):
        assert [i.name for i in filter_items(items, day=date(2024, 3, 5))] == ['Coffee Beans']

    def test_month_filter(self, items):
        names = [i.name for i in filter_items(items, month='2024-03')]
        assert names == ['Green Tea', 'Coffee Beans']

    def test_no_filters_keeps_everything(self, items):
        assert filter_items(items) == items


class TestSortItems:

    def test_date_added_newest_first(self, make_item):
        items = [
            make_item(name='old', created_at=datetime(2024, 1, 1, 8, 0)),
            make_item(name='new', created_at=datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)),
            make_item(name='none', created_at=None),
        ]
        assert [i.name for i in sort_items(items, 'date_added')] == ['new', 'old', 'none']

    def test_purchase_date_latest_first(self, make_item):
        items = [make_item(name='a', purchase_date=date(2024, 1, 1)),
                 make_item(name='b', purchase_date=date(2024, 2, 1))]
        assert [i.name for i in sort_items(items, 'purchase_date')] == ['b', 'a']

    def test_expiry_date_soonest_first_no_window_last(self, make_item):
        items = [
            make_item(name='none', usage_days=None),
            make_item(name='late', usage_days=90, purchase_date=date(2024, 1, 1)),
            make_item(name='soon', usage_days=5, purchase_date=date(2024, 1, 1)),
        ]
        assert [i.name for i in sort_items(items, 'expiry_date')] == ['soon', 'late', 'none']

    def test_unit_price_highest_first(self, make_item):
        items = [
            make_item(name='cheap', total_cost=30, usage_days=30),
            make_item(name='pricey', total_cost=100, calculation_type=CalculationType.PER_USE,
                      total_uses=2),
        ]
        assert [i.name for i in sort_items(items, 'unit_price')] == ['pricey', 'cheap']

    def test_unknown_key_keeps_order(self, make_item):
        items = [make_item(name='x'), make_item(name='y')]
        assert sort_items(items, 'colour') == items


class TestItemSummary:

    def test_derived_fields(self, make_item, today):
        item = make_item(total_cost=300, usage_days=30, purchase_date=date(2024, 3, 1),
                         category=None)
        summary = item_summary(item, today)
        assert summary['unit_price'] == 10
        assert summary['daily_rate'] == 10
        assert summary['end_date'] == '2024-03-31'
        assert summary['remaining_days'] == 16
        assert summary['category'] == 'Uncategorized'
        assert summary['status'] == 'active'

    def test_configured_uncategorized_label(self, make_item, today):
        summary = item_summary(make_item(category=' '), today, uncategorized_label='Other')
        assert summary['category'] == 'Other'

    def test_fractional_quantity_passes_through(self, make_item, today):
        assert item_summary(make_item(quantity=0.5), today)['quantity'] == 0.5

    def test_without_window(self, make_item, today):
        summary = item_summary(make_item(usage_days=None), today)
        assert summary['end_date'] is None
        assert summary['remaining_days'] is None


class TestFormatting:

    @pytest.mark.parametrize("amount,expected", [
        (0, '0.00'),
        (12.5, '12.50'),
        (999.994, '999.99'),
        (1234.5, '1,234.50'),
        (25000, '2.50万'),
    ])
    def test_format_number(self, amount, expected):
        assert format_number(amount) == expected

    def test_format_currency(self):
        assert format_currency(12.5, '$') == '$12.50'
