"""Tests for category distribution."""

import pytest

from costwise_mcp.analytics.categories import category_distribution


class TestCategoryDistribution:

    def test_empty_collection(self):
        assert category_distribution([]) == []

    def test_groups_and_shares(self, make_item):
        items = [
            make_item(category='Food', total_cost=30),
            make_item(category='Food', total_cost=10),
            make_item(category='Tools', total_cost=60),
        ]
        stats = {s.category: s for s in category_distribution(items)}

        assert stats['Food'].count == 2
        assert stats['Food'].total_cost == 40
        assert stats['Food'].percentage_of_count == pytest.approx(200 / 3)
        assert stats['Food'].percentage_of_cost == pytest.approx(40)
        assert stats['Tools'].percentage_of_cost == pytest.approx(60)

    def test_missing_category_is_uncategorized(self, make_item):
        items = [make_item(category=None), make_item(category=''), make_item(category='  ')]
        stats = category_distribution(items)
        assert len(stats) == 1
        assert stats[0].category == 'Uncategorized'
        assert stats[0].count == 3

    def test_custom_uncategorized_label(self, make_item):
        stats = category_distribution([make_item(category=None)], uncategorized_label='Other')
        assert stats[0].category == 'Other'

    def test_percentages_sum_to_100(self, make_item):
        items = [
            make_item(category='A', total_cost=12.5),
            make_item(category='B', total_cost=7.25),
            make_item(category='C', total_cost=33.3),
            make_item(category=None, total_cost=1.1),
            make_item(category='A', total_cost=0.99),
        ]
        stats = category_distribution(items)
        assert sum(s.percentage_of_count for s in stats) == pytest.approx(100)
        assert sum(s.percentage_of_cost for s in stats) == pytest.approx(100)

    def test_zero_total_cost_gives_zero_cost_share(self, make_item):
        items = [make_item(category='Free', total_cost=0)]
        stats = category_distribution(items)
        assert stats[0].percentage_of_count == 100
        assert stats[0].percentage_of_cost == 0

    def test_ordered_by_total_cost(self, make_item):
        items = [
            make_item(category='Small', total_cost=5),
            make_item(category='Big', total_cost=50),
            make_item(category='Mid', total_cost=20),
        ]
        assert [s.category for s in category_distribution(items)] == ['Big', 'Mid', 'Small']
