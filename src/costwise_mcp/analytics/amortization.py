"""
Cost amortization over an item's usage window.

An item with total cost C and usage window D days is charged C / D on every
day from its purchase date up to, but not including, its end date
(purchase date + D). The end date is the first day the item is no longer in
use, which is also the day `remaining_days` reaches 0.
"""

from datetime import date, timedelta
from typing import Iterable

from .dates import end_date, enumerate_days
from .models import Item


def daily_rate(item: Item) -> float:
    """Cost charged per day of the window, 0 for items without a window."""
    if not item.has_window:
        return 0.0
    return item.total_cost / item.usage_days


def cost_in_range(item: Item, range_start: date, range_end: date) -> float:
    """
    Cost of an item incurred within [range_start, range_end].

    Accumulates the daily rate once per day shared by the item's window and
    the range, so boundary days are counted exactly as `enumerate_days`
    yields them.

    Args:
        item: The item record
        range_start: First day of the range (inclusive)
        range_end: Last day of the range (inclusive)

    Returns:
        Allocated cost, 0 if the window and range do not overlap
    """
    end = end_date(item.purchase_date, item.usage_days)
    if end is None:
        return 0.0

    first = max(item.purchase_date, range_start)
    last = min(end - timedelta(days=1), range_end)
    if first > last:
        return 0.0

    rate = daily_rate(item)
    total = 0.0
    for _ in enumerate_days(first, last):
        total += rate
    return total


def cost_in_range_for_collection(
    items: Iterable[Item],
    range_start: date,
    range_end: date
) -> float:
    """Sum of `cost_in_range` over a collection."""
    return sum(cost_in_range(item, range_start, range_end) for item in items)


def today_allocated_cost(items: Iterable[Item], today: date) -> float:
    """
    Cost incurred on a single day across the collection.

    Items whose window ended before `today` are no longer incurring cost.
    """
    total = 0.0
    for item in items:
        end = end_date(item.purchase_date, item.usage_days)
        if end is None or end < today:
            continue
        total += cost_in_range(item, today, today)
    return total


def month_to_date_cost(items: Iterable[Item], today: date) -> float:
    """Cost incurred from the first of today's month through today."""
    return cost_in_range_for_collection(items, today.replace(day=1), today)
