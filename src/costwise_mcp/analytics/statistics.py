"""
Aggregate statistics over the item collection.

Everything is recomputed from the collection on each call; nothing is cached.
"""

from datetime import date, datetime
from typing import Iterable, Optional, Union

from .dates import end_date, remaining_days
from .models import Item, ItemStatus, Statistics
from .pricing import item_unit_price

DEFAULT_EXPIRING_DAYS = 3


def build_statistics(
    items: Iterable[Item],
    now: Union[date, datetime],
    expiring_within_days: Optional[int] = None
) -> Statistics:
    """
    Roll up the collection into summary counts and sums.

    Args:
        items: Full item collection, any status
        now: Reference time for the expiring count
        expiring_within_days: Expiry horizon, defaults to 3 days

    Returns:
        Statistics; all zeros for an empty collection
    """
    horizon = expiring_within_days
    if horizon is None:
        horizon = DEFAULT_EXPIRING_DAYS
    stats = Statistics()

    unit_price_sum = 0.0
    priced_count = 0

    for item in items:
        stats.item_count += 1
        stats.total_cost += item.total_cost

        if item.status == ItemStatus.ACTIVE:
            stats.active_count += 1
            end = end_date(item.purchase_date, item.usage_days)
            if end is not None and 0 < remaining_days(end, now) <= horizon:
                stats.expiring_count += 1
        elif item.status == ItemStatus.FINISHED:
            stats.finished_count += 1

        # Degenerate records (no positive unit price) would dilute the mean
        price = item_unit_price(item)
        if price > 0:
            unit_price_sum += price
            priced_count += 1

    if priced_count > 0:
        stats.average_unit_price = unit_price_sum / priced_count

    return stats
