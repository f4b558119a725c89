"""
Month-over-month comparison and monthly cost trends.
"""

from datetime import date
from typing import Dict, Iterable, List

from .amortization import cost_in_range_for_collection
from .dates import month_key, month_range, shift_months, trailing_months
from .models import Item, MonthlyComparison, TrendPoint


def growth_rate(current: float, previous: float) -> float:
    """
    Percentage change from `previous` to `current`.

    Going from nothing to something counts as +100%; nothing to nothing
    is 0%.
    """
    if previous > 0:
        return (current - previous) / previous * 100
    return 100.0 if current > 0 else 0.0


def compare_months(items: Iterable[Item], today: date) -> MonthlyComparison:
    """
    Compare amortized cost of this month so far with all of last month.

    Args:
        items: Item collection
        today: Last day of the current-month range

    Returns:
        MonthlyComparison with both totals and the growth rate in percent
    """
    items = list(items)

    current = cost_in_range_for_collection(items, today.replace(day=1), today)

    prev_year, prev_month = shift_months(today.year, today.month, -1)
    prev_start, prev_end = month_range(prev_year, prev_month)
    previous = cost_in_range_for_collection(items, prev_start, prev_end)

    return MonthlyComparison(
        current=current,
        previous=previous,
        growth_rate_percent=growth_rate(current, previous)
    )


def cost_trend(items: Iterable[Item], today: date, months: int = 6) -> List[TrendPoint]:
    """
    Purchase totals per month for the trailing `months` months.

    Buckets by purchase month, oldest first, including empty months.
    """
    buckets: Dict[str, TrendPoint] = {}
    for year, month in trailing_months(today, months):
        key = f"{year:04d}-{month:02d}"
        buckets[key] = TrendPoint(month=key, total_cost=0.0, item_count=0)

    for item in items:
        point = buckets.get(month_key(item.purchase_date))
        if point is not None:
            point.total_cost += item.total_cost
            point.item_count += 1

    return list(buckets.values())
