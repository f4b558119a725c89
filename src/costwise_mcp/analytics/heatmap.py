"""
Purchase heatmap series.

Daily view: trailing days, one bucket per day.
Monthly view: trailing months, one bucket per month; a single month can be
expanded into its daily buckets. The expanded month gets its own amount
range so its days stay visually distinct.
"""

from datetime import date
from typing import Dict, Iterable, List

from .dates import enumerate_days, month_key, month_range, trailing_days, trailing_months
from .models import AmountRange, HeatmapBucket, HeatmapSeries, Item


def amount_range(buckets: List[HeatmapBucket]) -> AmountRange:
    """Smallest and largest amount of a bucket list, (0, 0) when empty."""
    if not buckets:
        return AmountRange()
    amounts = [b.amount for b in buckets]
    return AmountRange(min=min(amounts), max=max(amounts))


def _daily_series(items: Iterable[Item], days: List[date]) -> HeatmapSeries:
    amounts: Dict[date, float] = {day: 0.0 for day in days}
    for item in items:
        if item.purchase_date in amounts:
            amounts[item.purchase_date] += item.total_cost

    buckets = [
        HeatmapBucket(
            key=day.isoformat(),
            label=f"{day.month}/{day.day}",
            amount=amount
        )
        for day, amount in amounts.items()
    ]
    return HeatmapSeries(granularity='daily', buckets=buckets,
                         range=amount_range(buckets))


def daily_heatmap(items: Iterable[Item], today: date, days: int = 30) -> HeatmapSeries:
    """Purchase totals for each of the trailing `days` days."""
    return _daily_series(items, trailing_days(today, days))


def monthly_heatmap(items: Iterable[Item], today: date, months: int = 12) -> HeatmapSeries:
    """Purchase totals for each of the trailing `months` months."""
    amounts: Dict[str, float] = {
        f"{year:04d}-{month:02d}": 0.0
        for year, month in trailing_months(today, months)
    }
    for item in items:
        key = month_key(item.purchase_date)
        if key in amounts:
            amounts[key] += item.total_cost

    buckets = [
        HeatmapBucket(key=key, label=key, amount=amount)
        for key, amount in amounts.items()
    ]
    return HeatmapSeries(granularity='monthly', buckets=buckets,
                         range=amount_range(buckets))


def month_drilldown(items: Iterable[Item], year: int, month: int) -> HeatmapSeries:
    """Daily buckets of one month, ranged within that month only."""
    start, end = month_range(year, month)
    return _daily_series(items, list(enumerate_days(start, end)))
