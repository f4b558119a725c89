"""
Home screen summary and item list views.

Generates the dashboard figures and the searchable, sortable item list.
"""

from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Union

from .amortization import daily_rate, month_to_date_cost, today_allocated_cost
from .config import AnalyticsConfig
from .dates import end_date
from .models import UNCATEGORIZED, DashboardSummary, Item, ItemStatus
from .predictions import expiring_items, item_remaining_days
from .pricing import item_unit_price

SORT_KEYS = ('date_added', 'purchase_date', 'expiry_date', 'unit_price')


def _as_day(now: Union[date, datetime]) -> date:
    return now.date() if isinstance(now, datetime) else now


def _naive(value: Optional[datetime]) -> datetime:
    """Comparable timestamp; aware values are converted to naive UTC."""
    if value is None:
        return datetime.min
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def dashboard_summary(
    items: Iterable[Item],
    now: Union[date, datetime],
    config: Optional[AnalyticsConfig] = None
) -> DashboardSummary:
    """
    Figures for the home screen.

    Args:
        items: Item collection
        now: Reference time
        config: Analytics configuration, defaults when omitted

    Returns:
        DashboardSummary with totals, allocated costs and the short lists
    """
    config = config or AnalyticsConfig()
    items = list(items)
    today = _as_day(now)
    size = config.dashboard_list_size

    recent = sorted(items, key=lambda i: i.purchase_date, reverse=True)[:size]
    top_price = sorted(items, key=lambda i: i.total_cost, reverse=True)[:size]

    return DashboardSummary(
        total_cost=sum(item.total_cost for item in items),
        today_cost=today_allocated_cost(items, today),
        month_to_date_cost=month_to_date_cost(items, today),
        recent_items=recent,
        top_price_items=top_price,
        expiring_items=expiring_items(items, now, config.expiring_soon_days, limit=size)
    )


def _matches_query(item: Item, query: str) -> bool:
    """Case-insensitive match of the whole query or any of its words."""
    haystacks = [
        (item.name or '').lower(),
        (item.category or '').lower(),
        (item.notes or '').lower(),
    ]
    query = query.lower().strip()
    words = [query] + query.split()
    return any(word in text for word in words for text in haystacks)


def filter_items(
    items: Iterable[Item],
    query: Optional[str] = None,
    status: Optional[ItemStatus] = None,
    day: Optional[date] = None,
    month: Optional[str] = None
) -> List[Item]:
    """
    Narrow the item list.

    Args:
        items: Item collection
        query: Search text matched against name, category and notes
        status: Keep only items with this status
        day: Keep only items purchased on this day
        month: Keep only items purchased in this YYYY-MM month

    Returns:
        Matching items in their original order
    """
    result = list(items)

    if query and query.strip():
        result = [item for item in result if _matches_query(item, query)]
    if status is not None:
        result = [item for item in result if item.status == status]
    if day is not None:
        result = [item for item in result if item.purchase_date == day]
    elif month:
        result = [item for item in result
                  if item.purchase_date.isoformat()[:7] == month]

    return result


def sort_items(items: Iterable[Item], sort_by: str) -> List[Item]:
    """
    Order the item list.

    - date_added: newest record first
    - purchase_date: latest purchase first
    - expiry_date: soonest end of use first, items without a window last
    - unit_price: highest unit price first

    Unknown keys keep the incoming order.
    """
    result = list(items)

    if sort_by == 'date_added':
        result.sort(key=lambda i: _naive(i.created_at), reverse=True)
    elif sort_by == 'purchase_date':
        result.sort(key=lambda i: i.purchase_date, reverse=True)
    elif sort_by == 'expiry_date':
        def expiry_key(item):
            end = end_date(item.purchase_date, item.usage_days)
            return (end is None, end or date.max)
        result.sort(key=expiry_key)
    elif sort_by == 'unit_price':
        result.sort(key=item_unit_price, reverse=True)

    return result


def item_summary(
    item: Item,
    now: Union[date, datetime],
    uncategorized_label: str = UNCATEGORIZED
) -> Dict[str, Any]:
    """Plain-dict view of an item with its derived cost figures."""
    end = end_date(item.purchase_date, item.usage_days)
    return {
        'id': item.id,
        'name': item.name,
        'category': item.category_or(uncategorized_label),
        'status': item.status.value,
        'calculation_type': item.calculation_type.value,
        'total_cost': item.total_cost,
        'quantity': item.quantity,
        'purchase_date': item.purchase_date.isoformat(),
        'unit_price': item_unit_price(item),
        'daily_rate': daily_rate(item),
        'end_date': end.isoformat() if end else None,
        'remaining_days': item_remaining_days(item, now),
    }
