"""
Calendar arithmetic used by the analytics engine.

Two day-count conventions live here on purpose:
- `days_between` / `remaining_days` take the ceiling of a time difference
  (used for expiry and remaining-day displays)
- `enumerate_days` walks a closed interval day by day (used for
  amortization accumulation)
"""

import calendar
import math
from datetime import date, datetime, timedelta, timezone
from typing import Iterator, List, Optional, Tuple, Union

DateLike = Union[date, datetime]

SECONDS_PER_DAY = 24 * 60 * 60


def _as_datetime(value: DateLike) -> datetime:
    """Promote a date to midnight; aware datetimes become naive UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime(value.year, value.month, value.day)


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_date(value) -> Optional[date]:
    """
    Parse a calendar date from a string, date or datetime.

    Handles both date-only and full timestamp strings. Returns None for
    anything unparseable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        if 'T' in value:
            return datetime.fromisoformat(value.replace('Z', '+00:00')).date()
        return datetime.strptime(value, '%Y-%m-%d').date()
    except (ValueError, TypeError):
        return None


def days_between(start: DateLike, end: DateLike, inclusive: bool = False) -> int:
    """
    Ceiling of the day difference `end - start`.

    Args:
        start: Interval start
        end: Interval end
        inclusive: Count both ends of the closed interval [start, end]

    Returns:
        Number of days, negative when end precedes start
    """
    seconds = (_as_datetime(end) - _as_datetime(start)).total_seconds()
    days = math.ceil(seconds / SECONDS_PER_DAY)
    return days + 1 if inclusive else days


def end_date(purchase_date: date, usage_days: Optional[int]) -> Optional[date]:
    """Projected end of use, or None when there is no usage window."""
    if not usage_days or usage_days <= 0:
        return None
    return purchase_date + timedelta(days=usage_days)


def remaining_days(end: date, now: DateLike) -> int:
    """Days left until `end`, rounded up. Negative once the end has passed."""
    return days_between(now, end)


def month_range(year: int, month: int) -> Tuple[date, date]:
    """First and last calendar day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def enumerate_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield every calendar day from start to end, both inclusive."""
    current = _as_date(start)
    stop = _as_date(end)
    while current <= stop:
        yield current
        current += timedelta(days=1)


def shift_months(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Move a (year, month) pair by `offset` months in either direction."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def month_key(day: DateLike) -> str:
    """YYYY-MM key of a date."""
    return f"{day.year:04d}-{day.month:02d}"


def trailing_months(today: DateLike, count: int) -> List[Tuple[int, int]]:
    """The `count` months ending with today's month, oldest first."""
    return [
        shift_months(today.year, today.month, -offset)
        for offset in range(count - 1, -1, -1)
    ]


def trailing_days(today: DateLike, count: int) -> List[date]:
    """The `count` days ending with today, oldest first."""
    last = _as_date(today)
    return [last - timedelta(days=offset) for offset in range(count - 1, -1, -1)]
