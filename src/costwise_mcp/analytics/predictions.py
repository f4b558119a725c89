"""
Expiry predictions for items in use.

Both predicates are stateless and evaluated against the `now` passed in.
Turning a positive result into a stored reminder, and not repeating it, is
left to the caller.
"""

from datetime import date, datetime
from typing import Iterable, List, Optional, Union

from .dates import end_date, remaining_days
from .models import Item, ReminderDraft

Now = Union[date, datetime]


def item_remaining_days(item: Item, now: Now) -> Optional[int]:
    """Days until the item's end of use, None without a window."""
    end = end_date(item.purchase_date, item.usage_days)
    if end is None:
        return None
    return remaining_days(end, now)


def is_expiring_soon(item: Item, now: Now, days_before: int = 3) -> bool:
    """Active item whose end of use is 1 to `days_before` days away."""
    if not item.is_active:
        return False
    remaining = item_remaining_days(item, now)
    if remaining is None:
        return False
    return 0 < remaining <= days_before


def is_expired(item: Item, now: Now) -> bool:
    """Active item whose end of use is today or already past."""
    if not item.is_active:
        return False
    remaining = item_remaining_days(item, now)
    if remaining is None:
        return False
    return remaining <= 0


def expiring_items(
    items: Iterable[Item],
    now: Now,
    days_before: int = 3,
    limit: Optional[int] = None
) -> List[Item]:
    """Expiring-soon items, the ones closest to their end first."""
    result = [item for item in items if is_expiring_soon(item, now, days_before)]
    result.sort(key=lambda item: item_remaining_days(item, now))
    return result[:limit] if limit is not None else result


def reminder_drafts(
    items: Iterable[Item],
    now: Now,
    days_before: int = 3
) -> List[ReminderDraft]:
    """
    Reminder candidates for expired and expiring items.

    Args:
        items: Item collection
        now: Reference time
        days_before: Lead time for 'expiring' reminders

    Returns:
        One draft per qualifying item, dated at the item's end of use
    """
    drafts = []
    for item in items:
        if is_expired(item, now):
            kind = 'expired'
        elif is_expiring_soon(item, now, days_before):
            kind = 'expiring'
        else:
            continue
        drafts.append(ReminderDraft(
            item_id=item.id,
            item_name=item.name,
            reminder_date=end_date(item.purchase_date, item.usage_days),
            type=kind
        ))
    return drafts
