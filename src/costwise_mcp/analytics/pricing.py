"""
Unit price calculation.

Per-use items:  unit price = total cost / total uses
Per-day items:  unit price = total cost / usage days

The purchased quantity is never part of the formula. Buying three tubes of
toothpaste for 30 that last 90 days is priced per day of use, not per tube.
"""

from typing import Optional

from .models import CalculationType, Item


def unit_price(
    total_cost: float,
    calculation_type: CalculationType,
    total_uses: Optional[int] = None,
    usage_days: Optional[int] = None,
    quantity: Optional[float] = None
) -> float:
    """
    Normalized cost per use or per day.

    When the divisor for the calculation type is missing or not positive the
    unit price falls back to the total cost. That fallback is the pricing
    policy for incomplete records, not an error.

    Args:
        total_cost: Full price paid
        calculation_type: PER_USE or PER_DAY
        total_uses: Expected number of uses (PER_USE only)
        usage_days: Expected days of use (PER_DAY only)
        quantity: Accepted for parity with the item record; ignored

    Returns:
        Unit price, 0 when the total cost is not positive
    """
    if total_cost <= 0:
        return 0.0

    if calculation_type == CalculationType.PER_USE and total_uses and total_uses > 0:
        return total_cost / total_uses
    if calculation_type == CalculationType.PER_DAY and usage_days and usage_days > 0:
        return total_cost / usage_days

    return float(total_cost)


def item_unit_price(item: Item) -> float:
    """Unit price of an item record."""
    return unit_price(
        item.total_cost,
        item.calculation_type,
        total_uses=item.total_uses,
        usage_days=item.usage_days,
        quantity=item.quantity
    )
