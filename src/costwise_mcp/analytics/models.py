"""
Item record and analytics result types.

The item record is owned by the external item store. It is validated with
pydantic so store exports (camelCase keys, ISO timestamps) and Python callers
(snake_case keys, date objects) produce the same immutable value.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNCATEGORIZED = 'Uncategorized'


class CalculationType(str, Enum):
    """Amortization basis of an item."""
    PER_USE = 'perUse'
    PER_DAY = 'perDay'


class ItemStatus(str, Enum):
    """Lifecycle status of an item."""
    ACTIVE = 'active'
    FINISHED = 'finished'
    DISCARDED = 'discarded'
    ARCHIVED = 'archived'


class Item(BaseModel):
    """
    A purchased item as supplied by the item store.

    `quantity` is informational only and never takes part in pricing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str = ''
    total_cost: float = Field(default=0.0, alias='totalCost')
    quantity: float = 1.0
    purchase_date: date = Field(alias='purchaseDate')
    calculation_type: CalculationType = Field(
        default=CalculationType.PER_USE, alias='calculationType'
    )
    total_uses: Optional[int] = Field(default=None, alias='totalUses')
    usage_days: Optional[int] = Field(default=None, alias='usageDays')
    category: Optional[str] = None
    notes: Optional[str] = None
    status: ItemStatus = ItemStatus.ACTIVE
    created_at: Optional[datetime] = Field(default=None, alias='createdAt')
    updated_at: Optional[datetime] = Field(default=None, alias='updatedAt')

    @field_validator('quantity', mode='before')
    @classmethod
    def _default_quantity(cls, value):
        # Missing, empty or zero quantity means one unit
        if value is None or value == '' or value == 0:
            return 1.0
        return value

    @field_validator('purchase_date', mode='before')
    @classmethod
    def _truncate_timestamp(cls, value):
        # Store exports may carry a full ISO timestamp; only the day matters
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and 'T' in value:
            return value.split('T', 1)[0]
        return value

    def category_or(self, uncategorized_label: str = UNCATEGORIZED) -> str:
        """Category name, or `uncategorized_label` when it is empty."""
        if self.category and self.category.strip():
            return self.category
        return uncategorized_label

    @property
    def category_label(self) -> str:
        return self.category_or()

    @property
    def has_window(self) -> bool:
        """Whether the item has a usable amortization window."""
        return self.usage_days is not None and self.usage_days > 0

    @property
    def is_active(self) -> bool:
        return self.status == ItemStatus.ACTIVE


@dataclass
class Statistics:
    """Aggregate figures over the whole item collection."""
    total_cost: float = 0.0
    item_count: int = 0
    active_count: int = 0
    finished_count: int = 0
    average_unit_price: float = 0.0
    expiring_count: int = 0


@dataclass
class MonthlyComparison:
    """Amortized cost of the current month so far vs. the previous month."""
    current: float
    previous: float
    growth_rate_percent: float


@dataclass
class CategoryStat:
    """Count and cost share of one category."""
    category: str
    count: int
    total_cost: float
    percentage_of_count: float
    percentage_of_cost: float


@dataclass
class TrendPoint:
    """Purchases made in one calendar month."""
    month: str  # YYYY-MM
    total_cost: float
    item_count: int


@dataclass
class HeatmapBucket:
    """One day or month slot of a heatmap series."""
    key: str  # YYYY-MM-DD or YYYY-MM
    label: str
    amount: float


@dataclass
class AmountRange:
    """Smallest and largest bucket amount of a series."""
    min: float = 0.0
    max: float = 0.0

    def intensity(self, amount: float) -> float:
        """
        Map an amount onto 0-1 for colour scaling.

        A flat series (min == max) has no variation and maps to 0.
        """
        if self.max == self.min:
            return 0.0
        return (amount - self.min) / (self.max - self.min)


@dataclass
class HeatmapSeries:
    """Buckets of one heatmap view plus their amount range."""
    granularity: str  # 'daily' or 'monthly'
    buckets: List[HeatmapBucket] = field(default_factory=list)
    range: AmountRange = field(default_factory=AmountRange)


@dataclass
class ReminderDraft:
    """An expiry signal the reminder subsystem may choose to persist."""
    item_id: str
    item_name: str
    reminder_date: date
    type: str  # 'expiring' or 'expired'


@dataclass
class DashboardSummary:
    """Figures shown on the home screen."""
    total_cost: float
    today_cost: float
    month_to_date_cost: float
    recent_items: List[Item]
    top_price_items: List[Item]
    expiring_items: List[Item]
