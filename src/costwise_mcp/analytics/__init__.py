"""
Analytics package for purchase cost tracking.

This package provides:
- Unit price calculation (per use / per day)
- Cost amortization over each item's usage window
- Aggregate statistics and category distribution
- Month-over-month comparison, monthly trends and purchase heatmaps
- Expiry predictions and reminder drafts
- Read-only access to the JSON item store
"""

from .models import (
    UNCATEGORIZED,
    CalculationType,
    ItemStatus,
    Item,
    Statistics,
    MonthlyComparison,
    CategoryStat,
    TrendPoint,
    HeatmapBucket,
    AmountRange,
    HeatmapSeries,
    ReminderDraft,
    DashboardSummary,
)
from .dates import (
    parse_date,
    days_between,
    end_date,
    remaining_days,
    month_range,
    enumerate_days,
)
from .pricing import (
    unit_price,
    item_unit_price,
)
from .amortization import (
    daily_rate,
    cost_in_range,
    cost_in_range_for_collection,
    today_allocated_cost,
    month_to_date_cost,
)
from .statistics import build_statistics
from .categories import category_distribution
from .trend_analysis import (
    growth_rate,
    compare_months,
    cost_trend,
)
from .heatmap import (
    amount_range,
    daily_heatmap,
    monthly_heatmap,
    month_drilldown,
)
from .predictions import (
    item_remaining_days,
    is_expiring_soon,
    is_expired,
    expiring_items,
    reminder_drafts,
)
from .reporting import (
    dashboard_summary,
    filter_items,
    sort_items,
    item_summary,
)
from .formatting import (
    format_number,
    format_currency,
)
from .config import (
    load_config,
    save_config,
    update_config,
    reset_config,
    get_config_summary,
    AnalyticsConfig,
)
from .store import (
    load_items,
    parse_items,
    ItemStoreError,
)

__all__ = [
    # Models
    'UNCATEGORIZED',
    'CalculationType',
    'ItemStatus',
    'Item',
    'Statistics',
    'MonthlyComparison',
    'CategoryStat',
    'TrendPoint',
    'HeatmapBucket',
    'AmountRange',
    'HeatmapSeries',
    'ReminderDraft',
    'DashboardSummary',
    # Dates
    'parse_date',
    'days_between',
    'end_date',
    'remaining_days',
    'month_range',
    'enumerate_days',
    # Pricing
    'unit_price',
    'item_unit_price',
    # Amortization
    'daily_rate',
    'cost_in_range',
    'cost_in_range_for_collection',
    'today_allocated_cost',
    'month_to_date_cost',
    # Statistics
    'build_statistics',
    # Categories
    'category_distribution',
    # Trends
    'growth_rate',
    'compare_months',
    'cost_trend',
    # Heatmap
    'amount_range',
    'daily_heatmap',
    'monthly_heatmap',
    'month_drilldown',
    # Predictions
    'item_remaining_days',
    'is_expiring_soon',
    'is_expired',
    'expiring_items',
    'reminder_drafts',
    # Reporting
    'dashboard_summary',
    'filter_items',
    'sort_items',
    'item_summary',
    # Formatting
    'format_number',
    'format_currency',
    # Config
    'load_config',
    'save_config',
    'update_config',
    'reset_config',
    'get_config_summary',
    'AnalyticsConfig',
    # Store
    'load_items',
    'parse_items',
    'ItemStoreError',
]
