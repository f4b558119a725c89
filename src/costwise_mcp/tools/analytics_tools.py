"""
Cost analytics tools for the Costwise MCP server.

Provides MCP tools for:
- Aggregate statistics
- Month-over-month amortized cost comparison
- Category distribution
- Monthly purchase trends
- Purchase heatmaps with month drill-down
"""

from datetime import datetime
from typing import Any, Dict, Optional

from fastmcp import Context
from pydantic import Field

from .shared import resolve_now, to_jsonable


def register_tools(mcp):
    """Register cost analytics tools with the FastMCP server."""

    @mcp.tool()
    async def get_cost_statistics(
        as_of: Optional[str] = Field(
            default=None,
            description="Reference date (YYYY-MM-DD); defaults to now"
        ),
        ctx: Context = None
    ) -> Dict[str, Any]:
        """
        Get summary statistics for all tracked items.

        Returns total spend, item counts by status, the average unit price
        of items with a positive unit price, and how many active items reach
        the end of their expected use within the configured horizon.

        Args:
            as_of: Reference date for the expiring count

        Returns:
            Statistics over the whole collection
        """
        try:
            from ..analytics.config import load_config
            from ..analytics.statistics import build_statistics
            from ..analytics.store import load_items

            now = resolve_now(as_of)
            config = load_config()
            stats = build_statistics(
                load_items(), now,
                expiring_within_days=config.expiring_soon_days
            )

            return {
                "success": True,
                "statistics": to_jsonable(stats),
                "timestamp": datetime.now().isoformat()
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to build statistics: {str(e)}"
            }

    @mcp.tool()
    async def get_monthly_comparison(
        as_of: Optional[str] = Field(
            default=None,
            description="Reference date (YYYY-MM-DD); defaults to today"
        ),
        ctx: Context = None
    ) -> Dict[str, Any]:
        """
        Compare this month's amortized cost with last month's.

        The current figure covers the first of the month through the
        reference date; the previous figure covers all of last month. Costs
        are spread evenly over each item's usage days.

        Args:
            as_of: Reference date

        Returns:
            Current and previous totals and the growth rate in percent
        """
        try:
            from ..analytics.store import load_items
            from ..analytics.trend_analysis import compare_months

            today = resolve_now(as_of).date()
            comparison = compare_months(load_items(), today)

            return {
                "success": True,
                "as_of": today.isoformat(),
                "comparison": to_jsonable(comparison)
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to compare months: {str(e)}"
            }

    @mcp.tool()
    async def get_category_breakdown(ctx: Context = None) -> Dict[str, Any]:
        """
        Get item count and spend per category.

        Items without a category are grouped under the configured
        'uncategorized' label. Percentages are relative to all items.

        Returns:
            Category list, largest spend first
        """
        try:
            from ..analytics.categories import category_distribution
            from ..analytics.config import load_config
            from ..analytics.store import load_items

            config = load_config()
            categories = category_distribution(
                load_items(), uncategorized_label=config.uncategorized_label
            )

            return {
                "success": True,
                "categories": to_jsonable(categories),
                "count": len(categories)
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to build category breakdown: {str(e)}"
            }

    @mcp.tool()
    async def get_cost_trend(
        months: Optional[int] = Field(
            default=None, ge=1, le=36,
            description="Number of trailing months; defaults to the configured 6"
        ),
        as_of: Optional[str] = Field(
            default=None,
            description="Reference date (YYYY-MM-DD); defaults to today"
        ),
        ctx: Context = None
    ) -> Dict[str, Any]:
        """
        Get purchase spend and item count per month.

        Months with no purchases are included so the series has no gaps.

        Args:
            months: How many months to include, ending with the current one
            as_of: Reference date

        Returns:
            Chronological list of monthly points
        """
        try:
            from ..analytics.config import load_config
            from ..analytics.store import load_items
            from ..analytics.trend_analysis import cost_trend

            today = resolve_now(as_of).date()
            months = months or load_config().trend_months
            trend = cost_trend(load_items(), today, months=months)

            return {
                "success": True,
                "months": months,
                "trend": to_jsonable(trend)
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to build cost trend: {str(e)}"
            }

    @mcp.tool()
    async def get_purchase_heatmap(
        view: str = Field(
            default="daily",
            description="Heatmap view: 'daily' (trailing days) or 'monthly' (trailing months)"
        ),
        month: Optional[str] = Field(
            default=None,
            description="Expand one month (YYYY-MM) into its daily buckets"
        ),
        as_of: Optional[str] = Field(
            default=None,
            description="Reference date (YYYY-MM-DD); defaults to today"
        ),
        ctx: Context = None
    ) -> Dict[str, Any]:
        """
        Get purchase spend bucketed by day or month.

        Each bucket includes an intensity between 0 and 1 relative to the
        series' own min/max, for colour scaling. A drill-down month is ranged
        on its own days only.

        Args:
            view: 'daily' or 'monthly'
            month: Optional YYYY-MM month to expand into days
            as_of: Reference date

        Returns:
            Buckets with amounts and intensities plus the amount range
        """
        try:
            from ..analytics.config import load_config
            from ..analytics.heatmap import daily_heatmap, month_drilldown, monthly_heatmap
            from ..analytics.store import load_items

            items = load_items()
            config = load_config()

            if month:
                try:
                    year, month_num = (int(part) for part in month.split('-'))
                    if not 1 <= month_num <= 12:
                        raise ValueError
                except ValueError:
                    return {
                        "success": False,
                        "error": f"Invalid month: {month}. Use YYYY-MM"
                    }
                series = month_drilldown(items, year, month_num)
            elif view == 'daily':
                series = daily_heatmap(items, resolve_now(as_of).date(),
                                       days=config.heatmap_days)
            elif view == 'monthly':
                series = monthly_heatmap(items, resolve_now(as_of).date(),
                                         months=config.heatmap_months)
            else:
                return {
                    "success": False,
                    "error": f"Unknown view: {view}. Use 'daily' or 'monthly'"
                }

            return {
                "success": True,
                "granularity": series.granularity,
                "month": month,
                "buckets": [
                    {
                        "key": b.key,
                        "label": b.label,
                        "amount": b.amount,
                        "intensity": round(series.range.intensity(b.amount), 3)
                    }
                    for b in series.buckets
                ],
                "range": to_jsonable(series.range)
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to build heatmap: {str(e)}"
            }
