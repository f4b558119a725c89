"""
Item tools for the Costwise MCP server.

Provides MCP tools for:
- Listing, searching and sorting tracked items
- Single item cost details
- Home screen dashboard
- Expiring items and reminder candidates
- Unit price and allocated cost calculations
"""

from datetime import datetime
from typing import Any, Dict, Optional

from fastmcp import Context
from pydantic import Field

from .shared import require_date, resolve_now, to_jsonable


def register_tools(mcp):
    """Register item tools with the FastMCP server."""

    # ========== Item Views ==========

    @mcp.tool()
    async def list_items(
        query: Optional[str] = Field(
            default=None,
            description="Search text matched against name, category and notes"
        ),
        status: Optional[str] = Field(
            default=None,
            description="Filter by status: 'active', 'finished', 'discarded', 'archived'"
        ),
        sort_by: str = Field(
            default="date_added",
            description="Sort: 'date_added', 'purchase_date', 'expiry_date', 'unit_price'"
        ),
        day: Optional[str] = Field(
            default=None,
            description="Only items purchased on this day (YYYY-MM-DD)"
        ),
        month: Optional[str] = Field(
            default=None,
            description="Only items purchased in this month (YYYY-MM); ignored when day is set"
        ),
        ctx: Context = None
    ) -> Dict[str, Any]:
        """
        List tracked items with their unit price and remaining days.

        Args:
            query: Search text
            status: Status filter
            sort_by: Sort order
            day: Purchase day filter
            month: Purchase month filter

        Returns:
            Matching items with derived cost figures
        """
        try:
            from ..analytics.config import load_config
            from ..analytics.models import ItemStatus
            from ..analytics.reporting import (
                SORT_KEYS, filter_items, item_summary, sort_items,
            )
            from ..analytics.store import load_items

            if sort_by not in SORT_KEYS:
                return {
                    "success": False,
                    "error": f"Unknown sort: {sort_by}. Use one of {', '.join(SORT_KEYS)}"
                }

            try:
                status_filter = ItemStatus(status) if status else None
            except ValueError:
                return {
                    "success": False,
                    "error": f"Unknown status: {status}"
                }

            now = resolve_now()
            items = filter_items(
                load_items(),
                query=query,
                status=status_filter,
                day=require_date(day, 'day') if day else None,
                month=month
            )
            items = sort_items(items, sort_by)
            label = load_config().uncategorized_label

            return {
                "success": True,
                "items": [item_summary(item, now, label) for item in items],
                "count": len(items)
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to list items: {str(e)}"
            }

    @mcp.tool()
    async def get_item_details(
        item_id: str = Field(
            description="The item ID to get cost details for"
        ),
        as_of: Optional[str] = Field(
            default=None,
            description="Reference date (YYYY-MM-DD); defaults to now"
        ),
        ctx: Context = None
    ) -> Dict[str, Any]:
        """
        Get cost details for a single item.

        Includes unit price, daily amortization rate, end of use, remaining
        days, and whether the item is expiring or expired.

        Args:
            item_id: The item identifier
            as_of: Reference date

        Returns:
            Item details with derived figures
        """
        try:
            from ..analytics.config import load_config
            from ..analytics.predictions import is_expired, is_expiring_soon
            from ..analytics.reporting import item_summary
            from ..analytics.store import load_items

            item = next((i for i in load_items() if i.id == item_id), None)
            if item is None:
                return {
                    "success": False,
                    "error": f"Item not found: {item_id}"
                }

            now = resolve_now(as_of)
            config = load_config()

            return {
                "success": True,
                "item": item_summary(item, now, config.uncategorized_label),
                "is_expiring_soon": is_expiring_soon(item, now, config.expiring_soon_days),
                "is_expired": is_expired(item, now)
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to get item details: {str(e)}"
            }

    @mcp.tool()
    async def get_dashboard(
        as_of: Optional[str] = Field(
            default=None,
            description="Reference date (YYYY-MM-DD); defaults to now"
        ),
        ctx: Context = None
    ) -> Dict[str, Any]:
        """
        Get the home screen overview.

        Shows total spend, cost allocated to today, cost allocated so far this
        month, and short lists of recent, most expensive and expiring items.

        Args:
            as_of: Reference date

        Returns:
            Dashboard figures with formatted amounts
        """
        try:
            from ..analytics.config import load_config
            from ..analytics.formatting import format_currency
            from ..analytics.reporting import dashboard_summary, item_summary
            from ..analytics.store import load_items

            now = resolve_now(as_of)
            config = load_config()
            summary = dashboard_summary(load_items(), now, config)
            symbol = config.currency_symbol
            label = config.uncategorized_label

            return {
                "success": True,
                "total_cost": summary.total_cost,
                "today_cost": summary.today_cost,
                "month_to_date_cost": summary.month_to_date_cost,
                "formatted": {
                    "total_cost": format_currency(summary.total_cost, symbol),
                    "today_cost": format_currency(summary.today_cost, symbol),
                    "month_to_date_cost": format_currency(
                        summary.month_to_date_cost, symbol),
                },
                "recent_items": [item_summary(i, now, label)
                                 for i in summary.recent_items],
                "top_price_items": [item_summary(i, now, label)
                                    for i in summary.top_price_items],
                "expiring_items": [item_summary(i, now, label)
                                   for i in summary.expiring_items],
                "timestamp": datetime.now().isoformat()
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to build dashboard: {str(e)}"
            }

    # ========== Expiry ==========

    @mcp.tool()
    async def get_expiring_items(
        days_before: Optional[int] = Field(
            default=None, ge=1, le=365,
            description="Look-ahead in days; defaults to the configured horizon"
        ),
        as_of: Optional[str] = Field(
            default=None,
            description="Reference date (YYYY-MM-DD); defaults to now"
        ),
        ctx: Context = None
    ) -> Dict[str, Any]:
        """
        Get active items close to the end of their expected use.

        Args:
            days_before: How many days ahead counts as expiring
            as_of: Reference date

        Returns:
            Expiring items, closest first
        """
        try:
            from ..analytics.config import load_config
            from ..analytics.predictions import expiring_items
            from ..analytics.reporting import item_summary
            from ..analytics.store import load_items

            now = resolve_now(as_of)
            config = load_config()
            days_before = days_before or config.expiring_soon_days
            items = expiring_items(load_items(), now, days_before)

            return {
                "success": True,
                "days_before": days_before,
                "items": [item_summary(item, now, config.uncategorized_label)
                          for item in items],
                "count": len(items)
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to get expiring items: {str(e)}"
            }

    @mcp.tool()
    async def get_reminder_candidates(
        as_of: Optional[str] = Field(
            default=None,
            description="Reference date (YYYY-MM-DD); defaults to now"
        ),
        ctx: Context = None
    ) -> Dict[str, Any]:
        """
        Get reminders that should exist for expired and expiring items.

        Candidates are not stored; deciding whether a reminder was already
        sent is up to the caller.

        Args:
            as_of: Reference date

        Returns:
            Reminder drafts with item, date and type ('expiring' or 'expired')
        """
        try:
            from ..analytics.config import load_config
            from ..analytics.predictions import reminder_drafts
            from ..analytics.store import load_items

            now = resolve_now(as_of)
            drafts = reminder_drafts(
                load_items(), now, load_config().reminder_days_before
            )

            return {
                "success": True,
                "reminders": to_jsonable(drafts),
                "count": len(drafts),
                "expired_count": sum(1 for d in drafts if d.type == 'expired')
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to get reminders: {str(e)}"
            }

    # ========== Calculators ==========

    @mcp.tool()
    async def calculate_unit_price(
        total_cost: float = Field(
            description="Total price paid"
        ),
        calculation_type: str = Field(
            default="perUse",
            description="'perUse' (cost per use) or 'perDay' (cost per day)"
        ),
        total_uses: Optional[int] = Field(
            default=None,
            description="Expected number of uses (perUse)"
        ),
        usage_days: Optional[int] = Field(
            default=None,
            description="Expected days of use (perDay)"
        ),
        quantity: Optional[float] = Field(
            default=None,
            description="Units purchased; informational, does not change the unit price"
        ),
        ctx: Context = None
    ) -> Dict[str, Any]:
        """
        Calculate the unit price of a purchase before recording it.

        Without the divisor for the chosen type the unit price equals the
        total cost.

        Returns:
            Unit price and the basis it was computed on
        """
        try:
            from ..analytics.models import CalculationType
            from ..analytics.pricing import unit_price

            try:
                calc_type = CalculationType(calculation_type)
            except ValueError:
                return {
                    "success": False,
                    "error": f"Unknown calculation type: {calculation_type}. "
                             "Use 'perUse' or 'perDay'"
                }

            return {
                "success": True,
                "unit_price": unit_price(
                    total_cost, calc_type,
                    total_uses=total_uses,
                    usage_days=usage_days,
                    quantity=quantity
                ),
                "calculation_type": calc_type.value
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to calculate unit price: {str(e)}"
            }

    @mcp.tool()
    async def get_allocated_cost(
        start_date: str = Field(
            description="First day of the range (YYYY-MM-DD)"
        ),
        end_date: str = Field(
            description="Last day of the range (YYYY-MM-DD), inclusive"
        ),
        ctx: Context = None
    ) -> Dict[str, Any]:
        """
        Get the amortized cost of all items within a date range.

        Each item's cost is spread evenly over its usage days; items without
        usage days contribute nothing.

        Args:
            start_date: Range start
            end_date: Range end

        Returns:
            Total allocated cost for the range and its daily average
        """
        try:
            from ..analytics.amortization import cost_in_range_for_collection
            from ..analytics.dates import days_between
            from ..analytics.store import load_items

            start = require_date(start_date, 'start_date')
            end = require_date(end_date, 'end_date')
            if start > end:
                return {
                    "success": False,
                    "error": "start_date must not be after end_date"
                }

            allocated = cost_in_range_for_collection(load_items(), start, end)
            days = days_between(start, end, inclusive=True)

            return {
                "success": True,
                "start_date": start.isoformat(),
                "end_date": end.isoformat(),
                "days": days,
                "allocated_cost": allocated,
                "daily_average": allocated / days
            }
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to allocate cost: {str(e)}"
            }
