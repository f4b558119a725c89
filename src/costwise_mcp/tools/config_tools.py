"""
Configuration tools for the Costwise MCP server.
"""

from typing import Any, Dict, Optional

from fastmcp import Context
from pydantic import Field


def register_tools(mcp):
    """Register configuration tools with the FastMCP server."""

    @mcp.tool()
    async def get_analytics_config(ctx: Context = None) -> Dict[str, Any]:
        """
        Get the current analytics configuration.

        Returns:
            Expiry horizons, chart windows, dashboard list size and display settings
        """
        try:
            from ..analytics.config import get_config_summary

            return {"success": True, "config": get_config_summary()}
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to get config: {str(e)}"
            }

    @mcp.tool()
    async def update_analytics_config(
        expiring_soon_days: Optional[int] = Field(
            default=None, ge=1,
            description="Days before end of use at which an item counts as expiring"
        ),
        reminder_days_before: Optional[int] = Field(
            default=None, ge=1,
            description="Lead time in days for reminder candidates"
        ),
        trend_months: Optional[int] = Field(
            default=None, ge=1,
            description="Months in the cost trend"
        ),
        heatmap_days: Optional[int] = Field(
            default=None, ge=1,
            description="Days in the daily heatmap"
        ),
        heatmap_months: Optional[int] = Field(
            default=None, ge=1,
            description="Months in the monthly heatmap"
        ),
        currency_symbol: Optional[str] = Field(
            default=None,
            description="Currency prefix for formatted amounts"
        ),
        ctx: Context = None
    ) -> Dict[str, Any]:
        """
        Update analytics configuration values.

        Only the provided values change; everything else is kept.

        Returns:
            Updated configuration and the list of changed fields
        """
        try:
            from ..analytics.config import update_config

            return update_config(
                expiring_soon_days=expiring_soon_days,
                reminder_days_before=reminder_days_before,
                trend_months=trend_months,
                heatmap_days=heatmap_days,
                heatmap_months=heatmap_months,
                currency_symbol=currency_symbol,
            )
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to update config: {str(e)}"
            }

    @mcp.tool()
    async def reset_analytics_config(ctx: Context = None) -> Dict[str, Any]:
        """
        Reset analytics configuration to defaults.

        Returns:
            Default configuration
        """
        try:
            from ..analytics.config import reset_config

            return reset_config()
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to reset config: {str(e)}"
            }
