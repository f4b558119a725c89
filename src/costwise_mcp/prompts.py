"""
MCP prompts for the Costwise MCP server
"""

from fastmcp import Context


def register_prompts(mcp):
    """Register prompts with the FastMCP server"""

    @mcp.prompt()
    async def monthly_cost_review(ctx: Context = None) -> str:
        """
        Generate a prompt reviewing this month's spending against last month.

        Returns:
            A prompt for a month-over-month cost review
        """
        return """Please review how my spending this month compares with last month.

Use get_monthly_comparison to get the amortized cost so far this month and for
all of last month, then get_category_breakdown to see where the money goes.

Tell me:
1. Whether I am spending more or less than last month, and by what percentage
2. Which categories account for most of my spending
3. Anything that looks unusual

Keep in mind the monthly figures spread each item's price over its expected
days of use, so a big purchase weighs on every month it is in use.
"""

    @mcp.prompt()
    async def purchase_value_check(item_name: str = "", ctx: Context = None) -> str:
        """
        Generate a prompt judging whether purchases were economical.

        Args:
            item_name: Optional item to focus on

        Returns:
            A prompt for a value-for-money analysis
        """
        focus = f' Focus on "{item_name}".' if item_name else ""

        return f"""Please help me judge whether my purchases were worth the money.{focus}

Use list_items sorted by unit_price to find my most expensive items per use
or per day, and get_item_details for anything that stands out.

For each item, show:
- Total cost and unit price (per use or per day)
- Days of use remaining

Point out items with a high unit price and suggest which ones I should use
more often to bring the cost per use down.
"""

    @mcp.prompt()
    async def expiring_items_check(ctx: Context = None) -> str:
        """
        Generate a prompt listing items close to the end of their expected use.

        Returns:
            A prompt for an expiry check
        """
        return """Which of my items are about to run out or have passed their expected use?

Use get_reminder_candidates to list expired and expiring items, and
get_expiring_items for the ones ending soonest.

Group them into "expired" and "expiring soon", show how many days each has
left, and ask whether I want to mark any of them as finished.
"""

    @mcp.prompt()
    async def spending_patterns(ctx: Context = None) -> str:
        """
        Generate a prompt for analyzing purchase timing patterns.

        Returns:
            A prompt for purchase pattern analysis
        """
        return """Please analyze when and how much I buy.

Use get_cost_trend for the monthly totals and get_purchase_heatmap with the
'monthly' view, then drill into the busiest month with the month parameter.

Present:
1. **Trend**: Is my monthly spending rising or falling?
2. **Peaks**: Which months and days had the highest spend?
3. **Habits**: Any recurring pattern in when I make purchases?

Finish with one or two actionable suggestions.
"""
