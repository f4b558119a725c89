"""
Costwise MCP server.

Exposes the cost analytics over MCP tools and prompts.
"""

import logging

from fastmcp import FastMCP

from .prompts import register_prompts
from .tools import analytics_tools, config_tools, item_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "Costwise"
SERVER_INSTRUCTIONS = """
Costwise tracks purchased items and tells you what they really cost per use
or per day. Use the analytics tools for statistics, month-over-month
comparison, category breakdown, trends and heatmaps; the item tools to list
and inspect items, see what is expiring, and calculate unit prices.
"""


def create_server() -> FastMCP:
    """Create the FastMCP server with all tools and prompts registered."""
    mcp = FastMCP(name=SERVER_NAME, instructions=SERVER_INSTRUCTIONS)

    analytics_tools.register_tools(mcp)
    item_tools.register_tools(mcp)
    config_tools.register_tools(mcp)
    register_prompts(mcp)

    return mcp


def main():
    """Console entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger.info("Starting %s MCP server", SERVER_NAME)
    create_server().run()


if __name__ == "__main__":
    main()
