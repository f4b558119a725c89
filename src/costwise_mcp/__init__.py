"""
Costwise MCP: purchase cost tracking and amortization analytics.
"""

__version__ = "0.1.0"
