"""Display formatting for monetary amounts."""


def format_number(amount: float) -> str:
    """
    Format an amount for display.

    Below 1,000: two decimals. Below 10,000: two decimals with thousands
    separators. From 10,000 up: in units of 10,000 with the 万 suffix.
    """
    if amount < 1000:
        return f"{amount:.2f}"
    if amount < 10000:
        return f"{amount:,.2f}"
    return f"{amount / 10000:.2f}万"


def format_currency(amount: float, symbol: str = "¥") -> str:
    return f"{symbol}{format_number(amount)}"
