"""Display formatting for summaries and CLI output."""

from src.engine.utils.numeric import round_to


def format_currency(value: float) -> str:
    """Format a dollar amount, e.g. -1234.5 -> "-$1,234.50"."""
    rounded = round_to(value, 2)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def format_percent(value: float, decimals: int = 2) -> str:
    """Format a percentage value, e.g. 12.345 -> "12.35%"."""
    return f"{round_to(value, decimals):.{decimals}f}%"
