"""Shared date, rounding and formatting helpers."""

from src.engine.utils.dates import days_between, parse_date, to_local_date
from src.engine.utils.formatting import format_currency, format_percent
from src.engine.utils.numeric import (
    clamp,
    generate_price_range,
    price_range_around,
    round_to,
)

__all__ = [
    "days_between",
    "parse_date",
    "to_local_date",
    "format_currency",
    "format_percent",
    "clamp",
    "generate_price_range",
    "price_range_around",
    "round_to",
]
