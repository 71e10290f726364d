"""Risk threshold checks."""

from src.engine.risk.checks import (
    check_assignment_risk,
    check_long_call_price_risk,
    check_price_risk,
    check_return_risk,
    check_size_risk,
    check_time_risk,
    is_assignment_likely,
    most_severe,
)

__all__ = [
    "check_assignment_risk",
    "check_long_call_price_risk",
    "check_price_risk",
    "check_return_risk",
    "check_size_risk",
    "check_time_risk",
    "is_assignment_likely",
    "most_severe",
]
