"""Return calculations."""

from src.engine.returns.basic import DAYS_PER_YEAR, annualize_return, calc_return_pct

__all__ = [
    "DAYS_PER_YEAR",
    "annualize_return",
    "calc_return_pct",
]
