"""Basic return calculations."""

DAYS_PER_YEAR = 365


def calc_return_pct(profit: float, capital: float) -> float:
    """Calculate a simple return percentage.

    Args:
        profit: Profit in dollars.
        capital: Capital committed in dollars.

    Returns:
        profit / capital * 100, or 0.0 when capital is 0.

    Example:
        >>> calc_return_pct(300, 10000)
        3.0
    """
    if capital == 0:
        return 0.0
    return profit / capital * 100


def annualize_return(profit: float, capital_at_risk: float, days: int) -> float:
    """Annualize the return of a position held for a number of days.

    Formula: (profit / capital_at_risk) * (365 / max(days, 1)) * 100

    Same-day and expired positions (days <= 0) are treated as one day so the
    result stays finite.

    Args:
        profit: Profit in dollars.
        capital_at_risk: Capital committed in dollars.
        days: Holding period in calendar days.

    Returns:
        Annualized return in percent, or 0.0 when capital_at_risk is 0.

    Example:
        >>> annualize_return(300, 10000, 30)
        36.5
    """
    if capital_at_risk == 0:
        return 0.0
    return (profit / capital_at_risk) * (DAYS_PER_YEAR / max(days, 1)) * 100
