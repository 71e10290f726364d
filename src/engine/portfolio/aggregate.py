"""Portfolio P&L aggregation.

Example:
    >>> from src.engine.portfolio import calc_portfolio_metrics
    >>> metrics = calc_portfolio_metrics(positions)
    >>> print(f"ROO: {metrics.portfolio_roo}%")
"""

from __future__ import annotations

import logging
from typing import Iterable

from src.engine.models.portfolio import PortfolioMetrics
from src.engine.models.strategy import is_unlimited
from src.engine.portfolio.protocols import PortfolioPosition
from src.engine.returns import calc_return_pct
from src.engine.utils.numeric import round_to

logger = logging.getLogger(__name__)


def calc_portfolio_metrics(positions: Iterable[PortfolioPosition]) -> PortfolioMetrics:
    """Sum the P&L bounds of a list of positions.

    Unlimited max profits (long calls) are left out of total_max_profit and
    counted in unlimited_profit_positions; their max loss still counts.

    Args:
        positions: Objects exposing max_profit(), max_loss() and
            days_to_expiration().

    Returns:
        PortfolioMetrics with money rounded to cents and the average DTE to
        one decimal. portfolio_roo is 0 unless total_max_loss is positive.
        An empty list gives all zeros.
    """
    positions = list(positions)
    if not positions:
        return PortfolioMetrics()

    total_max_profit = 0.0
    total_max_loss = 0.0
    total_days = 0
    unlimited = 0

    for position in positions:
        max_profit = position.max_profit()
        if is_unlimited(max_profit):
            unlimited += 1
        else:
            total_max_profit += max_profit
        total_max_loss += position.max_loss()
        total_days += position.days_to_expiration()

    # ROO needs positive capital at risk
    portfolio_roo = 0.0
    if total_max_loss > 0:
        portfolio_roo = calc_return_pct(total_max_profit, total_max_loss)

    if unlimited:
        logger.debug(f"{unlimited} position(s) with unlimited profit left out of total_max_profit")

    return PortfolioMetrics(
        total_max_profit=round_to(total_max_profit, 2),
        total_max_loss=round_to(total_max_loss, 2),
        average_days_to_expiration=round_to(total_days / len(positions), 1),
        portfolio_roo=round_to(portfolio_roo, 2),
        unlimited_profit_positions=unlimited,
    )
