"""Portfolio-level analysis across positions."""

from src.engine.portfolio.aggregate import calc_portfolio_metrics
from src.engine.portfolio.batch import analyze_batch_risks, collect_risk_flags
from src.engine.portfolio.protocols import PortfolioPosition, RiskAnalyzable

__all__ = [
    "PortfolioPosition",
    "RiskAnalyzable",
    "analyze_batch_risks",
    "calc_portfolio_metrics",
    "collect_risk_flags",
]
