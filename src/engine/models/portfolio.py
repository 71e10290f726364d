"""Portfolio-level data models.

Pure data containers; the aggregation logic lives in src.engine.portfolio.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.engine.models.enums import RiskCategory, RiskSeverity


def _zero_counts(enum_cls) -> dict[str, int]:
    return {member.value: 0 for member in enum_cls}


@dataclass(frozen=True)
class BatchRiskSummary:
    """Risk flags aggregated over a list of positions.

    Attributes:
        total_positions: Number of positions analyzed.
        total_risks: Number of flags across all positions.
        risks_by_category: Flag count per category value; all five
            categories are always present.
        risks_by_severity: Flag count per severity value; all four
            severities are always present.
        highest_severity: Most severe flag seen, or None without flags.
    """

    total_positions: int = 0
    total_risks: int = 0
    risks_by_category: dict[str, int] = field(default_factory=lambda: _zero_counts(RiskCategory))
    risks_by_severity: dict[str, int] = field(default_factory=lambda: _zero_counts(RiskSeverity))
    highest_severity: RiskSeverity | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_positions": self.total_positions,
            "total_risks": self.total_risks,
            "risks_by_category": dict(self.risks_by_category),
            "risks_by_severity": dict(self.risks_by_severity),
            "highest_severity": self.highest_severity.value if self.highest_severity else None,
        }


@dataclass(frozen=True)
class PortfolioMetrics:
    """Profit/loss economics summed over a list of positions.

    Attributes:
        total_max_profit: Sum of finite max profits, dollars.
        total_max_loss: Sum of max losses, dollars.
        average_days_to_expiration: Mean DTE, rounded to one decimal.
        portfolio_roo: total_max_profit / total_max_loss, percent
            (0 when total_max_loss is 0).
        unlimited_profit_positions: Positions whose max profit is
            UNLIMITED; they are left out of total_max_profit.
    """

    total_max_profit: float = 0.0
    total_max_loss: float = 0.0
    average_days_to_expiration: float = 0.0
    portfolio_roo: float = 0.0
    unlimited_profit_positions: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_max_profit": self.total_max_profit,
            "total_max_loss": self.total_max_loss,
            "average_days_to_expiration": self.average_days_to_expiration,
            "portfolio_roo": self.portfolio_roo,
            "unlimited_profit_positions": self.unlimited_profit_positions,
        }
