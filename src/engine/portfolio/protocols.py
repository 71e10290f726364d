"""Capability protocols the portfolio functions depend on.

Any object with these methods can be aggregated; the strategy calculators
in src.engine.strategy satisfy both.
"""

from typing import Protocol, runtime_checkable

from src.engine.models.risk import RiskFlag, RiskThresholds
from src.engine.models.strategy import ProfitValue


@runtime_checkable
class RiskAnalyzable(Protocol):
    """Something that can report risk flags."""

    def analyze_risks(self, thresholds: RiskThresholds = ...) -> list[RiskFlag]: ...


@runtime_checkable
class PortfolioPosition(Protocol):
    """Something with P&L bounds and an expiration."""

    def max_profit(self) -> ProfitValue: ...

    def max_loss(self) -> float: ...

    def days_to_expiration(self) -> int: ...
