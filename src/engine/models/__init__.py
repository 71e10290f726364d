"""Engine layer data models.

Models:
    CoveredCallInputs / CashSecuredPutInputs / LongCallInputs: position inputs
    RiskFlag: Categorized, severity-ranked warning
    RiskThresholds: Threshold bands for risk checks
    StrategyMetrics: Metrics of one position
    PayoffPoint: One point of a payoff curve
    BatchRiskSummary: Risk flags aggregated over positions
    PortfolioMetrics: P&L economics summed over positions

Enums:
    OptionType: Call or Put
    StrategyType: Covered call, cash-secured put, long call
    RiskCategory: return, size, time, price, assignment
    RiskSeverity: low, medium, high, critical
    Unbounded: UNLIMITED profit sentinel
"""

from src.engine.errors import ValidationError
from src.engine.models.enums import (
    SEVERITY_ORDER,
    OptionType,
    RiskCategory,
    RiskSeverity,
    StrategyType,
)
from src.engine.models.inputs import (
    CONTRACT_MULTIPLIER,
    CashSecuredPutInputs,
    CoveredCallInputs,
    LongCallInputs,
    PositionInputs,
)
from src.engine.models.portfolio import BatchRiskSummary, PortfolioMetrics
from src.engine.models.risk import DEFAULT_RISK_THRESHOLDS, RiskFlag, RiskThresholds
from src.engine.models.strategy import (
    UNLIMITED,
    PayoffPoint,
    ProfitValue,
    StrategyMetrics,
    Unbounded,
    is_unlimited,
)

__all__ = [
    # Errors
    "ValidationError",
    # Enums
    "OptionType",
    "StrategyType",
    "RiskCategory",
    "RiskSeverity",
    "SEVERITY_ORDER",
    # Inputs
    "CONTRACT_MULTIPLIER",
    "PositionInputs",
    "CoveredCallInputs",
    "CashSecuredPutInputs",
    "LongCallInputs",
    # Risk
    "RiskFlag",
    "RiskThresholds",
    "DEFAULT_RISK_THRESHOLDS",
    # Strategy
    "UNLIMITED",
    "Unbounded",
    "ProfitValue",
    "is_unlimited",
    "PayoffPoint",
    "StrategyMetrics",
    # Portfolio
    "BatchRiskSummary",
    "PortfolioMetrics",
]
