"""Calculation Engine Layer.

This module turns journal positions into profit/loss economics, time-value
metrics, Greeks approximations and categorized risk flags, then aggregates
them across a portfolio. It is pure: no I/O, no market data, no state.

Architecture:
- models/: Inputs, metrics, risk flags and thresholds, portfolio results
- utils/: Dates, rounding, price ranges, display formatting
- returns/: Return and annualization helpers
- greeks/: Closed-form delta/gamma/theta approximations
- risk/: Threshold checks (return, time, price, assignment, size)
- strategy/: Covered call, cash-secured put and long call calculators
- portfolio/: Batch risk summary and portfolio P&L aggregation
"""

# Base types (from models)
from src.engine.errors import ValidationError
from src.engine.models import (
    DEFAULT_RISK_THRESHOLDS,
    UNLIMITED,
    BatchRiskSummary,
    CashSecuredPutInputs,
    CoveredCallInputs,
    LongCallInputs,
    PayoffPoint,
    PortfolioMetrics,
    RiskCategory,
    RiskFlag,
    RiskSeverity,
    RiskThresholds,
    StrategyMetrics,
    StrategyType,
    is_unlimited,
)

# ===== Common Utilities =====
from src.engine.greeks import approximate_delta, approximate_gamma, approximate_theta
from src.engine.returns import annualize_return, calc_return_pct
from src.engine.risk import (
    check_assignment_risk,
    check_price_risk,
    check_return_risk,
    check_size_risk,
    check_time_risk,
)
from src.engine.utils import days_between, generate_price_range, round_to

# ===== Strategy Calculators =====
from src.engine.strategy import (
    CashSecuredPutStrategy,
    CoveredCallStrategy,
    LongCallStrategy,
    OptionStrategy,
    create_cash_secured_put,
    create_covered_call,
    create_long_call,
    create_strategy,
)

# ===== Portfolio Level =====
from src.engine.portfolio import analyze_batch_risks, calc_portfolio_metrics

__all__ = [
    # Base types
    "ValidationError",
    "StrategyType",
    "RiskCategory",
    "RiskSeverity",
    "RiskFlag",
    "RiskThresholds",
    "DEFAULT_RISK_THRESHOLDS",
    "CoveredCallInputs",
    "CashSecuredPutInputs",
    "LongCallInputs",
    "StrategyMetrics",
    "PayoffPoint",
    "BatchRiskSummary",
    "PortfolioMetrics",
    "UNLIMITED",
    "is_unlimited",
    # Utilities
    "days_between",
    "generate_price_range",
    "round_to",
    "annualize_return",
    "calc_return_pct",
    "approximate_delta",
    "approximate_gamma",
    "approximate_theta",
    "check_return_risk",
    "check_time_risk",
    "check_price_risk",
    "check_assignment_risk",
    "check_size_risk",
    # Strategies
    "OptionStrategy",
    "CoveredCallStrategy",
    "CashSecuredPutStrategy",
    "LongCallStrategy",
    "create_covered_call",
    "create_cash_secured_put",
    "create_long_call",
    "create_strategy",
    # Portfolio
    "analyze_batch_risks",
    "calc_portfolio_metrics",
]
