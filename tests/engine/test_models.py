"""Tests for engine data models."""

import dataclasses
from datetime import date

import pytest

from src.engine.models import (
    DEFAULT_RISK_THRESHOLDS,
    SEVERITY_ORDER,
    UNLIMITED,
    BatchRiskSummary,
    CashSecuredPutInputs,
    CoveredCallInputs,
    PortfolioMetrics,
    RiskCategory,
    RiskFlag,
    RiskSeverity,
    RiskThresholds,
    StrategyMetrics,
    StrategyType,
    ValidationError,
    is_unlimited,
)


class TestEnums:
    """Tests for engine enums."""

    def test_severity_ranks(self):
        assert RiskSeverity.CRITICAL.rank > RiskSeverity.HIGH.rank
        assert RiskSeverity.HIGH.rank > RiskSeverity.MEDIUM.rank
        assert RiskSeverity.MEDIUM.rank > RiskSeverity.LOW.rank

    def test_severity_order_most_severe_first(self):
        assert SEVERITY_ORDER[0] == RiskSeverity.CRITICAL
        assert SEVERITY_ORDER[-1] == RiskSeverity.LOW

    def test_category_values(self):
        assert {c.value for c in RiskCategory} == {"return", "size", "time", "price", "assignment"}

    def test_strategy_labels(self):
        assert StrategyType.CASH_SECURED_PUT.label == "Cash-Secured Put"


class TestRiskThresholds:
    """Tests for RiskThresholds."""

    def test_defaults(self):
        t = DEFAULT_RISK_THRESHOLDS
        assert t.min_return_pct == 15.0
        assert t.weak_return_pct == 7.5
        assert t.max_safe_dte == 7
        assert t.caution_dte == 7
        assert t.warning_dte == 7
        assert t.critical_dte == 3
        assert t.price_watch_pct == 5.0
        assert t.price_proximity_pct == 5.0
        assert t.price_danger_pct == 2.0
        assert t.max_position_size_pct == 5.0
        assert t.assignment_dte == 7

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_RISK_THRESHOLDS.min_return_pct = 10.0

    def test_with_overrides_returns_copy(self):
        custom = DEFAULT_RISK_THRESHOLDS.with_overrides(max_safe_dte=30)
        assert custom.max_safe_dte == 30
        assert DEFAULT_RISK_THRESHOLDS.max_safe_dte == 7

    def test_unknown_override(self):
        with pytest.raises(ValueError, match="bogus"):
            DEFAULT_RISK_THRESHOLDS.with_overrides(bogus=1)

    def test_bands_out_of_order(self):
        with pytest.raises(ValueError, match="caution_dte"):
            RiskThresholds(caution_dte=30)

    def test_from_dict(self):
        t = RiskThresholds.from_dict({"min_return_pct": 20.0, "weak_return_pct": 10.0})
        assert t.min_return_pct == 20.0
        assert t.weak_return_pct == 10.0
        assert t.max_safe_dte == 7

    def test_to_dict(self):
        data = DEFAULT_RISK_THRESHOLDS.to_dict()
        assert data["min_return_pct"] == 15.0
        assert RiskThresholds.from_dict(data) == DEFAULT_RISK_THRESHOLDS


class TestRiskFlag:
    """Tests for RiskFlag."""

    def test_to_dict(self):
        flag = RiskFlag(
            category=RiskCategory.TIME,
            severity=RiskSeverity.LOW,
            message="Expiration approaching: 18 day(s) to expiration",
            value=18,
            threshold=21,
        )
        assert flag.to_dict() == {
            "category": "time",
            "severity": "low",
            "message": "Expiration approaching: 18 day(s) to expiration",
            "value": 18,
            "threshold": 21,
        }


class TestInputs:
    """Tests for position input models."""

    def test_shares(self):
        inputs = CashSecuredPutInputs(
            symbol="AAPL", quantity=2, strike=50, premium=1.5, expiration="2024-02-16"
        )
        assert inputs.shares == 200

    def test_from_dict_ignores_unknown_keys(self):
        inputs = CoveredCallInputs.from_dict(
            {
                "strategy": "covered_call",
                "symbol": "MSFT",
                "quantity": 1,
                "strike": 110,
                "premium": 2,
                "cost_basis": 100,
                "expiration": "2024-02-16",
                "notes": "rolled from Jan",
            }
        )
        assert inputs.cost_basis == 100
        assert inputs.fees == 0.0

    def test_from_dict_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            CoveredCallInputs.from_dict(
                {"symbol": "MSFT", "quantity": 1, "strike": 110, "premium": 2, "expiration": "2024-02-16"}
            )
        assert exc_info.value.field == "cost_basis"

    def test_to_dict_iso_dates(self):
        inputs = CashSecuredPutInputs(
            symbol="AAPL", quantity=1, strike=50, premium=1.5, expiration=date(2024, 2, 16)
        )
        assert inputs.to_dict()["expiration"] == "2024-02-16"

    def test_validation_error_is_value_error(self):
        inputs = CashSecuredPutInputs(
            symbol="AAPL", quantity=0, strike=50, premium=1.5, expiration="2024-02-16"
        )
        with pytest.raises(ValueError):
            inputs.validate()


class TestMetricsModels:
    """Tests for metrics containers."""

    def test_unlimited_sentinel(self):
        assert is_unlimited(UNLIMITED)
        assert not is_unlimited(300.0)
        assert str(UNLIMITED) == "unlimited"

    def test_strategy_metrics_to_dict_unlimited(self):
        metrics = StrategyMetrics(
            strategy_type=StrategyType.LONG_CALL,
            symbol="NVDA",
            max_profit=UNLIMITED,
            max_loss=300.0,
            breakeven=103.0,
            return_on_outlay=0.0,
            return_on_risk=0.0,
            annualized_return=0.0,
            days_to_expiration=32,
            delta=0.5,
            gamma=0.1,
            theta=-0.1,
            extras={"moneyness": 0.0},
        )
        data = metrics.to_dict()
        assert data["max_profit"] == "unlimited"
        assert data["strategy_type"] == "long_call"
        assert data["moneyness"] == 0.0

    def test_strategy_metrics_extras_read_only(self):
        extras = {"moneyness": 0.0}
        metrics = StrategyMetrics(
            strategy_type=StrategyType.LONG_CALL,
            symbol="NVDA",
            max_profit=UNLIMITED,
            max_loss=300.0,
            breakeven=103.0,
            return_on_outlay=0.0,
            return_on_risk=0.0,
            annualized_return=0.0,
            days_to_expiration=32,
            delta=0.5,
            gamma=0.1,
            theta=-0.1,
            extras=extras,
        )
        extras["moneyness"] = 5.0
        assert metrics.extras["moneyness"] == 0.0
        with pytest.raises(TypeError):
            metrics.extras["moneyness"] = 1.0
        assert isinstance(metrics.to_dict(), dict)

    def test_batch_summary_defaults(self):
        summary = BatchRiskSummary()
        assert summary.risks_by_category == {
            "return": 0,
            "size": 0,
            "time": 0,
            "price": 0,
            "assignment": 0,
        }
        assert summary.risks_by_severity == {"low": 0, "medium": 0, "high": 0, "critical": 0}
        assert summary.to_dict()["highest_severity"] is None

    def test_portfolio_metrics_defaults(self):
        assert PortfolioMetrics().to_dict() == {
            "total_max_profit": 0.0,
            "total_max_loss": 0.0,
            "average_days_to_expiration": 0.0,
            "portfolio_roo": 0.0,
            "unlimited_profit_positions": 0,
        }
