"""Tests for threshold risk checks."""

import pytest

from src.engine.models import (
    DEFAULT_RISK_THRESHOLDS,
    OptionType,
    RiskCategory,
    RiskFlag,
    RiskSeverity,
    RiskThresholds,
)
from src.engine.risk import (
    check_assignment_risk,
    check_long_call_price_risk,
    check_price_risk,
    check_return_risk,
    check_size_risk,
    check_time_risk,
    most_severe,
)


class TestReturnRisk:
    """Tests for check_return_risk."""

    def test_healthy_return(self):
        assert check_return_risk(20.0, DEFAULT_RISK_THRESHOLDS) is None
        assert check_return_risk(15.0, DEFAULT_RISK_THRESHOLDS) is None

    def test_low_return_medium(self):
        flag = check_return_risk(10.0, DEFAULT_RISK_THRESHOLDS)
        assert flag.category == RiskCategory.RETURN
        assert flag.severity == RiskSeverity.MEDIUM
        assert flag.threshold == 15.0
        assert flag.value == 10.0

    def test_weak_return_high(self):
        flag = check_return_risk(5.0, DEFAULT_RISK_THRESHOLDS)
        assert flag.severity == RiskSeverity.HIGH

    def test_no_return_critical(self):
        assert check_return_risk(0.0, DEFAULT_RISK_THRESHOLDS).severity == RiskSeverity.CRITICAL
        assert check_return_risk(-3.0, DEFAULT_RISK_THRESHOLDS).severity == RiskSeverity.CRITICAL

    def test_custom_thresholds(self):
        thresholds = DEFAULT_RISK_THRESHOLDS.with_overrides(min_return_pct=40.0)
        flag = check_return_risk(30.0, thresholds)
        assert flag.severity == RiskSeverity.MEDIUM
        assert flag.threshold == 40.0


class TestTimeRisk:
    """Tests for check_time_risk."""

    @pytest.mark.parametrize(
        "days, severity",
        [
            (30, None),
            (20, None),
            (8, None),
            (7, RiskSeverity.HIGH),
            (4, RiskSeverity.HIGH),
            (3, RiskSeverity.CRITICAL),
            (0, RiskSeverity.CRITICAL),
        ],
    )
    def test_short_option_bands(self, days, severity):
        flag = check_time_risk(days, DEFAULT_RISK_THRESHOLDS)
        if severity is None:
            assert flag is None
        else:
            assert flag.category == RiskCategory.TIME
            assert flag.severity == severity

    @pytest.mark.parametrize(
        "days, severity",
        [
            (22, None),
            (21, RiskSeverity.LOW),
            (15, RiskSeverity.LOW),
            (14, RiskSeverity.MEDIUM),
            (7, RiskSeverity.HIGH),
        ],
    )
    def test_widened_short_option_bands(self, days, severity):
        wide = DEFAULT_RISK_THRESHOLDS.with_overrides(max_safe_dte=21, caution_dte=14)
        flag = check_time_risk(days, wide)
        if severity is None:
            assert flag is None
        else:
            assert flag.severity == severity

    def test_expired(self):
        flag = check_time_risk(-2, DEFAULT_RISK_THRESHOLDS)
        assert flag.severity == RiskSeverity.CRITICAL
        assert "expired" in flag.message
        assert flag.value == -2

    @pytest.mark.parametrize(
        "days, severity",
        [
            (31, None),
            (30, RiskSeverity.MEDIUM),
            (14, RiskSeverity.HIGH),
            (7, RiskSeverity.CRITICAL),
        ],
    )
    def test_long_option_bands(self, days, severity):
        flag = check_time_risk(days, DEFAULT_RISK_THRESHOLDS, long_option=True)
        if severity is None:
            assert flag is None
        else:
            assert flag.severity == severity
            assert "decay" in flag.message.lower()


class TestPriceRisk:
    """Tests for check_price_risk (breakeven at 100)."""

    def test_far_from_breakeven(self):
        assert check_price_risk(106, 100, DEFAULT_RISK_THRESHOLDS) is None

    def test_proximity_band(self):
        flag = check_price_risk(104, 100, DEFAULT_RISK_THRESHOLDS)
        assert flag.category == RiskCategory.PRICE
        assert flag.severity == RiskSeverity.MEDIUM
        assert flag.threshold == 5.0

    def test_danger_band(self):
        assert check_price_risk(101, 100, DEFAULT_RISK_THRESHOLDS).severity == RiskSeverity.HIGH

    def test_distance_is_absolute(self):
        flag = check_price_risk(97, 100, DEFAULT_RISK_THRESHOLDS)
        assert flag.severity == RiskSeverity.MEDIUM
        assert flag.value == 3.0
        assert check_price_risk(99, 100, DEFAULT_RISK_THRESHOLDS).severity == RiskSeverity.HIGH

    def test_far_below_breakeven(self):
        assert check_price_risk(80, 100, DEFAULT_RISK_THRESHOLDS) is None

    def test_watch_band_when_widened(self):
        wide = DEFAULT_RISK_THRESHOLDS.with_overrides(price_watch_pct=10.0)
        assert check_price_risk(110, 100, wide).severity == RiskSeverity.LOW
        assert check_price_risk(110, 100, DEFAULT_RISK_THRESHOLDS) is None


class TestLongCallPriceRisk:
    """Tests for check_long_call_price_risk (strike 100, breakeven 103)."""

    def test_near_breakeven_with_time(self):
        assert check_long_call_price_risk(95, 100, 103, 45, DEFAULT_RISK_THRESHOLDS) is None

    def test_below_breakeven_medium(self):
        flag = check_long_call_price_risk(90, 100, 103, 45, DEFAULT_RISK_THRESHOLDS)
        assert flag.severity == RiskSeverity.MEDIUM

    def test_deep_below_breakeven_high(self):
        flag = check_long_call_price_risk(80, 100, 103, 45, DEFAULT_RISK_THRESHOLDS)
        assert flag.severity == RiskSeverity.HIGH
        assert "below breakeven" in flag.message

    def test_out_of_the_money_late(self):
        flag = check_long_call_price_risk(99, 100, 103, 10, DEFAULT_RISK_THRESHOLDS)
        assert flag.severity == RiskSeverity.HIGH
        assert "Out-of-the-money" in flag.message

    def test_single_flag_when_both_apply(self):
        flag = check_long_call_price_risk(80, 100, 103, 10, DEFAULT_RISK_THRESHOLDS)
        assert isinstance(flag, RiskFlag)
        assert flag.severity == RiskSeverity.HIGH


class TestAssignmentRisk:
    """Tests for check_assignment_risk."""

    def test_put_likely_assignment(self):
        flag = check_assignment_risk(45, 50, 1.5, 5, OptionType.PUT, DEFAULT_RISK_THRESHOLDS)
        assert flag.category == RiskCategory.ASSIGNMENT
        assert flag.severity == RiskSeverity.MEDIUM
        assert "stock purchase" in flag.message

    def test_call_likely_assignment(self):
        flag = check_assignment_risk(115, 110, 2.0, 3, OptionType.CALL, DEFAULT_RISK_THRESHOLDS)
        assert flag.severity == RiskSeverity.MEDIUM
        assert "called away" in flag.message

    def test_in_the_money_with_time(self):
        flag = check_assignment_risk(49, 50, 1.5, 20, OptionType.PUT, DEFAULT_RISK_THRESHOLDS)
        assert flag.severity == RiskSeverity.LOW

    def test_near_strike_near_expiry(self):
        flag = check_assignment_risk(51, 50, 1.5, 5, OptionType.PUT, DEFAULT_RISK_THRESHOLDS)
        assert flag.severity == RiskSeverity.LOW

    def test_out_of_the_money(self):
        assert check_assignment_risk(60, 50, 1.5, 5, OptionType.PUT, DEFAULT_RISK_THRESHOLDS) is None
        assert check_assignment_risk(51, 50, 1.5, 20, OptionType.PUT, DEFAULT_RISK_THRESHOLDS) is None


class TestSizeRisk:
    """Tests for check_size_risk."""

    def test_small_position(self):
        assert check_size_risk(1000, 100000, DEFAULT_RISK_THRESHOLDS) is None

    def test_large_position_medium(self):
        flag = check_size_risk(9700, 100000, DEFAULT_RISK_THRESHOLDS)
        assert flag.category == RiskCategory.SIZE
        assert flag.severity == RiskSeverity.MEDIUM
        assert flag.value == 9.7

    def test_oversized_position_high(self):
        assert check_size_risk(15000, 100000, DEFAULT_RISK_THRESHOLDS).severity == RiskSeverity.HIGH

    def test_no_account_value(self):
        assert check_size_risk(15000, None, DEFAULT_RISK_THRESHOLDS) is None


class TestMostSevere:
    """Tests for most_severe."""

    def test_empty(self):
        assert most_severe([]) is None

    def test_picks_highest_and_first_on_tie(self):
        low = RiskFlag(RiskCategory.TIME, RiskSeverity.LOW, "low")
        high_a = RiskFlag(RiskCategory.PRICE, RiskSeverity.HIGH, "a")
        high_b = RiskFlag(RiskCategory.PRICE, RiskSeverity.HIGH, "b")
        assert most_severe([low, high_a, high_b]) is high_a
