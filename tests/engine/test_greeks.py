"""Tests for Greeks approximations."""

import pytest

from src.engine.greeks import approximate_delta, approximate_gamma, approximate_theta
from src.engine.models import OptionType


class TestApproximateDelta:
    """Tests for approximate_delta."""

    def test_atm_call(self):
        assert approximate_delta(100, 100, 30, OptionType.CALL) == pytest.approx(0.5)

    def test_atm_put(self):
        assert approximate_delta(100, 100, 30, OptionType.PUT) == pytest.approx(-0.5)

    def test_itm_call_above_half(self):
        delta = approximate_delta(105, 100, 30, OptionType.CALL)
        assert 0.5 < delta < 0.99

    def test_clamped_call(self):
        assert approximate_delta(200, 100, 30, OptionType.CALL) == pytest.approx(0.99)
        assert approximate_delta(50, 100, 30, OptionType.CALL) == pytest.approx(0.01)

    def test_clamped_put(self):
        assert approximate_delta(200, 100, 30, OptionType.PUT) == pytest.approx(-0.01)
        assert approximate_delta(50, 100, 30, OptionType.PUT) == pytest.approx(-0.99)

    def test_call_at_expiry(self):
        assert approximate_delta(110, 100, 0, OptionType.CALL) == 1.0
        assert approximate_delta(90, 100, 0, OptionType.CALL) == 0.0

    def test_put_at_expiry(self):
        assert approximate_delta(90, 100, 0, OptionType.PUT) == -1.0
        assert approximate_delta(110, 100, 0, OptionType.PUT) == 0.0


class TestApproximateGamma:
    """Tests for approximate_gamma."""

    def test_zero_at_expiry(self):
        assert approximate_gamma(100, 100, 0) == 0.0

    def test_peaks_at_the_money(self):
        atm = approximate_gamma(100, 100, 30)
        otm = approximate_gamma(80, 100, 30)
        itm = approximate_gamma(120, 100, 30)
        assert atm > 0
        assert atm > otm
        assert atm > itm


class TestApproximateTheta:
    """Tests for approximate_theta."""

    def test_linear_decay(self):
        assert approximate_theta(3.0, 60) == pytest.approx(-0.05)

    def test_accelerates_inside_thirty_days(self):
        assert approximate_theta(3.0, 20) == pytest.approx(-0.225)

    def test_zero_at_expiry(self):
        assert approximate_theta(3.0, 0) == 0.0
        assert approximate_theta(3.0, -4) == 0.0

    def test_never_positive(self):
        assert approximate_theta(0.0, 10) == 0.0
        assert approximate_theta(2.0, 45) < 0
