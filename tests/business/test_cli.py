"""Tests for the optjournal command line."""

import json

import pytest
from click.testing import CliRunner

from src.business.cli.main import cli
from src.business.config.risk_config import RISK_CONFIG_ENV

AS_OF = "2024-01-15"

HEALTHY_CSP = {
    "strategy": "cash_secured_put",
    "symbol": "AAPL",
    "quantity": 2,
    "strike": 50,
    "premium": 1.5,
    "expiration": "2024-02-16",
}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    monkeypatch.delenv(RISK_CONFIG_ENV, raising=False)


def write_positions(tmp_path, data) -> str:
    path = tmp_path / "positions.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestAnalyzeCommand:
    """Tests for optjournal analyze"""

    def test_no_flags_exit_zero(self, runner, tmp_path):
        path = write_positions(tmp_path, [HEALTHY_CSP])
        result = runner.invoke(cli, ["analyze", "-p", path, "--as-of", AS_OF])
        assert result.exit_code == 0
        assert "No risk flags" in result.output
        assert "Cash-Secured Put AAPL" in result.output

    def test_medium_flag_exit_one(self, runner, tmp_path):
        path = write_positions(tmp_path, [{**HEALTHY_CSP, "premium": 0.5}])
        result = runner.invoke(cli, ["analyze", "-p", path, "--as-of", AS_OF])
        assert result.exit_code == 1
        assert "[return]" in result.output

    def test_three_weeks_out_no_time_flag(self, runner, tmp_path):
        path = write_positions(tmp_path, [{**HEALTHY_CSP, "premium": 5, "expiration": "2024-02-05"}])
        result = runner.invoke(cli, ["analyze", "-p", path, "--as-of", AS_OF])
        assert result.exit_code == 0

    def test_expiring_this_week_exit_two(self, runner, tmp_path):
        path = write_positions(tmp_path, [{**HEALTHY_CSP, "premium": 5, "expiration": "2024-01-20"}])
        result = runner.invoke(cli, ["analyze", "-p", path, "--as-of", AS_OF])
        assert result.exit_code == 2
        assert "[time]" in result.output

    def test_critical_flag_exit_two(self, runner, tmp_path):
        path = write_positions(tmp_path, [{**HEALTHY_CSP, "premium": 0}])
        result = runner.invoke(cli, ["analyze", "-p", path, "--as-of", AS_OF])
        assert result.exit_code == 2
        assert "[return]" in result.output

    def test_invalid_position_exit_three(self, runner, tmp_path):
        path = write_positions(tmp_path, [{**HEALTHY_CSP, "quantity": 0}])
        result = runner.invoke(cli, ["analyze", "-p", path, "--as-of", AS_OF])
        assert result.exit_code == 3

    def test_unknown_strategy_exit_three(self, runner, tmp_path):
        path = write_positions(tmp_path, [{**HEALTHY_CSP, "strategy": "iron_condor"}])
        result = runner.invoke(cli, ["analyze", "-p", path, "--as-of", AS_OF])
        assert result.exit_code == 3

    def test_bad_override_exit_three(self, runner, tmp_path):
        path = write_positions(tmp_path, [HEALTHY_CSP])
        result = runner.invoke(
            cli, ["analyze", "-p", path, "--as-of", AS_OF, "--override", "not_a_threshold=1"]
        )
        assert result.exit_code == 3

    def test_override_raises_flags(self, runner, tmp_path):
        path = write_positions(tmp_path, [HEALTHY_CSP])
        result = runner.invoke(
            cli, ["analyze", "-p", path, "--as-of", AS_OF, "--override", "max_safe_dte=40"]
        )
        assert result.exit_code == 1

    def test_config_file(self, runner, tmp_path):
        path = write_positions(tmp_path, [HEALTHY_CSP])
        config = tmp_path / "thresholds.yaml"
        config.write_text("risk_thresholds:\n  return:\n    min_return_pct: 50.0\n", encoding="utf-8")
        result = runner.invoke(cli, ["analyze", "-p", path, "-c", str(config), "--as-of", AS_OF])
        assert result.exit_code == 1
        assert "[return]" in result.output

    def test_json_output(self, runner, tmp_path):
        long_call = {
            "strategy": "long_call",
            "symbol": "NVDA",
            "quantity": 1,
            "strike": 100,
            "premium": 3,
            "expiration": "2024-02-16",
        }
        path = write_positions(tmp_path, {"positions": [HEALTHY_CSP, long_call]})
        result = runner.invoke(cli, ["analyze", "-p", path, "--as-of", AS_OF, "-o", "json"])
        assert result.exit_code == 0

        data = json.loads(result.output)
        assert data["positions"][0]["metrics"]["max_profit"] == 300.0
        assert data["positions"][0]["metrics"]["breakeven"] == 48.5
        assert data["positions"][1]["metrics"]["max_profit"] == "unlimited"
        assert data["summary"]["total_positions"] == 2
        assert data["summary"]["highest_severity"] is None
        assert data["portfolio"]["total_max_profit"] == 300.0
        assert data["portfolio"]["total_max_loss"] == 10000.0
        assert data["portfolio"]["unlimited_profit_positions"] == 1

    def test_account_value_applied(self, runner, tmp_path):
        path = write_positions(tmp_path, {"account_value": 50000, "positions": [HEALTHY_CSP]})
        result = runner.invoke(cli, ["analyze", "-p", path, "--as-of", AS_OF, "-o", "json"])
        assert result.exit_code == 2

        data = json.loads(result.output)
        risks = data["positions"][0]["risks"]
        assert risks[0]["category"] == "size"
        assert risks[0]["severity"] == "high"

    def test_missing_positions_option(self, runner):
        result = runner.invoke(cli, ["analyze"])
        assert result.exit_code != 0


class TestPayoffCommand:
    """Tests for optjournal payoff"""

    def test_json_range(self, runner, tmp_path):
        path = write_positions(tmp_path, [HEALTHY_CSP])
        result = runner.invoke(
            cli,
            [
                "payoff", "-p", path, "--as-of", AS_OF,
                "--min-price", "40", "--max-price", "60", "--steps", "5", "-o", "json",
            ],
        )
        assert result.exit_code == 0
        points = json.loads(result.output)
        assert [p["stock_price"] for p in points] == [40.0, 45.0, 50.0, 55.0, 60.0]
        assert points[0]["profit_loss"] == -1700.0
        assert points[-1]["profit_loss"] == 300.0

    def test_text_default_range(self, runner, tmp_path):
        path = write_positions(tmp_path, [HEALTHY_CSP])
        result = runner.invoke(cli, ["payoff", "-p", path, "--as-of", AS_OF])
        assert result.exit_code == 0
        assert "breakeven $48.50" in result.output
        assert "$30.00" in result.output

    def test_index_out_of_range(self, runner, tmp_path):
        path = write_positions(tmp_path, [HEALTHY_CSP])
        result = runner.invoke(cli, ["payoff", "-p", path, "-i", "3"])
        assert result.exit_code == 3

    def test_half_range(self, runner, tmp_path):
        path = write_positions(tmp_path, [HEALTHY_CSP])
        result = runner.invoke(cli, ["payoff", "-p", path, "--min-price", "40"])
        assert result.exit_code == 3


class TestThresholdsCommand:
    """Tests for optjournal thresholds"""

    def test_defaults_json(self, runner):
        result = runner.invoke(cli, ["thresholds", "-o", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["risk_thresholds"]["return"]["min_return_pct"] == 15.0
        assert data["risk_thresholds"]["time"]["max_safe_dte"] == 7

    def test_override(self, runner):
        result = runner.invoke(cli, ["thresholds", "-o", "json", "--override", "min_return_pct=25"])
        assert result.exit_code == 0
        assert json.loads(result.output)["risk_thresholds"]["return"]["min_return_pct"] == 25

    def test_yaml_output(self, runner):
        result = runner.invoke(cli, ["thresholds"])
        assert result.exit_code == 0
        assert "# source:" in result.output
        assert "min_return_pct: 15.0" in result.output

    def test_missing_config(self, runner, tmp_path):
        result = runner.invoke(cli, ["thresholds", "-c", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 3


class TestCliGroup:
    """Tests for the command group"""

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "optjournal" in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert "analyze" in result.output
        assert "payoff" in result.output
        assert "thresholds" in result.output
