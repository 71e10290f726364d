"""
Analyze Command - 持仓分析命令

Computes metrics and risk flags for every position in a journal file, then
summarizes them across the portfolio.
"""

import json
import logging
import sys
from datetime import datetime
from typing import Optional

import click

from src.business.cli.common import (
    build_strategies,
    load_entries,
    load_risk_config,
    setup_logging,
)
from src.engine.models import BatchRiskSummary, PortfolioMetrics, RiskFlag, RiskSeverity
from src.engine.portfolio import analyze_batch_risks, calc_portfolio_metrics
from src.engine.strategy import OptionStrategy
from src.engine.utils import format_currency, format_percent

logger = logging.getLogger(__name__)

SEVERITY_ICONS = {
    RiskSeverity.CRITICAL: "🔴",
    RiskSeverity.HIGH: "🟠",
    RiskSeverity.MEDIUM: "🟡",
    RiskSeverity.LOW: "🟢",
}

EXIT_OK = 0
EXIT_WARNING = 1
EXIT_DANGER = 2
EXIT_INPUT_ERROR = 3


@click.command()
@click.option(
    "--positions",
    "-p",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="Positions JSON file",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False),
    help="Risk thresholds YAML file",
)
@click.option(
    "--override",
    multiple=True,
    metavar="NAME=VALUE",
    help="Override one threshold (repeatable), e.g. --override min_return_pct=20",
)
@click.option(
    "--as-of",
    type=str,
    help="Evaluation date (YYYY-MM-DD), defaults to each position's own or today",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show debug logs",
)
def analyze(
    positions: str,
    config: Optional[str],
    override: tuple[str, ...],
    as_of: Optional[str],
    output: str,
    verbose: bool,
) -> None:
    """Analyze positions and report risk flags

    \b
    Exit codes:
      0  no risk flags
      1  highest flag is low or medium
      2  highest flag is high or critical
      3  invalid input

    \b
    Examples:
      optjournal analyze -p positions.json
      optjournal analyze -p positions.json -c thresholds.yaml -o json
      optjournal analyze -p positions.json --override max_safe_dte=30
    """
    setup_logging(verbose)

    try:
        risk_config = load_risk_config(config, override)
        strategies = build_strategies(load_entries(positions), as_of)
    except Exception as e:
        logger.exception("Failed to load positions")
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(EXIT_INPUT_ERROR)

    thresholds = risk_config.thresholds
    flags = [strategy.analyze_risks(thresholds) for strategy in strategies]
    summary = analyze_batch_risks(strategies, thresholds)
    portfolio = calc_portfolio_metrics(strategies)

    if output == "json":
        _output_json(strategies, flags, summary, portfolio)
    else:
        _output_text(strategies, flags, summary, portfolio)

    sys.exit(exit_code_for(summary))


def exit_code_for(summary: BatchRiskSummary) -> int:
    """Map the highest severity to the command exit code."""
    highest = summary.highest_severity
    if highest is None:
        return EXIT_OK
    if highest in (RiskSeverity.HIGH, RiskSeverity.CRITICAL):
        return EXIT_DANGER
    return EXIT_WARNING


def _format_flag(flag: RiskFlag) -> str:
    icon = SEVERITY_ICONS.get(flag.severity, "⚪")
    return f"{icon} [{flag.category.value}] {flag.message}"


def _output_text(
    strategies: list[OptionStrategy],
    flags: list[list[RiskFlag]],
    summary: BatchRiskSummary,
    portfolio: PortfolioMetrics,
) -> None:
    """文本格式输出"""
    click.echo(f"📋 Positions: {summary.total_positions}")
    click.echo("-" * 60)

    for strategy, position_flags in zip(strategies, flags):
        click.echo(strategy.get_summary())
        for flag in position_flags:
            click.echo(f"   {_format_flag(flag)}")
        click.echo("-" * 60)

    click.echo("📊 Portfolio:")
    click.echo(f"   Total Max Profit: {format_currency(portfolio.total_max_profit)}")
    if portfolio.unlimited_profit_positions:
        click.echo(f"   (+{portfolio.unlimited_profit_positions} position(s) with unlimited profit)")
    click.echo(f"   Total Max Loss: {format_currency(portfolio.total_max_loss)}")
    click.echo(f"   Portfolio ROO: {format_percent(portfolio.portfolio_roo)}")
    click.echo(f"   Average DTE: {portfolio.average_days_to_expiration:.1f}")
    click.echo()

    if summary.total_risks:
        click.echo(f"⚠️ Risk flags: {summary.total_risks}")
        for severity, count in summary.risks_by_severity.items():
            if count:
                click.echo(f"   {severity}: {count}")
        click.echo(f"   Highest: {summary.highest_severity.value}")
    else:
        click.echo("✅ No risk flags")


def _output_json(
    strategies: list[OptionStrategy],
    flags: list[list[RiskFlag]],
    summary: BatchRiskSummary,
    portfolio: PortfolioMetrics,
) -> None:
    """JSON 格式输出"""
    output_data = {
        "timestamp": datetime.now().isoformat(),
        "positions": [
            {
                "metrics": strategy.get_all_metrics().to_dict(),
                "risks": [flag.to_dict() for flag in position_flags],
            }
            for strategy, position_flags in zip(strategies, flags)
        ],
        "summary": summary.to_dict(),
        "portfolio": portfolio.to_dict(),
    }
    click.echo(json.dumps(output_data, indent=2, ensure_ascii=False))
