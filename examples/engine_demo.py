#!/usr/bin/env python3
"""Calculation Engine Demo.

Walks through the strategy calculators, risk checks and portfolio
aggregation with a small sample journal.
"""

import argparse
import logging

from src.engine import (
    # Base types
    CashSecuredPutInputs,
    CoveredCallInputs,
    LongCallInputs,
    RiskThresholds,
    # Strategies
    CashSecuredPutStrategy,
    CoveredCallStrategy,
    LongCallStrategy,
    create_strategy,
    # Portfolio
    analyze_batch_risks,
    calc_portfolio_metrics,
)
from src.engine.utils import format_currency, format_percent

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

AS_OF = "2024-01-15"


def demo_covered_call():
    """Demonstrate covered call metrics."""
    logger.info("=" * 60)
    logger.info("Covered Call Demo")
    logger.info("=" * 60)

    strategy = CoveredCallStrategy(
        CoveredCallInputs(
            symbol="AAPL",
            quantity=1,
            strike=105,
            premium=2,
            cost_basis=100,
            current_price=103,
            expiration="2024-02-16",
            evaluation_date=AS_OF,
        )
    )
    logger.info(f"Max Profit: {format_currency(strategy.max_profit())}")
    logger.info(f"Max Loss: {format_currency(strategy.max_loss())}")
    logger.info(f"Breakeven: {format_currency(strategy.breakeven())}")
    logger.info(f"Annualized Return: {format_percent(strategy.annualized_return())}")
    logger.info(f"Called-away P&L: {format_currency(strategy.assignment_pnl())}")
    logger.info(f"Downside Protection: {format_percent(strategy.downside_protection_pct())}")

    for point in strategy.payoff_chart([90, 98, 105, 115]):
        logger.info(f"   @ {format_currency(point.stock_price)}: {format_currency(point.profit_loss)}")


def demo_cash_secured_put():
    """Demonstrate cash-secured put metrics and risk flags."""
    logger.info("\n" + "=" * 60)
    logger.info("Cash-Secured Put Demo")
    logger.info("=" * 60)

    strategy = CashSecuredPutStrategy(
        CashSecuredPutInputs(
            symbol="MSFT",
            quantity=2,
            strike=50,
            premium=1.5,
            current_price=49,
            expiration="2024-01-19",
            evaluation_date=AS_OF,
        )
    )
    logger.info(f"Collateral: {format_currency(strategy.cash_secured())}")
    logger.info(f"Effective Basis if Assigned: {format_currency(strategy.effective_basis())}")
    logger.info(f"Delta: {strategy.current_delta():.4f}, Theta: {strategy.current_theta():.4f}")

    for flag in strategy.analyze_risks():
        logger.info(f"   [{flag.severity.value}] {flag.category.value}: {flag.message}")

    # A tighter time band turns the same position critical
    strict = RiskThresholds(critical_dte=5)
    logger.info(f"Flags with strict thresholds: {len(strategy.analyze_risks(strict))}")


def demo_long_call():
    """Demonstrate long call metrics."""
    logger.info("\n" + "=" * 60)
    logger.info("Long Call Demo")
    logger.info("=" * 60)

    strategy = LongCallStrategy(
        LongCallInputs(
            symbol="NVDA",
            quantity=1,
            strike=100,
            premium=3,
            current_price=104,
            current_premium=5.5,
            expiration="2024-02-16",
            evaluation_date=AS_OF,
        )
    )
    logger.info(f"Max Profit: {strategy.max_profit()}")
    logger.info(f"Breakeven: {format_currency(strategy.breakeven())}")
    logger.info(f"Unrealized P&L: {format_currency(strategy.unrealized_pnl())}")
    logger.info(f"Classification: {strategy.classification()}")
    logger.info(f"Leverage: {strategy.leverage_ratio():.1f}x")
    logger.info(f"Rough ITM Probability: {strategy.probability_itm():.0f}%")


def demo_portfolio():
    """Demonstrate batch risk summary and portfolio aggregation."""
    logger.info("\n" + "=" * 60)
    logger.info("Portfolio Demo")
    logger.info("=" * 60)

    journal = [
        {"strategy": "covered_call", "symbol": "AAPL", "quantity": 1, "strike": 105,
         "premium": 2, "cost_basis": 100, "expiration": "2024-02-16"},
        {"strategy": "cash_secured_put", "symbol": "MSFT", "quantity": 2, "strike": 50,
         "premium": 1.5, "expiration": "2024-01-19", "account_value": 50000},
        {"strategy": "long_call", "symbol": "NVDA", "quantity": 1, "strike": 100,
         "premium": 3, "expiration": "2024-02-16"},
    ]
    strategies = [create_strategy(entry, AS_OF) for entry in journal]

    summary = analyze_batch_risks(strategies)
    logger.info(f"Positions: {summary.total_positions}, Risk flags: {summary.total_risks}")
    logger.info(f"By severity: {summary.risks_by_severity}")
    if summary.highest_severity:
        logger.info(f"Highest severity: {summary.highest_severity.value}")

    metrics = calc_portfolio_metrics(strategies)
    logger.info(f"Total Max Profit: {format_currency(metrics.total_max_profit)}")
    logger.info(f"Unlimited-profit positions: {metrics.unlimited_profit_positions}")
    logger.info(f"Total Max Loss: {format_currency(metrics.total_max_loss)}")
    logger.info(f"Portfolio ROO: {format_percent(metrics.portfolio_roo)}")
    logger.info(f"Average DTE: {metrics.average_days_to_expiration:.1f}")


def main():
    """Run all demos."""
    parser = argparse.ArgumentParser(description="Calculation Engine Demo")
    parser.add_argument(
        "--module",
        choices=["covered_call", "cash_secured_put", "long_call", "portfolio", "all"],
        default="all",
        help="Which module to demo",
    )
    args = parser.parse_args()

    logger.info("Options Journal - Calculation Engine Demo")
    logger.info("=" * 60)

    if args.module in ("covered_call", "all"):
        demo_covered_call()

    if args.module in ("cash_secured_put", "all"):
        demo_cash_secured_put()

    if args.module in ("long_call", "all"):
        demo_long_call()

    if args.module in ("portfolio", "all"):
        demo_portfolio()

    logger.info("\n" + "=" * 60)
    logger.info("Demo completed!")


if __name__ == "__main__":
    main()
