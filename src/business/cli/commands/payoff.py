"""
Payoff Command - 到期盈亏命令

Prints the at-expiration payoff table of one position.
"""

import json
import logging
import sys
from typing import Optional

import click

from src.business.cli.common import build_strategies, load_entries, setup_logging
from src.engine.utils import format_currency, generate_price_range

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--positions",
    "-p",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="Positions JSON file",
)
@click.option(
    "--index",
    "-i",
    type=int,
    default=0,
    show_default=True,
    help="Which position in the file (0-based)",
)
@click.option("--min-price", type=float, help="Lowest underlying price")
@click.option("--max-price", type=float, help="Highest underlying price")
@click.option(
    "--steps",
    type=int,
    default=21,
    show_default=True,
    help="Number of prices when --min-price/--max-price are given",
)
@click.option("--as-of", type=str, help="Evaluation date (YYYY-MM-DD)")
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs")
def payoff(
    positions: str,
    index: int,
    min_price: Optional[float],
    max_price: Optional[float],
    steps: int,
    as_of: Optional[str],
    output: str,
    verbose: bool,
) -> None:
    """Print the payoff at expiration for one position

    Without --min-price/--max-price the range is centred on the current
    price (or the strike) with a width that depends on the strategy.

    \b
    Examples:
      optjournal payoff -p positions.json
      optjournal payoff -p positions.json -i 2 --min-price 80 --max-price 120
    """
    setup_logging(verbose)

    try:
        entries = load_entries(positions)
        if not 0 <= index < len(entries):
            raise ValueError(f"--index {index} out of range (file has {len(entries)} positions)")
        strategy = build_strategies([entries[index]], as_of)[0]

        prices = None
        if min_price is not None or max_price is not None:
            if min_price is None or max_price is None:
                raise ValueError("--min-price and --max-price must be given together")
            prices = generate_price_range(min_price, max_price, steps)
        points = strategy.payoff_chart(prices)
    except Exception as e:
        logger.exception("Failed to build payoff table")
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(3)

    if output == "json":
        click.echo(json.dumps([point.to_dict() for point in points], indent=2))
        return

    click.echo(
        f"{strategy.strategy_type.label} {strategy.inputs.symbol} "
        f"(breakeven {format_currency(strategy.breakeven())})"
    )
    click.echo(f"{'Price':>12}  {'P&L':>14}")
    click.echo("-" * 28)
    for point in points:
        marker = "  ← breakeven" if point.is_breakeven else ""
        click.echo(
            f"{format_currency(point.stock_price):>12}  "
            f"{format_currency(point.profit_loss):>14}{marker}"
        )
