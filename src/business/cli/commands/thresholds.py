"""
Thresholds Command - 风险阈值命令

Prints the risk thresholds that analyze would use.
"""

import json
import logging
import sys
from typing import Optional

import click

from src.business.cli.common import load_risk_config, setup_logging

logger = logging.getLogger(__name__)


@click.command()
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
    help="Override one threshold (repeatable)",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs")
def thresholds(
    config: Optional[str],
    override: tuple[str, ...],
    output: str,
    verbose: bool,
) -> None:
    """Show the active risk thresholds

    \b
    Examples:
      optjournal thresholds
      optjournal thresholds -c my_thresholds.yaml -o json
    """
    setup_logging(verbose)

    try:
        risk_config = load_risk_config(config, override)
    except Exception as e:
        logger.exception("Failed to load risk config")
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(3)

    source = risk_config.source or "built-in defaults"
    if output == "json":
        click.echo(json.dumps(risk_config.to_dict(), indent=2))
    else:
        click.echo(f"# source: {source}")
        click.echo(risk_config.to_yaml(), nl=False)
