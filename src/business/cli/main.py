"""
CLI Main Entry Point - 命令行主入口

使用 Click 库构建命令行工具。
"""

import click
from dotenv import load_dotenv

from src.business.cli.commands.analyze import analyze
from src.business.cli.commands.payoff import payoff
from src.business.cli.commands.thresholds import thresholds


@click.group()
@click.version_option(version="0.1.0", prog_name="optjournal")
def cli() -> None:
    """Options journal - 期权策略估值与风险分析

    Analyzes covered calls, cash-secured puts and long calls from a
    positions file and reports categorized risk flags.
    """
    load_dotenv(override=False)


# 注册子命令
cli.add_command(analyze)
cli.add_command(payoff)
cli.add_command(thresholds)


if __name__ == "__main__":
    cli()
