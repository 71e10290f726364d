"""
CLI Commands - 命令行子命令
"""

from src.business.cli.commands.analyze import analyze
from src.business.cli.commands.payoff import payoff
from src.business.cli.commands.thresholds import thresholds

__all__ = ["analyze", "payoff", "thresholds"]
