"""
Business Layer CLI - 业务层命令行工具

提供命令：
- analyze: 持仓估值与风险分析
- payoff: 到期盈亏表
- thresholds: 当前风险阈值
"""

from src.business.cli.main import cli

__all__ = ["cli"]
