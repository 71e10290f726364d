"""
Business Layer - 业务模块层

期权交易日志的业务层，包含：
- config: 风险阈值配置
- cli: 命令行工具
"""
