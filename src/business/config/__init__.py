"""
Configuration Management - 配置管理

加载和管理业务层配置：
- RiskConfig: 风险阈值配置
"""

from src.business.config.config_utils import merge_overrides
from src.business.config.risk_config import RiskConfig

__all__ = ["RiskConfig", "merge_overrides"]
