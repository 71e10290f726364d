"""
Config Utilities - 配置工具函数

Helpers shared by the configuration modules.
"""

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent


def merge_overrides(
    base: dict[str, Any],
    overrides: dict[str, Any],
) -> dict[str, Any]:
    """递归深合并覆盖配置到基础配置

    - Nested dicts are merged recursively
    - Any other value replaces the base value

    Args:
        base: Base configuration dict.
        overrides: Override dict.

    Returns:
        Merged dict (neither argument is modified).
    """
    result = base.copy()
    for key, value in overrides.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_overrides(result[key], value)
        else:
            result[key] = value
    return result


def resolve_config_path(env_var: str, default: Path) -> Path:
    """Config file path from an environment variable, else the default.

    Variables from a .env file in the working directory are loaded first;
    values already in the environment win.
    """
    load_dotenv(override=False)
    value = os.getenv(env_var)
    if value:
        return Path(value).expanduser()
    return default
