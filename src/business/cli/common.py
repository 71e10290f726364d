"""
CLI Common - 命令行共用函数

Position file loading, threshold overrides and logging setup shared by the
subcommands.
"""

import json
import logging
from typing import Any

import yaml

from src.business.config.risk_config import RiskConfig
from src.engine.errors import ValidationError
from src.engine.strategy import OptionStrategy, create_strategy

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool) -> None:
    """配置日志"""
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format=LOG_FORMAT)


def load_entries(path: str) -> list[dict[str, Any]]:
    """加载持仓数据

    The file holds either a list of position objects, or an object with a
    "positions" list and an optional "account_value" applied to every
    position that does not set its own.

    Raises:
        ValueError: If the file layout is not recognized.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    account_value = None
    if isinstance(data, dict):
        account_value = data.get("account_value")
        data = data.get("positions")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of positions or a 'positions' list")

    entries = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ValueError(f"{path}: position #{i + 1} is not an object")
        if account_value is not None and "account_value" not in entry:
            entry = {**entry, "account_value": account_value}
        entries.append(entry)
    return entries


def build_strategies(
    entries: list[dict[str, Any]],
    as_of: str | None = None,
) -> list[OptionStrategy]:
    """Create calculators, naming the failing position on error.

    Raises:
        ValidationError: If any position is invalid.
    """
    strategies = []
    for i, entry in enumerate(entries):
        try:
            strategies.append(create_strategy(entry, as_of))
        except ValidationError as e:
            label = entry.get("symbol") or f"#{i + 1}"
            raise ValidationError(e.field, f"position {label}: {e}") from e
    return strategies


def parse_overrides(items: tuple[str, ...]) -> dict[str, Any]:
    """Parse --override NAME=VALUE pairs; values are read as YAML scalars.

    Raises:
        ValueError: If an item has no '='.
    """
    overrides: dict[str, Any] = {}
    for item in items:
        name, sep, raw = item.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Invalid override '{item}', expected NAME=VALUE")
        overrides[name.strip()] = yaml.safe_load(raw)
    return overrides


def load_risk_config(config: str | None, overrides: tuple[str, ...]) -> RiskConfig:
    """Risk config from an optional file plus command-line overrides."""
    return RiskConfig.load(config, parse_overrides(overrides) or None)
