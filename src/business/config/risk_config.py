"""
Risk Configuration - 风险阈值配置

Loads RiskThresholds from YAML. The file groups thresholds into sections:

    risk_thresholds:
      return: {min_return_pct: 15.0, ...}
      time: {max_safe_dte: 7, ...}
      decay: {...}
      price: {...}
      assignment: {...}
      size: {...}

Sections are optional and may be mixed with flat keys; any threshold left
out keeps its built-in default.

Lookup order for the file: explicit path, then the OPTJOURNAL_RISK_CONFIG
environment variable (a .env file is honored), then
config/risk/thresholds.yaml, then the built-in defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.business.config.config_utils import (
    PROJECT_ROOT,
    merge_overrides,
    resolve_config_path,
)
from src.engine.models.risk import DEFAULT_RISK_THRESHOLDS, RiskThresholds

logger = logging.getLogger(__name__)

RISK_CONFIG_ENV = "OPTJOURNAL_RISK_CONFIG"
DEFAULT_CONFIG_FILE = PROJECT_ROOT / "config" / "risk" / "thresholds.yaml"

# YAML section -> threshold fields it holds
SECTIONS: dict[str, tuple[str, ...]] = {
    "return": ("min_return_pct", "weak_return_pct", "critical_return_pct"),
    "time": ("max_safe_dte", "caution_dte", "warning_dte", "critical_dte"),
    "decay": ("decay_warning_dte", "decay_high_dte", "decay_critical_dte"),
    "price": (
        "price_watch_pct",
        "price_proximity_pct",
        "price_danger_pct",
        "below_breakeven_pct",
        "deep_below_breakeven_pct",
    ),
    "assignment": ("assignment_dte", "assignment_intrinsic_ratio"),
    "size": ("max_position_size_pct", "critical_position_size_pct"),
}


@dataclass
class RiskConfig:
    """风险配置

    Attributes:
        thresholds: Threshold bands handed to the engine.
        source: File the thresholds were read from, None for defaults.
    """

    thresholds: RiskThresholds = field(default_factory=lambda: DEFAULT_RISK_THRESHOLDS)
    source: Path | None = None

    @classmethod
    def from_yaml(cls, path: str | Path) -> RiskConfig:
        """从 YAML 文件加载配置

        Raises:
            ValueError: If the file is not a mapping or names an unknown
                threshold.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")

        config = cls.from_dict(data)
        config.source = Path(path)
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RiskConfig:
        """从字典创建配置

        Accepts the YAML layout (optionally under a "risk_thresholds" key),
        with sections, flat keys, or both.

        Raises:
            ValueError: If a key is not a known threshold.
        """
        section = data.get("risk_thresholds", data) or {}
        return cls(thresholds=RiskThresholds.from_dict(flatten_sections(section)))

    @classmethod
    def load(
        cls,
        path: str | Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> RiskConfig:
        """加载配置

        Args:
            path: Explicit YAML file. Must exist when given.
            overrides: Threshold values applied on top of the file, flat or
                by section.

        Raises:
            FileNotFoundError: If an explicit path does not exist.
            ValueError: If a threshold name is unknown or bands are out of
                order.
        """
        if path is not None:
            config_file = Path(path)
            if not config_file.exists():
                raise FileNotFoundError(f"Risk config not found: {config_file}")
        else:
            config_file = resolve_config_path(RISK_CONFIG_ENV, DEFAULT_CONFIG_FILE)

        data: dict[str, Any] = {}
        source = None
        if config_file.exists():
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"{config_file}: expected a mapping at the top level")
            source = config_file
            logger.debug(f"Loaded risk thresholds from {config_file}")
        else:
            logger.info(f"Risk config {config_file} not found, using defaults")

        section = data.get("risk_thresholds", data) or {}
        if overrides:
            section = merge_overrides(section, overrides)

        config = cls.from_dict(section)
        config.source = source
        return config

    def to_dict(self) -> dict[str, Any]:
        """Thresholds in the sectioned YAML layout."""
        values = self.thresholds.to_dict()
        return {
            "risk_thresholds": {
                name: {key: values[key] for key in keys} for name, keys in SECTIONS.items()
            }
        }

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False)


def flatten_sections(data: dict[str, Any]) -> dict[str, Any]:
    """Flatten section dicts into one threshold mapping.

    Raises:
        ValueError: If a section holds a key that belongs elsewhere.
    """
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if key in SECTIONS and isinstance(value, dict):
            misplaced = sorted(set(value) - set(SECTIONS[key]))
            if misplaced:
                raise ValueError(
                    f"Unknown risk threshold(s) in section '{key}': {', '.join(misplaced)}"
                )
            flat.update(value)
        else:
            flat[key] = value
    return flat
