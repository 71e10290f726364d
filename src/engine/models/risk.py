"""Risk flag and risk threshold models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping

from src.engine.models.enums import RiskCategory, RiskSeverity


@dataclass(frozen=True)
class RiskFlag:
    """A categorized, severity-ranked warning.

    Attributes:
        category: What kind of risk (return, size, time, price, assignment).
        severity: How serious (low, medium, high, critical).
        message: Human-readable description.
        value: Metric value that triggered the flag.
        threshold: Threshold band the value crossed.
    """

    category: RiskCategory
    severity: RiskSeverity
    message: str
    value: float | None = None
    threshold: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "value": self.value,
            "threshold": self.threshold,
        }


@dataclass(frozen=True)
class RiskThresholds:
    """Threshold bands for the risk checks.

    Each check walks its bands from the tightest to the loosest and reports
    the first one crossed, so a metric produces at most one flag.

    Return bands (annualized return on outlay, percent):
        min_return_pct: below -> medium
        weak_return_pct: below -> high
        critical_return_pct: at or below -> critical

    Time bands (days to expiration, short premium strategies). The low and
    medium bands default to the high band, so they are off unless widened:
        max_safe_dte: at or below -> low
        caution_dte: at or below -> medium
        warning_dte: at or below -> high
        critical_dte: at or below, or expired -> critical

    Time bands for long options, where theta works against the holder:
        decay_warning_dte: at or below -> medium
        decay_high_dte: at or below -> high
        decay_critical_dte: at or below, or expired -> critical

    Price bands (absolute distance between underlying and breakeven,
    percent). The low band defaults to the medium band:
        price_watch_pct: at or below -> low
        price_proximity_pct: at or below -> medium
        price_danger_pct: at or below -> high
        below_breakeven_pct: long call trading further below breakeven -> medium
        deep_below_breakeven_pct: long call further below breakeven -> high

    Assignment:
        assignment_dte: in-the-money short options this close to expiry may be assigned
        assignment_intrinsic_ratio: intrinsic >= ratio * premium means likely assignment

    Size (capital at risk as percent of account value):
        max_position_size_pct: above -> medium
        critical_position_size_pct: above -> high
    """

    min_return_pct: float = 15.0
    weak_return_pct: float = 7.5
    critical_return_pct: float = 0.0

    max_safe_dte: int = 7
    caution_dte: int = 7
    warning_dte: int = 7
    critical_dte: int = 3

    decay_warning_dte: int = 30
    decay_high_dte: int = 14
    decay_critical_dte: int = 7

    price_watch_pct: float = 5.0
    price_proximity_pct: float = 5.0
    price_danger_pct: float = 2.0
    below_breakeven_pct: float = 10.0
    deep_below_breakeven_pct: float = 20.0

    assignment_dte: int = 7
    assignment_intrinsic_ratio: float = 0.8

    max_position_size_pct: float = 5.0
    critical_position_size_pct: float = 10.0

    def __post_init__(self) -> None:
        _require_ordered(
            ("critical_return_pct", self.critical_return_pct),
            ("weak_return_pct", self.weak_return_pct),
            ("min_return_pct", self.min_return_pct),
        )
        _require_ordered(
            ("critical_dte", self.critical_dte),
            ("warning_dte", self.warning_dte),
            ("caution_dte", self.caution_dte),
            ("max_safe_dte", self.max_safe_dte),
        )
        _require_ordered(
            ("decay_critical_dte", self.decay_critical_dte),
            ("decay_high_dte", self.decay_high_dte),
            ("decay_warning_dte", self.decay_warning_dte),
        )
        _require_ordered(
            ("price_danger_pct", self.price_danger_pct),
            ("price_proximity_pct", self.price_proximity_pct),
            ("price_watch_pct", self.price_watch_pct),
        )
        _require_ordered(
            ("below_breakeven_pct", self.below_breakeven_pct),
            ("deep_below_breakeven_pct", self.deep_below_breakeven_pct),
        )
        _require_ordered(
            ("max_position_size_pct", self.max_position_size_pct),
            ("critical_position_size_pct", self.critical_position_size_pct),
        )

    def with_overrides(self, **overrides: Any) -> RiskThresholds:
        """Return a copy with some thresholds replaced.

        Raises:
            ValueError: If a name is not a known threshold, or the bands
                end up out of order.
        """
        names = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - names)
        if unknown:
            raise ValueError(f"Unknown risk threshold(s): {', '.join(unknown)}")
        return replace(self, **overrides)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        base: RiskThresholds | None = None,
    ) -> RiskThresholds:
        """Create thresholds from a flat mapping, starting from base (or defaults)."""
        return (base or cls()).with_overrides(**dict(data))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


def _require_ordered(*bands: tuple[str, float]) -> None:
    """Bands must run from tightest to loosest."""
    for (low_name, low), (high_name, high) in zip(bands, bands[1:]):
        if low > high:
            raise ValueError(f"{low_name} ({low}) must not exceed {high_name} ({high})")


DEFAULT_RISK_THRESHOLDS = RiskThresholds()
