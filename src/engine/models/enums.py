"""Engine layer enumerations.

Centralized location for all enums used in the engine layer.
"""

from enum import Enum


class OptionType(Enum):
    """Option type: Call or Put."""

    CALL = "call"
    PUT = "put"


class StrategyType(str, Enum):
    """Supported journal strategies."""

    COVERED_CALL = "covered_call"
    CASH_SECURED_PUT = "cash_secured_put"
    LONG_CALL = "long_call"

    @property
    def label(self) -> str:
        """Human-readable strategy name."""
        return _STRATEGY_LABELS[self]


_STRATEGY_LABELS = {
    StrategyType.COVERED_CALL: "Covered Call",
    StrategyType.CASH_SECURED_PUT: "Cash-Secured Put",
    StrategyType.LONG_CALL: "Long Call",
}


class RiskCategory(str, Enum):
    """Risk flag category."""

    RETURN = "return"  # Return on capital too low
    SIZE = "size"  # Position too large for the account
    TIME = "time"  # Expiration approaching or passed
    PRICE = "price"  # Underlying near or through breakeven
    ASSIGNMENT = "assignment"  # Short option likely to be assigned


class RiskSeverity(str, Enum):
    """Risk flag severity, ordered low < medium < high < critical."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        """Numeric rank, higher is more severe."""
        return _SEVERITY_RANKS[self]


_SEVERITY_RANKS = {
    RiskSeverity.LOW: 1,
    RiskSeverity.MEDIUM: 2,
    RiskSeverity.HIGH: 3,
    RiskSeverity.CRITICAL: 4,
}

# Most severe first
SEVERITY_ORDER: tuple[RiskSeverity, ...] = (
    RiskSeverity.CRITICAL,
    RiskSeverity.HIGH,
    RiskSeverity.MEDIUM,
    RiskSeverity.LOW,
)
