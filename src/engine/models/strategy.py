"""Strategy-related models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Union

from src.engine.models.enums import StrategyType


class Unbounded(Enum):
    """Sentinel for profit that has no finite maximum (e.g. long calls)."""

    UNLIMITED = "unlimited"

    def __str__(self) -> str:
        return self.value


UNLIMITED = Unbounded.UNLIMITED

# A finite dollar amount or the UNLIMITED sentinel
ProfitValue = Union[float, Unbounded]


def is_unlimited(value: ProfitValue) -> bool:
    """True if value is the UNLIMITED sentinel."""
    return value is UNLIMITED


@dataclass(frozen=True)
class PayoffPoint:
    """One point of an at-expiration payoff curve."""

    stock_price: float
    profit_loss: float
    is_breakeven: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "stock_price": self.stock_price,
            "profit_loss": self.profit_loss,
            "is_breakeven": self.is_breakeven,
        }


@dataclass(frozen=True)
class StrategyMetrics:
    """Metrics of one position, computed once when the calculator is built.

    Money values are dollars for the whole position, rounded to cents.
    Percentages are rounded to two decimals. Greeks are per-share option
    approximations (see src.engine.greeks).

    Attributes:
        strategy_type: Which strategy produced the metrics.
        symbol: Underlying ticker.
        max_profit: Maximum profit, or UNLIMITED.
        max_loss: Maximum loss as a positive number.
        breakeven: Underlying price where P&L at expiration is zero.
        return_on_outlay: Max profit / capital committed, percent (ROO).
        return_on_risk: Max profit / max loss, percent (ROR).
        annualized_return: ROO annualized over days to expiration, percent.
        days_to_expiration: Calendar days to expiration (negative once expired).
        delta: Approximate option delta.
        gamma: Approximate option gamma.
        theta: Approximate option theta (per share per day).
        extras: Strategy-specific values (effective basis, intrinsic value, ...),
            held in a read-only mapping.
    """

    strategy_type: StrategyType
    symbol: str
    max_profit: ProfitValue
    max_loss: float
    breakeven: float
    return_on_outlay: float
    return_on_risk: float
    annualized_return: float
    days_to_expiration: int
    delta: float
    gamma: float
    theta: float
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary; UNLIMITED becomes the string "unlimited"."""
        return {
            "strategy_type": self.strategy_type.value,
            "symbol": self.symbol,
            "max_profit": str(self.max_profit) if is_unlimited(self.max_profit) else self.max_profit,
            "max_loss": self.max_loss,
            "breakeven": self.breakeven,
            "return_on_outlay": self.return_on_outlay,
            "return_on_risk": self.return_on_risk,
            "annualized_return": self.annualized_return,
            "days_to_expiration": self.days_to_expiration,
            "delta": self.delta,
            "gamma": self.gamma,
            "theta": self.theta,
            **dict(self.extras),
        }
