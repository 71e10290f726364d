"""Position input models.

One frozen dataclass per strategy. Premiums and prices are quoted per share;
one contract covers ``CONTRACT_MULTIPLIER`` shares. Fees are total dollars
for the whole position.

Upstream form code is responsible for type coercion (string -> number);
``validate()`` enforces the business rules and raises ``ValidationError``
naming the offending field.
"""

from __future__ import annotations

import math
from dataclasses import MISSING, dataclass, fields
from datetime import date, datetime
from typing import Any, Mapping, TypeVar

from src.engine.errors import ValidationError
from src.engine.utils.dates import parse_date

CONTRACT_MULTIPLIER = 100

_InputsT = TypeVar("_InputsT", bound="PositionInputs")


def _check_number(name: str, value: Any) -> float:
    if value is None:
        raise ValidationError(name, "is required")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(name, f"must be a number, got {value!r}")
    if math.isnan(value) or math.isinf(value):
        raise ValidationError(name, f"must be finite, got {value!r}")
    return float(value)


def _require_positive(name: str, value: Any) -> None:
    if _check_number(name, value) <= 0:
        raise ValidationError(name, f"must be positive, got {value}")


def _require_non_negative(name: str, value: Any) -> None:
    if _check_number(name, value) < 0:
        raise ValidationError(name, f"cannot be negative, got {value}")


@dataclass(frozen=True, kw_only=True)
class PositionInputs:
    """Fields shared by every strategy.

    Attributes:
        symbol: Underlying ticker.
        quantity: Number of option contracts (integer > 0).
        strike: Option strike price (> 0).
        premium: Option premium per share (>= 0).
        expiration: Expiration as date, datetime or ISO string.
        evaluation_date: Date the position is valued on (defaults to today).
        fees: Total commissions and fees in dollars (>= 0).
        current_price: Current underlying price, enables price/assignment checks.
        account_value: Account net value, enables the position size check.
    """

    symbol: str
    quantity: int
    strike: float
    premium: float
    expiration: date | datetime | str
    evaluation_date: date | datetime | str | None = None
    fees: float = 0.0
    current_price: float | None = None
    account_value: float | None = None

    def validate(self) -> None:
        """Validate inputs.

        Raises:
            ValidationError: If any field breaks its business rule.
        """
        if not isinstance(self.symbol, str) or not self.symbol.strip():
            raise ValidationError("symbol", "is required")

        _check_number("quantity", self.quantity)
        if self.quantity != int(self.quantity):
            raise ValidationError("quantity", f"must be a whole number, got {self.quantity}")
        _require_positive("quantity", self.quantity)

        _require_positive("strike", self.strike)
        _require_non_negative("premium", self.premium)
        _require_non_negative("fees", self.fees)

        if self.current_price is not None:
            _require_positive("current_price", self.current_price)
        if self.account_value is not None:
            _require_positive("account_value", self.account_value)

        parse_date(self.expiration, field="expiration")
        if self.evaluation_date is not None:
            parse_date(self.evaluation_date, field="evaluation_date")

    @property
    def shares(self) -> int:
        """Shares controlled by the option contracts."""
        return int(self.quantity) * CONTRACT_MULTIPLIER

    @classmethod
    def from_dict(cls: type[_InputsT], data: Mapping[str, Any]) -> _InputsT:
        """Create inputs from a raw mapping, ignoring unknown keys.

        Raises:
            ValidationError: If a required field is missing.
        """
        known = {}
        for f in fields(cls):
            if f.name in data:
                known[f.name] = data[f.name]
            elif _is_required(f):
                raise ValidationError(f.name, "is required")
        return cls(**known)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with ISO date strings."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (date, datetime)):
                value = value.isoformat()
            result[f.name] = value
        return result


def _is_required(f) -> bool:
    return f.default is MISSING and f.default_factory is MISSING


@dataclass(frozen=True, kw_only=True)
class CoveredCallInputs(PositionInputs):
    """Covered call: 100 shares per contract held at cost_basis, one call sold.

    Attributes:
        cost_basis: Purchase price per share of the covering stock (> 0).
    """

    cost_basis: float

    def validate(self) -> None:
        super().validate()
        _require_positive("cost_basis", self.cost_basis)


@dataclass(frozen=True, kw_only=True)
class CashSecuredPutInputs(PositionInputs):
    """Cash-secured put: one put sold per contract, collateral held in cash.

    Attributes:
        cash_secured: Collateral in dollars (defaults to strike * shares).
    """

    cash_secured: float | None = None

    def validate(self) -> None:
        super().validate()
        if self.cash_secured is not None:
            _require_positive("cash_secured", self.cash_secured)


@dataclass(frozen=True, kw_only=True)
class LongCallInputs(PositionInputs):
    """Long call: one call bought per contract.

    Attributes:
        current_premium: Current option premium per share, for unrealized P&L.
    """

    current_premium: float | None = None

    def validate(self) -> None:
        super().validate()
        if self.current_premium is not None:
            _require_non_negative("current_premium", self.current_premium)
