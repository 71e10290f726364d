"""Base class for journal option strategies.

Contains the abstract OptionStrategy base class.
For data models, import from src.engine.models directly.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, ClassVar

from src.engine.greeks import approximate_delta, approximate_gamma, approximate_theta
from src.engine.models.enums import OptionType, StrategyType
from src.engine.models.inputs import PositionInputs
from src.engine.models.risk import DEFAULT_RISK_THRESHOLDS, RiskFlag, RiskThresholds
from src.engine.models.strategy import (
    PayoffPoint,
    ProfitValue,
    StrategyMetrics,
    is_unlimited,
)
from src.engine.returns import annualize_return, calc_return_pct
from src.engine.risk import (
    check_assignment_risk,
    check_price_risk,
    check_return_risk,
    check_size_risk,
    check_time_risk,
    is_assignment_likely,
)
from src.engine.utils.dates import days_between, parse_date
from src.engine.utils.formatting import format_currency, format_percent
from src.engine.utils.numeric import price_range_around, round_to

logger = logging.getLogger(__name__)

PAYOFF_STEPS = 15
BREAKEVEN_TOLERANCE = 0.01


class OptionStrategy(ABC):
    """Abstract base class for journal option strategies.

    A strategy is built from one validated inputs object and an evaluation
    date. Every metric is computed once in the constructor and frozen into a
    StrategyMetrics; the accessors below only read it back.

    Subclasses must implement:
    - _calc_max_profit()
    - _calc_max_loss()
    - _calc_breakeven()
    - _calc_outlay()
    - _calc_expiration_pnl()
    """

    strategy_type: ClassVar[StrategyType]
    option_type: ClassVar[OptionType]
    input_type: ClassVar[type[PositionInputs]]
    is_short_option: ClassVar[bool] = True
    payoff_range_pct: ClassVar[float] = 50.0

    def __init__(
        self,
        inputs: PositionInputs,
        as_of: date | datetime | str | None = None,
    ):
        """Initialize strategy.

        Args:
            inputs: Position inputs of the matching type.
            as_of: Evaluation date. Falls back to inputs.evaluation_date,
                then to today.

        Raises:
            ValidationError: If the inputs break a business rule.
        """
        if not isinstance(inputs, self.input_type):
            raise TypeError(
                f"{type(self).__name__} needs {self.input_type.__name__}, "
                f"got {type(inputs).__name__}"
            )
        inputs.validate()

        self.inputs = inputs
        self.expiration = parse_date(inputs.expiration, field="expiration")
        self.as_of = self._resolve_as_of(as_of)
        self._days = days_between(self.as_of, self.expiration)
        self._metrics = self._build_metrics()

        logger.debug(
            f"{self.strategy_type.label} {inputs.symbol} x{inputs.quantity}: "
            f"max_profit={self._metrics.max_profit}, max_loss={self._metrics.max_loss}, "
            f"breakeven={self._metrics.breakeven}, dte={self._days}"
        )

    def _resolve_as_of(self, as_of: date | datetime | str | None) -> date:
        if as_of is not None:
            return parse_date(as_of, field="as_of")
        if self.inputs.evaluation_date is not None:
            return parse_date(self.inputs.evaluation_date, field="evaluation_date")
        return date.today()

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _calc_max_profit(self) -> ProfitValue:
        """Maximum profit in dollars, or UNLIMITED."""
        pass

    @abstractmethod
    def _calc_max_loss(self) -> float:
        """Maximum loss in dollars (as positive number)."""
        pass

    @abstractmethod
    def _calc_breakeven(self) -> float:
        """Underlying price where P&L at expiration is zero."""
        pass

    @abstractmethod
    def _calc_outlay(self) -> float:
        """Capital committed to the position in dollars."""
        pass

    @abstractmethod
    def _calc_expiration_pnl(self, price: float) -> float:
        """Unrounded P&L at expiration for an underlying price."""
        pass

    def _calc_return_on_outlay(self, max_profit: ProfitValue, outlay: float) -> float:
        return calc_return_pct(max_profit, outlay)

    def _calc_return_on_risk(self, max_profit: ProfitValue, max_loss: float) -> float:
        return calc_return_pct(max_profit, max_loss)

    def _calc_annualized_return(self, max_profit: ProfitValue, outlay: float) -> float:
        return annualize_return(max_profit, outlay, self._days)

    def _calc_extras(self) -> dict[str, Any]:
        """Strategy-specific values merged into the metrics."""
        return {}

    def _theta_premium(self) -> float:
        return self.inputs.premium

    def reference_price(self) -> float:
        """Underlying price used for Greeks and moneyness.

        The current price when known, otherwise the strike.
        """
        if self.inputs.current_price is not None:
            return self.inputs.current_price
        return self.inputs.strike

    def _build_metrics(self) -> StrategyMetrics:
        max_profit = self._calc_max_profit()
        max_loss = self._calc_max_loss()
        outlay = self._calc_outlay()

        if not is_unlimited(max_profit):
            max_profit = round_to(max_profit, 2)

        days_for_greeks = max(self._days, 0)
        spot = self.reference_price()

        return StrategyMetrics(
            strategy_type=self.strategy_type,
            symbol=self.inputs.symbol,
            max_profit=max_profit,
            max_loss=round_to(max_loss, 2),
            breakeven=round_to(self._calc_breakeven(), 2),
            return_on_outlay=round_to(self._calc_return_on_outlay(max_profit, outlay), 2),
            return_on_risk=round_to(self._calc_return_on_risk(max_profit, max_loss), 2),
            annualized_return=round_to(self._calc_annualized_return(max_profit, outlay), 2),
            days_to_expiration=self._days,
            delta=round_to(
                approximate_delta(spot, self.inputs.strike, days_for_greeks, self.option_type), 4
            ),
            gamma=round_to(approximate_gamma(spot, self.inputs.strike, days_for_greeks), 4),
            theta=round_to(approximate_theta(self._theta_premium(), days_for_greeks), 4),
            extras=self._calc_extras(),
        )

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------

    def max_profit(self) -> ProfitValue:
        """Maximum profit in dollars, or UNLIMITED."""
        return self._metrics.max_profit

    def max_loss(self) -> float:
        """Maximum loss in dollars (as positive number)."""
        return self._metrics.max_loss

    def breakeven(self) -> float:
        """Breakeven price of the underlying at expiration."""
        return self._metrics.breakeven

    def days_to_expiration(self) -> int:
        """Calendar days from the evaluation date to expiration."""
        return self._metrics.days_to_expiration

    def return_on_outlay(self) -> float:
        """Return on outlay (ROO), percent."""
        return self._metrics.return_on_outlay

    def return_on_risk(self) -> float:
        """Return on risk (ROR), percent."""
        return self._metrics.return_on_risk

    def annualized_return(self) -> float:
        """Return on outlay annualized over the days to expiration, percent."""
        return self._metrics.annualized_return

    def current_delta(self) -> float:
        """Approximate delta per share at the reference price."""
        return self._metrics.delta

    def current_gamma(self) -> float:
        """Approximate gamma per share at the reference price."""
        return self._metrics.gamma

    def current_theta(self) -> float:
        """Approximate theta, premium decay per share per day."""
        return self._metrics.theta

    def get_all_metrics(self) -> StrategyMetrics:
        """All metrics in a single object."""
        return self._metrics

    def expiration_pnl(self, price: float) -> float:
        """P&L in dollars at expiration for an underlying price.

        Raises:
            ValueError: If price is negative.
        """
        if price < 0:
            raise ValueError(f"price cannot be negative, got {price}")
        return round_to(self._calc_expiration_pnl(price), 2)

    def payoff_chart(self, prices: list[float] | None = None) -> list[PayoffPoint]:
        """At-expiration payoff curve.

        Args:
            prices: Underlying prices to sample. Defaults to a range of
                payoff_range_pct around the reference price.

        Returns:
            One PayoffPoint per price, in the order given.
        """
        if prices is None:
            prices = price_range_around(
                self.reference_price(), self.payoff_range_pct, PAYOFF_STEPS
            )
        breakeven = self.breakeven()
        return [
            PayoffPoint(
                stock_price=price,
                profit_loss=self.expiration_pnl(price),
                is_breakeven=abs(price - breakeven) < BREAKEVEN_TOLERANCE,
            )
            for price in prices
        ]

    def intrinsic_value(self, price: float | None = None) -> float:
        """Intrinsic value per share at price (defaults to the reference price)."""
        if price is None:
            price = self.reference_price()
        if self.option_type == OptionType.CALL:
            return round_to(max(0.0, price - self.inputs.strike), 2)
        return round_to(max(0.0, self.inputs.strike - price), 2)

    def is_in_the_money(self) -> bool:
        """Reference price on the exercise side of the strike."""
        if self.option_type == OptionType.CALL:
            return self.reference_price() > self.inputs.strike
        return self.reference_price() < self.inputs.strike

    def is_likely_assignment(
        self,
        thresholds: RiskThresholds = DEFAULT_RISK_THRESHOLDS,
    ) -> bool:
        """Short option deep in the money with little time left.

        Always False for options held long.
        """
        if not self.is_short_option:
            return False
        return is_assignment_likely(
            self.is_in_the_money(),
            self.intrinsic_value(),
            self.inputs.premium,
            self.days_to_expiration(),
            thresholds,
        )

    # ------------------------------------------------------------------
    # Risk analysis
    # ------------------------------------------------------------------

    def analyze_risks(
        self,
        thresholds: RiskThresholds = DEFAULT_RISK_THRESHOLDS,
    ) -> list[RiskFlag]:
        """Run every risk check that applies to this position.

        Checks run in a fixed order: return, time, price, assignment, size.
        Price and assignment need inputs.current_price; size needs
        inputs.account_value.

        Args:
            thresholds: Threshold bands to check against.

        Returns:
            Risk flags, at most one per category.
        """
        flags = [
            self._check_return(thresholds),
            self._check_time(thresholds),
            self._check_price(thresholds),
            self._check_assignment(thresholds),
            self._check_size(thresholds),
        ]
        return [flag for flag in flags if flag is not None]

    def _check_return(self, thresholds: RiskThresholds) -> RiskFlag | None:
        return check_return_risk(self.annualized_return(), thresholds)

    def _check_time(self, thresholds: RiskThresholds) -> RiskFlag | None:
        return check_time_risk(
            self.days_to_expiration(), thresholds, long_option=not self.is_short_option
        )

    def _check_price(self, thresholds: RiskThresholds) -> RiskFlag | None:
        if self.inputs.current_price is None:
            return None
        return check_price_risk(self.inputs.current_price, self.breakeven(), thresholds)

    def _check_assignment(self, thresholds: RiskThresholds) -> RiskFlag | None:
        if not self.is_short_option or self.inputs.current_price is None:
            return None
        return check_assignment_risk(
            current_price=self.inputs.current_price,
            strike=self.inputs.strike,
            premium=self.inputs.premium,
            days_to_expiration=self.days_to_expiration(),
            option_type=self.option_type,
            thresholds=thresholds,
        )

    def _check_size(self, thresholds: RiskThresholds) -> RiskFlag | None:
        return check_size_risk(self.max_loss(), self.inputs.account_value, thresholds)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def _summary_lines(self) -> list[str]:
        """Strategy-specific summary lines."""
        return []

    def get_summary(self, thresholds: RiskThresholds = DEFAULT_RISK_THRESHOLDS) -> str:
        """Multi-line human-readable position summary."""
        metrics = self._metrics
        risks = self.analyze_risks(thresholds)

        if is_unlimited(metrics.max_profit):
            max_profit = "Unlimited"
        else:
            max_profit = (
                f"{format_currency(metrics.max_profit)} "
                f"({format_percent(metrics.annualized_return)} annualized ROO)"
            )

        lines = [
            f"{self.strategy_type.label} {self.inputs.symbol}: "
            f"{format_currency(self.inputs.strike)} strike x{self.inputs.quantity}, "
            f"expires {self.expiration.isoformat()}",
            f"Premium: {format_currency(self.inputs.premium)}/share",
            f"Breakeven: {format_currency(metrics.breakeven)}",
            f"Max Profit: {max_profit}",
            f"Max Loss: {format_currency(metrics.max_loss)}",
            *self._summary_lines(),
            f"Days to Expiration: {metrics.days_to_expiration}",
            f"Risks: {len(risks)} flag(s)" if risks else "No risk flags",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(symbol={self.inputs.symbol!r}, "
            f"strike={self.inputs.strike}, quantity={self.inputs.quantity}, "
            f"expiration={self.expiration.isoformat()})"
        )
