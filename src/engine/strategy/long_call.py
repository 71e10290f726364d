"""Long Call strategy implementation.

Buy a call option for leveraged upside exposure.
"""

from typing import Any

from src.engine.models.enums import OptionType, StrategyType
from src.engine.models.inputs import LongCallInputs
from src.engine.models.risk import RiskFlag, RiskThresholds
from src.engine.models.strategy import UNLIMITED, ProfitValue
from src.engine.returns import annualize_return, calc_return_pct
from src.engine.risk import check_long_call_price_risk
from src.engine.strategy.base import OptionStrategy
from src.engine.utils.formatting import format_currency, format_percent
from src.engine.utils.numeric import clamp, round_to

# Moneyness band edges, percent
DEEP_MONEYNESS_PCT = 10.0
ATM_MONEYNESS_PCT = 2.0

# Days over which the out-of-the-money probability is cut back
PROBABILITY_DECAY_DAYS = 30
PROBABILITY_DECAY_PCT = 20.0


class LongCallStrategy(OptionStrategy):
    """Long Call (Buy Call) strategy.

    Profit/Loss Profile:
    - Max Profit: Unlimited
    - Max Loss: Premium paid plus fees
    - Breakeven: Strike + Total Cost per share

    Use case:
    - Bullish outlook
    - Defined risk, leveraged upside
    - Time decay works against the holder
    """

    strategy_type = StrategyType.LONG_CALL
    option_type = OptionType.CALL
    input_type = LongCallInputs
    is_short_option = False
    payoff_range_pct = 50.0

    inputs: LongCallInputs

    def _total_cost(self) -> float:
        return self.inputs.premium * self.inputs.shares + self.inputs.fees

    def _calc_max_profit(self) -> ProfitValue:
        return UNLIMITED

    def _calc_max_loss(self) -> float:
        return self._total_cost()

    def _calc_breakeven(self) -> float:
        return self.inputs.strike + self._total_cost() / self.inputs.shares

    def _calc_outlay(self) -> float:
        return self._total_cost()

    def _calc_expiration_pnl(self, price: float) -> float:
        return max(0.0, price - self.inputs.strike) * self.inputs.shares - self._total_cost()

    def _calc_unrealized_pnl(self) -> float:
        if self.inputs.current_premium is not None:
            value_per_share = self.inputs.current_premium
        else:
            value_per_share = self.intrinsic_value()
        return value_per_share * self.inputs.shares - self._total_cost()

    # Percentage returns use the mark-to-market gain, since max profit is unbounded
    def _calc_return_on_outlay(self, max_profit: ProfitValue, outlay: float) -> float:
        return calc_return_pct(self._calc_unrealized_pnl(), outlay)

    def _calc_return_on_risk(self, max_profit: ProfitValue, max_loss: float) -> float:
        return calc_return_pct(self._calc_unrealized_pnl(), max_loss)

    def _calc_annualized_return(self, max_profit: ProfitValue, outlay: float) -> float:
        return annualize_return(self._calc_unrealized_pnl(), outlay, self._days)

    def _theta_premium(self) -> float:
        if self.inputs.current_premium is not None:
            return self.inputs.current_premium
        return self.inputs.premium

    def _calc_extras(self) -> dict[str, Any]:
        pnl = self._calc_unrealized_pnl()
        return {
            "intrinsic_value": self.intrinsic_value(),
            "time_value": self._calc_time_value(),
            "unrealized_pnl": round_to(pnl, 2),
            "percentage_gain": round_to(calc_return_pct(pnl, self._total_cost()), 2),
            "leverage_ratio": self._calc_leverage_ratio(),
            "moneyness": self._calc_moneyness(),
            "classification": self._calc_classification(),
            "probability_itm": self._calc_probability_itm(),
        }

    def _calc_time_value(self) -> float:
        if self.inputs.current_premium is None:
            return 0.0
        return round_to(max(0.0, self.inputs.current_premium - self.intrinsic_value()), 2)

    def _calc_leverage_ratio(self) -> float:
        cost = self._total_cost()
        if cost == 0:
            return 0.0
        return round_to(self.reference_price() * self.inputs.shares / cost, 2)

    def _calc_moneyness(self) -> float:
        return round_to((self.reference_price() - self.inputs.strike) / self.inputs.strike * 100, 2)

    def _calc_classification(self) -> str:
        moneyness = self._calc_moneyness()
        if moneyness > DEEP_MONEYNESS_PCT:
            return "Deep ITM"
        if moneyness > ATM_MONEYNESS_PCT:
            return "ITM"
        if abs(moneyness) <= ATM_MONEYNESS_PCT:
            return "ATM"
        if moneyness > -DEEP_MONEYNESS_PCT:
            return "OTM"
        return "Deep OTM"

    def _calc_probability_itm(self) -> float:
        """Rough probability of finishing in the money, percent.

        Starts at 50, moves 2 points per point of moneyness, and cuts an
        out-of-the-money call back by up to 20 points as expiry nears.
        """
        moneyness = self._calc_moneyness()
        probability = 50 + moneyness * 2
        if moneyness < 0:
            remaining = max(0, PROBABILITY_DECAY_DAYS - self._days) / PROBABILITY_DECAY_DAYS
            probability -= remaining * PROBABILITY_DECAY_PCT
        return clamp(round_to(probability, 1), 0.0, 100.0)

    def time_value(self) -> float:
        """Time value per share of the current premium (0 when unknown)."""
        return self._metrics.extras["time_value"]

    def unrealized_pnl(self) -> float:
        """Mark-to-market P&L in dollars.

        Uses current_premium when given, otherwise intrinsic value.
        """
        return self._metrics.extras["unrealized_pnl"]

    def percentage_gain(self) -> float:
        """Unrealized P&L as a percent of total cost."""
        return self._metrics.extras["percentage_gain"]

    def leverage_ratio(self) -> float:
        """Stock value controlled per dollar paid."""
        return self._metrics.extras["leverage_ratio"]

    def moneyness(self) -> float:
        """Percent the underlying trades above (+) or below (-) the strike."""
        return self._metrics.extras["moneyness"]

    def classification(self) -> str:
        """One of Deep ITM, ITM, ATM, OTM, Deep OTM."""
        return self._metrics.extras["classification"]

    def probability_itm(self) -> float:
        """Rough chance, in percent, of finishing in the money."""
        return self._metrics.extras["probability_itm"]

    def is_profitable(self) -> bool:
        """Underlying above breakeven."""
        return self.reference_price() > self.breakeven()

    def _check_return(self, thresholds: RiskThresholds) -> RiskFlag | None:
        # Return bands describe premium income, not long option upside
        return None

    def _check_price(self, thresholds: RiskThresholds) -> RiskFlag | None:
        if self.inputs.current_price is None:
            return None
        return check_long_call_price_risk(
            current_price=self.inputs.current_price,
            strike=self.inputs.strike,
            breakeven=self.breakeven(),
            days_to_expiration=self.days_to_expiration(),
            thresholds=thresholds,
        )

    def _summary_lines(self) -> list[str]:
        return [
            f"Current Price: {format_currency(self.reference_price())} "
            f"({self.classification()}, {format_percent(self.moneyness())} moneyness)",
            f"Unrealized P&L: {format_currency(self.unrealized_pnl())} "
            f"({format_percent(self.percentage_gain())})",
            f"Probability ITM: {format_percent(self.probability_itm(), 1)}",
        ]
