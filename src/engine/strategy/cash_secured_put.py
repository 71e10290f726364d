"""Cash-Secured Put strategy implementation.

Sell a put option to collect premium, holding enough cash to buy the stock
if exercised.
"""

import logging
from typing import Any

from src.engine.models.enums import OptionType, StrategyType
from src.engine.models.inputs import CashSecuredPutInputs
from src.engine.returns import annualize_return
from src.engine.strategy.base import OptionStrategy
from src.engine.utils.formatting import format_currency
from src.engine.utils.numeric import round_to

logger = logging.getLogger(__name__)

# Collateral below this share of strike * shares is not fully secured
MIN_SECURED_RATIO = 0.9


class CashSecuredPutStrategy(OptionStrategy):
    """Cash-Secured Put (Sell Put) strategy.

    Profit/Loss Profile:
    - Max Profit: Premium received, less fees (if stock stays above strike)
    - Max Loss: Strike - Premium, plus fees (if stock goes to 0)
    - Breakeven: Strike - Net Premium per share

    Use case:
    - Bullish to neutral outlook
    - Willing to buy stock at strike price
    - Want to generate income from premium
    """

    strategy_type = StrategyType.CASH_SECURED_PUT
    option_type = OptionType.PUT
    input_type = CashSecuredPutInputs
    payoff_range_pct = 40.0

    inputs: CashSecuredPutInputs

    def __init__(self, inputs: CashSecuredPutInputs, as_of=None):
        super().__init__(inputs, as_of)

        required = self.inputs.strike * self.inputs.shares
        if self.cash_secured() < required * MIN_SECURED_RATIO:
            logger.warning(
                f"{self.inputs.symbol}: cash secured {format_currency(self.cash_secured())} "
                f"is below {MIN_SECURED_RATIO:.0%} of assignment cost {format_currency(required)}"
            )

    def cash_secured(self) -> float:
        """Collateral in dollars, defaulting to strike * shares."""
        if self.inputs.cash_secured is not None:
            return self.inputs.cash_secured
        return self.inputs.strike * self.inputs.shares

    def _net_premium(self) -> float:
        return self.inputs.premium * self.inputs.shares - self.inputs.fees

    def _calc_max_profit(self) -> float:
        return self._net_premium()

    def _calc_max_loss(self) -> float:
        return (self.inputs.strike - self.inputs.premium) * self.inputs.shares + self.inputs.fees

    def _calc_breakeven(self) -> float:
        return self.inputs.strike - self._net_premium() / self.inputs.shares

    def _calc_outlay(self) -> float:
        return self.cash_secured()

    def _calc_expiration_pnl(self, price: float) -> float:
        # Assigned below the strike: buy shares at strike worth price
        assignment_loss = max(0.0, self.inputs.strike - price) * self.inputs.shares
        return self._net_premium() - assignment_loss

    def _calc_extras(self) -> dict[str, Any]:
        return {
            "cash_secured": round_to(self.cash_secured(), 2),
            "effective_basis": round_to(self._calc_breakeven(), 2),
            "assignment_pnl": round_to(self._net_premium(), 2),
            "annualized_return_on_risk": round_to(
                annualize_return(self._net_premium(), self._calc_max_loss(), self._days), 2
            ),
        }

    def effective_basis(self) -> float:
        """Per-share cost of the stock if assigned: strike less net premium."""
        return self._metrics.extras["effective_basis"]

    def assignment_pnl(self) -> float:
        """P&L if assigned at expiration.

        Buying at the strike is neutral at assignment, so the realized P&L
        is the net premium kept; the shares then carry effective_basis().
        """
        return self._metrics.extras["assignment_pnl"]

    def _summary_lines(self) -> list[str]:
        status = "In-The-Money" if self.is_in_the_money() else "Out-Of-The-Money"
        return [
            f"Cash Secured: {format_currency(self.cash_secured())}",
            f"If Assigned: Effective basis {format_currency(self.effective_basis())}",
            f"Status: {status}",
        ]
