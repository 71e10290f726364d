"""Covered Call strategy implementation.

Own stock + Sell a call option to collect premium.
"""

from typing import Any

from src.engine.models.enums import OptionType, StrategyType
from src.engine.models.inputs import CoveredCallInputs
from src.engine.returns import annualize_return, calc_return_pct
from src.engine.strategy.base import OptionStrategy
from src.engine.utils.formatting import format_currency, format_percent
from src.engine.utils.numeric import round_to


class CoveredCallStrategy(OptionStrategy):
    """Covered Call strategy.

    Long 100 shares per contract at cost_basis + Short call option.

    Profit/Loss Profile:
    - Max Profit: max(0, Strike - Cost Basis) + Premium, less fees
    - Max Loss: Cost Basis - Premium, plus fees (if stock goes to 0)
    - Breakeven: Cost Basis - Net Premium per share

    Use case:
    - Neutral to moderately bullish outlook
    - Willing to sell stock at strike price
    - Want to generate income from premium while holding stock
    """

    strategy_type = StrategyType.COVERED_CALL
    option_type = OptionType.CALL
    input_type = CoveredCallInputs
    payoff_range_pct = 30.0

    inputs: CoveredCallInputs

    def reference_price(self) -> float:
        """Current price when known, otherwise the cost basis."""
        if self.inputs.current_price is not None:
            return self.inputs.current_price
        return self.inputs.cost_basis

    def _net_premium(self) -> float:
        return self.inputs.premium * self.inputs.shares - self.inputs.fees

    def _calc_max_profit(self) -> float:
        """Upside to the strike plus premium.

        A strike below cost basis contributes no upside here; the loss on
        the shares is visible in assignment_pnl() and expiration_pnl().
        """
        upside = max(0.0, self.inputs.strike - self.inputs.cost_basis) * self.inputs.shares
        return upside + self._net_premium()

    def _calc_max_loss(self) -> float:
        return self.inputs.cost_basis * self.inputs.shares - self._net_premium()

    def _calc_breakeven(self) -> float:
        return self.inputs.cost_basis - self._net_premium() / self.inputs.shares

    def _calc_outlay(self) -> float:
        return self.inputs.cost_basis * self.inputs.shares

    def _calc_expiration_pnl(self, price: float) -> float:
        # Shares are called away above the strike
        exit_price = min(price, self.inputs.strike)
        return (exit_price - self.inputs.cost_basis) * self.inputs.shares + self._net_premium()

    def _calc_extras(self) -> dict[str, Any]:
        max_profit = self._calc_max_profit()
        max_loss = self._calc_max_loss()
        return {
            "assignment_pnl": round_to(self._calc_assignment_pnl(), 2),
            "annualized_return_on_risk": round_to(
                annualize_return(max_profit, max_loss, self._days), 2
            ),
            "downside_protection_pct": round_to(
                calc_return_pct(self._net_premium() / self.inputs.shares, self.inputs.cost_basis), 2
            ),
        }

    def _calc_assignment_pnl(self) -> float:
        return (self.inputs.strike - self.inputs.cost_basis) * self.inputs.shares + self._net_premium()

    def assignment_pnl(self) -> float:
        """P&L if the shares are called away at the strike."""
        return self._metrics.extras["assignment_pnl"]

    def downside_protection_pct(self) -> float:
        """Net premium per share as a percent of cost basis."""
        return self._metrics.extras["downside_protection_pct"]

    def _summary_lines(self) -> list[str]:
        return [
            f"Cost Basis: {format_currency(self.inputs.cost_basis)}/share",
            f"If Called Away: {format_currency(self.assignment_pnl())}",
            f"Downside Protection: {format_percent(self.downside_protection_pct())}",
        ]
