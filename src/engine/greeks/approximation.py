"""Closed-form Greeks approximations.

These are coarse estimators driven by moneyness, days to expiration and a
fixed volatility assumption. They color risk displays in the journal; they
are not a pricing model and must not be used for hedging.

Time arguments are calendar days to expiration.
"""

import math

from src.engine.models.enums import OptionType
from src.engine.utils.numeric import clamp

DEFAULT_VOLATILITY = 0.20
THETA_ACCELERATION_DAYS = 30
THETA_ACCELERATION_FACTOR = 1.5


def approximate_delta(
    spot: float,
    strike: float,
    days_to_expiry: float,
    option_type: OptionType,
    volatility: float = DEFAULT_VOLATILITY,
) -> float:
    """Approximate option delta.

    delta_call = 0.5 + ln(S/K) / (2 * sigma * sqrt(t / 365)), clamped to
    [0.01, 0.99]; delta_put = delta_call - 1.

    At or after expiry the delta is the exercise indicator: 1/0 for calls,
    -1/0 for puts.

    Args:
        spot: Underlying price.
        strike: Strike price.
        days_to_expiry: Calendar days to expiration.
        option_type: Call or put.
        volatility: Assumed annual volatility.

    Returns:
        Delta per share.
    """
    if days_to_expiry <= 0:
        if option_type == OptionType.CALL:
            return 1.0 if spot >= strike else 0.0
        return -1.0 if spot <= strike else 0.0

    moneyness = math.log(spot / strike)
    vol_component = volatility * math.sqrt(days_to_expiry / 365)
    delta = clamp(0.5 + moneyness / (2 * vol_component), 0.01, 0.99)

    return delta if option_type == OptionType.CALL else delta - 1


def approximate_gamma(
    spot: float,
    strike: float,
    days_to_expiry: float,
    volatility: float = DEFAULT_VOLATILITY,
) -> float:
    """Approximate option gamma.

    Peaks at the money and decays as exp(-2 * |ln(S/K)|) away from the
    strike. Same value for calls and puts; 0 at or after expiry.
    """
    if days_to_expiry <= 0:
        return 0.0

    moneyness = abs(math.log(spot / strike))
    vol_component = volatility * math.sqrt(days_to_expiry / 365)
    atm_gamma = 1 / (vol_component * spot)

    return atm_gamma * math.exp(-moneyness * 2)


def approximate_theta(
    premium: float,
    days_to_expiry: float,
    acceleration_factor: float = THETA_ACCELERATION_FACTOR,
) -> float:
    """Approximate daily time decay of an option.

    Linear decay of the remaining premium, sped up by acceleration_factor
    in the final 30 days. Always <= 0; 0 at or after expiry.

    Args:
        premium: Option premium per share.
        days_to_expiry: Calendar days to expiration.
        acceleration_factor: Decay multiplier inside the final 30 days.

    Returns:
        Theta per share per day.
    """
    if days_to_expiry <= 0:
        return 0.0

    decay_rate = premium / days_to_expiry
    if days_to_expiry <= THETA_ACCELERATION_DAYS:
        decay_rate *= acceleration_factor

    return -abs(decay_rate)
