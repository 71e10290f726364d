"""Rounding and numeric range helpers.

Rounding rule
-------------
``round_to`` rounds half away from zero on the shortest decimal
representation of the float (``repr``). ``round_to(1.005, 2)`` is therefore
``1.01`` and ``round_to(-2.5, 0)`` is ``-3.0``. The result does not depend on
the platform's binary float rounding, and applying it twice gives the same
value as applying it once.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

import numpy as np


def round_to(value: float, decimals: int = 2) -> float:
    """Round a currency or percentage value.

    Args:
        value: Value to round.
        decimals: Number of decimal places.

    Returns:
        Rounded value. NaN and infinities are returned unchanged.

    Example:
        >>> round_to(48.505)
        48.51
        >>> round_to(12.34567, 1)
        12.3
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals)
    rounded = float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))
    # Normalize -0.0
    return rounded + 0.0


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return min(max(value, low), high)


def generate_price_range(
    min_price: float,
    max_price: float,
    steps: int = 21,
) -> list[float]:
    """Evenly spaced sample prices for payoff charts.

    Args:
        min_price: First price in the range.
        max_price: Last price in the range.
        steps: Number of prices (>= 1). A single step returns [min_price].

    Returns:
        Ascending prices rounded to cents, first and last included.

    Raises:
        ValueError: If steps < 1, or min_price > max_price.
    """
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")
    if min_price > max_price:
        raise ValueError(f"min_price {min_price} is above max_price {max_price}")
    if steps == 1:
        return [round_to(min_price, 2)]

    grid = np.linspace(min_price, max_price, num=steps)
    return [round_to(float(price), 2) for price in grid]


def price_range_around(
    center_price: float,
    range_pct: float = 50.0,
    steps: int = 21,
) -> list[float]:
    """Price range spanning center_price +/- range_pct percent.

    The lower bound is floored at zero since share prices cannot go negative.
    """
    min_price = max(0.0, center_price * (1 - range_pct / 100))
    max_price = center_price * (1 + range_pct / 100)
    return generate_price_range(min_price, max_price, steps)
