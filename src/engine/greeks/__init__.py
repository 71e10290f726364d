"""Greeks approximations for display."""

from src.engine.greeks.approximation import (
    DEFAULT_VOLATILITY,
    approximate_delta,
    approximate_gamma,
    approximate_theta,
)

__all__ = [
    "DEFAULT_VOLATILITY",
    "approximate_delta",
    "approximate_gamma",
    "approximate_theta",
]
