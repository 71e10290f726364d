"""Option strategy module."""

# Base class
from src.engine.strategy.base import OptionStrategy

# Strategy implementations
from src.engine.strategy.cash_secured_put import CashSecuredPutStrategy
from src.engine.strategy.covered_call import CoveredCallStrategy
from src.engine.strategy.long_call import LongCallStrategy

# Factory
from src.engine.strategy.factory import (
    STRATEGY_CLASSES,
    create_cash_secured_put,
    create_covered_call,
    create_long_call,
    create_strategy,
    parse_strategy_type,
)

__all__ = [
    # Base class
    "OptionStrategy",
    # Strategies
    "CashSecuredPutStrategy",
    "CoveredCallStrategy",
    "LongCallStrategy",
    # Factory
    "STRATEGY_CLASSES",
    "create_cash_secured_put",
    "create_covered_call",
    "create_long_call",
    "create_strategy",
    "parse_strategy_type",
]
