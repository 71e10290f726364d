"""Strategy factory for creating calculators from journal entries.

Each create_* function accepts either a typed inputs object or a raw mapping
(e.g. a decoded JSON journal row). create_strategy dispatches on the
mapping's "strategy" key.
"""

import logging
from datetime import date, datetime
from typing import Any, Mapping

from src.engine.errors import ValidationError
from src.engine.models.enums import StrategyType
from src.engine.models.inputs import (
    CashSecuredPutInputs,
    CoveredCallInputs,
    LongCallInputs,
    PositionInputs,
)
from src.engine.strategy.base import OptionStrategy
from src.engine.strategy.cash_secured_put import CashSecuredPutStrategy
from src.engine.strategy.covered_call import CoveredCallStrategy
from src.engine.strategy.long_call import LongCallStrategy

logger = logging.getLogger(__name__)

AsOf = date | datetime | str | None

STRATEGY_CLASSES: dict[StrategyType, type[OptionStrategy]] = {
    StrategyType.COVERED_CALL: CoveredCallStrategy,
    StrategyType.CASH_SECURED_PUT: CashSecuredPutStrategy,
    StrategyType.LONG_CALL: LongCallStrategy,
}


def _coerce_inputs(
    inputs: PositionInputs | Mapping[str, Any],
    input_type: type[PositionInputs],
) -> PositionInputs:
    if isinstance(inputs, input_type):
        return inputs
    if isinstance(inputs, Mapping):
        return input_type.from_dict(inputs)
    raise ValidationError(
        "inputs", f"expected {input_type.__name__} or mapping, got {type(inputs).__name__}"
    )


def create_covered_call(
    inputs: CoveredCallInputs | Mapping[str, Any],
    as_of: AsOf = None,
) -> CoveredCallStrategy:
    """Create a covered call calculator."""
    return CoveredCallStrategy(_coerce_inputs(inputs, CoveredCallInputs), as_of)


def create_cash_secured_put(
    inputs: CashSecuredPutInputs | Mapping[str, Any],
    as_of: AsOf = None,
) -> CashSecuredPutStrategy:
    """Create a cash-secured put calculator."""
    return CashSecuredPutStrategy(_coerce_inputs(inputs, CashSecuredPutInputs), as_of)


def create_long_call(
    inputs: LongCallInputs | Mapping[str, Any],
    as_of: AsOf = None,
) -> LongCallStrategy:
    """Create a long call calculator."""
    return LongCallStrategy(_coerce_inputs(inputs, LongCallInputs), as_of)


def parse_strategy_type(value: StrategyType | str) -> StrategyType:
    """Resolve a strategy name such as "covered_call" or "Covered Call".

    Raises:
        ValidationError: If the name is not a supported strategy.
    """
    if isinstance(value, StrategyType):
        return value
    if isinstance(value, str):
        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        for strategy_type in StrategyType:
            if key == strategy_type.value:
                return strategy_type
    supported = ", ".join(s.value for s in StrategyType)
    raise ValidationError("strategy", f"unsupported strategy {value!r} (expected one of: {supported})")


def create_strategy(
    entry: Mapping[str, Any],
    as_of: AsOf = None,
) -> OptionStrategy:
    """Create the calculator named by entry["strategy"].

    Args:
        entry: Raw position mapping with a "strategy" key plus the fields of
            the matching inputs class. Unknown keys are ignored.
        as_of: Evaluation date override.

    Returns:
        Strategy calculator instance.

    Raises:
        ValidationError: If the strategy is missing or unsupported, or the
            position fields are invalid.
    """
    if "strategy" not in entry:
        raise ValidationError("strategy", "is required")

    strategy_type = parse_strategy_type(entry["strategy"])
    strategy_class = STRATEGY_CLASSES[strategy_type]
    logger.debug(f"Creating {strategy_type.label} for {entry.get('symbol')}")

    return strategy_class(strategy_class.input_type.from_dict(entry), as_of)
