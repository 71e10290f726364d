"""Batch risk analysis across positions."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable

from src.engine.models.enums import SEVERITY_ORDER, RiskCategory, RiskSeverity
from src.engine.models.portfolio import BatchRiskSummary
from src.engine.models.risk import DEFAULT_RISK_THRESHOLDS, RiskFlag, RiskThresholds
from src.engine.portfolio.protocols import RiskAnalyzable

logger = logging.getLogger(__name__)


def collect_risk_flags(
    positions: Iterable[RiskAnalyzable],
    thresholds: RiskThresholds = DEFAULT_RISK_THRESHOLDS,
) -> list[RiskFlag]:
    """Run analyze_risks on every position and flatten the flags in order."""
    flags: list[RiskFlag] = []
    for position in positions:
        flags.extend(position.analyze_risks(thresholds))
    return flags


def analyze_batch_risks(
    positions: Iterable[RiskAnalyzable],
    thresholds: RiskThresholds = DEFAULT_RISK_THRESHOLDS,
) -> BatchRiskSummary:
    """Summarize the risk flags of many positions.

    Args:
        positions: Objects exposing analyze_risks(thresholds).
        thresholds: Threshold bands passed to every position.

    Returns:
        BatchRiskSummary with counts per category and severity. Every
        category and severity key is present, zero when unused.
        highest_severity is None when no position raised a flag.

    Example:
        >>> summary = analyze_batch_risks([csp, covered_call])
        >>> summary.risks_by_category["time"]
        1
    """
    positions = list(positions)
    flags = collect_risk_flags(positions, thresholds)

    category_counts = Counter(flag.category for flag in flags)
    severity_counts = Counter(flag.severity for flag in flags)

    highest: RiskSeverity | None = None
    for severity in SEVERITY_ORDER:
        if severity_counts[severity] > 0:
            highest = severity
            break

    logger.debug(f"Analyzed {len(positions)} positions: {len(flags)} risk flags, highest={highest}")

    return BatchRiskSummary(
        total_positions=len(positions),
        total_risks=len(flags),
        risks_by_category={c.value: category_counts[c] for c in RiskCategory},
        risks_by_severity={s.value: severity_counts[s] for s in RiskSeverity},
        highest_severity=highest,
    )
