"""Threshold risk checks.

Every check takes a metric and the active RiskThresholds and returns None or
a single RiskFlag. Bands are tested from the tightest to the loosest, so the
most severe band crossed decides the severity.
"""

from __future__ import annotations

from src.engine.models.enums import OptionType, RiskCategory, RiskSeverity
from src.engine.models.risk import RiskFlag, RiskThresholds
from src.engine.utils.formatting import format_percent
from src.engine.utils.numeric import round_to


def check_return_risk(
    annualized_return_pct: float,
    thresholds: RiskThresholds,
) -> RiskFlag | None:
    """Flag an annualized return below the minimum acceptable return."""
    value = round_to(annualized_return_pct, 2)
    target = format_percent(thresholds.min_return_pct)

    if value <= thresholds.critical_return_pct:
        severity, threshold = RiskSeverity.CRITICAL, thresholds.critical_return_pct
        message = f"No return on capital: {format_percent(value)} annualized (target: {target})"
    elif value < thresholds.weak_return_pct:
        severity, threshold = RiskSeverity.HIGH, thresholds.weak_return_pct
        message = f"Very low annualized return: {format_percent(value)} (target: {target})"
    elif value < thresholds.min_return_pct:
        severity, threshold = RiskSeverity.MEDIUM, thresholds.min_return_pct
        message = f"Low annualized return: {format_percent(value)} (target: {target})"
    else:
        return None

    return RiskFlag(
        category=RiskCategory.RETURN,
        severity=severity,
        message=message,
        value=value,
        threshold=threshold,
    )


def check_time_risk(
    days_to_expiration: int,
    thresholds: RiskThresholds,
    long_option: bool = False,
) -> RiskFlag | None:
    """Flag a position close to or past expiration.

    Args:
        days_to_expiration: Calendar days left; negative once expired.
        thresholds: Active thresholds.
        long_option: Use the time-decay bands for options held long.
    """
    days = days_to_expiration

    if days < 0:
        expired_for = -days
        return RiskFlag(
            category=RiskCategory.TIME,
            severity=RiskSeverity.CRITICAL,
            message=f"Position expired {expired_for} day(s) ago",
            value=days,
            threshold=0,
        )

    if long_option:
        bands = (
            (thresholds.decay_critical_dte, RiskSeverity.CRITICAL),
            (thresholds.decay_high_dte, RiskSeverity.HIGH),
            (thresholds.decay_warning_dte, RiskSeverity.MEDIUM),
        )
        label = "Time decay risk"
    else:
        bands = (
            (thresholds.critical_dte, RiskSeverity.CRITICAL),
            (thresholds.warning_dte, RiskSeverity.HIGH),
            (thresholds.caution_dte, RiskSeverity.MEDIUM),
            (thresholds.max_safe_dte, RiskSeverity.LOW),
        )
        label = "Expiration approaching"

    for limit, severity in bands:
        if days <= limit:
            return RiskFlag(
                category=RiskCategory.TIME,
                severity=severity,
                message=f"{label}: {days} day(s) to expiration",
                value=days,
                threshold=limit,
            )
    return None


def check_price_risk(
    current_price: float,
    breakeven: float,
    thresholds: RiskThresholds,
) -> RiskFlag | None:
    """Flag an underlying price that is close to the breakeven price.

    Distance is measured either side of breakeven, as an absolute percentage.
    """
    if breakeven <= 0:
        return None

    distance_pct = round_to(abs(current_price - breakeven) / breakeven * 100, 2)

    bands = (
        (thresholds.price_danger_pct, RiskSeverity.HIGH),
        (thresholds.price_proximity_pct, RiskSeverity.MEDIUM),
        (thresholds.price_watch_pct, RiskSeverity.LOW),
    )
    for limit, severity in bands:
        if distance_pct <= limit:
            return RiskFlag(
                category=RiskCategory.PRICE,
                severity=severity,
                message=f"Near breakeven: {format_percent(distance_pct)} from break-even price",
                value=distance_pct,
                threshold=limit,
            )
    return None


def check_long_call_price_risk(
    current_price: float,
    strike: float,
    breakeven: float,
    days_to_expiration: int,
    thresholds: RiskThresholds,
) -> RiskFlag | None:
    """Flag a long call trading far below breakeven or out of the money late.

    Both conditions are price risks, so the more severe one is reported.
    """
    candidates: list[RiskFlag] = []

    distance_pct = round_to((current_price - breakeven) / breakeven * 100, 2)
    if distance_pct < -thresholds.deep_below_breakeven_pct:
        candidates.append(
            RiskFlag(
                category=RiskCategory.PRICE,
                severity=RiskSeverity.HIGH,
                message=f"Stock below breakeven: {abs(distance_pct):.1f}% away",
                value=distance_pct,
                threshold=-thresholds.deep_below_breakeven_pct,
            )
        )
    elif distance_pct < -thresholds.below_breakeven_pct:
        candidates.append(
            RiskFlag(
                category=RiskCategory.PRICE,
                severity=RiskSeverity.MEDIUM,
                message=f"Stock below breakeven: {abs(distance_pct):.1f}% away",
                value=distance_pct,
                threshold=-thresholds.below_breakeven_pct,
            )
        )

    if current_price <= strike and 0 <= days_to_expiration <= thresholds.decay_high_dte:
        candidates.append(
            RiskFlag(
                category=RiskCategory.PRICE,
                severity=RiskSeverity.HIGH,
                message="Out-of-the-money with limited time remaining",
                value=round_to(current_price, 2),
                threshold=strike,
            )
        )

    return most_severe(candidates)


def check_assignment_risk(
    current_price: float,
    strike: float,
    premium: float,
    days_to_expiration: int,
    option_type: OptionType,
    thresholds: RiskThresholds,
) -> RiskFlag | None:
    """Flag early assignment risk on a short option.

    - In the money near expiry with intrinsic value covering most of the
      premium: assignment likely, medium.
    - In the money, or within price_proximity_pct of the strike near
      expiry: low.
    """
    if option_type == OptionType.CALL:
        intrinsic = max(0.0, current_price - strike)
        in_the_money = current_price > strike
    else:
        intrinsic = max(0.0, strike - current_price)
        in_the_money = current_price < strike

    near_expiry = days_to_expiration <= thresholds.assignment_dte
    strike_distance_pct = round_to(abs(current_price - strike) / strike * 100, 2)

    if is_assignment_likely(in_the_money, intrinsic, premium, days_to_expiration, thresholds):
        return RiskFlag(
            category=RiskCategory.ASSIGNMENT,
            severity=RiskSeverity.MEDIUM,
            message="High probability of assignment - prepare for "
            + ("shares to be called away" if option_type == OptionType.CALL else "stock purchase"),
            value=round_to(intrinsic, 2),
            threshold=round_to(premium * thresholds.assignment_intrinsic_ratio, 2),
        )
    if in_the_money:
        return RiskFlag(
            category=RiskCategory.ASSIGNMENT,
            severity=RiskSeverity.LOW,
            message=f"In-the-money by {format_percent(strike_distance_pct)}; early assignment possible",
            value=strike_distance_pct,
            threshold=0.0,
        )
    if near_expiry and strike_distance_pct <= thresholds.price_proximity_pct:
        return RiskFlag(
            category=RiskCategory.ASSIGNMENT,
            severity=RiskSeverity.LOW,
            message=f"Price within {format_percent(strike_distance_pct)} of strike near expiration",
            value=strike_distance_pct,
            threshold=thresholds.price_proximity_pct,
        )
    return None


def is_assignment_likely(
    in_the_money: bool,
    intrinsic: float,
    premium: float,
    days_to_expiration: int,
    thresholds: RiskThresholds,
) -> bool:
    """Deep in the money with little time value left near expiry."""
    return (
        in_the_money
        and days_to_expiration <= thresholds.assignment_dte
        and intrinsic >= premium * thresholds.assignment_intrinsic_ratio
    )


def check_size_risk(
    capital_at_risk: float,
    account_value: float | None,
    thresholds: RiskThresholds,
) -> RiskFlag | None:
    """Flag a position whose capital at risk is large relative to the account."""
    if not account_value or account_value <= 0:
        return None

    size_pct = round_to(capital_at_risk / account_value * 100, 2)

    if size_pct > thresholds.critical_position_size_pct:
        severity, threshold = RiskSeverity.HIGH, thresholds.critical_position_size_pct
    elif size_pct > thresholds.max_position_size_pct:
        severity, threshold = RiskSeverity.MEDIUM, thresholds.max_position_size_pct
    else:
        return None

    return RiskFlag(
        category=RiskCategory.SIZE,
        severity=severity,
        message=f"Position size {format_percent(size_pct)} of account "
        f"(limit: {format_percent(thresholds.max_position_size_pct)})",
        value=size_pct,
        threshold=threshold,
    )


def most_severe(flags: list[RiskFlag]) -> RiskFlag | None:
    """Most severe flag; the earliest wins a tie."""
    result: RiskFlag | None = None
    for flag in flags:
        if result is None or flag.severity.rank > result.severity.rank:
            result = flag
    return result
