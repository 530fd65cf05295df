"""
Advisory warning rules.

Flags internally inconsistent plans. Rules never block a computation; they
only return messages, in rule evaluation order.
"""

import logging

from prophedge.config.parameters import PlannerConfiguration
from prophedge.models.plan import DerivedMetrics, RiskLimits


logger = logging.getLogger(__name__)

MIN_DAILY_PROFIT_WARNING = (
    "Minimum daily profit exceeds the required average for Phase 1; "
    "consider lowering it or increasing trading days."
)
ZERO_LOSSES_WARNING = (
    "Your daily drawdown only allows 0 losses at the current risk per trade."
)
HIGH_PROP_RISK_WARNING = "Prop risk per trade is high relative to daily drawdown."


def build_warnings(
    config: PlannerConfiguration,
    derived: DerivedMetrics,
    risk_limits: RiskLimits,
) -> list[str]:
    """
    Evaluate the warning rules against a computed plan.

    Args:
        config: Planner configuration.
        derived: Currency amounts derived from the configuration.
        risk_limits: Loss counts computed from the configuration.

    Returns:
        Warning messages, at most one per rule.
    """
    warnings: list[str] = []

    # No average pace exists without a minimum day count.
    if config.min_trading_days > 0:
        average_pace = derived.phase1_target_amount / config.min_trading_days
        if derived.min_daily_profit_amount > average_pace:
            warnings.append(MIN_DAILY_PROFIT_WARNING)

    if risk_limits.max_losses_daily_total < 1:
        warnings.append(ZERO_LOSSES_WARNING)

    if config.prop_risk > derived.daily_dd_amount * 0.5:
        warnings.append(HIGH_PROP_RISK_WARNING)

    for message in warnings:
        logger.warning("Plan warning: %s", message)
    return warnings
