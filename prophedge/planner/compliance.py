"""
Compliance scheduler.

Builds the four-day minimum-activity template that satisfies the minimum
trading days rule. One daily target is computed and repeated on every row;
row 0's target is the canonical daily pace used by the phase planner and the
Monte Carlo simulator.
"""

import logging

from prophedge.config.parameters import PlannerConfiguration
from prophedge.models.exceptions import ConfigurationError
from prophedge.models.plan import ComplianceRow, DerivedMetrics


logger = logging.getLogger(__name__)

SCHEDULE_DAYS = 4
STOP_RULE = "Stop trading after target hit or after 2 losses."


def compute_daily_target(config: PlannerConfiguration, derived: DerivedMetrics) -> float:
    """
    Return the shared daily profit target.

    The target is the larger of the minimum daily profit and the average pace
    needed to reach the phase 1 target in the minimum number of days.

    Raises:
        ConfigurationError: If minimum trading days is not positive.
    """
    if config.min_trading_days <= 0:
        raise ConfigurationError(
            "Minimum trading days must be positive to derive a daily pace",
            field="min_trading_days",
            value=config.min_trading_days,
        )
    return max(
        derived.min_daily_profit_amount,
        derived.phase1_target_amount / config.min_trading_days,
    )


def compute_compliance_plan(
    config: PlannerConfiguration, derived: DerivedMetrics
) -> list[ComplianceRow]:
    """
    Build the four-day minimum-activity schedule.

    One trade is recommended when a single prop win covers the daily target,
    otherwise two. Two is a policy cap, not a computed optimum.

    Args:
        config: Planner configuration.
        derived: Currency amounts derived from the configuration.

    Returns:
        Exactly four ComplianceRow entries, identical except for the day label.

    Raises:
        ConfigurationError: If minimum trading days is not positive.
    """
    daily_target = compute_daily_target(config, derived)
    profit_per_trade = config.prop_risk * config.rr_prop
    recommended_trades = 1 if daily_target <= profit_per_trade else 2

    logger.debug(
        "Compliance plan: daily_target=%.2f, profit_per_trade=%.2f, trades=%d",
        daily_target,
        profit_per_trade,
        recommended_trades,
    )

    return [
        ComplianceRow(
            day=f"Day {index + 1}",
            daily_target=daily_target,
            recommended_trades=recommended_trades,
            prop_tp=profit_per_trade,
            prop_sl=config.prop_risk,
            broker_tp=config.broker_risk * config.rr_broker,
            broker_sl=config.broker_risk,
            stop_rule=STOP_RULE,
        )
        for index in range(SCHEDULE_DAYS)
    ]
