"""
Broker deposit planner.

Sizes the hedge-side deposit so the broker account survives the assumed
losing streak on both sides of a cycle, plus a fixed spread/slippage cushion.

Formula:
    base_buffer = broker_risk * max_losing_streak * 2
    tier = base_buffer * multiplier + DEPOSIT_CUSHION
"""

import logging

from prophedge.config.parameters import PlannerConfiguration
from prophedge.models.plan import DEPOSIT_CUSHION, DepositPlan


logger = logging.getLogger(__name__)

MINIMUM_MULTIPLIER = 1.3
RECOMMENDED_MULTIPLIER = 1.4
CONSERVATIVE_MULTIPLIER = 1.5


def compute_deposit_plan(config: PlannerConfiguration) -> DepositPlan:
    """
    Compute the minimum, recommended and conservative broker deposit.

    Examples:
        >>> from prophedge.config.parameters import PlannerConfiguration
        >>> compute_deposit_plan(PlannerConfiguration()).base_buffer
        360.0
    """
    base_buffer = config.broker_risk * config.max_losing_streak * 2
    plan = DepositPlan(
        base_buffer=base_buffer,
        minimum=base_buffer * MINIMUM_MULTIPLIER + DEPOSIT_CUSHION,
        recommended=base_buffer * RECOMMENDED_MULTIPLIER + DEPOSIT_CUSHION,
        conservative=base_buffer * CONSERVATIVE_MULTIPLIER + DEPOSIT_CUSHION,
    )
    logger.debug("Deposit plan: %s", plan)
    return plan
