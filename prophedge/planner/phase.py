"""
Phase planner.

Projects how many days and trades a phase takes at a fixed daily pace.
"""

import logging
import math

from prophedge.models.exceptions import ConfigurationError
from prophedge.models.plan import PhasePlan


logger = logging.getLogger(__name__)


def compute_phase_plan(total_target: float, daily_target: float) -> PhasePlan:
    """
    Estimate days and trade counts needed to reach ``total_target``.

    Args:
        total_target: Phase profit target in account currency.
        daily_target: Profit booked per trading day.

    Returns:
        PhasePlan with ``estimated_days = ceil(total_target / daily_target)``.

    Raises:
        ConfigurationError: If the daily target is not a positive finite
            number, or the total target is not finite.

    Examples:
        >>> compute_phase_plan(2000.0, 500.0).estimated_days
        4
        >>> compute_phase_plan(1500.0, 500.0).trades_if_two_per_day
        6
    """
    if not math.isfinite(daily_target) or daily_target <= 0:
        raise ConfigurationError(
            "Daily target must be a positive finite amount",
            field="daily_target",
            value=daily_target,
        )
    if not math.isfinite(total_target):
        raise ConfigurationError(
            "Phase target must be finite", field="total_target", value=total_target
        )

    estimated_days = math.ceil(total_target / daily_target)
    logger.debug(
        "Phase plan: target=%.2f, daily=%.2f, days=%d",
        total_target,
        daily_target,
        estimated_days,
    )
    return PhasePlan(
        total_target=total_target,
        daily_target=daily_target,
        estimated_days=estimated_days,
        trades_if_one_per_day=estimated_days,
        trades_if_two_per_day=estimated_days * 2,
    )
