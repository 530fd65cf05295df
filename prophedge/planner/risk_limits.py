"""
Risk limiter.

Converts drawdown amounts and per-trade risk into the number of full losses
each drawdown limit can absorb.

Formula:
    total_risk = prop_risk + broker_risk
    max_losses_daily_prop = floor(daily_dd_amount / prop_risk)
    max_losses_daily_total = floor(daily_dd_amount / total_risk)
    max_consecutive_losses = floor(max_dd_amount / total_risk)
    stop_losses_daily = max(1, min(max_losses_daily_prop, max_losses_daily_total))
"""

import logging
import math

from prophedge.config.parameters import PlannerConfiguration
from prophedge.models.exceptions import ConfigurationError
from prophedge.models.plan import DerivedMetrics, RiskLimits


logger = logging.getLogger(__name__)


def compute_risk_limits(
    config: PlannerConfiguration, derived: DerivedMetrics
) -> RiskLimits:
    """
    Compute loss counts tolerated by the daily and overall drawdown.

    Args:
        config: Planner configuration.
        derived: Currency amounts derived from the configuration.

    Returns:
        RiskLimits with floor-divided loss counts.

    Raises:
        ConfigurationError: If prop risk per trade is not positive.

    Examples:
        >>> from prophedge.config.parameters import PlannerConfiguration
        >>> from prophedge.planner.derived import compute_derived_metrics
        >>> cfg = PlannerConfiguration()
        >>> compute_risk_limits(cfg, compute_derived_metrics(cfg)).max_losses_daily_total
        5
    """
    if config.prop_risk <= 0:
        raise ConfigurationError(
            "Prop risk per trade must be positive", field="prop_risk", value=config.prop_risk
        )

    total_risk = config.prop_risk + config.broker_risk
    max_losses_daily_prop = math.floor(derived.daily_dd_amount / config.prop_risk)
    max_losses_daily_total = math.floor(derived.daily_dd_amount / total_risk)
    max_consecutive_losses = math.floor(derived.max_dd_amount / total_risk)
    stop_losses_daily = max(1, min(max_losses_daily_prop, max_losses_daily_total))

    logger.debug(
        "Risk limits: daily_prop=%d, daily_total=%d, consecutive=%d, stop=%d",
        max_losses_daily_prop,
        max_losses_daily_total,
        max_consecutive_losses,
        stop_losses_daily,
    )

    return RiskLimits(
        max_losses_daily_prop=max_losses_daily_prop,
        max_losses_daily_total=max_losses_daily_total,
        max_consecutive_losses=max_consecutive_losses,
        stop_losses_daily=stop_losses_daily,
    )
