"""
Derived currency amounts.

Converts the percentage fields of a configuration into account-currency
amounts. Every amount is ``account_size * percentage / 100``.
"""

import logging

from prophedge.config.parameters import PlannerConfiguration
from prophedge.models.plan import DerivedMetrics


logger = logging.getLogger(__name__)


def _percent_of(account_size: float, percentage: float) -> float:
    return (account_size * percentage) / 100


def compute_derived_metrics(config: PlannerConfiguration) -> DerivedMetrics:
    """
    Convert percentage-based configuration into currency amounts.

    Args:
        config: Planner configuration.

    Returns:
        DerivedMetrics with the five currency amounts.

    Examples:
        >>> from prophedge.config.parameters import PlannerConfiguration
        >>> compute_derived_metrics(PlannerConfiguration()).daily_dd_amount
        1000.0
    """
    derived = DerivedMetrics(
        daily_dd_amount=_percent_of(config.account_size, config.daily_drawdown),
        max_dd_amount=_percent_of(config.account_size, config.max_drawdown),
        phase1_target_amount=_percent_of(config.account_size, config.phase1_target),
        phase2_target_amount=_percent_of(config.account_size, config.phase2_target),
        min_daily_profit_amount=_percent_of(
            config.account_size, config.min_daily_profit
        ),
    )
    logger.debug("Derived metrics: %s", derived)
    return derived
