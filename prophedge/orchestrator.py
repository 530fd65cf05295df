"""
Plan orchestration.

Runs the complete planning chain for one configuration:

    configuration -> derived metrics -> risk limits, compliance schedule,
    outcome tree, Monte Carlo -> phase plans (from the schedule's daily
    target), warnings

The deposit plan depends on the configuration alone.
"""

import logging
from typing import Optional

from prophedge.config.parameters import PlannerConfiguration
from prophedge.models.plan import PlanReport
from prophedge.planner import (
    build_warnings,
    compute_compliance_plan,
    compute_deposit_plan,
    compute_derived_metrics,
    compute_outcome_tree,
    compute_phase_plan,
    compute_risk_limits,
)
from prophedge.simulation.monte_carlo import DEFAULT_RUNS, run_monte_carlo
from prophedge.simulation.random_source import RandomSource


logger = logging.getLogger(__name__)


def build_plan(
    config: PlannerConfiguration,
    runs: int = DEFAULT_RUNS,
    random_source: Optional[RandomSource] = None,
) -> PlanReport:
    """
    Compute every planner output for a configuration.

    Args:
        config: Planner configuration.
        runs: Monte Carlo trial count (default: 10,000).
        random_source: Uniform [0, 1) source for the simulation. If None, a
            non-deterministic source is used.

    Returns:
        PlanReport bundling all derived values.

    Raises:
        ConfigurationError: If any computation in the chain rejects the
            configuration. No partial report is returned.
    """
    derived = compute_derived_metrics(config)
    risk_limits = compute_risk_limits(config, derived)
    compliance = compute_compliance_plan(config, derived)

    # Row 0 carries the canonical daily pace.
    daily_target = compliance[0].daily_target
    phase1_plan = compute_phase_plan(derived.phase1_target_amount, daily_target)
    phase2_plan = compute_phase_plan(derived.phase2_target_amount, daily_target)

    report = PlanReport(
        derived=derived,
        risk_limits=risk_limits,
        compliance=tuple(compliance),
        phase1_plan=phase1_plan,
        phase2_plan=phase2_plan,
        deposit=compute_deposit_plan(config),
        outcomes=tuple(compute_outcome_tree(config, derived)),
        monte_carlo=run_monte_carlo(config, derived, runs=runs, rng=random_source),
        warnings=tuple(build_warnings(config, derived, risk_limits)),
    )
    logger.info(
        "Plan built for %s account of %.0f (%d warnings)",
        config.instrument,
        config.account_size,
        len(report.warnings),
    )
    return report


def summarize_plan(report: PlanReport) -> str:
    """
    Return the short plain-text summary of a plan.

    Examples:
        >>> from prophedge.config.parameters import PlannerConfiguration
        >>> from prophedge.simulation.random_source import seeded_random_source
        >>> report = build_plan(PlannerConfiguration(), runs=10,
        ...                     random_source=seeded_random_source(1))
        >>> print(summarize_plan(report).splitlines()[1])
        Daily DD: $1,000
    """
    derived = report.derived
    lines = [
        "Prop Hedge Planner",
        f"Daily DD: {_currency(derived.daily_dd_amount)}",
        f"Max DD: {_currency(derived.max_dd_amount)}",
        f"Phase 1 Target: {_currency(derived.phase1_target_amount)}",
        f"Phase 2 Target: {_currency(derived.phase2_target_amount)}",
        f"Daily Target: {_currency(report.compliance[0].daily_target)}",
        f"Max losses/day: {report.risk_limits.max_losses_daily_total}",
    ]
    return "\n".join(lines)


def _currency(value: float) -> str:
    rounded = round(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.0f}"
