"""Deterministic planning computations."""

from prophedge.planner.compliance import compute_compliance_plan, compute_daily_target
from prophedge.planner.deposit import compute_deposit_plan
from prophedge.planner.derived import compute_derived_metrics
from prophedge.planner.outcomes import compute_outcome_tree
from prophedge.planner.phase import compute_phase_plan
from prophedge.planner.risk_limits import compute_risk_limits
from prophedge.planner.warning_rules import build_warnings

__all__ = [
    "compute_compliance_plan",
    "compute_daily_target",
    "compute_deposit_plan",
    "compute_derived_metrics",
    "compute_outcome_tree",
    "compute_phase_plan",
    "compute_risk_limits",
    "build_warnings",
]
