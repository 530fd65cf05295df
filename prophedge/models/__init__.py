"""Value types, enumerations and exceptions."""

from prophedge.models.enums import OutcomeScenario, OutputFormat
from prophedge.models.exceptions import ConfigurationError
from prophedge.models.plan import (
    DEPOSIT_CUSHION,
    STOP_DRAWDOWN_PERCENT,
    ComplianceRow,
    DepositPlan,
    DerivedMetrics,
    HistogramBucket,
    MonteCarloResult,
    OutcomeLeaf,
    PhasePlan,
    PlanReport,
    RiskLimits,
)

__all__ = [
    "OutcomeScenario",
    "OutputFormat",
    "ConfigurationError",
    "DEPOSIT_CUSHION",
    "STOP_DRAWDOWN_PERCENT",
    "ComplianceRow",
    "DepositPlan",
    "DerivedMetrics",
    "HistogramBucket",
    "MonteCarloResult",
    "OutcomeLeaf",
    "PhasePlan",
    "PlanReport",
    "RiskLimits",
]
