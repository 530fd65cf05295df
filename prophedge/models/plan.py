"""
Value types produced by the planning engine.

Every type here is a frozen dataclass recomputed from a PlannerConfiguration
on demand. Nothing is mutated after construction and nothing outlives a
single computation pass.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import OutcomeScenario


# Intraday circuit-breaker threshold, percent of account.
STOP_DRAWDOWN_PERCENT = 1.25

# Spread/slippage allowance added to every deposit tier, in account currency.
DEPOSIT_CUSHION = 100.0


@dataclass(frozen=True)
class DerivedMetrics:
    """Percentage-based configuration converted to currency amounts."""

    daily_dd_amount: float
    max_dd_amount: float
    phase1_target_amount: float
    phase2_target_amount: float
    min_daily_profit_amount: float


@dataclass(frozen=True)
class RiskLimits:
    """
    Loss counts tolerated by the drawdown limits.

    Attributes:
        max_losses_daily_prop: Full prop losses that fit in the daily drawdown.
        max_losses_daily_total: Combined prop + broker losses that fit in the
            daily drawdown.
        max_consecutive_losses: Combined losses that fit in the max drawdown.
        stop_losses_daily: Operative daily stop count (never below 1).
        stop_drawdown_percent: Intraday circuit-breaker threshold.
    """

    max_losses_daily_prop: int
    max_losses_daily_total: int
    max_consecutive_losses: int
    stop_losses_daily: int
    stop_drawdown_percent: float = STOP_DRAWDOWN_PERCENT


@dataclass(frozen=True)
class ComplianceRow:
    """One day of the minimum-activity schedule."""

    day: str
    daily_target: float
    recommended_trades: int
    prop_tp: float
    prop_sl: float
    broker_tp: float
    broker_sl: float
    stop_rule: str


@dataclass(frozen=True)
class PhasePlan:
    """Days and trades needed to reach a phase target at a fixed daily pace."""

    total_target: float
    daily_target: float
    estimated_days: int
    trades_if_one_per_day: int
    trades_if_two_per_day: int


@dataclass(frozen=True)
class DepositPlan:
    """Recommended broker-side deposit tiers."""

    base_buffer: float
    minimum: float
    recommended: float
    conservative: float


@dataclass(frozen=True)
class OutcomeLeaf:
    """A named pass/fail scenario with its closed-form results."""

    scenario: OutcomeScenario
    label: str
    status: str
    prop_result: float
    broker_result: float
    cash_result: float


@dataclass(frozen=True)
class HistogramBucket:
    bucket: str
    count: int


@dataclass(frozen=True)
class MonteCarloResult:
    """
    Aggregated Monte Carlo trial outcomes.

    The first three histogram buckets partition the runs; the fourth
    ("Payout") is a subset of the third ("Pass P2").
    """

    runs: int
    pass_phase1_probability: float
    pass_phase2_probability: float
    payout_probability: float
    histogram: tuple[HistogramBucket, ...]

    def bucket_count(self, bucket: str) -> int:
        """Return the count of a histogram bucket by label."""
        for item in self.histogram:
            if item.bucket == bucket:
                return item.count
        raise KeyError(bucket)


@dataclass(frozen=True)
class PlanReport:
    """Everything the planner derives from one configuration."""

    derived: DerivedMetrics
    risk_limits: RiskLimits
    compliance: tuple[ComplianceRow, ...]
    phase1_plan: PhasePlan
    phase2_plan: PhasePlan
    deposit: DepositPlan
    outcomes: tuple[OutcomeLeaf, ...]
    monte_carlo: MonteCarloResult
    warnings: tuple[str, ...]
