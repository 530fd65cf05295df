"""
Monte Carlo simulation of the two-phase challenge.

Each trial walks phase 1 and, if it passes, phase 2 day by day:

- A day runs ``min(max_trades_per_day, 2)`` trades. Every trade draws one
  sample for the prop leg and then one for the broker leg; a leg wins when its
  sample is below its win rate.
- A day's prop profit counts toward the phase only when it reaches the shared
  daily target (see ``compute_daily_target``); other days add nothing but
  still consume a day.
- A phase stops once its target is reached or after ``MAX_DAYS_PER_PHASE``
  days. It passes only if the target was reached and at least
  ``min_trading_days`` days were used.
- The broker running total spans the whole trial and is never reset between
  phases. A trial pays out when phase 2 passes and that total is >= 0.

Trials share no state, so results depend only on the configuration, the run
count and the random source.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from prophedge.config.parameters import PlannerConfiguration
from prophedge.models.exceptions import ConfigurationError
from prophedge.models.plan import DerivedMetrics, HistogramBucket, MonteCarloResult
from prophedge.planner.compliance import compute_daily_target
from prophedge.simulation.random_source import RandomSource, default_random_source


logger = logging.getLogger(__name__)

DEFAULT_RUNS = 10_000
MAX_DAYS_PER_PHASE = 60
MAX_SIMULATED_TRADES_PER_DAY = 2

BUCKET_FAIL_P1 = "Fail P1"
BUCKET_PASS_P1 = "Pass P1"
BUCKET_PASS_P2 = "Pass P2"
BUCKET_PAYOUT = "Payout"


@dataclass(frozen=True)
class _TradeModel:
    """Per-trade constants shared by every trial."""

    trades_per_day: int
    daily_target: float
    prop_win_rate: float
    prop_win: float
    prop_loss: float
    broker_win_rate: float
    broker_win: float
    broker_loss: float
    min_trading_days: int


@dataclass(frozen=True)
class _PhaseOutcome:
    passed: bool
    days: int
    broker_net: float


def _simulate_phase(
    model: _TradeModel,
    target: float,
    broker_net: float,
    rng: RandomSource,
) -> _PhaseOutcome:
    profit = 0.0
    days = 0
    while profit < target and days < MAX_DAYS_PER_PHASE:
        days += 1
        day_profit = 0.0
        for _ in range(model.trades_per_day):
            day_profit += model.prop_win if rng() < model.prop_win_rate else model.prop_loss
            broker_net += (
                model.broker_win if rng() < model.broker_win_rate else model.broker_loss
            )
        if day_profit >= model.daily_target:
            profit += day_profit

    passed = profit >= target and days >= model.min_trading_days
    return _PhaseOutcome(passed=passed, days=days, broker_net=broker_net)


def run_monte_carlo(
    config: PlannerConfiguration,
    derived: DerivedMetrics,
    runs: int = DEFAULT_RUNS,
    rng: Optional[RandomSource] = None,
) -> MonteCarloResult:
    """
    Estimate phase pass and payout probabilities by randomized simulation.

    Args:
        config: Planner configuration (win rates, risk, cadence).
        derived: Currency amounts derived from the configuration.
        runs: Number of independent trials (default: 10,000).
        rng: Uniform [0, 1) source. If None, a non-deterministic source is used.

    Returns:
        MonteCarloResult with trial-count-normalized probabilities and the
        outcome histogram.

    Raises:
        ConfigurationError: If ``runs`` is not positive or minimum trading
            days is not positive.

    Examples:
        >>> from prophedge.config.parameters import PlannerConfiguration
        >>> from prophedge.planner.derived import compute_derived_metrics
        >>> from prophedge.simulation.random_source import seeded_random_source
        >>> cfg = PlannerConfiguration()
        >>> result = run_monte_carlo(
        ...     cfg, compute_derived_metrics(cfg), runs=100, rng=seeded_random_source(1)
        ... )
        >>> sum(b.count for b in result.histogram[:3])
        100
    """
    if runs <= 0:
        raise ConfigurationError(
            "Monte Carlo run count must be positive", field="runs", value=runs
        )
    if rng is None:
        rng = default_random_source()

    model = _TradeModel(
        trades_per_day=min(config.max_trades_per_day, MAX_SIMULATED_TRADES_PER_DAY),
        daily_target=compute_daily_target(config, derived),
        prop_win_rate=config.prop_win_rate / 100,
        prop_win=config.prop_risk * config.rr_prop,
        prop_loss=-config.prop_risk,
        broker_win_rate=config.broker_win_rate / 100,
        broker_win=config.broker_risk * config.rr_broker,
        broker_loss=-config.broker_risk,
        min_trading_days=config.min_trading_days,
    )

    logger.info(
        "Starting Monte Carlo: runs=%d, trades_per_day=%d, daily_target=%.2f",
        runs,
        model.trades_per_day,
        model.daily_target,
    )

    fail_p1 = 0
    pass_p1_only = 0
    pass_p2 = 0
    payout = 0

    for _ in range(runs):
        phase1 = _simulate_phase(model, derived.phase1_target_amount, 0.0, rng)
        if not phase1.passed:
            fail_p1 += 1
            continue

        phase2 = _simulate_phase(
            model, derived.phase2_target_amount, phase1.broker_net, rng
        )
        if not phase2.passed:
            pass_p1_only += 1
            continue

        pass_p2 += 1
        if phase2.broker_net >= 0:
            payout += 1

    passed_phase1 = pass_p1_only + pass_p2
    result = MonteCarloResult(
        runs=runs,
        pass_phase1_probability=passed_phase1 / runs,
        pass_phase2_probability=pass_p2 / runs,
        payout_probability=payout / runs,
        histogram=(
            HistogramBucket(BUCKET_FAIL_P1, fail_p1),
            HistogramBucket(BUCKET_PASS_P1, pass_p1_only),
            HistogramBucket(BUCKET_PASS_P2, pass_p2),
            HistogramBucket(BUCKET_PAYOUT, payout),
        ),
    )

    logger.info(
        "Monte Carlo complete: p1=%.2f%%, p2=%.2f%%, payout=%.2f%%",
        result.pass_phase1_probability * 100,
        result.pass_phase2_probability * 100,
        result.payout_probability * 100,
    )
    return result
