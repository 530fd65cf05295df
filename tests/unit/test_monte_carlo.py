"""
Unit tests for the Monte Carlo simulator.

Scripted random sources drive trials down known paths so each rule of the
simulation can be checked exactly:
- daily target gating of phase progress
- minimum trading days on both phases
- the 60-day phase cap and the two-trades-per-day cap
- broker running total carried across phases
- histogram partitioning and input validation
"""

import pytest

from prophedge.models.exceptions import ConfigurationError
from prophedge.planner.derived import compute_derived_metrics
from prophedge.simulation.monte_carlo import (
    BUCKET_FAIL_P1,
    BUCKET_PASS_P1,
    BUCKET_PASS_P2,
    BUCKET_PAYOUT,
    MAX_DAYS_PER_PHASE,
    run_monte_carlo,
)


pytestmark = pytest.mark.unit

WIN = 0.0
LOSS = 0.99


class CountingSource:
    """Wrap a source and count the samples drawn from it."""

    def __init__(self, source):
        self._source = source
        self.draws = 0

    def __call__(self) -> float:
        self.draws += 1
        return self._source()


def _simulate(config, rng, runs=1):
    return run_monte_carlo(config, compute_derived_metrics(config), runs=runs, rng=rng)


def _counts(result):
    return [bucket.count for bucket in result.histogram]


class TestScriptedTrials:
    """Test simulation rules on fully scripted trials."""

    def test_all_wins_fail_phase2_on_min_days(self, stock_config, scripted_rng):
        """Phase 2 hits 1500 in 3 days, short of the 4-day minimum."""
        result = _simulate(stock_config, scripted_rng([WIN]), runs=5)
        assert result.pass_phase1_probability == 1.0
        assert result.pass_phase2_probability == 0.0
        assert _counts(result) == [0, 5, 0, 0]

    def test_all_wins_with_equal_targets_pay_out(self, make_config, scripted_rng):
        config = make_config(phase2_target=8.0)
        result = _simulate(config, scripted_rng([WIN]), runs=3)
        assert result.pass_phase2_probability == 1.0
        assert result.payout_probability == 1.0
        assert _counts(result) == [0, 0, 3, 3]

    def test_all_losses_exhaust_day_cap(self, stock_config, scripted_rng):
        source = CountingSource(scripted_rng([LOSS]))
        result = _simulate(stock_config, source)
        assert _counts(result) == [1, 0, 0, 0]
        # 60 days x 2 trades x 2 legs, then the trial stops
        assert source.draws == MAX_DAYS_PER_PHASE * 2 * 2

    def test_zero_win_rate_terminates(self, make_config, seeded_rng):
        config = make_config(prop_win_rate=0.0, broker_win_rate=0.0)
        result = _simulate(config, seeded_rng(), runs=20)
        assert result.pass_phase1_probability == 0.0
        assert result.bucket_count(BUCKET_FAIL_P1) == 20

    def test_short_days_add_no_progress(self, stock_config, scripted_rng):
        """Win then loss nets 150, below the 500 daily target, every day."""
        result = _simulate(stock_config, scripted_rng([WIN, WIN, LOSS, WIN]))
        assert result.pass_phase1_probability == 0.0

    def test_early_target_does_not_skip_min_days(self, make_config, scripted_rng):
        """One day of 3000 clears the 2000 target but not the 4-day minimum."""
        config = make_config(rr_prop=10.0)
        result = _simulate(config, scripted_rng([WIN]))
        assert result.bucket_count(BUCKET_FAIL_P1) == 1

    def test_broker_losses_block_payout(self, make_config, scripted_rng):
        config = make_config(phase2_target=8.0)
        result = _simulate(config, scripted_rng([WIN, LOSS]), runs=2)
        assert result.pass_phase2_probability == 1.0
        assert result.payout_probability == 0.0
        assert _counts(result) == [0, 0, 2, 0]

    def test_broker_total_carries_across_phases(self, make_config, scripted_rng):
        """Phase 1 broker +312 outweighs phase 2 broker -240."""
        config = make_config(phase2_target=8.0)
        phase1 = [WIN, WIN] * 8
        phase2 = [WIN, LOSS] * 8
        result = _simulate(config, scripted_rng(phase1 + phase2))
        assert result.payout_probability == 1.0

    def test_trades_per_day_capped_at_two(self, make_config, scripted_rng):
        counted = []
        for max_trades in (2, 5):
            source = CountingSource(scripted_rng([WIN]))
            _simulate(make_config(max_trades_per_day=max_trades), source)
            counted.append(source.draws)
        # phase 1: 4 days, phase 2: 3 days, 2 trades x 2 legs each
        assert counted == [28, 28]

    def test_one_trade_per_day_never_meets_target(self, make_config, scripted_rng):
        source = CountingSource(scripted_rng([WIN]))
        result = _simulate(make_config(max_trades_per_day=1), source)
        assert result.bucket_count(BUCKET_FAIL_P1) == 1
        assert source.draws == MAX_DAYS_PER_PHASE * 1 * 2


class TestSeededRuns:
    """Test aggregate properties with a seeded source."""

    def test_histogram_partitions_runs(self, stock_config, seeded_rng):
        result = _simulate(stock_config, seeded_rng(7), runs=2000)
        partition = (
            result.bucket_count(BUCKET_FAIL_P1)
            + result.bucket_count(BUCKET_PASS_P1)
            + result.bucket_count(BUCKET_PASS_P2)
        )
        assert partition == 2000
        assert result.bucket_count(BUCKET_PAYOUT) <= result.bucket_count(BUCKET_PASS_P2)
        assert [b.bucket for b in result.histogram] == ["Fail P1", "Pass P1", "Pass P2", "Payout"]

    def test_probabilities_match_counts(self, stock_config, seeded_rng):
        result = _simulate(stock_config, seeded_rng(3), runs=1000)
        passed_p1 = result.bucket_count(BUCKET_PASS_P1) + result.bucket_count(BUCKET_PASS_P2)
        assert result.pass_phase1_probability == passed_p1 / 1000
        assert result.pass_phase2_probability == result.bucket_count(BUCKET_PASS_P2) / 1000
        assert result.payout_probability == result.bucket_count(BUCKET_PAYOUT) / 1000
        assert (
            1.0
            >= result.pass_phase1_probability
            >= result.pass_phase2_probability
            >= result.payout_probability
            >= 0.0
        )

    def test_same_seed_reproduces(self, stock_config, seeded_rng):
        first = _simulate(stock_config, seeded_rng(11), runs=500)
        second = _simulate(stock_config, seeded_rng(11), runs=500)
        assert first == second

    def test_positive_pass_rate_above_even_odds(self, stock_config, seeded_rng):
        result = _simulate(stock_config, seeded_rng(), runs=2000)
        assert result.pass_phase1_probability > 0

    def test_default_source_used_when_omitted(self, stock_config, stock_derived):
        result = run_monte_carlo(stock_config, stock_derived, runs=50)
        assert result.runs == 50
        assert sum(_counts(result)[:3]) == 50


class TestValidation:
    """Test configuration errors."""

    @pytest.mark.parametrize("runs", [0, -10])
    def test_non_positive_runs_raise(self, stock_config, stock_derived, runs):
        with pytest.raises(ConfigurationError, match="run count"):
            run_monte_carlo(stock_config, stock_derived, runs=runs)

    def test_zero_min_trading_days_raises(self, make_config, seeded_rng):
        with pytest.raises(ConfigurationError, match="Minimum trading days"):
            _simulate(make_config(min_trading_days=0), seeded_rng())


@pytest.mark.slow
def test_seeded_runs_converge(stock_config, stock_derived, seeded_rng):
    """Two large independent seeded runs agree within 0.02 absolute."""
    first = run_monte_carlo(stock_config, stock_derived, runs=100_000, rng=seeded_rng(1))
    second = run_monte_carlo(stock_config, stock_derived, runs=100_000, rng=seeded_rng(2))
    assert first.pass_phase1_probability > 0
    assert abs(first.pass_phase1_probability - second.pass_phase1_probability) < 0.02
    assert abs(first.pass_phase2_probability - second.pass_phase2_probability) < 0.02
    assert abs(first.payout_probability - second.payout_probability) < 0.02
