"""
Pytest configuration and global fixtures.

This module provides shared fixtures used across the test suite, including
the stock planner configuration, a configuration factory, and random
sources for deterministic Monte Carlo runs.
"""

import random
from collections.abc import Iterable

import numpy as np
import pytest

from prophedge.config.parameters import PlannerConfiguration
from prophedge.planner.derived import compute_derived_metrics
from prophedge.simulation.random_source import seeded_random_source


SEED = 42


def _apply_global_seed():
    """Apply global deterministic seed for tests."""
    random.seed(SEED)
    np.random.seed(SEED)


_apply_global_seed()


@pytest.fixture()
def stock_config():
    """
    Provide the default planner configuration.

    Examples:
        >>> def test_something(stock_config):
        ...     assert stock_config.account_size == 25000.0
    """
    return PlannerConfiguration()


@pytest.fixture()
def make_config():
    """
    Provide a configuration factory accepting field overrides.

    Examples:
        >>> def test_custom(make_config):
        ...     cfg = make_config(prop_risk=200.0)
        ...     assert cfg.prop_risk == 200.0
    """

    def _create(**overrides):
        return PlannerConfiguration(**overrides)

    return _create


@pytest.fixture()
def stock_derived(stock_config):
    """Derived metrics of the default configuration."""
    return compute_derived_metrics(stock_config)


@pytest.fixture()
def seeded_rng():
    """Provide a factory for seeded uniform sources."""

    def _create(seed: int = SEED):
        return seeded_random_source(seed)

    return _create


@pytest.fixture()
def scripted_rng():
    """
    Provide a factory for sources that replay a fixed sequence of samples.

    The sequence repeats once exhausted so a trial never runs dry.
    """

    def _create(samples: Iterable[float]):
        values = list(samples)
        state = {"index": 0}

        def _next() -> float:
            value = values[state["index"] % len(values)]
            state["index"] += 1
            return value

        return _next

    return _create
