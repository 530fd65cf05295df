"""Randomized simulation of the challenge."""

from prophedge.simulation.monte_carlo import (
    DEFAULT_RUNS,
    MAX_DAYS_PER_PHASE,
    run_monte_carlo,
)
from prophedge.simulation.random_source import (
    RandomSource,
    UniformSource,
    default_random_source,
    seeded_random_source,
)

__all__ = [
    "DEFAULT_RUNS",
    "MAX_DAYS_PER_PHASE",
    "run_monte_carlo",
    "RandomSource",
    "UniformSource",
    "default_random_source",
    "seeded_random_source",
]
