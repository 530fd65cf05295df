"""
Uniform random sources for the Monte Carlo simulator.

The simulator only needs a zero-argument callable returning a float in
[0, 1). Any such callable works (``random.Random(7).random`` included); this
module provides a NumPy-backed implementation that draws in blocks so the
per-sample cost stays low inside the trial loop.
"""

import logging
from typing import Optional, Protocol

import numpy as np


logger = logging.getLogger(__name__)

DEFAULT_SEED = 42
DEFAULT_BLOCK_SIZE = 4096


class RandomSource(Protocol):
    """Zero-argument callable producing uniform samples in [0, 1)."""

    def __call__(self) -> float: ...


class UniformSource:
    """
    Block-buffered uniform [0, 1) sampler over a NumPy Generator.

    Samples are generated ``block_size`` at a time with
    ``Generator.random(size)`` and handed out one per call, so the sequence
    is identical to drawing them individually from the same generator.

    Example:
        >>> source = UniformSource(np.random.default_rng(7))
        >>> 0.0 <= source() < 1.0
        True
    """

    def __init__(
        self, generator: np.random.Generator, block_size: int = DEFAULT_BLOCK_SIZE
    ):
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self._generator = generator
        self._block_size = block_size
        self._block: list[float] = []
        self._index = 0

    def __call__(self) -> float:
        if self._index >= len(self._block):
            self._block = self._generator.random(self._block_size).tolist()
            self._index = 0
        value = self._block[self._index]
        self._index += 1
        return value


def default_random_source() -> UniformSource:
    """Return a non-deterministic source seeded from OS entropy."""
    return UniformSource(np.random.default_rng())


def seeded_random_source(seed: Optional[int] = None) -> UniformSource:
    """
    Return a deterministic source for reproducible simulations.

    Args:
        seed: Random seed (default: 42).
    """
    seed = seed if seed is not None else DEFAULT_SEED
    logger.debug("Created seeded random source (seed=%d)", seed)
    return UniformSource(np.random.default_rng(seed))
