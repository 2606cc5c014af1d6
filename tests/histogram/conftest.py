"""Shared fixtures for histogram and sketch tests."""
from __future__ import annotations

import random

import pytest

from histosketch_lite.config import SketchConfig
from histosketch_lite.histogram.params import GammaParameterSource
from histosketch_lite.histogram.sketch import HistoSketch

SEED = 42

# Effectively "never decay" for tests that only care about the update path.
NO_DECAY = 10**9


@pytest.fixture
def make_sketch():
    """Factory: make_sketch(k=16, decay_interval=NO_DECAY, decay_lambda=0.1, params=None)."""

    def _make(k=16, decay_interval=NO_DECAY, decay_lambda=0.1, params=None, seed=SEED):
        config = SketchConfig(
            sketch_size=k,
            decay_interval=decay_interval,
            decay_lambda=decay_lambda,
            seed=seed,
        )
        return HistoSketch(config, params=params)

    return _make


@pytest.fixture
def label_stream() -> list[int]:
    """2000 labels from a skewed pool of 100, reproducible."""
    rng = random.Random(SEED)
    pool = list(range(100))
    weights = [1.0 / (i + 1) for i in pool]
    return rng.choices(pool, weights=weights, k=2000)


@pytest.fixture
def params() -> GammaParameterSource:
    return GammaParameterSource(SEED)
