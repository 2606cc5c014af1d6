"""Random parameter sources for new label entries.

Every label gets K triples (r, beta, c) on first sight:
    r, c  ~ Gamma(2, 1)
    beta  ~ Uniform[0, 1)

Three independent generators feed the three arrays. Each aggregator
owns its source; nothing here is module-global. GammaParameterSource
holds a lock for the duration of one draw() so concurrent entry
creation cannot interleave the values that make up a single entry.
Which thread's entry gets drawn first is still up to the scheduler;
for cross-run reproducibility, feed labels from one thread or hold
the sketch guard around creation.
"""
from __future__ import annotations

import random
import threading
from typing import Protocol

from histosketch_lite.domain.types import GAMMA_SCALE, GAMMA_SHAPE

Params = tuple[tuple[float, ...], tuple[float, ...], tuple[float, ...]]


class ParameterSource(Protocol):
    def draw(self, k: int) -> Params:
        """Return (r, beta, c), each a tuple of length k."""
        ...


class GammaParameterSource:
    """Seeded r/beta/c generator.

    The three streams are seeded as seed, seed+1, seed+2 so a single
    integer reproduces the whole run.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        if seed is None:
            self._r_rng = random.Random()
            self._beta_rng = random.Random()
            self._c_rng = random.Random()
        else:
            self._r_rng = random.Random(seed)
            self._beta_rng = random.Random(seed + 1)
            self._c_rng = random.Random(seed + 2)
        self._lock = threading.Lock()
        self._draws = 0

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def draws(self) -> int:
        """Number of entries drawn so far."""
        return self._draws

    def draw(self, k: int) -> Params:
        with self._lock:
            r = tuple(self._r_rng.gammavariate(GAMMA_SHAPE, GAMMA_SCALE) for _ in range(k))
            beta = tuple(self._beta_rng.random() for _ in range(k))
            c = tuple(self._c_rng.gammavariate(GAMMA_SHAPE, GAMMA_SCALE) for _ in range(k))
            self._draws += 1
        return r, beta, c


class FixedParameterSource:
    """Returns the same scalar parameters for every slot of every entry.

    Handy for checking the scoring and arg-min logic by hand.
    """

    def __init__(self, r: float = 1.0, beta: float = 1.0, c: float = 1.0) -> None:
        self._r = r
        self._beta = beta
        self._c = c

    def draw(self, k: int) -> Params:
        return (self._r,) * k, (self._beta,) * k, (self._c,) * k
