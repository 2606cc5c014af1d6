"""Counter-driven exponential decay.

Every decay_interval observations, every stored weight and every
current best score is multiplied by exp(-decay_lambda). Scaling both
sides keeps them proportional without rescanning the store for a new
arg-min. The catch: a label that was not the winner before the decay
is not re-checked, so after a decay the sketch is approximate until
later updates (or create_sketch) tighten it again.
"""
from __future__ import annotations

import logging
import math
from typing import MutableSequence

from histosketch_lite.histogram.store import LabelStore

log = logging.getLogger(__name__)


class DecayScheduler:
    def __init__(self, decay_interval: int, decay_lambda: float) -> None:
        self._interval = decay_interval
        self._lambda = decay_lambda
        self._factor = math.exp(-decay_lambda)
        self._ticks = 0
        self._events = 0

    @property
    def tick_counter(self) -> int:
        """Observations since the last decay event."""
        return self._ticks

    @property
    def decay_events(self) -> int:
        return self._events

    @property
    def factor(self) -> float:
        return self._factor

    @property
    def interval(self) -> int:
        return self._interval

    def on_observation(
        self, store: LabelStore, best_scores: MutableSequence[float]
    ) -> bool:
        """Count one observation; decay if the interval is reached.

        Must run before the observed label's weight is updated.
        Returns True when a decay pass happened.
        """
        self._ticks += 1
        if self._ticks < self._interval:
            return False

        store.scale_weights(self._factor)
        for i in range(len(best_scores)):
            # inf * factor stays inf
            best_scores[i] *= self._factor
        self._ticks = 0
        self._events += 1
        log.debug(
            "Decay event %d: scaled %d weights and %d scores by %.6f",
            self._events, store.size, len(best_scores), self._factor,
        )
        return True
