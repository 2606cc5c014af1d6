"""HistoSketch: fixed-size weighted sample of a decaying label stream.

Answers: "which K labels represent this stream's weighted label
distribution right now?" Two snapshots taken this way can be compared
slot by slot to estimate weighted Jaccard similarity, without keeping
the full multiset around.

State:
    store        label -> LabelEntry (weight + fixed r/beta/c)
    best_scores  minimal sampling score seen per slot (starts at inf)
    sketch       label holding best_scores[i] (None until first update)

Two ways in:
    Batch:     insert_label() for every base label, then create_sketch()
               once. create_sketch() is exact: a full scan per slot.
    Streaming: update() per label. Decay runs first, then the label's
               weight, then each slot keeps the smaller score. Between
               decay events best_scores only ever shrinks.

Decay rescales weights and best scores together but does not re-derive
the arg-min, so after a decay event the sketch is approximate until
later updates overwrite the affected slots.

No internal locking. Share one instance between threads only under
guard.hold() or through GuardedHistoSketch.
"""
from __future__ import annotations

import logging
import math
from typing import TextIO

from histosketch_lite.concurrency.guard import SketchGuard
from histosketch_lite.config import SketchConfig
from histosketch_lite.domain.errors import EmptyStoreError
from histosketch_lite.domain.types import Label, Score
from histosketch_lite.emit.snapshot import format_sketch
from histosketch_lite.histogram.decay import DecayScheduler
from histosketch_lite.histogram.params import GammaParameterSource, ParameterSource
from histosketch_lite.histogram.sampling import slot_scores
from histosketch_lite.histogram.store import LabelStore, validate_label

log = logging.getLogger(__name__)


class HistoSketch:
    """Streaming consistent-weighted-sampling sketch with decay.

    Parameters:
        config: K / DECAY / LAMBDA / seed (defaults: 2000 / 500 / 0.02 / 42).
        params: where new labels get r/beta/c from. Defaults to a
            GammaParameterSource seeded with config.seed.
    """

    def __init__(
        self,
        config: SketchConfig | None = None,
        params: ParameterSource | None = None,
    ) -> None:
        self._config = config or SketchConfig()
        k = self._config.sketch_size
        self._params = params or GammaParameterSource(self._config.seed)
        self._store = LabelStore(k, self._params)
        self._decay = DecayScheduler(
            self._config.decay_interval, self._config.decay_lambda
        )
        self._best_scores: list[Score] = [math.inf] * k
        self._sketch: list[Label | None] = [None] * k
        self._guard = SketchGuard()
        self._updates = 0

    # -- read-only views ------------------------------------------------

    @property
    def config(self) -> SketchConfig:
        return self._config

    @property
    def sketch_size(self) -> int:
        return self._config.sketch_size

    @property
    def store(self) -> LabelStore:
        return self._store

    @property
    def guard(self) -> SketchGuard:
        return self._guard

    @property
    def labels(self) -> tuple[Label | None, ...]:
        """Current winning label per slot (None = never populated)."""
        return tuple(self._sketch)

    @property
    def best_scores(self) -> tuple[Score, ...]:
        return tuple(self._best_scores)

    @property
    def tick_counter(self) -> int:
        return self._decay.tick_counter

    @property
    def decay_events(self) -> int:
        return self._decay.decay_events

    @property
    def updates(self) -> int:
        """Number of update() calls so far (insert_label not included)."""
        return self._updates

    def is_populated(self) -> bool:
        """True once every slot holds a label."""
        return all(label is not None for label in self._sketch)

    # -- streaming path -------------------------------------------------

    def update(self, label: Label) -> None:
        """Observe one label on the streaming path."""
        validate_label(label)
        self._decay.on_observation(self._store, self._best_scores)
        entry, _ = self._store.ensure(label)
        self._updates += 1

        best = self._best_scores
        sketch = self._sketch
        for i, s in enumerate(slot_scores(entry)):
            if s < best[i]:
                best[i] = s
                sketch[i] = label

    # -- batch path -----------------------------------------------------

    def insert_label(self, label: Label) -> None:
        """Add label to the store only: no decay tick, no sketch update."""
        self._store.ensure(label)

    def create_sketch(self) -> None:
        """Recompute every slot exactly from the whole store.

        Ties go to the label inserted first.
        """
        if self._store.size == 0:
            raise EmptyStoreError("cannot create a sketch from an empty store")

        k = self.sketch_size
        best: list[Score] = [math.inf] * k
        winners: list[Label | None] = [None] * k
        for label, entry in self._store:
            for i, s in enumerate(slot_scores(entry)):
                # The first entry always claims the slot, even at score inf.
                if winners[i] is None or s < best[i]:
                    best[i] = s
                    winners[i] = label
        self._best_scores = best
        self._sketch = winners
        log.debug(
            "Created sketch: %d slots over %d labels", k, self._store.size
        )

    # -- output ---------------------------------------------------------

    def record_sketch(self, sink: TextIO) -> None:
        """Write the current labels as one line to an open text sink."""
        sink.write(format_sketch(self._sketch))

    def log_histogram(self) -> None:
        """Dump (label, weight) pairs at DEBUG. Debug aid only."""
        self._store.log_contents(log)
