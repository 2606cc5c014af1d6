"""Drive a sketch from a base dataset plus a label stream.

Sequence:
  1. load_base(): insert every base label, then one exact create_sketch()
  2. stream(): update() per label; every `interval` updates, write a
     snapshot through the emitter
  3. finish(): write a last snapshot if the sketch changed since the
     previous one (a base load alone counts as a change)

Each update, and the snapshot that may follow it, runs inside one
GuardedHistoSketch.atomic() block, so other producers sharing the
same sketch never see a half-applied update in a snapshot.

Without a base dataset the sketch starts empty, but the first update
fills every slot (any finite score beats inf), so every snapshot the
runner takes is of a fully populated sketch.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from histosketch_lite.concurrency.guarded_sketch import GuardedHistoSketch
from histosketch_lite.domain.errors import ConfigError
from histosketch_lite.domain.types import Label
from histosketch_lite.emit.snapshot import SnapshotEmitter
from histosketch_lite.histogram.sketch import HistoSketch

log = logging.getLogger(__name__)


@dataclass(slots=True)
class RunSummary:
    """Counters from one runner's lifetime."""
    base_labels: int
    updates: int
    snapshots: int
    distinct_labels: int
    decay_events: int


class StreamRunner:
    """Feeds labels into a shared sketch and emits periodic snapshots.

    Args:
        sketch: the guarded sketch to feed (may be shared with other threads)
        emitter: where snapshots go
        interval: updates between snapshots (>= 1)
    """

    def __init__(
        self,
        sketch: GuardedHistoSketch,
        emitter: SnapshotEmitter,
        interval: int = 1000,
    ) -> None:
        if interval < 1:
            raise ConfigError(f"interval must be >= 1, got {interval}")
        self._sketch = sketch
        self._emitter = emitter
        self._interval = interval
        self._base_labels = 0
        self._updates = 0
        self._since_snapshot = 0
        self._dirty = False

    def load_base(self, labels: Iterable[Label]) -> int:
        """Batch-insert labels and build the exact sketch. Returns count."""
        count = 0
        with self._sketch.atomic() as s:
            for label in labels:
                s.insert_label(label)
                count += 1
            if count == 0:
                log.warning("Base dataset is empty; starting from an empty sketch")
                return 0
            s.create_sketch()
            distinct = s.store.size
            self._dirty = True
        self._base_labels += count
        log.info("Loaded %d base labels (%d distinct)", count, distinct)
        return count

    def stream(self, labels: Iterable[Label]) -> int:
        """Update the sketch with each label. Returns how many were fed."""
        fed = 0
        for label in labels:
            with self._sketch.atomic() as s:
                s.update(label)
                self._since_snapshot += 1
                self._dirty = True
                if self._since_snapshot >= self._interval:
                    self._record(s)
            fed += 1
        self._updates += fed
        log.info("Streamed %d labels", fed)
        return fed

    def finish(self) -> RunSummary:
        """Flush a final snapshot if one is due and return the counters."""
        with self._sketch.atomic() as s:
            if self._dirty:
                self._record(s)
            summary = RunSummary(
                base_labels=self._base_labels,
                updates=self._updates,
                snapshots=self._emitter.written,
                distinct_labels=s.store.size,
                decay_events=s.decay_events,
            )
        log.info(
            "Run finished: %d updates, %d snapshots, %d distinct labels",
            summary.updates, summary.snapshots, summary.distinct_labels,
        )
        return summary

    def _record(self, s: HistoSketch) -> None:
        # Caller holds the guard.
        self._emitter.emit(s)
        self._since_snapshot = 0
        self._dirty = False
