"""Lock-per-operation wrapper around HistoSketch.

Every public method takes the sketch's guard for exactly that call.
Sequences that must look atomic to other threads (update followed by
record, for instance) go through atomic(), which holds the guard and
hands back the bare sketch.

The guard is not reentrant: inside atomic(), call methods on the
yielded HistoSketch, never on this wrapper.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, TextIO

from histosketch_lite.config import SketchConfig
from histosketch_lite.domain.types import Label
from histosketch_lite.histogram.params import ParameterSource
from histosketch_lite.histogram.sketch import HistoSketch


class GuardedHistoSketch:
    """HistoSketch shared safely between producer threads."""

    def __init__(self, sketch: HistoSketch | None = None) -> None:
        self._sketch = sketch or HistoSketch()

    @classmethod
    def from_config(
        cls, config: SketchConfig, params: ParameterSource | None = None
    ) -> GuardedHistoSketch:
        return cls(HistoSketch(config, params=params))

    @property
    def sketch(self) -> HistoSketch:
        """The wrapped sketch. Unguarded: use atomic() to touch it."""
        return self._sketch

    @contextmanager
    def atomic(self) -> Iterator[HistoSketch]:
        with self._sketch.guard.hold():
            yield self._sketch

    def update(self, label: Label) -> None:
        with self._sketch.guard.hold():
            self._sketch.update(label)

    def insert_label(self, label: Label) -> None:
        with self._sketch.guard.hold():
            self._sketch.insert_label(label)

    def create_sketch(self) -> None:
        with self._sketch.guard.hold():
            self._sketch.create_sketch()

    def record_sketch(self, sink: TextIO) -> None:
        with self._sketch.guard.hold():
            self._sketch.record_sketch(sink)

    def snapshot(self) -> tuple[Label | None, ...]:
        with self._sketch.guard.hold():
            return self._sketch.labels

    def store_size(self) -> int:
        with self._sketch.guard.hold():
            return self._sketch.store.size
