"""Sketch snapshot serialisation.

Wire format: each winning label followed by one space, then a newline.

    [7, 2, 9]  ->  "7 2 9 \\n"

Only labels are written; scores stay in memory.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence, TextIO

from histosketch_lite.domain.errors import SketchNotReadyError
from histosketch_lite.domain.types import Label

if TYPE_CHECKING:
    from histosketch_lite.histogram.sketch import HistoSketch

log = logging.getLogger(__name__)


def format_sketch(labels: Sequence[Label | None]) -> str:
    """Render one snapshot line. Every slot must be populated."""
    missing = sum(1 for label in labels if label is None)
    if missing:
        raise SketchNotReadyError(
            f"{missing} of {len(labels)} sketch slots have no label yet"
        )
    return "".join(f"{label} " for label in labels) + "\n"


class SnapshotEmitter:
    """Writes successive snapshots of a sketch to one open text sink.

    The emitter does no locking; hold the sketch's guard while calling
    emit() if other threads may be updating it.
    """

    def __init__(self, sink: TextIO, flush: bool = False) -> None:
        self._sink = sink
        self._flush = flush
        self._written = 0

    @property
    def written(self) -> int:
        """Number of snapshots written so far."""
        return self._written

    def emit(self, sketch: HistoSketch) -> None:
        sketch.record_sketch(self._sink)
        if self._flush:
            self._sink.flush()
        self._written += 1
        log.debug("Wrote snapshot %d", self._written)
