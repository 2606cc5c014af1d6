"""Label weight store: label -> LabelEntry.

Keys are unique unsigned integers. size is tracked incrementally and
only ever grows: there is no removal. A label's r/beta/c tuples are
drawn on its first insertion and never touched again; later
observations only bump the weight.

No locking here. The owning HistoSketch (and its guard) is the unit
of mutual exclusion.
"""
from __future__ import annotations

import logging
from typing import Iterator

from histosketch_lite.domain.entry import LabelEntry
from histosketch_lite.domain.errors import InvalidLabelError
from histosketch_lite.domain.types import Label
from histosketch_lite.histogram.params import ParameterSource

log = logging.getLogger(__name__)


def validate_label(label: object) -> Label:
    """Return label unchanged if it is a non-negative int, else raise."""
    if isinstance(label, bool) or not isinstance(label, int):
        raise InvalidLabelError(f"label must be an int, got {type(label).__name__}")
    if label < 0:
        raise InvalidLabelError(f"label must be non-negative, got {label}")
    return label


class LabelStore:
    """Mapping from label to its accumulated weight and sampling parameters.

    Args:
        sketch_size: K, the length of each entry's r/beta/c tuples.
        params: source of fresh parameters for new labels.
    """

    def __init__(self, sketch_size: int, params: ParameterSource) -> None:
        self._sketch_size = sketch_size
        self._params = params
        self._entries: dict[Label, LabelEntry] = {}
        self._size = 0

    @property
    def size(self) -> int:
        """Number of distinct labels inserted so far."""
        return self._size

    @property
    def sketch_size(self) -> int:
        return self._sketch_size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, label: object) -> bool:
        return label in self._entries

    def __iter__(self) -> Iterator[tuple[Label, LabelEntry]]:
        return iter(self._entries.items())

    def get(self, label: Label) -> LabelEntry | None:
        return self._entries.get(label)

    def labels(self) -> list[Label]:
        return list(self._entries)

    def ensure(self, label: Label) -> tuple[LabelEntry, bool]:
        """Insert label or count one more observation of it.

        Returns (entry, is_new). A new entry starts at weight 1 with
        freshly drawn parameters; an existing entry gets weight += 1
        and keeps its parameters.
        """
        validate_label(label)
        entry = self._entries.get(label)
        if entry is not None:
            entry.observe()
            return entry, False

        r, beta, c = self._params.draw(self._sketch_size)
        entry = LabelEntry(weight=1.0, r=r, beta=beta, c=c)
        self._entries[label] = entry
        self._size += 1
        return entry, True

    def scale_weights(self, factor: float) -> None:
        """Multiply every weight by factor (decay pass)."""
        for entry in self._entries.values():
            entry.scale(factor)

    def log_contents(self, logger: logging.Logger | None = None) -> None:
        """Dump every (label, weight) pair on one DEBUG line."""
        logger = logger or log
        if not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug("Printing histogram map (%d labels)", self._size)
        pairs = "  ".join(
            f"[{label}]->{entry.weight:g}" for label, entry in self._entries.items()
        )
        logger.debug(pairs)
