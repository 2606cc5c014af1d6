"""LabelEntry: per-label weight plus its fixed sampling parameters."""
from __future__ import annotations

import sys
from dataclasses import dataclass

from histosketch_lite.domain.types import Weight

MIN_WEIGHT: Weight = sys.float_info.min


@dataclass(slots=True)
class LabelEntry:
    """One distinct label in the store.

    The r/beta/c tuples are drawn once when the entry is created and
    are never regenerated. Only weight (and the raw observation count)
    change afterwards.
    """
    weight: Weight
    r: tuple[float, ...]
    beta: tuple[float, ...]
    c: tuple[float, ...]
    observations: int = 1

    def observe(self) -> None:
        self.weight += 1.0
        self.observations += 1

    def scale(self, factor: float) -> None:
        # Floor at the smallest normal float: weight must stay > 0.
        self.weight = max(self.weight * factor, MIN_WEIGHT)
