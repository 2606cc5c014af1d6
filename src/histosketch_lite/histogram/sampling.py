"""Consistent weighted sampling score.

For slot i, a label with weight w and parameters (r, beta, c) scores

    y     = exp(ln(w) - r * beta)
    score = c / (y * exp(r))

which simplifies to c * exp(r * (beta - 1)) / w. Larger weights give
smaller scores, so the minimum-score label across the multiset is a
weight-biased sample. The same (w, r, beta, c) always gives the same
score, which is what makes two sketches comparable.

References:
    Ioffe, "Improved Consistent Sampling, Weighted Minhash and L1
    Sketching", 2010.
    Yang et al., "HistoSketch: Fast Similarity-Preserving Sketching of
    Streaming Histograms with Concept Drift", 2017.
"""
from __future__ import annotations

import math
from typing import Iterator

from histosketch_lite.domain.entry import LabelEntry
from histosketch_lite.domain.errors import NonPositiveWeightError
from histosketch_lite.domain.types import Score, Weight


def score(weight: Weight, r: float, beta: float, c: float) -> Score:
    """Sampling score for one slot. Lower wins."""
    if not weight > 0:
        raise NonPositiveWeightError(f"weight must be > 0, got {weight}")
    y = math.exp(math.log(weight) - r * beta)
    return c / (y * math.exp(r))


def slot_scores(entry: LabelEntry) -> Iterator[Score]:
    """Scores of entry for slots 0..K-1, in order."""
    w = entry.weight
    for r, beta, c in zip(entry.r, entry.beta, entry.c):
        yield score(w, r, beta, c)
