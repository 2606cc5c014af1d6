"""Label histogram and the weighted sampling sketch built on it.

Public API:
    LabelStore: label -> LabelEntry with incremental size
    score / slot_scores: consistent weighted sampling score
    DecayScheduler: periodic exp(-LAMBDA) rescale
    HistoSketch: the aggregator tying them together
    GammaParameterSource / FixedParameterSource: r/beta/c sources
"""
from histosketch_lite.histogram.decay import DecayScheduler
from histosketch_lite.histogram.params import (
    FixedParameterSource,
    GammaParameterSource,
    ParameterSource,
)
from histosketch_lite.histogram.sampling import score, slot_scores
from histosketch_lite.histogram.sketch import HistoSketch
from histosketch_lite.histogram.store import LabelStore, validate_label

__all__ = [
    "DecayScheduler",
    "FixedParameterSource",
    "GammaParameterSource",
    "HistoSketch",
    "LabelStore",
    "ParameterSource",
    "score",
    "slot_scores",
    "validate_label",
]
