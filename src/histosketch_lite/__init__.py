"""histosketch-lite: decaying weighted-sample sketches over label streams.

Public API:
    SketchConfig: K / DECAY / LAMBDA / seed
    HistoSketch: the aggregator (update, insert_label, create_sketch, record_sketch)
    GuardedHistoSketch: lock-per-operation wrapper for shared use
"""
import logging

from histosketch_lite.config import SketchConfig
from histosketch_lite.concurrency.guarded_sketch import GuardedHistoSketch
from histosketch_lite.histogram.sketch import HistoSketch

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "GuardedHistoSketch",
    "HistoSketch",
    "SketchConfig",
]
