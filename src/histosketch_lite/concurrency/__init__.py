"""Concurrency control for sketches shared between threads.

  - SketchGuard: one lock over a sketch's store + state, scoped via hold()
  - GuardedHistoSketch: takes the guard around every operation
    (import from histosketch_lite.concurrency.guarded_sketch)
"""
from histosketch_lite.concurrency.guard import SketchGuard

__all__ = [
    "SketchGuard",
]
