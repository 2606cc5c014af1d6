"""Exception hierarchy for histosketch-lite.

Every error derives from HistoSketchError so callers (the CLI in
particular) can catch the whole family in one place. Errors that
describe a bad argument also derive from ValueError.
"""
from __future__ import annotations


class HistoSketchError(Exception):
    """Base class for all histosketch-lite errors."""


class ConfigError(HistoSketchError, ValueError):
    """Raised when a SketchConfig field is out of range."""


class InvalidLabelError(HistoSketchError, ValueError):
    """Raised when a label is not a non-negative integer."""


class NonPositiveWeightError(HistoSketchError, ValueError):
    """Raised when a sampling score is requested for weight <= 0."""


class EmptyStoreError(HistoSketchError):
    """Raised when an exact sketch is requested from an empty store."""


class SketchNotReadyError(HistoSketchError):
    """Raised when a snapshot is requested before every slot has a label."""
