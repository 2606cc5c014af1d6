"""Domain model for histosketch-lite.

Re-exports all public types for convenient access:
    from histosketch_lite.domain import LabelEntry, Label, EmptyStoreError
"""
from histosketch_lite.domain.entry import LabelEntry
from histosketch_lite.domain.errors import (
    ConfigError,
    EmptyStoreError,
    HistoSketchError,
    InvalidLabelError,
    NonPositiveWeightError,
    SketchNotReadyError,
)
from histosketch_lite.domain.types import (
    GAMMA_SCALE,
    GAMMA_SHAPE,
    Label,
    Score,
    Slot,
    Weight,
)

__all__ = [
    "LabelEntry",
    "ConfigError",
    "EmptyStoreError",
    "HistoSketchError",
    "InvalidLabelError",
    "NonPositiveWeightError",
    "SketchNotReadyError",
    "GAMMA_SCALE",
    "GAMMA_SHAPE",
    "Label",
    "Score",
    "Slot",
    "Weight",
]
