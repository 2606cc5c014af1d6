"""Snapshot output for sketches."""
from histosketch_lite.emit.snapshot import SnapshotEmitter, format_sketch

__all__ = [
    "SnapshotEmitter",
    "format_sketch",
]
