"""Mutual-exclusion guard for a sketch's store + state.

One threading.Lock covers the label store and the sketch arrays as a
unit. HistoSketch itself never takes it; whoever shares a sketch
between threads brackets each logical operation with the guard.

Usage:
    with sketch.guard.hold():
        sketch.update(label)
        sketch.record_sketch(out)

acquire()/release() stay available for callers that cannot use a
with-block, but hold() releases on every exit path, exceptions
included, so prefer it.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class SketchGuard:
    """Non-reentrant lock with a scoped acquisition helper."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @contextmanager
    def hold(self) -> Iterator[None]:
        """Acquire for the duration of the with-block."""
        self._lock.acquire()
        try:
            yield
        finally:
            self._lock.release()

    def acquire(self, blocking: bool = True, timeout: float = -1) -> bool:
        """Explicit acquire. Pair every True result with release()."""
        return self._lock.acquire(blocking, timeout)

    def release(self) -> None:
        """Release the guard. RuntimeError if it is not held."""
        self._lock.release()

    def locked(self) -> bool:
        return self._lock.locked()

    def __enter__(self) -> SketchGuard:
        self._lock.acquire()
        return self

    def __exit__(self, *exc_info) -> None:
        self._lock.release()
