"""Parse label streams from text.

Input is whitespace-separated unsigned integers, any number per line.
Blank lines and lines starting with '#' are skipped.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from histosketch_lite.domain.errors import InvalidLabelError
from histosketch_lite.domain.types import Label


def read_labels(source: Iterable[str]) -> Iterator[Label]:
    """Yield labels lazily from an iterable of lines (e.g. an open file)."""
    for lineno, line in enumerate(source, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        for token in stripped.split():
            try:
                label = int(token, 10)
            except ValueError:
                raise InvalidLabelError(
                    f"line {lineno}: {token!r} is not an integer label"
                ) from None
            if label < 0:
                raise InvalidLabelError(
                    f"line {lineno}: label must be non-negative, got {label}"
                )
            yield label
