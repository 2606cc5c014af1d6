"""Reading label streams and driving a sketch over them."""
from histosketch_lite.stream.reader import read_labels
from histosketch_lite.stream.runner import RunSummary, StreamRunner

__all__ = [
    "RunSummary",
    "StreamRunner",
    "read_labels",
]
