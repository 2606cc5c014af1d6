"""Tests for StreamRunner: base load, periodic snapshots, final flush."""
from __future__ import annotations

import io
import logging

import pytest

from histosketch_lite.concurrency.guarded_sketch import GuardedHistoSketch
from histosketch_lite.config import SketchConfig
from histosketch_lite.domain.errors import ConfigError
from histosketch_lite.emit.snapshot import SnapshotEmitter
from histosketch_lite.stream.runner import StreamRunner


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


def _runner(out, k=4, interval=3, decay_interval=10**9):
    sketch = GuardedHistoSketch.from_config(
        SketchConfig(sketch_size=k, decay_interval=decay_interval, decay_lambda=0.1, seed=11)
    )
    return StreamRunner(sketch, SnapshotEmitter(out), interval=interval), sketch


def test_invalid_interval(out):
    with pytest.raises(ConfigError):
        _runner(out, interval=0)


def test_base_then_stream(out):
    runner, sketch = _runner(out, k=4, interval=3)
    assert runner.load_base([1, 2, 3, 1]) == 4
    assert sketch.sketch.is_populated()
    assert sketch.sketch.updates == 0

    assert runner.stream(range(10)) == 10
    summary = runner.finish()

    lines = out.getvalue().splitlines(keepends=True)
    # after updates 3, 6, 9, plus the final flush for update 10
    assert len(lines) == 4
    for line in lines:
        assert line.endswith(" \n")
        assert len(line.split()) == 4
    assert summary.base_labels == 4
    assert summary.updates == 10
    assert summary.snapshots == 4
    assert summary.distinct_labels == 10


def test_base_only_emits_exact_sketch(out):
    runner, sketch = _runner(out, k=4, interval=3)
    runner.load_base([1, 2, 3, 2])
    summary = runner.finish()

    lines = out.getvalue().splitlines(keepends=True)
    assert len(lines) == 1
    assert lines[0].endswith(" \n")
    tokens = lines[0].split()
    assert len(tokens) == 4
    assert set(tokens) <= {"1", "2", "3"}
    assert tuple(int(t) for t in tokens) == sketch.snapshot()
    assert summary.snapshots == 1
    assert summary.updates == 0
    assert summary.base_labels == 4


def test_base_snapshot_not_repeated_after_aligned_stream(out):
    runner, _ = _runner(out, k=2, interval=3)
    runner.load_base([7, 8])
    runner.stream(range(6))
    summary = runner.finish()
    # updates 3 and 6 only: the base state was superseded by the stream
    assert summary.snapshots == 2
    assert len(out.getvalue().splitlines()) == 2


def test_no_final_flush_when_fresh(out):
    runner, _ = _runner(out, k=2, interval=5)
    runner.stream(range(10))
    summary = runner.finish()
    assert summary.snapshots == 2
    assert len(out.getvalue().splitlines()) == 2


def test_no_base_no_stream(out):
    runner, _ = _runner(out)
    summary = runner.finish()
    assert summary.snapshots == 0
    assert out.getvalue() == ""


def test_empty_base_warns(out, caplog):
    runner, sketch = _runner(out)
    with caplog.at_level(logging.WARNING, logger="histosketch_lite.stream.runner"):
        assert runner.load_base([]) == 0
    assert "empty" in caplog.text
    assert not sketch.sketch.guard.locked()


def test_stream_without_base(out):
    runner, sketch = _runner(out, k=3, interval=1)
    runner.stream([5, 6])
    summary = runner.finish()
    assert summary.snapshots == 2
    assert sketch.sketch.labels[0] in (5, 6)


def test_decay_events_reported(out):
    runner, _ = _runner(out, k=2, interval=100, decay_interval=4)
    runner.stream(range(12))
    assert runner.finish().decay_events == 3


def test_bad_label_propagates(out):
    runner, sketch = _runner(out)
    with pytest.raises(ValueError):
        runner.stream([1, -2])
    assert not sketch.sketch.guard.locked()
