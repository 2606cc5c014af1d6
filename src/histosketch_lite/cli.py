"""histosketch-lite CLI entry point.

Usage: histosketch-lite sketch [--base FILE] [--stream FILE] [--output FILE]
"""
import argparse
import sys
from contextlib import ExitStack
from typing import TextIO

from histosketch_lite import logging_config


def _add_sketch_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "sketch",
        help="Build a sketch from a base dataset, then stream labels into it.",
    )
    p.add_argument(
        "--base", default=None,
        help="File of base labels, batch-inserted before streaming (optional)",
    )
    p.add_argument(
        "--stream", default="-",
        help="File of streamed labels, '-' for stdin (default: -)",
    )
    p.add_argument(
        "--output", default="-",
        help="Where snapshots go, '-' for stdout (default: -)",
    )
    p.add_argument(
        "--interval", type=int, default=1000,
        help="Write a snapshot every N streamed labels (default: 1000)",
    )
    p.add_argument(
        "--size", type=int, default=None,
        help="Sketch size K (default: $HISTOSKETCH_SIZE or 2000)",
    )
    p.add_argument(
        "--decay", type=int, default=None,
        help="Labels between decay events (default: $HISTOSKETCH_DECAY or 500)",
    )
    p.add_argument(
        "--lambda", dest="decay_lambda", type=float, default=None,
        help="Decay rate; factor is exp(-lambda) (default: $HISTOSKETCH_LAMBDA or 0.02)",
    )
    p.add_argument(
        "--seed", type=int, default=None,
        help="RNG seed for reproducible runs (default: $HISTOSKETCH_SEED or 42)",
    )
    p.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug output to stderr.",
    )


def _open_in(stack: ExitStack, path: str) -> TextIO:
    if path == "-":
        return sys.stdin
    return stack.enter_context(open(path, "r", encoding="utf-8"))


def _open_out(stack: ExitStack, path: str) -> TextIO:
    if path == "-":
        return sys.stdout
    return stack.enter_context(open(path, "w", encoding="utf-8"))


def _run_sketch(args: argparse.Namespace) -> None:
    from histosketch_lite.concurrency.guarded_sketch import GuardedHistoSketch
    from histosketch_lite.config import SketchConfig
    from histosketch_lite.emit.snapshot import SnapshotEmitter
    from histosketch_lite.stream.reader import read_labels
    from histosketch_lite.stream.runner import StreamRunner

    if args.verbose:
        logging_config.enable_console_logging("DEBUG")
    else:
        logging_config.configure_from_env()

    config = SketchConfig.from_env().replace(
        sketch_size=args.size,
        decay_interval=args.decay,
        decay_lambda=args.decay_lambda,
        seed=args.seed,
    )

    with ExitStack() as stack:
        out = _open_out(stack, args.output)
        runner = StreamRunner(
            GuardedHistoSketch.from_config(config),
            SnapshotEmitter(out, flush=True),
            interval=args.interval,
        )
        if args.base is not None:
            runner.load_base(read_labels(_open_in(stack, args.base)))
        runner.stream(read_labels(_open_in(stack, args.stream)))
        summary = runner.finish()

    if summary.snapshots == 0:
        print(
            "histosketch-lite: no snapshot written "
            "(no labels read, sketch is empty)",
            file=sys.stderr,
        )


def main(argv: list[str] | None = None) -> None:
    from histosketch_lite.domain.errors import HistoSketchError

    parser = argparse.ArgumentParser(
        prog="histosketch-lite",
        description="Decaying weighted-sample sketches over label streams.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_sketch_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "sketch":
        try:
            _run_sketch(args)
        except (HistoSketchError, OSError) as exc:
            print(f"histosketch-lite: error: {exc}", file=sys.stderr)
            sys.exit(2)
