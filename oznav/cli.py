"""Command-line entry point.

    oznav nodes.txt edges.txt objectives.txt output.txt

Reads the three input files, runs the navigator and writes the trace to the
output path. I/O failures are reported and turn into exit status 1; malformed
input raises :class:`~oznav.scenario.ScenarioFormatError` and aborts the run.
"""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from .config import Config
from .logging_utils import log_error, log_info, log_success
from .navigator import Navigator
from .persistence import TRACE_FORMATS, open_trace
from .scenario import ScenarioLoader
from .schemas import TraceEvent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oznav",
        description="Simulate fog-of-war navigation through a sequence of objectives.",
    )
    parser.add_argument("nodes", type=Path, help="Node file: 'maxX maxY' then 'x y terrain' lines")
    parser.add_argument("edges", type=Path, help="Edge file: 'x1-y1,x2-y2 cost' lines")
    parser.add_argument("objectives", type=Path, help="Objectives file: radius, start, objective lines")
    parser.add_argument("output", type=Path, help="Trace output path")
    parser.add_argument(
        "--format",
        choices=sorted(TRACE_FORMATS),
        default=None,
        help="Trace format (default: OZNAV_TRACE_FORMAT or 'text')",
    )
    parser.add_argument("--echo", action="store_true", help="Print each trace line while running")
    parser.add_argument("--verbose", action="store_true", help="Print per-step diagnostics")
    return parser


def _echo(event: TraceEvent) -> None:
    print(event.render())


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    Config.validate()

    trace_format = args.format or Config.TRACE_FORMAT
    listeners = [_echo] if (args.echo or Config.ECHO_TRACE) else []
    verbose = args.verbose or Config.VERBOSE

    if verbose:
        log_info(Config.display())

    try:
        scenario = ScenarioLoader(encoding=Config.TRACE_ENCODING).load(args.nodes, args.edges, args.objectives)
        with open_trace(args.output, trace_format, encoding=Config.TRACE_ENCODING) as trace:
            navigator = Navigator.from_scenario(scenario, trace=trace, listeners=listeners, verbose=verbose)
            summary = navigator.run()
    except OSError as exc:
        log_error(f"I/O failure: {exc}")
        traceback.print_exc()
        return 1

    log_success(f"Trace written to {args.output} ({summary.moves} moves)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
