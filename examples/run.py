"""Run one of the bundled scenarios and print its trace.

    python examples/run.py detour
    python examples/run.py options --verbose

Each scenario directory holds ``nodes.txt``, ``edges.txt`` and
``objectives.txt``. The trace is printed to stdout; pass ``--output`` to also
write it to a file.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from oznav import InMemoryTrace, Navigator, ScenarioLoader, open_trace

EXAMPLES_DIR = Path(__file__).resolve().parent


def main() -> None:
    scenarios = sorted(p.name for p in EXAMPLES_DIR.iterdir() if (p / "nodes.txt").is_file())

    parser = argparse.ArgumentParser(description="Run a bundled oznav scenario")
    parser.add_argument("scenario", choices=scenarios)
    parser.add_argument("--output", type=Path, default=None, help="Also write the trace here")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    scenario = ScenarioLoader().load_directory(EXAMPLES_DIR / args.scenario)
    trace = open_trace(args.output) if args.output else InMemoryTrace()

    with trace:
        summary = Navigator.from_scenario(scenario, trace=trace, verbose=args.verbose).run()

    print()
    for line in trace.lines():
        print(line)
    print()
    print(summary.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
