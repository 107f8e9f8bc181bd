from __future__ import annotations

import argparse
import logging
from typing import Sequence

from . import evaluation
from .duration import format_duration, parse_duration
from .simulator import Simulation, SimulationConfig


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare profiler sampling strategies on a simulated trace.")
    parser.add_argument("--duration", type=str, default="100s", help="Target trace duration, e.g. 100s or 1m30s.")
    parser.add_argument(
        "--profilers",
        type=str,
        default="",
        help="Comma-separated profiler names to run (default: all).",
    )
    parser.add_argument("--show-trace", action="store_true", help="Print the execution trace before the profiles.")
    parser.add_argument("--bias", action="store_true", help="Print a bias summary against the matching exact profile.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level.",
    )
    args = parser.parse_args(argv)
    try:
        args.duration = parse_duration(args.duration)
        args.profilers = select_profilers(args.profilers)
    except ValueError as exc:
        parser.error(str(exc))
    return args


def select_profilers(raw: str) -> list[evaluation.NamedProfiler]:
    available = evaluation.default_profilers()
    names = [item.strip() for item in raw.split(",") if item.strip()]
    if not names:
        return available
    by_name = {named.name.lower(): named for named in available}
    selected = []
    for name in names:
        named = by_name.get(name.lower())
        if named is None:
            msg = f"unknown profiler {name!r}, expected one of: {', '.join(n.name for n in available)}"
            raise ValueError(msg)
        selected.append(named)
    return selected


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_arguments(argv)
    logging.basicConfig(level=args.log_level)

    result = Simulation(SimulationConfig(duration=args.duration)).run(args.profilers)
    if args.show_trace:
        print(result.trace)
    for outcome in result.outcomes:
        print(f"{outcome.name}\n{outcome.profile}")
        if args.bias:
            m = outcome.aggregate
            print(
                f"coverage={m.coverage:.3f} total={format_duration(m.observed_total)} "
                f"tvd={m.total_variation:.3f} max_share_error={m.max_abs_share_error:.3f}\n",
            )


if __name__ == "__main__":
    main()
