"""Command-line harness: load notes, run the simulation, print monkey business."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from monkeysim.core.errors import SimulationError
from monkeysim.core.relief import ReliefMode
from monkeysim.core.simulator import LONG_RUN, SHORT_RUN, RunResult, SimulatorConfig, run_config
from monkeysim.loader.errors import ParseError
from monkeysim.loader.parser import load_notes, parse_notes
from monkeysim.scenarios import EXAMPLE_NOTES

logger = logging.getLogger(__name__)

PARTS = {
    "short": SHORT_RUN,
    "long": LONG_RUN,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monkeysim",
        description="Simulate monkeys passing items and report monkey business",
    )
    parser.add_argument("notes", nargs="?", type=Path, help="Path to the monkey notes file")
    parser.add_argument(
        "--example",
        action="store_true",
        help="Use the built-in four-monkey example instead of a notes file",
    )
    parser.add_argument(
        "--part",
        choices=["short", "long", "both"],
        default="both",
        help="short: 20 rounds, divide relief; long: 10000 rounds, modulus relief",
    )
    parser.add_argument("--rounds", type=int, help="Run a custom number of rounds instead of --part")
    parser.add_argument(
        "--relief",
        choices=[m.value for m in ReliefMode],
        default=None,
        help="Relief mode for a custom --rounds run (default: modulus); requires --rounds",
    )
    parser.add_argument("--counts", action="store_true", help="Also print per-monkey inspection counts")
    parser.add_argument("--plot", type=Path, help="Save a summary figure of the last run to this path")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug logs")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _configs(args: argparse.Namespace) -> list[tuple[str, SimulatorConfig]]:
    if args.rounds is not None:
        relief = ReliefMode(args.relief or ReliefMode.MODULUS)
        return [("custom", SimulatorConfig(rounds=args.rounds, relief=relief))]
    if args.part == "both":
        return list(PARTS.items())
    return [(args.part, PARTS[args.part])]


def _report(label: str, result: RunResult, show_counts: bool) -> None:
    print(f"{label}: {result.business}")
    if show_counts:
        for worker_id, count in result.counter.as_dict().items():
            print(f"  monkey {worker_id}: {count}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.example == (args.notes is not None):
        parser.error("give either a notes file or --example")
    if args.relief is not None and args.rounds is None:
        parser.error("--relief only applies to a custom --rounds run")

    try:
        simulation = parse_notes(EXAMPLE_NOTES) if args.example else load_notes(args.notes)
        result = None
        for label, config in _configs(args):
            result = run_config(simulation, config)
            _report(label, result, args.counts)
    except (ParseError, SimulationError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: cannot read notes: {exc}", file=sys.stderr)
        return 1

    if args.plot is not None:
        # matplotlib is only needed for --plot
        from monkeysim.viz.counts import plot_run_summary, save_figure

        fig = plot_run_summary(result)
        save_figure(fig, args.plot)
        logger.info("Saved figure to %s", args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
