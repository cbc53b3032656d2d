"""Territory simulation - command-line entry point.

Runs one simulation (or a batch) from numeric configuration and prints the
result, optionally with the final board and the full event log.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from .analysis.batch import BatchSummary, run_batch
from .analysis.turn_logger import TurnMetricsLogger
from .config import BatchConfig, SimulationConfig
from .engine.simulation import Simulation
from .utils.constants import DEFAULT_COLS, DEFAULT_ROWS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Territory Capture - Turn-based two-faction simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Level 1 on a 10x8 grid
  %(prog)s --level 60 --seed 7 --show-map
  %(prog)s --level 30 --no-jitter --show-log
  %(prog)s --level 50 --batch 100 --workers 4 --seed 1
  %(prog)s --level 20 --metrics-dir logs
        """,
    )
    parser.add_argument("--level", type=int, default=1, help="Difficulty level 1-100 (default: 1)")
    parser.add_argument(
        "--cols", type=int, default=DEFAULT_COLS, help=f"Grid width (default: {DEFAULT_COLS})"
    )
    parser.add_argument(
        "--rows", type=int, default=DEFAULT_ROWS, help=f"Grid height (default: {DEFAULT_ROWS})"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    parser.add_argument(
        "--no-jitter", action="store_true", help="Disable random jitter in combat math"
    )
    parser.add_argument(
        "--idle-wander",
        action="store_true",
        help="Let units with nowhere to go step to a random neighbor",
    )
    parser.add_argument("--show-map", action="store_true", help="Print the final board")
    parser.add_argument("--show-log", action="store_true", help="Print the full event log")
    parser.add_argument(
        "--metrics-dir",
        type=str,
        default=None,
        metavar="DIR",
        help="Write per-turn metrics as JSONL into DIR",
    )
    parser.add_argument(
        "--batch", type=int, default=None, metavar="N", help="Run N simulations and summarize"
    )
    parser.add_argument(
        "--workers", type=int, default=1, help="Worker processes for --batch (default: 1)"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def run_one(args: argparse.Namespace) -> int:
    config = SimulationConfig(
        level=args.level,
        cols=args.cols,
        rows=args.rows,
        seed=args.seed,
        jitter=not args.no_jitter,
        idle_wander=args.idle_wander,
    )
    simulation = Simulation.from_config(config)

    if args.metrics_dir:
        run_id = f"L{simulation.game.level}-s{config.seed if config.seed is not None else 'rand'}"
        with TurnMetricsLogger(run_id, output_dir=args.metrics_dir) as metrics_logger:
            result = simulation.run(on_turn=metrics_logger)
        print(f"Per-turn metrics written to {metrics_logger.log_path}")
    else:
        result = simulation.run()

    if args.show_log:
        print("\n".join(result.log))
        print()
    if args.show_map:
        print(simulation.render_map(with_coords=True))
        print()

    counts = result.tile_counts
    print(
        f"Result: {result.result.label} after {result.turns} turns "
        f"(ended by {result.condition}; tiles red={counts['red']} "
        f"blue={counts['blue']} neutral={counts['neutral']})"
    )
    return 0


def run_many(args: argparse.Namespace) -> int:
    config = BatchConfig(
        level=args.level,
        cols=args.cols,
        rows=args.rows,
        seed=args.seed,
        jitter=not args.no_jitter,
        idle_wander=args.idle_wander,
        runs=args.batch,
        workers=args.workers,
    )
    print_batch_summary(run_batch(config))
    return 0


def print_batch_summary(summary: BatchSummary) -> None:
    print("=" * 60)
    print(f"Batch: {summary.runs} simulations at level {summary.level}")
    print("=" * 60)
    for outcome, count in summary.outcomes.items():
        share = count / summary.runs if summary.runs else 0.0
        print(f"  {outcome:<10} {count:>5}  ({share:.0%})")
    print("Ending conditions:")
    for condition, count in sorted(summary.conditions.items()):
        print(f"  {condition:<14} {count:>5}")
    print(
        f"Turns: mean {summary.mean_turns:.1f}, "
        f"min {summary.min_turns}, max {summary.max_turns}"
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        if args.batch is not None:
            return run_many(args)
        return run_one(args)
    except ValidationError as e:
        print(f"Error: invalid configuration:\n{e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
