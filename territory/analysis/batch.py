"""Batch evaluation: many independent simulations at one difficulty.

Every run builds a fresh Simulation, so runs share nothing and can be
spread across worker processes without synchronization.
"""

import logging
from collections import Counter
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Optional

from ..config import BatchConfig, SimulationConfig
from ..engine.simulation import Simulation
from ..models.result import Outcome

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Outcome of one simulation in a batch."""

    index: int
    seed: Optional[int]
    result: Outcome
    turns: int
    condition: Optional[str]


@dataclass
class BatchSummary:
    """Aggregated statistics for a batch.

    Attributes:
        level: Difficulty level the batch ran at (after clamping)
        runs: Number of simulations
        outcomes: Count per outcome value ("red_wins", "blue_wins", "draw")
        conditions: Count per ending condition
        mean_turns: Average match length
        min_turns: Shortest match
        max_turns: Longest match
        results: Per-run summaries, ordered by run index
    """

    level: int
    runs: int
    outcomes: dict[str, int] = field(default_factory=dict)
    conditions: dict[str, int] = field(default_factory=dict)
    mean_turns: float = 0.0
    min_turns: int = 0
    max_turns: int = 0
    results: list[RunSummary] = field(default_factory=list)


def _seed_for(config: BatchConfig, index: int) -> Optional[int]:
    return None if config.seed is None else config.seed + index


def run_single(index: int, config: SimulationConfig) -> RunSummary:
    """Run one simulation and summarize it.

    Module-level so it can be shipped to worker processes.
    """
    result = Simulation.from_config(config).run()
    return RunSummary(
        index=index,
        seed=config.seed,
        result=result.result,
        turns=result.turns,
        condition=result.condition,
    )


def run_batch(config: BatchConfig) -> BatchSummary:
    """Run config.runs independent simulations and aggregate their outcomes.

    Args:
        config: Batch configuration. Run i uses seed config.seed + i.

    Returns:
        BatchSummary with outcome counts and turn statistics
    """
    jobs = [
        (
            index,
            SimulationConfig(
                level=config.level,
                cols=config.cols,
                rows=config.rows,
                seed=_seed_for(config, index),
                jitter=config.jitter,
                idle_wander=config.idle_wander,
            ),
        )
        for index in range(config.runs)
    ]

    logger.info(
        f"Running batch of {config.runs} simulations at level {config.level} "
        f"({config.workers} worker{'s' if config.workers != 1 else ''})"
    )

    if config.workers == 1:
        summaries = [run_single(index, job) for index, job in jobs]
    else:
        summaries = []
        with ProcessPoolExecutor(max_workers=config.workers) as pool:
            futures = [pool.submit(run_single, index, job) for index, job in jobs]
            for future in as_completed(futures):
                summaries.append(future.result())
        summaries.sort(key=lambda summary: summary.index)

    return summarize(config.level, summaries)


def summarize(level: int, summaries: list[RunSummary]) -> BatchSummary:
    """Aggregate per-run summaries into batch statistics."""
    outcomes = Counter(summary.result.value for summary in summaries)
    conditions = Counter(summary.condition for summary in summaries)
    turns = [summary.turns for summary in summaries]

    return BatchSummary(
        level=level,
        runs=len(summaries),
        outcomes={outcome.value: outcomes.get(outcome.value, 0) for outcome in Outcome},
        conditions=dict(conditions),
        mean_turns=sum(turns) / len(turns) if turns else 0.0,
        min_turns=min(turns, default=0),
        max_turns=max(turns, default=0),
        results=summaries,
    )
