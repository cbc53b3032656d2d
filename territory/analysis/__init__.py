"""Analysis tools: batch evaluation and per-turn metrics."""

from .batch import BatchSummary, RunSummary, run_batch
from .turn_logger import TurnMetricsLogger
from .turn_metrics import calculate_turn_metrics

__all__ = [
    "BatchSummary",
    "RunSummary",
    "run_batch",
    "TurnMetricsLogger",
    "calculate_turn_metrics",
]
