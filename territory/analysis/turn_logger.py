"""Per-turn metrics logger.

This module provides JSONL logging for metrics calculated while a simulation
runs. Each turn's metrics are written as a single JSON line to enable easy
parsing and analysis.
"""

import json
from pathlib import Path
from typing import Optional

from ..engine.turn_executor import TurnResults
from ..models.game import Game
from .turn_metrics import calculate_turn_metrics


class TurnMetricsLogger:
    """Logs per-turn metrics to a JSONL file.

    Each simulation gets its own log file. An instance can be passed
    directly as the on_turn callback of Simulation.run().
    """

    def __init__(self, run_id: str, output_dir: str = "logs"):
        """Initialize logger for a specific simulation.

        Args:
            run_id: Unique identifier for the simulation
            output_dir: Directory to write log files (default: "logs")
        """
        self.run_id = run_id
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        # {output_dir}/sim_{run_id}_turns.jsonl
        self.log_path = self.output_dir / f"sim_{run_id}_turns.jsonl"

        try:
            self.file_handle = open(self.log_path, "w", encoding="utf-8")
        except OSError as e:
            raise OSError(f"Failed to open log file {self.log_path}: {e}") from e

    def __call__(self, game: Game, results: Optional[TurnResults] = None) -> None:
        self.log_turn(calculate_turn_metrics(game, results))

    def log_turn(self, metrics: dict) -> None:
        """Write one turn's metrics as a compact JSON line.

        Flushes after each write so a crashed run still leaves its history.

        Args:
            metrics: Dictionary returned by calculate_turn_metrics()
        """
        try:
            json_line = json.dumps(metrics, separators=(",", ":"))
            self.file_handle.write(json_line + "\n")
            self.file_handle.flush()
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid metrics format: {e}") from e
        except OSError as e:
            raise OSError(f"Failed to write to log file: {e}") from e

    def close(self) -> None:
        """Close the log file. Safe to call multiple times."""
        if self.file_handle and not self.file_handle.closed:
            self.file_handle.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
