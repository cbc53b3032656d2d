"""Simulation driver: runs a game to completion and reports the result."""

import logging
from collections.abc import Callable
from typing import Optional

from ..config import SimulationConfig
from ..interface.renderer import MapRenderer
from ..models.game import Game
from ..models.result import SimulationResult
from ..utils.constants import DEFAULT_COLS, DEFAULT_ROWS, MIN_LEVEL
from .setup import create_game
from .turn_executor import TurnExecutor, TurnResults
from .victory import check_victory, determine_outcome, tile_counts

logger = logging.getLogger(__name__)

TurnCallback = Callable[[Game, TurnResults], None]


class Simulation:
    """One self-contained territory capture match.

    Every Simulation builds its own grid, factions, log and RNG, so any
    number of them can run side by side (threads or processes) without
    coordination.

    Example:
        >>> result = Simulation(level=40, seed=7).run()
        >>> result.result.label, result.turns
    """

    def __init__(
        self,
        level: int = MIN_LEVEL,
        cols: int = DEFAULT_COLS,
        rows: int = DEFAULT_ROWS,
        seed: int | None = None,
        jitter: bool = True,
        idle_wander: bool = False,
    ):
        """Validate configuration and build the game.

        Args:
            level: Difficulty level, clamped to 1-100
            cols: Grid width (must be > 0)
            rows: Grid height (must be > 0)
            seed: RNG seed for reproducible runs
            jitter: Whether combat math gets random perturbation
            idle_wander: Whether units with nowhere to go wander randomly

        Raises:
            pydantic.ValidationError: If the grid dimensions are not positive
        """
        self.config = SimulationConfig(
            level=level,
            cols=cols,
            rows=rows,
            seed=seed,
            jitter=jitter,
            idle_wander=idle_wander,
        )
        self.game = create_game(**self.config.model_dump())
        self.executor = TurnExecutor()
        self.renderer = MapRenderer()
        self.result: Optional[SimulationResult] = None

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "Simulation":
        """Build a simulation from a config (extra fields on subclasses are ignored)."""
        return cls(**config.model_dump(include=set(SimulationConfig.model_fields)))

    def run(self, on_turn: Optional[TurnCallback] = None) -> SimulationResult:
        """Run turns until a victory condition holds or the turn cap is reached.

        The summary line ("Level L finished in T turns. Result: ...") is
        appended as the last log entry, after every turn event, rather than
        placed at the front of the log.

        Args:
            on_turn: Optional callback invoked after every turn with the game
                     and that turn's results

        Returns:
            SimulationResult. Running a finished simulation again returns the
            same result.
        """
        if self.result is not None:
            return self.result

        game = self.game
        check_victory(game)
        while not game.finished and game.turn < game.max_turns:
            results = self.executor.execute_turn(game)
            if on_turn is not None:
                on_turn(game, results)

        if not game.finished:
            game.victory_condition = "turn_limit"

        outcome = determine_outcome(game)
        game.record(f"Level {game.level} finished in {game.turn} turns. Result: {outcome.label}")
        logger.info(
            f"Level {game.level} finished in {game.turn} turns "
            f"({game.victory_condition}). Result: {outcome.label}"
        )

        self.result = SimulationResult(
            result=outcome,
            turns=game.turn,
            log=list(game.log),
            condition=game.victory_condition,
            tile_counts=tile_counts(game),
            level=game.level,
            seed=game.seed,
        )
        return self.result

    def render_map(self, with_coords: bool = False) -> str:
        """ASCII snapshot of the current board."""
        if with_coords:
            return self.renderer.render_with_coords(self.game)
        return self.renderer.render(self.game)
