"""Turn execution.

One turn runs these phases in order:
1. Unit actions: factions act in creation order, each faction's living
   units in roster order
2. Maintenance: capture progress decays on every tile
3. Victory assessment

The turn counter is incremented before the unit phase, so events of the
first turn are logged as turn 1.

Architecture:
Each phase is an independent method. execute_turn composes them in order,
which keeps every phase testable on its own.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..models.game import Game
from ..models.unit import Unit
from .capture import CaptureEvent, attempt_capture, decay_capture_progress
from .combat import CombatEvent, resolve_combat
from .movement import move_unit
from .policy import Action, choose_action
from .victory import check_victory

logger = logging.getLogger(__name__)


@dataclass
class TurnResults:
    """Everything that happened during one turn."""

    turn: int
    actions: list[Action] = field(default_factory=list)
    combat_events: list[CombatEvent] = field(default_factory=list)
    capture_events: list[CaptureEvent] = field(default_factory=list)
    victory_condition: Optional[str] = None


class TurnExecutor:
    """Runs turns against a game state.

    The executor holds no state of its own; one instance can drive any
    number of games.
    """

    # =========================================================================
    # PHASE METHODS
    # =========================================================================

    def execute_phase_units(self, game: Game, results: TurnResults) -> TurnResults:
        """Execute Phase 1: Unit Actions.

        Each faction's acting roster is snapshotted once when its segment
        starts. A unit in the snapshot that has been destroyed by the time
        its turn comes is skipped.

        Args:
            game: Current game state
            results: Collector for this turn's actions and events

        Returns:
            The same TurnResults, filled in
        """
        for faction in game.factions:
            roster = faction.alive_units()
            for unit in roster:
                if not unit.is_alive:
                    continue
                action, combat_events, capture_events = self.execute_unit_action(game, unit)
                results.actions.append(action)
                results.combat_events.extend(combat_events)
                results.capture_events.extend(capture_events)
        return results

    def execute_phase_maintenance(self, game: Game) -> int:
        """Execute Phase 2: Maintenance.

        Args:
            game: Current game state

        Returns:
            Number of tiles whose capture progress decayed
        """
        return decay_capture_progress(game.grid)

    def execute_phase_victory_check(self, game: Game) -> Optional[str]:
        """Execute Phase 3: Victory Assessment.

        Returns:
            The condition that ended the match, or None
        """
        return check_victory(game)

    # =========================================================================
    # ORCHESTRATION
    # =========================================================================

    def execute_turn(self, game: Game) -> TurnResults:
        """Execute one complete turn.

        Args:
            game: Current game state

        Returns:
            TurnResults for the turn (victory_condition set if the match ended)
        """
        game.turn += 1
        results = TurnResults(turn=game.turn)

        self.execute_phase_units(game, results)
        self.execute_phase_maintenance(game)
        results.victory_condition = self.execute_phase_victory_check(game)

        if results.victory_condition:
            logger.info(f"Turn {game.turn}: match ended ({results.victory_condition})")
        return results

    def execute_unit_action(
        self, game: Game, unit: Unit
    ) -> tuple[Action, list[CombatEvent], list[CaptureEvent]]:
        """Let one unit decide and act.

        Args:
            game: Current game state
            unit: Living unit whose turn it is

        Returns:
            Tuple of (chosen action, combat events, capture events)
        """
        action = choose_action(game, unit)
        combat_events: list[CombatEvent] = []
        capture_events: list[CaptureEvent] = []

        if action.kind == "attack":
            event = resolve_combat(game, unit, action.target)
            combat_events.append(event)
            if event.capture is not None:
                capture_events.append(event.capture)
        elif action.kind == "capture":
            capture_events.append(attempt_capture(game, unit, action.tile))
        elif action.kind in ("move", "patrol"):
            move_unit(unit, *action.destination)
        else:
            logger.debug(f"Turn {game.turn}: Unit {unit.id} ({unit.owner}) holds")

        return action, combat_events, capture_events
