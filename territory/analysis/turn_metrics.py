"""Per-turn metrics for analyzing how a match unfolds.

Metrics cover:
- Territory (tiles owned per faction, contested tiles)
- Forces (living units and total hp per faction)
- Activity (attacks, kills and captures during the turn)
"""

from typing import Optional

from ..engine.turn_executor import TurnResults
from ..engine.victory import tile_counts
from ..models.game import Game


def calculate_turn_metrics(game: Game, results: Optional[TurnResults] = None) -> dict:
    """Calculate metrics for the state of a game after a turn.

    Args:
        game: The game state
        results: Results of the turn just executed, if available

    Returns:
        Dictionary with "turn", "territory", "forces" and "activity" sections
    """
    return {
        "turn": game.turn,
        "territory": _calculate_territory_metrics(game),
        "forces": _calculate_force_metrics(game),
        "activity": _calculate_activity_metrics(results),
        "victory_condition": game.victory_condition,
    }


def _calculate_territory_metrics(game: Game) -> dict:
    counts = tile_counts(game)
    contested = sum(1 for tile in game.grid.tiles() if tile.capture_progress > 0)
    return {
        "tiles": counts,
        "share": {
            faction.id: round(counts[faction.id] / game.grid.size, 3) for faction in game.factions
        },
        "contested_tiles": contested,
    }


def _calculate_force_metrics(game: Game) -> dict:
    forces = {}
    for faction in game.factions:
        alive = faction.alive_units()
        forces[faction.id] = {
            "alive": len(alive),
            "lost": len(faction.units) - len(alive),
            "total_hp": sum(unit.hp for unit in alive),
        }
    return forces


def _calculate_activity_metrics(results: Optional[TurnResults]) -> dict:
    if results is None:
        return {"attacks": 0, "kills": 0, "capture_actions": 0, "tiles_captured": 0}
    return {
        "attacks": len(results.combat_events),
        "kills": sum(1 for event in results.combat_events if event.destroyed),
        "capture_actions": sum(1 for event in results.capture_events if not event.via_combat),
        "tiles_captured": sum(1 for event in results.capture_events if event.captured),
    }
