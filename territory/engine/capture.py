"""Tile capture: progress accumulation, ownership flips and decay.

This module handles:
1. Capture actions by units standing on tiles they do not own
2. The capture bonus a unit earns by destroying a defender on such a tile
3. Post-turn decay of capture progress on every tile
"""

from dataclasses import dataclass

from ..models.game import Game
from ..models.grid import Grid
from ..models.tile import Tile
from ..models.unit import Unit
from ..utils.constants import CAPTURE_DECAY, CAPTURE_THRESHOLD, FACTION_NAMES


@dataclass
class CaptureEvent:
    """Record of capture progress applied to a tile.

    Attributes:
        turn: Turn the event happened on
        unit_id: ID of the unit applying progress
        owner: Faction of that unit
        x: Tile X coordinate
        y: Tile Y coordinate
        gained: Progress added
        progress: Tile progress after the event (0 if the tile flipped)
        captured: Whether the tile changed owner
        via_combat: True if the progress came from destroying a defender
    """

    turn: int
    unit_id: int
    owner: str
    x: int
    y: int
    gained: float
    progress: float
    captured: bool
    via_combat: bool = False


def apply_capture_progress(tile: Tile, faction_id: str, amount: float) -> bool:
    """Add capture progress to a tile and flip it once the threshold is reached.

    Progress never rests at or above the threshold: the flip and the reset
    to 0 happen together.

    Args:
        tile: Tile being captured
        faction_id: Faction applying the progress
        amount: Progress to add

    Returns:
        True if the tile changed owner
    """
    tile.capture_progress += amount
    if tile.capture_progress >= CAPTURE_THRESHOLD:
        tile.owner = faction_id
        tile.capture_progress = 0.0
        return True
    return False


def attempt_capture(game: Game, unit: Unit, tile: Tile) -> CaptureEvent:
    """Apply a unit's capture action to the tile it stands on.

    Args:
        game: Current game state
        unit: Capturing unit
        tile: Tile under the unit

    Returns:
        CaptureEvent describing the progress applied
    """
    return _capture(game, unit, tile, via_combat=False)


def capture_after_kill(game: Game, attacker: Unit, tile: Tile) -> CaptureEvent:
    """Credit an attacker's full capture rate to the tile its victim died on."""
    return _capture(game, attacker, tile, via_combat=True)


def _capture(game: Game, unit: Unit, tile: Tile, via_combat: bool) -> CaptureEvent:
    gained = float(unit.capture_rate)
    reached = min(CAPTURE_THRESHOLD, tile.capture_progress + gained)
    captured = apply_capture_progress(tile, unit.owner, gained)

    if via_combat:
        game.record(
            f"Turn {game.turn}: Unit {unit.id} ({unit.owner}) gains +{gained:.1f} capture "
            f"on ({tile.x},{tile.y}) from kill (progress {reached:.1f}/{CAPTURE_THRESHOLD})"
        )
    else:
        game.record(
            f"Turn {game.turn}: Unit {unit.id} ({unit.owner}) captures ({tile.x},{tile.y}) "
            f"+{gained:.1f} (progress {reached:.1f}/{CAPTURE_THRESHOLD})"
        )

    if captured:
        suffix = " after combat" if via_combat else ""
        game.record(
            f"Turn {game.turn}: Tile ({tile.x},{tile.y}) captured by "
            f"{FACTION_NAMES[unit.owner]}{suffix}."
        )

    return CaptureEvent(
        turn=game.turn,
        unit_id=unit.id,
        owner=unit.owner,
        x=tile.x,
        y=tile.y,
        gained=gained,
        progress=tile.capture_progress,
        captured=captured,
        via_combat=via_combat,
    )


def decay_capture_progress(grid: Grid, amount: float = CAPTURE_DECAY) -> int:
    """Reduce every tile's capture progress, flooring at 0.

    Capture needs sustained pressure: a tile left alone slowly forgets
    progress made against it.

    Args:
        grid: Grid to update
        amount: Progress removed per tile

    Returns:
        Number of tiles whose progress decreased
    """
    decayed = 0
    for tile in grid.tiles():
        if tile.capture_progress > 0:
            tile.capture_progress = max(0.0, tile.capture_progress - amount)
            decayed += 1
    return decayed
