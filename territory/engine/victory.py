"""Victory condition checking and final outcome.

This module handles:
1. Checking whether either faction holds a strict majority of tiles
2. Checking whether either faction's base is owned by the other
3. Checking whether either faction (or both) has been wiped out
4. Deciding the final outcome by tile count
"""

from typing import Optional

from ..models.game import Game
from ..models.result import Outcome


def count_tiles_owned_by(game: Game, owner: Optional[str]) -> int:
    """Count tiles owned by a faction id, or neutral tiles for None."""
    return game.grid.count_owned_by(owner)


def tile_counts(game: Game) -> dict[str, int]:
    """Tile ownership totals keyed by "red", "blue" and "neutral"."""
    counts = {faction.id: 0 for faction in game.factions}
    counts["neutral"] = 0
    for tile in game.grid.tiles():
        counts[tile.owner if tile.owner is not None else "neutral"] += 1
    return counts


def check_victory(game: Game) -> Optional[str]:
    """Check whether the match is over.

    Conditions, any of which ends the match:
    - "majority": a faction owns strictly more than half of all tiles
    - "base_captured": a faction's base tile is owned by the other faction
    - "elimination": a faction has no living units (including both at once)

    The result is stored on game.victory_condition.

    Args:
        game: Current game state

    Returns:
        The condition that ended the match, or None to continue
    """
    condition = None
    for faction in game.factions:
        if count_tiles_owned_by(game, faction.id) > game.grid.size * 0.5:
            condition = "majority"
            break
        enemy = game.enemy_of(faction.id)
        enemy_base = game.grid.tile_at(enemy.base_x, enemy.base_y)
        if enemy_base is not None and enemy_base.owner == faction.id:
            condition = "base_captured"
            break

    if condition is None and any(not faction.alive_units() for faction in game.factions):
        condition = "elimination"

    game.victory_condition = condition
    return condition


def determine_outcome(game: Game) -> Outcome:
    """Decide the final outcome by tile count.

    More tiles wins and equal counts are a draw, whatever condition ended
    the match. A base capture can therefore still end in a draw.
    """
    red = count_tiles_owned_by(game, game.factions.red.id)
    blue = count_tiles_owned_by(game, game.factions.blue.id)
    if red == blue:
        return Outcome.DRAW
    return Outcome.RED_WINS if red > blue else Outcome.BLUE_WINS
