"""Per-unit decision policy.

Each time a unit acts, the board is evaluated fresh and exactly one action
is chosen by strict priority:

1. attack  - an enemy stands on an orthogonally adjacent tile
2. capture - the unit's own tile is not owned by its faction
3. move    - step toward the nearest enemy unit, else the nearest neutral
             tile, else the enemy base
4. patrol  - nowhere to step; wander to a random neighbor if idle wander is
             enabled, otherwise hold

The policy only decides. Applying the action is the turn executor's job.
"""

from dataclasses import dataclass
from typing import Optional

from ..models.game import Game
from ..models.tile import Tile
from ..models.unit import Unit
from ..utils.distance import manhattan_distance
from .movement import next_step


@dataclass
class Action:
    """A decision made for one unit on one turn.

    Attributes:
        kind: "attack", "capture", "move", "patrol", or "hold"
        unit: The acting unit
        target: Enemy unit to attack (attack only)
        tile: Tile to capture (capture only)
        destination: Tile position to move to (move and patrol only)
    """

    kind: str
    unit: Unit
    target: Optional[Unit] = None
    tile: Optional[Tile] = None
    destination: Optional[tuple[int, int]] = None


def find_adjacent_enemies(game: Game, unit: Unit) -> list[Unit]:
    """Living enemy units on tiles next to a unit.

    Ordered by neighbor order (right, left, down, up), then roster order.
    """
    enemy = game.enemy_of(unit.owner)
    enemy_units = enemy.alive_units()
    adjacent = []
    for tile in game.grid.neighbors(unit.x, unit.y):
        for other in enemy_units:
            if other.x == tile.x and other.y == tile.y:
                adjacent.append(other)
    return adjacent


def find_target_position(game: Game, unit: Unit) -> tuple[int, int]:
    """Pick where a unit should head.

    Nearest living enemy unit first, then the nearest neutral tile, then
    the enemy base. Ties keep the first candidate found (roster order for
    units, row-major order for tiles).
    """
    nearest_enemy = None
    best = None
    for other in game.enemy_of(unit.owner).alive_units():
        dist = manhattan_distance(unit.x, unit.y, other.x, other.y)
        if best is None or dist < best:
            best = dist
            nearest_enemy = other
    if nearest_enemy is not None:
        return (nearest_enemy.x, nearest_enemy.y)

    nearest_neutral = None
    best = None
    for tile in game.grid.tiles():
        if not tile.is_neutral:
            continue
        dist = manhattan_distance(unit.x, unit.y, tile.x, tile.y)
        if best is None or dist < best:
            best = dist
            nearest_neutral = tile
    if nearest_neutral is not None:
        return (nearest_neutral.x, nearest_neutral.y)

    return game.enemy_of(unit.owner).base_pos


def choose_action(game: Game, unit: Unit) -> Action:
    """Decide what a living unit does this turn.

    Args:
        game: Current game state
        unit: Unit about to act

    Returns:
        The chosen Action
    """
    adjacent = find_adjacent_enemies(game, unit)
    if adjacent:
        return Action(kind="attack", unit=unit, target=adjacent[0])

    tile = game.grid.tile_at(unit.x, unit.y)
    if tile is not None and tile.owner != unit.owner:
        return Action(kind="capture", unit=unit, tile=tile)

    target_x, target_y = find_target_position(game, unit)
    step = next_step(game.grid, unit, target_x, target_y)
    if step is not None:
        return Action(kind="move", unit=unit, destination=step)

    if game.idle_wander:
        neighbors = game.grid.neighbors(unit.x, unit.y)
        if neighbors:
            choice = game.rng.choice(neighbors)
            return Action(kind="patrol", unit=unit, destination=(choice.x, choice.y))

    return Action(kind="hold", unit=unit)
