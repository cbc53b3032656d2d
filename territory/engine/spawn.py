"""Spawn policy: roster size, unit levels and unit types by difficulty.

The power curve is deliberately coarse. Higher difficulty means more and
stronger units on both sides; it is meant to scale monotonically, not to
be balanced.
"""

import logging

from ..models.faction import Faction
from ..models.game import Game
from ..models.unit import Unit
from ..utils.constants import (
    BASE_ROSTER_SIZE,
    MAX_UNIT_LEVEL,
    ROSTER_LEVEL_STEP,
    SCOUT_MIN_LEVEL,
    TANK_MIN_LEVEL,
)

logger = logging.getLogger(__name__)


def roster_size(level: int) -> int:
    """Number of units each faction spawns at a difficulty level."""
    return BASE_ROSTER_SIZE + level // ROSTER_LEVEL_STEP


def unit_level_for(level: int) -> int:
    """Level of every spawned unit: one unit level per ten difficulty levels."""
    return min(MAX_UNIT_LEVEL, max(1, level // 10))


def unit_type_for_slot(slot: int, level: int) -> str:
    """Unit type for a roster slot.

    Slot 0 becomes a scout from level 10 and slot 1 a tank from level 30.
    Every other slot is infantry.
    """
    if slot == 0 and level >= SCOUT_MIN_LEVEL:
        return "scout"
    if slot == 1 and level >= TANK_MIN_LEVEL:
        return "tank"
    return "infantry"


def spawn_roster(game: Game, faction: Faction) -> list[Unit]:
    """Spawn a faction's full roster stacked on its base tile.

    Args:
        game: Game whose unit-id counter hands out ids
        faction: Faction receiving the units

    Returns:
        The newly spawned units, in spawn order
    """
    unit_level = unit_level_for(game.level)
    spawned = []
    for slot in range(roster_size(game.level)):
        unit = Unit(
            id=game.next_unit_id(),
            owner=faction.id,
            x=faction.base_x,
            y=faction.base_y,
            level=unit_level,
            unit_type=unit_type_for_slot(slot, game.level),
        )
        faction.units.append(unit)
        spawned.append(unit)

    logger.debug(
        f"Spawned {len(spawned)} level-{unit_level} units for {faction.name} "
        f"at ({faction.base_x},{faction.base_y})"
    )
    return spawned


def spawn_rosters(game: Game) -> list[Unit]:
    """Spawn both rosters, red first."""
    units = []
    for faction in game.factions:
        units.extend(spawn_roster(game, faction))
    return units
