"""Game state container."""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from ..utils.constants import BASE_MAX_TURNS, MAX_LEVEL, MAX_TURNS_PER_LEVEL, MIN_LEVEL
from ..utils.rng import GameRNG
from .faction import Faction, FactionPair
from .grid import Grid
from .unit import Unit

logger = logging.getLogger(__name__)

VICTORY_CONDITIONS = ("majority", "base_captured", "elimination", "turn_limit")


@dataclass
class Game:
    """Main simulation state container.

    The Game holds the grid, both factions, the event log and the RNG for
    one simulation. All engine logic operates on this state, and nothing in
    it is shared with any other game.
    """

    level: int  # Difficulty level (1-100)
    grid: Grid
    factions: FactionPair
    seed: Optional[int] = None  # RNG seed
    rng: Optional[GameRNG] = None  # Seeded RNG instance
    turn: int = 0  # Turns completed so far
    max_turns: Optional[int] = None  # Turn cap (derived from level if not given)
    log: list[str] = field(default_factory=list)  # Append-only event log
    unit_id_counter: int = 1  # Next unit id
    jitter: bool = True  # Random perturbation in combat math
    idle_wander: bool = False  # Units with nowhere to go step to a random neighbor
    victory_condition: Optional[str] = None  # Set once the match has ended

    def __post_init__(self):
        """Initialize RNG and turn cap, then validate."""
        if self.rng is None:
            self.rng = GameRNG(self.seed)
        if self.max_turns is None:
            self.max_turns = BASE_MAX_TURNS + math.floor(self.level * MAX_TURNS_PER_LEVEL)
        if not (MIN_LEVEL <= self.level <= MAX_LEVEL):
            raise ValueError(f"Invalid level: {self.level} (must be {MIN_LEVEL}-{MAX_LEVEL})")
        if self.turn < 0:
            raise ValueError(f"Invalid turn: {self.turn} (must be >= 0)")
        if self.victory_condition not in (None, *VICTORY_CONDITIONS):
            raise ValueError(f"Invalid victory_condition: {self.victory_condition}")

    @property
    def finished(self) -> bool:
        return self.victory_condition is not None

    def faction(self, faction_id: str) -> Faction:
        return self.factions.get(faction_id)

    def enemy_of(self, faction_id: str) -> Faction:
        return self.factions.enemy_of(faction_id)

    def next_unit_id(self) -> int:
        """Hand out the next unit id. Ids are never reused."""
        unit_id = self.unit_id_counter
        self.unit_id_counter += 1
        return unit_id

    def record(self, message: str) -> None:
        """Append an entry to the event log."""
        self.log.append(message)
        logger.debug(message)

    def unit_at(self, x: int, y: int) -> Optional[Unit]:
        """Return the first living unit at (x, y), in faction then roster order."""
        for faction in self.factions:
            for unit in faction.alive_units():
                if unit.x == x and unit.y == y:
                    return unit
        return None
