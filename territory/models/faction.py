"""Faction data model and the fixed pair of opposing factions."""

from dataclasses import dataclass, field
from typing import NamedTuple

from ..utils.constants import FACTION_IDS
from .unit import Unit


@dataclass
class Faction:
    """One of the two competing sides.

    Units are kept in spawn order, which is also the order they act in.
    The base position is fixed when the faction is created.
    """

    id: str  # "red" or "blue"
    name: str  # Display name
    base_x: int
    base_y: int
    units: list[Unit] = field(default_factory=list)

    def __post_init__(self):
        """Validate faction data after initialization."""
        if self.id not in FACTION_IDS:
            raise ValueError(f"Invalid faction id: {self.id} (must be 'red' or 'blue')")
        if not self.name:
            raise ValueError("name cannot be empty")

    @property
    def base_pos(self) -> tuple[int, int]:
        return (self.base_x, self.base_y)

    def alive_units(self) -> list[Unit]:
        """Return living units in roster order.

        Recomputed on every call since hp changes during a turn.
        """
        return [unit for unit in self.units if unit.is_alive]


class FactionPair(NamedTuple):
    """The two factions of a game, in acting order."""

    red: Faction
    blue: Faction

    def get(self, faction_id: str) -> Faction:
        """Look up a faction by id.

        Raises:
            KeyError: If faction_id is not "red" or "blue"
        """
        if faction_id == self.red.id:
            return self.red
        if faction_id == self.blue.id:
            return self.blue
        raise KeyError(faction_id)

    def enemy_of(self, faction_id: str) -> Faction:
        """Return the opposing faction."""
        return self.blue if faction_id == self.red.id else self.red
