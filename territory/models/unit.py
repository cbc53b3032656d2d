"""Unit data model with level-derived stats."""

import math
from dataclasses import dataclass, field

from ..utils.constants import FACTION_IDS, MAX_UNIT_LEVEL, UNIT_TYPES


@dataclass
class Unit:
    """A single combat unit.

    Stats are derived from level and type when the unit is created. After
    that only hp (combat) and position (movement) change. A unit whose hp
    drops to zero or below is dead for good but stays in its faction's
    roster.
    """

    id: int  # Unique, never reused
    owner: str  # "red" or "blue"
    x: int
    y: int
    level: int = 1  # 1-10
    unit_type: str = "infantry"  # "infantry", "scout", or "tank"
    max_hp: int = field(init=False)
    hp: int = field(init=False)
    base_atk: int = field(init=False)
    base_def: int = field(init=False)
    capture_rate: int = field(init=False)

    def __post_init__(self):
        """Validate unit data and derive stats."""
        if self.owner not in FACTION_IDS:
            raise ValueError(f"Invalid owner: {self.owner} (must be 'red' or 'blue')")
        if not (1 <= self.level <= MAX_UNIT_LEVEL):
            raise ValueError(f"Invalid level: {self.level} (must be 1-{MAX_UNIT_LEVEL})")
        if self.unit_type not in UNIT_TYPES:
            raise ValueError(
                f"Invalid unit_type: {self.unit_type} (must be one of {', '.join(UNIT_TYPES)})"
            )

        self.max_hp = 20 + self.level * 5
        self.hp = self.max_hp
        self.base_atk = 6 + math.floor(self.level * 1.5)
        self.base_def = 3 + math.floor(self.level * 1.2)
        # Scouts capture fastest
        if self.unit_type == "scout":
            self.capture_rate = 8 + self.level
        else:
            self.capture_rate = 4 + math.floor(self.level * 0.8)

    @property
    def is_alive(self) -> bool:
        return self.hp > 0
