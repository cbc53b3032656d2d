"""Tile data model."""

from dataclasses import dataclass
from typing import Optional

from ..utils.constants import BASE_DEFENSE, CAPTURE_THRESHOLD, FACTION_IDS


@dataclass
class Tile:
    """One grid cell.

    A tile is owned by a faction or is neutral. Units standing on a tile
    they do not own push its capture progress up; once the progress reaches
    the capture threshold the tile flips to that faction and the progress
    starts again from zero.
    """

    x: int
    y: int
    owner: Optional[str] = None  # "red", "blue", or None (neutral)
    defense: int = BASE_DEFENSE
    capture_progress: float = 0.0

    def __post_init__(self):
        """Validate tile data after initialization."""
        if self.owner not in (None, *FACTION_IDS):
            raise ValueError(
                f"Invalid owner: {self.owner} (must be None, 'red', or 'blue')"
            )
        if not (0 <= self.capture_progress < CAPTURE_THRESHOLD):
            raise ValueError(
                f"Invalid capture_progress: {self.capture_progress} "
                f"(must be in [0, {CAPTURE_THRESHOLD}))"
            )

    @property
    def is_neutral(self) -> bool:
        return self.owner is None
