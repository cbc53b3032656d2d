"""Utility functions and constants for the territory simulation."""

from .constants import (
    CAPTURE_DECAY,
    CAPTURE_THRESHOLD,
    DEFAULT_COLS,
    DEFAULT_ROWS,
    FACTION_IDS,
    FACTION_NAMES,
    MAX_LEVEL,
    MIN_LEVEL,
)
from .distance import manhattan_distance
from .rng import GameRNG

__all__ = [
    "CAPTURE_DECAY",
    "CAPTURE_THRESHOLD",
    "DEFAULT_COLS",
    "DEFAULT_ROWS",
    "FACTION_IDS",
    "FACTION_NAMES",
    "MAX_LEVEL",
    "MIN_LEVEL",
    "manhattan_distance",
    "GameRNG",
]
