"""Data models for the territory simulation."""

from .faction import Faction, FactionPair
from .game import Game
from .grid import Grid
from .result import Outcome, SimulationResult
from .tile import Tile
from .unit import Unit

__all__ = [
    "Tile",
    "Unit",
    "Faction",
    "FactionPair",
    "Grid",
    "Game",
    "Outcome",
    "SimulationResult",
]
