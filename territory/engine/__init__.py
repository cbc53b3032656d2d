"""Simulation engine components."""

from .setup import create_game
from .simulation import Simulation
from .turn_executor import TurnExecutor, TurnResults

__all__ = [
    "create_game",
    "Simulation",
    "TurnExecutor",
    "TurnResults",
]
