"""Turn-based territory capture simulation."""

from .engine.simulation import Simulation
from .models.result import Outcome, SimulationResult

__all__ = ["Simulation", "Outcome", "SimulationResult"]
