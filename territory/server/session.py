"""Simulation session management for the HTTP API."""

import asyncio
import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from ..config import SimulationConfig
from ..engine.simulation import Simulation
from ..models.result import SimulationResult

logger = logging.getLogger(__name__)

MAX_SESSIONS = 256  # Finished simulations kept for lookup


@dataclass
class SimulationSession:
    """One simulation kept around so its result and board can be fetched."""

    id: str
    simulation: Simulation
    result: Optional[SimulationResult] = None

    async def run(self) -> SimulationResult:
        """Run the simulation in a worker thread.

        A simulation never yields, so running it on the event loop would
        block every other request until it finished.
        """
        self.result = await asyncio.to_thread(self.simulation.run)
        return self.result


class SimulationSessionManager:
    """In-memory registry of simulation sessions.

    Holds at most max_sessions sessions; creating one more evicts the
    oldest.
    """

    def __init__(self, max_sessions: int = MAX_SESSIONS):
        if max_sessions < 1:
            raise ValueError(f"Invalid max_sessions: {max_sessions} (must be >= 1)")
        self.max_sessions = max_sessions
        self.sessions: dict[str, SimulationSession] = {}

    def create_session(self, config: SimulationConfig) -> SimulationSession:
        """Build a simulation and register it under a fresh id."""
        session_id = f"sim-{uuid.uuid4().hex[:8]}"
        session = SimulationSession(id=session_id, simulation=Simulation.from_config(config))
        while len(self.sessions) >= self.max_sessions:
            oldest = next(iter(self.sessions))
            del self.sessions[oldest]
            logger.info(f"Evicted simulation {oldest} (session limit {self.max_sessions})")
        self.sessions[session_id] = session
        logger.info(
            f"Created simulation {session_id} (level {session.simulation.game.level}, "
            f"{config.cols}x{config.rows}, seed {config.seed})"
        )
        return session

    def get(self, session_id: str) -> Optional[SimulationSession]:
        return self.sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        """Remove a session. Returns False if it did not exist."""
        if session_id not in self.sessions:
            return False
        del self.sessions[session_id]
        logger.info(f"Deleted simulation {session_id}")
        return True

    def clear(self) -> None:
        self.sessions.clear()
