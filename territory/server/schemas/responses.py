"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel, Field


class SimulationResponse(BaseModel):
    """Response containing a finished simulation."""

    simulationId: str  # noqa: N815
    level: int
    seed: int | None
    result: str
    resultLabel: str  # noqa: N815
    turns: int
    condition: str | None
    tileCounts: dict[str, int]  # noqa: N815
    map: str
    log: list[str] | None = None


class MapResponse(BaseModel):
    """Response containing the ASCII board."""

    simulationId: str  # noqa: N815
    turn: int
    map: str


class BatchResponse(BaseModel):
    """Response after running a batch."""

    level: int
    runs: int
    outcomes: dict[str, int]
    conditions: dict[str, int]
    meanTurns: float  # noqa: N815
    minTurns: int  # noqa: N815
    maxTurns: int  # noqa: N815
    turns: list[int] = Field(default_factory=list)
