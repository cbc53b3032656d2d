"""Pydantic configuration models for simulations and batches."""

from pydantic import BaseModel, Field, field_validator

from .utils.constants import DEFAULT_COLS, DEFAULT_ROWS, MAX_LEVEL, MIN_LEVEL


class SimulationConfig(BaseModel):
    """Numeric configuration for one simulation.

    Difficulty is clamped into range rather than rejected. Grid dimensions
    must be positive; anything else fails validation before a game is built.
    """

    level: int = Field(default=MIN_LEVEL, description="Difficulty level, clamped to 1-100")
    cols: int = Field(default=DEFAULT_COLS, gt=0, description="Grid width")
    rows: int = Field(default=DEFAULT_ROWS, gt=0, description="Grid height")
    seed: int | None = Field(default=None, description="Optional RNG seed for reproducible runs")
    jitter: bool = Field(default=True, description="Apply random jitter to combat math")
    idle_wander: bool = Field(
        default=False, description="Let units with nowhere to go step to a random neighbor"
    )

    @field_validator("level")
    @classmethod
    def clamp_level(cls, value: int) -> int:
        return max(MIN_LEVEL, min(value, MAX_LEVEL))


class BatchConfig(SimulationConfig):
    """Configuration for a batch of independent simulations.

    Run i uses seed + i when a seed is given, so a batch is reproducible
    as a whole.
    """

    runs: int = Field(default=10, gt=0, le=10_000, description="Number of simulations")
    workers: int = Field(default=1, ge=1, le=64, description="Worker processes")
