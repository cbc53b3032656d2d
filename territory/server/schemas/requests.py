"""Pydantic request schemas for API endpoints."""

from pydantic import Field

from ...config import BatchConfig, SimulationConfig


class CreateSimulationRequest(SimulationConfig):
    """Request to run a new simulation."""

    includeLog: bool = Field(  # noqa: N815
        default=True, description="Return the full event log with the result"
    )


class CreateBatchRequest(BatchConfig):
    """Request to run a batch of independent simulations."""
