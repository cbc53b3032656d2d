"""FastAPI server for running territory capture simulations.

Provides an HTTP API for running single simulations and batches, e.g. for
balancing tools that want results without embedding the engine.
"""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from ..analysis.batch import BatchSummary, run_batch
from .schemas.requests import CreateBatchRequest, CreateSimulationRequest
from .schemas.responses import BatchResponse, MapResponse, SimulationResponse
from .session import SimulationSession, SimulationSessionManager

logger = logging.getLogger(__name__)

# Global session manager
sessions = SimulationSessionManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Territory simulation server starting...")
    yield
    logger.info("Territory simulation server shutting down...")
    sessions.clear()


app = FastAPI(
    title="Territory Simulation API",
    description="Run turn-based territory capture simulations over HTTP",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _simulation_response(session: SimulationSession, include_log: bool = True) -> SimulationResponse:
    result = session.result
    return SimulationResponse(
        simulationId=session.id,
        level=result.level,
        seed=result.seed,
        result=result.result.value,
        resultLabel=result.result.label,
        turns=result.turns,
        condition=result.condition,
        tileCounts=result.tile_counts,
        map=session.simulation.render_map(),
        log=result.log if include_log else None,
    )


def _batch_response(summary: BatchSummary) -> BatchResponse:
    return BatchResponse(
        level=summary.level,
        runs=summary.runs,
        outcomes=summary.outcomes,
        conditions=summary.conditions,
        meanTurns=summary.mean_turns,
        minTurns=summary.min_turns,
        maxTurns=summary.max_turns,
        turns=[run.turns for run in summary.results],
    )


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Territory Simulation",
        "status": "operational",
        "activeSimulations": len(sessions.sessions),
    }


@app.post("/api/simulations", response_model=SimulationResponse)
async def create_simulation(request: CreateSimulationRequest):
    """Run a new simulation to completion.

    Example:
        POST /api/simulations
        {"level": 40, "cols": 10, "rows": 8, "seed": 7, "jitter": false}
    """
    session = sessions.create_session(request)
    try:
        await session.run()
    except Exception as e:
        logger.error(f"Simulation {session.id} failed: {e}", exc_info=True)
        sessions.delete(session.id)
        raise HTTPException(status_code=500, detail=f"Simulation failed: {str(e)}")

    return _simulation_response(session, include_log=request.includeLog)


@app.get("/api/simulations/{simulation_id}", response_model=SimulationResponse)
async def get_simulation(simulation_id: str, include_log: bool = True):
    """Fetch a finished simulation."""
    session = sessions.get(simulation_id)
    if not session or session.result is None:
        raise HTTPException(status_code=404, detail="Simulation not found")
    return _simulation_response(session, include_log=include_log)


@app.get("/api/simulations/{simulation_id}/map", response_model=MapResponse)
async def get_simulation_map(simulation_id: str):
    """Fetch the final ASCII board of a simulation."""
    session = sessions.get(simulation_id)
    if not session:
        raise HTTPException(status_code=404, detail="Simulation not found")
    return MapResponse(
        simulationId=simulation_id,
        turn=session.simulation.game.turn,
        map=session.simulation.render_map(),
    )


@app.delete("/api/simulations/{simulation_id}")
async def delete_simulation(simulation_id: str):
    """Delete a simulation session."""
    if sessions.delete(simulation_id):
        return {"message": f"Simulation {simulation_id} deleted"}
    raise HTTPException(status_code=404, detail="Simulation not found")


@app.post("/api/batches", response_model=BatchResponse)
async def create_batch(request: CreateBatchRequest):
    """Run a batch of independent simulations and return aggregate statistics.

    Example:
        POST /api/batches
        {"level": 50, "runs": 20, "seed": 1, "workers": 4}
    """
    try:
        summary = await asyncio.to_thread(run_batch, request)
    except Exception as e:
        logger.error(f"Batch failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Batch failed: {str(e)}")
    return _batch_response(summary)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
