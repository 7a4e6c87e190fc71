import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

# --- Imports ---
from src.core.config import FetcherSettings, TOP_PERCENTILES, log_level
from src.core.entities.threshold import ThresholdReport
from src.core.errors import ResolveError
from src.core.interfaces.datasource import ILeaderboardSource
from src.core.services import ThresholdService
from src.infrastructure.gateways.http_fetcher import HttpFetcher, build_client
from src.infrastructure.gateways.leaderboard_api import LeaderboardGateway

# Setup Logging
logging.basicConfig(level=log_level())
logger = logging.getLogger("TierCut")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Shared, connection-pooled client for every request's lookups
    app.state.settings = FetcherSettings()
    app.state.http_client = build_client(app.state.settings)
    logger.info(f"HTTP client ready. Leaderboard: {app.state.settings.base_url}")
    try:
        yield
    finally:
        await app.state.http_client.aclose()


app = FastAPI(
    title="TierCut API",
    version="1.0.0",
    description="Leaderboard point thresholds at fixed percentile cutoffs",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Dependency Injection ---

def get_datasource(request: Request) -> ILeaderboardSource:
    settings = request.app.state.settings
    return LeaderboardGateway(HttpFetcher(request.app.state.http_client, settings))

# --- Endpoints ---

@app.get("/health")
async def health():
    return {"status": "healthy", "percentiles": list(TOP_PERCENTILES)}

@app.get("/v1/thresholds", response_model=ThresholdReport)
async def get_thresholds(gateway: ILeaderboardSource = Depends(get_datasource)):
    """
    Tier cutoffs:
    Fetches the participant total, looks up the participant at each
    percentile rank and returns their points, most exclusive tier first.
    """
    try:
        return await ThresholdService(gateway).get_thresholds()
    except ResolveError as e:
        logger.error(f"Threshold resolution failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))
