"""
Fantasy Playoff Odds Simulator - FastAPI Application

Main entry point for the web API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import standings_router, simulations_router, what_if_router
from .core.config import CORS_ORIGINS, LOG_LEVEL, DEFAULT_TRIALS, SIMULATION_WORKERS


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger("playoff_odds")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(
        "Starting playoff odds API (default trials=%d, workers=%d)",
        DEFAULT_TRIALS, SIMULATION_WORKERS
    )
    yield
    # Shutdown


# Create FastAPI app
app = FastAPI(
    title="Fantasy Playoff Odds Simulator",
    description="Standings and Monte Carlo playoff probabilities for fantasy football leagues.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(standings_router, prefix="/api")
app.include_router(simulations_router, prefix="/api")
app.include_router(what_if_router, prefix="/api")


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Fantasy Playoff Odds Simulator API",
        "version": "1.0.0",
        "docs": "/api/docs",
        "health": "/api/health"
    }
