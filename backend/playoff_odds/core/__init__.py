"""
Core configuration.
"""

from .config import (
    CORS_ORIGINS,
    LOG_LEVEL,
    DEFAULT_TRIALS,
    MAX_TRIALS,
    SIMULATION_WORKERS,
    SIMULATION_TIMEOUT_SECONDS,
    WIN_PROB_STEEPNESS
)

__all__ = [
    "CORS_ORIGINS",
    "LOG_LEVEL",
    "DEFAULT_TRIALS",
    "MAX_TRIALS",
    "SIMULATION_WORKERS",
    "SIMULATION_TIMEOUT_SECONDS",
    "WIN_PROB_STEEPNESS",
]
