"""
Environment-driven settings for the odds service.
"""

import os


# In production, replace with specific frontend URL
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Trials per playoff-odds request when the caller does not ask for a count
DEFAULT_TRIALS = int(os.getenv("DEFAULT_TRIALS", "5000"))
MAX_TRIALS = int(os.getenv("MAX_TRIALS", "100000"))

# Worker processes per simulation (1 runs trials in the request thread)
SIMULATION_WORKERS = int(os.getenv("SIMULATION_WORKERS", "1"))

# Wall-clock budget per simulation; partial results are returned past it
SIMULATION_TIMEOUT_SECONDS = float(os.getenv("SIMULATION_TIMEOUT_SECONDS", "20"))

WIN_PROB_STEEPNESS = float(os.getenv("WIN_PROB_STEEPNESS", "8.0"))
