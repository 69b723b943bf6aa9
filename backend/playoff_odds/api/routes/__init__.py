"""
API route modules.
"""

from .standings_routes import router as standings_router
from .simulations_routes import router as simulations_router
from .what_if_routes import router as what_if_router

__all__ = ["standings_router", "simulations_router", "what_if_router"]
