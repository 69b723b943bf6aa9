"""
API module.
"""

from .routes import standings_router, simulations_router, what_if_router

__all__ = [
    "standings_router",
    "simulations_router",
    "what_if_router",
]
