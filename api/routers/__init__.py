"""
Router package for the GymTrack Progression API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- progression: Next-workout recommendations, history logging and progress metrics
"""

from api.routers.health import router as health_router
from api.routers.progression import router as progression_router

__all__ = [
    "health_router",
    "progression_router",
]
