"""
Domain layer for the GymTrack Progression API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Goal,
    Recommendation,
    RecommendationAction,
    RepRangeSpec,
    SetRecord,
    WeightUnit,
)

__all__ = [
    "Goal",
    "Recommendation",
    "RecommendationAction",
    "RepRangeSpec",
    "SetRecord",
    "WeightUnit",
]
