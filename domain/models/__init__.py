"""
Domain models for the GymTrack Progression API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- SetRecord: One logged entry of an exercise's append-only history
- RepRangeSpec: Goal-indexed rep range, sets and rest policy
- Recommendation: Suggested next-session prescription and coaching message

Usage:
    >>> from domain.models import SetRecord, RepRangeSpec, Goal

    >>> record = SetRecord(exercise_id="gym_001", date="2024-01-01", weight=100, reps=12, sets=3)
    >>> target = RepRangeSpec(goal=Goal.HYPERTROPHY, min_reps=8, max_reps=12, sets=3, rest_seconds=60)

    >>> # Serialize to JSON
    >>> json_str = record.model_dump_json()
"""

from domain.models.recommendation import Recommendation, RecommendationAction
from domain.models.rep_range import Goal, RepRangeSpec
from domain.models.set_record import SetRecord, WeightUnit

__all__ = [
    # Main entities
    "SetRecord",
    "RepRangeSpec",
    "Recommendation",
    # Enums
    "Goal",
    "WeightUnit",
    "RecommendationAction",
]
