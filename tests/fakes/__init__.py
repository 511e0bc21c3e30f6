"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeHistoryRepository, create_history_repo

    # Direct instantiation
    repo = FakeHistoryRepository()
    repo.seed_rows("gym_001", [{"date": "2024-01-01", "weight": 100, "reps": 10}])

    # Factory function with pre-populated data
    repo = create_history_repo(exercise_id="gym_001", num_sessions=5)
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from domain.models import Goal, RepRangeSpec, SetRecord

# Import all fake implementations
from tests.fakes.history_repository import FakeHistoryRepository
from tests.fakes.rep_range_repository import FakeRepRangeRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_history_repo(
    *,
    exercise_id: str = "gym_001",
    num_sessions: int = 0,
    start: Optional[datetime] = None,
    weight: float = 100.0,
    reps: int = 10,
) -> FakeHistoryRepository:
    """
    Create a FakeHistoryRepository with optional daily sessions.

    Args:
        exercise_id: Exercise the sessions belong to
        num_sessions: Number of sessions to create, one per day
        start: Date of the first session (default: 2024-01-01 UTC)
        weight: Weight of every session
        reps: Reps of every session

    Returns:
        Pre-populated FakeHistoryRepository
    """
    repo = FakeHistoryRepository()
    start = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    records: List[SetRecord] = [
        SetRecord(
            exercise_id=exercise_id,
            date=start + timedelta(days=i),
            weight=weight,
            reps=reps,
            sets=3,
        )
        for i in range(num_sessions)
    ]
    repo.seed(records)
    return repo


def create_rep_range_repo(*, exercise_id: str = "gym_001") -> FakeRepRangeRepository:
    """
    Create a FakeRepRangeRepository with strength and hypertrophy ranges.

    Mirrors the Barbell Bench Press entry of the exercise catalog.
    """
    return FakeRepRangeRepository({
        exercise_id: [
            RepRangeSpec(goal=Goal.HYPERTROPHY, min_reps=8, max_reps=12, sets=4, rest_seconds=60),
            RepRangeSpec(goal=Goal.STRENGTH, min_reps=3, max_reps=5, sets=5, rest_seconds=120),
        ]
    })


__all__ = [
    "FakeHistoryRepository",
    "FakeRepRangeRepository",
    "create_history_repo",
    "create_rep_range_repo",
]
