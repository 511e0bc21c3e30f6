"""
Progression Service for next-workout recommendations.

This module provides the business logic around the progression engine:
- Fetching history and the goal's rep range from their providers
- Computing the next recommended session
- Logging new sets
- Progress summaries and chart series
"""
from datetime import datetime
from typing import List, Optional
import logging

from application.ports.history_repository import HistoryRepository
from application.ports.rep_range_repository import RepRangeRepository
from backend.core.progress_metrics import (
    ProgressPoint,
    ProgressSummary,
    progress_series,
    summarize_history,
)
from backend.core.progression_engine import (
    DEFAULT_POLICY,
    ProgressionPolicy,
    compute_next_workout,
)
from domain.models import Goal, Recommendation, RepRangeSpec, SetRecord, WeightUnit

logger = logging.getLogger(__name__)


class ProgressionService:
    """
    Service for exercise progression recommendations and analytics.

    Holds no state of its own beyond its collaborators, so one instance can
    serve concurrent requests.
    """

    def __init__(
        self,
        history_repo: HistoryRepository,
        rep_range_repo: RepRangeRepository,
        policy: Optional[ProgressionPolicy] = None,
    ):
        """
        Initialize the progression service.

        Args:
            history_repo: History provider for logged sets
            rep_range_repo: Rep-range provider for goal policies
            policy: Weight-increase rule (default: 2.5%, 0.5 step, 1.0 minimum)
        """
        self._history_repo = history_repo
        self._rep_range_repo = rep_range_repo
        self._policy = policy or DEFAULT_POLICY

    @property
    def policy(self) -> ProgressionPolicy:
        return self._policy

    def get_rep_range(self, exercise_id: str, goal: Goal) -> RepRangeSpec:
        """
        Get the rep range for an exercise and goal.

        Raises:
            ExerciseNotFoundError: No rep ranges configured for the exercise
        """
        return self._rep_range_repo.get_rep_range_spec(exercise_id, goal)

    def get_weight_unit(self, exercise_id: str) -> WeightUnit:
        """Get the unit an exercise is logged in, as configured for it."""
        return self._rep_range_repo.get_weight_unit(exercise_id)

    def recommend_next_workout(self, exercise_id: str, goal: Goal) -> Recommendation:
        """
        Recommend the next session for an exercise.

        Args:
            exercise_id: Exercise identifier
            goal: The user's active training goal

        Returns:
            Recommendation from the progression engine

        Raises:
            ExerciseNotFoundError: No rep ranges configured for the exercise
            InvalidSpecError: The configured rep range is malformed
        """
        target = self.get_rep_range(exercise_id, goal)
        history = self._history_repo.get_history(exercise_id)

        recommendation = compute_next_workout(history, target, self._policy)
        logger.info(
            "Recommendation for %s (%s): %s from %d records",
            exercise_id,
            target.goal.value,
            recommendation.action.value,
            len(history),
        )
        return recommendation

    def log_set(self, record: SetRecord) -> SetRecord:
        """
        Append a logged set to the exercise's history.

        Args:
            record: The performance to log

        Returns:
            The stored record
        """
        stored = self._history_repo.add(record)
        logger.info(
            f"Logged {stored.sets}x{stored.reps} @ {stored.weight:g} {stored.weight_unit.value} "
            f"for {stored.exercise_id}"
        )
        return stored

    def get_history(self, exercise_id: str) -> List[SetRecord]:
        """
        Get an exercise's history, newest first.
        """
        history = self._history_repo.get_history(exercise_id)
        return sorted(history, key=lambda r: r.date, reverse=True)

    def get_progress_summary(
        self,
        exercise_id: str,
        *,
        time_range: str = "all",
        now: Optional[datetime] = None,
    ) -> ProgressSummary:
        """
        Get summary metrics for an exercise over a time range.

        Args:
            exercise_id: Exercise identifier
            time_range: "7", "30" or "all"
            now: Reference time (default: current UTC time)
        """
        return summarize_history(self._history_repo.get_history(exercise_id), time_range, now)

    def get_progress_series(
        self,
        exercise_id: str,
        *,
        metric: str = "volume",
        time_range: str = "all",
        now: Optional[datetime] = None,
    ) -> List[ProgressPoint]:
        """
        Get a chart series for an exercise.

        Args:
            exercise_id: Exercise identifier
            metric: "volume", "weight" or "reps"
            time_range: "7", "30" or "all"
            now: Reference time (default: current UTC time)
        """
        return progress_series(
            self._history_repo.get_history(exercise_id),
            metric,
            time_range,
            now,
        )
