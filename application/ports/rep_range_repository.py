"""
Rep Range Repository Interface (Port).

This module defines the abstract interface for the goal-indexed rep-range
reference data attached to each exercise, plus the unit its weight is
logged in.
"""
from typing import List, Protocol

from domain.models import Goal, RepRangeSpec, WeightUnit


class RepRangeRepository(Protocol):
    """
    Abstract interface for rep-range reference data.
    """

    def get_rep_ranges(self, exercise_id: str) -> List[RepRangeSpec]:
        """
        Get all configured rep ranges for an exercise, in configured order.

        Args:
            exercise_id: Exercise identifier

        Returns:
            List of RepRangeSpec, empty if the exercise is unknown
        """
        ...

    def get_rep_range_spec(self, exercise_id: str, goal: Goal) -> RepRangeSpec:
        """
        Get the rep range matching a goal.

        Falls back to the first configured range when no entry matches the goal.

        Args:
            exercise_id: Exercise identifier
            goal: The user's active training goal

        Returns:
            The matching (or fallback) RepRangeSpec

        Raises:
            ExerciseNotFoundError: No rep ranges are configured for the exercise
        """
        ...

    def get_weight_unit(self, exercise_id: str) -> WeightUnit:
        """
        Get the unit an exercise's weight is logged in.

        Args:
            exercise_id: Exercise identifier

        Returns:
            The configured WeightUnit, lbs if the exercise is unknown
        """
        ...
