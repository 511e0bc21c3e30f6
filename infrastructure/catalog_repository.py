"""
Catalog-backed RepRangeRepository.

Serves rep ranges from the static exercise dictionary
(shared/dictionaries/rep_ranges.yaml). No database required.
"""
from typing import List
import logging

from backend.core import catalog
from domain.models import Goal, RepRangeSpec, WeightUnit

logger = logging.getLogger(__name__)


class CatalogRepRangeRepository:
    """
    Static implementation of RepRangeRepository.

    Parsed ranges are cached per exercise since the catalog never changes
    at runtime.
    """

    def __init__(self):
        self._cache: dict = {}

    def get_rep_ranges(self, exercise_id: str) -> List[RepRangeSpec]:
        """Get all configured rep ranges for an exercise."""
        if exercise_id not in self._cache:
            self._cache[exercise_id] = catalog.rep_ranges_for(exercise_id)
        return list(self._cache[exercise_id])

    def get_rep_range_spec(self, exercise_id: str, goal: Goal) -> RepRangeSpec:
        """Get the rep range for a goal, or the first configured range."""
        ranges = self.get_rep_ranges(exercise_id)
        spec = catalog.select_rep_range(ranges, goal, exercise_id)
        if spec.goal != Goal(goal):
            logger.warning(
                f"No {Goal(goal).value} rep range for {exercise_id}, using {spec.goal.value}"
            )
        return spec

    def get_weight_unit(self, exercise_id: str) -> WeightUnit:
        """Get the unit the exercise is logged in (lbs if unknown)."""
        return catalog.weight_unit_for(exercise_id)
