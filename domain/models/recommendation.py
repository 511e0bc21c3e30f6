"""
Recommendation produced by the progression engine.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from domain.models.set_record import WeightUnit


class RecommendationAction(str, Enum):
    """Which progression branch produced a recommendation."""

    FIRST_LOG = "first_log"
    INCREASE_WEIGHT = "increase_weight"
    BUILD_REPS = "build_reps"
    HOLD = "hold"


class Recommendation(BaseModel):
    """
    Suggested prescription for the next session of an exercise.

    Numeric fields are None when there is no history to base them on; the
    message is always present.
    """

    weight: Optional[float] = None
    reps: Optional[int] = None
    sets: Optional[int] = None
    message: str = Field(..., min_length=1)
    action: RecommendationAction = RecommendationAction.FIRST_LOG
    weight_unit: Optional[WeightUnit] = None
    rest_seconds: Optional[int] = None

    @property
    def has_prescription(self) -> bool:
        """True when the recommendation carries weight/reps/sets."""
        return self.weight is not None

    model_config = {"frozen": True}
