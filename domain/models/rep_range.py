"""
Goal and RepRangeSpec reference data.

Each exercise carries one rep range per training goal. The ranges are static
reference data; which one applies is decided by the user's active goal.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Goal(str, Enum):
    """Training objective that selects a rep-range policy."""

    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"
    TONE = "tone"


class RepRangeSpec(BaseModel):
    """
    Prescribed rep range, set count and rest for one goal.

    Only field types are checked here. Cross-field rules (min_reps <= max_reps,
    sets >= 1) are enforced by the progression engine, which raises
    InvalidSpecError.
    """

    goal: Goal
    min_reps: int = Field(..., description="Bottom of the rep range")
    max_reps: int = Field(..., description="Top of the rep range")
    sets: int = Field(..., description="Prescribed number of sets")
    rest_seconds: int = Field(default=60, description="Rest between sets")

    def __str__(self) -> str:
        return f"{self.goal.value}: {self.sets} x {self.min_reps}-{self.max_reps} ({self.rest_seconds}s rest)"

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"goal": "hypertrophy", "min_reps": 8, "max_reps": 12, "sets": 3, "rest_seconds": 60},
            ]
        },
    }
