"""
SetRecord value object for logged exercise performance.

A SetRecord is one entry in an exercise's append-only history: the weight
lifted, the reps per set and the number of sets, stamped with the date the
user logged it.
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class WeightUnit(str, Enum):
    """Units a weight can be logged in."""

    LBS = "lbs"
    KG = "kg"
    BODYWEIGHT = "bodyweight"  # weight is added load on top of bodyweight


class SetRecord(BaseModel):
    """
    One logged unit of exercise performance.

    Dates are always stored timezone-aware. A bare ISO date ("2024-01-01")
    means midnight UTC, and a naive datetime is assumed to be UTC so that
    records from different sources can be ordered against each other.

    Examples:
        >>> record = SetRecord(exercise_id="gym_001", date="2024-01-01", weight=100, reps=12, sets=3)
        >>> record.volume
        3600.0
    """

    id: Optional[str] = Field(default=None, description="Store-assigned identifier")
    exercise_id: str = Field(..., min_length=1, description="Exercise identifier")
    date: datetime = Field(..., description="When the set was performed")
    weight: float = Field(..., ge=0, description="Weight lifted, in weight_unit")
    reps: int = Field(..., gt=0, description="Repetitions per set")
    sets: int = Field(default=1, gt=0, description="Number of sets performed")
    weight_unit: WeightUnit = Field(default=WeightUnit.LBS)
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        """Accept ISO strings (date-only or full timestamps) and date objects."""
        if isinstance(v, str):
            text = v.strip()
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            return datetime.fromisoformat(text)
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime(v.year, v.month, v.day)
        return v

    @field_validator("date")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def volume(self) -> float:
        """Total weight moved: weight x reps x sets."""
        return float(self.weight) * self.reps * self.sets

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "exercise_id": "gym_001",
                    "date": "2024-01-01T18:30:00+00:00",
                    "weight": 100,
                    "reps": 12,
                    "sets": 3,
                    "weight_unit": "lbs",
                }
            ]
        },
    }
