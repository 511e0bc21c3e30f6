"""
Progression router for next-workout recommendations and progress tracking.

This router provides endpoints for:
- The recommended next session for an exercise and goal
- The rep range that applies to a goal
- Logging sets and reading an exercise's history
- Summary metrics and chart series over a time range
"""
import logging
import re
from dataclasses import asdict
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Path
from pydantic import BaseModel, Field

from api.deps import get_progression_service
from application.exceptions import (
    ExerciseNotFoundError,
    HistoryStoreError,
    InvalidSpecError,
)
from backend.core.progression_service import ProgressionService
from domain.models import (
    Goal,
    RecommendationAction,
    SetRecord,
    WeightUnit,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/progression",
    tags=["Progression"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class NextWorkoutResponse(BaseModel):
    """Response model for the next-workout endpoint."""
    exercise_id: str
    goal: Goal
    weight: Optional[float] = None
    weight_unit: Optional[WeightUnit] = None
    reps: Optional[int] = None
    sets: Optional[int] = None
    rest_seconds: Optional[int] = None
    action: RecommendationAction
    message: str


class RepRangeResponse(BaseModel):
    """Response model for the rep-range endpoint."""
    exercise_id: str
    requested_goal: Goal
    goal: Goal  # differs from requested_goal when the exercise has no range for it
    min_reps: int
    max_reps: int
    sets: int
    rest_seconds: int


class LogSetRequest(BaseModel):
    """Request body for logging a set."""
    date: Optional[datetime] = Field(
        default=None,
        description="When the set was performed (default: now)",
    )
    weight: float = Field(..., ge=0)
    weight_unit: Optional[WeightUnit] = Field(
        default=None,
        description="Unit of weight (default: the exercise's configured unit)",
    )
    reps: int = Field(..., gt=0)
    sets: int = Field(default=1, gt=0)
    notes: Optional[str] = Field(default=None, max_length=500)


class SetRecordResponse(BaseModel):
    """Response model for a single logged record."""
    id: Optional[str] = None
    exercise_id: str
    date: str
    weight: float
    weight_unit: WeightUnit
    reps: int
    sets: int
    volume: float
    notes: Optional[str] = None


class HistoryResponse(BaseModel):
    """Response model for exercise history endpoint."""
    exercise_id: str
    records: List[SetRecordResponse] = Field(default_factory=list)
    total: int


class ProgressSummaryResponse(BaseModel):
    """Response model for the summary endpoint."""
    exercise_id: str
    time_range: str
    session_count: int
    set_count: int
    total_volume: float
    avg_weight: float
    avg_reps: float
    max_weight: float


class ProgressPointResponse(BaseModel):
    """A single chart point."""
    date: str
    label: str
    value: float


class ProgressSeriesResponse(BaseModel):
    """Response model for the series endpoint."""
    exercise_id: str
    metric: str
    time_range: str
    points: List[ProgressPointResponse]


# =============================================================================
# Helpers
# =============================================================================


# Valid exercise ID pattern: lowercase letters, numbers, underscores and hyphens
EXERCISE_ID_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]*[a-z0-9]$|^[a-z0-9]$")


def _validate_exercise_id(exercise_id: str) -> None:
    """Validate exercise ID format."""
    if not EXERCISE_ID_PATTERN.match(exercise_id):
        raise HTTPException(
            status_code=400,
            detail="Invalid exercise_id format. Use lowercase letters, numbers, underscores and hyphens only."
        )


def _record_response(record: SetRecord) -> SetRecordResponse:
    return SetRecordResponse(
        id=record.id,
        exercise_id=record.exercise_id,
        date=record.date.isoformat(),
        weight=record.weight,
        weight_unit=record.weight_unit,
        reps=record.reps,
        sets=record.sets,
        volume=record.volume,
        notes=record.notes,
    )


def _store_unavailable(e: HistoryStoreError) -> HTTPException:
    return HTTPException(status_code=503, detail=str(e))


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/exercises/{exercise_id}/next", response_model=NextWorkoutResponse)
def get_next_workout(
    exercise_id: str = Path(..., description="Exercise ID"),
    goal: Goal = Query(Goal.HYPERTROPHY, description="Active training goal"),
    service: ProgressionService = Depends(get_progression_service),
) -> NextWorkoutResponse:
    """
    Get the recommended next session for an exercise.

    Compares the most recent logged set against the goal's rep range:
    - Top of the range reached: increase the weight, restart at the bottom
    - Below the range: keep the weight, build reps
    - Inside the range: keep the weight and reps
    """
    _validate_exercise_id(exercise_id)

    try:
        recommendation = service.recommend_next_workout(exercise_id, goal)
    except ExerciseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidSpecError as e:
        logger.error(f"Malformed rep range for {exercise_id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except HistoryStoreError as e:
        raise _store_unavailable(e)

    return NextWorkoutResponse(
        exercise_id=exercise_id,
        goal=goal,
        **recommendation.model_dump(),
    )


@router.get("/exercises/{exercise_id}/rep-range", response_model=RepRangeResponse)
def get_rep_range(
    exercise_id: str = Path(..., description="Exercise ID"),
    goal: Goal = Query(Goal.HYPERTROPHY, description="Active training goal"),
    service: ProgressionService = Depends(get_progression_service),
) -> RepRangeResponse:
    """
    Get the rep range that applies to a goal.

    Falls back to the exercise's first configured range when it has none
    for the requested goal.
    """
    _validate_exercise_id(exercise_id)

    try:
        spec = service.get_rep_range(exercise_id, goal)
    except ExerciseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return RepRangeResponse(
        exercise_id=exercise_id,
        requested_goal=goal,
        goal=spec.goal,
        min_reps=spec.min_reps,
        max_reps=spec.max_reps,
        sets=spec.sets,
        rest_seconds=spec.rest_seconds,
    )


@router.get("/exercises/{exercise_id}/history", response_model=HistoryResponse)
def get_exercise_history(
    exercise_id: str = Path(..., description="Exercise ID"),
    limit: int = Query(50, ge=1, le=500, description="Maximum records to return"),
    service: ProgressionService = Depends(get_progression_service),
) -> HistoryResponse:
    """
    Get the logged history of an exercise, newest first.
    """
    _validate_exercise_id(exercise_id)

    try:
        history = service.get_history(exercise_id)
    except HistoryStoreError as e:
        raise _store_unavailable(e)

    return HistoryResponse(
        exercise_id=exercise_id,
        records=[_record_response(r) for r in history[:limit]],
        total=len(history),
    )


@router.post(
    "/exercises/{exercise_id}/history",
    response_model=SetRecordResponse,
    status_code=201,
)
def log_set(
    body: LogSetRequest,
    exercise_id: str = Path(..., description="Exercise ID"),
    service: ProgressionService = Depends(get_progression_service),
) -> SetRecordResponse:
    """
    Log a performed set.

    The record is appended to the exercise's history; later recommendations
    use it as the baseline when it is the most recent entry.
    """
    _validate_exercise_id(exercise_id)

    record = SetRecord(
        exercise_id=exercise_id,
        date=body.date or datetime.now(timezone.utc),
        weight=body.weight,
        weight_unit=body.weight_unit or service.get_weight_unit(exercise_id),
        reps=body.reps,
        sets=body.sets,
        notes=body.notes,
    )

    try:
        stored = service.log_set(record)
    except HistoryStoreError as e:
        raise _store_unavailable(e)

    return _record_response(stored)


@router.get("/exercises/{exercise_id}/summary", response_model=ProgressSummaryResponse)
def get_progress_summary(
    exercise_id: str = Path(..., description="Exercise ID"),
    time_range: str = Query("all", description="Window in days: 7, 30 or all"),
    service: ProgressionService = Depends(get_progression_service),
) -> ProgressSummaryResponse:
    """
    Get summary metrics for an exercise.

    Total volume is weight x reps x sets summed over the window; averages
    are rounded to two decimals.
    """
    _validate_exercise_id(exercise_id)

    try:
        summary = service.get_progress_summary(exercise_id, time_range=time_range)
    except HistoryStoreError as e:
        raise _store_unavailable(e)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ProgressSummaryResponse(exercise_id=exercise_id, **asdict(summary))


@router.get("/exercises/{exercise_id}/series", response_model=ProgressSeriesResponse)
def get_progress_series(
    exercise_id: str = Path(..., description="Exercise ID"),
    metric: str = Query("volume", description="volume, weight or reps"),
    time_range: str = Query("all", description="Window in days: 7, 30 or all"),
    service: ProgressionService = Depends(get_progression_service),
) -> ProgressSeriesResponse:
    """
    Get a chart series for an exercise, oldest point first.
    """
    _validate_exercise_id(exercise_id)

    try:
        points = service.get_progress_series(
            exercise_id,
            metric=metric,
            time_range=time_range,
        )
    except HistoryStoreError as e:
        raise _store_unavailable(e)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ProgressSeriesResponse(
        exercise_id=exercise_id,
        metric=metric,
        time_range=time_range,
        points=[ProgressPointResponse(**asdict(p)) for p in points],
    )
