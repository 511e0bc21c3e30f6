"""
Progress metrics over an exercise's logged history.

Aggregations backing the exercise progress view:
- Time-range filtering ("7", "30" or "all" days)
- Summary metrics (sets, total volume, average/max weight, average reps)
- Chart series for volume, weight or reps
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from backend.core.progression_engine import sort_history
from domain.models import SetRecord


TIME_RANGES = ("7", "30", "all")
METRICS = ("volume", "weight", "reps")

SECONDS_PER_DAY = 24 * 3600


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass
class ProgressSummary:
    """Summary metrics over a window of history."""
    time_range: str
    session_count: int = 0
    set_count: int = 0
    total_volume: float = 0.0
    avg_weight: float = 0.0
    avg_reps: float = 0.0
    max_weight: float = 0.0


@dataclass
class ProgressPoint:
    """One point of a progress chart."""
    date: str  # ISO format
    label: str  # M/D, as shown on the chart axis
    value: float


# =============================================================================
# Aggregations
# =============================================================================


def _validate_time_range(time_range: str) -> None:
    if time_range not in TIME_RANGES:
        raise ValueError(f"Invalid time_range '{time_range}'. Must be one of: {TIME_RANGES}")


def filter_by_time_range(
    history: Iterable[SetRecord],
    time_range: str = "all",
    now: Optional[datetime] = None,
) -> List[SetRecord]:
    """
    Keep records no older than the given number of days.

    Args:
        history: Records in any order
        time_range: "7", "30" or "all"
        now: Reference time (default: current UTC time)

    Returns:
        Matching records, oldest first
    """
    _validate_time_range(time_range)
    ordered = sort_history(history)
    if time_range == "all":
        return ordered

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    max_days = int(time_range)
    return [
        record for record in ordered
        if (now - record.date).total_seconds() / SECONDS_PER_DAY <= max_days
    ]


def summarize_history(
    history: Iterable[SetRecord],
    time_range: str = "all",
    now: Optional[datetime] = None,
) -> ProgressSummary:
    """
    Compute summary metrics for a window of history.

    Volume counts every set: weight x reps x sets. Averages are per record
    and rounded to 2 decimal places.
    """
    records = filter_by_time_range(history, time_range, now)
    if not records:
        return ProgressSummary(time_range=time_range)

    count = len(records)
    return ProgressSummary(
        time_range=time_range,
        session_count=count,
        set_count=sum(r.sets for r in records),
        total_volume=round(sum(r.volume for r in records), 2),
        avg_weight=round(sum(r.weight for r in records) / count, 2),
        avg_reps=round(sum(r.reps for r in records) / count, 2),
        max_weight=max(r.weight for r in records),
    )


def _metric_value(record: SetRecord, metric: str) -> float:
    if metric == "volume":
        return record.volume
    if metric == "weight":
        return float(record.weight)
    return float(record.reps)


def progress_series(
    history: Iterable[SetRecord],
    metric: str = "volume",
    time_range: str = "all",
    now: Optional[datetime] = None,
) -> List[ProgressPoint]:
    """
    Build a chart series for one metric, oldest first.

    Raises:
        ValueError: Unknown metric or time range
    """
    if metric not in METRICS:
        raise ValueError(f"Invalid metric '{metric}'. Must be one of: {METRICS}")

    return [
        ProgressPoint(
            date=record.date.isoformat(),
            label=f"{record.date.month}/{record.date.day}",
            value=_metric_value(record, metric),
        )
        for record in filter_by_time_range(history, time_range, now)
    ]
