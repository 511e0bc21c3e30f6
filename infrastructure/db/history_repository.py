"""
History Repository Implementations.

This module implements the HistoryRepository protocol twice:
- SupabaseHistoryRepository: rows in the workout_sets table
- InMemoryHistoryRepository: process-local store for development and tests
"""
from collections import defaultdict
from threading import Lock
from typing import Any, Dict, List
import logging
import uuid

from supabase import Client

from application.exceptions import HistoryStoreError
from domain.models import SetRecord

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = "id, exercise_id, performed_at, weight, weight_unit, reps, sets, notes"


def record_from_row(row: Dict[str, Any]) -> SetRecord:
    """Convert a workout_sets row into a SetRecord."""
    return SetRecord(
        id=str(row["id"]) if row.get("id") is not None else None,
        exercise_id=row["exercise_id"],
        date=row["performed_at"],
        weight=row.get("weight") or 0,
        weight_unit=row.get("weight_unit") or "lbs",
        reps=row["reps"],
        sets=row.get("sets") or 1,
        notes=row.get("notes"),
    )


def record_to_row(record: SetRecord) -> Dict[str, Any]:
    """Convert a SetRecord into a workout_sets row for insertion."""
    return {
        "exercise_id": record.exercise_id,
        "performed_at": record.date.isoformat(),
        "weight": record.weight,
        "weight_unit": record.weight_unit.value,
        "reps": record.reps,
        "sets": record.sets,
        "notes": record.notes,
    }


class SupabaseHistoryRepository:
    """
    Supabase implementation of HistoryRepository.

    Read failures raise HistoryStoreError. An empty list always means the
    exercise has no logged sets.
    """

    def __init__(self, client: Client, table: str = "workout_sets"):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
            table: Table holding logged sets
        """
        self._client = client
        self._table = table

    def get_history(self, exercise_id: str) -> List[SetRecord]:
        """Get every logged record for an exercise."""
        try:
            result = self._client.table(self._table) \
                .select(HISTORY_COLUMNS) \
                .eq("exercise_id", exercise_id) \
                .execute()
        except Exception as e:
            logger.exception(f"Error fetching history for {exercise_id}: {e}")
            raise HistoryStoreError(f"Failed to fetch history for '{exercise_id}'") from e

        return [record_from_row(row) for row in result.data or []]

    def add(self, record: SetRecord) -> SetRecord:
        """Append a record to the exercise's history."""
        try:
            result = self._client.table(self._table).insert(record_to_row(record)).execute()
        except Exception as e:
            logger.exception(f"Failed to log set for {record.exercise_id}: {e}")
            raise HistoryStoreError(f"Failed to log set for '{record.exercise_id}'") from e

        if not result.data:
            logger.error(f"No data returned from insert for {record.exercise_id}")
            raise HistoryStoreError(f"Failed to log set for '{record.exercise_id}'")

        logger.info(f"Set logged for {record.exercise_id}")
        return record_from_row(result.data[0])


class InMemoryHistoryRepository:
    """
    In-memory implementation of HistoryRepository.

    Keeps records in insertion order per exercise. Thread-safe.
    """

    def __init__(self):
        self._records: Dict[str, List[SetRecord]] = defaultdict(list)
        self._lock = Lock()

    def get_history(self, exercise_id: str) -> List[SetRecord]:
        with self._lock:
            return list(self._records.get(exercise_id, []))

    def add(self, record: SetRecord) -> SetRecord:
        stored = record if record.id else record.model_copy(update={"id": str(uuid.uuid4())})
        with self._lock:
            self._records[stored.exercise_id].append(stored)
        return stored

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
