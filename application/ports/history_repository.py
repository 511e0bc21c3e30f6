"""
History Repository Interface (Port).

This module defines the abstract interface for reading and appending an
exercise's logged sets. Used by the ProgressionService as the history
provider feeding the progression engine.
"""
from typing import List, Protocol

from domain.models import SetRecord


class HistoryRepository(Protocol):
    """
    Abstract interface for exercise history persistence.

    History is append-only: records are never mutated once stored.
    """

    def get_history(self, exercise_id: str) -> List[SetRecord]:
        """
        Get every logged record for an exercise.

        Implementations make no ordering guarantee; consumers that care about
        chronology must sort by date themselves.

        Args:
            exercise_id: Exercise identifier

        Returns:
            List of SetRecord, possibly empty
        """
        ...

    def add(self, record: SetRecord) -> SetRecord:
        """
        Append a record to the exercise's history.

        Args:
            record: The record to store

        Returns:
            The stored record, with its store-assigned id
        """
        ...
