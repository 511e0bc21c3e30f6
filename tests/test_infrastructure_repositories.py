"""
Tests for infrastructure repository implementations.

These tests verify that the Supabase and in-memory history repositories
map rows correctly and surface storage failures.
"""
import threading

import pytest
from unittest.mock import Mock, MagicMock

from application.exceptions import HistoryStoreError
from domain.models import SetRecord, WeightUnit
from infrastructure.db.history_repository import (
    HISTORY_COLUMNS,
    InMemoryHistoryRepository,
    SupabaseHistoryRepository,
    record_from_row,
    record_to_row,
)

# All tests in this module are pure logic tests with mocks - mark as unit
pytestmark = pytest.mark.unit


def make_row(**overrides):
    row = {
        "id": 7,
        "exercise_id": "gym_001",
        "performed_at": "2024-01-01T18:30:00+00:00",
        "weight": 100,
        "weight_unit": "lbs",
        "reps": 12,
        "sets": 3,
        "notes": None,
    }
    row.update(overrides)
    return row


def mock_client_returning(data):
    """Build a Supabase client mock whose query chain returns data."""
    client = MagicMock()
    table = client.table.return_value
    table.select.return_value.eq.return_value.execute.return_value = Mock(data=data)
    table.insert.return_value.execute.return_value = Mock(data=data)
    return client


# ============================================================================
# Row Mapping
# ============================================================================


class TestRowMapping:
    """Test conversion between rows and SetRecords."""

    def test_record_from_row(self):
        record = record_from_row(make_row())

        assert record.id == "7"
        assert record.exercise_id == "gym_001"
        assert record.date.year == 2024
        assert record.weight == 100
        assert record.reps == 12
        assert record.sets == 3
        assert record.weight_unit == WeightUnit.LBS

    def test_record_from_row_defaults(self):
        record = record_from_row(make_row(weight=None, weight_unit=None, sets=None))

        assert record.weight == 0
        assert record.weight_unit == WeightUnit.LBS
        assert record.sets == 1

    def test_record_to_row(self):
        record = SetRecord(
            exercise_id="gym_001",
            date="2024-01-01",
            weight=40,
            reps=10,
            sets=3,
            weight_unit=WeightUnit.KG,
        )

        row = record_to_row(record)

        assert row["performed_at"] == "2024-01-01T00:00:00+00:00"
        assert row["weight_unit"] == "kg"
        assert "id" not in row


# ============================================================================
# Supabase Repository
# ============================================================================


class TestSupabaseHistoryRepository:
    """Test the Supabase history repository with a mock client."""

    def test_instantiation(self):
        mock_client = Mock()
        repo = SupabaseHistoryRepository(mock_client)
        assert repo._client is mock_client
        assert repo._table == "workout_sets"

    def test_get_history_queries_exercise(self):
        client = mock_client_returning([make_row(), make_row(id=8, reps=10)])
        repo = SupabaseHistoryRepository(client, table="sets")

        history = repo.get_history("gym_001")

        client.table.assert_called_with("sets")
        client.table.return_value.select.assert_called_with(HISTORY_COLUMNS)
        client.table.return_value.select.return_value.eq.assert_called_with("exercise_id", "gym_001")
        assert [r.reps for r in history] == [12, 10]

    def test_get_history_empty(self):
        repo = SupabaseHistoryRepository(mock_client_returning(None))
        assert repo.get_history("gym_001") == []

    def test_get_history_failure_raises(self):
        client = MagicMock()
        client.table.side_effect = RuntimeError("connection refused")

        with pytest.raises(HistoryStoreError):
            SupabaseHistoryRepository(client).get_history("gym_001")

    def test_add_returns_stored_row(self):
        client = mock_client_returning([make_row(id=42)])
        record = SetRecord(exercise_id="gym_001", date="2024-01-01T18:30:00Z", weight=100, reps=12, sets=3)

        stored = SupabaseHistoryRepository(client).add(record)

        client.table.return_value.insert.assert_called_once_with(record_to_row(record))
        assert stored.id == "42"

    def test_add_without_data_raises(self):
        client = mock_client_returning([])
        record = SetRecord(exercise_id="gym_001", date="2024-01-01", weight=100, reps=12)

        with pytest.raises(HistoryStoreError):
            SupabaseHistoryRepository(client).add(record)

    def test_add_failure_raises(self):
        client = MagicMock()
        client.table.return_value.insert.side_effect = RuntimeError("insert failed")
        record = SetRecord(exercise_id="gym_001", date="2024-01-01", weight=100, reps=12)

        with pytest.raises(HistoryStoreError):
            SupabaseHistoryRepository(client).add(record)


# ============================================================================
# In-Memory Repository
# ============================================================================


class TestInMemoryHistoryRepository:
    """Test the in-memory history repository."""

    def test_add_assigns_id(self):
        repo = InMemoryHistoryRepository()
        stored = repo.add(SetRecord(exercise_id="gym_001", date="2024-01-01", weight=100, reps=12))
        assert stored.id

    def test_add_keeps_existing_id(self):
        repo = InMemoryHistoryRepository()
        stored = repo.add(SetRecord(id="mine", exercise_id="gym_001", date="2024-01-01", weight=100, reps=12))
        assert stored.id == "mine"

    def test_history_per_exercise_in_insertion_order(self):
        repo = InMemoryHistoryRepository()
        repo.add(SetRecord(exercise_id="gym_001", date="2024-01-05", weight=100, reps=12))
        repo.add(SetRecord(exercise_id="gym_002", date="2024-01-03", weight=200, reps=8))
        repo.add(SetRecord(exercise_id="gym_001", date="2024-01-01", weight=95, reps=10))

        assert [r.weight for r in repo.get_history("gym_001")] == [100, 95]
        assert len(repo.get_history("gym_002")) == 1
        assert repo.get_history("gym_003") == []

    def test_returned_list_is_a_copy(self):
        repo = InMemoryHistoryRepository()
        repo.add(SetRecord(exercise_id="gym_001", date="2024-01-01", weight=100, reps=12))

        repo.get_history("gym_001").clear()

        assert len(repo.get_history("gym_001")) == 1

    def test_clear(self):
        repo = InMemoryHistoryRepository()
        repo.add(SetRecord(exercise_id="gym_001", date="2024-01-01", weight=100, reps=12))
        repo.clear()
        assert repo.get_history("gym_001") == []

    def test_concurrent_adds(self):
        repo = InMemoryHistoryRepository()

        def worker():
            for _ in range(50):
                repo.add(SetRecord(exercise_id="gym_001", date="2024-01-01", weight=100, reps=12))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(repo.get_history("gym_001")) == 200
