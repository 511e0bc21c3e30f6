"""
Unit tests for Progression Service.

Tests cover:
- Recommendation flow through the history and rep-range providers
- Goal fallback
- Logging sets and history ordering
- Progress summaries and series
"""
from datetime import datetime, timezone

import pytest

from application.exceptions import (
    ExerciseNotFoundError,
    HistoryStoreError,
    InvalidSpecError,
)
from backend.core.progression_engine import DEFAULT_POLICY, ProgressionPolicy
from backend.core.progression_service import ProgressionService
from domain.models import Goal, RecommendationAction, RepRangeSpec, SetRecord, WeightUnit
from tests.fakes import (
    FakeHistoryRepository,
    FakeRepRangeRepository,
    create_history_repo,
    create_rep_range_repo,
)


@pytest.fixture
def history_repo():
    return FakeHistoryRepository()


@pytest.fixture
def rep_range_repo():
    return create_rep_range_repo(exercise_id="gym_001")


@pytest.fixture
def service(history_repo, rep_range_repo):
    return ProgressionService(history_repo=history_repo, rep_range_repo=rep_range_repo)


@pytest.mark.unit
class TestRecommendNextWorkout:
    """Tests for the recommendation flow."""

    def test_first_log_without_history(self, service):
        result = service.recommend_next_workout("gym_001", Goal.HYPERTROPHY)
        assert result.action == RecommendationAction.FIRST_LOG
        assert result.weight is None

    def test_uses_goal_rep_range(self, service, history_repo):
        history_repo.seed_rows("gym_001", [{"date": "2024-01-01", "weight": 100, "reps": 12}])

        result = service.recommend_next_workout("gym_001", Goal.HYPERTROPHY)

        assert result.action == RecommendationAction.INCREASE_WEIGHT
        assert result.weight == pytest.approx(102.5)
        assert result.reps == 8
        assert result.sets == 4

    def test_goal_changes_recommendation(self, service, history_repo):
        history_repo.seed_rows("gym_001", [{"date": "2024-01-01", "weight": 100, "reps": 5}])

        strength = service.recommend_next_workout("gym_001", Goal.STRENGTH)
        hypertrophy = service.recommend_next_workout("gym_001", Goal.HYPERTROPHY)

        assert strength.action == RecommendationAction.INCREASE_WEIGHT
        assert strength.reps == 3
        assert hypertrophy.action == RecommendationAction.BUILD_REPS
        assert hypertrophy.reps == 8

    def test_missing_goal_falls_back_to_first_range(self, service, history_repo):
        history_repo.seed_rows("gym_001", [{"date": "2024-01-01", "weight": 100, "reps": 10}])

        result = service.recommend_next_workout("gym_001", Goal.ENDURANCE)

        # First configured range is hypertrophy (8-12)
        assert result.action == RecommendationAction.HOLD
        assert result.sets == 4

    def test_goal_accepts_plain_string(self, service):
        spec = service.get_rep_range("gym_001", "strength")
        assert spec.goal == Goal.STRENGTH

    def test_unknown_exercise_raises(self, service):
        with pytest.raises(ExerciseNotFoundError):
            service.recommend_next_workout("unknown", Goal.HYPERTROPHY)

    def test_malformed_range_raises(self, history_repo):
        rep_range_repo = FakeRepRangeRepository({
            "broken": [RepRangeSpec(goal=Goal.HYPERTROPHY, min_reps=12, max_reps=8, sets=3)],
        })
        service = ProgressionService(history_repo, rep_range_repo)

        with pytest.raises(InvalidSpecError):
            service.recommend_next_workout("broken", Goal.HYPERTROPHY)

    def test_store_failure_propagates(self, service, history_repo):
        history_repo.fail_with = HistoryStoreError("down")
        with pytest.raises(HistoryStoreError):
            service.recommend_next_workout("gym_001", Goal.HYPERTROPHY)

    def test_custom_policy(self, history_repo, rep_range_repo):
        policy = ProgressionPolicy(increase_ratio=0.05, increment_step=2.5, minimum_increment=2.5)
        service = ProgressionService(history_repo, rep_range_repo, policy=policy)
        history_repo.seed_rows("gym_001", [{"date": "2024-01-01", "weight": 100, "reps": 12}])

        result = service.recommend_next_workout("gym_001", Goal.HYPERTROPHY)

        assert service.policy is policy
        assert result.weight == 105.0

    def test_default_policy(self, service):
        assert service.policy == DEFAULT_POLICY


@pytest.mark.unit
class TestLogSet:
    """Tests for logging sets."""

    def test_log_set_appends(self, service, history_repo):
        record = SetRecord(exercise_id="gym_001", date="2024-01-01", weight=100, reps=12, sets=3)

        stored = service.log_set(record)

        assert stored.id is not None
        assert history_repo.added == [stored]

    def test_logged_set_drives_next_recommendation(self, service):
        service.log_set(SetRecord(exercise_id="gym_001", date="2024-01-01", weight=100, reps=6))
        assert service.recommend_next_workout("gym_001", Goal.HYPERTROPHY).action == RecommendationAction.BUILD_REPS

        service.log_set(SetRecord(exercise_id="gym_001", date="2024-01-03", weight=100, reps=12))
        assert service.recommend_next_workout("gym_001", Goal.HYPERTROPHY).action == RecommendationAction.INCREASE_WEIGHT

    def test_get_weight_unit(self, service, rep_range_repo):
        rep_range_repo.seed("pull_up", [RepRangeSpec(goal=Goal.STRENGTH, min_reps=3, max_reps=5, sets=5)],
                            weight_unit=WeightUnit.BODYWEIGHT)

        assert service.get_weight_unit("pull_up") == WeightUnit.BODYWEIGHT
        assert service.get_weight_unit("gym_001") == WeightUnit.LBS


@pytest.mark.unit
class TestHistoryAndMetrics:
    """Tests for history listing and progress metrics."""

    def test_history_newest_first(self, rep_range_repo):
        service = ProgressionService(create_history_repo(num_sessions=3), rep_range_repo)

        history = service.get_history("gym_001")

        assert [r.date.day for r in history] == [3, 2, 1]

    def test_history_empty_for_unknown_exercise(self, service):
        assert service.get_history("nothing") == []

    def test_summary(self, rep_range_repo):
        service = ProgressionService(create_history_repo(num_sessions=3), rep_range_repo)

        summary = service.get_progress_summary("gym_001", time_range="all")

        assert summary.session_count == 3
        assert summary.set_count == 9
        assert summary.total_volume == 9000.0

    def test_summary_window(self, rep_range_repo):
        service = ProgressionService(create_history_repo(num_sessions=10), rep_range_repo)
        now = datetime(2024, 1, 10, tzinfo=timezone.utc)

        summary = service.get_progress_summary("gym_001", time_range="7", now=now)

        # Jan 3 through Jan 10
        assert summary.session_count == 8

    def test_series(self, rep_range_repo):
        service = ProgressionService(create_history_repo(num_sessions=2), rep_range_repo)

        points = service.get_progress_series("gym_001", metric="reps")

        assert [p.value for p in points] == [10.0, 10.0]

    def test_series_invalid_metric(self, service):
        with pytest.raises(ValueError):
            service.get_progress_series("gym_001", metric="bogus")
