"""
Unit tests for domain models and timestamp helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from domain.models import (
    Exercise,
    ExerciseLog,
    InvalidUserInfoError,
    UserInfoHistoryEntry,
    WorkoutHistoryEntry,
    WorkoutPlanRecord,
    parse_user_info_payload,
)
from domain.timestamps import epoch_millis, parse_iso, round_half_up, to_iso

from tests.fakes import make_exercise, make_session

pytestmark = pytest.mark.unit


# =============================================================================
# Timestamps
# =============================================================================


class TestTimestamps:
    def test_to_iso_uses_milliseconds_and_z(self):
        value = datetime(2026, 3, 2, 9, 0, 5, 123456, tzinfo=timezone.utc)
        assert to_iso(value) == "2026-03-02T09:00:05.123Z"

    def test_to_iso_converts_other_timezones_to_utc(self):
        value = datetime(2026, 3, 2, 10, 0, tzinfo=timezone(timedelta(hours=1)))
        assert to_iso(value) == "2026-03-02T09:00:00.000Z"

    def test_parse_iso_round_trips_z_suffix(self):
        parsed = parse_iso("2026-03-02T09:00:00.000Z")
        assert parsed == datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [None, "", "yesterday", 42])
    def test_parse_iso_returns_none_for_garbage(self, value):
        assert parse_iso(value) is None

    def test_epoch_millis(self):
        assert epoch_millis(datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)) == 1772442000000

    @pytest.mark.parametrize(
        "value,expected",
        [(2.5, 3), (2.4999, 2), (-0.5, 0), (-0.6, -1), (10.0, 10)],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


# =============================================================================
# Plan
# =============================================================================


class TestExercise:
    def test_accepts_camel_case_input(self):
        exercise = Exercise.model_validate(
            {"name": "Row", "sets": 4, "minReps": 6, "maxReps": 10, "restTime": 60}
        )
        assert exercise.min_reps == 6
        assert exercise.to_record()["restTime"] == 60

    def test_default_reps_is_rounded_midpoint(self):
        assert make_exercise(min_reps=8, max_reps=12).default_reps == 10
        assert make_exercise(min_reps=8, max_reps=11).default_reps == 10
        assert make_exercise(min_reps=5, max_reps=8).default_reps == 7

    def test_min_reps_above_max_reps_rejected(self):
        with pytest.raises(ValidationError, match="minReps"):
            make_exercise(min_reps=12, max_reps=8)

    @pytest.mark.parametrize("field", ["sets", "rest_time"])
    def test_non_positive_counts_rejected(self, field):
        kwargs = {"name": "Row", "sets": 3, "min_reps": 1, "max_reps": 2, "rest_time": 30}
        kwargs[field] = 0
        with pytest.raises(ValidationError):
            Exercise(**kwargs)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            make_exercise(name="   ")


class TestWorkoutPlanRecord:
    def test_duplicate_days_rejected(self):
        day = {"day": "Monday", "exercises": []}
        with pytest.raises(ValidationError, match="Duplicate workout day: Monday"):
            WorkoutPlanRecord.model_validate({
                "workoutPlan": [day, day],
                "userId": "u",
                "createdAt": "2026-03-02T09:00:00.000Z",
            })

    def test_record_carries_schema_version(self):
        record = WorkoutPlanRecord(workout_plan=[], user_id="u", created_at="x")
        assert record.to_record()["schemaVersion"] == 1


# =============================================================================
# Session
# =============================================================================


class TestWorkoutSession:
    def _log(self, name: str) -> ExerciseLog:
        return ExerciseLog(exercise_name=name, sets_data=[10, 10, 10], completed_at="t")

    def test_next_planned_matches_pending_exercise(self):
        session = make_session()
        assert session.next_planned("Squat").name == "Squat"
        assert session.next_planned("Deadlift") is None

    def test_next_planned_none_once_logged(self):
        session = make_session()
        session.completed_exercises.append(self._log("Squat"))
        assert session.next_planned("Squat") is None

    def test_repeated_exercise_matches_occurrences_in_order(self):
        session = make_session(exercises=[
            make_exercise("Plank", sets=2),
            make_exercise("Plank", sets=4),
        ])
        assert session.next_planned("Plank").sets == 2
        session.completed_exercises.append(self._log("Plank"))
        assert session.next_planned("Plank").sets == 4

    def test_is_full(self):
        session = make_session()
        assert not session.is_full
        session.completed_exercises.extend([self._log("Bench Press"), self._log("Squat")])
        assert session.is_full

    def test_is_expired(self):
        session = make_session(started_at="2026-03-01T09:00:00.000Z")
        now = datetime(2026, 3, 2, 9, 0, 1, tzinfo=timezone.utc)
        assert session.is_expired(now, timedelta(hours=24))
        assert not session.is_expired(now, timedelta(hours=25))

    def test_serializes_camel_case(self):
        record = make_session().to_record()
        assert set(record) >= {"sessionId", "userId", "workoutDay", "startedAt", "completedExercises"}

    def test_negative_weight_rejected_on_log(self):
        with pytest.raises(ValidationError):
            ExerciseLog(exercise_name="Row", weight=-1, completed_at="t")


class TestWorkoutHistoryEntry:
    def test_completed_date(self):
        entry = WorkoutHistoryEntry(
            **make_session().model_dump(),
            completed_at="2026-03-02T23:59:59.000Z",
        )
        assert entry.completed_date == "2026-03-02"


# =============================================================================
# User info
# =============================================================================


class TestParseUserInfoPayload:
    def test_valid_payload(self):
        snapshot = parse_user_info_payload(
            {"weight": "80.5", "height": 180, "age": 30.5, "bodyFat": 15}
        )
        assert snapshot.weight == 80.5
        assert snapshot.age == 31
        assert snapshot.body_fat == 15

    @pytest.mark.parametrize("body_fat", [None, ""])
    def test_body_fat_optional(self, body_fat):
        snapshot = parse_user_info_payload(
            {"weight": 80, "height": 180, "age": 30, "bodyFat": body_fat}
        )
        assert snapshot.body_fat is None

    @pytest.mark.parametrize(
        "payload,message",
        [
            ({"weight": 0, "height": 180, "age": 30}, "Invalid weight"),
            ({"weight": "heavy", "height": 180, "age": 30}, "Invalid weight"),
            ({"weight": 80, "height": -1, "age": 30}, "Invalid height"),
            ({"weight": 80, "height": 180}, "Invalid age"),
            ({"weight": 80, "height": 180, "age": 30, "bodyFat": 101}, "Invalid body fat percentage"),
            ({"weight": 80, "height": 180, "age": 30, "bodyFat": "lean"}, "Invalid body fat percentage"),
        ],
    )
    def test_invalid_values(self, payload, message):
        with pytest.raises(InvalidUserInfoError, match=message):
            parse_user_info_payload(payload)

    def test_booleans_are_not_numbers(self):
        with pytest.raises(InvalidUserInfoError, match="Invalid weight"):
            parse_user_info_payload({"weight": True, "height": 180, "age": 30})

    def test_history_entry_snapshot(self):
        entry = UserInfoHistoryEntry(
            entry_id="1_abc",
            recorded_at="r",
            updated_at="u",
            weight=80,
            height=180,
            age=30,
        )
        assert entry.snapshot().model_dump() == {
            "weight": 80,
            "height": 180,
            "age": 30,
            "body_fat": None,
        }
