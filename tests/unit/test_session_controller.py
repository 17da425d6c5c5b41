"""
Tests for ActiveWorkoutController.

A scripted in-memory API stands in for WorkoutApiClient; FakeClock drives
both the controller and its rest timer.
"""

import httpx
import pytest

from workout_client import (
    ActiveWorkoutController,
    ApiUnavailableError,
    AuthenticationError,
    CompletionTotals,
    RestTimer,
    SessionStatus,
    StartedSession,
    WorkoutApiClient,
    WorkoutApiError,
)

from tests.fakes import FakeClock, make_exercises

pytestmark = pytest.mark.unit


class ScriptedApi:
    """Records calls; ``fail[method]`` makes the next call to it raise."""

    def __init__(self, totals=None):
        self.calls = []
        self.fail = {}
        self.totals = totals or CompletionTotals(
            completed_at="2026-03-02T09:45:00.000Z",
            total_rest_seconds=420,
            total_workout_seconds=2700,
        )

    def _maybe_fail(self, method):
        error = self.fail.pop(method, None)
        if error is not None:
            raise error

    async def start_workout(self, workout_day, exercises):
        self.calls.append(("start_workout", workout_day, len(exercises)))
        self._maybe_fail("start_workout")
        return StartedSession(session_id="user-123_1", started_at="2026-03-02T09:00:00.000Z")

    async def log_exercise(self, session_id, exercise_name, sets_data, weight, rest_taken_seconds):
        self.calls.append(("log_exercise", exercise_name, list(sets_data), weight, rest_taken_seconds))
        self._maybe_fail("log_exercise")
        return {"success": True}

    async def complete_workout(self, session_id):
        self.calls.append(("complete_workout", session_id))
        self._maybe_fail("complete_workout")
        return self.totals


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def api():
    return ScriptedApi()


@pytest.fixture
def controller(api, clock):
    return ActiveWorkoutController(api, "Monday", make_exercises(), clock=clock.time)


class TestStart:
    @pytest.mark.asyncio
    async def test_start_moves_to_in_progress(self, controller, clock):
        assert await controller.start_session() is True
        assert controller.state.status is SessionStatus.IN_PROGRESS
        assert controller.state.session_id == "user-123_1"
        assert controller.state.client_started_at == clock.time()

    @pytest.mark.asyncio
    async def test_start_failure_moves_to_failed(self, controller, api):
        api.fail["start_workout"] = ApiUnavailableError("down")

        assert await controller.start_session() is False
        assert controller.state.status is SessionStatus.FAILED
        assert controller.state.error == "Failed to start workout session"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", [
        httpx.Response(200, json={}),
        httpx.Response(200, text="<html>maintenance</html>"),
    ])
    async def test_malformed_start_reply_moves_to_failed(self, clock, response):
        client = WorkoutApiClient(
            "http://api.test",
            access_token="token-abc",
            transport=httpx.MockTransport(lambda request: response),
        )
        controller = ActiveWorkoutController(client, "Monday", make_exercises(), clock=clock.time)

        assert await controller.start_session() is False
        assert controller.state.status is SessionStatus.FAILED
        assert controller.state.session_id is None
        assert controller.state.error == "Failed to start workout session"

    @pytest.mark.asyncio
    async def test_cannot_start_twice(self, controller):
        await controller.start_session()
        with pytest.raises(RuntimeError):
            await controller.start_session()

    def test_actions_require_started_session(self, controller):
        with pytest.raises(RuntimeError):
            controller.record_set(0, reps=[8, 8, 8])


class TestDrafts:
    @pytest.mark.asyncio
    async def test_first_record_prefills_midpoint(self, controller):
        await controller.start_session()
        draft = controller.record_set(1)
        assert draft.reps == [7, 7, 7]
        assert draft.weight == 0

    @pytest.mark.asyncio
    async def test_record_set_validates(self, controller):
        await controller.start_session()
        with pytest.raises(ValueError):
            controller.record_set(0, reps=[8, 8])
        with pytest.raises(ValueError):
            controller.record_set(0, reps=[8, -1, 8])
        with pytest.raises(IndexError):
            controller.record_set(5)

    @pytest.mark.asyncio
    async def test_select_resets_draft(self, controller):
        await controller.start_session()
        controller.record_set(0, reps=[1, 1, 1])
        controller.select_exercise(0)

        assert controller.state.focus_index == 0
        assert controller.record_set(0).reps == [10, 10, 10]


class TestMondayWorkout:
    @pytest.mark.asyncio
    async def test_full_flow(self, controller, api, clock):
        await controller.start_session()

        controller.select_exercise(0)
        controller.record_set(0, reps=[10, 9, 8], weight="60")
        for _ in range(2):
            controller.start_rest(0)
            clock.advance(seconds=90)
            controller.skip_rest()
        assert await controller.finalize_exercise(0)

        controller.record_set(1, reps=[8, 7, 6], weight=100)
        controller.start_rest(1)
        clock.advance(seconds=240)
        assert await controller.finalize_exercise(1)
        assert controller.all_completed

        clock.advance(seconds=600)
        summary = await controller.complete_workout()

        assert api.calls[1] == ("log_exercise", "Bench Press", [10, 9, 8], 60.0, 180)
        assert api.calls[2] == ("log_exercise", "Squat", [8, 7, 6], 100.0, 240)
        assert summary.total_rest_seconds == 420
        assert summary.total_workout_seconds == 2700
        assert summary.completed_exercises == 2
        assert summary.completed_at == "2026-03-02T09:45:00.000Z"
        assert [e["exerciseName"] for e in summary.exercises] == ["Bench Press", "Squat"]
        assert controller.state.status is SessionStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_finalize_sends_default_draft_and_zero_weight(self, controller, api):
        await controller.start_session()
        controller.record_set(0, weight="heavy")

        await controller.finalize_exercise(0)

        assert api.calls[-1] == ("log_exercise", "Bench Press", [10, 10, 10], 0.0, 0)

    @pytest.mark.asyncio
    async def test_finalize_closes_running_rest_for_same_exercise(self, controller, api, clock):
        await controller.start_session()
        controller.start_rest(0)
        clock.advance(seconds=45)

        await controller.finalize_exercise(0)

        assert api.calls[-1][-1] == 45
        assert not controller.resting

    @pytest.mark.asyncio
    async def test_finalize_twice_logs_once(self, controller, api):
        await controller.start_session()
        await controller.finalize_exercise(0)
        await controller.finalize_exercise(0)
        assert [c[0] for c in api.calls].count("log_exercise") == 1

    @pytest.mark.asyncio
    async def test_log_failure_keeps_exercise_pending(self, controller, api, clock):
        await controller.start_session()
        controller.start_rest(0)
        clock.advance(seconds=30)
        api.fail["log_exercise"] = WorkoutApiError("Session not found", 404)

        assert await controller.finalize_exercise(0) is False
        assert controller.state.error == "Failed to log exercise"
        assert 0 not in controller.state.completed

        assert await controller.finalize_exercise(0) is True
        assert api.calls[-1][-1] == 30
        assert controller.state.error is None

    @pytest.mark.asyncio
    async def test_complete_with_nothing_logged(self, controller):
        await controller.start_session()
        summary = await controller.complete_workout()
        assert summary.completed_exercises == 0
        assert summary.planned_exercises == 2


class TestCompletionFallbacks:
    @pytest.mark.asyncio
    async def test_client_totals_fill_missing_server_totals(self, clock):
        api = ScriptedApi(totals=CompletionTotals(completed_at=None))
        controller = ActiveWorkoutController(api, "Monday", make_exercises(), clock=clock.time)
        await controller.start_session()
        controller.start_rest(0)
        clock.advance(seconds=75)
        await controller.finalize_exercise(0)

        summary = await controller.complete_workout()

        assert summary.total_rest_seconds == 75
        assert summary.total_workout_seconds == 75
        assert summary.completed_at == "2026-03-02T09:01:15.000Z"
        assert summary.exercises == [{
            "exerciseName": "Bench Press",
            "setsData": [10, 10, 10],
            "weight": 0.0,
            "restTakenSeconds": 75,
        }]

    @pytest.mark.asyncio
    async def test_complete_failure_stays_in_progress(self, controller, api):
        await controller.start_session()
        api.fail["complete_workout"] = ApiUnavailableError("down")

        assert await controller.complete_workout() is None
        assert controller.state.status is SessionStatus.IN_PROGRESS
        assert controller.state.error == "Failed to complete workout"

    @pytest.mark.asyncio
    async def test_unauthorized_requests_sign_in(self, clock):
        signed_out = []
        api = ScriptedApi()
        controller = ActiveWorkoutController(
            api, "Monday", make_exercises(),
            clock=clock.time,
            on_unauthorized=lambda: signed_out.append(True),
        )
        await controller.start_session()
        api.fail["complete_workout"] = AuthenticationError("Invalid or expired token", 401)

        await controller.complete_workout()

        assert controller.state.requires_sign_in
        assert signed_out == [True]


class TestAbandon:
    @pytest.mark.asyncio
    async def test_abandon_finalizes_rest(self, clock):
        timer = RestTimer(clock=clock.time)
        controller = ActiveWorkoutController(
            ScriptedApi(), "Monday", make_exercises(), timer=timer, clock=clock.time
        )
        await controller.start_session()
        controller.start_rest(0)
        clock.advance(seconds=10)

        controller.abandon()

        assert controller.state.status is SessionStatus.ABANDONED
        assert timer.total_rest_seconds == 10

    @pytest.mark.asyncio
    async def test_cannot_abandon_completed(self, controller):
        await controller.start_session()
        await controller.complete_workout()
        with pytest.raises(RuntimeError):
            controller.abandon()
