"""
HTTP client for the Workout Tracker API.

Used by the session controller to start, log and complete workouts, and
by other client code to read history. Every call is a single attempt:
there are no automatic retries, and timeouts are httpx's defaults unless
one is passed in.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import httpx

from domain.models import Exercise

logger = logging.getLogger(__name__)

INVALID_RESPONSE = "Invalid response from workout API"


@dataclass
class StartedSession:
    """Result of POST /start-workout."""

    session_id: str
    started_at: Optional[str] = None


@dataclass
class CompletionTotals:
    """
    Result of POST /complete-workout.

    Totals are None when the server omitted them; callers fall back to
    their own client-side figures.
    """

    completed_at: Optional[str] = None
    total_rest_seconds: Optional[int] = None
    total_workout_seconds: Optional[int] = None


class WorkoutClientError(Exception):
    """Base exception for workout client errors."""

    pass


class ApiUnavailableError(WorkoutClientError):
    """Raised when the API cannot be reached or times out."""

    pass


class WorkoutApiError(WorkoutClientError):
    """Raised when the API answers with an error status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthenticationError(WorkoutApiError):
    """Raised on 401: the access token is missing, invalid or expired."""

    pass


class WorkoutApiClient:
    """
    Async HTTP client for the workout endpoints.

    Sends ``Authorization: Bearer <access_token>`` and, when configured, the
    Supabase ``apikey`` header expected by the edge gateway.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        anon_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the workout client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8001")
            access_token: User's Supabase access token (JWT)
            anon_key: Supabase anon key, sent as the ``apikey`` header
            timeout: Request timeout in seconds; None keeps httpx's default
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._access_token = access_token
        self._anon_key = anon_key
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "Content-Type": "application/json",
        }
        if self._anon_key:
            headers["apikey"] = self._anon_key
        return headers

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {"transport": self._transport}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        return httpx.AsyncClient(**kwargs)

    async def _request(
        self,
        method: str,
        path: str,
        payload: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Send one request and return the decoded JSON body.

        Raises:
            ApiUnavailableError: If the API is not reachable or times out
            AuthenticationError: On HTTP 401
            WorkoutApiError: On any other non-2xx status, or a 2xx whose
                body is not a JSON object
        """
        url = f"{self._base_url}{path}"

        try:
            async with self._client() as client:
                response = await client.request(
                    method, url, json=payload, headers=self._headers()
                )
        except httpx.TimeoutException as e:
            logger.error(f"Workout API timeout: {method} {path}")
            raise ApiUnavailableError("Workout API request timed out") from e
        except httpx.TransportError as e:
            logger.error(f"Workout API unavailable: {e}")
            raise ApiUnavailableError(
                f"Workout API is not available at {self._base_url}"
            ) from e

        if response.is_success:
            try:
                data = response.json()
            except ValueError as e:
                logger.error(f"Workout API returned a non-JSON body: {method} {path}")
                raise WorkoutApiError(INVALID_RESPONSE, response.status_code) from e
            if not isinstance(data, dict):
                logger.error(f"Workout API returned a non-object body: {method} {path}")
                raise WorkoutApiError(INVALID_RESPONSE, response.status_code)
            return data

        message = _error_message(response)
        if response.status_code == 401:
            logger.warning(f"Workout API rejected credentials: {message}")
            raise AuthenticationError(message, response.status_code)

        logger.error(f"Workout API error: {response.status_code} - {message}")
        raise WorkoutApiError(message, response.status_code)

    async def start_workout(
        self,
        workout_day: str,
        exercises: list[Exercise],
    ) -> StartedSession:
        data = await self._request(
            "POST",
            "/start-workout",
            {
                "workoutDay": workout_day,
                "exercises": [exercise.to_record() for exercise in exercises],
            },
        )
        session_id = data.get("sessionId")
        if not session_id:
            logger.error("Workout API start-workout reply has no sessionId")
            raise WorkoutApiError(INVALID_RESPONSE, 200)
        return StartedSession(session_id=session_id, started_at=data.get("startedAt"))

    async def log_exercise(
        self,
        session_id: str,
        exercise_name: str,
        sets_data: list[int],
        weight: float,
        rest_taken_seconds: int,
    ) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/log-exercise",
            {
                "sessionId": session_id,
                "exerciseName": exercise_name,
                "setsData": list(sets_data),
                "weight": weight,
                "restTakenSeconds": rest_taken_seconds,
            },
        )

    async def complete_workout(self, session_id: str) -> CompletionTotals:
        data = await self._request("POST", "/complete-workout", {"sessionId": session_id})
        return CompletionTotals(
            completed_at=data.get("completedAt"),
            total_rest_seconds=data.get("totalRestSeconds"),
            total_workout_seconds=data.get("totalWorkoutSeconds"),
        )

    async def get_workout_history(self) -> list[dict[str, Any]]:
        data = await self._request("GET", "/workout-history")
        return data.get("history") or []

    async def get_streak(self) -> int:
        data = await self._request("GET", "/streak")
        return int(data.get("streak") or 0)

    async def get_exercise_weights(self, exercise_name: str) -> list[dict[str, Any]]:
        data = await self._request(
            "GET", f"/exercise-weights/{quote(exercise_name, safe='')}"
        )
        return data.get("weightHistory") or []


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP {response.status_code}"
