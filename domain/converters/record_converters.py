"""
Converters: stored key-value records <-> domain models.

Every record written by this service carries ``schemaVersion``. Records
written before versioning existed have no tag and are upgraded here:

- sessions/history: missing ``completedExercises`` become [], rest and weight
  values are coerced, missing history totals are recomputed from the logs
- user info history: entries must carry the typed fields, otherwise skipped
- legacy latest profile (``user_info_{userId}`` with no history rows) can be
  turned into a first history entry by ``legacy_profile_to_history_entry``

Readers return None for records that cannot be interpreted; callers decide
whether that means "skip" or "corrupt".
"""

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from domain.models import (
    SCHEMA_VERSION,
    InvalidUserInfoError,
    UserInfoHistoryEntry,
    WeightHistory,
    WorkoutHistoryEntry,
    WorkoutPlanRecord,
    WorkoutSession,
    parse_user_info_payload,
)
from domain.services.workout_stats import (
    coerce_rest_seconds,
    coerce_weight,
    elapsed_seconds,
    total_rest_seconds,
)
from domain.timestamps import round_half_up

logger = logging.getLogger(__name__)


def _is_legacy(raw: Dict[str, Any]) -> bool:
    return "schemaVersion" not in raw


def _upgrade_logs(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize completedExercises on an unversioned session/history record."""
    logs = raw.get("completedExercises")
    if not isinstance(logs, list):
        logs = []
    upgraded = []
    for log in logs:
        if not isinstance(log, dict):
            continue
        upgraded.append({
            **log,
            "setsData": [int(r) for r in log.get("setsData") or [] if isinstance(r, (int, float))],
            "weight": coerce_weight(log.get("weight")),
            "restTakenSeconds": coerce_rest_seconds(log.get("restTakenSeconds")),
            "completedAt": log.get("completedAt") or raw.get("startedAt") or "",
        })
    return {**raw, "completedExercises": upgraded, "schemaVersion": SCHEMA_VERSION}


def session_from_record(raw: Any, session_id: Optional[str] = None) -> Optional[WorkoutSession]:
    """Build a WorkoutSession from a stored record, upgrading legacy shapes."""
    if not isinstance(raw, dict):
        return None
    if _is_legacy(raw):
        raw = _upgrade_logs(raw)
        if session_id and "sessionId" not in raw:
            raw["sessionId"] = session_id
    try:
        return WorkoutSession.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Unreadable workout session record {session_id}: {e}")
        return None


def history_entry_from_record(raw: Any) -> Optional[WorkoutHistoryEntry]:
    """
    Build a WorkoutHistoryEntry from a stored record.

    Entries without ``completedAt`` or ``workoutDay`` are not history and
    yield None.
    """
    if not isinstance(raw, dict) or not raw.get("completedAt") or not raw.get("workoutDay"):
        return None
    if _is_legacy(raw):
        raw = _upgrade_logs(raw)
        raw.setdefault("sessionId", "")
        raw.setdefault("userId", "")
        raw.setdefault("startedAt", raw["completedAt"])
        if raw.get("totalRestSeconds") is None:
            raw["totalRestSeconds"] = total_rest_seconds(raw["completedExercises"])
        if raw.get("totalWorkoutSeconds") is None:
            raw["totalWorkoutSeconds"] = elapsed_seconds(raw.get("startedAt"), raw["completedAt"])
    try:
        return WorkoutHistoryEntry.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Skipping unreadable history record completed at {raw.get('completedAt')}: {e}")
        return None


def weight_history_from_record(raw: Any) -> WeightHistory:
    """Weight series from a stored record; a missing record is an empty series."""
    if not isinstance(raw, dict):
        return WeightHistory()
    points = [
        point for point in raw.get("history") or []
        if isinstance(point, dict) and point.get("date")
    ]
    return WeightHistory.model_validate({
        "history": [
            {"weight": coerce_weight(point.get("weight")), "date": point["date"]}
            for point in points
        ],
    })


def plan_from_record(raw: Any) -> Optional[WorkoutPlanRecord]:
    if not isinstance(raw, dict):
        return None
    try:
        return WorkoutPlanRecord.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Unreadable workout plan record for {raw.get('userId')}: {e}")
        return None


def user_info_entry_from_record(raw: Any) -> Optional[UserInfoHistoryEntry]:
    """
    Build a UserInfoHistoryEntry, requiring the identifying string fields and
    numeric metrics to be present with the right types.
    """
    if not isinstance(raw, dict):
        return None
    for key in ("entryId", "recordedAt", "updatedAt"):
        if not isinstance(raw.get(key), str):
            return None
    for key in ("weight", "height", "age"):
        value = raw.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
    body_fat = raw.get("bodyFat")
    try:
        return UserInfoHistoryEntry(
            entry_id=raw["entryId"],
            recorded_at=raw["recordedAt"],
            updated_at=raw["updatedAt"],
            weight=raw["weight"],
            height=raw["height"],
            age=round_half_up(raw["age"]),
            body_fat=body_fat if isinstance(body_fat, (int, float)) and not isinstance(body_fat, bool) else None,
        )
    except ValidationError:
        return None


def legacy_profile_to_history_entry(
    latest: Any,
    entry_id: str,
    now_iso: str,
) -> Optional[UserInfoHistoryEntry]:
    """
    Turn a pre-history "latest profile" record into the first history entry.

    recordedAt is the profile's own updatedAt when present, else ``now_iso``.
    Returns None when the legacy values do not pass validation.
    """
    if not isinstance(latest, dict):
        return None
    try:
        snapshot = parse_user_info_payload({
            "weight": latest.get("weight"),
            "height": latest.get("height"),
            "age": latest.get("age"),
            "bodyFat": latest.get("bodyFat"),
        })
    except InvalidUserInfoError as e:
        logger.info(f"Legacy profile not migrated: {e}")
        return None

    recorded_at = latest.get("updatedAt") if isinstance(latest.get("updatedAt"), str) else now_iso
    return UserInfoHistoryEntry(
        entry_id=entry_id,
        recorded_at=recorded_at,
        updated_at=recorded_at,
        **snapshot.model_dump(),
    )
