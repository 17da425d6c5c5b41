"""
Body metrics: snapshots, the correctable snapshot history, and the cached
"latest" profile.
"""

import math
from typing import Any, Dict, Optional

from domain.models.base import SCHEMA_VERSION, CamelModel
from domain.timestamps import round_half_up


class InvalidUserInfoError(ValueError):
    """Raised when a body-metrics payload fails validation."""


class UserInfoSnapshot(CamelModel):
    weight: float
    height: float
    age: int
    body_fat: Optional[float] = None


class UserInfoHistoryEntry(UserInfoSnapshot):
    """One recorded snapshot. Values may be corrected later; recordedAt never changes."""

    entry_id: str
    recorded_at: str
    updated_at: str
    schema_version: int = SCHEMA_VERSION

    def snapshot(self) -> UserInfoSnapshot:
        return UserInfoSnapshot(
            weight=self.weight,
            height=self.height,
            age=self.age,
            body_fat=self.body_fat,
        )


class LatestProfile(UserInfoSnapshot):
    """Cached copy of the most recently recorded snapshot."""

    updated_at: str

    @classmethod
    def from_entry(cls, entry: UserInfoHistoryEntry) -> "LatestProfile":
        return cls(
            weight=entry.weight,
            height=entry.height,
            age=entry.age,
            body_fat=entry.body_fat,
            updated_at=entry.updated_at,
        )


def _to_number(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def parse_user_info_payload(payload: Dict[str, Any]) -> UserInfoSnapshot:
    """
    Validate and normalize a body-metrics payload.

    weight, height and age must be positive finite numbers; age is rounded to
    a whole number. bodyFat is optional (missing, null or "") and otherwise
    must lie in [0, 100].

    Raises:
        InvalidUserInfoError: with a user-facing message naming the bad field
    """
    weight = _to_number(payload.get("weight"))
    height = _to_number(payload.get("height"))
    age = _to_number(payload.get("age"))

    if not math.isfinite(weight) or weight <= 0:
        raise InvalidUserInfoError("Invalid weight")
    if not math.isfinite(height) or height <= 0:
        raise InvalidUserInfoError("Invalid height")
    if not math.isfinite(age) or age <= 0:
        raise InvalidUserInfoError("Invalid age")

    body_fat_raw = payload.get("bodyFat", payload.get("body_fat"))
    body_fat: Optional[float] = None
    if body_fat_raw is not None and body_fat_raw != "":
        body_fat = _to_number(body_fat_raw)
        if not math.isfinite(body_fat) or body_fat < 0 or body_fat > 100:
            raise InvalidUserInfoError("Invalid body fat percentage")

    return UserInfoSnapshot(
        weight=weight,
        height=height,
        age=round_half_up(age),
        body_fat=body_fat,
    )
