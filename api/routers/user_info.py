"""
User info router for body metrics.

This router contains endpoints for:
- /user-info - Read the latest profile / record a new snapshot
- /user-info-history - List snapshots, newest first
- /user-info-history/{entry_id} - Correct an existing snapshot

Users whose profile predates the snapshot history are migrated lazily on
first access (see application.use_cases.user_info).
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException

from api.deps import (
    get_correct_user_info_use_case,
    get_current_user,
    get_save_user_info_use_case,
    get_user_info_history_use_case,
    get_user_info_use_case,
)
from api.schemas import (
    UserInfoEntryResponse,
    UserInfoHistoryResponse,
    UserInfoResponse,
)
from application.exceptions import StorageError
from application.use_cases import (
    CorrectUserInfoEntryUseCase,
    GetUserInfoUseCase,
    ListUserInfoHistoryUseCase,
    SaveUserInfoUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["User Info"],
)


@router.post("/user-info", response_model=UserInfoEntryResponse)
def save_user_info_endpoint(
    payload: Dict[str, Any] = Body(...),
    user_id: str = Depends(get_current_user),
    use_case: SaveUserInfoUseCase = Depends(get_save_user_info_use_case),
):
    """
    Record a body-metrics snapshot.

    Body: ``{weight, height, age, bodyFat?}``. Returns 400 with
    "Invalid weight" / "Invalid height" / "Invalid age" /
    "Invalid body fat percentage" for bad values.
    """
    try:
        result = use_case.execute(user_id, payload)
    except StorageError as e:
        raise HTTPException(status_code=500, detail="Failed to save user info") from e

    return UserInfoEntryResponse(entry=result.entry)


@router.get("/user-info", response_model=UserInfoResponse)
def get_user_info_endpoint(
    user_id: str = Depends(get_current_user),
    use_case: GetUserInfoUseCase = Depends(get_user_info_use_case),
):
    try:
        profile = use_case.execute(user_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail="Failed to get user info") from e

    logger.info(f"User info retrieved for user {user_id}, profile exists: {profile is not None}")
    return UserInfoResponse(profile=profile)


@router.get("/user-info-history", response_model=UserInfoHistoryResponse)
def get_user_info_history_endpoint(
    user_id: str = Depends(get_current_user),
    use_case: ListUserInfoHistoryUseCase = Depends(get_user_info_history_use_case),
):
    try:
        history = use_case.execute(user_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail="Failed to get user info history") from e

    return UserInfoHistoryResponse(history=history)


@router.put("/user-info-history/{entry_id}", response_model=UserInfoEntryResponse)
def correct_user_info_entry_endpoint(
    entry_id: str,
    payload: Dict[str, Any] = Body(...),
    user_id: str = Depends(get_current_user),
    use_case: CorrectUserInfoEntryUseCase = Depends(get_correct_user_info_use_case),
):
    """
    Correct a snapshot in place.

    The entry keeps its ID and recordedAt; no new history row is created.
    """
    try:
        entry = use_case.execute(user_id, entry_id, payload)
    except StorageError as e:
        raise HTTPException(
            status_code=500, detail="Failed to update user info history entry"
        ) from e

    return UserInfoEntryResponse(entry=entry)
