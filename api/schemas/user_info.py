"""
Response models for the body-metrics endpoints.

Requests are read as plain JSON objects so that bad numbers produce the
field-specific 400 messages ("Invalid weight", ...) rather than a 422.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from domain.models import CamelModel, UserInfoHistoryEntry


class UserInfoResponse(CamelModel):
    profile: Optional[Dict[str, Any]] = None


class UserInfoEntryResponse(CamelModel):
    success: bool = True
    entry: UserInfoHistoryEntry


class UserInfoHistoryResponse(CamelModel):
    history: List[UserInfoHistoryEntry] = Field(default_factory=list)
