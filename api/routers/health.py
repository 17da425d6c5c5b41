"""
Health check router.

This router provides the liveness endpoint for monitoring and load balancers,
and an authenticated probe clients use to check their token.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_authenticated_user
from backend.auth import AuthenticatedUser

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


@router.get("/test-auth")
def test_auth(user: AuthenticatedUser = Depends(get_authenticated_user)):
    """
    Verify the caller's bearer token.

    Returns:
        dict: The resolved user ID and email; 401 if the token is rejected
    """
    logger.info(f"Test auth succeeded for user: {user.user_id}")
    return {
        "success": True,
        "userId": user.user_id,
        "email": user.email,
        "message": "Authentication working correctly",
    }
