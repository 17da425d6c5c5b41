"""
Authentication module for Supabase bearer tokens.
Provides the validation used by the FastAPI auth dependencies in api.deps.

Tokens are issued by Supabase Auth; this service only verifies them:
- Locally with PyJWT (HS256, aud "authenticated") when SUPABASE_JWT_SECRET is set
- Otherwise by asking Supabase Auth (client.auth.get_user) to resolve the token
"""
import logging
from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import HTTPException
from supabase import AuthApiError, AuthError, Client

logger = logging.getLogger(__name__)

SUPABASE_JWT_ALGORITHM = "HS256"
SUPABASE_JWT_AUDIENCE = "authenticated"


@dataclass
class AuthenticatedUser:
    """Identity resolved from a bearer token."""

    user_id: str
    email: Optional[str] = None


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing authorization header")

    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise HTTPException(status_code=401, detail="Missing bearer token")
    return token


def validate_supabase_jwt(token: str, secret: str) -> AuthenticatedUser:
    """Validate a Supabase access token (HS256) and return the user."""
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[SUPABASE_JWT_ALGORITHM],
            audience=SUPABASE_JWT_AUDIENCE,
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid Supabase JWT: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing user ID")
    logger.debug(f"Supabase JWT validated for user: {user_id}")
    return AuthenticatedUser(user_id=user_id, email=payload.get("email"))


def validate_with_auth_api(token: str, client: Optional[Client]) -> AuthenticatedUser:
    """Resolve the token through Supabase Auth and return the user."""
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Authentication not available. Supabase credentials not configured.",
        )

    try:
        response = client.auth.get_user(token)
    except AuthApiError as e:
        logger.warning(f"Supabase rejected token: {e}")
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    except AuthError as e:
        logger.error(f"Supabase auth lookup failed: {e}")
        raise HTTPException(status_code=503, detail="Authentication service unavailable")

    user = response.user if response else None
    if user is None or not user.id:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return AuthenticatedUser(user_id=user.id, email=user.email)


def authenticate(
    authorization: Optional[str],
    jwt_secret: Optional[str],
    client: Optional[Client],
) -> AuthenticatedUser:
    """
    Authenticate a request from its Authorization header.

    Raises:
        HTTPException: 401 for a missing or invalid token, 503 when neither
            a JWT secret nor a Supabase client is configured
    """
    token = extract_bearer_token(authorization)
    if jwt_secret:
        return validate_supabase_jwt(token, jwt_secret)
    return validate_with_auth_api(token, client)
