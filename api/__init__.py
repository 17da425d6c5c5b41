"""
API package for the Workout Tracker API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- schemas/: Request and response models
- routers/: API route handlers
"""

# Re-export the providers most often overridden in tests
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_kv_store,
    get_current_user,
    get_authenticated_user,
)

__all__ = [
    "get_settings",
    "get_supabase_client",
    "get_supabase_client_required",
    "get_kv_store",
    "get_current_user",
    "get_authenticated_user",
]
