"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from application.exceptions import StorageError, WorkoutTrackerError
from backend.middleware import RequestLoggingMiddleware
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    # Create FastAPI app
    app = FastAPI(
        title="Workout Tracker API",
        description="Workout plans, guided sessions and training history",
        version="1.0.0",
    )

    # Configure CORS middleware
    _configure_cors(app, settings)

    app.add_middleware(RequestLoggingMiddleware)

    # Every error leaves the API as {"error": message}
    _register_exception_handlers(app)

    # Include API routers
    _include_routers(app)

    logger.info(
        f"Workout Tracker API created (environment={settings.environment}, "
        f"session_ttl={settings.session_ttl_hours}h)"
    )
    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured. Never reports from tests."""
    if settings.sentry_dsn and not settings.is_test:
        # 10% of transactions in production, everything elsewhere
        sample_rate = 0.1 if settings.is_production else 1.0
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=sample_rate,
            profiles_sample_rate=sample_rate,
        )
        logger.info("Sentry initialized for workout-tracker-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = []
    if not settings.is_production:
        trusted_origins.extend([
            "http://localhost:3000",
            "http://localhost:5173",
        ])
    # Add production domains from settings if configured
    trusted_origins.extend(settings.cors_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Translate application, HTTP and validation errors into ``{"error": ...}``."""

    @app.exception_handler(WorkoutTrackerError)
    async def workout_tracker_error_handler(request: Request, exc: WorkoutTrackerError):
        if isinstance(exc, StorageError):
            logger.error(f"Storage failure on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"error": _format_validation_error(exc)},
        )


def _format_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = str(first.get("msg", "Invalid value")).removeprefix("Value error, ")
    return f"{location}: {message}" if location else message


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        health_router,
        history_router,
        user_info_router,
        workout_plan_router,
        workouts_router,
    )

    # Health router (no prefix - /health and /test-auth at root)
    app.include_router(health_router)

    # Active session lifecycle: /start-workout, /log-exercise, /complete-workout
    app.include_router(workouts_router)
    # Completed workouts: history, streak, week progress, weight series
    app.include_router(history_router)
    # Body metrics and plan
    app.include_router(user_info_router)
    app.include_router(workout_plan_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
