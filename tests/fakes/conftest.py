"""
Test Fixtures and Helpers for Fake Dependencies.

This module provides pytest fixtures and helper functions for overriding
FastAPI dependencies with fakes. Every repository provider depends on
``api.deps.get_kv_store``, so overriding that single provider runs the whole
API against a FakeKeyValueStore.

Usage:
    # In your test file
    def test_something(api_client, fake_store):
        response = api_client.get("/workout-plan")
        assert response.status_code == 200

Or use the standalone functions:
    from tests.fakes.conftest import override_dependency, reset_overrides

    def test_something():
        app = create_app(settings=app_settings)
        override_dependency(app, get_kv_store, FakeKeyValueStore())
        ...
        reset_overrides(app)
"""

from typing import Any, Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api import deps
from backend.main import create_app
from backend.settings import Settings

from tests.fakes import TEST_USER_ID, FakeClock, FakeKeyValueStore


# =============================================================================
# Type alias for dependency override functions
# =============================================================================

# Type for dependency getters in api.deps
DepGetter = Callable[..., Any]


# =============================================================================
# Reset and Override Functions
# =============================================================================


def reset_overrides(app: FastAPI) -> None:
    """
    Reset all FastAPI dependency overrides.

    Call this in test setup/teardown to ensure clean state.
    """
    app.dependency_overrides.clear()


def override_dependency(
    app: FastAPI,
    getter: DepGetter,
    implementation: Any,
) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        app: Application whose overrides are changed
        getter: The dependency getter function (e.g., get_kv_store)
        implementation: The fake instance, or a factory function

    Example:
        store = FakeKeyValueStore()
        override_dependency(app, get_kv_store, store)
    """
    # Handle both direct instances and factory functions
    if callable(implementation) and not isinstance(implementation, type):
        app.dependency_overrides[getter] = implementation
    else:
        app.dependency_overrides[getter] = lambda: implementation


# =============================================================================
# pytest Fixtures
# =============================================================================


@pytest.fixture
def app_settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def fake_store() -> FakeKeyValueStore:
    """
    Fixture providing a fresh FakeKeyValueStore.

    Returns:
        A new FakeKeyValueStore instance
    """
    return FakeKeyValueStore()


@pytest.fixture
def fake_clock() -> FakeClock:
    """Clock frozen at Monday 2026-03-02 09:00 UTC."""
    return FakeClock()


@pytest.fixture
def app(app_settings: Settings) -> FastAPI:
    """Application built from test settings, overrides cleared afterwards."""
    application = create_app(settings=app_settings)
    override_dependency(application, deps.get_settings, app_settings)
    yield application
    reset_overrides(application)


@pytest.fixture
def override_deps(app: FastAPI) -> Callable[[DepGetter, Any], Any]:
    """
    Fixture that provides a dependency override helper.

    Usage:
        def test_something(override_deps):
            store = override_deps(get_kv_store, FailingKeyValueStore())

    Returns:
        Function that accepts (getter, implementation) and returns the implementation
    """

    def _override(getter: DepGetter, implementation: Any) -> Any:
        override_dependency(app, getter, implementation)
        return implementation

    return _override


@pytest.fixture
def api_client(app: FastAPI, fake_store: FakeKeyValueStore) -> TestClient:
    """
    TestClient authenticated as TEST_USER_ID and backed by ``fake_store``.

    Usage:
        def test_flow(api_client, fake_store):
            api_client.post("/start-workout", json={...})
            assert fake_store.keys("workout_session:")
    """
    override_dependency(app, deps.get_current_user, lambda: TEST_USER_ID)
    override_dependency(app, deps.get_kv_store, fake_store)
    return TestClient(app)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Functions
    "reset_overrides",
    "override_dependency",
    # Fixtures
    "app_settings",
    "fake_store",
    "fake_clock",
    "app",
    "override_deps",
    "api_client",
]
