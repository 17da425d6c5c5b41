"""
Shared pytest configuration.

Fixtures live in tests/fakes/conftest.py and are re-exported here so every
test module under tests/ can use them.
"""

from tests.fakes.conftest import (  # noqa: F401
    api_client,
    app,
    fake_clock,
    fake_store,
    override_deps,
    app_settings,
)
