"""
Unit tests for backend/settings.py
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "SUPABASE_JWT_SECRET",
    "KV_TABLE",
    "SESSION_TTL_HOURS",
    "CORS_ALLOWED_ORIGINS",
    "SENTRY_DSN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.environment == "development"

    def test_supabase_fields_default_to_none(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.supabase_url is None
        assert settings.supabase_service_role_key is None
        assert settings.supabase_anon_key is None
        assert settings.supabase_jwt_secret is None

    def test_kv_table_default(self, clean_env):
        assert Settings(_env_file=None).kv_table == "kv_store"

    def test_session_ttl_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.session_ttl_hours == 24
        assert settings.session_ttl == timedelta(hours=24)

    def test_sentry_dsn_default_to_none(self, clean_env):
        assert Settings(_env_file=None).sentry_dsn is None


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test that Settings reads environment variables."""

    def test_reads_supabase_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
        settings = Settings(_env_file=None)
        assert settings.supabase_url == "https://test.supabase.co"
        assert settings.supabase_key == "anon-key"

    def test_service_role_key_preferred(self, clean_env, monkeypatch):
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
        monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service-key")
        assert Settings(_env_file=None).supabase_key == "service-key"

    def test_session_ttl_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("SESSION_TTL_HOURS", "1.5")
        assert Settings(_env_file=None).session_ttl == timedelta(minutes=90)

    def test_case_insensitive(self, clean_env, monkeypatch):
        monkeypatch.setenv("environment", "STAGING")
        assert Settings(_env_file=None).environment == "staging"


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings validators."""

    @pytest.mark.parametrize("env", ["development", "staging", "production", "test"])
    def test_valid_environments(self, env):
        assert Settings(environment=env, _env_file=None).environment == env

    def test_invalid_environment_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(environment="qa", _env_file=None)
        assert "Invalid environment" in str(exc_info.value)

    @pytest.mark.parametrize("hours", [0, -1])
    def test_non_positive_ttl_rejected(self, hours):
        with pytest.raises(ValidationError):
            Settings(session_ttl_hours=hours, _env_file=None)


@pytest.mark.unit
class TestSettingsHelpers:
    def test_environment_flags(self):
        assert Settings(environment="production", _env_file=None).is_production
        assert Settings(environment="development", _env_file=None).is_development
        assert Settings(environment="test", _env_file=None).is_test

    def test_cors_origins_list(self):
        settings = Settings(
            cors_allowed_origins=" https://a.example , ,https://b.example",
            _env_file=None,
        )
        assert settings.cors_origins_list == ["https://a.example", "https://b.example"]

    def test_cors_origins_empty(self):
        assert Settings(_env_file=None, cors_allowed_origins="").cors_origins_list == []


@pytest.mark.unit
class TestGetSettings:
    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
