"""
Unit tests for calendar_events/config.py

Tests Settings defaults, environment variable loading, validation and
caching behavior.
"""

import pytest
from pydantic import ValidationError

from calendar_events.config import Settings, get_settings

GOOGLE_ENV_VARS = [
    "GOOGLE_CALENDAR_ID",
    "GOOGLE_SERVICE_ACCOUNT_FILE",
    "GOOGLE_SERVICE_ACCOUNT_JSON",
    "GOOGLE_DELEGATED_USER",
    "GOOGLE_OAUTH_CLIENT_ID",
    "GOOGLE_OAUTH_CLIENT_SECRET",
    "GOOGLE_API_MAX_ATTEMPTS",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear environment variables that would leak into Settings."""
    for name in GOOGLE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsDefaults:
    """Test Settings initialization with default values."""

    def test_settings_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.google_calendar_id == ""
        assert settings.google_service_account_file == ""
        assert settings.google_service_account_json == ""
        assert settings.google_delegated_user == ""
        assert settings.google_api_max_attempts == 1
        assert settings.uses_service_account is False
        assert settings.uses_google_oauth is False


class TestSettingsEnvironmentVariables:
    """Test Settings loading from environment variables."""

    def test_settings_from_env_vars(self, clean_env):
        clean_env.setenv("GOOGLE_CALENDAR_ID", "family@group.calendar.google.com")
        clean_env.setenv("GOOGLE_SERVICE_ACCOUNT_FILE", "/path/to/key.json")
        clean_env.setenv("GOOGLE_API_MAX_ATTEMPTS", "4")
        clean_env.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.google_calendar_id == "family@group.calendar.google.com"
        assert settings.google_service_account_file == "/path/to/key.json"
        assert settings.google_api_max_attempts == 4
        assert settings.log_level == "DEBUG"
        assert settings.uses_service_account is True

    def test_case_insensitive(self, clean_env):
        clean_env.setenv("google_calendar_id", "lower@example.com")
        assert Settings(_env_file=None).google_calendar_id == "lower@example.com"

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GOOGLE_CALENDAR_ID=file@example.com\nUNRELATED=1\n")

        settings = Settings(_env_file=str(env_file))

        assert settings.google_calendar_id == "file@example.com"


class TestSettingsValidation:
    """Test field validation."""

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="VERBOSE")

    @pytest.mark.parametrize("attempts", [0, 11])
    def test_max_attempts_bounds(self, attempts):
        with pytest.raises(ValidationError):
            Settings(google_api_max_attempts=attempts)

    def test_oauth_needs_id_and_secret(self, clean_env):
        assert Settings(google_oauth_client_id="id", _env_file=None).uses_google_oauth is False
        assert Settings(
            google_oauth_client_id="id",
            google_oauth_client_secret="secret",
            _env_file=None,
        ).uses_google_oauth is True


class TestValidateGoogleCalendarConfig:
    """Tests for Google Calendar configuration validation."""

    def test_missing_calendar_id(self, clean_env):
        settings = Settings(google_service_account_file="/path/to/key.json", _env_file=None)

        with pytest.raises(ValueError) as exc_info:
            settings.validate_google_calendar_config()

        assert "GOOGLE_CALENDAR_ID not configured" in str(exc_info.value)

    def test_missing_authentication(self, clean_env):
        settings = Settings(
            google_calendar_id="family@group.calendar.google.com",
            _env_file=None,
        )

        with pytest.raises(ValueError) as exc_info:
            settings.validate_google_calendar_config()

        assert "authentication" in str(exc_info.value).lower()

    def test_reports_all_errors(self, clean_env):
        with pytest.raises(ValueError) as exc_info:
            Settings(_env_file=None).validate_google_calendar_config()

        message = str(exc_info.value)
        assert "GOOGLE_CALENDAR_ID" in message
        assert "GOOGLE_SERVICE_ACCOUNT_FILE" in message

    def test_valid_with_service_account_json(self, clean_env):
        settings = Settings(
            google_calendar_id="family@group.calendar.google.com",
            google_service_account_json='{"type": "service_account"}',
            _env_file=None,
        )

        # Should not raise
        settings.validate_google_calendar_config()


class TestGetSettings:
    """Test cached settings access."""

    def test_returns_same_instance(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, clean_env):
        first = get_settings()
        clean_env.setenv("GOOGLE_CALENDAR_ID", "changed@example.com")
        get_settings.cache_clear()

        second = get_settings()

        assert second is not first
        assert second.google_calendar_id == "changed@example.com"
