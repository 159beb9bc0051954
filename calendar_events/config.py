"""
Configuration management for calendar-events.

Uses Pydantic Settings for type-safe environment variable loading.
Configured via .env file in the working directory.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    All settings can be configured via .env file or environment variables.
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )

    # Calendar used when callers don't pass one explicitly
    google_calendar_id: str = Field(
        default="",
        description="Default Google Calendar ID"
    )

    # Service account authentication
    google_service_account_file: str = Field(
        default="",
        description="Path to Google service account JSON key file"
    )
    google_service_account_json: str = Field(
        default="",
        description="Google service account JSON (alternative to file, for deployments)"
    )
    google_delegated_user: str = Field(
        default="",
        description="User to impersonate through domain-wide delegation"
    )

    # OAuth client, needed to refresh user tokens
    google_oauth_client_id: str = Field(
        default="",
        description="Google OAuth 2.0 client ID"
    )
    google_oauth_client_secret: str = Field(
        default="",
        description="Google OAuth 2.0 client secret"
    )

    google_api_max_attempts: int = Field(
        default=1,
        ge=1,
        le=10,
        description="Attempts per API call; values above 1 retry transient errors"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def uses_service_account(self) -> bool:
        """Check if service account credentials are configured."""
        return bool(self.google_service_account_file or self.google_service_account_json)

    @property
    def uses_google_oauth(self) -> bool:
        """Check if a Google OAuth client is configured."""
        return bool(self.google_oauth_client_id and self.google_oauth_client_secret)

    def validate_google_calendar_config(self) -> None:
        """
        Validate Google Calendar configuration.

        Raises:
            ValueError: If required settings are missing
        """
        errors = []

        if not self.google_calendar_id:
            errors.append(
                "GOOGLE_CALENDAR_ID not configured. "
                "Please set it in your .env file or pass a calendar ID explicitly."
            )

        if not self.uses_service_account:
            errors.append(
                "Google Calendar requires authentication. "
                "Set either GOOGLE_SERVICE_ACCOUNT_FILE or GOOGLE_SERVICE_ACCOUNT_JSON."
            )

        if errors:
            raise ValueError("Google Calendar configuration errors:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Example:
        >>> from calendar_events.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.google_calendar_id)
    """
    return Settings()
