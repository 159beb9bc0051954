"""
Authentication for Google Calendar API.

Supports:
- Service account authentication, optionally impersonating a Workspace user
- OAuth 2.0 user tokens obtained elsewhere (e.g. by the web application)
"""

import json
import logging
from pathlib import Path
from typing import Optional

import google.auth.transport.requests
from google.oauth2 import service_account
from google.oauth2.credentials import Credentials

from calendar_events.config import Settings, get_settings
from calendar_events.integrations.google_calendar.exceptions import (
    GoogleCalendarAuthError,
    GoogleCalendarConfigError,
)

logger = logging.getLogger(__name__)

CALENDAR_SCOPES = [
    "https://www.googleapis.com/auth/calendar",
]

TOKEN_URI = "https://oauth2.googleapis.com/token"


def get_service_account_credentials(
    service_account_file: Optional[str] = None,
    service_account_info: Optional[dict] = None,
    subject: Optional[str] = None,
) -> service_account.Credentials:
    """
    Get credentials from a service account.

    The calendar must be shared with the service account email, unless
    ``subject`` names a user the account may impersonate.

    Args:
        service_account_file: Path to service account JSON key file
        service_account_info: Service account info as dict (alternative to file)
        subject: Email of the user to impersonate

    Raises:
        GoogleCalendarAuthError: If credentials cannot be loaded
    """
    try:
        if service_account_info:
            credentials = service_account.Credentials.from_service_account_info(
                service_account_info,
                scopes=CALENDAR_SCOPES,
            )
        elif service_account_file:
            file_path = Path(service_account_file)
            if not file_path.exists():
                raise GoogleCalendarAuthError(
                    f"Service account file not found: {service_account_file}"
                )
            credentials = service_account.Credentials.from_service_account_file(
                str(file_path),
                scopes=CALENDAR_SCOPES,
            )
        else:
            raise GoogleCalendarAuthError(
                "Either service_account_file or service_account_info must be provided"
            )

        if subject:
            credentials = credentials.with_subject(subject)

        logger.info(
            f"Loaded service account credentials: {credentials.service_account_email}"
        )
        return credentials

    except GoogleCalendarAuthError:
        raise
    except (ValueError, KeyError, OSError) as e:
        raise GoogleCalendarAuthError(
            f"Failed to load service account credentials: {e}",
            original_error=e,
        )


def get_oauth_credentials_from_dict(
    credentials_dict: dict,
    settings: Optional[Settings] = None,
) -> Credentials:
    """
    Create credentials from stored OAuth tokens.

    Args:
        credentials_dict: Dict with keys token, refresh_token, token_uri, scopes
        settings: Supplies the OAuth client needed for refreshing

    Raises:
        GoogleCalendarAuthError: If the dict has no access token
    """
    if not credentials_dict.get("token"):
        raise GoogleCalendarAuthError("OAuth credentials are missing an access token")

    settings = settings or get_settings()

    return Credentials(
        token=credentials_dict["token"],
        refresh_token=credentials_dict.get("refresh_token"),
        token_uri=credentials_dict.get("token_uri", TOKEN_URI),
        client_id=settings.google_oauth_client_id or None,
        client_secret=settings.google_oauth_client_secret or None,
        scopes=credentials_dict.get("scopes") or CALENDAR_SCOPES,
    )


class GoogleAuthManager:
    """
    Loads and refreshes credentials for the API client.

    OAuth credentials take precedence over a service account when both are
    provided.
    """

    def __init__(
        self,
        service_account_file: Optional[str] = None,
        service_account_info: Optional[dict] = None,
        oauth_credentials: Optional[dict] = None,
        subject: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        self._credentials = None
        self._service_account_file = service_account_file
        self._service_account_info = service_account_info
        self._oauth_credentials = oauth_credentials
        self._subject = subject
        self._settings = settings
        self._use_oauth = oauth_credentials is not None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "GoogleAuthManager":
        """
        Build an auth manager from service account settings.

        Raises:
            GoogleCalendarConfigError: If no service account is configured
            GoogleCalendarAuthError: If GOOGLE_SERVICE_ACCOUNT_JSON is not valid JSON
        """
        settings = settings or get_settings()

        if settings.google_service_account_json:
            try:
                info = json.loads(settings.google_service_account_json)
            except json.JSONDecodeError as e:
                raise GoogleCalendarAuthError(
                    f"Invalid JSON in GOOGLE_SERVICE_ACCOUNT_JSON: {e}",
                    original_error=e,
                )
            return cls(
                service_account_info=info,
                subject=settings.google_delegated_user or None,
                settings=settings,
            )

        if settings.google_service_account_file:
            return cls(
                service_account_file=settings.google_service_account_file,
                subject=settings.google_delegated_user or None,
                settings=settings,
            )

        raise GoogleCalendarConfigError(
            "No Google credentials configured. "
            "Set GOOGLE_SERVICE_ACCOUNT_FILE or GOOGLE_SERVICE_ACCOUNT_JSON."
        )

    def get_credentials(self):
        """Get valid credentials, loading or refreshing as needed."""
        if self._credentials is None:
            if self._use_oauth:
                self._credentials = get_oauth_credentials_from_dict(
                    self._oauth_credentials, self._settings
                )
            else:
                self._credentials = get_service_account_credentials(
                    service_account_file=self._service_account_file,
                    service_account_info=self._service_account_info,
                    subject=self._subject,
                )

        if self._credentials.expired and (
            not self._use_oauth or self._credentials.refresh_token
        ):
            self._credentials.refresh(google.auth.transport.requests.Request())

        return self._credentials

    @property
    def is_oauth(self) -> bool:
        """Check if using OAuth credentials."""
        return self._use_oauth
