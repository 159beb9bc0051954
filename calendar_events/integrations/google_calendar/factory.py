"""
Creates calendar-scoped gateways from configuration.
"""

import logging
from typing import Optional

from calendar_events.config import Settings, get_settings
from calendar_events.integrations.google_calendar.auth import GoogleAuthManager
from calendar_events.integrations.google_calendar.client import GoogleCalendarClient
from calendar_events.integrations.google_calendar.exceptions import (
    GoogleCalendarConfigError,
)
from calendar_events.integrations.google_calendar.gateway import GoogleCalendar

logger = logging.getLogger(__name__)


class GoogleCalendarFactory:
    """
    Resolves calendar IDs to GoogleCalendar gateways.

    Credentials and the API client are created on first use and shared by
    every gateway this factory hands out.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        auth_manager: Optional[GoogleAuthManager] = None,
        client: Optional[GoogleCalendarClient] = None,
    ):
        """
        Args:
            settings: Settings to read defaults from (cached settings if None)
            auth_manager: Credential source (built from settings if None)
            client: Prebuilt API client, mainly for tests
        """
        self._settings = settings or get_settings()
        self._auth_manager = auth_manager
        self._client = client

    @property
    def default_calendar_id(self) -> str:
        return self._settings.google_calendar_id

    @property
    def client(self) -> GoogleCalendarClient:
        """Get or create the API client."""
        if self._client is None:
            if self._auth_manager is None:
                self._auth_manager = GoogleAuthManager.from_settings(self._settings)
            credentials = self._auth_manager.get_credentials()
            self._client = GoogleCalendarClient(
                credentials,
                max_attempts=self._settings.google_api_max_attempts,
            )
            logger.debug("Google Calendar API client created")
        return self._client

    def resolve_calendar_id(self, calendar_id: Optional[str] = None) -> str:
        """
        Return the explicit calendar ID, else the configured default.

        Raises:
            GoogleCalendarConfigError: If neither is set
        """
        resolved = calendar_id or self.default_calendar_id
        if not resolved:
            raise GoogleCalendarConfigError(
                "No calendar ID given and GOOGLE_CALENDAR_ID not configured"
            )
        return resolved

    def create_for_calendar_id(self, calendar_id: Optional[str] = None) -> GoogleCalendar:
        """Get a gateway for the calendar (default calendar when None)."""
        return GoogleCalendar(self.client, self.resolve_calendar_id(calendar_id))
