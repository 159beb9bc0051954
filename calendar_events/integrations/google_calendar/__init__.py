"""
Google Calendar integration for calendar-events.

Provides Google Calendar API v3 as the event backend.
"""

from calendar_events.integrations.google_calendar.auth import GoogleAuthManager
from calendar_events.integrations.google_calendar.client import GoogleCalendarClient
from calendar_events.integrations.google_calendar.exceptions import (
    GoogleCalendarAuthError,
    GoogleCalendarConfigError,
    GoogleCalendarConflictError,
    GoogleCalendarError,
    GoogleCalendarNotFoundError,
    GoogleCalendarQuotaError,
    GoogleCalendarRateLimitError,
)
from calendar_events.integrations.google_calendar.factory import GoogleCalendarFactory
from calendar_events.integrations.google_calendar.gateway import GoogleCalendar

__all__ = [
    "GoogleAuthManager",
    "GoogleCalendar",
    "GoogleCalendarClient",
    "GoogleCalendarFactory",
    "GoogleCalendarError",
    "GoogleCalendarAuthError",
    "GoogleCalendarConfigError",
    "GoogleCalendarConflictError",
    "GoogleCalendarNotFoundError",
    "GoogleCalendarQuotaError",
    "GoogleCalendarRateLimitError",
]
