"""
calendar-events: an object mapper over Google Calendar events.

Exposes the Event mapper, the repository entry points and the error types.
"""

from calendar_events.event import Event, sort_events
from calendar_events.integrations.google_calendar.exceptions import (
    GoogleCalendarError,
    GoogleCalendarNotFoundError,
)
from calendar_events.record import FIELD_ALIASES, EventDateTime, EventRecord
from calendar_events.repository import (
    EventRepository,
    get_event_repository,
    set_event_repository,
)

__all__ = [
    "Event",
    "EventDateTime",
    "EventRecord",
    "EventRepository",
    "FIELD_ALIASES",
    "GoogleCalendarError",
    "GoogleCalendarNotFoundError",
    "get_event_repository",
    "set_event_repository",
    "sort_events",
]
