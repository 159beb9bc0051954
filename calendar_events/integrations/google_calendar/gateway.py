"""
Calendar-scoped gateway over GoogleCalendarClient.

Implements CalendarGateway for a single Google calendar. Each method is one
API request; there is no pagination, batching or caching here.
"""

import logging
from datetime import datetime, time, timedelta, timezone
from typing import Any, Optional, Union

from calendar_events.dates import format_datetime
from calendar_events.integrations.base import CalendarGateway
from calendar_events.integrations.google_calendar.client import GoogleCalendarClient
from calendar_events.record import EventRecord

logger = logging.getLogger(__name__)


def _default_time_min(now: datetime) -> datetime:
    """Start of the current day."""
    return datetime.combine(now.date(), time.min, tzinfo=now.tzinfo)


def _default_time_max(now: datetime) -> datetime:
    """End of the same day one year from now."""
    try:
        later = now.replace(year=now.year + 1)
    except ValueError:
        # Feb 29
        later = now + timedelta(days=365)
    return datetime.combine(later.date(), time(23, 59, 59), tzinfo=now.tzinfo)


def _event_body(event: Any) -> dict:
    """Accept an Event, EventRecord or raw dict and return the API body."""
    if isinstance(event, dict):
        return event
    if isinstance(event, EventRecord):
        return event.to_api()
    return event.to_dict()


def _event_id(event: Any) -> Optional[str]:
    if isinstance(event, str):
        return event
    if isinstance(event, dict):
        return event.get("id")
    return getattr(event, "id", None)


class GoogleCalendar(CalendarGateway):
    """Google Calendar gateway bound to one calendar ID."""

    def __init__(self, client: GoogleCalendarClient, calendar_id: str):
        """
        Args:
            client: API client shared across calendars
            calendar_id: Calendar every call is scoped to
        """
        self._client = client
        self._calendar_id = calendar_id

    @property
    def calendar_id(self) -> str:
        return self._calendar_id

    @property
    def client(self) -> GoogleCalendarClient:
        return self._client

    def list_events(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        query_params: Optional[dict] = None,
    ) -> list[dict]:
        """
        List events between start and end.

        Recurring events are expanded into instances unless query_params
        sets singleEvents. Without bounds the window runs from the start of
        today to the end of the day a year from now.

        Args:
            start: Lower bound on event end time
            end: Upper bound on event start time
            query_params: Extra events.list parameters; these win over defaults

        Returns:
            Event bodies of the first result page, in API order
        """
        now = datetime.now(timezone.utc)
        params = {
            "singleEvents": True,
            "timeMin": format_datetime(start or _default_time_min(now)),
            "timeMax": format_datetime(end or _default_time_max(now)),
        }
        params.update(query_params or {})

        response = self._client.list_events(self._calendar_id, **params)
        return response.get("items", [])

    def get_event(self, event_id: str) -> dict:
        return self._client.get_event(self._calendar_id, event_id)

    def insert_event(self, event: Any) -> dict:
        return self._client.insert_event(self._calendar_id, _event_body(event))

    def update_event(self, event: Any) -> dict:
        """
        Overwrite an event with the given body.

        Raises:
            ValueError: If the event has no ID
        """
        body = _event_body(event)
        event_id = body.get("id")
        if not event_id:
            raise ValueError("Cannot update an event without an ID")
        return self._client.update_event(self._calendar_id, event_id, body)

    def delete_event(self, event: Union[str, Any]) -> None:
        """
        Delete an event given its ID or an object carrying one.

        Raises:
            ValueError: If no ID can be determined
        """
        event_id = _event_id(event)
        if not event_id:
            raise ValueError("Cannot delete an event without an ID")
        self._client.delete_event(self._calendar_id, event_id)
