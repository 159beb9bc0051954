"""
Pytest configuration and fixtures for calendar-events tests.

Provides an in-memory calendar gateway so mapper and repository behavior can
be tested without the Google API.
"""

import copy
import uuid
from datetime import datetime
from typing import Generator, Optional

import pytest

from calendar_events.config import get_settings
from calendar_events.integrations.base import CalendarGateway
from calendar_events.integrations.google_calendar.exceptions import (
    GoogleCalendarNotFoundError,
)
from calendar_events.integrations.google_calendar.gateway import _event_body, _event_id
from calendar_events.repository import EventRepository, set_event_repository

DEFAULT_CALENDAR_ID = "family@group.calendar.google.com"


class InMemoryCalendar(CalendarGateway):
    """
    CalendarGateway keeping events in a dict.

    Mimics the server: insert assigns id and etag, unknown IDs raise
    GoogleCalendarNotFoundError.
    """

    def __init__(self, calendar_id: str):
        self._calendar_id = calendar_id
        self.events: dict[str, dict] = {}
        self.list_calls: list[tuple] = []

    @property
    def calendar_id(self) -> str:
        return self._calendar_id

    def list_events(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        query_params: Optional[dict] = None,
    ) -> list[dict]:
        self.list_calls.append((start, end, query_params))
        return [copy.deepcopy(body) for body in self.events.values()]

    def get_event(self, event_id: str) -> dict:
        if event_id not in self.events:
            raise GoogleCalendarNotFoundError(f"Event {event_id} not found", status=404)
        return copy.deepcopy(self.events[event_id])

    def insert_event(self, event) -> dict:
        body = copy.deepcopy(_event_body(event))
        body["id"] = uuid.uuid4().hex
        body["etag"] = f'"{uuid.uuid4().int}"'
        self.events[body["id"]] = body
        return copy.deepcopy(body)

    def update_event(self, event) -> dict:
        body = copy.deepcopy(_event_body(event))
        if body.get("id") not in self.events:
            raise GoogleCalendarNotFoundError(f"Event {body.get('id')} not found", status=404)
        body["etag"] = f'"{uuid.uuid4().int}"'
        self.events[body["id"]] = body
        return copy.deepcopy(body)

    def delete_event(self, event) -> None:
        event_id = _event_id(event)
        if event_id not in self.events:
            raise GoogleCalendarNotFoundError(f"Event {event_id} not found", status=404)
        del self.events[event_id]


class InMemoryCalendarFactory:
    """Hands out one InMemoryCalendar per calendar ID."""

    def __init__(self, default_calendar_id: str = DEFAULT_CALENDAR_ID):
        self.default_calendar_id = default_calendar_id
        self.calendars: dict[str, InMemoryCalendar] = {}

    def create_for_calendar_id(self, calendar_id: Optional[str] = None) -> InMemoryCalendar:
        calendar_id = calendar_id or self.default_calendar_id
        if calendar_id not in self.calendars:
            self.calendars[calendar_id] = InMemoryCalendar(calendar_id)
        return self.calendars[calendar_id]


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reset cached settings and the default repository around each test."""
    get_settings.cache_clear()
    set_event_repository(None)
    yield
    get_settings.cache_clear()
    set_event_repository(None)


@pytest.fixture
def calendar_factory() -> InMemoryCalendarFactory:
    return InMemoryCalendarFactory()


@pytest.fixture
def calendar(calendar_factory: InMemoryCalendarFactory) -> InMemoryCalendar:
    """The default in-memory calendar."""
    return calendar_factory.create_for_calendar_id()


@pytest.fixture
def repository(calendar_factory: InMemoryCalendarFactory) -> EventRepository:
    """Repository over in-memory calendars, also installed as the default."""
    repo = EventRepository(calendar_factory)
    set_event_repository(repo)
    return repo


@pytest.fixture
def timed_event_body() -> dict:
    """A timed event as returned by the Google Calendar API."""
    return {
        "kind": "calendar#event",
        "id": "evt-timed",
        "etag": '"3181161784712000"',
        "status": "confirmed",
        "summary": "Standup",
        "location": "Room 1",
        "start": {"dateTime": "2024-01-02T09:00:00Z", "timeZone": "UTC"},
        "end": {"dateTime": "2024-01-02T09:15:00Z", "timeZone": "UTC"},
    }


@pytest.fixture
def all_day_event_body() -> dict:
    """An all-day event as returned by the Google Calendar API."""
    return {
        "kind": "calendar#event",
        "id": "evt-all-day",
        "summary": "Offsite",
        "start": {"date": "2024-03-01"},
        "end": {"date": "2024-03-02"},
    }
