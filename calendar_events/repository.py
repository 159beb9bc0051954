"""
Event repository - the entry point for querying and persisting events.

Wires Event mappers to calendar gateways. A repository is built from a
gateway factory; applications typically share the process default from
get_event_repository().
"""

import logging
from datetime import datetime
from typing import Optional, Protocol

from calendar_events.event import Event
from calendar_events.integrations.base import CalendarGateway

logger = logging.getLogger(__name__)

# Singleton instance
_event_repository: Optional["EventRepository"] = None


class GatewayFactory(Protocol):
    """Anything that can resolve a calendar ID to a gateway."""

    def create_for_calendar_id(self, calendar_id: Optional[str] = None) -> CalendarGateway:
        ...


class EventRepository:
    """
    Queries and persists Events through calendar gateways.

    Every method takes an optional calendar ID; the factory substitutes its
    configured default when it is omitted.
    """

    def __init__(self, factory: GatewayFactory):
        """
        Args:
            factory: Resolves calendar IDs to gateways
        """
        self._factory = factory

    @property
    def factory(self) -> GatewayFactory:
        return self._factory

    def gateway(self, calendar_id: Optional[str] = None) -> CalendarGateway:
        """Get the gateway for a calendar (default calendar when None)."""
        return self._factory.create_for_calendar_id(calendar_id)

    def _wrap(self, body: dict, calendar_id: str) -> Event:
        return Event.create_from_remote(body, calendar_id, repository=self)

    def get(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        query_params: Optional[dict] = None,
        calendar_id: Optional[str] = None,
    ) -> list[Event]:
        """
        List events in a time window.

        Args:
            start: Window start (gateway default when None)
            end: Window end (gateway default when None)
            query_params: Provider query parameters, e.g. {"q": "standup"}
            calendar_id: Calendar to query

        Returns:
            Events in the order the API returned them
        """
        gateway = self.gateway(calendar_id)
        bodies = gateway.list_events(start, end, query_params)
        logger.debug(f"Retrieved {len(bodies)} events from {gateway.calendar_id}")
        return [self._wrap(body, gateway.calendar_id) for body in bodies]

    def find(self, event_id: str, calendar_id: Optional[str] = None) -> Event:
        """
        Fetch one event by ID.

        Raises:
            GoogleCalendarNotFoundError: If the event does not exist
        """
        gateway = self.gateway(calendar_id)
        return self._wrap(gateway.get_event(event_id), gateway.calendar_id)

    def create(self, field_values: dict, calendar_id: Optional[str] = None) -> Event:
        """
        Build a new event from logical field values and insert it.

        Args:
            field_values: e.g. {"name": "Standup", "startDateTime": ...}
            calendar_id: Calendar to insert into

        Returns:
            The stored event, including its server-assigned ID
        """
        gateway = self.gateway(calendar_id)
        event = Event(calendar_id=gateway.calendar_id, repository=self)

        for name, value in field_values.items():
            event.set_field(name, value)

        return self.save(event)

    def save(self, event: Event) -> Event:
        """
        Insert a new event or overwrite an existing one.

        Returns:
            A new Event built from the API response, not the local state
        """
        gateway = self.gateway(event.calendar_id)

        if event.exists():
            body = gateway.update_event(event)
        else:
            body = gateway.insert_event(event)

        saved = self._wrap(body, gateway.calendar_id)
        logger.info(f"Saved event {saved.id} in {gateway.calendar_id}")
        return saved

    def delete(self, event_id: str, calendar_id: Optional[str] = None) -> None:
        """
        Delete an event by ID.

        Raises:
            ValueError: If event_id is empty
            GoogleCalendarNotFoundError: If the event does not exist
        """
        if not event_id:
            raise ValueError("Cannot delete an event without an ID")
        self.gateway(calendar_id).delete_event(event_id)


def get_event_repository() -> EventRepository:
    """
    Get the default repository singleton.

    Backed by a GoogleCalendarFactory reading the cached settings.
    """
    global _event_repository

    if _event_repository is None:
        from calendar_events.integrations.google_calendar.factory import (
            GoogleCalendarFactory,
        )

        _event_repository = EventRepository(GoogleCalendarFactory())
        logger.info("Event repository initialized")

    return _event_repository


def set_event_repository(repository: Optional[EventRepository]) -> None:
    """Replace the default repository; None resets it to be rebuilt lazily."""
    global _event_repository
    _event_repository = repository
