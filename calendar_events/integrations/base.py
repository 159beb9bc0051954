"""
Calendar gateway protocol.

A gateway performs the remote calls for exactly one calendar. Raw event
bodies (dicts in the provider's JSON shape) cross this boundary; wrapping
them into Event objects is the repository's job.
"""

from abc import abstractmethod
from datetime import datetime
from typing import Any, Optional, Protocol, Union


class CalendarGateway(Protocol):
    """
    Protocol for calendar backends.

    Implementations:
    - GoogleCalendar: Uses Google Calendar API v3
    """

    @property
    @abstractmethod
    def calendar_id(self) -> str:
        """Calendar this gateway is bound to."""
        ...

    @abstractmethod
    def list_events(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        query_params: Optional[dict] = None,
    ) -> list[dict]:
        """
        List events in a time window.

        Args:
            start: Window start; provider default when None
            end: Window end; provider default when None
            query_params: Extra provider query parameters

        Returns:
            Event bodies in the order the provider returned them
        """
        ...

    @abstractmethod
    def get_event(self, event_id: str) -> dict:
        """
        Get a single event by ID.

        Raises:
            GoogleCalendarNotFoundError: If the event does not exist
        """
        ...

    @abstractmethod
    def insert_event(self, event: Any) -> dict:
        """Create an event. Returns the stored body including its new ID."""
        ...

    @abstractmethod
    def update_event(self, event: Any) -> dict:
        """Overwrite an existing event by its ID. Returns the stored body."""
        ...

    @abstractmethod
    def delete_event(self, event: Union[str, Any]) -> None:
        """Delete an event by ID (or by an event object carrying one)."""
        ...
