"""
Event mapper over a Google Calendar event resource.

An Event wraps one EventRecord and exposes it through logical field names:

    event = Event()
    event.name = "Standup"
    event.start_date_time = datetime(2024, 1, 2, 9, tzinfo=timezone.utc)
    event.set_field("endDateTime", datetime(2024, 1, 2, 9, 15, tzinfo=timezone.utc))
    event = event.save()

Date fields read back as ``date`` (all-day) or aware ``datetime`` (timed).
Any other name maps straight onto the resource, so ``event.set_field(
"location", "Room 1")`` or ``event["colorId"] = "5"`` work as well.
"""

from datetime import date, datetime, time, timezone
from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

from calendar_events.dates import (
    format_date,
    format_datetime,
    parse_date,
    parse_datetime,
)
from calendar_events.record import (
    BOUNDARY_PATHS,
    DATE_PATHS,
    DATETIME_PATHS,
    SORT_DATE_FIELDS,
    EventDateTime,
    EventRecord,
    translate_field_name,
)

if TYPE_CHECKING:
    from calendar_events.repository import EventRepository


def _field_property(name: str, doc: str) -> property:
    def getter(self: "Event") -> Any:
        return self.get_field(name)

    def setter(self: "Event", value: Any) -> None:
        self.set_field(name, value)

    return property(getter, setter, doc=doc)


class Event:
    """A single calendar event, new or fetched from the API."""

    def __init__(
        self,
        record: Optional[EventRecord] = None,
        calendar_id: Optional[str] = None,
        repository: Optional["EventRepository"] = None,
    ):
        """
        Args:
            record: Remote record to wrap; an empty record for a new event
            calendar_id: Calendar the event belongs to (default calendar if None)
            repository: Repository used by save/delete (default repository if None)
        """
        self.record = record if record is not None else EventRecord()
        self.calendar_id = calendar_id
        self._repository = repository

    @classmethod
    def create_from_remote(
        cls,
        record: Union[dict, EventRecord],
        calendar_id: Optional[str],
        repository: Optional["EventRepository"] = None,
    ) -> "Event":
        """Wrap an already fetched event body without validating it."""
        if isinstance(record, dict):
            record = EventRecord.from_api(record)
        return cls(record, calendar_id, repository)

    # Entry points on the default repository

    @classmethod
    def create(cls, field_values: dict, calendar_id: Optional[str] = None) -> "Event":
        """Build an event from logical field values and insert it."""
        from calendar_events.repository import get_event_repository

        return get_event_repository().create(field_values, calendar_id)

    @classmethod
    def get(
        cls,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        query_params: Optional[dict] = None,
        calendar_id: Optional[str] = None,
    ) -> list["Event"]:
        """List events in a time window from the default repository."""
        from calendar_events.repository import get_event_repository

        return get_event_repository().get(start, end, query_params, calendar_id)

    @classmethod
    def find(cls, event_id: str, calendar_id: Optional[str] = None) -> "Event":
        """Fetch one event from the default repository."""
        from calendar_events.repository import get_event_repository

        return get_event_repository().find(event_id, calendar_id)

    @property
    def repository(self) -> "EventRepository":
        if self._repository is None:
            from calendar_events.repository import get_event_repository

            self._repository = get_event_repository()
        return self._repository

    # Field access

    def get_field(self, name: str) -> Any:
        """
        Read a field by logical name or dotted path.

        Returns:
            The value, with date fields parsed; None when absent

        Raises:
            ValueError: If a stored date string is malformed
        """
        path = translate_field_name(name)

        if path in SORT_DATE_FIELDS:
            return self.sort_date

        value = self.record.get_path(path)

        if value and path in DATE_PATHS:
            return parse_date(value)

        if value and path in DATETIME_PATHS:
            return parse_datetime(value)

        return value

    def set_field(self, name: str, value: Any) -> None:
        """
        Write a field by logical name or dotted path.

        Date fields replace the whole start or end boundary, so an event never
        holds both a date and a dateTime for the same boundary. None clears it.

        Raises:
            TypeError: If a date field gets something other than a date
            ValueError: If the field is read-only
        """
        path = translate_field_name(name)

        if path in SORT_DATE_FIELDS:
            raise ValueError(f"{name} is derived and cannot be set")

        if path in BOUNDARY_PATHS:
            self._set_boundary(path, value)
            return

        self.record.set_path(path, value)

    def _set_boundary(self, path: str, value: Any) -> None:
        boundary = path.split(".")[0]

        if value is None:
            self.record.set_path(boundary, None)
            return

        if path in DATE_PATHS:
            event_date_time = EventDateTime(date=format_date(value))
        else:
            event_date_time = EventDateTime(date_time=format_datetime(value))

        self.record.set_path(boundary, event_date_time)

    def __getitem__(self, name: str) -> Any:
        return self.get_field(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set_field(name, value)

    name = _field_property("name", "Event title (summary).")
    start_date = _field_property("startDate", "Start of an all-day event.")
    end_date = _field_property("endDate", "End of an all-day event (exclusive).")
    start_date_time = _field_property("startDateTime", "Start of a timed event.")
    end_date_time = _field_property("endDateTime", "End of a timed event.")

    @property
    def id(self) -> Optional[str]:
        return self.record.id

    @property
    def sort_date(self) -> Union[date, datetime, None]:
        """Start of the event: the all-day date if set, else the start dateTime."""
        start_date = self.get_field("startDate")
        if start_date:
            return start_date
        return self.get_field("startDateTime")

    def sort_key(self) -> datetime:
        """
        Start as an aware datetime, with all-day dates at midnight UTC.

        Unlike sort_date this compares across all-day and timed events.
        Events without a start sort first.
        """
        start = self.sort_date
        if start is None:
            return datetime.min.replace(tzinfo=timezone.utc)
        if not isinstance(start, datetime):
            return datetime.combine(start, time.min, tzinfo=timezone.utc)
        return start

    def exists(self) -> bool:
        """Check whether the event has been stored remotely (has an ID)."""
        return bool(self.record.id)

    def is_all_day_event(self) -> bool:
        """Check whether the start is a date rather than a dateTime."""
        return self.record.start is None or self.record.start.date_time is None

    # Persistence

    def save(self) -> "Event":
        """
        Insert the event if new, otherwise overwrite it by ID.

        Returns:
            A new Event built from the API response
        """
        return self.repository.save(self)

    def delete(self, event_id: Optional[str] = None) -> None:
        """Delete the event with the given ID, or this event."""
        self.repository.delete(event_id or self.id, self.calendar_id)

    def to_dict(self) -> dict:
        """Event body in Google Calendar API format."""
        return self.record.to_api()

    def __repr__(self) -> str:
        return (
            f"Event(id={self.record.id!r}, name={self.record.summary!r}, "
            f"calendar_id={self.calendar_id!r})"
        )


def sort_events(events: Iterable[Event]) -> list[Event]:
    """Order events by start, mixing all-day and timed events."""
    return sorted(events, key=lambda event: event.sort_key())
