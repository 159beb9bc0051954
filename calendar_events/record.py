"""
Typed representation of a Google Calendar event resource.

The fields this library reads and writes are named attributes; every other
key of the remote resource is carried verbatim in ``extra`` so that a record
fetched from the API can be sent back without losing data.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Optional


# Logical field names exposed to callers, mapped to dotted paths on the resource
FIELD_ALIASES = {
    "name": "summary",
    "startDate": "start.date",
    "endDate": "end.date",
    "startDateTime": "start.dateTime",
    "endDateTime": "end.dateTime",
    "start_date": "start.date",
    "end_date": "end.date",
    "start_date_time": "start.dateTime",
    "end_date_time": "end.dateTime",
}

DATE_PATHS = ("start.date", "end.date")
DATETIME_PATHS = ("start.dateTime", "end.dateTime")
BOUNDARY_PATHS = DATE_PATHS + DATETIME_PATHS

SORT_DATE_FIELDS = ("sortDate", "sort_date")


def translate_field_name(name: str) -> str:
    """Translate a logical field name to its dotted path. Unknown names pass through."""
    return FIELD_ALIASES.get(name, name)


@dataclass
class EventDateTime:
    """Start or end of an event: a date for all-day events, otherwise a dateTime."""

    date: Optional[str] = None
    date_time: Optional[str] = None
    time_zone: Optional[str] = None
    extra: dict = field(default_factory=dict)

    _API_KEYS = {"date": "date", "dateTime": "date_time", "timeZone": "time_zone"}

    @classmethod
    def from_api(cls, data: Optional[dict]) -> Optional["EventDateTime"]:
        if data is None:
            return None
        data = copy.deepcopy(data)
        known = {
            attr: data.pop(key)
            for key, attr in cls._API_KEYS.items()
            if key in data
        }
        return cls(**known, extra=data)

    def to_api(self) -> dict:
        body = dict(self.extra)
        for key, attr in self._API_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                body[key] = value
        return body

    def set(self, key: str, value: Any) -> None:
        """Set a boundary key by its API name (``date``, ``dateTime``, ``timeZone``)."""
        if key in self._API_KEYS:
            setattr(self, self._API_KEYS[key], value)
        else:
            self.extra[key] = value


@dataclass
class EventRecord:
    """
    A Google Calendar event resource.

    ``start`` and ``end`` are None until set. For a given boundary only one of
    ``date`` / ``date_time`` is populated.
    """

    id: Optional[str] = None
    summary: Optional[str] = None
    start: Optional[EventDateTime] = None
    end: Optional[EventDateTime] = None
    extra: dict = field(default_factory=dict)

    _NAMED_FIELDS = ("id", "summary", "start", "end")

    @classmethod
    def from_api(cls, data: dict) -> "EventRecord":
        """Build a record from an API response body. The body is copied, not shared."""
        record = cls(extra=copy.deepcopy(data))
        for name in cls._NAMED_FIELDS:
            if name in record.extra:
                record._set_named(name, record.extra.pop(name))
        return record

    def to_api(self) -> dict:
        """Render the record as an API request body. Unset fields are omitted."""
        body = copy.deepcopy(self.extra)
        if self.id is not None:
            body["id"] = self.id
        if self.summary is not None:
            body["summary"] = self.summary
        if self.start is not None:
            body["start"] = self.start.to_api()
        if self.end is not None:
            body["end"] = self.end.to_api()
        return body

    def get_path(self, path: str) -> Any:
        """Look up a dotted path. Missing keys yield None."""
        value: Any = self.to_api()
        for key in path.split("."):
            if not isinstance(value, dict) or key not in value:
                return None
            value = value[key]
        return value

    def set_path(self, path: str, value: Any) -> None:
        """
        Set a dotted path, creating intermediate objects as needed.

        Values that do not fit a named field (a string for ``start``, a nested
        key under ``summary``) are kept verbatim in ``extra`` and left for the
        API to accept or reject.
        """
        head, _, rest = path.partition(".")

        if head in self._NAMED_FIELDS and not rest:
            self._set_named(head, value)
            return

        if head in ("start", "end"):
            boundary = getattr(self, head)
            if boundary is None:
                boundary = EventDateTime()
                self._set_named(head, boundary)
            key, _, rest = rest.partition(".")
            if not rest:
                boundary.set(key, value)
                return
            target = boundary.extra
            keys = [key] + rest.split(".")
        else:
            if head in self._NAMED_FIELDS and getattr(self, head) is not None:
                # A nested key replaces the scalar, as for any other path
                setattr(self, head, None)
            target = self.extra
            keys = path.split(".")

        for key in keys[:-1]:
            if not isinstance(target.get(key), dict):
                target[key] = {}
            target = target[key]
        target[keys[-1]] = value

    def _set_named(self, name: str, value: Any) -> None:
        self.extra.pop(name, None)

        if name in ("start", "end"):
            if isinstance(value, dict):
                value = EventDateTime.from_api(value)
            elif value is not None and not isinstance(value, EventDateTime):
                setattr(self, name, None)
                self.extra[name] = value
                return

        setattr(self, name, value)
