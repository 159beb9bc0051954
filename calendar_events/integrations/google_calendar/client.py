"""
Google Calendar API client wrapper with error translation.

Provides a thin interface over the events collection of Google Calendar
API v3. Retries are off by default and enabled with ``max_attempts``.
"""

import logging
from typing import Any, Optional

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build, Resource
from googleapiclient.errors import HttpError
from googleapiclient.http import HttpRequest
from tenacity import (
    Retrying,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception,
)

from calendar_events.integrations.google_calendar.exceptions import (
    GoogleCalendarError,
    GoogleCalendarAuthError,
    GoogleCalendarQuotaError,
    GoogleCalendarNotFoundError,
    GoogleCalendarConflictError,
    GoogleCalendarRateLimitError,
)

logger = logging.getLogger(__name__)

QUOTA_MARKERS = ("quota", "rate limit", "ratelimitexceeded", "usagelimits")


def _is_retryable_error(exception: BaseException) -> bool:
    """Check if an exception should trigger a retry."""
    if isinstance(exception, GoogleCalendarError):
        return exception.retryable
    if isinstance(exception, HttpError):
        return exception.resp.status in (429, 500, 502, 503, 504)
    return False


def _handle_http_error(error: HttpError) -> None:
    """Convert HttpError to the matching GoogleCalendarError and raise it."""
    status = error.resp.status
    message = str(error)

    if status == 401:
        raise GoogleCalendarAuthError(
            "Authentication failed - credentials may be invalid or expired",
            original_error=error,
            status=status,
        )
    elif status == 403:
        if any(marker in message.lower() for marker in QUOTA_MARKERS):
            raise GoogleCalendarQuotaError(
                "API quota exceeded",
                original_error=error,
                status=status,
            )
        raise GoogleCalendarAuthError(
            "Access denied - check calendar sharing permissions",
            original_error=error,
            status=status,
        )
    elif status in (404, 410):
        raise GoogleCalendarNotFoundError(
            "Event or calendar not found",
            original_error=error,
            status=status,
        )
    elif status in (409, 412):
        raise GoogleCalendarConflictError(
            "Event was modified by another process or already exists",
            original_error=error,
            status=status,
        )
    elif status == 429:
        raise GoogleCalendarRateLimitError(
            "Rate limit exceeded - too many requests",
            original_error=error,
            status=status,
        )

    failure = GoogleCalendarError(
        f"Google Calendar API error ({status}): {message}",
        original_error=error,
        status=status,
    )
    failure.retryable = status >= 500
    raise failure


class GoogleCalendarClient:
    """
    Wrapper around the events collection of Google Calendar API v3.

    Every call targets an explicit calendar ID; binding to a single calendar
    happens one level up in GoogleCalendar.
    """

    def __init__(
        self,
        credentials: Credentials,
        max_attempts: int = 1,
        service: Optional[Resource] = None,
    ):
        """
        Initialize the client.

        Args:
            credentials: Google credentials (service account or OAuth)
            max_attempts: Attempts per call; 1 disables retrying
            service: Prebuilt API resource, built from credentials when None
        """
        self._service: Resource = service or build(
            "calendar",
            "v3",
            credentials=credentials,
            cache_discovery=False,
        )
        self._max_attempts = max_attempts
        self._wait = wait_exponential(multiplier=1, min=1, max=10)

    @property
    def service(self) -> Resource:
        """Get the underlying Google API service."""
        return self._service

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def _execute(self, request: HttpRequest) -> Any:
        """Execute a request, retrying transient failures up to max_attempts."""
        retrying = Retrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry=retry_if_exception(_is_retryable_error),
            reraise=True,
        )
        return retrying(self._execute_once, request)

    @staticmethod
    def _execute_once(request: HttpRequest) -> Any:
        try:
            return request.execute()
        except HttpError as e:
            _handle_http_error(e)

    def list_events(self, calendar_id: str, **params: Any) -> dict:
        """
        List events from a calendar.

        Args:
            calendar_id: Calendar to query
            **params: events.list query parameters (timeMin, timeMax, q, ...)

        Returns:
            API response with items and nextPageToken
        """
        response = self._execute(
            self._service.events().list(calendarId=calendar_id, **params)
        )
        logger.debug(
            f"Listed {len(response.get('items', []))} events from {calendar_id}"
        )
        return response

    def get_event(self, calendar_id: str, event_id: str) -> dict:
        """
        Get a single event by ID.

        Raises:
            GoogleCalendarNotFoundError: If the event does not exist
        """
        event = self._execute(
            self._service.events().get(calendarId=calendar_id, eventId=event_id)
        )
        logger.debug(f"Fetched event {event_id} from {calendar_id}")
        return event

    def insert_event(self, calendar_id: str, body: dict) -> dict:
        """
        Create a new event.

        Args:
            calendar_id: Calendar to create event in
            body: Event data in Google Calendar format

        Returns:
            Created event with ID
        """
        result = self._execute(
            self._service.events().insert(calendarId=calendar_id, body=body)
        )
        logger.info(f"Created event {result.get('id')} in {calendar_id}")
        return result

    def update_event(self, calendar_id: str, event_id: str, body: dict) -> dict:
        """
        Overwrite an existing event.

        Args:
            calendar_id: Calendar containing the event
            event_id: Event to update
            body: Complete event data

        Returns:
            Updated event
        """
        result = self._execute(
            self._service.events().update(
                calendarId=calendar_id,
                eventId=event_id,
                body=body,
            )
        )
        logger.info(f"Updated event {event_id} in {calendar_id}")
        return result

    def delete_event(self, calendar_id: str, event_id: str) -> None:
        """
        Delete an event.

        Raises:
            GoogleCalendarNotFoundError: If the event does not exist
        """
        self._execute(
            self._service.events().delete(calendarId=calendar_id, eventId=event_id)
        )
        logger.info(f"Deleted event {event_id} from {calendar_id}")
