"""
Exceptions raised by Google Calendar operations.

Every failed remote call surfaces as a GoogleCalendarError subclass so callers
can tell a remote failure apart from local mistakes. The underlying
HttpError stays available on ``original_error``.
"""

from typing import Optional


class GoogleCalendarError(Exception):
    """A call to the Google Calendar API failed."""

    retryable: bool = False

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        status: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.status = status


class GoogleCalendarConfigError(GoogleCalendarError):
    """
    The library is not configured well enough to reach a calendar.

    Causes:
    - No calendar ID given and GOOGLE_CALENDAR_ID unset
    - No service account or OAuth credentials configured
    """


class GoogleCalendarAuthError(GoogleCalendarError):
    """
    Authentication or authorization failure.

    Causes:
    - Invalid or expired credentials
    - Insufficient scopes
    - Calendar not shared with the service account
    """


class GoogleCalendarQuotaError(GoogleCalendarError):
    """API quota exceeded (403 with a quota reason)."""

    retryable = True


class GoogleCalendarNotFoundError(GoogleCalendarError):
    """
    Event or calendar not found.

    Causes:
    - Event was deleted
    - Calendar ID or event ID is invalid
    """


class GoogleCalendarConflictError(GoogleCalendarError):
    """
    Event write conflict.

    Causes:
    - Stale etag (event was modified concurrently)
    - Event ID already exists on insert
    """


class GoogleCalendarRateLimitError(GoogleCalendarError):
    """Rate limit hit (429 response)."""

    retryable = True
