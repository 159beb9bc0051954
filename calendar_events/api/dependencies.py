"""
FastAPI integration.

Provides the event repository as a dependency and turns calendar errors
into HTTP responses:

    app = FastAPI()
    install_exception_handlers(app)

    @app.get("/events/{event_id}")
    def show(event_id: str, events: EventRepository = Depends(get_event_repository)):
        return events.find(event_id).to_dict()
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from calendar_events.integrations.google_calendar.exceptions import (
    GoogleCalendarAuthError,
    GoogleCalendarConfigError,
    GoogleCalendarConflictError,
    GoogleCalendarError,
    GoogleCalendarNotFoundError,
    GoogleCalendarQuotaError,
    GoogleCalendarRateLimitError,
)
from calendar_events.repository import EventRepository
from calendar_events.repository import get_event_repository as _default_repository

logger = logging.getLogger(__name__)

# Most specific first
ERROR_STATUS = [
    (GoogleCalendarNotFoundError, 404),
    (GoogleCalendarConflictError, 409),
    (GoogleCalendarQuotaError, 429),
    (GoogleCalendarRateLimitError, 429),
    (GoogleCalendarAuthError, 502),
    (GoogleCalendarConfigError, 500),
    (GoogleCalendarError, 502),
]


def get_event_repository() -> EventRepository:
    """
    Dependency injection for the event repository.

    Returns the process-wide default; override with
    ``app.dependency_overrides[get_event_repository]`` in tests.
    """
    return _default_repository()


def status_for_error(error: GoogleCalendarError) -> int:
    """HTTP status to answer with for a calendar error."""
    for error_class, status in ERROR_STATUS:
        if isinstance(error, error_class):
            return status
    return 502


async def calendar_error_handler(request: Request, exc: GoogleCalendarError) -> JSONResponse:
    """Render a GoogleCalendarError as a JSON error response."""
    status = status_for_error(exc)
    if status >= 500:
        logger.error(f"Calendar call failed for {request.url.path}: {exc.message}")
    else:
        logger.warning(f"Calendar call rejected for {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=status,
        content={
            "error": type(exc).__name__,
            "detail": exc.message,
            "retryable": exc.retryable,
        },
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Register calendar error handling on an application."""
    app.add_exception_handler(GoogleCalendarError, calendar_error_handler)
