"""
External service integrations for calendar-events.

Provides the gateway abstraction over calendar providers.
"""

from calendar_events.integrations.base import CalendarGateway

__all__ = ["CalendarGateway"]
