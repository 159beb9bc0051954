"""Web framework integration for calendar-events."""
