"""
Calendar Use Cases
"""

from .create_calendar_event_use_case import CreateCalendarEventUseCase
from .delete_calendar_event_use_case import DeleteCalendarEventUseCase
from .dtos import (
    CalendarEventFilters,
    CalendarEventResponse,
    CreateCalendarEventCommand,
    DeleteCalendarEventResponse,
    ReminderResponse,
    UpdateCalendarEventCommand,
)
from .list_calendar_events_use_case import ListCalendarEventsUseCase
from .update_calendar_event_use_case import UpdateCalendarEventUseCase

__all__ = [
    # Use Cases
    "CreateCalendarEventUseCase",
    "ListCalendarEventsUseCase",
    "UpdateCalendarEventUseCase",
    "DeleteCalendarEventUseCase",
    # DTOs
    "CalendarEventFilters",
    "CalendarEventResponse",
    "CreateCalendarEventCommand",
    "UpdateCalendarEventCommand",
    "DeleteCalendarEventResponse",
    "ReminderResponse",
]
