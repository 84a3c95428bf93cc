"""
List Calendar Events Use Case
"""

from datetime import datetime
from typing import List, Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser

from .dtos import CalendarEventFilters, CalendarEventResponse, group_by_event
from .rules import filter_events, to_naive_utc


class ListCalendarEventsUseCase:
    """
    Use case for the calendar month, week and day views.

    Business Rules:
    - Returns events overlapping [start, end], ordered by start date
    - Only events the user created or participates in, or that belong to a
      project the user can access or a team the user is part of
    - Filters narrow the visible events and never widen them
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        acting_user: ActingUser,
        start: datetime,
        end: datetime,
        filters: Optional[CalendarEventFilters] = None,
    ) -> Result[List[CalendarEventResponse]]:
        start, end = to_naive_utc(start), to_naive_utc(end)
        if end < start:
            return Return.err(
                Error("INVALID_RANGE", "Range end must not be before range start")
            )
        filters = filters or CalendarEventFilters()

        async with self.uow:
            projects = await self.uow.projects.get_accessible_by_user(acting_user.id)
            teams = await self.uow.teams.get_by_user(acting_user.id)

            events = await self.uow.calendar_events.get_in_range(
                start,
                end,
                acting_user.id,
                [p.id for p in projects],
                [t.id for t in teams],
            )
            event_ids = [e.id for e in events]
            participants = group_by_event(
                await self.uow.calendar_events.get_participants(event_ids)
            )
            reminders = group_by_event(
                await self.uow.calendar_events.get_reminders(event_ids)
            )

        visible = filter_events(events, participants, filters, acting_user.id)
        return Return.ok(
            [
                CalendarEventResponse.from_entity(
                    e, participants.get(e.id, []), reminders.get(e.id, [])
                )
                for e in visible
            ]
        )
