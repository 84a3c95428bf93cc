"""
Create Calendar Event Use Case
"""

import logging

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import (
    ActingUser,
    CalendarEvent,
    CalendarParticipant,
    CalendarReminder,
)

from .dtos import CalendarEventResponse, CreateCalendarEventCommand
from .rules import check_links, check_reminders, check_title, normalize_dates

logger = logging.getLogger(__name__)


class CreateCalendarEventUseCase:
    """
    Use case for creating a calendar event.

    Business Rules:
    - Title is required and at most 200 characters
    - end_date must not be before start_date; all-day events span whole days
    - Linked project, team and task must be accessible to the creator
    - Reminders are minutes before the start, between 0 and four weeks
    - Duplicate participants and reminders are collapsed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, command: CreateCalendarEventCommand
    ) -> Result[CalendarEventResponse]:
        title_error = check_title(command.title)
        if title_error:
            return Return.err(title_error)

        reminders_error = check_reminders(command.reminders)
        if reminders_error:
            return Return.err(reminders_error)

        dates, dates_error = normalize_dates(
            command.start_date, command.end_date, command.all_day
        )
        if dates_error:
            return Return.err(dates_error)
        start_date, end_date = dates

        async with self.uow:
            links_error = await check_links(
                self.uow,
                acting_user.id,
                command.project_id,
                command.team_id,
                command.task_id,
            )
            if links_error:
                return Return.err(links_error)

            now = utcnow()
            event = CalendarEvent(
                title=command.title.strip(),
                description=command.description,
                start_date=start_date,
                end_date=end_date,
                all_day=command.all_day,
                type=command.type,
                location=command.location,
                project_id=command.project_id,
                team_id=command.team_id,
                task_id=command.task_id,
                priority=command.priority,
                color=command.color,
                created_by=acting_user.id,
                created_at=now,
                updated_at=now,
            )
            await self.uow.calendar_events.create(event)

            participants = await self.uow.calendar_events.replace_participants(
                event.id,
                [
                    CalendarParticipant(event_id=event.id, user_id=user_id)
                    for user_id in dict.fromkeys(command.participants)
                ],
            )
            reminders = await self.uow.calendar_events.replace_reminders(
                event.id,
                [
                    CalendarReminder(event_id=event.id, minutes=minutes)
                    for minutes in sorted(set(command.reminders))
                ],
            )
            await self.uow.commit()

            logger.info(f"Calendar event {event.id} created by {acting_user.id}")

            return Return.ok(
                CalendarEventResponse.from_entity(event, participants, reminders)
            )
