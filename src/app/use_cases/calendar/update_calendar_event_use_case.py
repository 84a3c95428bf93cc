"""
Update Calendar Event Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import (
    ActingUser,
    CalendarParticipant,
    CalendarReminder,
)

from .dtos import CalendarEventResponse, UpdateCalendarEventCommand
from .rules import check_links, check_reminders, check_title, normalize_dates

logger = logging.getLogger(__name__)


class UpdateCalendarEventUseCase:
    """
    Use case for updating a calendar event.

    Business Rules:
    - Only the creator can update the event (NOT_EVENT_CREATOR)
    - Same title, date, link and reminder rules as on create, checked
      against the event as it would be after the update
    - participants and reminders, when given, replace the stored ones
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        acting_user: ActingUser,
        event_id: UUID,
        command: UpdateCalendarEventCommand,
    ) -> Result[CalendarEventResponse]:
        changes = command.model_dump(exclude_unset=True, exclude_none=True)
        new_participants = changes.pop("participants", None)
        new_reminders = changes.pop("reminders", None)

        if "title" in changes:
            title_error = check_title(changes["title"])
            if title_error:
                return Return.err(title_error)
            changes["title"] = changes["title"].strip()

        reminders_error = check_reminders(new_reminders)
        if reminders_error:
            return Return.err(reminders_error)

        async with self.uow:
            event = await self.uow.calendar_events.get_by_id(event_id)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            if event.created_by != acting_user.id:
                return Return.err(
                    Error("NOT_EVENT_CREATOR", "Only the creator can change this event")
                )

            dates, dates_error = normalize_dates(
                changes.pop("start_date", event.start_date),
                changes.pop("end_date", event.end_date),
                changes.get("all_day", event.all_day),
            )
            if dates_error:
                return Return.err(dates_error)

            linked = {
                field: changes[field]
                for field in ("project_id", "team_id", "task_id")
                if field in changes
            }
            if linked:
                links_error = await check_links(
                    self.uow,
                    acting_user.id,
                    linked.get("project_id", event.project_id),
                    linked.get("team_id", event.team_id),
                    linked.get("task_id", event.task_id),
                )
                if links_error:
                    return Return.err(links_error)

            event.start_date, event.end_date = dates
            for field, value in changes.items():
                setattr(event, field, value)
            event.updated_at = utcnow()
            await self.uow.calendar_events.update(event)

            if new_participants is not None:
                participants = await self.uow.calendar_events.replace_participants(
                    event.id,
                    [
                        CalendarParticipant(event_id=event.id, user_id=user_id)
                        for user_id in dict.fromkeys(new_participants)
                    ],
                )
            else:
                participants = await self.uow.calendar_events.get_participants([event.id])

            if new_reminders is not None:
                reminders = await self.uow.calendar_events.replace_reminders(
                    event.id,
                    [
                        CalendarReminder(event_id=event.id, minutes=minutes)
                        for minutes in sorted(set(new_reminders))
                    ],
                )
            else:
                reminders = await self.uow.calendar_events.get_reminders([event.id])

            await self.uow.commit()

            logger.info(f"Calendar event {event.id} updated by {acting_user.id}")

            return Return.ok(
                CalendarEventResponse.from_entity(event, participants, reminders)
            )
