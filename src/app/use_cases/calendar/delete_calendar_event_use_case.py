"""
Delete Calendar Event Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser

from .dtos import DeleteCalendarEventResponse

logger = logging.getLogger(__name__)


class DeleteCalendarEventUseCase:
    """Only the creator can delete an event; participants and reminders go with it"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, event_id: UUID
    ) -> Result[DeleteCalendarEventResponse]:
        async with self.uow:
            event = await self.uow.calendar_events.get_by_id(event_id)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            if event.created_by != acting_user.id:
                return Return.err(
                    Error("NOT_EVENT_CREATOR", "Only the creator can delete this event")
                )

            await self.uow.calendar_events.delete(event)
            await self.uow.commit()

            logger.info(f"Calendar event {event_id} deleted by {acting_user.id}")

            return Return.ok(DeleteCalendarEventResponse(id=str(event_id)))
