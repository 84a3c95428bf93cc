from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.calendar_event_repository import ICalendarEventRepository
from src.domain.entities import CalendarEvent, CalendarParticipant, CalendarReminder


class CalendarEventRepository(ICalendarEventRepository):
    """Calendar event repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, event_id: UUID) -> Optional[CalendarEvent]:
        """Get event by ID"""
        stmt = select(CalendarEvent).where(CalendarEvent.id == event_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_in_range(
        self,
        start: datetime,
        end: datetime,
        user_id: UUID,
        project_ids: List[UUID],
        team_ids: List[UUID],
    ) -> List[CalendarEvent]:
        """Get events overlapping [start, end] that the user can see, by start date"""
        participating = select(CalendarParticipant.event_id).where(
            CalendarParticipant.user_id == user_id
        )
        visible = [
            CalendarEvent.created_by == user_id,
            col(CalendarEvent.id).in_(participating),
        ]
        if project_ids:
            visible.append(col(CalendarEvent.project_id).in_(project_ids))
        if team_ids:
            visible.append(col(CalendarEvent.team_id).in_(team_ids))

        stmt = (
            select(CalendarEvent)
            .where(
                CalendarEvent.start_date <= end,
                CalendarEvent.end_date >= start,
                or_(*visible),
            )
            .order_by(CalendarEvent.start_date, CalendarEvent.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, event: CalendarEvent) -> CalendarEvent:
        """Create a new event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def update(self, event: CalendarEvent) -> CalendarEvent:
        """Update existing event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def delete(self, event: CalendarEvent) -> None:
        """Delete an event with its participants and reminders"""
        await self.session.execute(
            delete(CalendarParticipant).where(CalendarParticipant.event_id == event.id)
        )
        await self.session.execute(
            delete(CalendarReminder).where(CalendarReminder.event_id == event.id)
        )
        await self.session.delete(event)
        await self.session.flush()

    async def get_participants(self, event_ids: List[UUID]) -> List[CalendarParticipant]:
        """Get the participants of the given events"""
        if not event_ids:
            return []
        stmt = select(CalendarParticipant).where(
            col(CalendarParticipant.event_id).in_(event_ids)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def replace_participants(
        self, event_id: UUID, participants: List[CalendarParticipant]
    ) -> List[CalendarParticipant]:
        """Replace the participant set of an event"""
        await self.session.execute(
            delete(CalendarParticipant).where(CalendarParticipant.event_id == event_id)
        )
        for participant in participants:
            participant.event_id = event_id
            self.session.add(participant)
        await self.session.flush()
        return participants

    async def get_reminders(self, event_ids: List[UUID]) -> List[CalendarReminder]:
        """Get the reminders of the given events, soonest first"""
        if not event_ids:
            return []
        stmt = (
            select(CalendarReminder)
            .where(col(CalendarReminder.event_id).in_(event_ids))
            .order_by(CalendarReminder.minutes)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def replace_reminders(
        self, event_id: UUID, reminders: List[CalendarReminder]
    ) -> List[CalendarReminder]:
        """Replace the reminders of an event"""
        await self.session.execute(
            delete(CalendarReminder).where(CalendarReminder.event_id == event_id)
        )
        for reminder in reminders:
            reminder.event_id = event_id
            self.session.add(reminder)
        await self.session.flush()
        return reminders
