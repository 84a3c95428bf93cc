from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import CalendarEvent, CalendarParticipant, CalendarReminder


class ICalendarEventRepository(ABC):
    """Calendar event repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, event_id: UUID) -> Optional[CalendarEvent]:
        """Get event by ID"""
        pass

    @abstractmethod
    async def get_in_range(
        self,
        start: datetime,
        end: datetime,
        user_id: UUID,
        project_ids: List[UUID],
        team_ids: List[UUID],
    ) -> List[CalendarEvent]:
        """
        Get events overlapping [start, end] that the user can see, by start date.

        An event is visible when the user created it or participates in it,
        or when its project is in project_ids or its team is in team_ids.
        """
        pass

    @abstractmethod
    async def create(self, event: CalendarEvent) -> CalendarEvent:
        """Create a new event"""
        pass

    @abstractmethod
    async def update(self, event: CalendarEvent) -> CalendarEvent:
        """Update existing event"""
        pass

    @abstractmethod
    async def delete(self, event: CalendarEvent) -> None:
        """Delete an event with its participants and reminders"""
        pass

    @abstractmethod
    async def get_participants(self, event_ids: List[UUID]) -> List[CalendarParticipant]:
        """Get the participants of the given events"""
        pass

    @abstractmethod
    async def replace_participants(
        self, event_id: UUID, participants: List[CalendarParticipant]
    ) -> List[CalendarParticipant]:
        """Replace the participant set of an event"""
        pass

    @abstractmethod
    async def get_reminders(self, event_ids: List[UUID]) -> List[CalendarReminder]:
        """Get the reminders of the given events"""
        pass

    @abstractmethod
    async def replace_reminders(
        self, event_id: UUID, reminders: List[CalendarReminder]
    ) -> List[CalendarReminder]:
        """Replace the reminders of an event"""
        pass
