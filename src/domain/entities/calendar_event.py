"""
CalendarEvent, CalendarParticipant and CalendarReminder Entities
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import CalendarEventStatus, CalendarEventType, Priority


class CalendarEvent(SQLModel, table=True):
    """
    CalendarEvent entity - meeting, deadline or milestone on the shared calendar.

    Business Rules:
    - end_date is never before start_date
    - May point at a project, a team and a task the creator can access
    - Only the creator can update or delete it
    - Visible to the creator, its participants and anyone who can access
      its project or belongs to its team
    """

    __tablename__ = "calendar_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    title: str = Field(max_length=200, nullable=False)
    description: Optional[str] = Field(default=None, max_length=5000)
    start_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    all_day: bool = Field(default=False)
    type: CalendarEventType = Field(default=CalendarEventType.meeting)
    location: Optional[str] = Field(default=None, max_length=255)

    project_id: Optional[UUID] = Field(default=None, index=True)
    team_id: Optional[UUID] = Field(default=None, index=True)
    task_id: Optional[UUID] = Field(default=None)

    priority: Priority = Field(default=Priority.medium)
    color: Optional[str] = Field(default=None, max_length=20)
    status: CalendarEventStatus = Field(default=CalendarEventStatus.scheduled)

    created_by: UUID = Field(nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_calendar_event_start", "start_date"),)


class CalendarParticipant(SQLModel, table=True):
    __tablename__ = "calendar_participants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="calendar_events.id", nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)

    __table_args__ = (
        Index("idx_calendar_participant_pair", "event_id", "user_id", unique=True),
    )


class CalendarReminder(SQLModel, table=True):
    """Reminder fired `minutes` before the event starts"""

    __tablename__ = "calendar_reminders"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="calendar_events.id", nullable=False, index=True)
    minutes: int = Field(nullable=False)
    triggered: bool = Field(default=False)
