"""
Calendar Use Case DTOs
"""

from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import (
    CalendarEvent,
    CalendarEventStatus,
    CalendarEventType,
    CalendarParticipant,
    CalendarReminder,
    Priority,
)


class CreateCalendarEventCommand(BaseModel):
    title: str
    description: Optional[str] = Field(None, max_length=5000)
    start_date: datetime
    end_date: datetime
    all_day: bool = False
    type: CalendarEventType = CalendarEventType.meeting
    location: Optional[str] = Field(None, max_length=255)
    project_id: Optional[UUID] = None
    team_id: Optional[UUID] = None
    task_id: Optional[UUID] = None
    priority: Priority = Priority.medium
    color: Optional[str] = Field(None, max_length=20)
    participants: List[UUID] = Field(default_factory=list)
    reminders: List[int] = Field(default_factory=list, description="Minutes before start")


class UpdateCalendarEventCommand(BaseModel):
    """Only the fields that are set are applied; participants and reminders are replaced"""

    title: Optional[str] = None
    description: Optional[str] = Field(None, max_length=5000)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    all_day: Optional[bool] = None
    type: Optional[CalendarEventType] = None
    location: Optional[str] = Field(None, max_length=255)
    project_id: Optional[UUID] = None
    team_id: Optional[UUID] = None
    task_id: Optional[UUID] = None
    priority: Optional[Priority] = None
    color: Optional[str] = Field(None, max_length=20)
    status: Optional[CalendarEventStatus] = None
    participants: Optional[List[UUID]] = None
    reminders: Optional[List[int]] = None


class CalendarEventFilters(BaseModel):
    """
    Narrows a calendar range.

    Project and team filters only exclude events linked to some other
    project or team; unlinked events stay visible.
    """

    search: Optional[str] = None
    projects: List[UUID] = Field(default_factory=list)
    teams: List[UUID] = Field(default_factory=list)
    participants: List[UUID] = Field(default_factory=list)
    types: List[CalendarEventType] = Field(default_factory=list)
    priorities: List[Priority] = Field(default_factory=list)
    mine_only: bool = False


class ReminderResponse(BaseModel):
    minutes: int
    triggered: bool


class CalendarEventResponse(BaseModel):
    id: str
    title: str
    description: Optional[str]
    start_date: str
    end_date: str
    all_day: bool
    type: str
    location: Optional[str]
    project_id: Optional[str]
    team_id: Optional[str]
    task_id: Optional[str]
    priority: str
    color: Optional[str]
    status: str
    created_by: str
    created_at: str
    updated_at: str
    participants: List[str] = Field(default_factory=list)
    reminders: List[ReminderResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(
        cls,
        event: CalendarEvent,
        participants: Optional[List[CalendarParticipant]] = None,
        reminders: Optional[List[CalendarReminder]] = None,
    ) -> "CalendarEventResponse":
        def optional_id(value):
            return str(value) if value else None

        return cls(
            id=str(event.id),
            title=event.title,
            description=event.description,
            start_date=event.start_date.isoformat(),
            end_date=event.end_date.isoformat(),
            all_day=event.all_day,
            type=event.type.value,
            location=event.location,
            project_id=optional_id(event.project_id),
            team_id=optional_id(event.team_id),
            task_id=optional_id(event.task_id),
            priority=event.priority.value,
            color=event.color,
            status=event.status.value,
            created_by=str(event.created_by),
            created_at=event.created_at.isoformat(),
            updated_at=event.updated_at.isoformat(),
            participants=[str(p.user_id) for p in participants or []],
            reminders=[
                ReminderResponse(minutes=r.minutes, triggered=r.triggered)
                for r in sorted(reminders or [], key=lambda r: r.minutes)
            ],
        )


class DeleteCalendarEventResponse(BaseModel):
    id: str
    deleted: bool = True


def group_by_event(rows) -> Dict[UUID, list]:
    grouped: Dict[UUID, list] = {}
    for row in rows:
        grouped.setdefault(row.event_id, []).append(row)
    return grouped
