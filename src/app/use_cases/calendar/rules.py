"""
Calendar rules shared by the calendar use cases.
"""

from datetime import datetime, time, timezone
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from libs.result import Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks.rules import get_accessible_task
from src.domain.entities import CalendarEvent, CalendarParticipant

from .dtos import CalendarEventFilters

EVENT_TITLE_MAX_LENGTH = 200
# Four weeks
REMINDER_MAX_MINUTES = 40320


def check_title(title: Optional[str]) -> Optional[Error]:
    if title is None or not title.strip():
        return Error("TITLE_REQUIRED", "Event title is required")
    if len(title.strip()) > EVENT_TITLE_MAX_LENGTH:
        return Error(
            "TITLE_TOO_LONG",
            f"Event title must have at most {EVENT_TITLE_MAX_LENGTH} characters",
        )
    return None


def check_reminders(reminders: Optional[List[int]]) -> Optional[Error]:
    for minutes in reminders or []:
        if minutes < 0 or minutes > REMINDER_MAX_MINUTES:
            return Error(
                "INVALID_REMINDER",
                f"Reminders must be between 0 and {REMINDER_MAX_MINUTES} minutes before the event",
            )
    return None


def to_naive_utc(value: datetime) -> datetime:
    """DateTime columns store naive UTC"""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def normalize_dates(
    start: datetime, end: datetime, all_day: bool
) -> Tuple[Optional[Tuple[datetime, datetime]], Optional[Error]]:
    start, end = to_naive_utc(start), to_naive_utc(end)
    if all_day:
        start = datetime.combine(start.date(), time.min)
        end = datetime.combine(end.date(), time.max)
    if end < start:
        return None, Error("INVALID_EVENT_DATES", "End date must not be before start date")
    return (start, end), None


async def check_links(
    uow: UnitOfWork,
    user_id: UUID,
    project_id: Optional[UUID],
    team_id: Optional[UUID],
    task_id: Optional[UUID],
) -> Optional[Error]:
    """Linked project, team and task must exist and be reachable by the user"""
    if project_id is not None and not await uow.projects.user_can_access(project_id, user_id):
        return Error("PROJECT_NOT_FOUND", "Project not found")

    if team_id is not None:
        team = await uow.teams.get_by_id(team_id)
        if team is None or (
            team.leader_id != user_id
            and await uow.teams.get_member(team_id, user_id) is None
        ):
            return Error("TEAM_NOT_FOUND", "Team not found")

    if task_id is not None:
        task = await get_accessible_task(uow, task_id, user_id)
        if task is None or (project_id is not None and task.project_id != project_id):
            return Error("TASK_NOT_FOUND", "Task not found")

    return None


def matches(
    event: CalendarEvent,
    participants: List[CalendarParticipant],
    filters: CalendarEventFilters,
    user_id: UUID,
) -> bool:
    participant_ids = {p.user_id for p in participants}

    if filters.search:
        query = filters.search.lower()
        if query not in event.title.lower() and query not in (event.description or "").lower():
            return False
    if filters.projects and event.project_id and event.project_id not in filters.projects:
        return False
    if filters.teams and event.team_id and event.team_id not in filters.teams:
        return False
    if filters.participants and not participant_ids.intersection(filters.participants):
        return False
    if filters.types and event.type not in filters.types:
        return False
    if filters.priorities and event.priority not in filters.priorities:
        return False
    if filters.mine_only and event.created_by != user_id and user_id not in participant_ids:
        return False
    return True


def filter_events(
    events: List[CalendarEvent],
    participants_by_event: Dict[UUID, List[CalendarParticipant]],
    filters: CalendarEventFilters,
    user_id: UUID,
) -> List[CalendarEvent]:
    return [
        event
        for event in events
        if matches(event, participants_by_event.get(event.id, []), filters, user_id)
    ]
