from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.calendar import (
    CalendarEventFilters,
    CalendarEventResponse,
    CreateCalendarEventCommand,
    CreateCalendarEventUseCase,
    DeleteCalendarEventResponse,
    DeleteCalendarEventUseCase,
    ListCalendarEventsUseCase,
    UpdateCalendarEventCommand,
    UpdateCalendarEventUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import ActingUser, CalendarEventType, Priority

router = APIRouter(prefix="/calendar/events", tags=["Calendar"])


def _raise_for_calendar_error(error):
    if error.code in ("TITLE_REQUIRED", "TITLE_TOO_LONG", "INVALID_EVENT_DATES",
                      "INVALID_REMINDER", "INVALID_RANGE"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "NOT_EVENT_CREATOR":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code in ("EVENT_NOT_FOUND", "PROJECT_NOT_FOUND", "TEAM_NOT_FOUND",
                        "TASK_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CalendarEventResponse)
async def create_calendar_event(
    request: CreateCalendarEventCommand,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Calendar Event

    Raises:
        - 400 Bad Request: TITLE_REQUIRED, TITLE_TOO_LONG, INVALID_EVENT_DATES,
                           INVALID_REMINDER
        - 404 Not Found: PROJECT_NOT_FOUND, TEAM_NOT_FOUND, TASK_NOT_FOUND
    """
    result = await CreateCalendarEventUseCase(uow).execute(current_user, request)
    if result.is_err():
        _raise_for_calendar_error(result.error)
    return result.value


@router.get("", response_model=List[CalendarEventResponse])
async def list_calendar_events(
    start: datetime,
    end: datetime,
    search: Optional[str] = None,
    project: List[UUID] = Query([]),
    team: List[UUID] = Query([]),
    participant: List[UUID] = Query([]),
    event_type: List[CalendarEventType] = Query([], alias="type"),
    priority: List[Priority] = Query([]),
    mine_only: bool = False,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Calendar Events

    Events overlapping [start, end]. Repeat project, team, participant, type
    and priority to select several values.

    Raises:
        - 400 Bad Request: INVALID_RANGE
    """
    filters = CalendarEventFilters(
        search=search,
        projects=project,
        teams=team,
        participants=participant,
        types=event_type,
        priorities=priority,
        mine_only=mine_only,
    )
    result = await ListCalendarEventsUseCase(uow).execute(current_user, start, end, filters)
    if result.is_err():
        _raise_for_calendar_error(result.error)
    return result.value


@router.patch("/{event_id}", response_model=CalendarEventResponse)
async def update_calendar_event(
    event_id: UUID,
    request: UpdateCalendarEventCommand,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Calendar Event

    Raises:
        - 400 Bad Request: TITLE_REQUIRED, TITLE_TOO_LONG, INVALID_EVENT_DATES,
                           INVALID_REMINDER
        - 403 Forbidden: NOT_EVENT_CREATOR
        - 404 Not Found: EVENT_NOT_FOUND, PROJECT_NOT_FOUND, TEAM_NOT_FOUND,
                         TASK_NOT_FOUND
    """
    result = await UpdateCalendarEventUseCase(uow).execute(current_user, event_id, request)
    if result.is_err():
        _raise_for_calendar_error(result.error)
    return result.value


@router.delete("/{event_id}", response_model=DeleteCalendarEventResponse)
async def delete_calendar_event(
    event_id: UUID,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteCalendarEventUseCase(uow).execute(current_user, event_id)
    if result.is_err():
        _raise_for_calendar_error(result.error)
    return result.value
