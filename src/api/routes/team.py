from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.teams import (
    AddTeamMemberCommand,
    AddTeamMemberUseCase,
    CreateTeamCommand,
    CreateTeamUseCase,
    LinkProjectUseCase,
    ListTeamsUseCase,
    ProjectLinkResponse,
    TeamMemberResponse,
    TeamResponse,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import ActingUser

router = APIRouter(prefix="/teams", tags=["Teams"])


def _raise_for_team_error(error):
    if error.code == "NAME_TOO_SHORT":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "NOT_TEAM_LEADER":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code in ("TEAM_NOT_FOUND", "PROJECT_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "ALREADY_TEAM_MEMBER":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TeamResponse)
async def create_team(
    request: CreateTeamCommand,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateTeamUseCase(uow).execute(current_user, request)
    if result.is_err():
        _raise_for_team_error(result.error)
    return result.value


@router.get("", response_model=List[TeamResponse])
async def list_teams(
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTeamsUseCase(uow).execute(current_user)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.post(
    "/{team_id}/members",
    status_code=status.HTTP_201_CREATED,
    response_model=TeamMemberResponse,
)
async def add_team_member(
    team_id: UUID,
    request: AddTeamMemberCommand,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add Team Member

    Raises:
        - 403 Forbidden: NOT_TEAM_LEADER
        - 404 Not Found: TEAM_NOT_FOUND
        - 409 Conflict: ALREADY_TEAM_MEMBER
    """
    result = await AddTeamMemberUseCase(uow).execute(current_user, team_id, request)
    if result.is_err():
        _raise_for_team_error(result.error)
    return result.value


@router.post("/{team_id}/projects/{project_id}", response_model=ProjectLinkResponse)
async def link_project(
    team_id: UUID,
    project_id: UUID,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await LinkProjectUseCase(uow).execute(current_user, team_id, project_id)
    if result.is_err():
        _raise_for_team_error(result.error)
    return result.value
