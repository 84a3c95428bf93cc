from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects import (
    CreateProjectCommand,
    CreateProjectUseCase,
    DeleteProjectResponse,
    DeleteProjectUseCase,
    ListProjectsUseCase,
    ProjectResponse,
    UpdateProjectCommand,
    UpdateProjectUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import ActingUser

router = APIRouter(prefix="/projects", tags=["Projects"])


def _raise_for_project_error(error):
    if error.code == "NAME_TOO_SHORT":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "NOT_PROJECT_OWNER":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code == "PROJECT_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponse)
async def create_project(
    request: CreateProjectCommand,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateProjectUseCase(uow).execute(current_user, request)
    if result.is_err():
        _raise_for_project_error(result.error)
    return result.value


@router.get("", response_model=List[ProjectResponse])
async def list_projects(
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListProjectsUseCase(uow).execute(current_user)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    request: UpdateProjectCommand,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Project

    Raises:
        - 400 Bad Request: NAME_TOO_SHORT
        - 403 Forbidden: NOT_PROJECT_OWNER
        - 404 Not Found: PROJECT_NOT_FOUND
    """
    result = await UpdateProjectUseCase(uow).execute(current_user, project_id, request)
    if result.is_err():
        _raise_for_project_error(result.error)
    return result.value


@router.delete("/{project_id}", response_model=DeleteProjectResponse)
async def delete_project(
    project_id: UUID,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteProjectUseCase(uow).execute(current_user, project_id)
    if result.is_err():
        _raise_for_project_error(result.error)
    return result.value
