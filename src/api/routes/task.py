from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks import (
    AssigneeRef,
    CreateTaskCommand,
    CreateTaskUseCase,
    DeleteTaskResponse,
    DeleteTaskUseCase,
    ListTasksUseCase,
    ReplaceTaskAssigneesUseCase,
    TaskResponse,
    UpdateTaskCommand,
    UpdateTaskUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import ActingUser

router = APIRouter(tags=["Tasks"])


def _raise_for_task_error(error):
    if error.code in ("TITLE_REQUIRED", "TITLE_TOO_LONG"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code in ("PROJECT_NOT_FOUND", "TASK_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.post(
    "/projects/{project_id}/tasks",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskResponse,
)
async def create_task(
    project_id: UUID,
    request: CreateTaskCommand,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Task

    Raises:
        - 400 Bad Request: TITLE_REQUIRED, TITLE_TOO_LONG
        - 404 Not Found: PROJECT_NOT_FOUND
    """
    result = await CreateTaskUseCase(uow).execute(current_user, project_id, request)
    if result.is_err():
        _raise_for_task_error(result.error)
    return result.value


@router.get("/projects/{project_id}/tasks", response_model=List[TaskResponse])
async def list_tasks(
    project_id: UUID,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTasksUseCase(uow).execute(current_user, project_id)
    if result.is_err():
        _raise_for_task_error(result.error)
    return result.value


@router.patch("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: UUID,
    request: UpdateTaskCommand,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateTaskUseCase(uow).execute(current_user, task_id, request)
    if result.is_err():
        _raise_for_task_error(result.error)
    return result.value


@router.put("/tasks/{task_id}/assignees", response_model=TaskResponse)
async def replace_task_assignees(
    task_id: UUID,
    request: List[AssigneeRef],
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ReplaceTaskAssigneesUseCase(uow).execute(
        current_user, task_id, request
    )
    if result.is_err():
        _raise_for_task_error(result.error)
    return result.value


@router.delete("/tasks/{task_id}", response_model=DeleteTaskResponse)
async def delete_task(
    task_id: UUID,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteTaskUseCase(uow).execute(current_user, task_id)
    if result.is_err():
        _raise_for_task_error(result.error)
    return result.value
