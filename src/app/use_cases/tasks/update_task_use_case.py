"""
Update Task Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ActingUser

from .dtos import TaskResponse, UpdateTaskCommand
from .rules import apply_status, check_title, get_accessible_task


class UpdateTaskUseCase:
    """
    Use case for updating a task.

    Business Rules:
    - Any user with access to the project can update its tasks
    - Moving to completed sets completed_at; leaving completed clears it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, task_id: UUID, command: UpdateTaskCommand
    ) -> Result[TaskResponse]:
        changes = command.model_dump(exclude_unset=True, exclude_none=True)

        if "title" in changes:
            title_error = check_title(changes["title"])
            if title_error:
                return Return.err(title_error)
            changes["title"] = changes["title"].strip()

        async with self.uow:
            task = await get_accessible_task(self.uow, task_id, acting_user.id)
            if task is None:
                return Return.err(Error("TASK_NOT_FOUND", "Task not found"))

            status = changes.pop("status", None)
            if status is not None:
                apply_status(task, status, utcnow())

            for field, value in changes.items():
                setattr(task, field, value)

            await self.uow.tasks.update(task)
            assignees = await self.uow.tasks.get_assignees([task.id])
            await self.uow.commit()

            return Return.ok(TaskResponse.from_entity(task, assignees))
