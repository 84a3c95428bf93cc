"""
Create Task Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ActingUser, Task, TaskAssignee, TaskStatus

from .dtos import CreateTaskCommand, TaskResponse
from .rules import check_title

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """
    Use case for creating a task.

    Business Rules:
    - The project must exist and be accessible to the acting user
    - Title is required and at most 200 characters
    - A task created as completed gets completed_at = now
    - Duplicate assignees are collapsed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, project_id: UUID, command: CreateTaskCommand
    ) -> Result[TaskResponse]:
        title_error = check_title(command.title)
        if title_error:
            return Return.err(title_error)

        async with self.uow:
            if not await self.uow.projects.user_can_access(project_id, acting_user.id):
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            now = utcnow()
            task = Task(
                project_id=project_id,
                title=command.title.strip(),
                description=command.description,
                status=command.status,
                priority=command.priority,
                created_by=acting_user.id,
                deadline=command.deadline,
                completed_at=now if command.status == TaskStatus.completed else None,
                created_at=now,
            )
            await self.uow.tasks.create(task)

            unique = {a.user_id: a for a in command.assignees}
            assignees = await self.uow.tasks.replace_assignees(
                task.id,
                [
                    TaskAssignee(task_id=task.id, user_id=a.user_id, user_name=a.user_name)
                    for a in unique.values()
                ],
            )
            await self.uow.commit()

            logger.info(f"Task {task.id} created in project {project_id}")

            return Return.ok(TaskResponse.from_entity(task, assignees))
