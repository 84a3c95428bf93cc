"""
List Tasks Use Case
"""

from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser

from .dtos import TaskResponse


class ListTasksUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, project_id: UUID
    ) -> Result[List[TaskResponse]]:
        async with self.uow:
            if not await self.uow.projects.user_can_access(project_id, acting_user.id):
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            tasks = await self.uow.tasks.get_by_project_ids([project_id])
            assignees = await self.uow.tasks.get_assignees([t.id for t in tasks])

            return Return.ok(
                [
                    TaskResponse.from_entity(
                        task, [a for a in assignees if a.task_id == task.id]
                    )
                    for task in tasks
                ]
            )
