"""
Replace Task Assignees Use Case
"""

from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser, TaskAssignee

from .dtos import AssigneeRef, TaskResponse
from .rules import get_accessible_task


class ReplaceTaskAssigneesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, task_id: UUID, assignees: List[AssigneeRef]
    ) -> Result[TaskResponse]:
        async with self.uow:
            task = await get_accessible_task(self.uow, task_id, acting_user.id)
            if task is None:
                return Return.err(Error("TASK_NOT_FOUND", "Task not found"))

            unique = {a.user_id: a for a in assignees}
            saved = await self.uow.tasks.replace_assignees(
                task.id,
                [
                    TaskAssignee(task_id=task.id, user_id=a.user_id, user_name=a.user_name)
                    for a in unique.values()
                ],
            )
            await self.uow.commit()

            return Return.ok(TaskResponse.from_entity(task, saved))
