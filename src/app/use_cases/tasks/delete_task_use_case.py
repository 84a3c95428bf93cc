"""
Delete Task Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser

from .dtos import DeleteTaskResponse
from .rules import get_accessible_task


class DeleteTaskUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, task_id: UUID
    ) -> Result[DeleteTaskResponse]:
        async with self.uow:
            task = await get_accessible_task(self.uow, task_id, acting_user.id)
            if task is None:
                return Return.err(Error("TASK_NOT_FOUND", "Task not found"))

            await self.uow.tasks.delete(task)
            await self.uow.commit()

            return Return.ok(DeleteTaskResponse(id=str(task_id)))
