from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.task_repository import ITaskRepository
from src.domain.entities import CalendarEvent, Task, TaskAssignee


class TaskRepository(ITaskRepository):
    """Task repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get task by ID"""
        stmt = select(Task).where(Task.id == task_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_project_ids(self, project_ids: List[UUID]) -> List[Task]:
        """Get all tasks of the given projects, oldest first"""
        if not project_ids:
            return []
        stmt = (
            select(Task)
            .where(col(Task.project_id).in_(project_ids))
            .order_by(Task.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, task: Task) -> Task:
        """Create a new task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def update(self, task: Task) -> Task:
        """Update existing task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        """Delete a task and its assignees"""
        await self.session.execute(
            update(CalendarEvent)
            .where(CalendarEvent.task_id == task.id)
            .values(task_id=None)
        )
        await self.session.execute(
            delete(TaskAssignee).where(TaskAssignee.task_id == task.id)
        )
        await self.session.delete(task)
        await self.session.flush()

    async def get_assignees(self, task_ids: List[UUID]) -> List[TaskAssignee]:
        """Get the assignees of the given tasks"""
        if not task_ids:
            return []
        stmt = select(TaskAssignee).where(col(TaskAssignee.task_id).in_(task_ids))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def replace_assignees(
        self, task_id: UUID, assignees: List[TaskAssignee]
    ) -> List[TaskAssignee]:
        """Replace the assignee set of a task"""
        await self.session.execute(
            delete(TaskAssignee).where(TaskAssignee.task_id == task_id)
        )
        for assignee in assignees:
            assignee.task_id = task_id
            self.session.add(assignee)
        await self.session.flush()
        return assignees
