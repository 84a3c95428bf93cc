from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Task, TaskAssignee


class ITaskRepository(ABC):
    """Task repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get task by ID"""
        pass

    @abstractmethod
    async def get_by_project_ids(self, project_ids: List[UUID]) -> List[Task]:
        """Get all tasks of the given projects, oldest first"""
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Create a new task"""
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Update existing task"""
        pass

    @abstractmethod
    async def delete(self, task: Task) -> None:
        """Delete a task and its assignees"""
        pass

    @abstractmethod
    async def get_assignees(self, task_ids: List[UUID]) -> List[TaskAssignee]:
        """Get the assignees of the given tasks"""
        pass

    @abstractmethod
    async def replace_assignees(
        self, task_id: UUID, assignees: List[TaskAssignee]
    ) -> List[TaskAssignee]:
        """Replace the assignee set of a task"""
        pass
