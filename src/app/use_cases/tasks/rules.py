"""
Task rules shared by the task use cases.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from libs.result import Error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TASK_TITLE_MAX_LENGTH, Task, TaskStatus


def check_title(title: Optional[str]) -> Optional[Error]:
    if title is None or not title.strip():
        return Error("TITLE_REQUIRED", "Task title is required")
    if len(title.strip()) > TASK_TITLE_MAX_LENGTH:
        return Error(
            "TITLE_TOO_LONG",
            f"Task title must have at most {TASK_TITLE_MAX_LENGTH} characters",
        )
    return None


def apply_status(task: Task, status: TaskStatus, now: datetime):
    """Keep completed_at in step with the status"""
    if status == TaskStatus.completed and task.status != TaskStatus.completed:
        task.completed_at = now
    elif status != TaskStatus.completed:
        task.completed_at = None
    task.status = status


async def get_accessible_task(
    uow: UnitOfWork, task_id: UUID, user_id: UUID
) -> Optional[Task]:
    """The task, or None when it is missing or its project is out of reach"""
    task = await uow.tasks.get_by_id(task_id)
    if task is None:
        return None
    if not await uow.projects.user_can_access(task.project_id, user_id):
        return None
    return task
