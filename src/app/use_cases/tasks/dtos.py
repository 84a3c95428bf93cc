"""
Task Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import Priority, Task, TaskAssignee, TaskStatus


class AssigneeRef(BaseModel):
    user_id: UUID
    user_name: str = Field(..., max_length=255)


class CreateTaskCommand(BaseModel):
    title: str
    description: Optional[str] = Field(None, max_length=5000)
    status: TaskStatus = TaskStatus.pending
    priority: Priority = Priority.medium
    deadline: Optional[datetime] = None
    assignees: List[AssigneeRef] = Field(default_factory=list)


class UpdateTaskCommand(BaseModel):
    """Only the fields that are set are applied"""

    title: Optional[str] = None
    description: Optional[str] = Field(None, max_length=5000)
    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    deadline: Optional[datetime] = None


class AssigneeResponse(BaseModel):
    user_id: str
    user_name: str


class TaskResponse(BaseModel):
    id: str
    project_id: str
    title: str
    description: Optional[str]
    status: str
    priority: str
    created_by: str
    deadline: Optional[str]
    completed_at: Optional[str]
    created_at: str
    assignees: List[AssigneeResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(
        cls, task: Task, assignees: Optional[List[TaskAssignee]] = None
    ) -> "TaskResponse":
        return cls(
            id=str(task.id),
            project_id=str(task.project_id),
            title=task.title,
            description=task.description,
            status=task.status.value,
            priority=task.priority.value,
            created_by=str(task.created_by),
            deadline=task.deadline.isoformat() if task.deadline else None,
            completed_at=task.completed_at.isoformat() if task.completed_at else None,
            created_at=task.created_at.isoformat(),
            assignees=[
                AssigneeResponse(user_id=str(a.user_id), user_name=a.user_name)
                for a in assignees or []
            ],
        )


class DeleteTaskResponse(BaseModel):
    id: str
    deleted: bool = True
