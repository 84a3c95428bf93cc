"""
Task and TaskAssignee Entities
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import Priority, TaskStatus

TASK_TITLE_MAX_LENGTH = 200


class Task(SQLModel, table=True):
    """
    Task entity - unit of work inside a project.

    Business Rules:
    - Title is required and at most 200 characters
    - completed_at is set when the status becomes completed and cleared
      when it leaves completed
    """

    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)

    title: str = Field(max_length=TASK_TITLE_MAX_LENGTH, nullable=False)
    description: Optional[str] = Field(default=None, max_length=5000)
    status: TaskStatus = Field(default=TaskStatus.pending)
    priority: Priority = Field(default=Priority.medium)

    created_by: UUID = Field(nullable=False)

    # Timestamps
    deadline: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_task_status", "status"),
        Index("idx_task_created_at", "created_at"),
    )


class TaskAssignee(SQLModel, table=True):
    """Links a user to a task; the display name is denormalized for reports"""

    __tablename__ = "task_assignees"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    task_id: UUID = Field(foreign_key="tasks.id", nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)
    user_name: str = Field(max_length=255)

    __table_args__ = (
        Index("idx_task_assignee_task_user", "task_id", "user_id", unique=True),
    )
