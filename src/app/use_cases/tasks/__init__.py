"""
Task Use Cases
"""

from .create_task_use_case import CreateTaskUseCase
from .delete_task_use_case import DeleteTaskUseCase
from .dtos import (
    AssigneeRef,
    AssigneeResponse,
    CreateTaskCommand,
    DeleteTaskResponse,
    TaskResponse,
    UpdateTaskCommand,
)
from .list_tasks_use_case import ListTasksUseCase
from .replace_task_assignees_use_case import ReplaceTaskAssigneesUseCase
from .update_task_use_case import UpdateTaskUseCase

__all__ = [
    # Use Cases
    "CreateTaskUseCase",
    "ListTasksUseCase",
    "UpdateTaskUseCase",
    "ReplaceTaskAssigneesUseCase",
    "DeleteTaskUseCase",
    # DTOs
    "AssigneeRef",
    "AssigneeResponse",
    "CreateTaskCommand",
    "UpdateTaskCommand",
    "TaskResponse",
    "DeleteTaskResponse",
]
