"""
Project Use Cases
"""

from .create_project_use_case import CreateProjectUseCase
from .delete_project_use_case import DeleteProjectUseCase
from .dtos import (
    CreateProjectCommand,
    DeleteProjectResponse,
    ProjectResponse,
    UpdateProjectCommand,
)
from .list_projects_use_case import ListProjectsUseCase
from .update_project_use_case import UpdateProjectUseCase

__all__ = [
    # Use Cases
    "CreateProjectUseCase",
    "ListProjectsUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    # DTOs
    "CreateProjectCommand",
    "UpdateProjectCommand",
    "ProjectResponse",
    "DeleteProjectResponse",
]
