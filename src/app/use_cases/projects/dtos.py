"""
Project Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.domain.entities import Priority, Project, ProjectStatus

PROJECT_NAME_MIN_LENGTH = 3


class CreateProjectCommand(BaseModel):
    name: str = Field(..., max_length=120)
    description: Optional[str] = Field(None, max_length=2000)
    status: ProjectStatus = ProjectStatus.active
    priority: Priority = Priority.medium
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class UpdateProjectCommand(BaseModel):
    """Only the fields that are set are applied"""

    name: Optional[str] = Field(None, max_length=120)
    description: Optional[str] = Field(None, max_length=2000)
    status: Optional[ProjectStatus] = None
    priority: Optional[Priority] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class ProjectResponse(BaseModel):
    id: str
    name: str
    description: Optional[str]
    status: str
    priority: str
    owner_id: str
    start_date: Optional[str]
    end_date: Optional[str]
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectResponse":
        return cls(
            id=str(project.id),
            name=project.name,
            description=project.description,
            status=project.status.value,
            priority=project.priority.value,
            owner_id=str(project.owner_id),
            start_date=project.start_date.isoformat() if project.start_date else None,
            end_date=project.end_date.isoformat() if project.end_date else None,
            created_at=project.created_at.isoformat(),
            updated_at=project.updated_at.isoformat(),
        )


class DeleteProjectResponse(BaseModel):
    id: str
    deleted: bool = True
