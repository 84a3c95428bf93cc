"""
Project Entity
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import Priority, ProjectMemberRole, ProjectStatus


class Project(SQLModel, table=True):
    """
    Project entity - groups tasks; shared with teams through project_teams.

    Business Rules:
    - Owner is the user who created the project
    - Only the owner can update or delete it
    - Name must have at least 3 characters
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    name: str = Field(max_length=120, nullable=False)
    description: Optional[str] = Field(default=None, max_length=2000)
    status: ProjectStatus = Field(default=ProjectStatus.active)
    priority: Priority = Field(default=Priority.medium)

    owner_id: UUID = Field(nullable=False, index=True)

    start_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_project_status", "status"),)


class ProjectMember(SQLModel, table=True):
    """
    Project membership granted by accepting a project invitation.

    Members can see the project, its tasks and its report data the same way
    members of a linked team can. The owner is never stored here.
    """

    __tablename__ = "project_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)
    user_name: str = Field(max_length=255)
    role: ProjectMemberRole = Field(default=ProjectMemberRole.member)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_project_member_project_user", "project_id", "user_id", unique=True),
    )
