"""
Team, TeamMember and ProjectTeam Entities
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import TeamMemberRole


class Team(SQLModel, table=True):
    """
    Team entity - group of users working on shared projects.

    Business Rules:
    - The creator is the leader and is added as a member
    - Only the leader can add members and link projects
    """

    __tablename__ = "teams"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    name: str = Field(max_length=120, nullable=False)
    description: Optional[str] = Field(default=None, max_length=2000)
    leader_id: UUID = Field(nullable=False, index=True)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )


class TeamMember(SQLModel, table=True):
    """Team membership; the display name is denormalized for reports"""

    __tablename__ = "team_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)
    user_name: str = Field(max_length=255)
    role: TeamMemberRole = Field(default=TeamMemberRole.member)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_team_member_team_user", "team_id", "user_id", unique=True),
    )


class ProjectTeam(SQLModel, table=True):
    """Links a project to a team"""

    __tablename__ = "project_teams"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)
    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)

    __table_args__ = (
        Index("idx_project_team_pair", "project_id", "team_id", unique=True),
    )
