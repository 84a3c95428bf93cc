"""
Team Use Case DTOs
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import ProjectTeam, Team, TeamMember, TeamMemberRole

TEAM_NAME_MIN_LENGTH = 3


class CreateTeamCommand(BaseModel):
    name: str = Field(..., max_length=120)
    description: Optional[str] = Field(None, max_length=2000)


class AddTeamMemberCommand(BaseModel):
    user_id: UUID
    user_name: str = Field(..., max_length=255)
    role: TeamMemberRole = TeamMemberRole.member


class TeamMemberResponse(BaseModel):
    user_id: str
    user_name: str
    role: str

    @classmethod
    def from_entity(cls, member: TeamMember) -> "TeamMemberResponse":
        return cls(
            user_id=str(member.user_id),
            user_name=member.user_name,
            role=member.role.value,
        )


class TeamResponse(BaseModel):
    id: str
    name: str
    description: Optional[str]
    leader_id: str
    created_at: str
    members: List[TeamMemberResponse] = Field(default_factory=list)
    project_ids: List[str] = Field(default_factory=list)

    @classmethod
    def from_entity(
        cls,
        team: Team,
        members: Optional[List[TeamMember]] = None,
        links: Optional[List[ProjectTeam]] = None,
    ) -> "TeamResponse":
        return cls(
            id=str(team.id),
            name=team.name,
            description=team.description,
            leader_id=str(team.leader_id),
            created_at=team.created_at.isoformat(),
            members=[TeamMemberResponse.from_entity(m) for m in members or []],
            project_ids=[str(link.project_id) for link in links or []],
        )


class ProjectLinkResponse(BaseModel):
    team_id: str
    project_id: str
