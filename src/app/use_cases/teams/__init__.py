"""
Team Use Cases
"""

from .add_team_member_use_case import AddTeamMemberUseCase
from .create_team_use_case import CreateTeamUseCase
from .dtos import (
    AddTeamMemberCommand,
    CreateTeamCommand,
    ProjectLinkResponse,
    TeamMemberResponse,
    TeamResponse,
)
from .link_project_use_case import LinkProjectUseCase
from .list_teams_use_case import ListTeamsUseCase

__all__ = [
    # Use Cases
    "CreateTeamUseCase",
    "ListTeamsUseCase",
    "AddTeamMemberUseCase",
    "LinkProjectUseCase",
    # DTOs
    "CreateTeamCommand",
    "AddTeamMemberCommand",
    "TeamResponse",
    "TeamMemberResponse",
    "ProjectLinkResponse",
]
