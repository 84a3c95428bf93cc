from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import ProjectTeam, Team, TeamMember


class ITeamRepository(ABC):
    """Team repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, team_id: UUID) -> Optional[Team]:
        """Get team by ID"""
        pass

    @abstractmethod
    async def get_by_user(self, user_id: UUID) -> List[Team]:
        """Get the teams the user leads or belongs to"""
        pass

    @abstractmethod
    async def create(self, team: Team) -> Team:
        """Create a new team"""
        pass

    @abstractmethod
    async def get_members(self, team_ids: List[UUID]) -> List[TeamMember]:
        """Get the members of the given teams"""
        pass

    @abstractmethod
    async def get_member(self, team_id: UUID, user_id: UUID) -> Optional[TeamMember]:
        """Get one membership"""
        pass

    @abstractmethod
    async def add_member(self, member: TeamMember) -> TeamMember:
        """Add a member to a team"""
        pass

    @abstractmethod
    async def get_project_links(self, team_ids: List[UUID]) -> List[ProjectTeam]:
        """Get the project links of the given teams"""
        pass

    @abstractmethod
    async def link_project(self, link: ProjectTeam) -> ProjectTeam:
        """Link a project to a team"""
        pass

    @abstractmethod
    async def get_project_link(
        self, team_id: UUID, project_id: UUID
    ) -> Optional[ProjectTeam]:
        """Get one project link"""
        pass
