from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.team_repository import ITeamRepository
from src.domain.entities import ProjectTeam, Team, TeamMember


class TeamRepository(ITeamRepository):
    """Team repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, team_id: UUID) -> Optional[Team]:
        """Get team by ID"""
        stmt = select(Team).where(Team.id == team_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user(self, user_id: UUID) -> List[Team]:
        """Get the teams the user leads or belongs to"""
        member_team_ids = select(TeamMember.team_id).where(TeamMember.user_id == user_id)
        stmt = (
            select(Team)
            .where(or_(Team.leader_id == user_id, col(Team.id).in_(member_team_ids)))
            .order_by(Team.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, team: Team) -> Team:
        """Create a new team"""
        self.session.add(team)
        await self.session.flush()
        await self.session.refresh(team)
        return team

    async def get_members(self, team_ids: List[UUID]) -> List[TeamMember]:
        """Get the members of the given teams"""
        if not team_ids:
            return []
        stmt = (
            select(TeamMember)
            .where(col(TeamMember.team_id).in_(team_ids))
            .order_by(TeamMember.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_member(self, team_id: UUID, user_id: UUID) -> Optional[TeamMember]:
        """Get one membership"""
        stmt = select(TeamMember).where(
            TeamMember.team_id == team_id, TeamMember.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add_member(self, member: TeamMember) -> TeamMember:
        """Add a member to a team"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

    async def get_project_links(self, team_ids: List[UUID]) -> List[ProjectTeam]:
        """Get the project links of the given teams"""
        if not team_ids:
            return []
        stmt = select(ProjectTeam).where(col(ProjectTeam.team_id).in_(team_ids))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_project_link(
        self, team_id: UUID, project_id: UUID
    ) -> Optional[ProjectTeam]:
        """Get one project link"""
        stmt = select(ProjectTeam).where(
            ProjectTeam.team_id == team_id, ProjectTeam.project_id == project_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def link_project(self, link: ProjectTeam) -> ProjectTeam:
        """Link a project to a team"""
        self.session.add(link)
        await self.session.flush()
        await self.session.refresh(link)
        return link
