from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, or_, update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.project_repository import IProjectRepository
from src.domain.entities import (
    CalendarEvent,
    Project,
    ProjectMember,
    ProjectTeam,
    Task,
    TaskAssignee,
    TeamMember,
)


class ProjectRepository(IProjectRepository):
    """Project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _shared_project_ids(self, user_id: UUID):
        team_ids = select(TeamMember.team_id).where(TeamMember.user_id == user_id)
        via_team = select(ProjectTeam.project_id).where(col(ProjectTeam.team_id).in_(team_ids))
        direct = select(ProjectMember.project_id).where(ProjectMember.user_id == user_id)
        return via_team.union(direct)

    def _visible_to(self, user_id: UUID):
        return or_(
            Project.owner_id == user_id,
            col(Project.id).in_(self._shared_project_ids(user_id)),
        )

    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        stmt = select(Project).where(Project.id == project_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_accessible_by_user(self, user_id: UUID) -> List[Project]:
        """Get projects the user owns, is a member of, or reaches through a team"""
        stmt = (
            select(Project)
            .where(self._visible_to(user_id))
            .order_by(Project.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def user_can_access(self, project_id: UUID, user_id: UUID) -> bool:
        """True if the user owns the project, is a member, or belongs to a linked team"""
        stmt = select(Project.id).where(Project.id == project_id, self._visible_to(user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def create(self, project: Project) -> Project:
        """Create a new project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def update(self, project: Project) -> Project:
        """Update existing project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        """Delete a project with its tasks, assignees, members and team links"""
        task_ids = select(Task.id).where(Task.project_id == project.id)
        # Calendar events outlive the project, they just lose the reference
        await self.session.execute(
            update(CalendarEvent)
            .where(col(CalendarEvent.task_id).in_(task_ids))
            .values(task_id=None)
        )
        await self.session.execute(
            update(CalendarEvent)
            .where(CalendarEvent.project_id == project.id)
            .values(project_id=None)
        )
        await self.session.execute(
            delete(TaskAssignee).where(col(TaskAssignee.task_id).in_(task_ids))
        )
        await self.session.execute(delete(Task).where(Task.project_id == project.id))
        await self.session.execute(
            delete(ProjectTeam).where(ProjectTeam.project_id == project.id)
        )
        await self.session.execute(
            delete(ProjectMember).where(ProjectMember.project_id == project.id)
        )
        await self.session.delete(project)
        await self.session.flush()

    async def get_member(self, project_id: UUID, user_id: UUID) -> Optional[ProjectMember]:
        """Get one project membership"""
        stmt = select(ProjectMember).where(
            ProjectMember.project_id == project_id, ProjectMember.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_members(self, project_ids: List[UUID]) -> List[ProjectMember]:
        """Get the members of the given projects"""
        if not project_ids:
            return []
        stmt = (
            select(ProjectMember)
            .where(col(ProjectMember.project_id).in_(project_ids))
            .order_by(ProjectMember.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add_member(self, member: ProjectMember) -> ProjectMember:
        """Add a member to a project"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member
