from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Project, ProjectMember


class IProjectRepository(ABC):
    """Project repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        pass

    @abstractmethod
    async def get_accessible_by_user(self, user_id: UUID) -> List[Project]:
        """Get projects the user owns, is a member of, or reaches through a team"""
        pass

    @abstractmethod
    async def user_can_access(self, project_id: UUID, user_id: UUID) -> bool:
        """True if the user owns the project, is a member, or belongs to a linked team"""
        pass

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Create a new project"""
        pass

    @abstractmethod
    async def update(self, project: Project) -> Project:
        """Update existing project"""
        pass

    @abstractmethod
    async def delete(self, project: Project) -> None:
        """Delete a project with its tasks, assignees, members and team links"""
        pass

    @abstractmethod
    async def get_member(self, project_id: UUID, user_id: UUID) -> Optional[ProjectMember]:
        """Get one project membership"""
        pass

    @abstractmethod
    async def get_members(self, project_ids: List[UUID]) -> List[ProjectMember]:
        """Get the members of the given projects"""
        pass

    @abstractmethod
    async def add_member(self, member: ProjectMember) -> ProjectMember:
        """Add a member to a project"""
        pass
