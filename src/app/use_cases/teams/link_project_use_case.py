"""
Link Project Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser, ProjectTeam

from .dtos import ProjectLinkResponse


class LinkProjectUseCase:
    """
    Use case for sharing a project with a team.

    Business Rules:
    - Only the team leader can link projects
    - The leader must have access to the project
    - Linking an already linked project is a no-op
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, team_id: UUID, project_id: UUID
    ) -> Result[ProjectLinkResponse]:
        async with self.uow:
            team = await self.uow.teams.get_by_id(team_id)
            if team is None:
                return Return.err(Error("TEAM_NOT_FOUND", "Team not found"))

            if team.leader_id != acting_user.id:
                return Return.err(
                    Error("NOT_TEAM_LEADER", "Only the team leader can link projects")
                )

            if not await self.uow.projects.user_can_access(project_id, acting_user.id):
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            link = await self.uow.teams.get_project_link(team_id, project_id)
            if link is None:
                link = await self.uow.teams.link_project(
                    ProjectTeam(team_id=team_id, project_id=project_id)
                )
                await self.uow.commit()

            return Return.ok(
                ProjectLinkResponse(team_id=str(team_id), project_id=str(project_id))
            )
