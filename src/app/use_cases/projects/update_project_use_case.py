"""
Update Project Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ActingUser

from .dtos import PROJECT_NAME_MIN_LENGTH, ProjectResponse, UpdateProjectCommand


class UpdateProjectUseCase:
    """
    Use case for updating a project.

    Business Rules:
    - Only the owner can update
    - A new name must have at least 3 characters
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, project_id: UUID, command: UpdateProjectCommand
    ) -> Result[ProjectResponse]:
        changes = command.model_dump(exclude_unset=True, exclude_none=True)

        if "name" in changes:
            changes["name"] = changes["name"].strip()
            if len(changes["name"]) < PROJECT_NAME_MIN_LENGTH:
                return Return.err(
                    Error(
                        "NAME_TOO_SHORT",
                        f"Project name must have at least {PROJECT_NAME_MIN_LENGTH} characters",
                    )
                )

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            if project.owner_id != acting_user.id:
                return Return.err(
                    Error("NOT_PROJECT_OWNER", "Only the owner can change this project")
                )

            for field, value in changes.items():
                setattr(project, field, value)
            project.updated_at = utcnow()

            await self.uow.projects.update(project)
            await self.uow.commit()

            return Return.ok(ProjectResponse.from_entity(project))
