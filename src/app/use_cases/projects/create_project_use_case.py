"""
Create Project Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser, Project

from .dtos import PROJECT_NAME_MIN_LENGTH, CreateProjectCommand, ProjectResponse

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    """
    Use case for creating a project.

    Business Rules:
    - The acting user becomes the owner
    - Name must have at least 3 characters (surrounding spaces ignored)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, command: CreateProjectCommand
    ) -> Result[ProjectResponse]:
        name = command.name.strip()
        if len(name) < PROJECT_NAME_MIN_LENGTH:
            return Return.err(
                Error(
                    "NAME_TOO_SHORT",
                    f"Project name must have at least {PROJECT_NAME_MIN_LENGTH} characters",
                )
            )

        async with self.uow:
            project = Project(
                name=name,
                description=command.description,
                status=command.status,
                priority=command.priority,
                owner_id=acting_user.id,
                start_date=command.start_date,
                end_date=command.end_date,
            )
            await self.uow.projects.create(project)
            await self.uow.commit()

            logger.info(f"Project {project.id} created by {acting_user.id}")

            return Return.ok(ProjectResponse.from_entity(project))
