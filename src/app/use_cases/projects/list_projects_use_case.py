"""
List Projects Use Case
"""

from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser

from .dtos import ProjectResponse


class ListProjectsUseCase:
    """Projects the user owns or reaches through one of their teams"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, acting_user: ActingUser) -> Result[List[ProjectResponse]]:
        async with self.uow:
            projects = await self.uow.projects.get_accessible_by_user(acting_user.id)
            return Return.ok([ProjectResponse.from_entity(p) for p in projects])
