"""
List Teams Use Case
"""

from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser

from .dtos import TeamResponse


class ListTeamsUseCase:
    """Teams the user leads or belongs to, with members and linked projects"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, acting_user: ActingUser) -> Result[List[TeamResponse]]:
        async with self.uow:
            teams = await self.uow.teams.get_by_user(acting_user.id)
            team_ids = [t.id for t in teams]
            members = await self.uow.teams.get_members(team_ids)
            links = await self.uow.teams.get_project_links(team_ids)

            return Return.ok(
                [
                    TeamResponse.from_entity(
                        team,
                        [m for m in members if m.team_id == team.id],
                        [link for link in links if link.team_id == team.id],
                    )
                    for team in teams
                ]
            )
