"""
Create Team Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser, Team, TeamMember, TeamMemberRole

from .dtos import TEAM_NAME_MIN_LENGTH, CreateTeamCommand, TeamResponse

logger = logging.getLogger(__name__)


class CreateTeamUseCase:
    """
    Use case for creating a team.

    Business Rules:
    - The acting user becomes the leader and the first member
    - Name must have at least 3 characters
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, command: CreateTeamCommand
    ) -> Result[TeamResponse]:
        name = command.name.strip()
        if len(name) < TEAM_NAME_MIN_LENGTH:
            return Return.err(
                Error(
                    "NAME_TOO_SHORT",
                    f"Team name must have at least {TEAM_NAME_MIN_LENGTH} characters",
                )
            )

        async with self.uow:
            team = Team(
                name=name, description=command.description, leader_id=acting_user.id
            )
            await self.uow.teams.create(team)

            leader = TeamMember(
                team_id=team.id,
                user_id=acting_user.id,
                user_name=acting_user.name,
                role=TeamMemberRole.leader,
            )
            await self.uow.teams.add_member(leader)
            await self.uow.commit()

            logger.info(f"Team {team.id} created by {acting_user.id}")

            return Return.ok(TeamResponse.from_entity(team, [leader]))
