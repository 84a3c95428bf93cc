"""
Add Team Member Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser, TeamMember

from .dtos import AddTeamMemberCommand, TeamMemberResponse

logger = logging.getLogger(__name__)


class AddTeamMemberUseCase:
    """
    Use case for adding a member to a team directly (without an invitation).

    Business Rules:
    - Only the team leader can add members
    - A user can only be a member once
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, team_id: UUID, command: AddTeamMemberCommand
    ) -> Result[TeamMemberResponse]:
        async with self.uow:
            team = await self.uow.teams.get_by_id(team_id)
            if team is None:
                return Return.err(Error("TEAM_NOT_FOUND", "Team not found"))

            if team.leader_id != acting_user.id:
                return Return.err(
                    Error("NOT_TEAM_LEADER", "Only the team leader can add members")
                )

            existing = await self.uow.teams.get_member(team_id, command.user_id)
            if existing is not None:
                return Return.err(
                    Error("ALREADY_TEAM_MEMBER", "User is already a member of this team")
                )

            member = TeamMember(
                team_id=team_id,
                user_id=command.user_id,
                user_name=command.user_name,
                role=command.role,
            )
            await self.uow.teams.add_member(member)
            await self.uow.commit()

            logger.info(f"User {command.user_id} added to team {team_id}")

            return Return.ok(TeamMemberResponse.from_entity(member))
