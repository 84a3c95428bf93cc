"""
Accept Invitation Use Case

Handles the recipient accepting a pending invitation.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import (
    ActingUser,
    Invitation,
    InvitationActivity,
    InvitationActivityType,
    InvitationStatus,
    InvitationTargetType,
    ProjectMember,
    ProjectMemberRole,
    TeamMember,
    TeamMemberRole,
)
from src.domain.invitation_status import resolve_invitation_status

from .dtos import InvitationResponse
from .validation import check_recipient

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Use case for accepting an invitation.

    Business Rules:
    - Missing invitation fails with INVITATION_NOT_FOUND
    - Only the recipient (matching email or recipient_id) can accept
    - A pending invitation past its expiry is marked expired (and that
      correction is committed) before failing with INVITATION_EXPIRED;
      no accepted activity is written
    - Only pending invitations can be accepted
    - Sets recipient_id and accepted_at, writes an "accepted" activity
    - Team invitations add the acting user to the team with the invited role;
      project invitations add them as a project member, which grants access
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, invitation_id: UUID, acting_user: ActingUser
    ) -> Result[InvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            invitation_id: ID of the invitation to accept
            acting_user: Authenticated recipient

        Returns:
            Result with InvitationResponse DTO, or Error
        """
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            recipient_error = check_recipient(invitation, acting_user)
            if recipient_error:
                return Return.err(recipient_error)

            now = utcnow()

            if resolve_invitation_status(invitation, now):
                await self.uow.invitations.update(invitation)
                await self.uow.commit()
                return Return.err(
                    Error("INVITATION_EXPIRED", "This invitation has expired")
                )

            if invitation.status != InvitationStatus.pending:
                return Return.err(
                    Error(
                        "INVITATION_NOT_PENDING",
                        f"This invitation is no longer available ({invitation.status.value})",
                    )
                )

            invitation.status = InvitationStatus.accepted
            invitation.recipient_id = acting_user.id
            invitation.accepted_at = now
            await self.uow.invitations.update(invitation)

            if invitation.target_type == InvitationTargetType.team:
                await self._join_team(invitation, acting_user)
            else:
                await self._join_project(invitation, acting_user)

            activity = InvitationActivity(
                type=InvitationActivityType.accepted,
                invitation_id=invitation.id,
                performed_by=acting_user.id,
                performed_by_name=acting_user.name,
                target_name=invitation.target_name,
                recipient_email=invitation.recipient_email,
                timestamp=now,
            )
            await self.uow.invitation_activities.create(activity)

            await self.uow.commit()

            logger.info(f"Invitation {invitation.id} accepted by {acting_user.id}")

            return Return.ok(InvitationResponse.from_entity(invitation))

    async def _join_team(self, invitation: Invitation, acting_user: ActingUser):
        existing = await self.uow.teams.get_member(invitation.target_id, acting_user.id)
        if existing is not None:
            return

        # Team may have been removed since the invitation was sent
        team = await self.uow.teams.get_by_id(invitation.target_id)
        if team is None:
            return

        await self.uow.teams.add_member(
            TeamMember(
                team_id=team.id,
                user_id=acting_user.id,
                user_name=acting_user.name,
                role=TeamMemberRole(invitation.role.value),
            )
        )

    async def _join_project(self, invitation: Invitation, acting_user: ActingUser):
        project = await self.uow.projects.get_by_id(invitation.target_id)
        if project is None or project.owner_id == acting_user.id:
            return

        existing = await self.uow.projects.get_member(project.id, acting_user.id)
        if existing is not None:
            return

        await self.uow.projects.add_member(
            ProjectMember(
                project_id=project.id,
                user_id=acting_user.id,
                user_name=acting_user.name,
                role=ProjectMemberRole(invitation.role.value),
            )
        )
