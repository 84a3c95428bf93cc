"""
Cancel Invitation Use Case

Handles the sender withdrawing a pending invitation.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import (
    ActingUser,
    InvitationActivity,
    InvitationActivityType,
    InvitationStatus,
)
from src.domain.invitation_status import resolve_invitation_status

from .dtos import InvitationResponse

logger = logging.getLogger(__name__)


class CancelInvitationUseCase:
    """
    Use case for cancelling an invitation.

    Business Rules:
    - Only the original sender can cancel
    - Only pending invitations can be cancelled; one past its expiry is
      marked expired instead
    - Sets cancelled_at, writes a "cancelled" activity
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, invitation_id: UUID, acting_user: ActingUser
    ) -> Result[InvitationResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            if invitation.sender_id != acting_user.id:
                return Return.err(
                    Error(
                        "NOT_INVITATION_SENDER",
                        "Only the sender can cancel this invitation",
                    )
                )

            now = utcnow()

            if resolve_invitation_status(invitation, now):
                await self.uow.invitations.update(invitation)
                await self.uow.commit()

            if invitation.status != InvitationStatus.pending:
                return Return.err(
                    Error(
                        "INVITATION_NOT_PENDING",
                        f"This invitation is no longer available ({invitation.status.value})",
                    )
                )

            invitation.status = InvitationStatus.cancelled
            invitation.cancelled_at = now
            await self.uow.invitations.update(invitation)

            activity = InvitationActivity(
                type=InvitationActivityType.cancelled,
                invitation_id=invitation.id,
                performed_by=acting_user.id,
                performed_by_name=acting_user.name,
                target_name=invitation.target_name,
                recipient_email=invitation.recipient_email,
                timestamp=now,
            )
            await self.uow.invitation_activities.create(activity)

            await self.uow.commit()

            logger.info(f"Invitation {invitation.id} cancelled by {acting_user.id}")

            return Return.ok(InvitationResponse.from_entity(invitation))
