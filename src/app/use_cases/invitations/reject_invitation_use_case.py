"""
Reject Invitation Use Case

Handles the recipient declining a pending invitation.
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
from .validation import check_recipient

logger = logging.getLogger(__name__)


class RejectInvitationUseCase:
    """
    Use case for rejecting an invitation.

    Business Rules:
    - Only the recipient (matching email or recipient_id) can reject
    - Expiry is resolved exactly as on accept: an invitation past its expiry
      is marked expired and the reject fails with INVITATION_EXPIRED
    - Only pending invitations can be rejected
    - Sets rejected_at, writes a "rejected" activity
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

            invitation.status = InvitationStatus.rejected
            invitation.recipient_id = acting_user.id
            invitation.rejected_at = now
            await self.uow.invitations.update(invitation)

            activity = InvitationActivity(
                type=InvitationActivityType.rejected,
                invitation_id=invitation.id,
                performed_by=acting_user.id,
                performed_by_name=acting_user.name,
                target_name=invitation.target_name,
                recipient_email=invitation.recipient_email,
                timestamp=now,
            )
            await self.uow.invitation_activities.create(activity)

            await self.uow.commit()

            logger.info(f"Invitation {invitation.id} rejected by {acting_user.id}")

            return Return.ok(InvitationResponse.from_entity(invitation))
