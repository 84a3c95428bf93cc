"""
Resend Invitation Use Case

Handles resending a pending or expired invitation with a fresh expiry.
"""

import logging
from datetime import timedelta
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.invitation_repository import InvitationConflictError
from src.app.services.rate_limiter import RateLimiter
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
from .validation import check_message

logger = logging.getLogger(__name__)


class ResendInvitationUseCase:
    """
    Use case for resending an invitation.

    Business Rules:
    - Counts against the sender's rate limit
    - Only the original sender can resend
    - Pending and expired invitations can be resent; an expired one goes
      back to pending unless another pending invitation now exists for the
      same email and target (INVITE_ALREADY_EXISTS)
    - Expiry is reset to now + extension_days (7 by default)
    - The message is replaced when a new one is given
    - Writes a "resent" activity
    """

    def __init__(
        self, uow: UnitOfWork, rate_limiter: RateLimiter, extension_days: int = 7
    ):
        self.uow = uow
        self.rate_limiter = rate_limiter
        self.extension_days = extension_days

    async def execute(
        self,
        invitation_id: UUID,
        acting_user: ActingUser,
        message: Optional[str] = None,
    ) -> Result[InvitationResponse]:
        message_error = check_message(message)
        if message_error:
            return Return.err(message_error)

        async with self.uow:
            decision = await self.rate_limiter.check_and_consume(str(acting_user.id))
            await self.uow.commit()
            if not decision.allowed:
                return Return.err(
                    Error(
                        "RATE_LIMITED",
                        f"Please wait {decision.retry_after_seconds} seconds before "
                        "sending another invitation",
                        details={"retry_after_seconds": decision.retry_after_seconds},
                    )
                )

            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            if invitation.sender_id != acting_user.id:
                return Return.err(
                    Error(
                        "NOT_INVITATION_SENDER",
                        "Only the sender can resend this invitation",
                    )
                )

            now = utcnow()

            if resolve_invitation_status(invitation, now):
                await self.uow.invitations.update(invitation)
                await self.uow.commit()

            if invitation.status not in (InvitationStatus.pending, InvitationStatus.expired):
                return Return.err(
                    Error(
                        "INVITATION_NOT_PENDING",
                        f"Cannot resend an invitation that is {invitation.status.value}",
                    )
                )

            if invitation.status == InvitationStatus.expired:
                other = await self.uow.invitations.get_pending_by_recipient_and_target(
                    invitation.recipient_email, invitation.target_type, invitation.target_id
                )
                if other is not None and not resolve_invitation_status(other, now):
                    return Return.err(self._already_exists(invitation))
                if other is not None:
                    await self.uow.invitations.update(other)
                invitation.status = InvitationStatus.pending

            invitation.expires_at = now + timedelta(days=self.extension_days)
            if message:
                invitation.message = message
            try:
                await self.uow.invitations.update(invitation)
            except InvitationConflictError:
                await self.uow.rollback()
                return Return.err(self._already_exists(invitation))

            activity = InvitationActivity(
                type=InvitationActivityType.resent,
                invitation_id=invitation.id,
                performed_by=acting_user.id,
                performed_by_name=acting_user.name,
                target_name=invitation.target_name,
                recipient_email=invitation.recipient_email,
                message=message,
                timestamp=now,
            )
            await self.uow.invitation_activities.create(activity)

            await self.uow.commit()

            logger.info(f"Invitation {invitation.id} resent by {acting_user.id}")

            return Return.ok(InvitationResponse.from_entity(invitation))

    @staticmethod
    def _already_exists(invitation) -> Error:
        return Error(
            "INVITE_ALREADY_EXISTS",
            f"A pending invitation already exists for {invitation.recipient_email} "
            f"in this {invitation.target_type.value}",
        )
