"""
Send Invitation Use Case

Handles inviting an email address to join a project or a team.
"""

import logging
from datetime import timedelta
from typing import Optional, Tuple
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.invitation_repository import InvitationConflictError
from src.app.services.rate_limiter import RateLimiter
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import generate_link_token, utcnow
from src.domain.entities import (
    ActingUser,
    Invitation,
    InvitationActivity,
    InvitationActivityType,
    InvitationRole,
    InvitationTargetType,
)
from src.domain.invitation_status import resolve_invitation_status

from .dtos import InvitationFormData, InvitationResponse, InvitationTargetRef
from .validation import (
    EXPIRATION_OPTIONS,
    check_message,
    check_recipient_email,
    normalize_email,
)

logger = logging.getLogger(__name__)


class SendInvitationUseCase:
    """
    Use case for sending an invitation.

    Business Rules:
    - Email must be valid and not from a disposable provider
    - Role must be a valid InvitationRole
    - Expiration must be one of 1, 3, 7, 14 or 30 days
    - The target project/team must exist
    - The sender must have access to the project, or lead or belong to the team
    - Sends are rate limited per sender (sliding window + cooldown)
    - At most one pending invitation per (email, target); a duplicate is
      rejected without creating anything, including one created concurrently
    - Creates a "sent" activity record
    """

    def __init__(self, uow: UnitOfWork, rate_limiter: RateLimiter):
        self.uow = uow
        self.rate_limiter = rate_limiter

    async def execute(
        self,
        form: InvitationFormData,
        target: InvitationTargetRef,
        sender: ActingUser,
    ) -> Result[InvitationResponse]:
        """
        Execute send invitation use case.

        Args:
            form: Recipient, role, message and expiry chosen by the sender
            target: Project or team reference
            sender: Authenticated user sending the invitation

        Returns:
            Result with InvitationResponse DTO, or Error
        """
        email_error = check_recipient_email(form.recipient_email)
        if email_error:
            return Return.err(email_error)

        try:
            role = InvitationRole(form.role)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {form.role}. Must be one of: owner, admin, member, observer",
                )
            )

        if form.expiration_days not in EXPIRATION_OPTIONS:
            return Return.err(
                Error(
                    "INVALID_EXPIRATION",
                    f"Expiration must be one of {', '.join(map(str, EXPIRATION_OPTIONS))} days",
                )
            )

        message_error = check_message(form.message)
        if message_error:
            return Return.err(message_error)

        recipient_email = normalize_email(form.recipient_email)

        async with self.uow:
            found, target_name = await self._resolve_target(target)
            if not found:
                return Return.err(
                    Error("TARGET_NOT_FOUND", f"{target.type.value.capitalize()} not found")
                )

            if not await self._is_target_member(target, sender.id):
                return Return.err(
                    Error(
                        "NOT_TARGET_MEMBER",
                        f"You are not a member of this {target.type.value}",
                    )
                )

            # Counter state is kept even when the send fails afterwards
            decision = await self.rate_limiter.check_and_consume(str(sender.id))
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

            now = utcnow()

            existing = await self.uow.invitations.get_pending_by_recipient_and_target(
                recipient_email, target.type, target.id
            )
            if existing is not None and resolve_invitation_status(existing, now):
                await self.uow.invitations.update(existing)
                existing = None

            if existing is not None:
                return Return.err(
                    Error(
                        "INVITE_ALREADY_EXISTS",
                        f"A pending invitation already exists for {recipient_email} "
                        f"in this {target.type.value}",
                    )
                )

            invitation = Invitation(
                sender_id=sender.id,
                sender_name=sender.name,
                sender_email=sender.email,
                recipient_email=recipient_email,
                recipient_id=form.recipient_id,
                target_type=target.type,
                target_id=target.id,
                target_name=target_name,
                role=role,
                teams=list(form.teams),
                message=form.message,
                created_at=now,
                expires_at=now + timedelta(days=form.expiration_days),
                link=generate_link_token() if form.generate_link else None,
            )
            try:
                await self.uow.invitations.create(invitation)
            except InvitationConflictError:
                await self.uow.rollback()
                logger.info(
                    f"Concurrent invitation for {recipient_email} in "
                    f"{target.type.value} {target.id} already pending"
                )
                return Return.err(
                    Error(
                        "INVITE_ALREADY_EXISTS",
                        f"A pending invitation already exists for {recipient_email} "
                        f"in this {target.type.value}",
                    )
                )

            activity = InvitationActivity(
                type=InvitationActivityType.sent,
                invitation_id=invitation.id,
                performed_by=sender.id,
                performed_by_name=sender.name,
                target_name=target_name,
                recipient_email=recipient_email,
                message=form.message,
                timestamp=now,
            )
            await self.uow.invitation_activities.create(activity)

            await self.uow.commit()

            logger.info(
                f"Invitation {invitation.id} sent to {recipient_email} "
                f"for {target.type.value} {target.id}"
            )

            return Return.ok(InvitationResponse.from_entity(invitation))

    async def _resolve_target(
        self, target: InvitationTargetRef
    ) -> Tuple[bool, Optional[str]]:
        if target.type == InvitationTargetType.project:
            project = await self.uow.projects.get_by_id(target.id)
            return (project is not None, project.name if project else None)

        team = await self.uow.teams.get_by_id(target.id)
        return (team is not None, team.name if team else None)

    async def _is_target_member(self, target: InvitationTargetRef, user_id: UUID) -> bool:
        if target.type == InvitationTargetType.project:
            return await self.uow.projects.user_can_access(target.id, user_id)

        team = await self.uow.teams.get_by_id(target.id)
        if team.leader_id == user_id:
            return True
        return await self.uow.teams.get_member(target.id, user_id) is not None
