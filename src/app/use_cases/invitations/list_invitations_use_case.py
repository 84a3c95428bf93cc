"""
List Invitations Use Case

Lists the invitations a user sent or received, resolving expiry on read.
"""

from typing import List, Literal, Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ActingUser, InvitationStatus
from src.domain.invitation_status import resolve_invitation_status

from .dtos import InvitationResponse
from .validation import normalize_email


class ListInvitationsUseCase:
    """
    Use case for listing invitations.

    Business Rules:
    - "sent" returns invitations sent by the user, "received" those addressed
      to the user's email
    - Pending invitations past their expiry are marked expired (and persisted)
      before the status filter is applied
    - Newest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        acting_user: ActingUser,
        box: Literal["sent", "received"] = "received",
        status: Optional[str] = None,
    ) -> Result[List[InvitationResponse]]:
        status_filter = None
        if status is not None:
            try:
                status_filter = InvitationStatus(status)
            except ValueError:
                return Return.err(
                    Error("INVALID_STATUS", f"Invalid invitation status: {status}")
                )

        async with self.uow:
            if box == "sent":
                invitations = await self.uow.invitations.get_by_sender(acting_user.id)
            else:
                invitations = await self.uow.invitations.get_by_recipient_email(
                    normalize_email(acting_user.email)
                )

            now = utcnow()
            changed = False
            for invitation in invitations:
                if resolve_invitation_status(invitation, now):
                    await self.uow.invitations.update(invitation)
                    changed = True
            if changed:
                await self.uow.commit()

            return Return.ok(
                [
                    InvitationResponse.from_entity(invitation)
                    for invitation in invitations
                    if status_filter is None or invitation.status == status_filter
                ]
            )
