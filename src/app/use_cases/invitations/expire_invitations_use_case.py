"""
Expire Invitations Use Case

Periodic sweep marking overdue pending invitations as expired.
"""

import logging

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.invitation_status import resolve_invitation_status

from .dtos import ExpireInvitationsResponse

logger = logging.getLogger(__name__)


class ExpireInvitationsUseCase:
    """
    Use case for the expiry sweep.

    Business Rules:
    - Every pending invitation with now > expires_at becomes expired
    - No activity is written for expiry
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ExpireInvitationsResponse]:
        async with self.uow:
            now = utcnow()
            candidates = await self.uow.invitations.get_pending_expired(now)

            expired = 0
            for invitation in candidates:
                if resolve_invitation_status(invitation, now):
                    await self.uow.invitations.update(invitation)
                    expired += 1

            if expired:
                await self.uow.commit()
                logger.info(f"Expired {expired} pending invitation(s)")

            return Return.ok(ExpireInvitationsResponse(expired=expired))
