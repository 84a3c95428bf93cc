from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import (
    IInvitationRepository,
    InvitationConflictError,
)
from src.domain.entities import Invitation, InvitationStatus, InvitationTargetType


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_recipient_and_target(
        self, recipient_email: str, target_type: InvitationTargetType, target_id: UUID
    ) -> Optional[Invitation]:
        """Get the pending invitation for an email and target, if any"""
        stmt = select(Invitation).where(
            Invitation.recipient_email == recipient_email,
            Invitation.target_type == target_type,
            Invitation.target_id == target_id,
            Invitation.status == InvitationStatus.pending,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_pending_for_target(
        self, target_type: InvitationTargetType, target_id: UUID
    ) -> List[Invitation]:
        """Get every pending invitation to a project or team"""
        stmt = select(Invitation).where(
            Invitation.target_type == target_type,
            Invitation.target_id == target_id,
            Invitation.status == InvitationStatus.pending,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_sender(self, sender_id: UUID) -> List[Invitation]:
        """Get all invitations sent by a user, newest first"""
        stmt = (
            select(Invitation)
            .where(Invitation.sender_id == sender_id)
            .order_by(Invitation.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_recipient_email(self, recipient_email: str) -> List[Invitation]:
        """Get all invitations addressed to an email, newest first"""
        stmt = (
            select(Invitation)
            .where(Invitation.recipient_email == recipient_email)
            .order_by(Invitation.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_pending_expired(self, now: datetime) -> List[Invitation]:
        """Get pending invitations whose expiry is before now"""
        stmt = select(Invitation).where(
            Invitation.status == InvitationStatus.pending,
            Invitation.expires_at < now,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self._flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self._flush()
        await self.session.refresh(invitation)
        return invitation

    async def _flush(self):
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise InvitationConflictError(str(e.orig)) from e

    async def delete_all(self) -> int:
        """Delete every invitation"""
        result = await self.session.execute(delete(Invitation))
        return result.rowcount or 0
