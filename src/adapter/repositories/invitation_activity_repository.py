from typing import List
from uuid import UUID

from sqlalchemy import delete, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_activity_repository import (
    IInvitationActivityRepository,
)
from src.domain.entities import Invitation, InvitationActivity


class InvitationActivityRepository(IInvitationActivityRepository):
    """InvitationActivity repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, activity: InvitationActivity) -> InvitationActivity:
        """Append an activity record (immutable)"""
        self.session.add(activity)
        await self.session.flush()
        await self.session.refresh(activity)
        return activity

    async def get_for_user(
        self, user_id: UUID, email: str, limit: int = 50
    ) -> List[InvitationActivity]:
        """Get activities performed by, addressed to, or on invitations sent by the user"""
        sent_ids = select(Invitation.id).where(Invitation.sender_id == user_id)
        stmt = (
            select(InvitationActivity)
            .where(
                or_(
                    InvitationActivity.performed_by == user_id,
                    InvitationActivity.recipient_email == email,
                    col(InvitationActivity.invitation_id).in_(sent_ids),
                )
            )
            .order_by(InvitationActivity.timestamp.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_invitation(self, invitation_id: UUID) -> List[InvitationActivity]:
        """Get the activities of one invitation, oldest first"""
        stmt = (
            select(InvitationActivity)
            .where(InvitationActivity.invitation_id == invitation_id)
            .order_by(InvitationActivity.timestamp)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_all(self) -> int:
        """Delete every activity"""
        result = await self.session.execute(delete(InvitationActivity))
        return result.rowcount or 0
