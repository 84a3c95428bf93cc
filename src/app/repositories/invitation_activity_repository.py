from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import InvitationActivity


class IInvitationActivityRepository(ABC):
    """InvitationActivity repository interface - application layer"""

    @abstractmethod
    async def create(self, activity: InvitationActivity) -> InvitationActivity:
        """Append an activity record (immutable)"""
        pass

    @abstractmethod
    async def get_for_user(
        self, user_id: UUID, email: str, limit: int = 50
    ) -> List[InvitationActivity]:
        """
        Get activities performed by the user, addressed to the user's email
        or recorded on invitations the user sent.

        Returns:
            Activities ordered by timestamp DESC
        """
        pass

    @abstractmethod
    async def get_by_invitation(self, invitation_id: UUID) -> List[InvitationActivity]:
        """Get the activities of one invitation, oldest first"""
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every activity, returns the number deleted"""
        pass
