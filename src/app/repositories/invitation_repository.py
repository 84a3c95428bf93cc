from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Invitation, InvitationTargetType


class InvitationConflictError(Exception):
    """Writing the invitation would leave two pending invitations for one email and target"""


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_pending_by_recipient_and_target(
        self, recipient_email: str, target_type: InvitationTargetType, target_id: UUID
    ) -> Optional[Invitation]:
        """Get the pending invitation for an email and target, if any"""
        pass

    @abstractmethod
    async def get_pending_for_target(
        self, target_type: InvitationTargetType, target_id: UUID
    ) -> List[Invitation]:
        """Get every pending invitation to a project or team"""
        pass

    @abstractmethod
    async def get_by_sender(self, sender_id: UUID) -> List[Invitation]:
        """Get all invitations sent by a user, newest first"""
        pass

    @abstractmethod
    async def get_by_recipient_email(self, recipient_email: str) -> List[Invitation]:
        """Get all invitations addressed to an email, newest first"""
        pass

    @abstractmethod
    async def get_pending_expired(self, now: datetime) -> List[Invitation]:
        """Get pending invitations whose expiry is before now"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation, raises InvitationConflictError on a duplicate pending one"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation, raises InvitationConflictError on a duplicate pending one"""
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every invitation, returns the number deleted"""
        pass
