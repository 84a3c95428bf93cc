"""
Invitation Use Case DTOs (Data Transfer Objects)

Command and Response classes for the invitation domain.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import (
    Invitation,
    InvitationActivity,
    InvitationRole,
    InvitationTargetType,
)


# ============================================================================
# Command DTOs
# ============================================================================


class InvitationFormData(BaseModel):
    """What the sender filled in"""

    recipient_email: str
    recipient_id: Optional[UUID] = None
    role: str = InvitationRole.member.value
    teams: List[str] = Field(default_factory=list)
    message: Optional[str] = None
    expiration_days: int = 7
    generate_link: bool = False


class InvitationTargetRef(BaseModel):
    """Project or team the recipient is invited to"""

    type: InvitationTargetType
    id: UUID


# ============================================================================
# Response DTOs
# ============================================================================


class InvitationTargetInfo(BaseModel):
    type: str
    id: str
    name: str


class InvitationResponse(BaseModel):
    """Invitation as returned by every invitation use case"""

    id: str
    sender_id: str
    sender_name: str
    sender_email: str
    recipient_email: str
    recipient_id: Optional[str]
    target: InvitationTargetInfo
    role: str
    teams: List[str]
    message: Optional[str]
    status: str
    created_at: str
    expires_at: str
    accepted_at: Optional[str] = None
    rejected_at: Optional[str] = None
    cancelled_at: Optional[str] = None
    link: Optional[str] = None

    @classmethod
    def from_entity(cls, invitation: Invitation) -> "InvitationResponse":
        def iso(value):
            return value.isoformat() if value else None

        return cls(
            id=str(invitation.id),
            sender_id=str(invitation.sender_id),
            sender_name=invitation.sender_name,
            sender_email=invitation.sender_email,
            recipient_email=invitation.recipient_email,
            recipient_id=str(invitation.recipient_id) if invitation.recipient_id else None,
            target=InvitationTargetInfo(
                type=invitation.target_type.value,
                id=str(invitation.target_id),
                name=invitation.target_name,
            ),
            role=invitation.role.value,
            teams=list(invitation.teams or []),
            message=invitation.message,
            status=invitation.status.value,
            created_at=invitation.created_at.isoformat(),
            expires_at=invitation.expires_at.isoformat(),
            accepted_at=iso(invitation.accepted_at),
            rejected_at=iso(invitation.rejected_at),
            cancelled_at=iso(invitation.cancelled_at),
            link=invitation.link,
        )


class InvitationActivityResponse(BaseModel):
    """One audit log entry"""

    id: str
    type: str
    invitation_id: str
    performed_by: str
    performed_by_name: str
    target_name: str
    recipient_email: str
    message: Optional[str]
    timestamp: str

    @classmethod
    def from_entity(cls, activity: InvitationActivity) -> "InvitationActivityResponse":
        return cls(
            id=str(activity.id),
            type=activity.type.value,
            invitation_id=str(activity.invitation_id),
            performed_by=str(activity.performed_by),
            performed_by_name=activity.performed_by_name,
            target_name=activity.target_name,
            recipient_email=activity.recipient_email,
            message=activity.message,
            timestamp=activity.timestamp.isoformat(),
        )


class ExpireInvitationsResponse(BaseModel):
    """Response for the expiry sweep"""

    expired: int


class ClearInvitationDataResponse(BaseModel):
    """Response for the dev tooling clear"""

    invitations_deleted: int
    activities_deleted: int
    rate_limits_deleted: int
