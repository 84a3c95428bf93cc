"""
Invitation Entity

Invitations to join a project or a team.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import InvitationRole, InvitationStatus, InvitationTargetType


class Invitation(SQLModel, table=True):
    """
    Invitation entity - invitation for an email address to join a project or team.

    Business Rules:
    - Status only moves pending -> accepted / rejected / cancelled / expired;
      the one way back is a resend, which returns expired to pending
    - At most one pending invitation per (recipient_email, target_type, target_id),
      enforced by a partial unique index
    - Expiry is resolved lazily (see resolve_invitation_status) and by the sweep
    - recipient_email is stored lower-cased
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    sender_id: UUID = Field(nullable=False, index=True)
    sender_name: str = Field(max_length=255)
    sender_email: str = Field(max_length=255)

    recipient_email: str = Field(max_length=255, nullable=False, index=True)
    recipient_id: Optional[UUID] = Field(default=None, index=True)

    target_type: InvitationTargetType = Field(nullable=False)
    target_id: UUID = Field(nullable=False)
    target_name: str = Field(max_length=255)

    role: InvitationRole = Field(nullable=False)
    teams: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    message: Optional[str] = Field(default=None, max_length=500)

    status: InvitationStatus = Field(default=InvitationStatus.pending)
    link: Optional[str] = Field(default=None, unique=True, max_length=64)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    rejected_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    cancelled_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index(
            "idx_invitation_recipient_target",
            "recipient_email",
            "target_type",
            "target_id",
            unique=True,
            sqlite_where=text("status = 'pending'"),
            postgresql_where=text("status = 'pending'"),
        ),
        Index("idx_invitation_status", "status"),
    )
