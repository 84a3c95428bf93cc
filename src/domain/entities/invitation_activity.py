"""
InvitationActivity Entity

Append-only log of invitation state changes.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import InvitationActivityType


class InvitationActivity(SQLModel, table=True):
    """
    InvitationActivity entity - one record per invitation state change.

    Business Rules:
    - Immutable (never updated)
    - Only removed by the dev tooling clear
    - The periodic expiry sweep does not write activities
    """

    __tablename__ = "invitation_activities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    type: InvitationActivityType = Field(nullable=False)
    invitation_id: UUID = Field(nullable=False, index=True)

    performed_by: UUID = Field(nullable=False, index=True)
    performed_by_name: str = Field(max_length=255)

    target_name: str = Field(max_length=255)
    recipient_email: str = Field(max_length=255, index=True)
    message: Optional[str] = Field(default=None, max_length=500)

    timestamp: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_invitation_activity_timestamp", "timestamp"),)
