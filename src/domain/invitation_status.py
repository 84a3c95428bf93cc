"""
Invitation expiry rule.

resolve_invitation_status is the single place that decides whether a
pending invitation has expired. The periodic sweep and every use case that
reads an invitation go through it, so expiry behaves the same on every path.
"""

from datetime import datetime
from typing import Optional

from src.domain.base import utcnow
from src.domain.entities import Invitation, InvitationStatus


def is_past_expiry(invitation: Invitation, now: Optional[datetime] = None) -> bool:
    now = now or utcnow()
    return now > invitation.expires_at


def resolve_invitation_status(
    invitation: Invitation, now: Optional[datetime] = None
) -> bool:
    """
    Mark a pending invitation as expired once its expiry has passed.

    Returns:
        True if the status changed (the caller must persist it)
    """
    if invitation.status != InvitationStatus.pending:
        return False
    if not is_past_expiry(invitation, now):
        return False
    invitation.status = InvitationStatus.expired
    return True
