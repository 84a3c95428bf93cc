"""
Invitation Use Cases

Invitation lifecycle, audit log and dev tooling.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .cancel_invitation_use_case import CancelInvitationUseCase
from .clear_invitation_data_use_case import ClearInvitationDataUseCase
from .dtos import (
    ClearInvitationDataResponse,
    ExpireInvitationsResponse,
    InvitationActivityResponse,
    InvitationFormData,
    InvitationResponse,
    InvitationTargetInfo,
    InvitationTargetRef,
)
from .expire_invitations_use_case import ExpireInvitationsUseCase
from .get_invitation_activities_use_case import GetInvitationActivitiesUseCase
from .list_invitations_use_case import ListInvitationsUseCase
from .reject_invitation_use_case import RejectInvitationUseCase
from .resend_invitation_use_case import ResendInvitationUseCase
from .send_invitation_use_case import SendInvitationUseCase

__all__ = [
    # Use Cases
    "SendInvitationUseCase",
    "AcceptInvitationUseCase",
    "RejectInvitationUseCase",
    "CancelInvitationUseCase",
    "ResendInvitationUseCase",
    "ListInvitationsUseCase",
    "GetInvitationActivitiesUseCase",
    "ExpireInvitationsUseCase",
    "ClearInvitationDataUseCase",
    # DTOs
    "InvitationFormData",
    "InvitationTargetRef",
    "InvitationTargetInfo",
    "InvitationResponse",
    "InvitationActivityResponse",
    "ExpireInvitationsResponse",
    "ClearInvitationDataResponse",
]
