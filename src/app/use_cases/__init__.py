"""
Use Cases

Organized into domain folders:
- invitations/: Invitation lifecycle and activity log
- reports/: Analytics report, drill-down and CSV export
- projects/, tasks/, teams/: Workspace management

Import from subdirectories for better organization.
"""

from .invitations import (
    AcceptInvitationUseCase,
    CancelInvitationUseCase,
    RejectInvitationUseCase,
    ResendInvitationUseCase,
    SendInvitationUseCase,
)
from .reports import GenerateReportUseCase

__all__ = [
    # Invitations
    "SendInvitationUseCase",
    "AcceptInvitationUseCase",
    "RejectInvitationUseCase",
    "CancelInvitationUseCase",
    "ResendInvitationUseCase",
    # Reports
    "GenerateReportUseCase",
]
