from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    AcceptInvitationUseCase,
    CancelInvitationUseCase,
    GetInvitationActivitiesUseCase,
    InvitationActivityResponse,
    InvitationFormData,
    InvitationResponse,
    InvitationTargetRef,
    ListInvitationsUseCase,
    RejectInvitationUseCase,
    ResendInvitationUseCase,
    SendInvitationUseCase,
)
from src.depends import build_rate_limiter, get_current_user, get_unit_of_work
from src.domain.entities import ActingUser, InvitationTargetType
from config import ApplicationConfig

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class SendInvitationRequest(BaseModel):
    """
    Send invitation HTTP request payload

    Email, role, expiration and message rules are checked by the use case so
    that they surface as the documented error codes.
    """

    target_type: InvitationTargetType = Field(..., description="project or team")
    target_id: UUID
    recipient_email: str = Field(..., description="Email address to invite")
    recipient_id: Optional[UUID] = None
    role: str = Field("member", description="owner, admin, member or observer")
    teams: List[str] = Field(default_factory=list)
    message: Optional[str] = None
    expiration_days: int = Field(
        ApplicationConfig.INVITE_DEFAULT_EXPIRATION_DAYS,
        description="One of 1, 3, 7, 14, 30",
    )
    generate_link: bool = False


class ResendInvitationRequest(BaseModel):
    message: Optional[str] = None


def _raise_for_lifecycle_error(error):
    if error.code in ("INVALID_EMAIL", "DISPOSABLE_EMAIL", "INVALID_ROLE",
                      "INVALID_EXPIRATION", "MESSAGE_TOO_LONG", "INVALID_STATUS"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code in ("NOT_INVITATION_SENDER", "NOT_INVITATION_RECIPIENT", "NOT_TARGET_MEMBER"):
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code in ("TARGET_NOT_FOUND", "INVITATION_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code in ("INVITE_ALREADY_EXISTS", "INVITATION_NOT_PENDING"):
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    elif error.code == "INVITATION_EXPIRED":
        raise ClientError(error, status_code=status.HTTP_410_GONE)
    elif error.code == "RATE_LIMITED":
        retry_after = (error.details or {}).get("retry_after_seconds", 0)
        raise ClientError(
            error,
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            headers={"Retry-After": str(retry_after)},
        )
    raise ServerError(error)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=InvitationResponse,
)
async def send_invitation(
    request: SendInvitationRequest,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Send Invitation

    Invites an email address to a project or team.

    Raises:
        - 400 Bad Request: INVALID_EMAIL, DISPOSABLE_EMAIL, INVALID_ROLE,
                           INVALID_EXPIRATION, MESSAGE_TOO_LONG
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: NOT_TARGET_MEMBER
        - 404 Not Found: TARGET_NOT_FOUND
        - 409 Conflict: INVITE_ALREADY_EXISTS
        - 429 Too Many Requests: RATE_LIMITED
    """
    form = InvitationFormData(
        recipient_email=request.recipient_email,
        recipient_id=request.recipient_id,
        role=request.role,
        teams=request.teams,
        message=request.message,
        expiration_days=request.expiration_days,
        generate_link=request.generate_link,
    )
    target = InvitationTargetRef(type=request.target_type, id=request.target_id)

    use_case = SendInvitationUseCase(uow, build_rate_limiter(uow))
    result = await use_case.execute(form, target, current_user)

    if result.is_err():
        _raise_for_lifecycle_error(result.error)

    return result.value


@router.get("/sent", response_model=List[InvitationResponse])
async def list_sent_invitations(
    status_filter: Optional[str] = Query(None, alias="status"),
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListInvitationsUseCase(uow).execute(
        current_user, box="sent", status=status_filter
    )
    if result.is_err():
        _raise_for_lifecycle_error(result.error)
    return result.value


@router.get("/received", response_model=List[InvitationResponse])
async def list_received_invitations(
    status_filter: Optional[str] = Query(None, alias="status"),
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListInvitationsUseCase(uow).execute(
        current_user, box="received", status=status_filter
    )
    if result.is_err():
        _raise_for_lifecycle_error(result.error)
    return result.value


@router.get("/activities", response_model=List[InvitationActivityResponse])
async def list_invitation_activities(
    limit: int = Query(50, ge=1, le=200),
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Activities the user performed or that concern invitations addressed to them"""
    result = await GetInvitationActivitiesUseCase(uow).execute(current_user, limit)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.post("/{invitation_id}/accept", response_model=InvitationResponse)
async def accept_invitation(
    invitation_id: UUID,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    Raises:
        - 403 Forbidden: NOT_INVITATION_RECIPIENT
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_NOT_PENDING
        - 410 Gone: INVITATION_EXPIRED
    """
    result = await AcceptInvitationUseCase(uow).execute(invitation_id, current_user)
    if result.is_err():
        _raise_for_lifecycle_error(result.error)
    return result.value


@router.post("/{invitation_id}/reject", response_model=InvitationResponse)
async def reject_invitation(
    invitation_id: UUID,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reject Invitation

    Raises:
        - 403 Forbidden: NOT_INVITATION_RECIPIENT
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_NOT_PENDING
        - 410 Gone: INVITATION_EXPIRED
    """
    result = await RejectInvitationUseCase(uow).execute(invitation_id, current_user)
    if result.is_err():
        _raise_for_lifecycle_error(result.error)
    return result.value


@router.post("/{invitation_id}/cancel", response_model=InvitationResponse)
async def cancel_invitation(
    invitation_id: UUID,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Cancel Invitation

    Raises:
        - 403 Forbidden: NOT_INVITATION_SENDER
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_NOT_PENDING
    """
    result = await CancelInvitationUseCase(uow).execute(invitation_id, current_user)
    if result.is_err():
        _raise_for_lifecycle_error(result.error)
    return result.value


@router.post("/{invitation_id}/resend", response_model=InvitationResponse)
async def resend_invitation(
    invitation_id: UUID,
    request: Optional[ResendInvitationRequest] = None,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Resend Invitation

    Resets the expiry to 7 days from now. An expired invitation becomes
    pending again.

    Raises:
        - 403 Forbidden: NOT_INVITATION_SENDER
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_NOT_PENDING, INVITE_ALREADY_EXISTS
        - 429 Too Many Requests: RATE_LIMITED
    """
    use_case = ResendInvitationUseCase(
        uow,
        build_rate_limiter(uow),
        extension_days=ApplicationConfig.INVITE_RESEND_EXTENSION_DAYS,
    )
    result = await use_case.execute(
        invitation_id, current_user, message=request.message if request else None
    )
    if result.is_err():
        _raise_for_lifecycle_error(result.error)
    return result.value
