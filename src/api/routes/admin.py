"""
Admin API Routes - Invitation Maintenance

Authentication is via Admin API Key, not user JWTs.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    ClearInvitationDataResponse,
    ClearInvitationDataUseCase,
    ExpireInvitationsResponse,
    ExpireInvitationsUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/invitations/expire",
    status_code=status.HTTP_200_OK,
    response_model=ExpireInvitationsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def expire_invitations(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Expire Invitations

    Runs the expiry sweep immediately instead of waiting for the background
    loop.

    Requires: X-Admin-API-Key header
    """
    result = await ExpireInvitationsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.delete(
    "/invitations",
    status_code=status.HTTP_200_OK,
    response_model=ClearInvitationDataResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def clear_invitation_data(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Clear Invitation Data

    Development tooling: deletes every invitation, activity and rate limit
    counter.

    Requires: X-Admin-API-Key header
    """
    result = await ClearInvitationDataUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value
