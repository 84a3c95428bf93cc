"""
Clear Invitation Data Use Case

Dev tooling: wipes invitations, activities and rate-limit counters.
"""

import logging

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ClearInvitationDataResponse

logger = logging.getLogger(__name__)


class ClearInvitationDataUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ClearInvitationDataResponse]:
        async with self.uow:
            activities = await self.uow.invitation_activities.delete_all()
            invitations = await self.uow.invitations.delete_all()
            rate_limits = await self.uow.rate_limits.delete_all()
            await self.uow.commit()

            logger.warning(
                f"Cleared invitation data: {invitations} invitations, "
                f"{activities} activities, {rate_limits} rate limit counters"
            )

            return Return.ok(
                ClearInvitationDataResponse(
                    invitations_deleted=invitations,
                    activities_deleted=activities,
                    rate_limits_deleted=rate_limits,
                )
            )
