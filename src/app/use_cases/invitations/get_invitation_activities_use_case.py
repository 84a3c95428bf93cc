"""
Get Invitation Activities Use Case

Retrieves the invitation audit log visible to a user.
"""

from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser

from .dtos import InvitationActivityResponse
from .validation import normalize_email


class GetInvitationActivitiesUseCase:
    """
    Use case for retrieving invitation activities.

    Business Rules:
    - Includes activities the user performed, activities on invitations
      addressed to the user's email and activities on invitations they sent
    - Results ordered by newest first, capped at limit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, limit: int = 50
    ) -> Result[List[InvitationActivityResponse]]:
        async with self.uow:
            activities = await self.uow.invitation_activities.get_for_user(
                acting_user.id, normalize_email(acting_user.email), limit=limit
            )
            return Return.ok(
                [InvitationActivityResponse.from_entity(a) for a in activities]
            )
