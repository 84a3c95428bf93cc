"""
Delete Project Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import (
    ActingUser,
    InvitationActivity,
    InvitationActivityType,
    InvitationStatus,
    InvitationTargetType,
)

from .dtos import DeleteProjectResponse

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    """
    Use case for deleting a project.

    Business Rules:
    - Only the owner can delete
    - Tasks, assignees, members and team links go with the project
    - Pending invitations to the project are cancelled, each with a
      "cancelled" activity, so they can no longer be accepted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, project_id: UUID
    ) -> Result[DeleteProjectResponse]:
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            if project.owner_id != acting_user.id:
                return Return.err(
                    Error("NOT_PROJECT_OWNER", "Only the owner can delete this project")
                )

            now = utcnow()
            pending = await self.uow.invitations.get_pending_for_target(
                InvitationTargetType.project, project.id
            )
            for invitation in pending:
                invitation.status = InvitationStatus.cancelled
                invitation.cancelled_at = now
                await self.uow.invitations.update(invitation)
                await self.uow.invitation_activities.create(
                    InvitationActivity(
                        type=InvitationActivityType.cancelled,
                        invitation_id=invitation.id,
                        performed_by=acting_user.id,
                        performed_by_name=acting_user.name,
                        target_name=invitation.target_name,
                        recipient_email=invitation.recipient_email,
                        timestamp=now,
                    )
                )

            await self.uow.projects.delete(project)
            await self.uow.commit()

            logger.info(
                f"Project {project_id} deleted by {acting_user.id}, "
                f"{len(pending)} pending invitation(s) cancelled"
            )

            return Return.ok(DeleteProjectResponse(id=str(project_id)))
