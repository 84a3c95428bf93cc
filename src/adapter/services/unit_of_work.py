from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.calendar_event_repository import CalendarEventRepository
from src.adapter.repositories.invitation_activity_repository import (
    InvitationActivityRepository,
)
from src.adapter.repositories.invitation_repository import InvitationRepository
from src.adapter.repositories.project_repository import ProjectRepository
from src.adapter.repositories.rate_limit_repository import RateLimitRepository
from src.adapter.repositories.task_repository import TaskRepository
from src.adapter.repositories.team_repository import TeamRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.invitations = InvitationRepository(self.session)
        self.invitation_activities = InvitationActivityRepository(self.session)
        self.rate_limits = RateLimitRepository(self.session)
        self.projects = ProjectRepository(self.session)
        self.tasks = TaskRepository(self.session)
        self.teams = TeamRepository(self.session)
        self.calendar_events = CalendarEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
