from abc import ABC, abstractmethod

from src.app.repositories.calendar_event_repository import ICalendarEventRepository
from src.app.repositories.invitation_activity_repository import (
    IInvitationActivityRepository,
)
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.project_repository import IProjectRepository
from src.app.repositories.rate_limit_repository import IRateLimitRepository
from src.app.repositories.task_repository import ITaskRepository
from src.app.repositories.team_repository import ITeamRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    invitations: IInvitationRepository
    invitation_activities: IInvitationActivityRepository
    rate_limits: IRateLimitRepository
    projects: IProjectRepository
    tasks: ITaskRepository
    teams: ITeamRepository
    calendar_events: ICalendarEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
