from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.entities import ActingUser


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.invitations = MagicMock()
    uow.invitations.get_by_id = AsyncMock(return_value=None)
    uow.invitations.get_pending_by_recipient_and_target = AsyncMock(return_value=None)
    uow.invitations.get_by_sender = AsyncMock(return_value=[])
    uow.invitations.get_by_recipient_email = AsyncMock(return_value=[])
    uow.invitations.get_pending_expired = AsyncMock(return_value=[])
    uow.invitations.get_pending_for_target = AsyncMock(return_value=[])
    uow.invitations.create = AsyncMock(side_effect=lambda inv: inv)
    uow.invitations.update = AsyncMock(side_effect=lambda inv: inv)
    uow.invitations.delete_all = AsyncMock(return_value=0)

    uow.invitation_activities = MagicMock()
    uow.invitation_activities.create = AsyncMock(side_effect=lambda a: a)
    uow.invitation_activities.get_for_user = AsyncMock(return_value=[])
    uow.invitation_activities.delete_all = AsyncMock(return_value=0)

    uow.rate_limits = MagicMock()
    uow.rate_limits.get_by_key = AsyncMock(return_value=None)
    uow.rate_limits.save = AsyncMock(side_effect=lambda c: c)
    uow.rate_limits.delete_all = AsyncMock(return_value=0)

    uow.projects = MagicMock()
    uow.projects.get_by_id = AsyncMock(return_value=None)
    uow.projects.get_accessible_by_user = AsyncMock(return_value=[])
    uow.projects.user_can_access = AsyncMock(return_value=True)
    uow.projects.create = AsyncMock(side_effect=lambda p: p)
    uow.projects.update = AsyncMock(side_effect=lambda p: p)
    uow.projects.delete = AsyncMock()
    uow.projects.get_member = AsyncMock(return_value=None)
    uow.projects.get_members = AsyncMock(return_value=[])
    uow.projects.add_member = AsyncMock(side_effect=lambda m: m)

    uow.tasks = MagicMock()
    uow.tasks.get_by_id = AsyncMock(return_value=None)
    uow.tasks.get_by_project_ids = AsyncMock(return_value=[])
    uow.tasks.create = AsyncMock(side_effect=lambda t: t)
    uow.tasks.update = AsyncMock(side_effect=lambda t: t)
    uow.tasks.delete = AsyncMock()
    uow.tasks.get_assignees = AsyncMock(return_value=[])
    uow.tasks.replace_assignees = AsyncMock(side_effect=lambda task_id, a: a)

    uow.teams = MagicMock()
    uow.teams.get_by_id = AsyncMock(return_value=None)
    uow.teams.get_by_user = AsyncMock(return_value=[])
    uow.teams.create = AsyncMock(side_effect=lambda t: t)
    uow.teams.get_members = AsyncMock(return_value=[])
    uow.teams.get_member = AsyncMock(return_value=None)
    uow.teams.add_member = AsyncMock(side_effect=lambda m: m)
    uow.teams.get_project_links = AsyncMock(return_value=[])
    uow.teams.get_project_link = AsyncMock(return_value=None)
    uow.teams.link_project = AsyncMock(side_effect=lambda link: link)

    uow.calendar_events = MagicMock()
    uow.calendar_events.get_by_id = AsyncMock(return_value=None)
    uow.calendar_events.get_in_range = AsyncMock(return_value=[])
    uow.calendar_events.create = AsyncMock(side_effect=lambda e: e)
    uow.calendar_events.update = AsyncMock(side_effect=lambda e: e)
    uow.calendar_events.delete = AsyncMock()
    uow.calendar_events.get_participants = AsyncMock(return_value=[])
    uow.calendar_events.replace_participants = AsyncMock(side_effect=lambda event_id, p: p)
    uow.calendar_events.get_reminders = AsyncMock(return_value=[])
    uow.calendar_events.replace_reminders = AsyncMock(side_effect=lambda event_id, r: r)

    return uow


@pytest.fixture
def sender():
    return ActingUser(id=uuid4(), name="Ana Silva", email="ana@planeja.dev")


@pytest.fixture
def recipient():
    return ActingUser(id=uuid4(), name="Carlos Santos", email="carlos@example.com")


class FakeClock:
    """Manually advanced clock for time-dependent services"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 3, 10, 12, 0, 0))
