from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.projects import (
    CreateProjectCommand,
    CreateProjectUseCase,
    DeleteProjectUseCase,
    UpdateProjectCommand,
    UpdateProjectUseCase,
)
from src.app.use_cases.tasks import (
    AssigneeRef,
    CreateTaskCommand,
    CreateTaskUseCase,
    UpdateTaskCommand,
    UpdateTaskUseCase,
)
from src.app.use_cases.teams import (
    AddTeamMemberCommand,
    AddTeamMemberUseCase,
    CreateTeamCommand,
    CreateTeamUseCase,
    LinkProjectUseCase,
)
from src.domain.base import utcnow
from src.domain.entities import (
    Invitation,
    InvitationActivityType,
    InvitationRole,
    InvitationStatus,
    InvitationTargetType,
    Project,
    ProjectTeam,
    Task,
    TaskStatus,
    Team,
    TeamMember,
    TeamMemberRole,
)


# ============================================================================
# Projects
# ============================================================================


@pytest.mark.asyncio
async def test_create_project_sets_owner(mock_uow, sender):
    result = await CreateProjectUseCase(mock_uow).execute(
        sender, CreateProjectCommand(name="  Website Redesign ")
    )

    assert result.is_ok()
    assert result.value.name == "Website Redesign"
    assert result.value.owner_id == str(sender.id)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_project_name_too_short(mock_uow, sender):
    result = await CreateProjectUseCase(mock_uow).execute(sender, CreateProjectCommand(name="ab"))

    assert result.is_err()
    assert result.error.code == "NAME_TOO_SHORT"
    mock_uow.projects.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_only_owner_updates_project(mock_uow, sender, recipient):
    project = Project(id=uuid4(), name="Website", owner_id=sender.id)
    mock_uow.projects.get_by_id.return_value = project

    result = await UpdateProjectUseCase(mock_uow).execute(
        recipient, project.id, UpdateProjectCommand(name="Hijacked")
    )

    assert result.is_err()
    assert result.error.code == "NOT_PROJECT_OWNER"
    assert project.name == "Website"


@pytest.mark.asyncio
async def test_owner_updates_only_given_fields(mock_uow, sender):
    project = Project(id=uuid4(), name="Website", description="Old", owner_id=sender.id)
    mock_uow.projects.get_by_id.return_value = project

    result = await UpdateProjectUseCase(mock_uow).execute(
        sender, project.id, UpdateProjectCommand(status="on-hold")
    )

    assert result.is_ok()
    assert result.value.status == "on-hold"
    assert result.value.description == "Old"


@pytest.mark.asyncio
async def test_delete_missing_project(mock_uow, sender):
    result = await DeleteProjectUseCase(mock_uow).execute(sender, uuid4())

    assert result.is_err()
    assert result.error.code == "PROJECT_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_project_cancels_its_pending_invitations(mock_uow, sender):
    # Arrange
    project = Project(id=uuid4(), name="Website", owner_id=sender.id)
    now = utcnow()
    pending = Invitation(
        id=uuid4(),
        sender_id=sender.id,
        sender_name=sender.name,
        sender_email=sender.email,
        recipient_email="bia@example.com",
        target_type=InvitationTargetType.project,
        target_id=project.id,
        target_name=project.name,
        role=InvitationRole.member,
        created_at=now,
        expires_at=now + timedelta(days=7),
    )
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.invitations.get_pending_for_target.return_value = [pending]

    # Act
    result = await DeleteProjectUseCase(mock_uow).execute(sender, project.id)

    # Assert
    assert result.is_ok()
    mock_uow.invitations.get_pending_for_target.assert_awaited_once_with(
        InvitationTargetType.project, project.id
    )
    assert pending.status == InvitationStatus.cancelled
    assert pending.cancelled_at is not None
    activity = mock_uow.invitation_activities.create.call_args[0][0]
    assert activity.type == InvitationActivityType.cancelled
    assert activity.invitation_id == pending.id
    mock_uow.projects.delete.assert_awaited_once_with(project)


@pytest.mark.asyncio
async def test_only_owner_deletes_project(mock_uow, sender, recipient):
    project = Project(id=uuid4(), name="Website", owner_id=sender.id)
    mock_uow.projects.get_by_id.return_value = project

    result = await DeleteProjectUseCase(mock_uow).execute(recipient, project.id)

    assert result.is_err()
    assert result.error.code == "NOT_PROJECT_OWNER"
    mock_uow.invitations.get_pending_for_target.assert_not_awaited()
    mock_uow.projects.delete.assert_not_awaited()


# ============================================================================
# Tasks
# ============================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "title,code",
    [("", "TITLE_REQUIRED"), ("   ", "TITLE_REQUIRED"), ("x" * 201, "TITLE_TOO_LONG")],
)
async def test_task_title_rules(mock_uow, sender, title, code):
    result = await CreateTaskUseCase(mock_uow).execute(
        sender, uuid4(), CreateTaskCommand(title=title)
    )

    assert result.is_err()
    assert result.error.code == code


@pytest.mark.asyncio
async def test_task_in_inaccessible_project(mock_uow, sender):
    mock_uow.projects.user_can_access.return_value = False

    result = await CreateTaskUseCase(mock_uow).execute(
        sender, uuid4(), CreateTaskCommand(title="Write docs")
    )

    assert result.is_err()
    assert result.error.code == "PROJECT_NOT_FOUND"


@pytest.mark.asyncio
async def test_create_task_with_assignees(mock_uow, sender, recipient):
    project_id = uuid4()
    command = CreateTaskCommand(
        title="Write docs",
        assignees=[
            AssigneeRef(user_id=recipient.id, user_name=recipient.name),
            AssigneeRef(user_id=recipient.id, user_name=recipient.name),
        ],
    )

    result = await CreateTaskUseCase(mock_uow).execute(sender, project_id, command)

    assert result.is_ok()
    assert result.value.project_id == str(project_id)
    assert [a.user_name for a in result.value.assignees] == [recipient.name]
    assert result.value.completed_at is None


@pytest.mark.asyncio
async def test_completing_task_sets_completed_at(mock_uow, sender):
    task = Task(id=uuid4(), project_id=uuid4(), title="Deploy", created_by=sender.id)
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow).execute(
        sender, task.id, UpdateTaskCommand(status=TaskStatus.completed)
    )

    assert result.is_ok()
    assert task.status == TaskStatus.completed
    assert task.completed_at is not None


@pytest.mark.asyncio
async def test_reopening_task_clears_completed_at(mock_uow, sender):
    task = Task(
        id=uuid4(),
        project_id=uuid4(),
        title="Deploy",
        created_by=sender.id,
        status=TaskStatus.completed,
        completed_at=utcnow(),
    )
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow).execute(
        sender, task.id, UpdateTaskCommand(status=TaskStatus.in_progress)
    )

    assert result.is_ok()
    assert task.completed_at is None


# ============================================================================
# Teams
# ============================================================================


@pytest.mark.asyncio
async def test_create_team_adds_leader_as_member(mock_uow, sender):
    result = await CreateTeamUseCase(mock_uow).execute(sender, CreateTeamCommand(name="Produto"))

    assert result.is_ok()
    leader = mock_uow.teams.add_member.call_args[0][0]
    assert leader.user_id == sender.id
    assert leader.role == TeamMemberRole.leader
    assert result.value.leader_id == str(sender.id)


@pytest.mark.asyncio
async def test_only_leader_adds_members(mock_uow, sender, recipient):
    mock_uow.teams.get_by_id.return_value = Team(id=uuid4(), name="Produto", leader_id=sender.id)

    result = await AddTeamMemberUseCase(mock_uow).execute(
        recipient,
        uuid4(),
        AddTeamMemberCommand(user_id=recipient.id, user_name=recipient.name),
    )

    assert result.is_err()
    assert result.error.code == "NOT_TEAM_LEADER"


@pytest.mark.asyncio
async def test_member_cannot_be_added_twice(mock_uow, sender, recipient):
    team = Team(id=uuid4(), name="Produto", leader_id=sender.id)
    mock_uow.teams.get_by_id.return_value = team
    mock_uow.teams.get_member.return_value = TeamMember(
        team_id=team.id, user_id=recipient.id, user_name=recipient.name
    )

    result = await AddTeamMemberUseCase(mock_uow).execute(
        sender, team.id, AddTeamMemberCommand(user_id=recipient.id, user_name=recipient.name)
    )

    assert result.is_err()
    assert result.error.code == "ALREADY_TEAM_MEMBER"


@pytest.mark.asyncio
async def test_linking_an_already_linked_project_is_a_no_op(mock_uow, sender):
    team = Team(id=uuid4(), name="Produto", leader_id=sender.id)
    project_id = uuid4()
    mock_uow.teams.get_by_id.return_value = team
    mock_uow.teams.get_project_link.return_value = ProjectTeam(team_id=team.id, project_id=project_id)

    result = await LinkProjectUseCase(mock_uow).execute(sender, team.id, project_id)

    assert result.is_ok()
    mock_uow.teams.link_project.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()
