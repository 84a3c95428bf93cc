from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.repositories.invitation_repository import InvitationConflictError
from src.app.services.rate_limiter import RateLimitDecision
from src.app.use_cases.invitations import (
    InvitationFormData,
    InvitationTargetRef,
    SendInvitationUseCase,
)
from src.domain.base import utcnow
from src.domain.entities import (
    ActingUser,
    Invitation,
    InvitationActivityType,
    InvitationRole,
    InvitationStatus,
    InvitationTargetType,
    Project,
    Team,
    TeamMember,
)


@pytest.fixture
def project(sender):
    return Project(id=uuid4(), name="Website Redesign", owner_id=sender.id)


@pytest.fixture
def rate_limiter():
    limiter = MagicMock()
    limiter.check_and_consume = AsyncMock(return_value=RateLimitDecision(allowed=True))
    return limiter


def make_pending(recipient_email, project, sender, expires_in=timedelta(days=3)):
    now = utcnow()
    return Invitation(
        id=uuid4(),
        sender_id=sender.id,
        sender_name=sender.name,
        sender_email=sender.email,
        recipient_email=recipient_email,
        target_type=InvitationTargetType.project,
        target_id=project.id,
        target_name=project.name,
        role=InvitationRole.member,
        status=InvitationStatus.pending,
        created_at=now - timedelta(days=1),
        expires_at=now + expires_in,
    )


@pytest.mark.asyncio
async def test_send_creates_pending_invitation_and_activity(mock_uow, rate_limiter, sender, project):
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    use_case = SendInvitationUseCase(mock_uow, rate_limiter)
    form = InvitationFormData(recipient_email="Bia@Example.com", message="Join us", expiration_days=14)
    target = InvitationTargetRef(type=InvitationTargetType.project, id=project.id)

    # Act
    result = await use_case.execute(form, target, sender)

    # Assert
    assert result.is_ok()
    response = result.value
    assert response.status == "pending"
    assert response.recipient_email == "bia@example.com"
    assert response.target.name == "Website Redesign"
    assert response.link is None

    invitation = mock_uow.invitations.create.call_args[0][0]
    assert invitation.expires_at - invitation.created_at == timedelta(days=14)

    activity = mock_uow.invitation_activities.create.call_args[0][0]
    assert activity.type == InvitationActivityType.sent
    assert activity.invitation_id == invitation.id
    assert activity.performed_by == sender.id
    rate_limiter.check_and_consume.assert_awaited_once_with(str(sender.id))


@pytest.mark.asyncio
async def test_send_generates_link_on_request(mock_uow, rate_limiter, sender, project):
    mock_uow.projects.get_by_id.return_value = project
    use_case = SendInvitationUseCase(mock_uow, rate_limiter)
    form = InvitationFormData(recipient_email="bia@example.com", generate_link=True)

    result = await use_case.execute(form, InvitationTargetRef(type="project", id=project.id), sender)

    assert result.is_ok()
    assert result.value.link


@pytest.mark.asyncio
async def test_duplicate_pending_invitation_is_rejected(mock_uow, rate_limiter, sender, project):
    # Arrange
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.invitations.get_pending_by_recipient_and_target.return_value = make_pending(
        "bia@example.com", project, sender
    )
    use_case = SendInvitationUseCase(mock_uow, rate_limiter)
    form = InvitationFormData(recipient_email="bia@example.com")

    # Act
    result = await use_case.execute(form, InvitationTargetRef(type="project", id=project.id), sender)

    # Assert
    assert result.is_err()
    assert result.error.code == "INVITE_ALREADY_EXISTS"
    mock_uow.invitations.create.assert_not_awaited()
    mock_uow.invitation_activities.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_expired_duplicate_does_not_block_new_invitation(mock_uow, rate_limiter, sender, project):
    mock_uow.projects.get_by_id.return_value = project
    stale = make_pending("bia@example.com", project, sender, expires_in=-timedelta(hours=1))
    mock_uow.invitations.get_pending_by_recipient_and_target.return_value = stale
    use_case = SendInvitationUseCase(mock_uow, rate_limiter)

    result = await use_case.execute(
        InvitationFormData(recipient_email="bia@example.com"),
        InvitationTargetRef(type="project", id=project.id),
        sender,
    )

    assert result.is_ok()
    assert stale.status == InvitationStatus.expired
    mock_uow.invitations.update.assert_awaited_with(stale)
    mock_uow.invitations.create.assert_awaited_once()


@pytest.mark.asyncio
async def test_rate_limited_send(mock_uow, rate_limiter, sender, project):
    mock_uow.projects.get_by_id.return_value = project
    rate_limiter.check_and_consume.return_value = RateLimitDecision(
        allowed=False, retry_after_seconds=30
    )
    use_case = SendInvitationUseCase(mock_uow, rate_limiter)

    result = await use_case.execute(
        InvitationFormData(recipient_email="bia@example.com"),
        InvitationTargetRef(type="project", id=project.id),
        sender,
    )

    assert result.is_err()
    assert result.error.code == "RATE_LIMITED"
    assert "wait 30 seconds" in result.error.message
    assert result.error.details == {"retry_after_seconds": 30}
    mock_uow.invitations.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_target(mock_uow, rate_limiter, sender):
    use_case = SendInvitationUseCase(mock_uow, rate_limiter)

    result = await use_case.execute(
        InvitationFormData(recipient_email="bia@example.com"),
        InvitationTargetRef(type="team", id=uuid4()),
        sender,
    )

    assert result.is_err()
    assert result.error.code == "TARGET_NOT_FOUND"
    rate_limiter.check_and_consume.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "form,code",
    [
        (InvitationFormData(recipient_email="not-an-email"), "INVALID_EMAIL"),
        (InvitationFormData(recipient_email="someone@mailinator.com"), "DISPOSABLE_EMAIL"),
        (InvitationFormData(recipient_email="bia@example.com", role="guest"), "INVALID_ROLE"),
        (InvitationFormData(recipient_email="bia@example.com", expiration_days=5), "INVALID_EXPIRATION"),
        (InvitationFormData(recipient_email="bia@example.com", message="x" * 501), "MESSAGE_TOO_LONG"),
    ],
)
async def test_invalid_form_is_rejected_before_any_lookup(mock_uow, rate_limiter, sender, form, code):
    use_case = SendInvitationUseCase(mock_uow, rate_limiter)

    result = await use_case.execute(form, InvitationTargetRef(type="project", id=uuid4()), sender)

    assert result.is_err()
    assert result.error.code == code
    mock_uow.projects.get_by_id.assert_not_awaited()
    rate_limiter.check_and_consume.assert_not_awaited()


@pytest.mark.asyncio
async def test_sender_without_project_access_is_refused(mock_uow, rate_limiter, project):
    # Arrange: project belongs to someone else and the sender has no link to it
    outsider = ActingUser(id=uuid4(), name="Eva Costa", email="eva@example.com")
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.projects.user_can_access.return_value = False
    use_case = SendInvitationUseCase(mock_uow, rate_limiter)

    # Act
    result = await use_case.execute(
        InvitationFormData(recipient_email="bia@example.com"),
        InvitationTargetRef(type="project", id=project.id),
        outsider,
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "NOT_TARGET_MEMBER"
    mock_uow.projects.user_can_access.assert_awaited_once_with(project.id, outsider.id)
    rate_limiter.check_and_consume.assert_not_awaited()
    mock_uow.invitations.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_sender_outside_team_is_refused(mock_uow, rate_limiter, sender):
    team = Team(id=uuid4(), name="Design", leader_id=uuid4())
    mock_uow.teams.get_by_id.return_value = team
    use_case = SendInvitationUseCase(mock_uow, rate_limiter)

    result = await use_case.execute(
        InvitationFormData(recipient_email="bia@example.com"),
        InvitationTargetRef(type="team", id=team.id),
        sender,
    )

    assert result.is_err()
    assert result.error.code == "NOT_TARGET_MEMBER"
    mock_uow.teams.get_member.assert_awaited_once_with(team.id, sender.id)
    mock_uow.invitations.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_team_member_can_invite(mock_uow, rate_limiter, sender):
    team = Team(id=uuid4(), name="Design", leader_id=uuid4())
    mock_uow.teams.get_by_id.return_value = team
    mock_uow.teams.get_member.return_value = TeamMember(
        team_id=team.id, user_id=sender.id, user_name=sender.name
    )
    use_case = SendInvitationUseCase(mock_uow, rate_limiter)

    result = await use_case.execute(
        InvitationFormData(recipient_email="bia@example.com"),
        InvitationTargetRef(type="team", id=team.id),
        sender,
    )

    assert result.is_ok()
    assert result.value.target.name == "Design"


@pytest.mark.asyncio
async def test_concurrently_created_duplicate_is_reported_as_existing(mock_uow, rate_limiter, sender, project):
    # Arrange: the duplicate check passes but another request wins the insert
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.invitations.create = AsyncMock(
        side_effect=InvitationConflictError("UNIQUE constraint failed")
    )
    use_case = SendInvitationUseCase(mock_uow, rate_limiter)

    # Act
    result = await use_case.execute(
        InvitationFormData(recipient_email="bia@example.com"),
        InvitationTargetRef(type="project", id=project.id),
        sender,
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "INVITE_ALREADY_EXISTS"
    mock_uow.rollback.assert_awaited_once()
    mock_uow.invitation_activities.create.assert_not_awaited()
