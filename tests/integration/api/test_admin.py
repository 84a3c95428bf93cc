from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.base import utcnow
from src.domain.entities import Invitation, InvitationStatus


@pytest.mark.asyncio
async def test_expire_endpoint_runs_sweep(client: AsyncClient, db_session, owner, invitee, admin_headers):
    project_id = (await client.post("/projects", json={"name": "Website"}, headers=owner["headers"])).json()["id"]
    await client.post(
        "/invitations",
        json={"target_type": "project", "target_id": project_id, "recipient_email": invitee["email"]},
        headers=owner["headers"],
    )
    invitation = (await db_session.exec(select(Invitation))).one()
    invitation.expires_at = utcnow() - timedelta(minutes=1)
    db_session.add(invitation)
    await db_session.commit()

    response = await client.post("/admin/invitations/expire", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"expired": 1}
    await db_session.refresh(invitation)
    assert invitation.status == InvitationStatus.expired


@pytest.mark.asyncio
async def test_clear_invitation_data(client: AsyncClient, owner, invitee, admin_headers):
    project_id = (await client.post("/projects", json={"name": "Website"}, headers=owner["headers"])).json()["id"]
    await client.post(
        "/invitations",
        json={"target_type": "project", "target_id": project_id, "recipient_email": invitee["email"]},
        headers=owner["headers"],
    )

    response = await client.delete("/admin/invitations", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"invitations_deleted": 1, "activities_deleted": 1, "rate_limits_deleted": 1}
    sent = await client.get("/invitations/sent", headers=owner["headers"])
    assert sent.json() == []


@pytest.mark.asyncio
async def test_admin_key_required(client: AsyncClient):
    missing = await client.post("/admin/invitations/expire")
    wrong = await client.delete("/admin/invitations", headers={"X-Admin-API-Key": "nope"})

    assert missing.status_code == 401
    assert wrong.status_code == 401
    assert wrong.json()["error"]["code"] == "INVALID_API_KEY"
