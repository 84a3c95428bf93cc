import pytest
from httpx import AsyncClient

MARCH = {"start": "2025-03-01T00:00:00", "end": "2025-03-31T23:59:59"}


async def create_event(client: AsyncClient, user: dict, **fields):
    payload = {
        "title": "Sprint planning",
        "start_date": "2025-03-10T09:00:00",
        "end_date": "2025-03-10T10:00:00",
    }
    payload.update(fields)
    return await client.post("/calendar/events", json=payload, headers=user["headers"])


async def titles(client: AsyncClient, user: dict, **params):
    response = await client.get("/calendar/events", params={**MARCH, **params}, headers=user["headers"])
    assert response.status_code == 200
    return [e["title"] for e in response.json()]


@pytest.mark.asyncio
async def test_event_lifecycle(client: AsyncClient, owner, invitee):
    created = await create_event(client, owner, reminders=[30, 10], participants=[invitee["id"]])
    assert created.status_code == 201
    event = created.json()
    assert event["participants"] == [invitee["id"]]
    assert [r["minutes"] for r in event["reminders"]] == [10, 30]

    assert await titles(client, invitee) == ["Sprint planning"]

    moved = await client.patch(
        f"/calendar/events/{event['id']}",
        json={"start_date": "2025-04-01T09:00:00", "end_date": "2025-04-01T10:00:00", "participants": []},
        headers=owner["headers"],
    )
    assert moved.status_code == 200
    assert moved.json()["participants"] == []
    assert [r["minutes"] for r in moved.json()["reminders"]] == [10, 30]
    assert await titles(client, owner) == []

    deleted = await client.delete(f"/calendar/events/{event['id']}", headers=owner["headers"])
    missing = await client.delete(f"/calendar/events/{event['id']}", headers=owner["headers"])
    assert deleted.status_code == 200
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "EVENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_project_events_follow_project_access(client: AsyncClient, owner, invitee):
    project_id = (await client.post("/projects", json={"name": "Website"}, headers=owner["headers"])).json()["id"]
    await create_event(client, owner, title="Launch", type="milestone", project_id=project_id)
    await create_event(client, owner, title="Dentist", start_date="2025-03-12T08:00:00", end_date="2025-03-12T09:00:00")

    assert await titles(client, invitee) == []

    invitation = await client.post(
        "/invitations",
        json={"target_type": "project", "target_id": project_id, "recipient_email": invitee["email"]},
        headers=owner["headers"],
    )
    await client.post(f"/invitations/{invitation.json()['id']}/accept", headers=invitee["headers"])

    assert await titles(client, invitee) == ["Launch"]
    assert await titles(client, owner, type="milestone") == ["Launch"]
    assert await titles(client, owner, search="dent") == ["Dentist"]


@pytest.mark.asyncio
async def test_only_creator_changes_event(client: AsyncClient, owner, invitee):
    event_id = (await create_event(client, owner, participants=[invitee["id"]])).json()["id"]

    renamed = await client.patch(f"/calendar/events/{event_id}", json={"title": "Mine"}, headers=invitee["headers"])
    deleted = await client.delete(f"/calendar/events/{event_id}", headers=invitee["headers"])

    assert renamed.status_code == 403
    assert renamed.json()["error"]["code"] == "NOT_EVENT_CREATOR"
    assert deleted.status_code == 403


@pytest.mark.asyncio
async def test_event_validation(client: AsyncClient, owner):
    backwards = await create_event(client, owner, end_date="2025-03-10T08:00:00")
    untitled = await create_event(client, owner, title=" ")
    foreign = await create_event(client, owner, project_id="00000000-0000-0000-0000-000000000001")
    inverted = await client.get(
        "/calendar/events",
        params={"start": "2025-03-31T00:00:00", "end": "2025-03-01T00:00:00"},
        headers=owner["headers"],
    )

    assert backwards.status_code == 400
    assert backwards.json()["error"]["code"] == "INVALID_EVENT_DATES"
    assert untitled.json()["error"]["code"] == "TITLE_REQUIRED"
    assert foreign.status_code == 404
    assert foreign.json()["error"]["code"] == "PROJECT_NOT_FOUND"
    assert inverted.status_code == 400
    assert inverted.json()["error"]["code"] == "INVALID_RANGE"


@pytest.mark.asyncio
async def test_deleting_project_keeps_its_events(client: AsyncClient, owner):
    project_id = (await client.post("/projects", json={"name": "Website"}, headers=owner["headers"])).json()["id"]
    await create_event(client, owner, title="Launch", project_id=project_id)

    await client.delete(f"/projects/{project_id}", headers=owner["headers"])

    response = await client.get("/calendar/events", params=MARCH, headers=owner["headers"])
    assert [(e["title"], e["project_id"]) for e in response.json()] == [("Launch", None)]
