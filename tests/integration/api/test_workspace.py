import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_project_task_lifecycle(client: AsyncClient, owner, invitee):
    project = await client.post(
        "/projects", json={"name": "Mobile App", "priority": "high"}, headers=owner["headers"]
    )
    assert project.status_code == 201
    project_id = project.json()["id"]

    task = await client.post(
        f"/projects/{project_id}/tasks",
        json={
            "title": "Login screen",
            "assignees": [{"user_id": invitee["id"], "user_name": invitee["name"]}],
        },
        headers=owner["headers"],
    )
    assert task.status_code == 201
    task_id = task.json()["id"]
    assert task.json()["assignees"][0]["user_name"] == "Carlos Santos"

    done = await client.patch(
        f"/tasks/{task_id}", json={"status": "completed"}, headers=owner["headers"]
    )
    assert done.status_code == 200
    assert done.json()["completed_at"] is not None

    reopened = await client.patch(
        f"/tasks/{task_id}", json={"status": "in-progress"}, headers=owner["headers"]
    )
    assert reopened.json()["completed_at"] is None

    assignees = await client.put(f"/tasks/{task_id}/assignees", json=[], headers=owner["headers"])
    assert assignees.status_code == 200
    assert assignees.json()["assignees"] == []

    listed = await client.get(f"/projects/{project_id}/tasks", headers=owner["headers"])
    assert [t["id"] for t in listed.json()] == [task_id]

    deleted = await client.delete(f"/tasks/{task_id}", headers=owner["headers"])
    assert deleted.status_code == 200
    listed = await client.get(f"/projects/{project_id}/tasks", headers=owner["headers"])
    assert listed.json() == []


@pytest.mark.asyncio
async def test_task_validation(client: AsyncClient, owner):
    project_id = (await client.post("/projects", json={"name": "Mobile App"}, headers=owner["headers"])).json()["id"]

    too_long = await client.post(
        f"/projects/{project_id}/tasks", json={"title": "x" * 201}, headers=owner["headers"]
    )
    empty = await client.post(
        f"/projects/{project_id}/tasks", json={"title": "  "}, headers=owner["headers"]
    )

    assert too_long.status_code == 400
    assert too_long.json()["error"]["code"] == "TITLE_TOO_LONG"
    assert empty.json()["error"]["code"] == "TITLE_REQUIRED"


@pytest.mark.asyncio
async def test_project_is_private_until_shared_with_a_team(client: AsyncClient, owner, invitee):
    project_id = (await client.post("/projects", json={"name": "Mobile App"}, headers=owner["headers"])).json()["id"]

    hidden = await client.get(f"/projects/{project_id}/tasks", headers=invitee["headers"])
    assert hidden.status_code == 404

    team_id = (await client.post("/teams", json={"name": "Produto"}, headers=owner["headers"])).json()["id"]
    added = await client.post(
        f"/teams/{team_id}/members",
        json={"user_id": invitee["id"], "user_name": invitee["name"]},
        headers=owner["headers"],
    )
    assert added.status_code == 201
    linked = await client.post(f"/teams/{team_id}/projects/{project_id}", headers=owner["headers"])
    assert linked.status_code == 200

    visible = await client.get("/projects", headers=invitee["headers"])
    assert [p["id"] for p in visible.json()] == [project_id]

    again = await client.post(
        f"/teams/{team_id}/members",
        json={"user_id": invitee["id"], "user_name": invitee["name"]},
        headers=owner["headers"],
    )
    assert again.status_code == 409


@pytest.mark.asyncio
async def test_only_owner_changes_project(client: AsyncClient, owner, invitee):
    project_id = (await client.post("/projects", json={"name": "Mobile App"}, headers=owner["headers"])).json()["id"]

    response = await client.patch(
        f"/projects/{project_id}", json={"name": "Mine now"}, headers=invitee["headers"]
    )
    short = await client.patch(f"/projects/{project_id}", json={"name": "ab"}, headers=owner["headers"])
    deleted = await client.delete(f"/projects/{project_id}", headers=owner["headers"])

    assert response.status_code == 403
    assert short.status_code == 400
    assert short.json()["error"]["code"] == "NAME_TOO_SHORT"
    assert deleted.status_code == 200


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
