"""Integration tests for learning items and nested resources."""

import pytest

pytestmark = pytest.mark.integration


async def create_item(client, title, **fields):
    response = await client.post("/api/v1/learning", json={"title": title, **fields})
    assert response.status_code == 201, response.text
    return response.json()


async def create_resource(client, title, **fields):
    response = await client.post("/api/v1/resources", json={"title": title, **fields})
    assert response.status_code == 201, response.text
    return response.json()


async def test_learning_items_ordered_by_priority(client):
    await create_item(client, "Kubernetes basics", priority="LOW")
    await create_item(client, "System design", priority="HIGH", category="Interviews")
    await create_item(client, "Rust ownership")

    titles = [i["title"] for i in (await client.get("/api/v1/learning")).json()]

    assert titles == ["System design", "Rust ownership", "Kubernetes basics"]


async def test_learning_status_stamps(client):
    item = await create_item(client, "Dynamic programming", type="SKILL")
    assert item["started_at"] is None

    started = (await client.patch(f"/api/v1/learning/{item['id']}", json={"status": "IN_PROGRESS"})).json()
    assert started["started_at"] is not None

    finished = (await client.patch(f"/api/v1/learning/{item['id']}", json={"status": "COMPLETED"})).json()
    assert finished["completed_at"] is not None
    assert finished["progress"] == 100
    assert finished["started_at"] == started["started_at"]


async def test_learning_filters(client):
    await create_item(client, "GraphQL", type="COURSE", category="Backend", tags="api,graphql")
    await create_item(client, "CSS grid", type="CONCEPT", category="Frontend")

    assert len((await client.get("/api/v1/learning", params={"type": "COURSE"})).json()) == 1
    assert len((await client.get("/api/v1/learning", params={"category": "Frontend"})).json()) == 1
    assert [i["title"] for i in (await client.get("/api/v1/learning", params={"search": "graphql"})).json()] == ["GraphQL"]


async def test_learning_progress_bounds(client):
    response = await client.post("/api/v1/learning", json={"title": "Go", "progress": 120})
    assert response.status_code == 422


async def test_learning_item_not_found(client):
    response = await client.get("/api/v1/learning/00000000-0000-0000-0000-000000000000")
    assert response.status_code == 404
    assert response.json()["detail"] == "Learning item not found"


async def test_resource_progress_from_sub_resources(client):
    parent = await create_resource(client, "Algorithms playlist", type="youtube")
    first = await create_resource(client, "Sorting", parent_id=parent["id"], is_completed=True)
    await create_resource(client, "Graphs", parent_id=parent["id"])

    detail = (await client.get(f"/api/v1/resources/{parent['id']}")).json()
    assert detail["progress"] == 50
    assert {s["title"] for s in detail["sub_resources"]} == {"Sorting", "Graphs"}

    child = (await client.get(f"/api/v1/resources/{first['id']}")).json()
    assert child["parent"]["title"] == "Algorithms playlist"
    assert child["progress"] == 100

    roots = (await client.get("/api/v1/resources", params={"root_only": True})).json()
    assert [r["title"] for r in roots] == ["Algorithms playlist"]


async def test_resource_can_not_become_its_own_ancestor(client):
    parent = await create_resource(client, "Parent")
    child = await create_resource(client, "Child", parent_id=parent["id"])

    self_parent = await client.patch(f"/api/v1/resources/{parent['id']}", json={"parent_id": parent["id"]})
    assert self_parent.status_code == 400

    cycle = await client.patch(f"/api/v1/resources/{parent['id']}", json={"parent_id": child["id"]})
    assert cycle.status_code == 400
    assert cycle.json()["detail"] == "A resource can not be its own ancestor"


async def test_resource_missing_parent(client):
    response = await client.post(
        "/api/v1/resources",
        json={"title": "Orphan", "parent_id": "00000000-0000-0000-0000-000000000000"},
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Parent resource not found"


async def test_deleting_resource_removes_sub_resources(client):
    parent = await create_resource(client, "Course")
    child = await create_resource(client, "Lesson 1", parent_id=parent["id"])

    assert (await client.delete(f"/api/v1/resources/{parent['id']}")).status_code == 200
    assert (await client.get(f"/api/v1/resources/{child['id']}")).status_code == 404
