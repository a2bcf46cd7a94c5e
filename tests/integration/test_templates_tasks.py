"""Integration tests for email templates and daily tasks."""

import pytest

pytestmark = pytest.mark.integration


async def create_email_template(client, name, category="FOLLOW_UP"):
    response = await client.post(
        "/api/v1/email-templates",
        json={
            "name": name,
            "subject": "Following up on {position}",
            "body": "Hi {name},\n\nThanks for your time.",
            "category": category,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


async def create_task(client, title, due_date="2030-06-01T09:00:00Z", **fields):
    response = await client.post("/api/v1/tasks", json={"title": title, "due_date": due_date, **fields})
    assert response.status_code == 201, response.text
    return response.json()


async def test_email_templates_sorted_and_filtered(client):
    await create_email_template(client, "Thank you", category="THANK_YOU")
    await create_email_template(client, "Ask for referral", category="REFERRAL_REQUEST")
    await create_email_template(client, "Check in")

    names = [t["name"] for t in (await client.get("/api/v1/email-templates")).json()]
    assert names == ["Ask for referral", "Check in", "Thank you"]

    referral = (await client.get("/api/v1/email-templates", params={"category": "REFERRAL_REQUEST"})).json()
    assert [t["name"] for t in referral] == ["Ask for referral"]


async def test_email_template_category_is_validated(client):
    response = await client.post(
        "/api/v1/email-templates",
        json={"name": "Bad", "subject": "s", "body": "b", "category": "SPAM"},
    )
    assert response.status_code == 422


async def test_update_and_delete_email_template(client):
    template = await create_email_template(client, "Intro")

    updated = await client.patch(f"/api/v1/email-templates/{template['id']}", json={"subject": "Quick intro"})
    assert updated.json()["subject"] == "Quick intro"

    assert (await client.delete(f"/api/v1/email-templates/{template['id']}")).status_code == 200
    missing = await client.get(f"/api/v1/email-templates/{template['id']}")
    assert missing.json()["detail"] == "Email template not found"


async def test_tasks_with_subtasks(client):
    task = await create_task(client, "Apply to three roles")
    await create_task(client, "Tailor resume", parent_task_id=task["id"])
    await create_task(client, "Write cover letter", parent_task_id=task["id"])

    tasks = (await client.get("/api/v1/tasks")).json()

    assert len(tasks) == 1
    assert {s["title"] for s in tasks[0]["subtasks"]} == {"Tailor resume", "Write cover letter"}


async def test_tasks_filtered_by_day(client):
    await create_task(client, "Today", due_date="2030-06-01T23:30:00Z")
    await create_task(client, "Tomorrow", due_date="2030-06-02T08:00:00Z")

    response = await client.get("/api/v1/tasks", params={"date": "2030-06-01"})

    assert [t["title"] for t in response.json()] == ["Today"]


async def test_completing_task(client):
    task = await create_task(client, "Email recruiter")

    done = (await client.patch(f"/api/v1/tasks/{task['id']}", json={"is_completed": True})).json()
    assert done["completed_at"] is not None

    reopened = (await client.patch(f"/api/v1/tasks/{task['id']}", json={"is_completed": False})).json()
    assert reopened["completed_at"] is None


async def test_deleting_task_removes_subtasks(client):
    task = await create_task(client, "Weekly review")
    subtask = await create_task(client, "Update tracker", parent_task_id=task["id"])

    assert (await client.delete(f"/api/v1/tasks/{task['id']}")).status_code == 200
    assert (await client.get(f"/api/v1/tasks/{subtask['id']}")).status_code == 404


async def test_subtask_needs_existing_parent(client):
    response = await client.post(
        "/api/v1/tasks",
        json={
            "title": "Orphan",
            "due_date": "2030-06-01T09:00:00Z",
            "parent_task_id": "00000000-0000-0000-0000-000000000000",
        },
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Parent task not found"
