"""Integration tests for interviews and reminders."""

from datetime import datetime, timedelta, timezone

import pytest

pytestmark = pytest.mark.integration


def iso(dt):
    return dt.isoformat().replace("+00:00", "Z")


async def create_interview(client, application_id, **fields):
    payload = {
        "application_id": application_id,
        "round": 1,
        "title": "Phone screen",
        "interview_date": "2030-01-10T15:00:00Z",
        **fields,
    }
    response = await client.post("/api/v1/interviews", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def test_interview_includes_application_and_company(client, create_company, create_application):
    company = await create_company("Stark Industries")
    application = await create_application(company_id=company["id"], position_title="Engineer")

    interview = await create_interview(client, application["id"], meeting_link="https://meet.example/abc")

    assert interview["status"] == "SCHEDULED"
    assert interview["application"]["position_title"] == "Engineer"
    assert interview["application"]["company"]["name"] == "Stark Industries"


async def test_interview_round_must_be_positive(client, create_application):
    application = await create_application()
    response = await client.post(
        "/api/v1/interviews",
        json={
            "application_id": application["id"],
            "round": 0,
            "title": "Screen",
            "interview_date": "2030-01-10T15:00:00Z",
        },
    )
    assert response.status_code == 422


async def test_interview_filters(client, create_application):
    first = await create_application()
    second = await create_application(position_title="Other")
    past = datetime.now(timezone.utc) - timedelta(days=3)
    await create_interview(client, first["id"], interview_date=iso(past))
    await create_interview(client, first["id"], round=2, title="Onsite")
    await create_interview(client, second["id"])

    by_application = await client.get("/api/v1/interviews", params={"application_id": first["id"]})
    assert len(by_application.json()) == 2

    upcoming = await client.get("/api/v1/interviews", params={"upcoming": True})
    assert len(upcoming.json()) == 2


async def test_update_and_delete_interview(client, create_application):
    application = await create_application()
    interview = await create_interview(client, application["id"])

    response = await client.patch(
        f"/api/v1/interviews/{interview['id']}",
        json={"status": "COMPLETED", "feedback": "Strong system design"},
    )
    assert response.json()["status"] == "COMPLETED"
    assert response.json()["feedback"] == "Strong system design"

    assert (await client.delete(f"/api/v1/interviews/{interview['id']}")).status_code == 200
    assert (await client.get(f"/api/v1/interviews/{interview['id']}")).status_code == 404


async def test_reminder_toggle_twice_restores_state(client):
    created = await client.post(
        "/api/v1/reminders",
        json={"title": "Update LinkedIn", "due_date": "2030-05-01T09:00:00Z", "type": "OTHER"},
    )
    assert created.status_code == 201
    reminder = created.json()
    assert reminder["is_completed"] is False
    assert reminder["completed_at"] is None

    done = await client.patch(f"/api/v1/reminders/{reminder['id']}", json={"is_completed": True})
    assert done.json()["is_completed"] is True
    assert done.json()["completed_at"] is not None

    reopened = await client.patch(f"/api/v1/reminders/{reminder['id']}", json={"is_completed": False})
    assert reopened.json()["is_completed"] is False
    assert reopened.json()["completed_at"] is None


async def test_reminder_filters(client, create_application):
    application = await create_application()
    yesterday = iso(datetime.now(timezone.utc) - timedelta(days=1))
    overdue = (await client.post(
        "/api/v1/reminders",
        json={"application_id": application["id"], "title": "Overdue", "due_date": yesterday},
    )).json()
    await client.post("/api/v1/reminders", json={"title": "Later", "due_date": "2030-05-01T09:00:00Z"})
    done = (await client.post("/api/v1/reminders", json={"title": "Done", "due_date": yesterday})).json()
    await client.patch(f"/api/v1/reminders/{done['id']}", json={"is_completed": True})

    overdue_rows = (await client.get("/api/v1/reminders", params={"overdue": True})).json()
    assert [r["id"] for r in overdue_rows] == [overdue["id"]]
    assert overdue_rows[0]["application"]["id"] == application["id"]

    open_rows = (await client.get("/api/v1/reminders", params={"is_completed": False})).json()
    assert {r["title"] for r in open_rows} == {"Overdue", "Later"}


async def test_reminders_deleted_with_application(client, create_application):
    application = await create_application()
    await client.post(
        "/api/v1/reminders",
        json={"application_id": application["id"], "title": "Follow up", "due_date": "2030-05-01T09:00:00Z"},
    )

    await client.delete(f"/api/v1/applications/{application['id']}")

    assert (await client.get("/api/v1/reminders")).json() == []
