"""Integration tests for JSON backup export/import and CSV export."""

import csv
import io

import pytest

pytestmark = pytest.mark.integration


async def seed(client, create_company, create_contact, create_application):
    company = await create_company("Cyberdyne")
    contact = await create_contact(company_id=company["id"], name="Miles Dyson")
    application = await create_application(
        company_id=company["id"],
        position_title="Research Engineer",
        status="APPLIED",
        salary_min=140000,
        salary_max=180000,
        is_referred=True,
        referred_by_id=contact["id"],
    )
    await client.post(
        "/api/v1/interviews",
        json={
            "application_id": application["id"],
            "round": 1,
            "title": "Screen",
            "interview_date": "2030-01-10T15:00:00Z",
        },
    )
    await client.post(
        "/api/v1/events",
        json={"title": "Prep", "scheduled_date": "2030-01-09T15:00:00Z", "application_id": application["id"]},
    )
    await client.post(
        "/api/v1/reminders",
        json={"application_id": application["id"], "title": "Follow up", "due_date": "2030-01-20T09:00:00Z"},
    )
    await client.post(
        "/api/v1/email-templates",
        json={"name": "Thanks", "subject": "Thank you", "body": "Hi {name}", "category": "THANK_YOU"},
    )
    return company, contact, application


async def test_export_bundle(client, create_company, create_contact, create_application):
    company, contact, application = await seed(client, create_company, create_contact, create_application)

    response = await client.get("/api/v1/data/export")

    assert response.status_code == 200
    bundle = response.json()
    assert bundle["version"] == "1.0.0"
    assert bundle["export_date"]
    data = bundle["data"]
    assert [c["id"] for c in data["companies"]] == [company["id"]]
    assert data["contacts"][0]["name"] == "Miles Dyson"
    assert data["applications"][0]["referred_by_id"] == contact["id"]
    for name in ("interviews", "events", "reminders", "email_templates"):
        assert len(data[name]) == 1


async def test_import_skips_existing_records(client, create_company, create_contact, create_application):
    await seed(client, create_company, create_contact, create_application)
    bundle = (await client.get("/api/v1/data/export")).json()

    response = await client.post("/api/v1/data/import", json=bundle)

    assert response.status_code == 200
    results = response.json()["results"]
    assert results["companies"] == {"created": 0, "skipped": 1}
    assert results["applications"] == {"created": 0, "skipped": 1}


async def test_import_into_empty_tracker(client, create_company, create_contact, create_application):
    company, _, application = await seed(client, create_company, create_contact, create_application)
    bundle = (await client.get("/api/v1/data/export")).json()
    await client.delete(f"/api/v1/companies/{company['id']}")
    await client.delete(f"/api/v1/events/{bundle['data']['events'][0]['id']}")
    email_template_id = bundle["data"]["email_templates"][0]["id"]
    await client.delete(f"/api/v1/email-templates/{email_template_id}")

    response = await client.post("/api/v1/data/import", json=bundle)

    assert response.status_code == 200
    results = response.json()["results"]
    for name in ("companies", "contacts", "applications", "interviews", "events", "reminders", "email_templates"):
        assert results[name] == {"created": 1, "skipped": 0}

    restored = (await client.get(f"/api/v1/applications/{application['id']}")).json()
    assert restored["company"]["name"] == "Cyberdyne"
    assert restored["referred_by"]["name"] == "Miles Dyson"
    assert len(restored["interviews"]) == 1


async def test_import_rejects_invalid_bundle(client):
    missing_version = await client.post("/api/v1/data/import", json={"data": {}})
    assert missing_version.status_code == 400

    bad_record = await client.post(
        "/api/v1/data/import",
        json={
            "version": "1.0.0",
            "export_date": "2024-01-01T00:00:00Z",
            "data": {"companies": [{"name": "No id"}]},
        },
    )
    assert bad_record.status_code == 400
    assert "id" in bad_record.json()["detail"]


async def test_applications_csv(client, create_company, create_contact, create_application):
    await seed(client, create_company, create_contact, create_application)

    response = await client.get("/api/v1/data/export/applications.csv")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "attachment" in response.headers["content-disposition"]
    assert response.text.startswith('"Company","Position","Status"')

    rows = list(csv.reader(io.StringIO(response.text)))
    assert rows[1][:3] == ["Cyberdyne", "Research Engineer", "APPLIED"]
    assert rows[1][4:] == ["140000", "180000", "USD", "Yes"]


@pytest.mark.parametrize(
    ("collection", "record", "column"),
    [
        ("applications", {"position_title": "Engineer", "status": "BOGUS"}, "status"),
        ("events", {"title": "Call", "scheduled_date": "2030-01-09T15:00:00Z", "type": "PARTY"}, "type"),
        ("contacts", {"name": "Sam", "status": "FRIENDS"}, "status"),
        ("email_templates", {"name": "Hi", "subject": "s", "body": "b", "category": "SPAM"}, "category"),
    ],
)
async def test_import_rejects_unknown_enum_values(client, collection, record, column):
    company_id = "11111111-1111-1111-1111-111111111111"
    if collection in ("applications", "contacts"):
        record = {**record, "company_id": company_id}
    bundle = {
        "version": "1.0.0",
        "export_date": "2024-01-01T00:00:00Z",
        "data": {
            "companies": [{"id": company_id, "name": "Initech"}],
            collection: [{"id": "22222222-2222-2222-2222-222222222222", **record}],
        },
    }

    response = await client.post("/api/v1/data/import", json=bundle)

    assert response.status_code == 400
    assert f".{column}" in response.json()["detail"]
    assert (await client.get("/api/v1/companies")).json() == []
    listed = await client.get(f"/api/v1/{collection.replace('_', '-')}")
    assert listed.status_code == 200
    assert listed.json() == []
