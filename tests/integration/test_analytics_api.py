"""Integration tests for analytics, achievements and insights endpoints."""

import pytest

from jobtracker.models.enums import ApplicationStatus

pytestmark = pytest.mark.integration


async def test_empty_analytics(client):
    response = await client.get("/api/v1/analytics")

    assert response.status_code == 200
    body = response.json()
    assert body["overview"]["total_applications"] == 0
    assert body["success_rates"] == {"referral": 0.0, "non_referral": 0.0}
    assert body["avg_response_time"] == 0.0


async def test_applied_plus_not_applied_equals_total(client, create_company, create_application):
    company = await create_company("Wayne Enterprises")
    for status in ApplicationStatus:
        await create_application(company_id=company["id"], status=status.value)
    await create_application(company_id=company["id"], status="NOT_APPLIED")

    body = (await client.get("/api/v1/analytics")).json()
    overview = body["overview"]

    assert overview["applied_count"] + body["status_counts"]["NOT_APPLIED"] == overview["total_applications"]
    assert overview["total_applications"] == len(ApplicationStatus) + 1
    assert body["top_companies"] == [{"name": "Wayne Enterprises", "count": len(ApplicationStatus) + 1}]


async def test_response_time_and_referral_rates(client, create_company, create_contact, create_application):
    company = await create_company()
    contact = await create_contact(company_id=company["id"], can_refer=True, willing_to_refer=True)
    application = await create_application(
        company_id=company["id"],
        status="INTERVIEW_SCHEDULED",
        applied_date="2024-03-01T00:00:00Z",
        is_referred=True,
        referred_by_id=contact["id"],
    )
    await client.post(
        "/api/v1/interviews",
        json={
            "application_id": application["id"],
            "round": 1,
            "title": "Screen",
            "interview_date": "2024-03-11T12:00:00Z",
        },
    )
    await create_application(company_id=company["id"], status="OFFER_RECEIVED")

    body = (await client.get("/api/v1/analytics")).json()

    assert body["avg_response_time"] == 10.0
    assert body["success_rates"] == {"referral": 0.0, "non_referral": 100.0}
    assert body["referrable_contacts"] == 1
    assert body["applications_per_month"]["Mar 2024"] == 1


async def test_achievements_endpoint(client, create_application):
    await create_application(status="APPLIED")

    body = (await client.get("/api/v1/analytics/achievements")).json()

    assert body["total_count"] == 12
    unlocked = [a["id"] for a in body["achievements"] if a["unlocked"]]
    assert unlocked == ["first-step"]
    assert body["unlocked_count"] == 1


async def test_insights_endpoint(client, create_application):
    await create_application(status="INTERVIEW_SCHEDULED")
    await create_application(status="OFFER_RECEIVED")

    insights = (await client.get("/api/v1/analytics/insights")).json()
    ids = [i["id"] for i in insights]
    assert "prep-interviews" in ids
    assert "first-offer" in ids

    compact = (await client.get("/api/v1/analytics/insights", params={"compact": True})).json()
    assert len(compact) <= 2
