"""Unit tests for rule-based job search insights."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from jobtracker.services.insights import generate_insights

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def make_app(status="APPLIED", days_ago=30, company="Acme", referred=False):
    applied = NOW - timedelta(days=days_ago) if status != "NOT_APPLIED" else None
    return SimpleNamespace(
        status=status,
        applied_date=applied,
        created_at=NOW - timedelta(days=days_ago),
        company=SimpleNamespace(name=company),
        is_referred=referred,
    )


def ids(insights):
    return [i.id for i in insights]


@pytest.mark.unit
def test_no_insights_without_data():
    assert generate_insights([], [], now=NOW) == []


@pytest.mark.unit
def test_high_activity_this_week():
    apps = [make_app(days_ago=d) for d in range(5)]

    insights = generate_insights(apps, [], now=NOW)

    assert insights[0].id == "high-activity"
    assert insights[0].type == "success"
    assert "5 positions" in insights[0].description


@pytest.mark.unit
def test_low_activity_when_nothing_recent():
    insights = generate_insights([make_app(days_ago=9)], [], now=NOW)

    assert insights[0].id == "low-activity"
    assert insights[0].action.href == "/companies"


@pytest.mark.unit
def test_follow_up_names_oldest_pending_company():
    apps = [make_app(days_ago=20, company="Initech"), make_app(days_ago=40, company="Globex")]

    follow_up = next(i for i in generate_insights(apps, [], now=NOW) if i.id == "follow-up")

    assert "Globex" in follow_up.description
    assert "40 days" in follow_up.description


@pytest.mark.unit
def test_no_follow_up_for_recent_applications():
    apps = [make_app(days_ago=10)]

    assert "follow-up" not in ids(generate_insights(apps, [], now=NOW))


@pytest.mark.unit
def test_low_conversion_needs_ten_applications():
    nine = [make_app(status="REJECTED") for _ in range(9)]
    ten = nine + [make_app(status="REJECTED")]

    assert "low-conversion" not in ids(generate_insights(nine, [], now=NOW))
    assert "low-conversion" in ids(generate_insights(ten, [], now=NOW))


@pytest.mark.unit
def test_use_network_with_many_contacts_and_few_referrals():
    contacts = [SimpleNamespace() for _ in range(6)]
    apps = [make_app(status="IN_REVIEW")]

    assert "use-network" in ids(generate_insights(apps, contacts, now=NOW))


@pytest.mark.unit
def test_first_offer_and_scheduled_interviews():
    apps = [
        make_app(status="OFFER_RECEIVED", days_ago=2),
        make_app(status="INTERVIEW_SCHEDULED", days_ago=3),
        make_app(status="INTERVIEW_SCHEDULED", days_ago=3),
    ]

    insights = generate_insights(apps, [], now=NOW)
    prep = next(i for i in insights if i.id == "prep-interviews")

    assert prep.title == "2 Interviews Scheduled!"
    assert "first-offer" in ids(insights)


@pytest.mark.unit
def test_results_are_capped():
    # low-activity, low-conversion, use-network, follow-up and milestone-10 all apply
    apps = [make_app(status="APPLIED", days_ago=30) for _ in range(10)]
    contacts = [SimpleNamespace() for _ in range(6)]

    full = generate_insights(apps, contacts, now=NOW)
    compact = generate_insights(apps, contacts, compact=True, now=NOW)

    assert len(full) == 4
    assert ids(compact) == ids(full)[:2]
