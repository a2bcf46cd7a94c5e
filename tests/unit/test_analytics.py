"""
Unit tests for in-memory application analytics.
Inputs are plain objects carrying the same attributes as the ORM rows.
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from jobtracker.services.analytics import (
    applications_per_month,
    compute_analytics,
    ensure_utc,
)


def make_app(status="APPLIED", applied=None, company="Acme", referred=False, interviews=()):
    return SimpleNamespace(
        status=status,
        applied_date=applied,
        created_at=applied or datetime(2024, 1, 1, tzinfo=timezone.utc),
        company=SimpleNamespace(name=company) if company else None,
        is_referred=referred,
        interviews=[SimpleNamespace(interview_date=d) for d in interviews],
    )


def make_contact(can_refer=False, willing=False):
    return SimpleNamespace(can_refer=can_refer, willing_to_refer=willing)


@pytest.mark.unit
def test_empty_tracker():
    """No data gives zero counts and no division errors."""
    result = compute_analytics([], [])

    assert result.overview.total_applications == 0
    assert result.overview.applied_count == 0
    assert result.success_rates.referral == 0.0
    assert result.success_rates.non_referral == 0.0
    assert result.avg_response_time == 0.0
    assert result.applications_per_month == {}
    assert result.top_companies == []


@pytest.mark.unit
def test_applied_count_excludes_not_applied():
    apps = [
        make_app("NOT_APPLIED"),
        make_app("NOT_APPLIED"),
        make_app("APPLIED"),
        make_app("REJECTED"),
        make_app("OFFER_RECEIVED"),
    ]

    overview = compute_analytics(apps, []).overview

    assert overview.total_applications == 5
    assert overview.applied_count == 3
    assert overview.applied_count + 2 == overview.total_applications
    assert overview.offer_count == 1
    assert overview.rejected_count == 1


@pytest.mark.unit
def test_status_counts_only_include_present_statuses():
    apps = [make_app("APPLIED"), make_app("APPLIED"), make_app("IN_REVIEW")]

    assert compute_analytics(apps, []).status_counts == {"APPLIED": 2, "IN_REVIEW": 1}


@pytest.mark.unit
def test_success_rates_split_by_referral():
    apps = [
        make_app("OFFER_RECEIVED", referred=True),
        make_app("REJECTED", referred=True),
        make_app("ACCEPTED", referred=False),
        make_app("APPLIED", referred=False),
        make_app("APPLIED", referred=False),
    ]

    rates = compute_analytics(apps, []).success_rates

    assert rates.referral == 50.0
    assert rates.non_referral == 33.3


@pytest.mark.unit
def test_average_response_time_uses_latest_interview():
    applied = datetime(2024, 3, 1, tzinfo=timezone.utc)
    apps = [
        make_app(
            "INTERVIEW_SCHEDULED",
            applied=applied,
            interviews=[datetime(2024, 3, 5, tzinfo=timezone.utc), datetime(2024, 3, 11, tzinfo=timezone.utc)],
        ),
        make_app(
            "OFFER_RECEIVED",
            applied=applied,
            interviews=[datetime(2024, 3, 6, tzinfo=timezone.utc)],
        ),
        # Not a responded status, ignored
        make_app("REJECTED", applied=applied, interviews=[datetime(2024, 4, 1, tzinfo=timezone.utc)]),
    ]

    assert compute_analytics(apps, []).avg_response_time == 7.5


@pytest.mark.unit
def test_applications_per_month_is_chronological():
    apps = [
        make_app(applied=datetime(2024, 2, 10, tzinfo=timezone.utc)),
        make_app(applied=datetime(2023, 12, 1, tzinfo=timezone.utc)),
        make_app(applied=datetime(2024, 2, 20, tzinfo=timezone.utc)),
        make_app(applied=None),
    ]

    per_month = applications_per_month(apps)

    assert list(per_month) == ["Dec 2023", "Feb 2024"]
    assert per_month["Feb 2024"] == 2


@pytest.mark.unit
def test_top_companies_limited_to_ten():
    apps = [make_app(company=f"Company {i}") for i in range(12)]
    apps += [make_app(company="Company 5")] * 3

    top = compute_analytics(apps, []).top_companies

    assert len(top) == 10
    assert top[0].name == "Company 5"
    assert top[0].count == 4


@pytest.mark.unit
def test_referrable_contacts_need_both_flags():
    contacts = [make_contact(True, True), make_contact(True, False), make_contact(False, True)]

    result = compute_analytics([], contacts)

    assert result.referrable_contacts == 1
    assert result.total_contacts == 3


@pytest.mark.unit
def test_ensure_utc_handles_naive_values():
    naive = datetime(2024, 5, 1, 12, 0)

    assert ensure_utc(naive).tzinfo == timezone.utc
    assert ensure_utc(None) is None
