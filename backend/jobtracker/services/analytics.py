"""Application analytics computed in memory from full table scans.

The inputs are ORM rows (or anything with the same attributes): applications
with ``company`` and ``interviews`` loaded, and contacts.
"""

from collections import Counter
from datetime import datetime, timezone
from typing import Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobtracker.models.application import Application
from jobtracker.models.contact import Contact
from jobtracker.models.enums import ApplicationStatus, OFFER_STATUSES
from jobtracker.schemas.analytics import AnalyticsResponse, CompanyCount, Overview, SuccessRates

TOP_COMPANY_LIMIT = 10

# Statuses whose latest interview date marks the employer's response
RESPONDED_STATUSES = (
    ApplicationStatus.INTERVIEW_SCHEDULED.value,
    ApplicationStatus.OFFER_RECEIVED.value,
)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes (SQLite drops the offset on read)."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _percent(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return round(part / whole * 100, 1)


def _response_days(application) -> int | None:
    """Whole days between applying and the latest interview, if any."""
    if not application.applied_date or not application.interviews:
        return None
    latest = max(ensure_utc(i.interview_date) for i in application.interviews)
    return (latest - ensure_utc(application.applied_date)).days


def applications_per_month(applications: Iterable) -> dict[str, int]:
    """Count applied applications per calendar month, oldest month first."""
    counts: Counter[tuple[int, int]] = Counter()
    for app in applications:
        applied = ensure_utc(app.applied_date)
        if applied:
            counts[(applied.year, applied.month)] += 1
    return {
        datetime(year, month, 1).strftime("%b %Y"): counts[(year, month)]
        for year, month in sorted(counts)
    }


def compute_analytics(applications: Sequence, contacts: Sequence) -> AnalyticsResponse:
    statuses = Counter(app.status for app in applications)

    overview = Overview(
        total_applications=len(applications),
        applied_count=len(applications) - statuses[ApplicationStatus.NOT_APPLIED.value],
        interview_count=statuses[ApplicationStatus.INTERVIEW_SCHEDULED.value],
        offer_count=statuses[ApplicationStatus.OFFER_RECEIVED.value],
        rejected_count=statuses[ApplicationStatus.REJECTED.value],
        accepted_count=statuses[ApplicationStatus.ACCEPTED.value],
    )

    referred = [app for app in applications if app.is_referred]
    not_referred = [app for app in applications if not app.is_referred]
    success_rates = SuccessRates(
        referral=_percent(sum(1 for app in referred if app.status in OFFER_STATUSES), len(referred)),
        non_referral=_percent(
            sum(1 for app in not_referred if app.status in OFFER_STATUSES), len(not_referred)
        ),
    )

    response_times = [
        days
        for app in applications
        if app.status in RESPONDED_STATUSES
        and (days := _response_days(app)) is not None
    ]
    avg_response_time = (
        round(sum(response_times) / len(response_times), 1) if response_times else 0.0
    )

    company_counts = Counter(app.company.name for app in applications if app.company)
    top_companies = [
        CompanyCount(name=name, count=count)
        for name, count in company_counts.most_common(TOP_COMPANY_LIMIT)
    ]

    return AnalyticsResponse(
        overview=overview,
        status_counts=dict(statuses),
        success_rates=success_rates,
        avg_response_time=avg_response_time,
        applications_per_month=applications_per_month(applications),
        top_companies=top_companies,
        referrable_contacts=sum(1 for c in contacts if c.can_refer and c.willing_to_refer),
        total_contacts=len(contacts),
    )


async def load_tracker_data(db: AsyncSession) -> tuple[list[Application], list[Contact]]:
    """Full scan of applications (with company and interviews) and contacts."""
    app_result = await db.execute(
        select(Application)
        .options(selectinload(Application.interviews))
        .order_by(Application.created_at)
    )
    contact_result = await db.execute(select(Contact).order_by(Contact.created_at))
    return list(app_result.scalars().all()), list(contact_result.scalars().all())
