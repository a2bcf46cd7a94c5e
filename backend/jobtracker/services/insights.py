"""Rule-based job search tips derived from applications and contacts."""

from datetime import datetime, timedelta, timezone
from typing import Sequence

from jobtracker.models.enums import ApplicationStatus, INTERVIEW_STAGE_STATUSES, OFFER_STATUSES
from jobtracker.schemas.analytics import Insight, InsightAction
from jobtracker.services.analytics import ensure_utc

MAX_INSIGHTS = 4
MAX_INSIGHTS_COMPACT = 2

RECENT_WINDOW = timedelta(days=7)
HIGH_ACTIVITY_THRESHOLD = 5
CONVERSION_MIN_APPLIED = 10
FOLLOW_UP_AFTER_DAYS = 14
MILESTONES = (10, 50)


def _activity_insight(applications: Sequence, now: datetime) -> Insight | None:
    recent = [
        app for app in applications
        if now - ensure_utc(app.applied_date or app.created_at) <= RECENT_WINDOW
    ]
    if len(recent) >= HIGH_ACTIVITY_THRESHOLD:
        return Insight(
            id="high-activity",
            type="success",
            title="Strong Application Activity!",
            description=f"You've applied to {len(recent)} positions this week. Keep up the momentum!",
        )
    if not recent and applications:
        return Insight(
            id="low-activity",
            type="warning",
            title="No Recent Applications",
            description="You haven't applied to any positions this week. "
                        "Set a goal to apply to at least 3 jobs!",
            action=InsightAction(label="Browse Companies", href="/companies"),
        )
    return None


def _conversion_insight(applied: int, interviews: int) -> Insight | None:
    if applied < CONVERSION_MIN_APPLIED:
        return None
    rate = interviews / applied * 100
    if rate > 20:
        return Insight(
            id="high-conversion",
            type="achievement",
            title="Excellent Interview Rate!",
            description=f"Your {rate:.0f}% interview rate is well above average. "
                        "Your applications are getting noticed!",
        )
    if rate < 5:
        return Insight(
            id="low-conversion",
            type="tip",
            title="Improve Your Application Quality",
            description="Try tailoring each resume and cover letter to the specific role. "
                        "Personalized applications get far more responses.",
            action=InsightAction(label="View Resume Tips", href="/resumes"),
        )
    return None


def _follow_up_insight(applications: Sequence, now: datetime) -> Insight | None:
    pending = [
        app for app in applications
        if app.status == ApplicationStatus.APPLIED.value and app.applied_date
    ]
    if not pending:
        return None
    oldest = min(pending, key=lambda app: ensure_utc(app.applied_date))
    days = (now - ensure_utc(oldest.applied_date)).days
    if days <= FOLLOW_UP_AFTER_DAYS:
        return None
    company = oldest.company.name if oldest.company else "a company"
    return Insight(
        id="follow-up",
        type="tip",
        title="Time to Follow Up?",
        description=f"Your application to {company} is {days} days old. "
                    "Consider sending a polite follow-up email.",
        action=InsightAction(label="View Application", href="/applications"),
    )


def generate_insights(
    applications: Sequence,
    contacts: Sequence,
    compact: bool = False,
    now: datetime | None = None,
) -> list[Insight]:
    """Return the most relevant tips, in rule order, capped for the widget size."""
    now = now or datetime.now(timezone.utc)
    insights: list[Insight] = []

    applied = sum(1 for a in applications if a.status != ApplicationStatus.NOT_APPLIED.value)
    interviews = sum(1 for a in applications if a.status in INTERVIEW_STAGE_STATUSES)

    for insight in (
        _activity_insight(applications, now),
        _conversion_insight(applied, interviews),
    ):
        if insight:
            insights.append(insight)

    referrals = sum(1 for a in applications if a.is_referred)
    referral_rate = referrals / applied * 100 if applied else 0
    if referral_rate < 20 and len(contacts) > 5:
        insights.append(Insight(
            id="use-network",
            type="tip",
            title="Leverage Your Network",
            description=f"You have {len(contacts)} contacts but only {referral_rate:.0f}% of "
                        "applications use referrals. Reach out to your network!",
            action=InsightAction(label="View Contacts", href="/contacts"),
        ))

    follow_up = _follow_up_insight(applications, now)
    if follow_up:
        insights.append(follow_up)

    scheduled = sum(
        1 for a in applications if a.status == ApplicationStatus.INTERVIEW_SCHEDULED.value
    )
    if scheduled:
        plural = "s" if scheduled > 1 else ""
        insights.append(Insight(
            id="prep-interviews",
            type="success",
            title=f"{scheduled} Interview{plural} Scheduled!",
            description="Make sure to research the company, practice common questions "
                        "and prepare thoughtful questions to ask.",
            action=InsightAction(label="Prep Resources", href="/learning"),
        ))

    if len(applications) == MILESTONES[0]:
        insights.append(Insight(
            id="milestone-10",
            type="achievement",
            title="10 Applications Milestone!",
            description="Great job staying consistent with your job search. Keep building momentum!",
        ))
    elif len(applications) == MILESTONES[1]:
        insights.append(Insight(
            id="milestone-50",
            type="achievement",
            title="50 Applications - Incredible Effort!",
            description="Your persistence is admirable. Success is just around the corner!",
        ))

    if sum(1 for a in applications if a.status in OFFER_STATUSES) == 1:
        insights.append(Insight(
            id="first-offer",
            type="achievement",
            title="Your First Offer!",
            description="Congratulations on receiving your first job offer! "
                        "All your hard work is paying off.",
        ))

    return insights[:MAX_INSIGHTS_COMPACT if compact else MAX_INSIGHTS]
