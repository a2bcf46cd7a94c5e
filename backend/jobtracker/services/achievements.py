"""Achievement badges unlocked by application and networking milestones."""

from dataclasses import dataclass
from typing import Sequence

from jobtracker.models.enums import ApplicationStatus, INTERVIEW_STAGE_STATUSES, OFFER_STATUSES
from jobtracker.schemas.analytics import Achievement, AchievementsResponse


@dataclass(frozen=True)
class AchievementRule:
    id: str
    title: str
    description: str
    metric: str  # key into the counts computed by achievement_counts()
    threshold: int
    rarity: str


ACHIEVEMENT_RULES: tuple[AchievementRule, ...] = (
    AchievementRule("first-step", "First Step", "Submit your first job application", "applied", 1, "common"),
    AchievementRule("getting-started", "Getting Started", "Apply to 5 positions", "applied", 5, "common"),
    AchievementRule("job-hunter", "Job Hunter", "Apply to 10 positions", "applied", 10, "common"),
    AchievementRule("persistent", "Persistent", "Apply to 25 positions", "applied", 25, "rare"),
    AchievementRule("unstoppable", "Unstoppable", "Apply to 50 positions", "applied", 50, "epic"),
    AchievementRule("job-search-legend", "Job Search Legend", "Apply to 100 positions", "applied", 100, "legendary"),
    AchievementRule("networker", "Networker", "Add 10 professional contacts", "contacts", 10, "rare"),
    AchievementRule("referral-master", "Referral Master", "Get 5 referrals", "referrals", 5, "rare"),
    AchievementRule("interview-ready", "Interview Ready", "Secure your first interview", "interviews", 1, "rare"),
    AchievementRule("interview-pro", "Interview Pro", "Get 5 interview invitations", "interviews", 5, "epic"),
    AchievementRule("offer-received", "Offer Received", "Receive your first job offer", "offers", 1, "epic"),
    AchievementRule("multiple-offers", "In Demand", "Receive 3 job offers", "offers", 3, "legendary"),
)


def achievement_counts(applications: Sequence, contacts: Sequence) -> dict[str, int]:
    return {
        "applied": sum(1 for a in applications if a.status != ApplicationStatus.NOT_APPLIED.value),
        "interviews": sum(1 for a in applications if a.status in INTERVIEW_STAGE_STATUSES),
        "offers": sum(1 for a in applications if a.status in OFFER_STATUSES),
        "referrals": sum(1 for a in applications if a.is_referred),
        "contacts": len(contacts),
    }


def compute_achievements(applications: Sequence, contacts: Sequence) -> AchievementsResponse:
    counts = achievement_counts(applications, contacts)
    achievements = [
        Achievement(
            id=rule.id,
            title=rule.title,
            description=rule.description,
            unlocked=counts[rule.metric] >= rule.threshold,
            progress=min(counts[rule.metric], rule.threshold),
            max_progress=rule.threshold,
            rarity=rule.rarity,
        )
        for rule in ACHIEVEMENT_RULES
    ]
    return AchievementsResponse(
        unlocked_count=sum(1 for a in achievements if a.unlocked),
        total_count=len(achievements),
        achievements=achievements,
    )
