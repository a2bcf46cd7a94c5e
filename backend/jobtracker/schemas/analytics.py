"""Pydantic schemas for analytics, achievements, insights and data transfer."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


class Overview(BaseModel):
    total_applications: int = 0
    applied_count: int = 0
    interview_count: int = 0
    offer_count: int = 0
    rejected_count: int = 0
    accepted_count: int = 0


class SuccessRates(BaseModel):
    """Percent of applications reaching an offer, split by referral."""

    referral: float = 0.0
    non_referral: float = 0.0


class CompanyCount(BaseModel):
    name: str
    count: int


class AnalyticsResponse(BaseModel):
    """Aggregates derived from a full scan of applications and contacts."""

    overview: Overview
    status_counts: dict[str, int] = {}
    success_rates: SuccessRates
    avg_response_time: float = 0.0
    applications_per_month: dict[str, int] = {}
    top_companies: list[CompanyCount] = []
    referrable_contacts: int = 0
    total_contacts: int = 0


Rarity = Literal["common", "rare", "epic", "legendary"]


class Achievement(BaseModel):
    id: str
    title: str
    description: str
    unlocked: bool
    progress: int
    max_progress: int
    rarity: Rarity


class AchievementsResponse(BaseModel):
    unlocked_count: int
    total_count: int
    achievements: list[Achievement]


class InsightAction(BaseModel):
    label: str
    href: str


class Insight(BaseModel):
    id: str
    type: Literal["success", "warning", "tip", "achievement"]
    title: str
    description: str
    action: InsightAction | None = None


# --- Data transfer ---

class ExportData(BaseModel):
    """Rows of each collection, keyed by collection name."""

    companies: list[dict[str, Any]] = []
    contacts: list[dict[str, Any]] = []
    applications: list[dict[str, Any]] = []
    interviews: list[dict[str, Any]] = []
    events: list[dict[str, Any]] = []
    reminders: list[dict[str, Any]] = []
    email_templates: list[dict[str, Any]] = []


class ExportBundle(BaseModel):
    """JSON backup of the tracker's data."""

    version: str = Field(min_length=1)
    export_date: datetime
    data: ExportData


class ImportCounts(BaseModel):
    created: int = 0
    skipped: int = 0


class ImportResult(BaseModel):
    success: bool = True
    results: dict[str, ImportCounts]
