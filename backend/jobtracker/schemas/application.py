"""Pydantic schemas for Application model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from jobtracker.models.enums import ApplicationStatus
from jobtracker.schemas.common import PartialUpdate, UTCDateTime

if TYPE_CHECKING:
    from jobtracker.schemas.company import CompanySummary
    from jobtracker.schemas.contact import ContactSummary
    from jobtracker.schemas.interview import InterviewSummary
    from jobtracker.schemas.reminder import ReminderSummary


class ApplicationBase(BaseModel):
    """Base fields for application."""

    model_config = ConfigDict(use_enum_values=True)

    position_title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    job_posting_url: str | None = None
    status: ApplicationStatus = ApplicationStatus.NOT_APPLIED
    application_deadline: UTCDateTime | None = None
    salary_min: int | None = Field(None, ge=0)
    salary_max: int | None = Field(None, ge=0)
    salary_currency: str = Field("USD", min_length=3, max_length=3)
    resume_path: str | None = None
    cover_letter_path: str | None = None
    is_referred: bool = False
    referred_by_id: UUID | None = None
    notes: str | None = None


class ApplicationCreate(ApplicationBase):
    """Fields for creating an application."""

    company_id: UUID
    applied_date: UTCDateTime | None = None


class ApplicationUpdate(PartialUpdate):
    """Fields for updating an application (all optional)."""

    required_fields = ("company_id", "position_title", "status", "salary_currency", "is_referred")

    company_id: UUID | None = None
    position_title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    job_posting_url: str | None = None
    status: ApplicationStatus | None = None
    applied_date: UTCDateTime | None = None
    application_deadline: UTCDateTime | None = None
    salary_min: int | None = Field(None, ge=0)
    salary_max: int | None = Field(None, ge=0)
    salary_currency: str | None = Field(None, min_length=3, max_length=3)
    resume_path: str | None = None
    cover_letter_path: str | None = None
    is_referred: bool | None = None
    referred_by_id: UUID | None = None
    notes: str | None = None


class ApplicationRead(ApplicationBase):
    """Full application output."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: UUID
    company_id: UUID
    applied_date: datetime | None = None
    created_at: datetime
    updated_at: datetime


class ApplicationSummary(BaseModel):
    """Minimal application info for nested responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    company_id: UUID
    position_title: str
    status: str
    applied_date: datetime | None = None
    is_referred: bool = False
    created_at: datetime


class ApplicationBrief(ApplicationSummary):
    """Application summary with its company, for embedding in other entities."""

    company: "CompanySummary | None" = None


class ApplicationWithCompany(ApplicationRead):
    """Application with embedded company and referring contact."""

    company: "CompanySummary | None" = None
    referred_by: "ContactSummary | None" = None


class ApplicationListItem(ApplicationWithCompany):
    """Application row for list views."""

    interviews: list["InterviewSummary"] = []
    interview_count: int = 0
    reminder_count: int = 0


class ApplicationDetail(ApplicationWithCompany):
    """Application with its interviews and open reminders."""

    interviews: list["InterviewSummary"] = []
    reminders: list["ReminderSummary"] = []
