"""Pydantic schemas for Interview model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from jobtracker.models.enums import InterviewStatus
from jobtracker.schemas.common import PartialUpdate, UTCDateTime

if TYPE_CHECKING:
    from jobtracker.schemas.application import ApplicationBrief


class InterviewBase(BaseModel):
    """Base fields for interview."""

    model_config = ConfigDict(use_enum_values=True)

    round: int = Field(ge=1)
    title: str = Field(min_length=1, max_length=255)
    duration: int | None = Field(None, ge=0)
    interviewers: str | None = None
    location: str | None = None
    meeting_link: str | None = None
    status: InterviewStatus = InterviewStatus.SCHEDULED
    feedback: str | None = None
    notes: str | None = None


class InterviewCreate(InterviewBase):
    """Fields for creating an interview."""

    application_id: UUID
    interview_date: UTCDateTime


class InterviewUpdate(PartialUpdate):
    """Fields for updating an interview (all optional)."""

    required_fields = ("round", "title", "interview_date", "status")

    round: int | None = Field(None, ge=1)
    title: str | None = Field(None, min_length=1, max_length=255)
    interview_date: UTCDateTime | None = None
    duration: int | None = Field(None, ge=0)
    interviewers: str | None = None
    location: str | None = None
    meeting_link: str | None = None
    status: InterviewStatus | None = None
    feedback: str | None = None
    notes: str | None = None


class InterviewSummary(BaseModel):
    """Interview info for nesting under an application."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    round: int
    title: str
    interview_date: datetime
    status: str
    location: str | None = None


class InterviewRead(InterviewBase):
    """Full interview output with its application."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: UUID
    application_id: UUID
    interview_date: datetime
    created_at: datetime
    updated_at: datetime
    application: "ApplicationBrief | None" = None
